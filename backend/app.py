import logging
from flask import Flask
from flask_cors import CORS
from config import Config
from extensions import db
from routes.api import api_bp
from services import build_editor_service

logger = logging.getLogger(__name__)

# RFC 7518 minimum key size for HS256
MIN_SECRET_BYTES = 32


def create_app(config_object=Config):
    app = Flask(__name__)
    app.config.from_object(config_object)

    logging.basicConfig(
        level=app.config.get("LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if not app.config.get("JWT_SECRET"):
        raise RuntimeError("JWT_SECRET (or SECRET_KEY) must be set to sign session tokens")
    if len(app.config["JWT_SECRET"].encode("utf-8")) < MIN_SECRET_BYTES:
        logger.warning("JWT_SECRET is shorter than %d bytes; use a longer random value", MIN_SECRET_BYTES)

    CORS(app, origins=app.config.get("CORS_ORIGINS"), supports_credentials=True)
    db.init_app(app)

    with app.app_context():
        try:
            db.create_all()
        except Exception as e:
            logger.exception("db.create_all failed: %s", e)
            raise

    # built once; the signing secret is not read again after this point
    app.extensions["code_ide"] = build_editor_service(app.config)
    app.register_blueprint(api_bp)
    return app


if __name__ == "__main__":
    create_app().run(debug=True)
