import os
from dotenv import load_dotenv

load_dotenv()


def _split_origins(value):
    return [o.strip() for o in value.split(",") if o.strip()]


class Config:
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "sqlite:///app.db")

    # Signing secret for session tokens. No fallback: create_app refuses to start without one.
    JWT_SECRET = os.getenv("JWT_SECRET") or os.getenv("SECRET_KEY") or ""
    JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
    JWT_EXPIRES_DAYS = int(os.getenv("JWT_EXPIRES_DAYS", "7"))

    BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "10"))

    # Browser editor front-end; comma separated for more than one
    CORS_ORIGINS = _split_origins(os.getenv("CORS_ORIGINS", "https://code-ide003.netlify.app"))

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
