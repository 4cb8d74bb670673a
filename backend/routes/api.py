import logging
from flask import Blueprint, current_app, jsonify, request
from werkzeug.exceptions import HTTPException
from errors import CoreError, InternalFailure
from extensions import db

logger = logging.getLogger(__name__)
api_bp = Blueprint("api", __name__)

# older clients send the project id under these keys
PROJECT_ID_KEYS = ("projectId", "projId", "progId")


def editor():
    return current_app.extensions["code_ide"]


def get_body():
    body = request.get_json(silent=True)
    return body if isinstance(body, dict) else {}


def get_bearer_token():
    header = request.headers.get("Authorization", "")
    scheme, _, token = header.partition(" ")
    if scheme.lower() != "bearer":
        return None
    return token.strip() or None


def get_project_id(body):
    for key in PROJECT_ID_KEYS:
        value = body.get(key)
        if value:
            return value
    return None


@api_bp.app_errorhandler(CoreError)
def handle_core_error(err):
    db.session.rollback()
    return jsonify(err.to_response()), err.http_status


@api_bp.app_errorhandler(HTTPException)
def handle_http_error(err):
    return jsonify({"success": False, "message": err.description, "code": err.name}), err.code


@api_bp.app_errorhandler(Exception)
def handle_unexpected(err):
    db.session.rollback()
    logger.exception("Unhandled error on %s %s", request.method, request.path)
    failure = InternalFailure()
    return jsonify(failure.to_response()), failure.http_status


@api_bp.after_app_request
def log_request(response):
    logger.info("%s %s %s", request.method, request.path, response.status_code)
    return response


@api_bp.get("/health")
def health():
    return jsonify({"status": "ok"})


@api_bp.post("/signUp")
def sign_up():
    return jsonify(editor().register(get_body()))


@api_bp.post("/login")
def login():
    return jsonify(editor().authenticate(get_body()))


@api_bp.post("/getUserDetails")
def get_user_details():
    return jsonify(editor().fetch_user_detail(get_bearer_token()))


@api_bp.post("/createProject")
def create_project():
    return jsonify(editor().create_project(get_bearer_token(), get_body())), 201


@api_bp.post("/getProjects")
def get_projects():
    return jsonify(editor().list_projects(get_bearer_token()))


@api_bp.post("/getProject")
def get_project():
    body = get_body()
    return jsonify(editor().fetch_project(get_bearer_token(), get_project_id(body)))


@api_bp.post("/updateProject")
def update_project():
    body = get_body()
    return jsonify(editor().update_project(get_bearer_token(), get_project_id(body), body))


@api_bp.post("/deleteProject")
def delete_project():
    body = get_body()
    return jsonify(editor().delete_project(get_bearer_token(), get_project_id(body)))
