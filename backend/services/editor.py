"""Sign-up, login and owner-scoped project operations for the code editor.

Each method returns the success payload sent to the client (`success`, `message`
and any data) or raises a CoreError subclass. Project operations derive the
acting user from a validated session token only; user ids supplied by the
client are never trusted.
"""
import logging

from errors import (
    ActorNotFound,
    AuthenticationFailure,
    InvalidToken,
    ResourceNotFound,
    ValidationError,
)
from services.authorization import AuthorizationGate, Operation
from services.credentials import CredentialStore
from services.passwords import MAX_PASSWORD_BYTES, PasswordHasher
from services.projects import CODE_FIELDS, ProjectStore
from services.tokens import TokenClaims, TokenService

logger = logging.getLogger(__name__)


def _text(payload, key):
    value = payload.get(key)
    if isinstance(value, str) and value.strip():
        return value
    return None


def _ok(message, **data):
    out = {"success": True, "message": message}
    out.update(data)
    return out


class EditorService:
    def __init__(
        self,
        credentials: CredentialStore,
        hasher: PasswordHasher,
        tokens: TokenService,
        projects: ProjectStore,
        gate: AuthorizationGate,
    ):
        self.credentials = credentials
        self.hasher = hasher
        self.tokens = tokens
        self.projects = projects
        self.gate = gate

    # ---- identity ----

    def register(self, payload: dict) -> dict:
        username = _text(payload, "username")
        name = _text(payload, "name")
        email = _text(payload, "email")
        password = payload.get("password")
        if not (username and name and email and isinstance(password, str) and password):
            raise ValidationError("All fields are required")
        if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValidationError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")

        user = self.credentials.create(
            username=username.strip(),
            name=name.strip(),
            email=email,
            password_hash=self.hasher.hash(password),
        )
        logger.info("Registered user %s", user.id)
        return _ok("User created successfully")

    def authenticate(self, payload: dict) -> dict:
        email = _text(payload, "email")
        password = payload.get("password")
        if not email or not isinstance(password, str) or not password:
            raise ValidationError("Email and password required")

        user = self.credentials.find_by_email(email)
        # unknown email and wrong password look the same to the caller
        if user is None or not self.hasher.verify(password, user.password_hash):
            logger.info("Failed login attempt")
            raise AuthenticationFailure()

        token = self.tokens.issue(user.id, user.email)
        return _ok(
            "User logged in successfully",
            token=token,
            userId=user.id,
            name=user.name,
            username=user.username,
            email=user.email,
        )

    def identify(self, token) -> TokenClaims:
        if not token:
            raise InvalidToken("Authentication required")
        return self.tokens.validate(token)

    def fetch_user_detail(self, token) -> dict:
        claims = self.identify(token)
        user = self.credentials.find_by_id(claims.user_id)
        if user is None:
            raise ActorNotFound()
        return _ok("User details fetched successfully", user=user.to_dict())

    # ---- projects ----

    def create_project(self, token, payload: dict) -> dict:
        claims = self.identify(token)
        self.gate.require(claims.user_id, Operation.CREATE)
        title = _text(payload, "title")
        if not title:
            raise ValidationError("Title is required")
        project = self.projects.create(title.strip(), claims.user_id)
        logger.info("User %s created project %s", claims.user_id, project.id)
        return _ok("Project created successfully", projectId=project.id)

    def list_projects(self, token) -> dict:
        claims = self.identify(token)
        self.gate.require(claims.user_id, Operation.LIST)
        projects = self.projects.list_by_owner(claims.user_id)
        return _ok("Projects fetched successfully", projects=[p.to_dict() for p in projects])

    def _owned_project(self, claims: TokenClaims, project_id, operation: Operation):
        project = self.projects.get_by_id(project_id)
        if project is None:
            # an unknown actor is reported before an unknown project
            if self.credentials.find_by_id(claims.user_id) is None:
                raise ActorNotFound()
            raise ResourceNotFound()
        self.gate.require(claims.user_id, operation, project)
        return project

    def fetch_project(self, token, project_id) -> dict:
        claims = self.identify(token)
        project = self._owned_project(claims, project_id, Operation.FETCH)
        return _ok("Project fetched successfully", project=project.to_dict())

    def update_project(self, token, project_id, payload: dict) -> dict:
        claims = self.identify(token)
        self._owned_project(claims, project_id, Operation.UPDATE)
        for key in CODE_FIELDS:
            value = payload.get(key)
            if value is not None and not isinstance(value, str):
                raise ValidationError(f"{key} must be a string")

        project = self.projects.update(project_id, payload, owner_id=claims.user_id)
        if project is None:
            # deleted or reassigned between the check and the write
            raise ResourceNotFound()
        return _ok("Project updated successfully")

    def delete_project(self, token, project_id) -> dict:
        claims = self.identify(token)
        self._owned_project(claims, project_id, Operation.DELETE)

        if self.projects.delete_by_id(project_id, owner_id=claims.user_id) is None:
            raise ResourceNotFound()
        logger.info("User %s deleted project %s", claims.user_id, project_id)
        return _ok("Project deleted successfully")
