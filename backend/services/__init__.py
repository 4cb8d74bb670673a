from datetime import timedelta

from services.authorization import AuthorizationGate
from services.credentials import CredentialStore
from services.editor import EditorService
from services.passwords import PasswordHasher
from services.projects import ProjectStore
from services.tokens import TokenService


def build_editor_service(config) -> EditorService:
    """Wire the core components from a Flask config mapping. Called once per app."""
    credentials = CredentialStore()
    return EditorService(
        credentials=credentials,
        hasher=PasswordHasher(rounds=config["BCRYPT_ROUNDS"]),
        tokens=TokenService(
            secret=config["JWT_SECRET"],
            algorithm=config["JWT_ALGORITHM"],
            ttl=timedelta(days=config["JWT_EXPIRES_DAYS"]),
        ),
        projects=ProjectStore(),
        gate=AuthorizationGate(credentials),
    )


__all__ = [
    "AuthorizationGate",
    "CredentialStore",
    "EditorService",
    "PasswordHasher",
    "ProjectStore",
    "TokenService",
    "build_editor_service",
]
