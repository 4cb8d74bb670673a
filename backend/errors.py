"""Error taxonomy for the identity and project core.

Every error carries the human-readable message sent to clients, a stable code,
and the HTTP status used by the route layer. Messages never include internal
details.
"""


class CoreError(Exception):
    code = "CORE_ERROR"
    http_status = 500
    default_message = "Internal server error"

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_response(self):
        return {"success": False, "message": self.message, "code": self.code}


class ValidationError(CoreError):
    """Missing or malformed input."""
    code = "VALIDATION_ERROR"
    http_status = 400
    default_message = "Invalid request"


class DuplicateEmail(CoreError):
    code = "DUPLICATE_EMAIL"
    http_status = 409
    default_message = "Email already exists"


class AuthenticationFailure(CoreError):
    """Unknown user or wrong password; both report the same message."""
    code = "AUTHENTICATION_FAILED"
    http_status = 401
    default_message = "Invalid email or password"


class InvalidToken(CoreError):
    code = "INVALID_TOKEN"
    http_status = 401
    default_message = "Invalid or expired token"


class ActorNotFound(CoreError):
    code = "ACTOR_NOT_FOUND"
    http_status = 404
    default_message = "User not found!"


class OwnerNotFound(ActorNotFound):
    code = "OWNER_NOT_FOUND"


class ResourceNotFound(CoreError):
    code = "RESOURCE_NOT_FOUND"
    http_status = 404
    default_message = "Project not found!"


class NotOwner(CoreError):
    code = "NOT_OWNER"
    http_status = 403
    default_message = "You do not have access to this project"


class InternalFailure(CoreError):
    code = "INTERNAL_ERROR"
    http_status = 500
    default_message = "Internal server error"
