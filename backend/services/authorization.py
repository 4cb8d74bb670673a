"""Authorization gate: may this actor perform this operation on this project?

Decisions depend only on the current store contents and the acting user id;
nothing is remembered between calls.
"""
import enum
from dataclasses import dataclass
from typing import Optional

from errors import ActorNotFound, NotOwner
from models import Project
from services.credentials import CredentialStore


class Operation(enum.Enum):
    CREATE = "create"
    LIST = "list"
    FETCH = "fetch"
    UPDATE = "update"
    DELETE = "delete"


# operations on a single existing project require ownership
OWNER_ONLY = frozenset({Operation.FETCH, Operation.UPDATE, Operation.DELETE})


class DenialReason(enum.Enum):
    ACTOR_NOT_FOUND = "actor_not_found"
    NOT_OWNER = "not_owner"


@dataclass(frozen=True)
class Decision:
    allowed: bool
    reason: Optional[DenialReason] = None


ALLOWED = Decision(allowed=True)


class AuthorizationGate:
    def __init__(self, credentials: CredentialStore):
        self.credentials = credentials

    def authorize(self, actor_id: str, operation: Operation, resource: Optional[Project] = None) -> Decision:
        if self.credentials.find_by_id(actor_id) is None:
            return Decision(allowed=False, reason=DenialReason.ACTOR_NOT_FOUND)
        if operation in OWNER_ONLY:
            if resource is None:
                raise ValueError(f"{operation.value} needs the target project")
            if resource.created_by != actor_id:
                return Decision(allowed=False, reason=DenialReason.NOT_OWNER)
        return ALLOWED

    def require(self, actor_id: str, operation: Operation, resource: Optional[Project] = None) -> None:
        decision = self.authorize(actor_id, operation, resource)
        if decision.allowed:
            return
        if decision.reason is DenialReason.ACTOR_NOT_FOUND:
            raise ActorNotFound()
        raise NotOwner()
