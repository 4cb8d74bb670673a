"""Signed session tokens (JWT, HS256 by default) asserting a user's id and email.

Tokens carry `userId`, `email`, `iat` and `exp`. There is no revocation list:
a token stays valid until `exp` and cannot be invalidated early.
"""
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

import jwt

from errors import InvalidToken

logger = logging.getLogger(__name__)

DEFAULT_TTL = timedelta(days=7)
REQUIRED_CLAIMS = ["userId", "email", "iat", "exp"]


@dataclass(frozen=True)
class TokenClaims:
    user_id: str
    email: str
    issued_at: datetime
    expires_at: datetime


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TokenService:
    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        ttl: timedelta = DEFAULT_TTL,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        if not secret:
            raise ValueError("token signing secret must not be empty")
        self._secret = secret
        self.algorithm = algorithm
        self.ttl = ttl
        self._clock = clock or _utcnow

    def issue(self, user_id: str, email: str) -> str:
        now = self._clock()
        payload = {
            "userId": str(user_id),
            "email": email,
            "iat": int(now.timestamp()),
            "exp": int((now + self.ttl).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=self.algorithm)

    def validate(self, token: str) -> TokenClaims:
        if not token or not isinstance(token, str):
            raise InvalidToken()
        try:
            # expiry is checked below against this service's own clock
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self.algorithm],
                options={"require": REQUIRED_CLAIMS, "verify_exp": False, "verify_iat": False},
            )
        except jwt.InvalidTokenError as e:
            logger.info("Rejected session token: %s", e)
            raise InvalidToken()

        user_id = payload.get("userId")
        email = payload.get("email")
        if not isinstance(user_id, str) or not user_id or not isinstance(email, str):
            raise InvalidToken()
        try:
            issued_at = datetime.fromtimestamp(int(payload["iat"]), tz=timezone.utc)
            expires_at = datetime.fromtimestamp(int(payload["exp"]), tz=timezone.utc)
        except (TypeError, ValueError, OverflowError, OSError):
            raise InvalidToken()
        if self._clock() >= expires_at:
            raise InvalidToken()
        return TokenClaims(user_id=user_id, email=email, issued_at=issued_at, expires_at=expires_at)
