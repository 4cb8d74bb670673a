"""bcrypt password hashing: salted per call, verified without recovering the plaintext."""
import logging

import bcrypt

logger = logging.getLogger(__name__)

DEFAULT_ROUNDS = 10
# bcrypt only looks at the first 72 bytes; longer inputs are refused instead of truncated
MAX_PASSWORD_BYTES = 72


class PasswordHasher:
    def __init__(self, rounds: int = DEFAULT_ROUNDS):
        if not 4 <= rounds <= 31:
            raise ValueError(f"bcrypt rounds must be between 4 and 31, got {rounds}")
        self.rounds = rounds

    def hash(self, plaintext: str) -> str:
        raw = plaintext.encode("utf-8")
        if len(raw) > MAX_PASSWORD_BYTES:
            raise ValueError(f"password longer than {MAX_PASSWORD_BYTES} bytes")
        return bcrypt.hashpw(raw, bcrypt.gensalt(rounds=self.rounds)).decode("ascii")

    def verify(self, plaintext: str, hashed: str) -> bool:
        """True when plaintext matches hashed. Malformed input gives False, never an exception."""
        if not isinstance(plaintext, str) or not isinstance(hashed, str) or not hashed:
            return False
        raw = plaintext.encode("utf-8")
        if len(raw) > MAX_PASSWORD_BYTES:
            return False
        try:
            return bcrypt.checkpw(raw, hashed.encode("utf-8"))
        except (ValueError, TypeError) as e:
            logger.warning("Rejecting malformed password hash: %s", e)
            return False
