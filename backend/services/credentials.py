"""User records keyed by id and by normalized (lowercased) email."""
import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError

from errors import DuplicateEmail
from extensions import db
from models import User

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    return email.strip().lower()


class CredentialStore:
    def find_by_email(self, email: str) -> Optional[User]:
        return User.query.filter_by(email=normalize_email(email)).first()

    def find_by_id(self, user_id: str) -> Optional[User]:
        if not user_id or not isinstance(user_id, str):
            return None
        return db.session.get(User, user_id)

    def create(self, username: str, name: str, email: str, password_hash: str) -> User:
        email = normalize_email(email)
        if self.find_by_email(email) is not None:
            raise DuplicateEmail()
        user = User(username=username, name=name, email=email, password_hash=password_hash)
        db.session.add(user)
        try:
            db.session.commit()
        except IntegrityError:
            # a concurrent sign-up committed the same email between the check and the insert
            db.session.rollback()
            logger.info("Duplicate email rejected by unique constraint")
            raise DuplicateEmail()
        return user
