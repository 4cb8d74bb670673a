import uuid
from datetime import datetime, timezone
from extensions import db


def _new_id():
    return uuid.uuid4().hex


def _utcnow():
    return datetime.now(timezone.utc)


class User(db.Model):
    """Registered editor user. Email is stored lowercased and is unique."""
    __tablename__ = "users"

    id = db.Column(db.String(32), primary_key=True, default=_new_id)
    username = db.Column(db.String(128), nullable=False)
    name = db.Column(db.String(256), nullable=False)
    email = db.Column(db.String(320), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(128), nullable=False)
    created_at = db.Column(db.DateTime(timezone=True), default=_utcnow)

    projects = db.relationship("Project", backref="owner", lazy="dynamic", cascade="all, delete-orphan")

    def to_dict(self):
        # password_hash is deliberately left out
        return {
            "_id": self.id,
            "username": self.username,
            "name": self.name,
            "email": self.email,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }
