from extensions import db
from models.user import _new_id, _utcnow


class Project(db.Model):
    """Editor project: a title plus the HTML/CSS/JS snippets, owned by one user."""
    __tablename__ = "projects"

    id = db.Column(db.String(32), primary_key=True, default=_new_id)
    title = db.Column(db.String(256), nullable=False)
    created_by = db.Column(db.String(32), db.ForeignKey("users.id"), nullable=False, index=True)
    html_code = db.Column(db.Text, nullable=False, default="")
    css_code = db.Column(db.Text, nullable=False, default="")
    js_code = db.Column(db.Text, nullable=False, default="")
    created_at = db.Column(db.DateTime(timezone=True), default=_utcnow)
    updated_at = db.Column(db.DateTime(timezone=True), default=_utcnow)

    def to_dict(self):
        return {
            "_id": self.id,
            "title": self.title,
            "createdBy": self.created_by,
            "htmlCode": self.html_code,
            "cssCode": self.css_code,
            "jsCode": self.js_code,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }
