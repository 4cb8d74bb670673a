"""Project records keyed by owner.

update and delete run as one conditional statement (`WHERE id = ? AND created_by = ?`
when an owner is given) so an ownership-gated mutation cannot act on a row that
changed hands or vanished after the check.
"""
import logging
from datetime import datetime, timezone
from typing import List, Optional

from errors import OwnerNotFound
from extensions import db
from models import Project, User

logger = logging.getLogger(__name__)

# client field -> column
CODE_FIELDS = {
    "htmlCode": "html_code",
    "cssCode": "css_code",
    "jsCode": "js_code",
}


def code_changes(fields: dict) -> dict:
    """Column values for the supplied code fields; absent or None fields are left alone."""
    changes = {}
    for key, column in CODE_FIELDS.items():
        value = fields.get(key)
        if value is not None:
            changes[column] = value
    return changes


class ProjectStore:
    def _require_owner(self, owner_id: str) -> None:
        if not owner_id or db.session.get(User, owner_id) is None:
            raise OwnerNotFound()

    def create(self, title: str, owner_id: str) -> Project:
        self._require_owner(owner_id)
        project = Project(title=title, created_by=owner_id)
        db.session.add(project)
        db.session.commit()
        return project

    def list_by_owner(self, owner_id: str) -> List[Project]:
        self._require_owner(owner_id)
        return (
            Project.query.filter_by(created_by=owner_id)
            .order_by(Project.created_at.asc())
            .all()
        )

    def get_by_id(self, project_id: str) -> Optional[Project]:
        if not project_id or not isinstance(project_id, str):
            return None
        return db.session.get(Project, project_id)

    def _match(self, project_id: str, owner_id: Optional[str]):
        query = Project.query.filter_by(id=project_id)
        if owner_id is not None:
            query = query.filter_by(created_by=owner_id)
        return query

    def update(self, project_id: str, fields: dict, owner_id: Optional[str] = None) -> Optional[Project]:
        changes = code_changes(fields)
        changes["updated_at"] = datetime.now(timezone.utc)
        matched = self._match(project_id, owner_id).update(changes, synchronize_session=False)
        db.session.commit()
        if not matched:
            return None
        # commit expired the identity map, so this reloads the row
        return db.session.get(Project, project_id)

    def delete_by_id(self, project_id: str, owner_id: Optional[str] = None) -> Optional[Project]:
        project = self.get_by_id(project_id)
        if project is None:
            return None
        # keep the loaded copy around to hand back after the row is gone
        db.session.expunge(project)
        deleted = self._match(project_id, owner_id).delete(synchronize_session=False)
        db.session.commit()
        if not deleted:
            logger.info("Delete of project %s matched no row", project_id)
            return None
        return project
