from models.user import User
from models.project import Project

__all__ = ["User", "Project"]
