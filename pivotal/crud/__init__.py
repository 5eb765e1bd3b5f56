"""CRUD layer operations."""

from .crud_attachment import attachment
from .crud_iteration import iteration
from .crud_membership import membership
from .crud_note import note
from .crud_project import project
from .crud_story import story
from .crud_task import task
from .crud_token import token

__all__ = [
    "attachment",
    "iteration",
    "membership",
    "note",
    "project",
    "story",
    "task",
    "token",
]
