"""Entity schemas for the Pivotal wire vocabulary."""

from .attachment import Attachment
from .iteration import Iteration
from .membership import Membership
from .note import Note
from .person import Person
from .project import Project
from .story import Story
from .task import Task
from .user_token import UserToken

__all__ = [
    "Attachment",
    "Iteration",
    "Membership",
    "Note",
    "Person",
    "Project",
    "Story",
    "Task",
    "UserToken",
]
