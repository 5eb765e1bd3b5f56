"""Shared enumerations for the Pivotal wire vocabulary."""

from enum import Enum


class StoryType(str, Enum):
    """Types of stories."""

    FEATURE = "feature"
    CHORE = "chore"
    BUG = "bug"
    RELEASE = "release"


class StoryState(str, Enum):
    """Workflow state of a story. UNKNOWN is the default and error case."""

    UNKNOWN = "unknown"
    UNSCHEDULED = "unscheduled"
    UNSTARTED = "unstarted"
    STARTED = "started"
    FINISHED = "finished"
    DELIVERED = "delivered"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class IterationGroup(str, Enum):
    """Groups of iterations that can be requested.

    UNKNOWN and ALL both mean "every iteration" when fetching.
    """

    UNKNOWN = "unknown"
    ALL = "all"
    DONE = "done"
    CURRENT = "current"
    BACKLOG = "backlog"


class ServiceMethod(str, Enum):
    """HTTP methods used to talk to the service."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
