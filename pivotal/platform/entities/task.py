"""Task entity schema."""

from datetime import datetime
from typing import ClassVar, Optional, Tuple

from pydantic import Field

from pivotal.platform.converters.wire_fields import WireTimestamp
from pivotal.platform.entities._base import WireEntity


class Task(WireEntity):
    """A task belonging to a story."""

    wire_root: ClassVar[str] = "task"
    wire_list_root: ClassVar[str] = "tasks"
    exclude_on_submit: ClassVar[Tuple[str, ...]] = ("id", "created_at", "position")

    id: Optional[int] = Field(None, description="The id of the task.")
    position: Optional[int] = Field(None, description="Position of the task in the story.")
    description: Optional[str] = Field(None, description="The content of the task.")
    complete: Optional[bool] = Field(None, description="Whether the task has been completed.")
    created_at: WireTimestamp = Field(
        default_factory=WireTimestamp, description="When the task was created."
    )

    @property
    def creation_date(self) -> datetime:
        """When the task was created."""
        return self.created_at.value

    @creation_date.setter
    def creation_date(self, value: datetime) -> None:
        self.created_at.value = value
