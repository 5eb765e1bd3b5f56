"""Note entity schema."""

from datetime import datetime
from typing import ClassVar, Optional, Tuple

from pydantic import Field

from pivotal.platform.converters.wire_fields import WireTimestamp
from pivotal.platform.entities._base import WireEntity


class Note(WireEntity):
    """A note (comment) on a story."""

    wire_root: ClassVar[str] = "note"
    wire_list_root: ClassVar[str] = "notes"
    exclude_on_submit: ClassVar[Tuple[str, ...]] = ("id", "noted_at")

    id: Optional[int] = Field(None, description="The id of the note.")
    text: Optional[str] = Field(None, description="The note text.")
    author: Optional[str] = Field(None, description="Name of the note's author.")
    noted_at: WireTimestamp = Field(
        default_factory=WireTimestamp, description="When the note was written."
    )

    @property
    def noted_date(self) -> datetime:
        """When the note was written."""
        return self.noted_at.value

    @noted_date.setter
    def noted_date(self, value: datetime) -> None:
        self.noted_at.value = value
