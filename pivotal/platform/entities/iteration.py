"""Iteration entity schema."""

from datetime import datetime
from typing import ClassVar, List, Optional

from pydantic import Field

from pivotal.platform.converters.wire_fields import WireTimestamp
from pivotal.platform.entities._base import WireEntity
from pivotal.platform.entities.story import Story


class Iteration(WireEntity):
    """An iteration and the stories scheduled in it. Read-only."""

    wire_root: ClassVar[str] = "iteration"
    wire_list_root: ClassVar[str] = "iterations"

    id: Optional[int] = Field(None, description="The id of the iteration.")
    number: Optional[int] = Field(None, description="The order of the iteration.")
    start: WireTimestamp = Field(
        default_factory=WireTimestamp, description="When the iteration starts."
    )
    finish: WireTimestamp = Field(
        default_factory=WireTimestamp, description="When the iteration finishes."
    )
    stories: List[Story] = Field(
        default_factory=list, description="Stories in the iteration."
    )

    @property
    def start_date(self) -> datetime:
        """When the iteration started (or is expected to start)."""
        return self.start.value

    @start_date.setter
    def start_date(self, value: datetime) -> None:
        self.start.value = value

    @property
    def finish_date(self) -> datetime:
        """When the iteration finished (or is expected to finish)."""
        return self.finish.value

    @finish_date.setter
    def finish_date(self, value: datetime) -> None:
        self.finish.value = value

    def calculate_velocity(self) -> float:
        """Sum of the estimates of the iteration's stories (unestimated stories count as 0)."""
        return float(sum(story.estimate or 0 for story in self.stories))
