"""Story entity schema."""

from datetime import datetime
from typing import ClassVar, List, Optional, Tuple

from pydantic import Field, PrivateAttr

from pivotal.core.fetch_cache_service import CollectionCache
from pivotal.core.shared_models import StoryState, StoryType
from pivotal.platform.converters.wire_fields import (
    WireLabels,
    WireStoryState,
    WireStoryType,
    WireTimestamp,
)
from pivotal.platform.entities._base import WireEntity
from pivotal.platform.entities.task import Task


def _default_story_type() -> WireStoryType:
    return WireStoryType.from_value(StoryType.FEATURE)


class Story(WireEntity):
    """A single story in a project.

    ``story_type``, ``labels``, ``current_state``, ``created_at`` and ``accepted_at``
    hold both the raw wire string and a typed value; the typed views are also
    available as ``type``, ``label_values``, ``state``, ``creation_date`` and
    ``accepted_date``.
    """

    wire_root: ClassVar[str] = "story"
    wire_list_root: ClassVar[str] = "stories"
    exclude_on_submit: ClassVar[Tuple[str, ...]] = (
        "url",
        "created_at",
        "accepted_at",
        "id",
        "project_id",
    )

    project_id: Optional[int] = Field(None, description="The id of the owning project.")
    id: Optional[int] = Field(None, description="The id of the story.")
    story_type: WireStoryType = Field(
        default_factory=_default_story_type, description="Type of the story."
    )
    name: Optional[str] = Field(None, description="The name of the story.")
    description: Optional[str] = Field(None, description="The story description.")
    requested_by: Optional[str] = Field(None, description="Name of the requester.")
    owned_by: Optional[str] = Field(None, description="Name of the owner.")
    labels: WireLabels = Field(default_factory=WireLabels, description="Labels of the story.")
    estimate: Optional[int] = Field(None, description="Point estimate.")
    url: Optional[str] = Field(None, description="Link to the story.")
    current_state: WireStoryState = Field(
        default_factory=WireStoryState, description="Workflow state of the story."
    )
    created_at: WireTimestamp = Field(
        default_factory=WireTimestamp, description="When the story was created."
    )
    accepted_at: WireTimestamp = Field(
        default_factory=WireTimestamp, description="When the story was accepted."
    )

    _task_cache: CollectionCache = PrivateAttr(default_factory=CollectionCache)

    @property
    def type(self) -> Optional[StoryType]:
        """The story type."""
        return self.story_type.value

    @type.setter
    def type(self, value: StoryType) -> None:
        self.story_type.value = value

    @property
    def state(self) -> StoryState:
        """The current state; ``StoryState.UNKNOWN`` if unrecognized."""
        return self.current_state.value

    @state.setter
    def state(self, value: StoryState) -> None:
        self.current_state.value = value

    @property
    def label_values(self) -> List[str]:
        """Labels as a list."""
        return self.labels.value

    @label_values.setter
    def label_values(self, value: List[str]) -> None:
        self.labels.value = value

    @property
    def creation_date(self) -> datetime:
        """When the story was created."""
        return self.created_at.value

    @creation_date.setter
    def creation_date(self, value: datetime) -> None:
        self.created_at.value = value

    @property
    def accepted_date(self) -> datetime:
        """When the story was accepted."""
        return self.accepted_at.value

    @accepted_date.setter
    def accepted_date(self, value: datetime) -> None:
        self.accepted_at.value = value

    @property
    def tasks(self) -> List[Task]:
        """Tasks stored by the last refreshing task fetch."""
        return self._task_cache.items
