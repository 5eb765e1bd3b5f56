"""Project entity schema."""

from typing import ClassVar, List, Optional, Tuple

from pydantic import Field, PrivateAttr

from pivotal.core.fetch_cache_service import CollectionCache
from pivotal.platform.converters.wire_fields import WireLabels
from pivotal.platform.entities._base import WireEntity
from pivotal.platform.entities.story import Story

WEEK_DAY_NAMES = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")


class Project(WireEntity):
    """A project.

    ``labels`` is assigned by the service from the labels of the project's stories.
    """

    wire_root: ClassVar[str] = "project"
    wire_list_root: ClassVar[str] = "projects"
    exclude_on_submit: ClassVar[Tuple[str, ...]] = ("id", "labels", "current_velocity")

    id: Optional[int] = Field(None, description="The id of the project.")
    name: Optional[str] = Field(None, description="The name of the project.")
    labels: WireLabels = Field(
        default_factory=WireLabels, description="Labels used in the project."
    )
    iteration_length: Optional[int] = Field(None, description="Iteration length in weeks.")
    week_start_day: Optional[str] = Field(
        None, description="Name of the day iterations start on (e.g. 'Monday')."
    )
    point_scale: Optional[str] = Field(None, description="Point scale used for estimates.")
    velocity_scheme: Optional[str] = Field(None, description="How velocity is calculated.")
    current_velocity: Optional[int] = Field(None, description="The current velocity.")
    initial_velocity: Optional[int] = Field(None, description="The initial velocity.")
    number_of_done_iterations_to_show: Optional[int] = Field(
        None, description="Number of completed iterations shown in the UI."
    )
    is_public: Optional[bool] = Field(
        None, alias="public", description="Whether the project is public."
    )

    _story_cache: CollectionCache = PrivateAttr(default_factory=CollectionCache)

    @property
    def label_values(self) -> List[str]:
        """Labels as a list."""
        return self.labels.value

    @label_values.setter
    def label_values(self, value: List[str]) -> None:
        self.labels.value = value

    @property
    def week_start_day_index(self) -> Optional[int]:
        """Day iterations start on (0 = Sunday), or None if the name is not recognized."""
        try:
            return WEEK_DAY_NAMES.index(self.week_start_day)
        except ValueError:
            return None

    @property
    def stories(self) -> List[Story]:
        """Stories stored by the last refreshing story fetch."""
        return self._story_cache.items
