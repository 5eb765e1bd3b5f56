"""Membership entity schema."""

from typing import ClassVar, Optional, Tuple

from pydantic import Field

from pivotal.platform.entities._base import WireEntity
from pivotal.platform.entities.person import Person


class Membership(WireEntity):
    """Membership of a person in a project."""

    wire_root: ClassVar[str] = "membership"
    wire_list_root: ClassVar[str] = "memberships"
    exclude_on_submit: ClassVar[Tuple[str, ...]] = ("id",)

    id: Optional[int] = Field(None, description="The id of the membership.")
    person: Optional[Person] = Field(None, description="The person the membership belongs to.")
    role: Optional[str] = Field(None, description="The person's role in the project.")
