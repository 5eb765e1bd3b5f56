"""Person entity schema."""

from typing import ClassVar, Optional

from pydantic import Field

from pivotal.platform.entities._base import WireEntity


class Person(WireEntity):
    """A person (account) in Pivotal."""

    wire_root: ClassVar[str] = "person"
    wire_list_root: ClassVar[str] = "people"

    email: Optional[str] = Field(None, description="The person's email address.")
    name: Optional[str] = Field(None, description="The person's full (display) name.")
    initials: Optional[str] = Field(None, description="The person's initials.")
