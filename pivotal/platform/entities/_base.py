"""Base entity schema for Pivotal wire documents."""

from typing import Any, ClassVar, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from pivotal.platform.converters._base import SyncedValue


class WireEntity(BaseModel):
    """Base class for entities exchanged with the service.

    Class-level descriptors:
        wire_root: Element name of a single entity document (e.g. ``story``)
        wire_list_root: Element name of the plural container (e.g. ``stories``)
        exclude_on_submit: Fields never sent in a create/update/delete document
    """

    wire_root: ClassVar[str]
    wire_list_root: ClassVar[Optional[str]] = None
    exclude_on_submit: ClassVar[Tuple[str, ...]] = ()

    model_config = ConfigDict(validate_assignment=True, populate_by_name=True)

    @classmethod
    def wire_fields(cls) -> List[Tuple[str, str]]:
        """Return ``(attribute, wire tag)`` pairs in document order."""
        return [
            (name, info.alias or name)
            for name, info in cls.model_fields.items()
            if not info.exclude
        ]

    def copy_fields_from(self, other: "WireEntity") -> None:
        """Overwrite every field of this instance with the value from ``other``.

        A full overwrite, not a merge: fields that are None on ``other`` become None here.
        """
        if type(other) is not type(self):
            raise TypeError(
                f"Cannot copy fields from {type(other).__name__} onto {type(self).__name__}"
            )
        for name in type(self).model_fields:
            setattr(self, name, _detached(getattr(other, name)))

    def clone(self):
        """Return an independent copy of the entity (without cached collections)."""
        return type(self).model_validate(
            {name: _detached(getattr(self, name)) for name in type(self).model_fields}
        )


def _detached(value: Any) -> Any:
    if isinstance(value, SyncedValue):
        return value.copy()
    if isinstance(value, WireEntity):
        return value.clone()
    if isinstance(value, list):
        return [_detached(item) for item in value]
    return value
