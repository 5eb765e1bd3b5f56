"""Base classes for fields kept in both wire (raw) and typed form."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, ClassVar, Generic, Optional, TypeVar

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

T = TypeVar("T")


class WireCodec(ABC, Generic[T]):
    """Converts between the raw wire string of a field and its typed value."""

    @abstractmethod
    def parse(self, raw: Optional[str]) -> T:
        """Derive the typed value from a raw wire string.

        Args:
            raw: The raw string as sent by the service (None when absent)

        Returns:
            The typed value
        """
        pass

    @abstractmethod
    def format(self, value: T) -> Optional[str]:
        """Render a typed value as its canonical raw wire string.

        Args:
            value: The typed value (already normalized)

        Returns:
            The raw string
        """
        pass

    def normalize(self, value: Any) -> T:
        """Coerce a caller-supplied typed value before it is formatted.

        Raises:
            ValueError: If the value has the wrong type for this field
        """
        return value

    def snapshot(self, value: T) -> T:
        """Return the stored typed value as handed out to callers."""
        return value


class SyncedValue(Generic[T]):
    """A field holding both a raw wire string and its typed value.

    Assigning ``raw`` re-derives ``value``; assigning ``value`` regenerates ``raw``
    and then re-derives ``value`` from it, so the typed view always parses back
    from the raw one.
    Both stores change together, so a parse failure leaves the field untouched.
    Subclasses bind a codec and can be used directly as pydantic field types.
    """

    codec: ClassVar[WireCodec]

    __slots__ = ("_raw", "_value")

    def __init__(self, raw: Optional[str] = None):
        """Initialize from a raw wire string.

        Args:
            raw: The raw string (None for an absent field)
        """
        self._raw: Optional[str] = None
        self._value: T = self.codec.parse(None)
        self.raw = raw

    @classmethod
    def from_value(cls, value: T) -> "SyncedValue[T]":
        """Create a field from its typed value."""
        instance = cls()
        instance.value = value
        return instance

    @property
    def raw(self) -> Optional[str]:
        """The raw wire string."""
        return self._raw

    @raw.setter
    def raw(self, raw: Optional[str]) -> None:
        value = self.codec.parse(raw)
        self._raw = raw
        self._value = value

    @property
    def value(self) -> T:
        """The typed value."""
        return self.codec.snapshot(self._value)

    @value.setter
    def value(self, value: Optional[T]) -> None:
        if value is None:
            self._raw = None
            self._value = self.codec.parse(None)
            return
        raw = self.codec.format(self.codec.normalize(value))
        self._value = self.codec.parse(raw)
        self._raw = raw

    def copy(self) -> "SyncedValue[T]":
        """Return an independent copy holding the same raw and typed values."""
        clone = type(self).__new__(type(self))
        clone._raw = self._raw
        clone._value = self.codec.snapshot(self._value)
        return clone

    def __copy__(self) -> "SyncedValue[T]":
        return self.copy()

    def __deepcopy__(self, memo: dict) -> "SyncedValue[T]":
        return self.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SyncedValue):
            return NotImplemented
        return type(self) is type(other) and self._raw == other._raw and self._value == other._value

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(raw={self._raw!r}, value={self._value!r})"

    @classmethod
    def _coerce(cls, value: Any) -> "SyncedValue[T]":
        if isinstance(value, cls):
            return value
        if value is None:
            return cls()
        if isinstance(value, Enum):
            return cls.from_value(value)
        if isinstance(value, str):
            return cls(raw=value)
        return cls.from_value(value)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Accept raw strings, typed values or instances; serialize to the raw string."""
        return core_schema.no_info_plain_validator_function(
            cls._coerce,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda field: field.raw
            ),
        )
