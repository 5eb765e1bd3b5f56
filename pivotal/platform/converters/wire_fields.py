"""Synchronized wire fields.

The service sends every field as text. Timestamps, label lists and enumerations
are kept in both forms: the raw string used on the wire and a typed value used by
application code.
"""

from datetime import datetime, timezone
from typing import List, Optional

from pivotal.core.exceptions import StoryTypeParseError
from pivotal.core.logging import logger
from pivotal.core.shared_models import StoryState, StoryType
from pivotal.platform.converters._base import SyncedValue, WireCodec

TIMESTAMP_PATTERN = "%Y/%m/%d %H:%M:%S"
TIMESTAMP_SUFFIX = " UTC"
ZERO_TIMESTAMP = datetime.min

_field_logger = logger.with_context(component="wire_fields")


class TimestampCodec(WireCodec[datetime]):
    """Timestamps of the form ``2024/01/15 02:30:00 UTC``.

    The last four characters (the zone marker) are stripped before parsing.
    Absent, short or malformed input yields ``ZERO_TIMESTAMP`` instead of an error.
    """

    def parse(self, raw: Optional[str]) -> datetime:
        if raw is None or len(raw) <= len(TIMESTAMP_SUFFIX):
            return ZERO_TIMESTAMP
        try:
            return datetime.strptime(raw[: -len(TIMESTAMP_SUFFIX)], TIMESTAMP_PATTERN)
        except ValueError:
            _field_logger.debug(f"Unparseable timestamp {raw!r}, using zero timestamp")
            return ZERO_TIMESTAMP

    def format(self, value: datetime) -> str:
        # strftime renders years below 1000 without padding
        return (
            f"{value.year:04d}/{value.month:02d}/{value.day:02d} "
            f"{value.hour:02d}:{value.minute:02d}:{value.second:02d}{TIMESTAMP_SUFFIX}"
        )

    def normalize(self, value: datetime) -> datetime:
        if not isinstance(value, datetime):
            raise ValueError(f"Expected datetime, got {type(value).__name__}")
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        return value.replace(microsecond=0)


class LabelListCodec(WireCodec[List[str]]):
    """Comma-delimited label lists.

    An empty or absent raw string maps to an empty list and back. Typed lists are
    re-derived from their joined form, so a label containing a comma is split.
    """

    def parse(self, raw: Optional[str]) -> List[str]:
        if not raw:
            return []
        return raw.split(",")

    def format(self, value: List[str]) -> str:
        return ",".join(value)

    def normalize(self, value: List[str]) -> List[str]:
        if not isinstance(value, (list, tuple)):
            raise ValueError(f"Expected a list of labels, got {type(value).__name__}")
        return [str(label) for label in value]

    def snapshot(self, value: List[str]) -> List[str]:
        return list(value)


class StoryTypeCodec(WireCodec[Optional[StoryType]]):
    """Story types. Unrecognized values raise ``StoryTypeParseError``."""

    def parse(self, raw: Optional[str]) -> Optional[StoryType]:
        if raw is None:
            return None
        try:
            return StoryType(raw)
        except ValueError as e:
            raise StoryTypeParseError(raw) from e

    def format(self, value: StoryType) -> str:
        return value.value

    def normalize(self, value: StoryType) -> StoryType:
        try:
            return StoryType(value)
        except ValueError as e:
            raise StoryTypeParseError(value) from e


class StoryStateCodec(WireCodec[StoryState]):
    """Story states. Unrecognized values resolve to ``StoryState.UNKNOWN``."""

    def parse(self, raw: Optional[str]) -> StoryState:
        if raw is None:
            return StoryState.UNKNOWN
        try:
            return StoryState(raw.strip().lower())
        except ValueError:
            _field_logger.debug(f"Unrecognized story state {raw!r}, using {StoryState.UNKNOWN}")
            return StoryState.UNKNOWN

    def format(self, value: StoryState) -> str:
        return value.value

    def normalize(self, value: StoryState) -> StoryState:
        return StoryState(value)


class WireTimestamp(SyncedValue[datetime]):
    """Timestamp field (``created_at``, ``accepted_at``, ``noted_at``, ``start``, ``finish``)."""

    codec = TimestampCodec()


class WireLabels(SyncedValue[List[str]]):
    """Comma-delimited label list field."""

    codec = LabelListCodec()


class WireStoryType(SyncedValue[Optional[StoryType]]):
    """Story type field (strict)."""

    codec = StoryTypeCodec()


class WireStoryState(SyncedValue[StoryState]):
    """Current state field (lenient)."""

    codec = StoryStateCodec()
