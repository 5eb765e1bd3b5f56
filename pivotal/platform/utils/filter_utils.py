"""Builders for the ``filter`` query parameter of story searches.

Each builder returns a query-string fragment (without a leading ``&``) such as
``filter=label:ui``. Passing an existing filter as ``base_filter`` extends it with
a space-separated term: ``filter=label:ui type:bug``.
"""

from datetime import date
from typing import Iterable, Optional, Union

from pivotal.core.shared_models import StoryState, StoryType

FILTER_PREFIX = "filter="
FILTER_DATE_PATTERN = "%m/%d/%Y"


def construct_filter(base_filter: Optional[str], name: str, value: str) -> str:
    """Add a ``name:value`` term to a filter.

    Args:
        base_filter: Filter to extend; empty or None starts a new filter
        name: The filter term name
        value: The filter term value

    Returns:
        The combined filter
    """
    if not base_filter:
        return f"{FILTER_PREFIX}{name}:{value}"
    return f"{base_filter} {name}:{value}"


def _join(values: Union[str, Iterable]) -> str:
    if isinstance(values, str):
        return values
    return ",".join(str(value) for value in values)


def build_label_filter(labels: Union[str, Iterable[str]], base_filter: Optional[str] = None) -> str:
    """Filter on one label or any of several labels."""
    return construct_filter(base_filter, "label", _join(labels))


def build_story_type_filter(story_type: StoryType, base_filter: Optional[str] = None) -> str:
    """Filter on story type."""
    return construct_filter(base_filter, "type", StoryType(story_type).value)


def build_id_filter(ids: Iterable[int], base_filter: Optional[str] = None) -> str:
    """Filter on story ids."""
    return construct_filter(base_filter, "id", _join(ids))


def build_state_filter(
    states: Union[str, StoryState, Iterable[Union[str, StoryState]]],
    base_filter: Optional[str] = None,
) -> str:
    """Filter on one or several story states (``unstarted``, ``started``, ...)."""
    if isinstance(states, (str, StoryState)):
        states = [states]
    names = [state.value if isinstance(state, StoryState) else state for state in states]
    return construct_filter(base_filter, "state", _join(names))


def build_created_since_filter(start: date, base_filter: Optional[str] = None) -> str:
    """Filter on stories created since a date."""
    return construct_filter(base_filter, "created_since", start.strftime(FILTER_DATE_PATTERN))


def build_modified_since_filter(start: date, base_filter: Optional[str] = None) -> str:
    """Filter on stories modified since a date."""
    return construct_filter(base_filter, "modified_since", start.strftime(FILTER_DATE_PATTERN))


def build_external_id_filter(
    ids: Union[str, Iterable[Union[str, int]]], base_filter: Optional[str] = None
) -> str:
    """Filter on one or several external ids."""
    return construct_filter(base_filter, "external_id", _join(ids))


def filter_to_params(story_filter: Optional[str]) -> dict:
    """Convert a built filter into request query parameters."""
    if not story_filter:
        return {}
    if story_filter.startswith(FILTER_PREFIX):
        story_filter = story_filter[len(FILTER_PREFIX) :]
    return {"filter": story_filter}
