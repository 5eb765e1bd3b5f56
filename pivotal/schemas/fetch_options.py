"""Fetch options schema."""

from pydantic import BaseModel, ConfigDict, Field


class FetchOptions(BaseModel):
    """Cache intent for a collection fetch.

    Only used by accessors whose parent entity keeps a collection cache.
    """

    use_cached: bool = Field(
        False, description="Return the cached snapshot instead of the live result."
    )
    refresh_cache: bool = Field(
        False, description="Fetch and replace the cached snapshot before deciding what to return."
    )

    model_config = ConfigDict(frozen=True)
