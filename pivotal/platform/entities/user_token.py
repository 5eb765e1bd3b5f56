"""User token entity schema."""

from typing import ClassVar, List, Optional

from pydantic import Field, PrivateAttr

from pivotal.core.fetch_cache_service import CollectionCache
from pivotal.platform.entities._base import WireEntity


class UserToken(WireEntity):
    """The API token of a user account. Read-only; it cannot be changed through the API."""

    wire_root: ClassVar[str] = "token"

    guid: Optional[str] = Field(None, description="The API token used for every request.")
    id: Optional[int] = Field(None, description="The user's id.")

    _project_cache: CollectionCache = PrivateAttr(default_factory=CollectionCache)

    @property
    def api_token(self) -> Optional[str]:
        """The API token sent with each request."""
        return self.guid

    @property
    def projects(self) -> List:
        """Projects stored by the last ``load_projects`` call."""
        return self._project_cache.items
