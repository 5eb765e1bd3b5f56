"""Read-through cache policy for child collections.

A parent entity (a project's stories, a story's tasks, a token's projects) keeps
one snapshot per collection. The fetch options decide whether a call goes to the
network, returns the snapshot, or both.
"""

from typing import Callable, Generic, List, Optional, TypeVar

from pivotal.core.logging import ContextualLogger
from pivotal.core.logging import logger as default_logger
from pivotal.schemas.fetch_options import FetchOptions

T = TypeVar("T")


class CollectionCache(Generic[T]):
    """The last fetched snapshot of one child collection of a parent entity.

    Empty until the first refreshing fetch; replaced wholesale, never merged.
    """

    __slots__ = ("_items",)

    def __init__(self) -> None:
        """Initialize an empty snapshot."""
        self._items: List[T] = []

    @property
    def items(self) -> List[T]:
        """A copy of the cached snapshot."""
        return list(self._items)

    def replace(self, items: List[T]) -> None:
        """Replace the snapshot with a new collection."""
        self._items = list(items)

    def __len__(self) -> int:
        return len(self._items)


class FetchCacheService:
    """Applies fetch options to a collection cache.

    Decision table, evaluated in this order:

    ============== ========== =================================================
    refresh_cache  use_cached behavior
    ============== ========== =================================================
    True           True       fetch, replace the snapshot, return the snapshot
    True           False      fetch, replace the snapshot, fetch again and
                              return the second result
    False          True       return the snapshot, never fetch
    False          False      fetch and return the result, snapshot untouched
    ============== ========== =================================================
    """

    def __init__(self, logger: Optional[ContextualLogger] = None):
        """Initialize the fetch cache service.

        Args:
            logger: Optional contextual logger
        """
        self.logger = logger or default_logger.with_context(component="fetch_cache")

    def fetch(
        self,
        cache: CollectionCache[T],
        options: Optional[FetchOptions],
        fetch_all: Callable[[], List[T]],
        fetch_live: Optional[Callable[[], List[T]]] = None,
        cached_filter: Optional[Callable[[T], bool]] = None,
    ) -> List[T]:
        """Resolve a collection fetch against the cache.

        Args:
            cache: The parent entity's snapshot for this collection
            options: Cache intent (None behaves like default options)
            fetch_all: Fetches the unfiltered collection; always used to refresh the cache
            fetch_live: Fetch used when returning a live result (defaults to ``fetch_all``).
                Filtered accessors pass a request-side filtered fetch here.
            cached_filter: Predicate applied to the snapshot when returning from cache

        Returns:
            The resulting collection
        """
        options = options or FetchOptions()
        fetch_live = fetch_live or fetch_all

        if options.refresh_cache:
            cache.replace(fetch_all())
            self.logger.debug(f"Refreshed collection cache with {len(cache)} items")

        if options.use_cached:
            items = cache.items
            if cached_filter is not None:
                items = [item for item in items if cached_filter(item)]
            self.logger.debug(f"Returning {len(items)} cached items")
            return items

        self.logger.debug("Returning live fetch result")
        return fetch_live()


fetch_cache_service = FetchCacheService()
