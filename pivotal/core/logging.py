"""Logging for the Pivotal client.

Provides a contextual logger that carries structured dimensions (component,
entity, project id, ...) on every record it emits.
"""

import logging
import sys
from typing import Any, MutableMapping, Optional, Tuple

from pivotal.core.config import settings


class ContextualFormatter(logging.Formatter):
    """Formatter that renders the contextual dimensions after the level name."""

    def format(self, record: logging.LogRecord) -> str:
        """Format a record, prefixing its message with ``[key=value ...]``."""
        dimensions = getattr(record, "dimensions", None)
        record.context = (
            "[" + " ".join(f"{k}={v}" for k, v in dimensions.items()) + "] " if dimensions else ""
        )
        return super().format(record)


class ContextualLogger(logging.LoggerAdapter):
    """Logger adapter that attaches dimensions to each record.

    Example:
        log = logger.with_context(component="http_client")
        log.debug("GET https://...")
    """

    def __init__(self, base_logger: logging.Logger, dimensions: Optional[dict] = None):
        """Initialize the contextual logger.

        Args:
            base_logger: The standard library logger to wrap
            dimensions: Key/value pairs added to every record
        """
        super().__init__(base_logger, dict(dimensions or {}))
        self.dimensions = dict(dimensions or {})

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> Tuple[Any, MutableMapping[str, Any]]:
        """Attach the dimensions to the record's ``extra`` mapping."""
        extra = dict(kwargs.get("extra") or {})
        extra["dimensions"] = {**self.dimensions, **extra.get("dimensions", {})}
        kwargs["extra"] = extra
        return msg, kwargs

    def with_context(self, **dimensions: Any) -> "ContextualLogger":
        """Return a child logger with additional dimensions merged in."""
        return ContextualLogger(self.logger, {**self.dimensions, **dimensions})


def _configure_base_logger() -> logging.Logger:
    base = logging.getLogger("pivotal")
    base.setLevel(settings.LOG_LEVEL.upper())
    if not base.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            ContextualFormatter("%(asctime)s - %(name)s - %(levelname)s - %(context)s%(message)s")
        )
        base.addHandler(handler)
    return base


logger = ContextualLogger(_configure_base_logger())
