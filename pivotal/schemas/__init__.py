"""Schemas shared across the Pivotal client."""

from .fetch_options import FetchOptions

__all__ = ["FetchOptions"]
