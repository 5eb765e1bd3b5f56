"""HTTP transport for the tracker service."""

from pivotal.platform.http_client.pivotal_client import PivotalHttpClient

__all__ = ["PivotalHttpClient"]
