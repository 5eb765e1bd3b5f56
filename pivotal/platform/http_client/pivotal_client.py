"""PivotalHttpClient - blocking XML transport for the tracker service.

Wraps an httpx.Client. Every call sends the API token (when given) as the
``X-TrackerToken`` header, raises for non-success statuses and returns the parsed
response document.
"""

from typing import Any, Dict, Optional

import httpx
from lxml import etree  # type: ignore[import-untyped]

from pivotal.core.config import settings
from pivotal.core.logging import ContextualLogger
from pivotal.core.logging import logger as default_logger
from pivotal.core.shared_models import ServiceMethod
from pivotal.platform.converters.xml_converter import xml_converter
from pivotal.platform.http_client.retry_helpers import build_retrying

TOKEN_HEADER = "X-TrackerToken"
XML_CONTENT_TYPE = "application/xml"
UPLOAD_FIELD = "Filedata"


class PivotalHttpClient:
    """HTTP transport for the tracker XML API.

    Failures are not wrapped: ``httpx.HTTPStatusError``, ``httpx.TransportError``
    and ``lxml.etree.XMLSyntaxError`` reach the caller after being logged.
    """

    def __init__(
        self,
        client: Optional[httpx.Client] = None,
        base_url: Optional[str] = None,
        max_attempts: Optional[int] = None,
        logger: Optional[ContextualLogger] = None,
    ):
        """Initialize the transport.

        Args:
            client: Client to send requests with (created from settings if omitted)
            base_url: Service root; relative request urls are resolved against it
            max_attempts: Attempts per request; see retry_helpers for what is retried
            logger: Optional contextual logger
        """
        self.base_url = (base_url or settings.PIVOTAL_BASE_URL).rstrip("/")
        self._client = client or httpx.Client(timeout=settings.PIVOTAL_HTTP_TIMEOUT)
        self._max_attempts = max(1, max_attempts or settings.PIVOTAL_MAX_ATTEMPTS)
        self.logger = logger or default_logger.with_context(component="http_client")

    def url(self, path: str) -> str:
        """Resolve a service path (``/projects/1``) against the base url."""
        if path.startswith(("http://", "https://")):
            return path
        return f"{self.base_url}/{path.lstrip('/')}"

    def _headers(self, token: Optional[str], content_type: Optional[str] = None) -> Dict[str, str]:
        headers = {}
        if token:
            headers[TOKEN_HEADER] = token
        if content_type:
            headers["Content-Type"] = content_type
        return headers

    def _send(self, method: str, url: str, **kwargs: Any) -> etree._Element:
        url = self.url(url)
        retrying = build_retrying(ServiceMethod(method), self._max_attempts)
        try:
            response = retrying(self._request, method, url, **kwargs)
        except httpx.HTTPStatusError as e:
            self.logger.error(
                f"{method} {url} failed with status {e.response.status_code}: {e.response.text}"
            )
            raise
        except httpx.HTTPError as e:
            self.logger.error(f"{method} {url} failed: {e}")
            raise

        try:
            return xml_converter.parse(response.content)
        except etree.XMLSyntaxError as e:
            self.logger.error(f"{method} {url} returned malformed XML: {e}")
            raise

    def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        self.logger.debug(f"{method} {url}")
        response = self._client.request(method, url, **kwargs)
        response.raise_for_status()
        return response

    def fetch(
        self, url: str, params: Optional[Dict[str, Any]] = None, token: Optional[str] = None
    ) -> etree._Element:
        """GET a document.

        Args:
            url: Service path or absolute url
            params: Query parameters
            token: API token

        Returns:
            The response document element
        """
        return self._send(ServiceMethod.GET.value, url, params=params, headers=self._headers(token))

    def submit(
        self, url: str, payload: str, method: ServiceMethod, token: Optional[str] = None
    ) -> etree._Element:
        """Send an XML payload and return the response document.

        Args:
            url: Service path or absolute url
            payload: Sanitized entity markup
            method: POST (create), PUT (update) or DELETE
            token: API token

        Returns:
            The response document element
        """
        return self._send(
            ServiceMethod(method).value,
            url,
            content=payload.encode("utf-8"),
            headers=self._headers(token, XML_CONTENT_TYPE),
        )

    def fetch_with_credentials(self, url: str, login: str, password: str) -> etree._Element:
        """GET a document using HTTP basic authentication."""
        return self._send(ServiceMethod.GET.value, url, auth=(login, password))

    def upload(
        self, url: str, filename: str, data: bytes, token: Optional[str] = None
    ) -> etree._Element:
        """POST a file as multipart form data.

        Args:
            url: Service path or absolute url
            filename: Name reported for the file
            data: File contents
            token: API token

        Returns:
            The response document element
        """
        return self._send(
            ServiceMethod.POST.value,
            url,
            files={UPLOAD_FIELD: (filename, data)},
            headers=self._headers(token),
        )

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()

    @property
    def is_closed(self) -> bool:
        """Check if client is closed."""
        return self._client.is_closed

    def __enter__(self):
        """Enter context manager."""
        return self

    def __exit__(self, *args):
        """Exit context manager."""
        self.close()
