"""Retry policy for requests to the tracker service.

Only consulted when more than one attempt is configured. Which failures are
retried depends on the request method: a POST creates a story, note or
attachment, so it is only repeated when the service cannot have processed it.
"""

from typing import Callable, Optional

import httpx
from tenacity import Retrying, retry_if_exception, stop_after_attempt, wait_exponential

from pivotal.core.shared_models import ServiceMethod

IDEMPOTENT_METHODS = frozenset({ServiceMethod.GET, ServiceMethod.PUT, ServiceMethod.DELETE})

RETRY_AFTER_MIN_SECONDS = 1.0
RETRY_AFTER_MAX_SECONDS = 120.0

_backoff = wait_exponential(multiplier=1, min=2, max=10)


def is_rate_limited(exception: BaseException) -> bool:
    """Check if the service rejected the request with 429."""
    return (
        isinstance(exception, httpx.HTTPStatusError) and exception.response.status_code == 429
    )


def retryable_failure(method: ServiceMethod) -> Callable[[BaseException], bool]:
    """Return the failure check for requests sent with ``method``.

    A rejected (429) request or one that never connected is retried for every
    method. A read timeout is retried only for idempotent methods, since the
    service may already have applied a timed-out POST.

    Args:
        method: Method the request is sent with

    Returns:
        Predicate telling whether a failure may be retried
    """
    idempotent = ServiceMethod(method) in IDEMPOTENT_METHODS

    def check(exception: BaseException) -> bool:
        if is_rate_limited(exception) or isinstance(exception, httpx.ConnectTimeout):
            return True
        return idempotent and isinstance(exception, httpx.ReadTimeout)

    return check


def retry_after_seconds(response: httpx.Response) -> Optional[float]:
    """Read the Retry-After delay of a response, clamped to sane bounds.

    Returns:
        Seconds to wait, or None when the header is missing or not a number
    """
    header = response.headers.get("Retry-After")
    if not header:
        return None
    try:
        delay = float(header)
    except ValueError:
        return None
    return min(max(delay, RETRY_AFTER_MIN_SECONDS), RETRY_AFTER_MAX_SECONDS)


def wait_before_retry(retry_state) -> float:
    """Honor Retry-After on 429 responses; back off exponentially otherwise."""
    exception = retry_state.outcome.exception()
    if is_rate_limited(exception):
        delay = retry_after_seconds(exception.response)
        if delay is not None:
            return delay
    return _backoff(retry_state)


def build_retrying(method: ServiceMethod, max_attempts: int) -> Retrying:
    """Create the retry controller for one request.

    Args:
        method: Method the request is sent with
        max_attempts: Total attempts, including the first

    Returns:
        A tenacity controller that re-raises the last failure
    """
    return Retrying(
        stop=stop_after_attempt(max_attempts),
        retry=retry_if_exception(retryable_failure(method)),
        wait=wait_before_retry,
        reraise=True,
    )
