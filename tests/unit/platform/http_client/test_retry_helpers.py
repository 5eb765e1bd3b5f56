"""Tests for the transport retry policy."""

from unittest.mock import MagicMock

import httpx
import pytest

from pivotal.core.shared_models import ServiceMethod
from pivotal.platform.http_client.retry_helpers import (
    is_rate_limited,
    retry_after_seconds,
    retryable_failure,
    wait_before_retry,
)


def status_error(status_code: int, headers=None) -> httpx.HTTPStatusError:
    """Create an HTTPStatusError for a status code."""
    request = httpx.Request("GET", "https://tracker.test/services/v3/projects")
    response = httpx.Response(status_code, headers=headers or {}, request=request)
    return httpx.HTTPStatusError("error", request=request, response=response)


def retry_state_for(exception: BaseException, attempt_number: int = 1):
    """Create a minimal tenacity retry state failing with ``exception``."""
    state = MagicMock()
    state.outcome.exception.return_value = exception
    state.attempt_number = attempt_number
    return state


def test_rate_limit_detection():
    """Test that only 429 responses count as rate limits."""
    assert is_rate_limited(status_error(429))
    assert not is_rate_limited(status_error(500))
    assert not is_rate_limited(ValueError("x"))


@pytest.mark.parametrize("method", [ServiceMethod.GET, ServiceMethod.PUT, ServiceMethod.DELETE])
def test_idempotent_methods_retry_timeouts(method):
    """Test that idempotent requests retry rate limits and both kinds of timeout."""
    check = retryable_failure(method)

    assert check(status_error(429))
    assert check(httpx.ConnectTimeout("slow"))
    assert check(httpx.ReadTimeout("slow"))
    assert not check(httpx.ConnectError("down"))
    assert not check(status_error(404))


def test_post_does_not_retry_read_timeout():
    """Test that a create is only repeated when the service cannot have applied it."""
    check = retryable_failure(ServiceMethod.POST)

    assert check(status_error(429))
    assert check(httpx.ConnectTimeout("slow"))
    assert not check(httpx.ReadTimeout("slow"))
    assert not check(status_error(500))


def test_method_given_as_string():
    """Test that plain method names are accepted."""
    assert not retryable_failure("POST")(httpx.ReadTimeout("slow"))
    assert retryable_failure("GET")(httpx.ReadTimeout("slow"))


@pytest.mark.parametrize(
    "retry_after,expected",
    [("5", 5.0), ("0.2", 1.0), ("500", 120.0), ("soon", None), (None, None)],
)
def test_retry_after_seconds(retry_after, expected):
    """Test that Retry-After is read within bounds and ignored when unusable."""
    headers = {"Retry-After": retry_after} if retry_after is not None else {}

    assert retry_after_seconds(httpx.Response(429, headers=headers)) == expected


def test_wait_respects_retry_after():
    """Test that a 429 waits for the delay the service asked for."""
    state = retry_state_for(status_error(429, {"Retry-After": "7"}))

    assert wait_before_retry(state) == 7.0


@pytest.mark.parametrize(
    "exception", [httpx.ReadTimeout("slow"), status_error(429, {"Retry-After": "later"})]
)
def test_wait_falls_back_to_backoff(exception):
    """Test exponential backoff when no usable Retry-After is sent."""
    wait = wait_before_retry(retry_state_for(exception))

    assert 2 <= wait <= 10
