"""
HTTP Transport for the branch protection report.

Handles HTTP communication with the GitHub REST API, quota throttling,
403 backoff and error response mapping.
"""

import time
from dataclasses import dataclass
from typing import Any

import httpx

from branch_protection_report.exceptions import (
    ApiError,
    AuthenticationError,
    NetworkError,
    NotFoundError,
    RateLimitedError,
    ServerError,
)
from branch_protection_report.logging import (
    get_logger,
    log_http_request,
    log_http_response,
)

DEFAULT_BASE_URL = "https://api.github.com"
DEFAULT_TIMEOUT = 10.0
API_VERSION = "2022-11-28"
USER_AGENT = "gh-branch-protection-report/0.1.0"

RATELIMIT_REMAINING_HEADER = "x-ratelimit-remaining"
RATELIMIT_RESET_HEADER = "x-ratelimit-reset"
REQUEST_ID_HEADER = "x-github-request-id"

_ratelimit_logger = get_logger("ratelimit")


@dataclass
class RetryConfig:
    """Configuration for 403 retry behavior."""

    forbidden_backoff: float = 60.0  # Seconds to sleep after a 403
    max_forbidden_retries: int | None = None  # None retries until the quota recovers


class HTTPTransport:
    """
    HTTP transport layer for the GitHub REST API.

    Handles:
    - Bearer token authentication
    - Proactive sleep when the quota-remaining header reads zero
    - Fixed backoff and retry on 403
    - Error response parsing into typed exceptions

    A 403 is always treated as quota exhaustion. A 403 caused by missing
    permissions therefore retries forever unless ``max_forbidden_retries``
    is set.
    """

    def __init__(
        self,
        token: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        retry_config: RetryConfig | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize HTTP transport.

        Args:
            token: GitHub token sent as a bearer credential
            base_url: Base URL for API requests (e.g., "https://api.github.com")
            timeout: Per-request connect/response timeout in seconds
            retry_config: Configuration for 403 retry behavior
            transport: Optional httpx transport (e.g. ``httpx.MockTransport`` in tests)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.retry_config = retry_config or RetryConfig()

        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
            headers={
                "Authorization": f"Bearer {token}",
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": API_VERSION,
                "User-Agent": USER_AGENT,
            },
        )

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> "HTTPTransport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def get(self, url: str, params: dict[str, Any] | None = None) -> httpx.Response:
        """
        GET a resource, retrying on 403 and throttling on exhausted quota.

        Args:
            url: API path (e.g., "/orgs/acme") or absolute URL from a link header
            params: Query parameters

        Returns:
            The successful response

        Raises:
            AuthenticationError: On 401, never retried
            NotFoundError: On 404
            RateLimitedError: When a bounded 403 policy is exhausted
            NetworkError: When no response was received
            ApiError: On any other error status
        """
        attempt = 0

        while True:
            log_http_request(
                "GET", url, headers=dict(self._client.headers), params=params
            )
            started = time.monotonic()
            try:
                response = self._client.get(url, params=params)
            except httpx.RequestError as e:
                raise NetworkError(f"GET {url} failed: {e}") from e

            log_http_response(
                response.status_code,
                str(response.url),
                remaining=response.headers.get(RATELIMIT_REMAINING_HEADER),
                elapsed_ms=(time.monotonic() - started) * 1000,
            )

            if response.status_code == 403:
                if not self._should_retry_forbidden(attempt):
                    error = self._parse_error_response(response)
                    raise RateLimitedError(
                        "RATE_LIMITED",
                        f"Still forbidden after {attempt} retries: {error.message}",
                        attempts=attempt,
                        request_id=error.request_id,
                    )
                attempt += 1
                wait_time = self.retry_config.forbidden_backoff
                _ratelimit_logger.warning(
                    "Rate limit reached, sleeping for %s seconds...", _seconds(wait_time)
                )
                time.sleep(wait_time)
                continue

            if response.status_code >= 400:
                raise self._parse_error_response(response)

            self._throttle(response)
            return response

    def _should_retry_forbidden(self, attempt: int) -> bool:
        """
        Determine if a 403 should be retried.

        Args:
            attempt: Number of 403 retries already made for this request

        Returns:
            True unless a retry ceiling is configured and reached
        """
        limit = self.retry_config.max_forbidden_retries
        return limit is None or attempt < limit

    def _throttle(self, response: httpx.Response) -> None:
        """Hold the response until the quota resets when no calls remain."""
        delay = self._get_quota_delay(response.headers)
        if delay is None:
            return
        _ratelimit_logger.warning(
            "Rate limit reached, sleeping for %s seconds...", _seconds(delay)
        )
        if delay > 0:
            time.sleep(delay)

    def _get_quota_delay(self, headers: httpx.Headers | dict[str, str]) -> float | None:
        """
        Calculate how long to wait before the next call.

        Args:
            headers: Response headers

        Returns:
            Seconds until the quota resets (never negative), or None when
            calls remain or the headers are missing
        """
        remaining = headers.get(RATELIMIT_REMAINING_HEADER)
        if remaining is None or remaining.strip() != "0":
            return None

        reset = headers.get(RATELIMIT_RESET_HEADER)
        try:
            reset_at = int(reset) if reset is not None else None
        except ValueError:
            reset_at = None
        if reset_at is None:
            return None

        return max(0.0, float(reset_at - int(time.time())))

    def _parse_error_response(self, response: httpx.Response) -> ApiError:
        """
        Parse an error response into a typed exception.

        Args:
            response: HTTP response with error status

        Returns:
            Appropriate ApiError subclass
        """
        try:
            data = response.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}

        status_code = response.status_code
        message = data.get("message") or f"HTTP {status_code}"
        request_id = response.headers.get(REQUEST_ID_HEADER)

        if status_code == 401:
            return AuthenticationError("UNAUTHORIZED", message, status_code, request_id)
        elif status_code == 404:
            return NotFoundError("NOT_FOUND", message, status_code, request_id)
        elif status_code >= 500:
            return ServerError("SERVER_ERROR", message, status_code, request_id)
        else:
            return ApiError(f"HTTP_{status_code}", message, status_code, request_id)


def _seconds(value: float) -> str:
    """Render a wait time without a trailing .0 for whole seconds."""
    return str(int(value)) if float(value).is_integer() else f"{value:.1f}"
