"""
HTTP transport for ESPN requests.

Wraps a requests Session with the retry policy ESPN tolerates:
- Fixed per-request timeout
- Bounded attempts with exponential backoff and random jitter
- Redirects followed (/ncf now redirects to /college-football)
- Non-2xx responses raised as UpstreamRequestError

The policy comes from an explicit HttpClientConfig passed at construction;
HttpClient never reads global settings itself.
"""

from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional

import requests
from bs4 import BeautifulSoup

from espn_scraper.config import Settings, settings as default_settings
from espn_scraper.errors import UnexpectedResponseShapeError, UpstreamRequestError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HttpClientConfig:
    """Immutable request policy for one HttpClient."""

    timeout: float = 10.0
    max_attempts: int = 3
    retry_interval: float = 2.0
    retry_jitter: float = 0.5
    backoff_factor: float = 2.0
    retry_statuses: frozenset[int] = frozenset({429, 500, 502, 503, 504})
    headers: Mapping[str, str] = field(default_factory=dict)
    html_parser: str = "lxml"

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> "HttpClientConfig":
        """Build a config from Settings, merging caller headers over the User-Agent."""
        settings = settings or default_settings
        merged = {"User-Agent": settings.user_agent}
        merged.update(headers or {})
        return cls(
            timeout=settings.request_timeout,
            max_attempts=settings.request_max_attempts,
            retry_interval=settings.request_retry_interval,
            retry_jitter=settings.request_retry_jitter,
            backoff_factor=settings.request_backoff_factor,
            retry_statuses=frozenset(settings.request_retry_statuses),
            headers=merged,
            html_parser=settings.html_parser,
        )

    def retry_delay(self, attempt: int, rand: Callable[[], float] = random.random) -> float:
        """
        Delay before retrying after the given (0-indexed) failed attempt.

        interval * factor**attempt, plus up to ``retry_jitter`` of that as
        random extra. With the defaults: ~2-3s, then ~4-6s.
        """
        delay = self.retry_interval * (self.backoff_factor ** attempt)
        return delay + delay * self.retry_jitter * rand()


class _RetryableStatus(Exception):
    def __init__(self, response: requests.Response):
        super().__init__(f"HTTP {response.status_code}")
        self.response = response


# Transient failures; anything else raised by requests fails on the spot
_RETRYABLE_ERRORS = (
    requests.Timeout,
    requests.ConnectionError,
    requests.exceptions.ChunkedEncodingError,
    _RetryableStatus,
)


class HttpClient:
    """
    Synchronous GET client with retries.

    Usage:
        with HttpClient() as client:
            payload = client.get_json("https://www.espn.com/nfl/scoreboard?xhr=1")
            soup = client.get_html("https://www.espn.com/nfl/teams")
    """

    def __init__(
        self,
        config: Optional[HttpClientConfig] = None,
        session: Optional[requests.Session] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.config = config or HttpClientConfig.from_settings()
        self.session = session or requests.Session()
        self.session.headers.update(dict(self.config.headers))
        self._sleep = sleep

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    # =========================================================================
    # Requests
    # =========================================================================

    def get(self, url: str, headers: Optional[Mapping[str, str]] = None) -> requests.Response:
        """
        GET a URL, retrying timeouts, dropped connections and retryable statuses.

        Raises:
            UpstreamRequestError: on a non-retryable error status or request
                failure (too many redirects, bad encoding), or once all
                attempts have failed
        """
        max_attempts = self.config.max_attempts
        last_error: Optional[Exception] = None

        for attempt in range(max_attempts):
            try:
                response = self.session.get(
                    url,
                    headers=dict(headers) if headers else None,
                    timeout=self.config.timeout,
                    allow_redirects=True,
                )
                if response.status_code in self.config.retry_statuses:
                    raise _RetryableStatus(response)
                response.raise_for_status()
                return response
            except requests.HTTPError as e:
                status = e.response.status_code if e.response is not None else None
                logger.error("GET %s failed with HTTP %s", url, status)
                raise UpstreamRequestError(
                    f"GET {url} failed with HTTP {status}",
                    status_code=status,
                    context={"url": url},
                ) from e
            except _RETRYABLE_ERRORS as e:
                last_error = e

                if attempt < max_attempts - 1:
                    delay = self.config.retry_delay(attempt)
                    logger.warning(
                        "[Retry %d/%d] GET %s failed: %s. Retrying in %.1fs...",
                        attempt + 1,
                        max_attempts,
                        url,
                        e,
                        delay,
                    )
                    self._sleep(delay)
            except requests.RequestException as e:
                logger.error("GET %s failed: %s", url, e)
                raise UpstreamRequestError(f"GET {url} failed: {e}", context={"url": url}) from e

        status = last_error.response.status_code if isinstance(last_error, _RetryableStatus) else None
        logger.error("GET %s failed after %d attempts: %s", url, max_attempts, last_error)
        raise UpstreamRequestError(
            f"GET {url} failed after {max_attempts} attempts: {last_error}",
            status_code=status,
            context={"url": url, "attempts": max_attempts},
        ) from last_error

    def get_json(self, url: str, headers: Optional[Mapping[str, str]] = None) -> Any:
        logger.debug("Requesting JSON: %s", url)
        response = self.get(url, headers=headers)
        try:
            return response.json()
        except ValueError as e:
            raise UnexpectedResponseShapeError(
                f"Response from {url} is not valid JSON", context={"url": url}
            ) from e

    def get_text(self, url: str, headers: Optional[Mapping[str, str]] = None) -> str:
        logger.debug("Requesting HTML: %s", url)
        return self.get(url, headers=headers).text

    def get_html(self, url: str, headers: Optional[Mapping[str, str]] = None) -> BeautifulSoup:
        return BeautifulSoup(self.get_text(url, headers=headers), self.config.html_parser)
