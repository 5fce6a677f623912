"""Typed errors raised by the scraper.

Every error carries a ``context`` dict with the league, URL or value that
caused it, so callers can log it without parsing the message.
"""

from __future__ import annotations

from typing import Any, Optional


class EspnScraperError(Exception):
    """Base class for all scraper errors."""

    def __init__(self, message: str, *, context: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}


class InvalidArgumentError(EspnScraperError, ValueError):
    """Raised when a league, url_type, division or URL is outside the known domain."""


class UpstreamRequestError(EspnScraperError):
    """Raised when ESPN keeps failing after all retry attempts are used."""

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        context: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, context=context)
        self.status_code = status_code


class UnsupportedOperationError(EspnScraperError, NotImplementedError):
    """Raised for features that are recognised but not implemented (page caching)."""


class UnexpectedResponseShapeError(EspnScraperError):
    """Raised when a JSON payload lacks a field the extractor depends on."""
