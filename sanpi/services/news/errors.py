"""Failures raised by the article and illustration pipeline."""

from __future__ import annotations


class FeedError(Exception):
    """Base class for pipeline failures surfaced to the caller."""


class NetworkError(FeedError):
    """Raised when the listing page cannot be fetched."""

    def __init__(self, url: str, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class ParseError(FeedError):
    """Raised when the listing response cannot be read as text."""


class NotFoundError(FeedError):
    """Raised when the search finished without a single illustration."""


class RefreshInProgressError(FeedError):
    """Raised when a refresh is requested while another one is running."""
