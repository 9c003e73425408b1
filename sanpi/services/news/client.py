"""HTTP access to the news site."""

from __future__ import annotations

import logging
from typing import Protocol

import requests  # type: ignore[import-untyped]

from sanpi.services.news.errors import NetworkError, ParseError

REQUEST_TIMEOUT = 20.0

logger = logging.getLogger(__name__)


class PageClient(Protocol):
    def fetch_text(self, url: str) -> str: ...

    def exists(self, url: str) -> bool: ...


class SiteClient:
    """Thin wrapper over a requests session: one GET for pages, HEAD for probes."""

    def __init__(
        self,
        user_agent: str,
        timeout_s: float = REQUEST_TIMEOUT,
        session: requests.Session | None = None,
    ) -> None:
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": user_agent})
        self.timeout_s = timeout_s

    def fetch_text(self, url: str) -> str:
        """GET a page and return its body as text. No retries."""
        try:
            resp = self.session.get(url, timeout=self.timeout_s)
            resp.raise_for_status()
        except requests.HTTPError as exc:
            status = getattr(exc.response, "status_code", None)
            raise NetworkError(url, f"HTTP error! status: {status}", status_code=status) from exc
        except requests.RequestException as exc:  # network / timeout
            raise NetworkError(url, f"Request failed for {url}: {exc}") from exc

        encoding = resp.encoding or resp.apparent_encoding or "utf-8"
        try:
            return resp.content.decode(encoding)
        except (UnicodeDecodeError, LookupError) as exc:
            raise ParseError(f"Could not decode response from {url}: {exc}") from exc

    def exists(self, url: str) -> bool:
        """Return True if a HEAD request for url succeeds."""
        try:
            resp = self.session.head(url, timeout=self.timeout_s, allow_redirects=True)
        except requests.RequestException as exc:
            logger.debug("Probe failed for %s: %s", url, exc)
            return False
        return resp.ok
