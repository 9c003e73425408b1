from pathlib import Path
from typing import Callable, Iterable

import pytest

from sanpi.config import Settings

FIXTURES = Path(__file__).parent / "fixtures"

LISTING_URL = "https://www.gamesanpi.com/"
IMAGE_BASE = "https://www.gamesanpi.com/images/articles"


class FakeSite:
    """In-memory stand-in for SiteClient that records every request."""

    def __init__(
        self,
        pages: dict[str, str] | None = None,
        existing: Iterable[str] = (),
        error: Exception | None = None,
    ) -> None:
        self.pages = pages or {}
        self.existing = set(existing)
        self.error = error
        self.fetched: list[str] = []
        self.probed: list[str] = []

    def fetch_text(self, url: str) -> str:
        self.fetched.append(url)
        if self.error is not None:
            raise self.error
        return self.pages[url]

    def exists(self, url: str) -> bool:
        self.probed.append(url)
        return url in self.existing


def render_listing(cards: Iterable[tuple[str, str]]) -> str:
    body = "\n".join(
        f'<a href="/news/{slug}" class="card"><h3>{title}</h3></a>' for slug, title in cards
    )
    return f"<html><body><main>{body}</main></body></html>"


def image_url(slug: str, number: int) -> str:
    return f"{IMAGE_BASE}/20{slug[0:2]}/{slug[2:4]}/{slug}/illust{number}.png"


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def load_fixture() -> Callable[[str], str]:
    def _load(name: str) -> str:
        return (FIXTURES / name).read_text(encoding="utf-8")

    return _load


@pytest.fixture
def fake_site() -> type[FakeSite]:
    return FakeSite


@pytest.fixture
def listing() -> Callable[[Iterable[tuple[str, str]]], str]:
    return render_listing


@pytest.fixture
def illust_url() -> Callable[[str, int], str]:
    return image_url
