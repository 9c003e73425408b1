"""Article listing for the Game Sanpi front page."""

from __future__ import annotations

import logging
import re

from bs4 import BeautifulSoup

from sanpi.config import Settings
from sanpi.services.news.cleaner import clean_title
from sanpi.services.news.client import PageClient
from sanpi.services.news.models import Article, sort_key_for_slug

ARTICLE_HREF_PATTERN = re.compile(r"^/news/([a-zA-Z0-9-]+)$")
MIN_TITLE_LENGTH = 5
NAVIGATION_TITLES = frozenset({"カテゴリー", "人気記事", "ゲーム賛否", "人気タグ"})
# Fragments that show up when sidebar chrome or stray markup lands in an <h3>.
BLOCKED_TITLE_FRAGMENTS = ("span", "記事", "タグ", "カテゴリ")

logger = logging.getLogger(__name__)


def parse_listing(html: str) -> list[tuple[str, str]]:
    """Return (slug, raw title) pairs for every article card, in document order.

    A card is an ``<a href="/news/<slug>">`` that wraps an ``<h3>`` headline.
    """
    soup = BeautifulSoup(html, "html.parser")
    results: list[tuple[str, str]] = []
    for a in soup.find_all("a", href=True):
        match = ARTICLE_HREF_PATTERN.match(str(a.get("href", "")))
        if not match:
            continue
        heading = a.find("h3")
        if heading is None:
            continue
        results.append((match.group(1), heading.get_text()))
    return results


def is_article_title(title: str) -> bool:
    if len(title) <= MIN_TITLE_LENGTH:
        return False
    if title in NAVIGATION_TITLES:
        return False
    return not any(fragment in title for fragment in BLOCKED_TITLE_FRAGMENTS)


def article_url(article_base_url: str, slug: str) -> str:
    return f"{article_base_url.rstrip('/')}/{slug}"


def build_articles(html: str, article_base_url: str) -> list[Article]:
    """Turn listing markup into unique articles sorted newest first."""
    articles: list[Article] = []
    seen_urls: set[str] = set()
    for slug, raw_title in parse_listing(html):
        url = article_url(article_base_url, slug)
        if url in seen_urls:
            continue
        seen_urls.add(url)

        title = clean_title(raw_title)
        if not is_article_title(title):
            continue
        articles.append(Article(url=url, title=title, slug=slug, sort_key=sort_key_for_slug(slug)))

    return sorted(articles, key=lambda item: item.sort_key, reverse=True)


def list_articles(client: PageClient, settings: Settings) -> list[Article]:
    """Fetch the listing page and return its articles, newest first."""
    html = client.fetch_text(settings.listing_url)
    articles = build_articles(html, settings.article_base_url)
    logger.info("Found %d articles on %s", len(articles), settings.listing_url)
    return articles
