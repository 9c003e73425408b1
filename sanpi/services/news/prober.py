"""Illustration discovery by probing the site's image naming scheme."""

from __future__ import annotations

import logging
from typing import Sequence

from sanpi.config import Settings
from sanpi.services.news.client import PageClient
from sanpi.services.news.errors import NotFoundError
from sanpi.services.news.lister import list_articles
from sanpi.services.news.models import Article, Illustration, parse_slug_date

MAX_ARTICLES_TO_CHECK = 15
ILLUSTS_PER_ARTICLE = 3
MAX_ILLUSTRATIONS = 10

logger = logging.getLogger(__name__)


def illustration_url(image_base_url: str, year: str, month: str, slug: str, number: int) -> str:
    return f"{image_base_url.rstrip('/')}/{year}/{month}/{slug}/illust{number}.png"


def probe_illustrations(
    articles: Sequence[Article],
    client: PageClient,
    image_base_url: str,
    max_articles: int = MAX_ARTICLES_TO_CHECK,
    illusts_per_article: int = ILLUSTS_PER_ARTICLE,
    max_illustrations: int = MAX_ILLUSTRATIONS,
) -> list[Illustration]:
    """Probe illust1..N for the newest articles, one request at a time.

    Probing stops as soon as ``max_illustrations`` have been found; a failed
    probe just means the image is absent.
    """
    found: list[Illustration] = []
    for article in articles[:max_articles]:
        if len(found) >= max_illustrations:
            break
        slug_date = parse_slug_date(article.slug)
        year = slug_date.year if slug_date else ""
        month = slug_date.month if slug_date else ""
        published_date = slug_date.published_date if slug_date else ""

        for number in range(1, illusts_per_article + 1):
            if len(found) >= max_illustrations:
                break
            url = illustration_url(image_base_url, year, month, article.slug, number)
            logger.debug("Checking %s", url)
            if not client.exists(url):
                continue
            logger.info("Found illustration %s", url)
            found.append(
                Illustration(
                    image_url=url,
                    article_url=article.url,
                    article_title=article.title,
                    published_date=published_date,
                    illust_number=number,
                    sort_key=f"{article.sort_key}_{number}",
                )
            )

    found.sort(key=lambda item: item.sort_key, reverse=True)
    return found[:max_illustrations]


def discover_illustrations(client: PageClient, settings: Settings) -> list[Illustration]:
    """List articles, then probe for their illustrations.

    Raises NotFoundError when nothing turned up; listing failures propagate.
    """
    articles = list_articles(client, settings)
    illustrations = probe_illustrations(
        articles,
        client,
        image_base_url=settings.image_base_url,
        max_articles=settings.max_articles_to_check,
        illusts_per_article=settings.illusts_per_article,
        max_illustrations=settings.max_illustrations,
    )
    logger.info("Discovered %d illustrations", len(illustrations))
    if not illustrations:
        raise NotFoundError("No illustrations found")
    return illustrations
