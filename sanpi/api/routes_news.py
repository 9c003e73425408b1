"""Routes exposing the article list and discovered illustrations."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from sanpi.config import Settings, get_settings
from sanpi.services.news.client import PageClient, SiteClient
from sanpi.services.news.errors import (
    NetworkError,
    NotFoundError,
    ParseError,
    RefreshInProgressError,
)
from sanpi.services.news.lister import list_articles
from sanpi.services.news.pipeline import refresh_guard
from sanpi.services.news.prober import discover_illustrations

logger = logging.getLogger(__name__)

router = APIRouter(tags=["news"])


class ArticleOut(BaseModel):
    url: str
    title: str
    slug: str
    sort_key: str


class IllustrationOut(BaseModel):
    image_url: str
    article_url: str
    article_title: str
    published_date: str
    illust_number: int
    sort_key: str


def get_site_client(settings: Annotated[Settings, Depends(get_settings)]) -> PageClient:
    return SiteClient(user_agent=settings.user_agent, timeout_s=settings.request_timeout_seconds)


@router.get("/articles", response_model=list[ArticleOut])
def articles(
    settings: Annotated[Settings, Depends(get_settings)],
    client: Annotated[PageClient, Depends(get_site_client)],
) -> list[ArticleOut]:
    """Articles from the listing page, newest first."""
    try:
        items = list_articles(client, settings)
    except (NetworkError, ParseError) as exc:
        logger.error("Article listing failed: %s", exc)
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc)) from exc
    return [ArticleOut(**vars(item)) for item in items]


@router.get("/illustrations", response_model=list[IllustrationOut])
def illustrations(
    settings: Annotated[Settings, Depends(get_settings)],
    client: Annotated[PageClient, Depends(get_site_client)],
) -> list[IllustrationOut]:
    """Up to ``max_illustrations`` article illustrations, newest first."""
    try:
        items = refresh_guard.run(discover_illustrations, client, settings)
    except RefreshInProgressError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except (NetworkError, ParseError) as exc:
        logger.error("Illustration discovery failed: %s", exc)
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc)) from exc
    return [IllustrationOut(**vars(item)) for item in items]
