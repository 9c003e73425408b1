"""Typed models for listed articles and discovered illustrations."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

SLUG_DATE_PATTERN = re.compile(r"^(\d{2})(\d{2})(\d{2})(\d{2})")


@dataclass
class SlugDate:
    year: str
    month: str
    day: str
    sequence: str

    @property
    def sort_key(self) -> str:
        return f"{self.year}{self.month}{self.day}{self.sequence}"

    @property
    def published_date(self) -> str:
        return f"{self.year}年{self.month}月{self.day}日"


def parse_slug_date(slug: str) -> Optional[SlugDate]:
    """Decode the yymmddnn prefix of an article slug, if it has one."""
    match = SLUG_DATE_PATTERN.match(slug)
    if not match:
        return None
    yy, month, day, sequence = match.groups()
    return SlugDate(year=f"20{yy}", month=month, day=day, sequence=sequence)


def sort_key_for_slug(slug: str) -> str:
    slug_date = parse_slug_date(slug)
    return slug_date.sort_key if slug_date else ""


@dataclass
class Article:
    url: str
    title: str
    slug: str
    sort_key: str


@dataclass
class Illustration:
    image_url: str
    article_url: str
    article_title: str
    published_date: str
    illust_number: int
    sort_key: str
