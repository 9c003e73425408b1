"""Title normalization helpers."""

from __future__ import annotations


def clean_title(text: str) -> str:
    """Trim a headline whose entities the HTML parser already decoded."""
    cleaned = text.replace("\xa0", " ")
    return cleaned.strip()
