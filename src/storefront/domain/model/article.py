"""Journal article shown on the article screen. Read-only content."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Article:
    id: str
    title: str
    date: str
    excerpt: str
    image_url: str = ""
    content: str = ""
