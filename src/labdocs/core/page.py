"""Page metadata derived from a loaded document."""

import math
from dataclasses import dataclass, field
from typing import Any

from labdocs.core.documents import Document
from labdocs.core.navigation import find_item_by_path
from labdocs.core.types import URLPath, slug_to_url

SECTION_CATEGORIES: dict[str, str] = {
    "modules": "模組規格",
    "tutorial": "教學材料",
}
DEFAULT_CATEGORY = "主要文檔"

CHARACTERS_PER_MINUTE = 1000


@dataclass(frozen=True)
class PageMeta:
    """Header information shown above a rendered document."""

    title: str
    path: URLPath
    category: str
    reading_time: int
    word_count: int
    breadcrumbs: list[str] = field(default_factory=list)
    front_matter: dict[str, Any] = field(default_factory=dict)
    active_item: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "title": self.title,
            "path": self.path,
            "category": self.category,
            "reading_time": self.reading_time,
            "word_count": self.word_count,
            "breadcrumbs": self.breadcrumbs,
            "front_matter": self.front_matter,
            "active_item": self.active_item,
        }


def build_page_meta(document: Document, site_title: str) -> PageMeta:
    """Build page header metadata for a document.

    Args:
        document: Loaded document
        site_title: Root breadcrumb label

    Returns:
        PageMeta with reading estimates, category and breadcrumbs
    """
    slug = document.slug
    path = slug_to_url(slug)

    breadcrumbs = [site_title]
    if len(slug) > 1:
        breadcrumbs.append(slug[0])

    nav_item = find_item_by_path(path)

    return PageMeta(
        title=document.title,
        path=path,
        category=SECTION_CATEGORIES.get(slug[0], DEFAULT_CATEGORY),
        reading_time=math.ceil(len(document.content) / CHARACTERS_PER_MINUTE),
        word_count=len(document.content.split()),
        breadcrumbs=breadcrumbs,
        front_matter=document.data,
        active_item=nav_item.id if nav_item is not None else None,
    )
