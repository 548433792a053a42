"""Sidebar navigation table.

Static sections and items rendered by the sidebar. Item paths are unique
across all sections and are matched exactly against the active route.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import NotRequired, TypedDict

from labdocs.core.types import URLPath


class NavItemDict(TypedDict):
    """Dictionary representation of a navigation item."""

    id: str
    title: str
    path: str
    folder: NotRequired[str]


class NavSectionDict(TypedDict):
    """Dictionary representation of a navigation section."""

    id: str
    title: str
    description: str
    items: list[NavItemDict]


@dataclass(frozen=True)
class NavItem:
    """Link to a document in the sidebar."""

    id: str
    title: str
    path: URLPath
    folder: str | None = None

    def to_dict(self) -> NavItemDict:
        """Convert to dictionary for JSON serialization."""
        result: NavItemDict = {"id": self.id, "title": self.title, "path": self.path}
        if self.folder is not None:
            result["folder"] = self.folder
        return result


@dataclass(frozen=True)
class NavSection:
    """Expandable group of sidebar items."""

    id: str
    title: str
    description: str
    items: tuple[NavItem, ...]

    def to_dict(self) -> NavSectionDict:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "items": [item.to_dict() for item in self.items],
        }


def _item(item_id: str, title: str, path: str, folder: str) -> NavItem:
    return NavItem(id=item_id, title=title, path=URLPath(path), folder=folder)


NAVIGATION: tuple[NavSection, ...] = (
    NavSection(
        id="main",
        title="Data Science Lab",
        description="商業數據科學實戰學習實驗室總覽",
        items=(
            _item("master-plan", "總體計劃", "/docs/00-Master-Plan", "data-science-lab"),
            _item(
                "learning-roadmap",
                "學習路線圖",
                "/docs/01-Learning-Roadmap",
                "data-science-lab",
            ),
            _item(
                "concepts",
                "數據科學概念",
                "/docs/02-Data-Science-Concepts",
                "data-science-lab",
            ),
            _item("module-03", "Module 03 概覽", "/docs/MODULE-03", "data-science-lab"),
            _item("module-04", "Module 04 概覽", "/docs/MODULE-04", "data-science-lab"),
            _item("progress", "開發進度", "/docs/PROGRESS", "data-science-lab"),
            _item(
                "progress-tracking",
                "進度追蹤",
                "/docs/progress-tracking",
                "data-science-lab",
            ),
            _item(
                "technical-notes",
                "技術筆記",
                "/docs/technical-notes",
                "data-science-lab",
            ),
        ),
    ),
    NavSection(
        id="modules",
        title="Modules",
        description="詳細模組規格和實作指南",
        items=(
            _item(
                "module-template",
                "模組模板",
                "/docs/modules/module-template",
                "modules",
            ),
            _item(
                "module-01",
                "KPI 實驗室",
                "/docs/modules/module-01-kpi-lab",
                "modules",
            ),
            _item(
                "module-02",
                "趨勢分解器",
                "/docs/modules/module-02-trend-decomposer",
                "modules",
            ),
            _item(
                "module-03",
                "客戶行為分析",
                "/docs/modules/module-03-customer-behavior-lab",
                "modules",
            ),
            _item(
                "module-04",
                "產品分布分析",
                "/docs/modules/module-04-product-distribution-lab",
                "modules",
            ),
            _item(
                "module-05",
                "客戶分群實驗",
                "/docs/modules/module-05-customer-segmentation-lab",
                "modules",
            ),
            _item(
                "module-06",
                "市場籃分析",
                "/docs/modules/module-06-market-basket-analyzer",
                "modules",
            ),
        ),
    ),
    NavSection(
        id="tutorials",
        title="Tutorials",
        description="深入教學材料和理論基礎",
        items=(
            _item("tutorial-readme", "教程說明", "/docs/tutorial/README", "tutorial"),
            _item(
                "data-fundamentals",
                "數據基礎",
                "/docs/tutorial/01-data-fundamentals",
                "tutorial",
            ),
            _item(
                "time-series",
                "時間序列分析",
                "/docs/tutorial/02-time-series-analysis",
                "tutorial",
            ),
            _item(
                "customer-behavior",
                "客戶行為分析",
                "/docs/tutorial/03-customer-behavior-analytics",
                "tutorial",
            ),
            _item(
                "product-distribution",
                "產品分布分析",
                "/docs/tutorial/04-product-distribution-analytics",
                "tutorial",
            ),
            _item(
                "customer-segmentation",
                "客戶分群分析",
                "/docs/tutorial/05-customer-segmentation-analytics",
                "tutorial",
            ),
            _item(
                "market-basket",
                "市場籃分析",
                "/docs/tutorial/06-market-basket-analytics",
                "tutorial",
            ),
        ),
    ),
)


def find_item_by_id(
    item_id: str,
    sections: Iterable[NavSection] = NAVIGATION,
) -> NavItem | None:
    """Find the first item with the given id.

    Item ids may repeat across sections; the earliest section wins.
    """
    for section in sections:
        for item in section.items:
            if item.id == item_id:
                return item
    return None


def find_section_by_id(
    section_id: str,
    sections: Iterable[NavSection] = NAVIGATION,
) -> NavSection | None:
    """Find a section by id."""
    for section in sections:
        if section.id == section_id:
            return section
    return None


def find_item_by_path(
    path: str,
    sections: Iterable[NavSection] = NAVIGATION,
) -> NavItem | None:
    """Find the item whose path exactly matches the active route."""
    for section in sections:
        for item in section.items:
            if item.path == path:
                return item
    return None
