"""Document store for Markdown sources on disk.

Resolves slugs to Markdown files under the content root, parses their
front matter and derives page titles. Files are read fresh on every call.
"""

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from labdocs.core.frontmatter import FrontMatterError, split_front_matter
from labdocs.core.types import Slug

logger = logging.getLogger(__name__)

DEFAULT_SECTIONS = ("modules", "tutorial")
UNTITLED = "Untitled"
MARKDOWN_SUFFIX = ".md"

_H1_PATTERN = re.compile(r"^#\s+(.+)$", re.MULTILINE)


@dataclass(frozen=True)
class Document:
    """Markdown document loaded from the content root."""

    slug: Slug
    content: str
    title: str
    source_path: Path
    data: dict[str, Any] = field(default_factory=dict)
    # Modification time of source_path at load time
    mtime: float = 0.0


class DocumentStore:
    """Access Markdown documents by slug.

    Root-level files map to one-segment slugs, files inside the configured
    section directories map to two-segment slugs.
    """

    __slots__ = ("_sections", "_source_dir")

    def __init__(
        self,
        source_dir: Path,
        sections: tuple[str, ...] | list[str] = DEFAULT_SECTIONS,
    ) -> None:
        """Initialize document store.

        Args:
            source_dir: Root directory containing Markdown sources
            sections: Subdirectories of source_dir scanned by list_all_slugs()
        """
        self._source_dir = source_dir
        self._sections = tuple(sections)

    @property
    def source_dir(self) -> Path:
        """Root directory containing Markdown sources."""
        return self._source_dir

    @property
    def sections(self) -> tuple[str, ...]:
        """Subdirectories scanned for section documents."""
        return self._sections

    def list_all_slugs(self) -> list[Slug]:
        """Enumerate slugs of every Markdown file in the content root.

        Root files come first, then each section in configured order.
        Unreadable directories yield an empty list.

        Returns:
            List of slugs for static route generation
        """
        slugs: list[Slug] = []
        try:
            for name in self._markdown_stems(self._source_dir):
                slugs.append((name,))

            for section in self._sections:
                section_dir = self._source_dir / section
                if not section_dir.is_dir():
                    continue
                for name in self._markdown_stems(section_dir):
                    slugs.append((section, name))
        except OSError:
            logger.warning(
                "Failed to enumerate documents in %s",
                self._source_dir,
                exc_info=True,
            )
            return []

        return slugs

    def resolve_source_path(self, slug: Slug | list[str]) -> Path | None:
        """Resolve slug to the expected Markdown file path.

        Args:
            slug: Path segments (e.g., ("modules", "intro"))

        Returns:
            Path to the Markdown file (which may not exist), or None if the
            slug is empty or contains invalid segments
        """
        if not slug or not all(self._is_valid_segment(s) for s in slug):
            return None
        *dirs, name = slug
        return self._source_dir.joinpath(*dirs, f"{name}{MARKDOWN_SUFFIX}")

    def load_document(self, slug: Slug | list[str]) -> Document | None:
        """Load and parse the document for a slug.

        Args:
            slug: Path segments identifying the document

        Returns:
            Document, or None if the file is missing, unreadable, or has
            malformed front matter
        """
        source_path = self.resolve_source_path(slug)
        if source_path is None:
            logger.debug("Rejected slug %r", slug)
            return None

        try:
            if not source_path.is_file():
                return None
            text = source_path.read_text(encoding="utf-8")
            mtime = source_path.stat().st_mtime
            data, content = split_front_matter(text)
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError, FrontMatterError):
            logger.warning("Failed to load document %s", source_path, exc_info=True)
            return None

        return Document(
            slug=tuple(slug),
            content=content,
            title=extract_title(data, content),
            source_path=source_path,
            data=data,
            mtime=mtime,
        )

    def _markdown_stems(self, directory: Path) -> list[str]:
        return sorted(
            entry.name.removesuffix(MARKDOWN_SUFFIX)
            for entry in directory.iterdir()
            if entry.name.endswith(MARKDOWN_SUFFIX) and entry.is_file()
        )

    def _is_valid_segment(self, segment: str) -> bool:
        if segment in ("", ".", ".."):
            return False
        return "/" not in segment and "\\" not in segment and "\x00" not in segment


def extract_title(data: dict[str, Any], content: str) -> str:
    """Derive a document title.

    Front matter title wins, then the first H1 heading in the body.
    """
    title = data.get("title")
    if title:
        return str(title)

    match = _H1_PATTERN.search(content)
    if match:
        return match.group(1).strip()

    return UNTITLED
