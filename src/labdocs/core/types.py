"""Core type definitions."""

from typing import NewType

# Ordered URL path segments identifying a document (e.g., ("modules", "intro"))
Slug = tuple[str, ...]

# URL path for routing (e.g., "/docs/guide", "/docs/modules/page")
# Distinct from filesystem Path to catch type mismatches
URLPath = NewType("URLPath", str)

DOCS_URL_PREFIX = "/docs"


def slug_to_url(slug: Slug) -> URLPath:
    """Build the site route for a slug."""
    return URLPath(f"{DOCS_URL_PREFIX}/{'/'.join(slug)}")


def url_to_slug(path: str) -> Slug:
    """Split a path into slug segments.

    Absolute site routes ("/docs/modules/page") lose the docs prefix,
    relative paths ("modules/page") are split as-is. Empty path yields an
    empty slug.
    """
    if path == DOCS_URL_PREFIX or path.startswith(DOCS_URL_PREFIX + "/"):
        path = path[len(DOCS_URL_PREFIX) :]
    stripped = path.strip("/")
    if not stripped:
        return ()
    return tuple(stripped.split("/"))
