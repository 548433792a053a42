"""Tests for slug and route helpers."""

from labdocs.core.types import slug_to_url, url_to_slug


class TestSlugToUrl:
    """Tests for slug_to_url()."""

    def test__root_slug__prefixes_docs(self) -> None:
        """Single segment maps under /docs."""
        assert slug_to_url(("PROGRESS",)) == "/docs/PROGRESS"

    def test__nested_slug__joins_segments(self) -> None:
        """Segments are joined with slashes."""
        assert slug_to_url(("modules", "module-template")) == (
            "/docs/modules/module-template"
        )


class TestUrlToSlug:
    """Tests for url_to_slug()."""

    def test__absolute_route__strips_prefix(self) -> None:
        """Absolute /docs routes lose the prefix."""
        assert url_to_slug("/docs/modules/intro") == ("modules", "intro")

    def test__relative_path__splits_as_is(self) -> None:
        """Relative paths keep every segment."""
        assert url_to_slug("docs/guide") == ("docs", "guide")

    def test__trailing_slash__ignored(self) -> None:
        """Surrounding slashes are stripped."""
        assert url_to_slug("guide/") == ("guide",)

    def test__empty_path__returns_empty_slug(self) -> None:
        """Empty path and bare prefix both yield an empty slug."""
        assert url_to_slug("") == ()
        assert url_to_slug("/docs") == ()
        assert url_to_slug("/docs/") == ()

    def test__double_slash__keeps_empty_segment(self) -> None:
        """Empty inner segments are preserved for the store to reject."""
        assert url_to_slug("a//b") == ("a", "", "b")

    def test__round_trip__preserves_slug(self) -> None:
        """slug_to_url and url_to_slug are inverse for valid slugs."""
        slug = ("tutorial", "01-data-fundamentals")

        assert url_to_slug(slug_to_url(slug)) == slug
