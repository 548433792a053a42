"""Tests for front matter parsing."""

import datetime

import pytest
from labdocs.core.frontmatter import FrontMatterError, split_front_matter


class TestSplitFrontMatter:
    """Tests for split_front_matter()."""

    def test__no_front_matter__returns_text_unchanged(self) -> None:
        """Text without a leading block is returned as the body."""
        data, body = split_front_matter("# Title\n\nBody.")

        assert data == {}
        assert body == "# Title\n\nBody."

    def test__front_matter__splits_data_and_body(self) -> None:
        """Leading YAML block is parsed and removed from the body."""
        text = "---\ntitle: Guide\ntags:\n  - a\n  - b\n---\n# Heading\n"

        data, body = split_front_matter(text)

        assert data == {"title": "Guide", "tags": ["a", "b"]}
        assert body == "# Heading\n"

    def test__empty_block__returns_empty_mapping(self) -> None:
        """Empty block parses to an empty mapping."""
        data, body = split_front_matter("---\n---\nBody")

        assert data == {}
        assert body == "Body"

    def test__crlf_line_endings__parsed(self) -> None:
        """Windows line endings are accepted around the delimiters."""
        data, body = split_front_matter("---\r\ntitle: Guide\r\n---\r\nBody")

        assert data == {"title": "Guide"}
        assert body == "Body"

    def test__unclosed_block__treated_as_body(self) -> None:
        """Missing closing delimiter means there is no front matter."""
        text = "---\ntitle: Guide\n"

        data, body = split_front_matter(text)

        assert data == {}
        assert body == text

    def test__four_dashes__not_a_delimiter(self) -> None:
        """Only a line of exactly three dashes opens a block."""
        text = "----\ntitle: Guide\n---\n"

        data, body = split_front_matter(text)

        assert data == {}
        assert body == text

    def test__yaml_date__parsed_as_date(self) -> None:
        """YAML scalars keep their native types."""
        data, _ = split_front_matter("---\ndate: 2024-01-15\n---\n")

        assert data == {"date": datetime.date(2024, 1, 15)}

    def test__invalid_yaml__raises_error(self) -> None:
        """Raise FrontMatterError for YAML syntax errors."""
        with pytest.raises(FrontMatterError, match="Invalid front matter"):
            split_front_matter("---\ntitle: [unclosed\n---\nBody")

    def test__non_mapping__raises_error(self) -> None:
        """Raise FrontMatterError when the block is not a mapping."""
        with pytest.raises(FrontMatterError, match="must be a mapping"):
            split_front_matter("---\n- a\n- b\n---\nBody")

    def test__error__is_value_error(self) -> None:
        """FrontMatterError is a ValueError."""
        assert issubclass(FrontMatterError, ValueError)
