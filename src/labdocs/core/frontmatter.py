"""Front matter parsing.

Splits a leading YAML block delimited by ``---`` lines from the Markdown
body that follows it.
"""

import re
from typing import Any

import yaml

FRONT_MATTER_PATTERN = re.compile(
    r"\A---[ \t]*\r?\n(?P<matter>.*?)^---[ \t]*\r?$\n?",
    re.DOTALL | re.MULTILINE,
)


class FrontMatterError(ValueError):
    """Front matter block is present but cannot be parsed."""


def split_front_matter(text: str) -> tuple[dict[str, Any], str]:
    """Split text into front matter data and body.

    Args:
        text: Full file contents

    Returns:
        Tuple of (front matter mapping, body). Text without a complete
        front matter block is returned unchanged with an empty mapping.

    Raises:
        FrontMatterError: If the block is not valid YAML or not a mapping
    """
    match = FRONT_MATTER_PATTERN.match(text)
    if match is None:
        return {}, text

    try:
        data = yaml.safe_load(match.group("matter"))
    except yaml.YAMLError as e:
        raise FrontMatterError(f"Invalid front matter: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise FrontMatterError(
            f"Front matter must be a mapping, got {type(data).__name__}"
        )

    return data, text[match.end() :]
