"""Shared test fixtures."""

from pathlib import Path

import pytest
from labdocs.config import Config, DocsConfig, RenderConfig, ServerConfig, SiteConfig


@pytest.fixture
def docs_dir(tmp_path: Path) -> Path:
    """Create an empty content root."""
    docs = tmp_path / "docs"
    docs.mkdir(exist_ok=True)
    return docs


@pytest.fixture
def test_config(docs_dir: Path) -> Config:
    """Create a test configuration pointing at docs_dir."""
    return Config(
        server=ServerConfig(),
        docs=DocsConfig(source_dir=docs_dir),
        render=RenderConfig(),
        site=SiteConfig(),
    )
