"""Tests for navigation and routes API endpoints."""

from pathlib import Path
from typing import Any

import pytest
from labdocs.config import Config
from labdocs.server import create_app


class TestGetNavigation:
    """Tests for GET /api/navigation."""

    @pytest.mark.asyncio
    async def test__returns_all_sections(
        self,
        test_config: Config,
        aiohttp_client: Any,
    ) -> None:
        """Return every sidebar section with its items."""
        client = await aiohttp_client(create_app(test_config))
        response = await client.get("/api/navigation")

        assert response.status == 200
        data = await response.json()
        assert [section["id"] for section in data["sections"]] == [
            "main",
            "modules",
            "tutorials",
        ]
        first_item = data["sections"][0]["items"][0]
        assert first_item == {
            "id": "master-plan",
            "title": "總體計劃",
            "path": "/docs/00-Master-Plan",
            "folder": "data-science-lab",
        }


class TestGetNavigationSection:
    """Tests for GET /api/navigation/{section_id}."""

    @pytest.mark.asyncio
    async def test__known_section__returns_section(
        self,
        test_config: Config,
        aiohttp_client: Any,
    ) -> None:
        """Return a single section."""
        client = await aiohttp_client(create_app(test_config))
        response = await client.get("/api/navigation/tutorials")

        assert response.status == 200
        data = await response.json()
        assert data["id"] == "tutorials"
        assert data["title"] == "Tutorials"
        assert len(data["items"]) == 7

    @pytest.mark.asyncio
    async def test__unknown_section__returns_404(
        self,
        test_config: Config,
        aiohttp_client: Any,
    ) -> None:
        """Return 404 for unknown section ids."""
        client = await aiohttp_client(create_app(test_config))
        response = await client.get("/api/navigation/missing")

        assert response.status == 404
        data = await response.json()
        assert data["error"] == "Section not found"
        assert data["section_id"] == "missing"


class TestGetRoutes:
    """Tests for GET /api/routes."""

    @pytest.mark.asyncio
    async def test__content_tree__lists_routes(
        self,
        docs_dir: Path,
        test_config: Config,
        aiohttp_client: Any,
    ) -> None:
        """Return a route for every enumerated document."""
        (docs_dir / "PROGRESS.md").write_text("# Progress")
        tutorial = docs_dir / "tutorial"
        tutorial.mkdir()
        (tutorial / "README.md").write_text("# Tutorials")

        client = await aiohttp_client(create_app(test_config))
        response = await client.get("/api/routes")

        assert response.status == 200
        data = await response.json()
        assert data["routes"] == ["/docs/PROGRESS", "/docs/tutorial/README"]

    @pytest.mark.asyncio
    async def test__missing_source_dir__returns_empty(
        self,
        tmp_path: Path,
        test_config: Config,
        aiohttp_client: Any,
    ) -> None:
        """Unreadable content root yields no routes."""
        config = test_config.with_overrides(source_dir=tmp_path / "missing")

        client = await aiohttp_client(create_app(config))
        response = await client.get("/api/routes")

        assert response.status == 200
        data = await response.json()
        assert data["routes"] == []
