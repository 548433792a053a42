"""Configuration management for Labdocs.

Supports TOML configuration format with auto-discovery.
"""

import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Self

from labdocs.core.documents import DEFAULT_SECTIONS

CONFIG_FILENAME = "labdocs.toml"


@dataclass
class ServerConfig:
    """Server configuration."""

    host: str = "127.0.0.1"
    port: int = 8080


@dataclass
class DocsConfig:
    """Documentation source configuration."""

    source_dir: Path = field(default_factory=lambda: Path("docs"))
    sections: list[str] = field(default_factory=lambda: list(DEFAULT_SECTIONS))


@dataclass
class RenderConfig:
    """Markdown rendering configuration."""

    escape_html: bool = False


@dataclass
class SiteConfig:
    """Site presentation configuration."""

    title: str = "Data Science Lab"


@dataclass
class Config:
    """Application configuration."""

    server: ServerConfig
    docs: DocsConfig
    render: RenderConfig
    site: SiteConfig
    config_path: Path | None = None

    @classmethod
    def load(cls, config_path: Path | None = None) -> Self:
        """Load configuration from file.

        If config_path is provided, loads from that file.
        Otherwise, searches for labdocs.toml in current directory and parents.

        Args:
            config_path: Optional explicit path to config file

        Returns:
            Config instance with defaults for missing sections

        Raises:
            FileNotFoundError: If explicit config_path doesn't exist
            ValueError: If configuration is invalid
        """
        if config_path is not None:
            if not config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            return cls._load_from_file(config_path)

        discovered_path = cls._discover_config()
        if discovered_path is None:
            return cls._default()

        return cls._load_from_file(discovered_path)

    @classmethod
    def _discover_config(cls) -> Path | None:
        """Search for config file in current directory and parents."""
        current = Path.cwd()
        while True:
            candidate = current / CONFIG_FILENAME
            if candidate.exists():
                return candidate
            parent = current.parent
            if parent == current:
                return None
            current = parent

    @classmethod
    def _default(cls) -> Self:
        return cls(
            server=ServerConfig(),
            docs=DocsConfig(),
            render=RenderConfig(),
            site=SiteConfig(),
        )

    @classmethod
    def _load_from_file(cls, path: Path) -> Self:
        """Load configuration from a specific file.

        Args:
            path: Path to TOML configuration file

        Returns:
            Config instance

        Raises:
            ValueError: If configuration is invalid
        """
        with path.open("rb") as f:
            try:
                data = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ValueError(f"Invalid TOML in {path}: {e}") from e

        config_dir = path.parent

        return cls(
            server=cls._parse_server(data.get("server")),
            docs=cls._parse_docs(data.get("docs"), config_dir),
            render=cls._parse_render(data.get("render")),
            site=cls._parse_site(data.get("site")),
            config_path=path,
        )

    @classmethod
    def _parse_server(cls, data: object) -> ServerConfig:
        if data is None:
            return ServerConfig()

        if not isinstance(data, dict):
            raise ValueError("server section must be a dictionary")

        host = data.get("host", "127.0.0.1")
        if not isinstance(host, str):
            raise ValueError("server.host must be a string")

        port = data.get("port", 8080)
        if not isinstance(port, int) or isinstance(port, bool):
            raise ValueError("server.port must be an integer")

        return ServerConfig(host=host, port=port)

    @classmethod
    def _parse_docs(cls, data: object, config_dir: Path) -> DocsConfig:
        """Parse docs configuration section.

        Args:
            data: Raw docs section data
            config_dir: Directory containing config file (for relative paths)

        Returns:
            DocsConfig instance
        """
        if data is None:
            return DocsConfig(source_dir=config_dir / "docs")

        if not isinstance(data, dict):
            raise ValueError("docs section must be a dictionary")

        source_dir = data.get("source_dir", "docs")
        if not isinstance(source_dir, str):
            raise ValueError("docs.source_dir must be a string")

        sections_raw = data.get("sections", list(DEFAULT_SECTIONS))
        if not isinstance(sections_raw, list):
            raise ValueError("docs.sections must be a list")
        sections: list[str] = []
        for item in sections_raw:
            if not isinstance(item, str):
                raise ValueError("docs.sections items must be strings")
            sections.append(item)

        return DocsConfig(source_dir=config_dir / source_dir, sections=sections)

    @classmethod
    def _parse_render(cls, data: object) -> RenderConfig:
        if data is None:
            return RenderConfig()

        if not isinstance(data, dict):
            raise ValueError("render section must be a dictionary")

        escape_html = data.get("escape_html", False)
        if not isinstance(escape_html, bool):
            raise ValueError("render.escape_html must be a boolean")

        return RenderConfig(escape_html=escape_html)

    @classmethod
    def _parse_site(cls, data: object) -> SiteConfig:
        if data is None:
            return SiteConfig()

        if not isinstance(data, dict):
            raise ValueError("site section must be a dictionary")

        title = data.get("title", "Data Science Lab")
        if not isinstance(title, str):
            raise ValueError("site.title must be a string")

        return SiteConfig(title=title)

    def with_overrides(
        self,
        *,
        host: str | None = None,
        port: int | None = None,
        source_dir: Path | None = None,
        escape_html: bool | None = None,
    ) -> Self:
        """Create a new Config with CLI overrides applied.

        Only non-None values override the existing config. The original
        Config is not modified.

        Args:
            host: Override server.host
            port: Override server.port
            source_dir: Override docs.source_dir
            escape_html: Override render.escape_html

        Returns:
            New Config instance with overrides applied
        """
        server = self.server
        if host is not None or port is not None:
            server = replace(
                self.server,
                host=host if host is not None else self.server.host,
                port=port if port is not None else self.server.port,
            )

        docs = self.docs
        if source_dir is not None:
            docs = replace(self.docs, source_dir=source_dir)

        render = self.render
        if escape_html is not None:
            render = replace(self.render, escape_html=escape_html)

        return replace(self, server=server, docs=docs, render=render)
