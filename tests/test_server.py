"""Tests for server module."""

from dataclasses import replace

from labdocs.app_keys import config_key, renderer_key, store_key
from labdocs.config import Config, DocsConfig, RenderConfig
from labdocs.server import create_app


class TestCreateApp:
    """Tests for create_app()."""

    def test__valid_config__returns_configured_app(self, test_config: Config) -> None:
        """Create app with valid configuration."""
        app = create_app(test_config)

        assert app[config_key] is test_config
        assert app[store_key].source_dir == test_config.docs.source_dir
        assert app[store_key].sections == ("modules", "tutorial")
        assert app[renderer_key].escape_html is False

    def test__config_options__passed_to_components(self, test_config: Config) -> None:
        """Sections and escaping follow the configuration."""
        config = replace(
            test_config,
            docs=DocsConfig(source_dir=test_config.docs.source_dir, sections=["notes"]),
            render=RenderConfig(escape_html=True),
        )

        app = create_app(config)

        assert app[store_key].sections == ("notes",)
        assert app[renderer_key].escape_html is True
