"""aiohttp server for Labdocs.

Application factory and route registration.
"""

from aiohttp import web

from labdocs.api.navigation import create_navigation_routes
from labdocs.api.pages import create_pages_routes
from labdocs.api.routes import create_routes_routes
from labdocs.app_keys import config_key, renderer_key, store_key
from labdocs.config import Config
from labdocs.core.documents import DocumentStore
from labdocs.core.renderer import MarkdownRenderer


def create_app(config: Config) -> web.Application:
    """Create aiohttp application.

    Args:
        config: Application configuration

    Returns:
        Configured aiohttp application
    """
    app = web.Application()

    app[config_key] = config
    app[store_key] = DocumentStore(config.docs.source_dir, config.docs.sections)
    app[renderer_key] = MarkdownRenderer(escape_html=config.render.escape_html)

    app.router.add_routes(create_pages_routes())
    app.router.add_routes(create_navigation_routes())
    app.router.add_routes(create_routes_routes())

    return app


def run_server(config: Config) -> None:
    """Run the server.

    Args:
        config: Application configuration
    """
    app = create_app(config)
    web.run_app(app, host=config.server.host, port=config.server.port)
