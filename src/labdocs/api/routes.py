"""Routes API endpoint.

Lists every document route for static pre-rendering.
"""

from aiohttp import web

from labdocs.app_keys import store_key
from labdocs.core.types import slug_to_url


def create_routes_routes() -> list[web.RouteDef]:
    return [web.get("/api/routes", get_routes)]


async def get_routes(request: web.Request) -> web.Response:
    store = request.app[store_key]
    return web.json_response(
        {"routes": [slug_to_url(slug) for slug in store.list_all_slugs()]},
    )
