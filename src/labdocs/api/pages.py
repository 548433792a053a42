"""Pages API endpoint.

Loads a document by slug and returns JSON with page metadata and the
rendered HTML fragment.
"""

import json
from datetime import UTC, datetime
from email.utils import formatdate
from functools import partial
from hashlib import md5

from aiohttp import web

from labdocs.app_keys import config_key, renderer_key, store_key
from labdocs.core.page import build_page_meta
from labdocs.core.types import url_to_slug

# Front matter may hold YAML dates and other non-JSON scalars
_dumps = partial(json.dumps, default=str, ensure_ascii=False)


def create_pages_routes() -> list[web.RouteDef]:
    return [
        web.get("/api/pages/{path:.*}", get_page),
    ]


async def get_page(request: web.Request) -> web.Response:
    path = request.match_info["path"]
    store = request.app[store_key]
    renderer = request.app[renderer_key]
    config = request.app[config_key]

    document = store.load_document(url_to_slug(path))
    if document is None:
        return web.json_response(
            {"error": "Page not found", "path": path},
            status=404,
        )

    html = renderer.render(document.content)
    meta = build_page_meta(document, config.site.title)
    last_modified = datetime.fromtimestamp(document.mtime, tz=UTC)

    response_data = {
        "meta": {
            **meta.to_dict(),
            "last_modified": last_modified.isoformat(),
        },
        "content": html,
    }
    etag = _compute_etag(html, _dumps(response_data["meta"], sort_keys=True))

    if request.headers.get("If-None-Match") == etag:
        return web.Response(status=304)

    return web.json_response(
        response_data,
        dumps=_dumps,
        headers={
            "ETag": etag,
            "Last-Modified": formatdate(document.mtime, usegmt=True),
            "Cache-Control": "private, max-age=60",
        },
    )


def _compute_etag(*parts: str) -> str:
    # First 16 hex chars (64 bits) are enough for cache validation
    digest = md5(usedforsecurity=False)
    for part in parts:
        digest.update(part.encode("utf-8"))
        digest.update(b"\0")
    return f'"{digest.hexdigest()[:16]}"'
