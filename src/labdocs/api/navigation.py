"""Navigation API endpoints.

Serves the static sidebar table and individual sections.
"""

from aiohttp import web

from labdocs.core.navigation import NAVIGATION, find_section_by_id


def create_navigation_routes() -> list[web.RouteDef]:
    return [
        web.get("/api/navigation", get_navigation),
        web.get("/api/navigation/{section_id}", get_navigation_section),
    ]


async def get_navigation(request: web.Request) -> web.Response:
    return web.json_response(
        {"sections": [section.to_dict() for section in NAVIGATION]},
    )


async def get_navigation_section(request: web.Request) -> web.Response:
    section_id = request.match_info["section_id"]
    section = find_section_by_id(section_id)
    if section is None:
        return web.json_response(
            {"error": "Section not found", "section_id": section_id},
            status=404,
        )
    return web.json_response(section.to_dict())
