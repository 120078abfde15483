"""Stub source written by ``pathkanri init``.

Kept as a module-level string so the scaffold ships with the package
and needs no data files.
"""

ROUTES_PY = '''\
"""Named routes for this project.

Build paths with ``registry.get_path("name", {...})`` and absolute URLs
with ``registry.get_full_path(...)``.
"""

from pathkanri import create_route_registry

ROUTES = {
    "home": "/",
    "example": "/example/{exampleId}/{slug}",
    "login": "/login",
    "mypage": "/mypage",
}

BASE_URL = ""

registry = create_route_registry(ROUTES, BASE_URL)
'''
