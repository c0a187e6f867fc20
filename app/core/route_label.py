from __future__ import annotations

from starlette.requests import Request


def safe_route_label(request: Request) -> str:
    """
    Return the matched route template (e.g. /api/first-call) for logs and metrics.

    Unmatched requests (404) map to "unmatched" so raw paths never become labels.
    """

    route = request.scope.get("route")
    path = getattr(route, "path", None)
    if isinstance(path, str) and path:
        return path
    return "unmatched"
