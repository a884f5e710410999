"""
URL dispatch shared by the FastAPI and stdlib servers.

Matching is exact string equality on the raw request URL (query string
included), checked in order, with the not-found reply as the default. The
request method is never looked at.
"""
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from .pages import (
    Clock,
    render_about,
    render_api_data,
    render_home,
    render_not_found,
)

HTML = "text/html"
JSON = "application/json"


@dataclass(frozen=True)
class Route:
    path: str
    content_type: str
    render: Callable[[Optional[Clock]], str]


@dataclass(frozen=True)
class Reply:
    """Status, content type and body for exactly one response."""
    status: int
    content_type: str
    body: str

    def encoded(self) -> bytes:
        return self.body.encode("utf-8")


ROUTES: Tuple[Route, ...] = (
    Route("/", HTML, render_home),
    Route("/about", HTML, render_about),
    Route("/api/data", JSON, render_api_data),
)

NOT_FOUND = Route("", HTML, render_not_found)


def match_route(url: str) -> Optional[Route]:
    """Return the route whose path equals url, or None."""
    for route in ROUTES:
        if route.path == url:
            return route
    return None


def dispatch(url: str, clock: Optional[Clock] = None) -> Reply:
    """Produce the reply for a raw request URL. Never raises."""
    route = match_route(url)
    if route is None:
        return Reply(404, NOT_FOUND.content_type, NOT_FOUND.render(clock))
    return Reply(200, route.content_type, route.render(clock))
