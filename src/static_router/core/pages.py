"""
Canned response bodies served by the router.

HTML pages are fixed strings; the API payload is rebuilt on every call so the
timestamp reflects the time the request was handled.
"""
import json
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Optional

HOME_PAGE = """
      <html>
        <head>
          <title>Node.js HTTP Server</title>
        </head>
        <body>
          <h1>Welcome to our Node.js HTTP Server!</h1>
          <p>This is the homepage.</p>
          <ul>
            <li><a href="/about">About page</a></li>
            <li><a href="/api/data">API endpoint</a></li>
            <li><a href="/nonexistent">404 example</a></li>
          </ul>
        </body>
      </html>
    """

ABOUT_PAGE = "<h1>About Page</h1><p>This is a simple HTTP server built with Node.js</p>"

NOT_FOUND_PAGE = "<h1>404 Not Found</h1><p>The page you requested does not exist.</p>"

API_MESSAGE = "This is JSON data"

# Order is part of the payload
API_ENDPOINTS = ("/about", "/", "/api/data")

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def iso_timestamp(moment: datetime) -> str:
    """Format as ISO-8601 UTC with millisecond precision and a trailing Z."""
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_api_data(clock: Optional[Clock] = None) -> Dict[str, Any]:
    """Build the /api/data record for the current moment."""
    now = (clock or utc_now)()
    return {
        "message": API_MESSAGE,
        "timestamp": iso_timestamp(now),
        "endpoints": list(API_ENDPOINTS),
    }


def render_home(clock: Optional[Clock] = None) -> str:
    return HOME_PAGE


def render_about(clock: Optional[Clock] = None) -> str:
    return ABOUT_PAGE


def render_api_data(clock: Optional[Clock] = None) -> str:
    return json.dumps(build_api_data(clock), separators=(",", ":"))


def render_not_found(clock: Optional[Clock] = None) -> str:
    return NOT_FOUND_PAGE
