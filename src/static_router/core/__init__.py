# Core shared modules for both FastAPI and stdlib servers
from .config import Config, setup_logging
from .diagnostics import (
    ConsoleSink,
    DiagnosticSink,
    LoggingSink,
    MemorySink,
    NullSink,
    log_listening,
    log_request,
    make_sink,
    normalize_headers,
)
from .pages import build_api_data, iso_timestamp, utc_now
from .routes import ROUTES, Reply, Route, dispatch, match_route

__all__ = [
    # Config
    "Config",
    "setup_logging",
    # Diagnostics
    "DiagnosticSink",
    "ConsoleSink",
    "LoggingSink",
    "MemorySink",
    "NullSink",
    "make_sink",
    "normalize_headers",
    "log_request",
    "log_listening",
    # Pages
    "build_api_data",
    "iso_timestamp",
    "utc_now",
    # Routing
    "ROUTES",
    "Route",
    "Reply",
    "dispatch",
    "match_route",
]
