"""
Static router served by FastAPI/uvicorn.

A single catch-all route accepts every method and path; the shared core
decides the reply from the raw URL.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import Response

from .core import (
    Config,
    DiagnosticSink,
    dispatch,
    log_listening,
    log_request,
    make_sink,
    normalize_headers,
    setup_logging,
)
from .core.pages import Clock

setup_logging()
logger = logging.getLogger(__name__)


def raw_url(request: Request) -> str:
    """Rebuild the request target as received: raw path plus query string."""
    raw_path = request.scope.get("raw_path")
    if raw_path:
        path = raw_path.decode("latin-1").split("?", 1)[0]
    else:
        path = request.url.path
    # ASGI drops a bare trailing "?", so "/?" arrives as "/" and matches the homepage
    query = request.scope.get("query_string", b"").decode("latin-1")
    return f"{path}?{query}" if query else path


async def handle_request(request: Request) -> Response:
    """Log the request, then answer with whatever the URL dispatches to."""
    url = raw_url(request)
    log_request(request.app.state.sink, request.method, url, normalize_headers(request.headers.items()))

    reply = dispatch(url, request.app.state.clock)
    # Explicit header so Starlette does not append a charset
    return Response(
        content=reply.encoded(),
        status_code=reply.status,
        headers={"Content-Type": reply.content_type},
    )


class CatchAllEndpoint:
    """ASGI endpoint; Starlette only restricts methods for function endpoints."""

    async def __call__(self, scope, receive, send):
        response = await handle_request(Request(scope, receive))
        await response(scope, receive, send)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI application"""
    logger.info("Static router application starting")
    yield
    logger.info("Static router application stopped")


def create_app(sink: Optional[DiagnosticSink] = None, clock: Optional[Clock] = None) -> FastAPI:
    """Build the FastAPI application around a diagnostic sink and clock."""
    app = FastAPI(
        title="Static Router",
        description="Fixed-route HTTP server",
        version="1.0.0",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.sink = sink if sink is not None else make_sink(Config.DIAGNOSTIC_SINK)
    app.state.clock = clock

    # No method list: every HTTP method reaches the endpoint
    app.add_route("/{path:path}", CatchAllEndpoint(), include_in_schema=False)
    return app


class RouterServer(uvicorn.Server):
    """uvicorn server that announces itself once its sockets are bound."""

    def __init__(self, config: uvicorn.Config, sink: DiagnosticSink):
        super().__init__(config)
        self.sink = sink

    async def startup(self, sockets=None) -> None:
        await super().startup(sockets=sockets)
        if self.started:
            host, port = self.bound_address()
            log_listening(self.sink, Config.base_url(host, port))

    def bound_address(self):
        """Address of the first listening socket; differs from config when port is 0."""
        for server in getattr(self, "servers", []):
            for sock in server.sockets:
                return sock.getsockname()[:2]
        return self.config.host, self.config.port


def create_server(
    host: Optional[str] = None,
    port: Optional[int] = None,
    sink: Optional[DiagnosticSink] = None,
    clock: Optional[Clock] = None,
) -> RouterServer:
    """Build the uvicorn server; nothing is bound until it runs."""
    host = Config.ROUTER_HOST if host is None else host
    port = Config.ROUTER_PORT if port is None else port
    sink = sink if sink is not None else make_sink(Config.DIAGNOSTIC_SINK)

    config = uvicorn.Config(
        create_app(sink, clock),
        host=host,
        port=port,
        log_level=Config.LOG_LEVEL.lower(),
        access_log=False,
        http="h11",   # HTTP/1.1 only
        ws="none",
    )
    return RouterServer(config, sink)


def run(host: Optional[str] = None, port: Optional[int] = None, sink: Optional[DiagnosticSink] = None) -> None:
    """Serve until the process is stopped. Bind failure ends the process."""
    server = create_server(host, port, sink)
    logger.info(f"Starting FastAPI/uvicorn static router on {server.config.host}:{server.config.port}")
    server.run()


app = create_app()


if __name__ == "__main__":
    run()
