#!/usr/bin/env python3
"""
Static router using Python stdlib http.server.

Serves the same replies as the FastAPI app through the shared core modules,
with one thread per request.

Run with: python -m static_router.stdlib_server
"""
import logging
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Optional

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


class StaticRouterHandler(BaseHTTPRequestHandler):
    """HTTP request handler answering every method from the route table."""

    # Keep-alive; every reply carries Content-Length
    protocol_version = "HTTP/1.1"

    sink: DiagnosticSink
    clock: Optional[Clock] = None

    def log_message(self, format, *args):
        logger.debug(f"[{self.client_address[0]}] {format % args}")

    def read_body(self) -> bytes:
        """Read request body."""
        try:
            content_length = int(self.headers.get("Content-Length", 0) or 0)
        except ValueError:
            content_length = 0
        return self.rfile.read(content_length) if content_length > 0 else b""

    def respond(self, send_body: bool = True):
        """Log, dispatch, then write status, headers and body in that order."""
        # Bodies are never used, but must be consumed before the next request on this connection
        self.read_body()
        log_request(self.sink, self.command, self.path, normalize_headers(self.headers.items()))

        reply = dispatch(self.path, self.clock)
        body = reply.encoded()

        self.send_response(reply.status)
        self.send_header("Content-Type", reply.content_type)
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        if send_body:
            self.wfile.write(body)

    def do_GET(self):
        self.respond()

    def do_HEAD(self):
        self.respond(send_body=False)

    def do_POST(self):
        self.respond()

    def do_PUT(self):
        self.respond()

    def do_DELETE(self):
        self.respond()

    def do_PATCH(self):
        self.respond()

    def do_OPTIONS(self):
        self.respond()


def create_handler_class(sink: DiagnosticSink, clock: Optional[Clock] = None) -> type:
    """Create a handler class with the sink and clock bound."""

    class BoundHandler(StaticRouterHandler):
        pass

    BoundHandler.sink = sink
    BoundHandler.clock = staticmethod(clock) if clock is not None else None
    return BoundHandler


class RouterHTTPServer(ThreadingHTTPServer):
    """Threaded server; request threads never keep the process alive."""

    daemon_threads = True
    # A second router on the same port must fail to bind
    allow_reuse_port = False


def create_server(
    host: Optional[str] = None,
    port: Optional[int] = None,
    sink: Optional[DiagnosticSink] = None,
    clock: Optional[Clock] = None,
) -> RouterHTTPServer:
    """Bind the listener. OSError from a failed bind is left to propagate."""
    host = Config.ROUTER_HOST if host is None else host
    port = Config.ROUTER_PORT if port is None else port
    sink = sink if sink is not None else make_sink(Config.DIAGNOSTIC_SINK)

    server = RouterHTTPServer((host, port), create_handler_class(sink, clock))
    bound_host, bound_port = server.server_address[:2]
    log_listening(sink, Config.base_url(bound_host, bound_port))
    return server


def main(host: Optional[str] = None, port: Optional[int] = None, sink: Optional[DiagnosticSink] = None):
    logger.info("Starting stdlib http.server static router")
    server = create_server(host, port, sink)
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        logger.info("Shutting down...")
    finally:
        server.server_close()


if __name__ == "__main__":
    main()
