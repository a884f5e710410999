#!/usr/bin/env python3
"""
Static router CLI

Usage:
    static-router serve              # FastAPI/uvicorn
    static-router serve --stdlib     # stdlib http.server
    static-router check-port         # Is the router port free?
"""

import argparse
import sys

from .check_port import check_port


def cmd_serve(args) -> int:
    if args.stdlib:
        from .stdlib_server import main as stdlib_main
        stdlib_main(host=args.host, port=args.port)
    else:
        from .main import run
        run(host=args.host, port=args.port)
    return 0


def cmd_check_port(args) -> int:
    return check_port(host=args.host, port=args.port)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="static-router",
        description="Static router - fixed-route HTTP server",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  static-router serve                 Serve on ROUTER_HOST:ROUTER_PORT (default 127.0.0.1:3000)
  static-router serve --stdlib        Serve with http.server instead of uvicorn
  static-router check-port --port 8080
        """
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Run the HTTP server")
    serve.add_argument("--stdlib", "-s", action="store_true", help="Use stdlib http.server")
    serve.set_defaults(func=cmd_serve)

    check = subparsers.add_parser("check-port", help="Check whether the port can be bound")
    check.set_defaults(func=cmd_check_port)

    for sub in (serve, check):
        sub.add_argument("--host", default=None, help="Bind host (overrides ROUTER_HOST)")
        sub.add_argument("--port", type=int, default=None, help="Bind port (overrides ROUTER_PORT)")

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
