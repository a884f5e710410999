import errno
import socket
import sys
from typing import Optional

from .core import Config


def is_port_available(host: str, port: int) -> bool:
    """Return True if a listener could bind host:port right now."""
    bind_host = "" if host == "0.0.0.0" else host
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        sock.bind((bind_host, port))
    except OSError as e:
        # Windows reports EADDRINUSE as 10048
        if e.errno in (errno.EADDRINUSE, 10048):
            return False
        raise
    finally:
        sock.close()
    return True


def check_port(host: Optional[str] = None, port: Optional[int] = None) -> int:
    """Print whether the router port is free; returns a process exit code."""
    host = Config.ROUTER_HOST if host is None else host
    port = Config.ROUTER_PORT if port is None else port

    print(f"Checking if port {port} is available on {host}...")
    try:
        available = is_port_available(host, port)
    except OSError as e:
        print(f"Error checking port {port}: {e}")
        return 1

    if available:
        print(f"Port {port} is available.")
        return 0

    print(f"\n[ERROR] Port {port} is already in use!")
    print(f"Something is already listening on port {port}.")
    print("Please stop the existing process or change ROUTER_PORT in your .env file.")
    return 1


if __name__ == "__main__":
    sys.exit(check_port())
