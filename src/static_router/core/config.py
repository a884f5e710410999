"""
Shared configuration for both FastAPI and stdlib servers.
"""
import os
import logging
from dotenv import load_dotenv

load_dotenv()


def _read_port() -> int:
    raw = os.getenv("ROUTER_PORT", "3000")
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"ROUTER_PORT must be a valid integer, got {raw!r}. Configure this in your .env file.")


class Config:
    """Centralized configuration loaded from environment variables."""

    # Router server
    ROUTER_HOST = os.getenv("ROUTER_HOST", "127.0.0.1")
    ROUTER_PORT = _read_port()

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Where per-request diagnostics go: console, logging or off
    DIAGNOSTIC_SINK = os.getenv("DIAGNOSTIC_SINK", "console").strip().lower()

    @classmethod
    def base_url(cls, host: str = None, port: int = None) -> str:
        """URL announced once the listener is bound."""
        host = cls.ROUTER_HOST if host is None else host
        port = cls.ROUTER_PORT if port is None else port
        return f"http://{host}:{port}/"


def setup_logging():
    """Configure logging based on LOG_LEVEL."""
    logging.basicConfig(
        level=getattr(logging, Config.LOG_LEVEL.upper(), logging.INFO),
        format='%(asctime)s - %(levelname)s - %(message)s'
    )
    return logging.getLogger(__name__)
