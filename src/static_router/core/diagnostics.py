"""
Diagnostic sinks for per-request and startup lines.

These lines are a side channel for the operator; nothing written here ever
reaches the client.
"""
import logging
from typing import Iterable, List, Mapping, Optional, Protocol, Tuple

logger = logging.getLogger("static_router")


class DiagnosticSink(Protocol):
    def write_line(self, line: str) -> None:
        ...


class ConsoleSink:
    """Print each line to stdout."""

    def write_line(self, line: str) -> None:
        print(line, flush=True)


class LoggingSink:
    """Forward each line to a logger at INFO."""

    def __init__(self, target: Optional[logging.Logger] = None):
        self.logger = target or logger

    def write_line(self, line: str) -> None:
        self.logger.info(line)


class NullSink:
    def write_line(self, line: str) -> None:
        pass


class MemorySink:
    """Keep lines in a list; used when the output has to be inspected."""

    def __init__(self):
        self.lines: List[str] = []

    def write_line(self, line: str) -> None:
        self.lines.append(line)


SINKS = {
    "console": ConsoleSink,
    "logging": LoggingSink,
    "off": NullSink,
}


def make_sink(name: str) -> DiagnosticSink:
    """Build the sink named by DIAGNOSTIC_SINK."""
    try:
        return SINKS[name.strip().lower()]()
    except KeyError:
        raise ValueError(f"Unknown DIAGNOSTIC_SINK {name!r}, expected one of: {', '.join(SINKS)}")


def normalize_headers(headers: Iterable[Tuple[str, str]]) -> dict:
    """Lower-case header names; a repeated header keeps its values comma-joined."""
    result: dict = {}
    for name, value in headers:
        key = name.lower()
        if key in result:
            result[key] = f"{result[key]}, {value}"
        else:
            result[key] = value
    return result


def log_request(sink: DiagnosticSink, method: str, url: str, headers: Mapping[str, str]) -> None:
    sink.write_line(f"Received {method} request for: {url}")
    sink.write_line(f"Request headers: {headers}")


def log_listening(sink: DiagnosticSink, url: str) -> None:
    sink.write_line(f"Server running at {url}")
