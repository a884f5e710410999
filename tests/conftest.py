"""
Pytest configuration for static-router tests.

This file ensures that the src directory is in the Python path
so that tests can import static_router and arithmetic_toy without an
install, and keeps request diagnostics off the console by default.
"""
import sys
import os
from pathlib import Path

# Silence per-request lines unless a test injects its own sink
os.environ.setdefault("DIAGNOSTIC_SINK", "off")

# Add src directory to Python path
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))
