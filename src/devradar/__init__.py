"""DevRadar: Discover local development projects and installed dev tools."""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"
