"""Port and adapters turning free text into term identifiers."""

from __future__ import annotations

from .http import HttpTermResolver
from .memory import InMemoryTermResolver
from .ports import ITermResolver

__all__ = [
    "HttpTermResolver",
    "ITermResolver",
    "InMemoryTermResolver",
]
