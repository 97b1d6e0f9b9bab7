"""MongoDB compilation of merged piece queries."""

from __future__ import annotations

from .operators import compile_standard, compile_string
from .query_builder import MongoQueryBuilder

__all__ = [
    "MongoQueryBuilder",
    "compile_standard",
    "compile_string",
]
