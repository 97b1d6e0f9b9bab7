"""
Exception hierarchy for piece filtering.

All exceptions inherit from ``PieceFiltersError`` and provide
``to_dict()`` for API-friendly error responses. Malformed filter input is
never reported through these types: it degrades to the neutral fragment.
"""

from __future__ import annotations

from typing import Any


class PieceFiltersError(Exception):
    """Base exception for all piece filtering errors."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class FragmentError(PieceFiltersError):
    """A fragment was built with an invalid attribute or operator."""


class TermResolutionError(PieceFiltersError):
    """
    The term search service could not answer a lookup.

    Raised by resolver adapters at their transport boundary; the
    orchestrator lets it propagate to the caller unchanged.
    """

    def __init__(self, message: str, *, mode: str, text: str) -> None:
        self.message = message
        self.mode = mode
        self.text = text
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "TERM_RESOLUTION_ERROR",
            "message": self.message,
            "mode": self.mode,
            "text": self.text,
        }


class MongoQueryError(PieceFiltersError):
    """Raised when a fragment cannot be compiled to a MongoDB filter."""
