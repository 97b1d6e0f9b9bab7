"""ITermResolver - Protocol for free-text to term identifier lookups."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence


@runtime_checkable
class ITermResolver(Protocol):
    """
    Translate free text into opaque term identifiers.

    Both lookups are read-only and idempotent. Implementations may raise
    on transport or lookup failure; callers in this package do not catch.
    """

    def match_fuzzy(self, text: str) -> Sequence[str]:
        """Return identifiers of terms loosely matching *text*."""
        ...

    def match_exact(self, text: str) -> Sequence[str]:
        """Return identifiers of terms named exactly *text*."""
        ...
