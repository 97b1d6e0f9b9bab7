"""In-memory term resolver for tests and local development."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping


class InMemoryTermResolver:
    """Resolve terms from a ``{term_id: name}`` mapping.

    Exact lookups compare names case-insensitively; fuzzy lookups test for a
    case-insensitive substring. Every lookup is appended to ``calls`` as
    ``(mode, text)``.
    """

    def __init__(self, terms: Mapping[str, str] | None = None) -> None:
        self._terms: dict[str, str] = dict(terms or {})
        self.calls: list[tuple[str, str]] = []

    def add(self, term_id: str, name: str) -> None:
        self._terms[term_id] = name

    def match_exact(self, text: str) -> list[str]:
        self.calls.append(("exact", text))
        needle = text.casefold()
        return [tid for tid, name in self._terms.items() if name.casefold() == needle]

    def match_fuzzy(self, text: str) -> list[str]:
        self.calls.append(("fuzzy", text))
        needle = text.casefold()
        return [tid for tid, name in self._terms.items() if needle in name.casefold()]
