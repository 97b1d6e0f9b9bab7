"""Shared fixtures for piece filter tests."""

from __future__ import annotations

from collections.abc import Sequence

import pytest

from piece_filters.fragments import FragmentEvaluator, build_default_registry
from piece_filters.mongo import MongoQueryBuilder
from piece_filters.terms import InMemoryTermResolver

TERMS = {
    "t-1": "Music Ceremony",
    "t-2": "President",
    "t-3": "Presidential Election",
    "t-4": "Weather",
}


class StubTermResolver:
    """Returns fixed identifiers and records each lookup."""

    def __init__(
        self, fuzzy: Sequence[str] = (), exact: Sequence[str] = ()
    ) -> None:
        self.fuzzy = list(fuzzy)
        self.exact = list(exact)
        self.calls: list[tuple[str, str]] = []

    def match_fuzzy(self, text: str) -> list[str]:
        self.calls.append(("fuzzy", text))
        return list(self.fuzzy)

    def match_exact(self, text: str) -> list[str]:
        self.calls.append(("exact", text))
        return list(self.exact)


class FailingTermResolver:
    def __init__(self, exc: Exception) -> None:
        self.exc = exc

    def match_fuzzy(self, text: str) -> list[str]:
        raise self.exc

    def match_exact(self, text: str) -> list[str]:
        raise self.exc


@pytest.fixture
def resolver() -> InMemoryTermResolver:
    return InMemoryTermResolver(TERMS)


@pytest.fixture
def stub_resolver() -> StubTermResolver:
    return StubTermResolver(fuzzy=["A", "B"], exact=["t-1"])


@pytest.fixture
def registry():
    """Default in-memory operator registry."""
    return build_default_registry()


@pytest.fixture
def evaluator(registry) -> FragmentEvaluator:
    return FragmentEvaluator(registry)


@pytest.fixture
def builder() -> MongoQueryBuilder:
    return MongoQueryBuilder()


@pytest.fixture
def failing_resolver():
    """Factory for resolvers raising the given exception on every lookup."""
    return FailingTermResolver
