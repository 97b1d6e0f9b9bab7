"""
Query fragment algebra.

A fragment is either the neutral fragment ("no constraint") or a
constraint. Fragments compose by conjunction through :meth:`merge`:
each fragment exposes its conjunctive clauses and merging two fragments
takes the union of both clause sets. That makes merge commutative,
associative and idempotent, with :data:`NEUTRAL` as its identity.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from .operators import FragmentOperator

if TYPE_CHECKING:
    from collections.abc import Iterable


class QueryFragment(ABC):
    """Base class for fragments with logic operator support."""

    @abstractmethod
    def to_dict(self) -> dict[str, Any]:
        """Return the dictionary AST consumed by query backends."""
        ...

    @property
    def is_neutral(self) -> bool:
        return False

    def clauses(self) -> frozenset[QueryFragment]:
        """Conjunctive clauses this fragment contributes to a merge."""
        return frozenset({self})

    def merge(self, other: QueryFragment) -> QueryFragment:
        """Merge with another fragment using logical AND."""
        combined = self.clauses() | other.clauses()
        if not combined:
            return NEUTRAL
        if len(combined) == 1:
            return next(iter(combined))
        return AndFragment(*combined)

    def __and__(self, other: QueryFragment) -> QueryFragment:
        return self.merge(other)

    def __or__(self, other: QueryFragment) -> QueryFragment:
        # "anything OR match-all" matches all
        if self.is_neutral or other.is_neutral:
            return NEUTRAL
        return OrFragment(self, other)

    # -- structural identity ---------------------------------------------------

    def canonical_key(self) -> str:
        """Order-independent serialisation used for equality and sorting."""
        return json.dumps(self.to_dict(), sort_keys=True, default=str)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QueryFragment):
            return NotImplemented
        return self.canonical_key() == other.canonical_key()

    def __hash__(self) -> int:
        return hash(self.canonical_key())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.canonical_key()})"


class NeutralFragment(QueryFragment):
    """The "no constraint" fragment. Use the :data:`NEUTRAL` instance."""

    @property
    def is_neutral(self) -> bool:
        return True

    def clauses(self) -> frozenset[QueryFragment]:
        return frozenset()

    def to_dict(self) -> dict[str, Any]:
        return {}


NEUTRAL = NeutralFragment()


class _CompositeFragment(QueryFragment):
    op: FragmentOperator

    def __init__(self, *fragments: QueryFragment) -> None:
        operands: set[QueryFragment] = set()
        for fragment in fragments:
            if fragment.is_neutral:
                continue
            # Flatten nested composites of the same kind
            if isinstance(fragment, type(self)):
                operands.update(fragment.fragments)
            else:
                operands.add(fragment)
        self.fragments: frozenset[QueryFragment] = frozenset(operands)

    def to_dict(self) -> dict[str, Any]:
        ordered = sorted(self.fragments, key=lambda f: f.canonical_key())
        return {
            "op": self.op.value,
            "conditions": [fragment.to_dict() for fragment in ordered],
        }


class AndFragment(_CompositeFragment):
    """Logical AND of independent fragments."""

    op = FragmentOperator.AND

    def clauses(self) -> frozenset[QueryFragment]:
        return self.fragments


class OrFragment(_CompositeFragment):
    """Logical OR of a small, fixed set of fragments."""

    op = FragmentOperator.OR


def merge_all(fragments: Iterable[QueryFragment]) -> QueryFragment:
    """Fold fragments with :meth:`QueryFragment.merge`, seeded with NEUTRAL."""
    result: QueryFragment = NEUTRAL
    for fragment in fragments:
        result = result.merge(fragment)
    return result
