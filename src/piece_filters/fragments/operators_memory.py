"""
In-memory operator implementations.

Semantics follow the document store: membership against an array field
is satisfied when any element is a member, and ``icontains`` is a literal,
case-insensitive substring test.

Usage::

    from piece_filters.fragments.operators_memory import build_default_registry

    registry = build_default_registry()
    result = registry.evaluate(FragmentOperator.EQ, actual, expected)
"""

from __future__ import annotations

from typing import Any

from .evaluator import MemoryOperator, MemoryOperatorRegistry
from .operators import FragmentOperator


class EqualOperator(MemoryOperator):
    @property
    def name(self) -> FragmentOperator:
        return FragmentOperator.EQ

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        if isinstance(field_value, list | tuple):
            return condition_value in field_value
        return bool(field_value == condition_value)


class InOperator(MemoryOperator):
    @property
    def name(self) -> FragmentOperator:
        return FragmentOperator.IN

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        members = condition_value or ()
        if isinstance(field_value, list | tuple):
            return any(value in members for value in field_value)
        return field_value in members


class IContainsOperator(MemoryOperator):
    @property
    def name(self) -> FragmentOperator:
        return FragmentOperator.ICONTAINS

    def evaluate(self, field_value: Any, condition_value: Any) -> bool:
        if field_value is None:
            return False
        return str(condition_value).lower() in str(field_value).lower()


def build_default_registry() -> MemoryOperatorRegistry:
    """
    Create a registry with all built-in operators.

    Returns a fresh instance on every call; inject it where evaluation
    is needed.

    Example:
        >>> registry = build_default_registry()
        >>> registry.evaluate(FragmentOperator.EQ, True, True)
        True
    """
    registry = MemoryOperatorRegistry()
    registry.register_all(
        EqualOperator(),
        InOperator(),
        IContainsOperator(),
    )
    return registry
