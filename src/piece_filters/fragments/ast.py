from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from ..exceptions import FragmentError
from .base import QueryFragment
from .operators import LOGICAL_OPERATORS, FragmentOperator


class AttributeFragment(QueryFragment):
    """
    Fragment constraining a single document field.

    ``IN`` values are normalised to a tuple with duplicates removed,
    keeping the order in which identifiers were first seen.
    """

    def __init__(self, attr: str, op: FragmentOperator | str, val: Any) -> None:
        if not attr or not isinstance(attr, str):
            raise FragmentError(f"Fragment attribute must be a non-empty string: {attr!r}")
        try:
            self.op = FragmentOperator(op)
        except ValueError as exc:
            raise FragmentError(f"Unknown fragment operator: {op!r}") from exc
        if self.op in LOGICAL_OPERATORS:
            raise FragmentError(f"Logical operator {self.op.value!r} is not a leaf operator")
        self.attr = attr
        if self.op == FragmentOperator.IN:
            val = _normalise_members(val)
        self.val = val

    def to_dict(self) -> dict[str, Any]:
        val = list(self.val) if self.op == FragmentOperator.IN else self.val
        return {
            "op": self.op.value,
            "attr": self.attr,
            "val": val,
        }


def _normalise_members(val: Any) -> tuple[Any, ...]:
    if val is None:
        return ()
    if isinstance(val, str) or not isinstance(val, Iterable):
        return (val,)
    return tuple(dict.fromkeys(val))


# -- factory functions ---------------------------------------------------------


def eq(attr: str, value: Any) -> AttributeFragment:
    return AttributeFragment(attr, FragmentOperator.EQ, value)


def is_in(attr: str, values: Iterable[Any]) -> AttributeFragment:
    return AttributeFragment(attr, FragmentOperator.IN, values)


def icontains(attr: str, text: str) -> AttributeFragment:
    return AttributeFragment(attr, FragmentOperator.ICONTAINS, text)
