"""Mongo query builder from the fragment AST."""

from __future__ import annotations

from typing import Any

from ..exceptions import MongoQueryError
from ..fragments.operators import FragmentOperator
from .operators import compile_standard, compile_string

_COMPILERS = [
    compile_standard,
    compile_string,
]


def _compile_leaf(data: dict[str, Any]) -> dict[str, Any]:
    """Compile a single attribute condition to a MongoDB query document."""
    op_str = str(data.get("op", ""))
    attr = data.get("attr")
    if not attr:
        raise MongoQueryError(f"Fragment missing 'attr': {data}")
    for compiler in _COMPILERS:
        result = compiler(attr, op_str, data.get("val"))
        if result is not None:
            return result
    raise MongoQueryError(f"Unsupported fragment operator: {op_str!r}")


def _compile_node(data: dict[str, Any]) -> dict[str, Any]:
    """Recursively compile a fragment dict to a MongoDB filter."""
    if not isinstance(data, dict):
        raise MongoQueryError("Fragment node must be a dict")
    if not data:
        return {}
    op_str = str(data.get("op", "")).lower()
    if op_str in (FragmentOperator.AND, FragmentOperator.OR):
        compiled = [c for c in map(_compile_node, data.get("conditions", [])) if c]
        if not compiled:
            return {}
        if len(compiled) == 1:
            return compiled[0]
        return {f"${op_str}": compiled}
    return _compile_leaf(data)


class MongoQueryBuilder:
    """Compiles query fragments (via to_dict()) to MongoDB filter documents."""

    def build_match(self, fragment: Any) -> dict[str, Any]:
        """Build a ``find()`` / ``$match`` filter from a fragment.

        Accepts a fragment instance (with to_dict()) or its dict AST. Any other
        dict, such as a raw Mongo filter, is rejected with MongoQueryError.
        The neutral fragment compiles to ``{}``, which matches every document.
        """
        if hasattr(fragment, "to_dict"):
            data = fragment.to_dict()
        elif isinstance(fragment, dict):
            data = fragment
        else:
            raise MongoQueryError("fragment must be a QueryFragment or dict")
        if not data:
            return {}
        return _compile_node(data)
