"""Leaf operator compilers: =/in -> $eq/$in, icontains -> $regex."""

from __future__ import annotations

import re
from typing import Any

from ..exceptions import MongoQueryError
from ..fragments.operators import FragmentOperator


def compile_standard(field: str, op: str, val: Any) -> dict[str, Any] | None:
    """Compile equality and membership. Returns None if not handled."""
    try:
        frag_op = FragmentOperator(op)
    except ValueError:
        return None
    if frag_op == FragmentOperator.EQ:
        return {field: {"$eq": val}}
    if frag_op == FragmentOperator.IN:
        normalized = list(val) if isinstance(val, list | tuple | set | frozenset) else [val]
        return {field: {"$in": normalized}}
    return None


def compile_string(field: str, op: str, val: Any) -> dict[str, Any] | None:
    """Compile case-insensitive substring matching to an escaped $regex."""
    try:
        frag_op = FragmentOperator(op)
    except ValueError:
        return None
    if frag_op != FragmentOperator.ICONTAINS:
        return None
    if not isinstance(val, str):
        raise MongoQueryError(f"String operator {op} requires string value")
    return {field: {"$regex": re.escape(val), "$options": "i"}}
