from .ast import AttributeFragment, eq, icontains, is_in
from .base import (
    NEUTRAL,
    AndFragment,
    NeutralFragment,
    OrFragment,
    QueryFragment,
    merge_all,
)
from .evaluator import FragmentEvaluator, MemoryOperator, MemoryOperatorRegistry
from .operators import FragmentOperator
from .operators_memory import build_default_registry

__all__ = [
    # Core types
    "FragmentOperator",
    "QueryFragment",
    "NeutralFragment",
    "NEUTRAL",
    "AttributeFragment",
    "AndFragment",
    "OrFragment",
    "merge_all",
    # Factories
    "eq",
    "is_in",
    "icontains",
    # Evaluator / strategy
    "FragmentEvaluator",
    "MemoryOperator",
    "MemoryOperatorRegistry",
    "build_default_registry",
]
