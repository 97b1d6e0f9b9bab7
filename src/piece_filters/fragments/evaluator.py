"""
In-memory fragment evaluation.

:class:`FragmentEvaluator` walks a fragment's dictionary AST against a
candidate document, delegating each leaf to the :class:`MemoryOperator`
registered for its operator. Field resolution follows the document
store: dotted paths descend through arrays and the values found are
flattened into one list.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from .operators import FragmentOperator

if TYPE_CHECKING:
    from .base import QueryFragment


class MemoryOperator(ABC):
    """Evaluates one leaf operator against a resolved field value."""

    @property
    @abstractmethod
    def name(self) -> FragmentOperator: ...

    @abstractmethod
    def evaluate(self, field_value: Any, condition_value: Any) -> bool: ...


class MemoryOperatorRegistry:
    def __init__(self) -> None:
        self._operators: dict[FragmentOperator, MemoryOperator] = {}

    def register_all(self, *operators: MemoryOperator) -> None:
        for op in operators:
            self._operators[op.name] = op

    @property
    def supported_operators(self) -> set[FragmentOperator]:
        return set(self._operators)

    def evaluate(
        self,
        name: FragmentOperator,
        field_value: Any,
        condition_value: Any,
    ) -> bool:
        """Raises ValueError for an operator nobody registered."""
        op = self._operators.get(name)
        if op is None:
            raise ValueError(f"Unsupported operator for in-memory evaluation: {name}")
        return op.evaluate(field_value, condition_value)


class FragmentEvaluator:
    """Evaluate fragments against dicts or plain objects.

    The neutral fragment (``{}``) matches every candidate.
    """

    def __init__(self, registry: MemoryOperatorRegistry) -> None:
        self._registry = registry

    def matches(self, fragment: QueryFragment | dict[str, Any], candidate: Any) -> bool:
        data = fragment if isinstance(fragment, dict) else fragment.to_dict()
        return self._evaluate(data, candidate)

    def filter(
        self, fragment: QueryFragment | dict[str, Any], candidates: list[Any]
    ) -> list[Any]:
        """Return the candidates satisfying *fragment*, in their original order."""
        return [c for c in candidates if self.matches(fragment, c)]

    def _evaluate(self, data: dict[str, Any], candidate: Any) -> bool:
        if not data:
            return True
        op = FragmentOperator(str(data.get("op", "")).lower())
        if op == FragmentOperator.AND:
            return all(self._evaluate(c, candidate) for c in data.get("conditions", []))
        if op == FragmentOperator.OR:
            return any(self._evaluate(c, candidate) for c in data.get("conditions", []))
        actual = self._resolve_field(candidate, data["attr"])
        return self._registry.evaluate(op, actual, data.get("val"))

    @staticmethod
    def _resolve_field(obj: Any, attr_path: str) -> Any:
        """
        Resolve a dot-separated attribute path on *obj*.

        When a list is met before the path is exhausted, the remaining path
        is resolved on every item and the results are flattened, so
        ``terms.meta.id`` over ``[{"meta": {"id": 1}}, {"meta": {"id": 2}}]``
        gives ``[1, 2]``. Items lacking the path contribute nothing.
        """
        if obj is None:
            return None
        if isinstance(obj, list | tuple):
            found: list[Any] = []
            for item in obj:
                value = FragmentEvaluator._resolve_field(item, attr_path)
                if isinstance(value, list | tuple):
                    found.extend(value)
                elif value is not None:
                    found.append(value)
            return found
        head, _, rest = attr_path.partition(".")
        value = obj.get(head) if isinstance(obj, dict) else getattr(obj, head, None)
        return FragmentEvaluator._resolve_field(value, rest) if rest else value
