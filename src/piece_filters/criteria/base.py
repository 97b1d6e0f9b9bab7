"""
Criterion contract.

A criterion turns the raw value of one named filter into one query
fragment. Whatever the raw value, ``fragment()`` returns a well-formed
fragment: absent or unrecognised input yields :data:`NEUTRAL`. Criteria are
created fresh for every filtering operation and hold no other state.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar

from ..config import PieceFilterConfig
from ..fragments import NEUTRAL, eq
from .states import TriState

if TYPE_CHECKING:
    from ..fragments import QueryFragment


class Criterion(ABC):
    """Base class for all criteria.

    Subclasses set ``name`` to the filter parameter they read and parse the
    raw value in ``__init__``; collaborators are keyword-only arguments.
    """

    name: ClassVar[str]

    def __init__(self, raw_value: Any, *, config: PieceFilterConfig | None = None) -> None:
        self.raw_value = raw_value
        self.config = config or PieceFilterConfig()

    @abstractmethod
    def fragment(self) -> QueryFragment:
        """Return this criterion's constraint, or NEUTRAL."""
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.raw_value!r})"


class FlagCriterion(Criterion):
    """Tri-state criterion over a boolean document field."""

    def __init__(self, raw_value: Any, *, config: PieceFilterConfig | None = None) -> None:
        super().__init__(raw_value, config=config)
        self.state = TriState.parse(raw_value)

    @property
    @abstractmethod
    def field(self) -> str:
        """Boolean field constrained by this flag."""
        ...

    def fragment(self) -> QueryFragment:
        if self.state is TriState.YES:
            return eq(self.field, True)
        if self.state is TriState.NO:
            return eq(self.field, False)
        return NEUTRAL
