from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..fragments import NEUTRAL, eq
from .base import Criterion

if TYPE_CHECKING:
    from ..config import PieceFilterConfig
    from ..fragments import QueryFragment


class PieceTypeCriterion(Criterion):
    """Restrict to one piece type.

    Only values listed in ``config.piece_types`` are recognised, compared
    literally; anything else contributes no constraint.
    """

    name = "piece_type"

    def __init__(self, raw_value: Any, *, config: PieceFilterConfig | None = None) -> None:
        super().__init__(raw_value, config=config)
        recognised = isinstance(raw_value, str) and raw_value in self.config.piece_types
        self.piece_type: str | None = raw_value if recognised else None

    def fragment(self) -> QueryFragment:
        if self.piece_type is None:
            return NEUTRAL
        return eq(self.config.fields.piece_type, self.piece_type)
