"""Tri-state flag parsed once from string-typed booleans."""

from __future__ import annotations

from enum import Enum
from typing import Any


class TriState(str, Enum):
    YES = "true"
    NO = "false"
    UNSPECIFIED = "unspecified"

    @classmethod
    def parse(cls, raw: Any) -> TriState:
        """Map the literal strings ``"true"``/``"false"``; anything else is unspecified."""
        if not isinstance(raw, str):
            return cls.UNSPECIFIED
        if raw == cls.YES.value:
            return cls.YES
        if raw == cls.NO.value:
            return cls.NO
        return cls.UNSPECIFIED
