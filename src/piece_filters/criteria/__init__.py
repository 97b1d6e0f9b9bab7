"""Criteria — one filter parameter in, one query fragment out."""

from __future__ import annotations

from .base import Criterion, FlagCriterion
from .keyword import KeywordCriterion
from .legacy_links import LegacyLinksCriterion
from .piece_type import PieceTypeCriterion
from .published import PublishedCriterion
from .states import TriState

__all__ = [
    "Criterion",
    "FlagCriterion",
    "KeywordCriterion",
    "LegacyLinksCriterion",
    "PieceTypeCriterion",
    "PublishedCriterion",
    "TriState",
]
