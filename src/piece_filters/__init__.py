"""Composable query filters for editorial pieces."""

from __future__ import annotations

from .config import PieceFields, PieceFilterConfig, TermResolverConfig
from .criteria import (
    Criterion,
    KeywordCriterion,
    LegacyLinksCriterion,
    PieceTypeCriterion,
    PublishedCriterion,
    TriState,
)
from .exceptions import (
    FragmentError,
    MongoQueryError,
    PieceFiltersError,
    TermResolutionError,
)
from .fragments import NEUTRAL, QueryFragment, merge_all
from .mongo import MongoQueryBuilder
from .orchestrator import PieceQueryFilter
from .params import FilterParameters
from .terms import HttpTermResolver, InMemoryTermResolver, ITermResolver

__all__ = [
    # Orchestration
    "PieceQueryFilter",
    "FilterParameters",
    # Criteria
    "Criterion",
    "KeywordCriterion",
    "LegacyLinksCriterion",
    "PieceTypeCriterion",
    "PublishedCriterion",
    "TriState",
    # Fragments
    "NEUTRAL",
    "QueryFragment",
    "merge_all",
    "MongoQueryBuilder",
    # Term resolution
    "ITermResolver",
    "InMemoryTermResolver",
    "HttpTermResolver",
    # Configuration
    "PieceFields",
    "PieceFilterConfig",
    "TermResolverConfig",
    # Exceptions
    "PieceFiltersError",
    "FragmentError",
    "MongoQueryError",
    "TermResolutionError",
]
