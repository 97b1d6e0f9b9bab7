"""Configuration objects for criteria and term resolver adapters."""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_PIECE_TYPES: frozenset[str] = frozenset(
    {"article", "gallery", "video", "audio", "live_blog"}
)


@dataclass(frozen=True)
class PieceFields:
    """Document field names targeted by the built-in criteria.

    Attributes:
        term_ids: Array field holding the identifiers of attached terms.
        headline: Text field matched by free keywords.
        published: Boolean published flag.
        has_legacy_links: Boolean flag set on pieces carrying legacy links.
        piece_type: Enumerated piece type.
    """

    term_ids: str = "term_ids"
    headline: str = "headline"
    published: str = "published"
    has_legacy_links: str = "has_legacy_links"
    piece_type: str = "piece_type"


@dataclass(frozen=True)
class PieceFilterConfig:
    """Settings shared by the built-in criteria.

    Attributes:
        fields: Field names of the queried documents.
        piece_types: Raw ``piece_type`` values recognised as constraints.
    """

    fields: PieceFields = field(default_factory=PieceFields)
    piece_types: frozenset[str] = DEFAULT_PIECE_TYPES


@dataclass(frozen=True)
class TermResolverConfig:
    """HTTP term search service configuration.

    Attributes:
        base_url: Root URL of the term search service.
        exact_path: Path of the exact-match lookup.
        fuzzy_path: Path of the fuzzy-match lookup.
        query_param: Query string parameter carrying the text.
        id_key: Key of the identifier when results are objects.
        timeout: Request timeout in seconds.
    """

    base_url: str
    exact_path: str = "/terms/exact"
    fuzzy_path: str = "/terms/fuzzy"
    query_param: str = "q"
    id_key: str = "id"
    timeout: float = 5.0
