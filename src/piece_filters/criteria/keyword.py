"""
Keyword criterion.

Two input forms are recognised:

- ``tag:'<payload>'`` (the whole string, anchored at both ends): the payload
  is resolved with the term resolver's exact lookup and the fragment is a
  pure membership test on the term identifier field.
- any other non-blank text: resolved with the fuzzy lookup; the fragment
  matches pieces whose terms are among the results OR whose headline
  contains the text, case-insensitively.

Quotes inside the payload are not escaped. The payload match is greedy, so
``tag:'it's'`` resolves ``it's``.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Any

from ..fragments import NEUTRAL, icontains, is_in
from .base import Criterion

if TYPE_CHECKING:
    from ..config import PieceFilterConfig
    from ..fragments import QueryFragment
    from ..terms import ITermResolver

logger = logging.getLogger("piece_filters.criteria.keyword")

EXACT_TAG_PATTERN = re.compile(r"tag:'(?P<payload>.*)'", re.DOTALL)


class KeywordCriterion(Criterion):
    """Free-text or exact-tag search over terms and headlines."""

    name = "keyword"

    def __init__(
        self,
        raw_value: Any,
        *,
        term_resolver: ITermResolver,
        config: PieceFilterConfig | None = None,
    ) -> None:
        super().__init__(raw_value, config=config)
        self._term_resolver = term_resolver
        self.keyword: str | None = None
        self.tag: str | None = None
        if not isinstance(raw_value, str) or not raw_value.strip():
            return
        match = EXACT_TAG_PATTERN.fullmatch(raw_value)
        if match:
            self.tag = match.group("payload")
        else:
            self.keyword = raw_value

    def fragment(self) -> QueryFragment:
        fields = self.config.fields
        if self.tag is not None:
            ids = self._term_resolver.match_exact(self.tag)
            logger.debug("Exact tag %r matched %d term(s)", self.tag, len(ids))
            return is_in(fields.term_ids, ids)
        if self.keyword is not None:
            ids = self._term_resolver.match_fuzzy(self.keyword)
            logger.debug("Keyword %r matched %d term(s)", self.keyword, len(ids))
            return is_in(fields.term_ids, ids) | icontains(fields.headline, self.keyword)
        return NEUTRAL
