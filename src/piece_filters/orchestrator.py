"""PieceQueryFilter — fold every criterion's fragment into one query."""

from __future__ import annotations

import logging
from functools import partial
from typing import TYPE_CHECKING, Any

from .config import PieceFilterConfig
from .criteria import (
    KeywordCriterion,
    LegacyLinksCriterion,
    PieceTypeCriterion,
    PublishedCriterion,
)
from .fragments import NEUTRAL
from .params import FilterParameters

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from .criteria import Criterion
    from .fragments import QueryFragment
    from .terms import ITermResolver

    CriterionFactory = Callable[[str | None], Criterion]

logger = logging.getLogger("piece_filters.orchestrator")


class PieceQueryFilter:
    """
    Build the merged query for one filtering operation.

    Each registered filter name maps to a factory taking the raw value and
    returning a criterion. ``apply()`` creates fresh criteria, takes their
    fragments and merges them by conjunction, starting from NEUTRAL.

    Example:
        ```python
        query_filter = PieceQueryFilter(
            {"published": "true", "keyword": "president"},
            term_resolver=resolver,
        )
        match = MongoQueryBuilder().build_match(query_filter.apply())
        ```
    """

    def __init__(
        self,
        params: Mapping[str, Any] | FilterParameters | None,
        *,
        term_resolver: ITermResolver,
        config: PieceFilterConfig | None = None,
        criteria: Mapping[str, CriterionFactory] | None = None,
    ) -> None:
        self.params = FilterParameters.from_mapping(params)
        self._term_resolver = term_resolver
        self._config = config or PieceFilterConfig()
        self._criteria: dict[str, CriterionFactory] = (
            dict(criteria) if criteria is not None else self._default_criteria()
        )

    def _default_criteria(self) -> dict[str, CriterionFactory]:
        return {
            KeywordCriterion.name: partial(
                KeywordCriterion,
                term_resolver=self._term_resolver,
                config=self._config,
            ),
            PublishedCriterion.name: partial(PublishedCriterion, config=self._config),
            LegacyLinksCriterion.name: partial(LegacyLinksCriterion, config=self._config),
            PieceTypeCriterion.name: partial(PieceTypeCriterion, config=self._config),
        }

    @property
    def filter_names(self) -> tuple[str, ...]:
        return tuple(self._criteria)

    def with_criterion(self, name: str, factory: CriterionFactory) -> PieceQueryFilter:
        """Return a copy that also applies *factory* to the ``name`` parameter."""
        return PieceQueryFilter(
            self.params,
            term_resolver=self._term_resolver,
            config=self._config,
            criteria={**self._criteria, name: factory},
        )

    def apply(self) -> QueryFragment:
        """Return the conjunction of all criteria fragments.

        Exceptions raised by a criterion's collaborators (e.g. the term
        resolver) are logged and re-raised unchanged.
        """
        result: QueryFragment = NEUTRAL
        for name, factory in self._criteria.items():
            criterion = factory(self.params.raw(name))
            try:
                fragment = criterion.fragment()
            except Exception:
                logger.exception("Criterion %r failed", name)
                raise
            if not fragment.is_neutral:
                logger.debug("Criterion %r contributed %s", name, fragment.canonical_key())
            result = result.merge(fragment)
        return result

    build = apply
