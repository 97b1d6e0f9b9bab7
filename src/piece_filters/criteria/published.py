from __future__ import annotations

from .base import FlagCriterion


class PublishedCriterion(FlagCriterion):
    """``"true"`` → published pieces, ``"false"`` → unpublished, else no constraint."""

    name = "published"

    @property
    def field(self) -> str:
        return self.config.fields.published
