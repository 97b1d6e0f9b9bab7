from __future__ import annotations

from .base import FlagCriterion


class LegacyLinksCriterion(FlagCriterion):
    """Restrict to pieces with (``"true"``) or without (``"false"``) legacy links."""

    name = "legacy_links"

    @property
    def field(self) -> str:
        return self.config.fields.has_legacy_links
