"""FilterParameters — permissive, immutable view of the raw filter input."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator


class FilterParameters(BaseModel):
    """Raw filter values keyed by filter name.

    Construction never fails: non-string and underscore-prefixed keys are
    dropped and non-string values become ``None``, so criteria only ever
    see a string or ``None``.
    Names other than the built-in ones are kept for extra criteria.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    keyword: str | None = None
    published: str | None = None
    legacy_links: str | None = None
    piece_type: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _coerce(cls, data: Any) -> dict[str, str | None]:
        if not isinstance(data, Mapping):
            return {}
        return {
            key: value if isinstance(value, str) else None
            for key, value in data.items()
            if isinstance(key, str) and not key.startswith("_")
        }

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | FilterParameters | None) -> FilterParameters:
        if isinstance(data, FilterParameters):
            return data
        return cls.model_validate(data or {})

    def raw(self, name: str) -> str | None:
        """Value for *name*, or ``None`` when the filter was not supplied."""
        if name in type(self).model_fields:
            return getattr(self, name)
        return (self.model_extra or {}).get(name)
