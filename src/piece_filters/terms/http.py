"""HTTP term resolver backed by the term search service."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx

from ..exceptions import TermResolutionError

if TYPE_CHECKING:
    from ..config import TermResolverConfig

logger = logging.getLogger("piece_filters.terms.http")


class HttpTermResolver:
    """
    Synchronous term resolver calling the term search service over HTTP.

    Each lookup issues ``GET {base_url}{path}?{query_param}=<text>``. The
    response body is a JSON list of identifiers, or of objects carrying the
    identifier under ``config.id_key``. Failures are raised as
    :class:`TermResolutionError`; there is no retry.

    Example:
        ```python
        config = TermResolverConfig(base_url="https://terms.example.com")
        with HttpTermResolver(config) as resolver:
            ids = resolver.match_exact("Music Ceremony")
        ```
    """

    def __init__(
        self,
        config: TermResolverConfig,
        client: httpx.Client | None = None,
    ) -> None:
        self._config = config
        self._owns_client = client is None
        self._client = client or httpx.Client(
            base_url=config.base_url, timeout=config.timeout
        )

    def match_exact(self, text: str) -> list[str]:
        return self._lookup("exact", self._config.exact_path, text)

    def match_fuzzy(self, text: str) -> list[str]:
        return self._lookup("fuzzy", self._config.fuzzy_path, text)

    def close(self) -> None:
        """Close the underlying client if this resolver created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> HttpTermResolver:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # -- internals -------------------------------------------------------------

    def _lookup(self, mode: str, path: str, text: str) -> list[str]:
        try:
            response = self._client.get(path, params={self._config.query_param: text})
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise TermResolutionError(
                f"Term search returned HTTP {e.response.status_code}",
                mode=mode,
                text=text,
            ) from e
        except httpx.HTTPError as e:
            raise TermResolutionError(
                f"Term search request failed: {e}", mode=mode, text=text
            ) from e

        try:
            body = response.json()
        except ValueError as e:
            raise TermResolutionError(
                "Term search returned a non-JSON body", mode=mode, text=text
            ) from e

        ids = self._extract_ids(body, mode=mode, text=text)
        logger.debug("Term lookup %s %r resolved %d id(s)", mode, text, len(ids))
        return ids

    def _extract_ids(self, body: Any, *, mode: str, text: str) -> list[str]:
        if not isinstance(body, list):
            raise TermResolutionError(
                "Term search response must be a JSON list", mode=mode, text=text
            )
        ids: list[str] = []
        for item in body:
            if isinstance(item, dict):
                if self._config.id_key not in item:
                    raise TermResolutionError(
                        f"Term search result missing {self._config.id_key!r}",
                        mode=mode,
                        text=text,
                    )
                item = item[self._config.id_key]
            if isinstance(item, bool) or not isinstance(item, str | int):
                raise TermResolutionError(
                    f"Term id must be a string or integer, got {type(item).__name__}",
                    mode=mode,
                    text=text,
                )
            ids.append(str(item))
        return ids
