"""Fetch-once cache shared by model registries."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

logger = logging.getLogger(__name__)

ModelFetcher = Callable[[], Awaitable[list[str]]]


class ModelListCache:
    """Hold the upstream model ids after the first successful listing.

    The cache starts empty. ``get`` calls the injected fetch function until
    one call succeeds, then serves the stored list for the rest of the
    process lifetime; ``invalidate`` is the only way back to the empty state.
    A failed fetch returns an empty list and leaves the cache empty.

    Concurrent callers may race on the first fetch. Both store an equivalent
    list, so no locking is applied.
    """

    def __init__(self, fetch: ModelFetcher) -> None:
        self._fetch = fetch
        self._models: list[str] | None = None

    @property
    def is_populated(self) -> bool:
        return self._models is not None

    async def get(self) -> list[str]:
        if self._models is not None:
            return list(self._models)

        try:
            models = await self._fetch()
        except Exception as exc:  # unverifiable listings fail open
            logger.debug("Model listing unavailable, skipping validation: %s", exc)
            return []

        self._models = [model for model in models if isinstance(model, str) and model]
        logger.debug("Cached %d model ids", len(self._models))
        return list(self._models)

    def invalidate(self) -> None:
        self._models = None
