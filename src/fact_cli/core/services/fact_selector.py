"""Fact selection with a fixed fallback chain.

The selector is the only place that decides where a fact comes from. For the
"all" category it walks the hosted sources in their hardcoded order and falls
back to the local tech table; every other category is served from a local
table without touching the network. The CLI modes and the delivery loop both
go through `FactSelector.select`.
"""

from __future__ import annotations

import logging
import random
from typing import Sequence

from fact_cli.adapters.fact_sources import LocalFactSource, build_fallback_chain
from fact_cli.core.config import AppSettings
from fact_cli.core.domain.category import Category
from fact_cli.core.domain.static_facts import LOCAL_TABLES
from fact_cli.core.errors import SourceUnavailableError
from fact_cli.core.interfaces.fact_source import FactSource

logger = logging.getLogger(__name__)


class FactSelector:
    """Pick one fact for a category."""

    def __init__(
        self,
        hosted: Sequence[FactSource],
        *,
        rng: random.Random | None = None,
    ) -> None:
        self._hosted = tuple(hosted)
        rng = rng or random.Random()
        self._local: dict[Category, FactSource] = {
            category: LocalFactSource(category.value, table, rng)
            for category, table in LOCAL_TABLES.items()
        }

    async def select(self, category: Category) -> str:
        """Return one fact or raise `SourceUnavailableError`."""

        if category is Category.ALL:
            return await self._select_with_fallback()
        return await self._local[category].fetch()

    async def _select_with_fallback(self) -> str:
        for source in self._hosted:
            try:
                return await source.fetch()
            except SourceUnavailableError as exc:
                logger.warning("Source %s unavailable, trying next: %s", source.name, exc)

        logger.info("All hosted sources failed, using local tech facts")
        return await self._local[Category.TECH].fetch()


def build_fact_selector(
    settings: AppSettings | None = None,
    *,
    rng: random.Random | None = None,
) -> FactSelector:
    """Selector wired to the real hosted sources."""

    return FactSelector(build_fallback_chain(settings), rng=rng)
