"""Fuentes de hechos locales (sin red).

Eligen una entrada uniforme al azar de una tabla estática.
"""

from __future__ import annotations

import random
from typing import Sequence

from fact_cli.core.interfaces.fact_source import FactSource


class LocalFactSource(FactSource):
    def __init__(self, name: str, table: Sequence[str], rng: random.Random | None = None) -> None:
        if not table:
            raise ValueError("local fact table must not be empty")
        self.name = name
        self._table = table
        self._rng = rng or random.Random()

    async def fetch(self) -> str:
        return self._rng.choice(self._table)
