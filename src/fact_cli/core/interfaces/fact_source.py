"""Contrato de fuentes de hechos.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Las fuentes HTTP y las tablas locales son intercambiables y testeables
  sin acoplar el selector a implementaciones concretas.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class FactSource(Protocol):
    """Contrato mínimo para una fuente de hechos.

    Reglas de diseño:
    - `fetch` es asíncrono porque típicamente hará I/O (HTTP).
    - Ante cualquier fallo lanza `SourceUnavailableError`.
    """

    name: str

    async def fetch(self) -> str:
        """Devuelve un hecho tal cual lo entrega la fuente."""

        ...
