"""Fuente de hechos: APIs públicas (JSON).

Implementación:
- GET a la URL fija de la definición, con el timeout de `AppSettings`.
- Devuelve el campo de texto tal cual (sin strip ni truncado).

Cualquier fallo (red, timeout, status, JSON, campo ausente) se traduce a
`SourceUnavailableError`.
"""

from __future__ import annotations

import httpx

from fact_cli.adapters.fact_sources.models import FALLBACK_CHAIN, HostedSource
from fact_cli.adapters.http_client import build_async_client
from fact_cli.core.config import AppSettings
from fact_cli.core.errors import SourceUnavailableError
from fact_cli.core.interfaces.fact_source import FactSource


class HostedFactSource(FactSource):
    def __init__(
        self,
        source: HostedSource,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._source = source
        self._settings = settings or AppSettings()
        self._transport = transport
        self.name = source.name

    async def fetch(self) -> str:
        try:
            async with build_async_client(self._settings, transport=self._transport) as client:
                response = await client.get(self._source.url)
            if not response.is_success:
                raise SourceUnavailableError(self.name)
            data = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            raise SourceUnavailableError(self.name) from exc

        value = data.get(self._source.field) if isinstance(data, dict) else None
        if not isinstance(value, str):
            raise SourceUnavailableError(self.name)
        return value


def build_fallback_chain(
    settings: AppSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> list[FactSource]:
    """Instancia las fuentes HTTP en el orden fijo de la cadena."""

    settings = settings or AppSettings()
    return [HostedFactSource(source, settings, transport=transport) for source in FALLBACK_CHAIN]
