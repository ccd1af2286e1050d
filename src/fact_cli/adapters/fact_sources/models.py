"""Definiciones de fuentes HTTP (data-driven).

Idea:
- En vez de una clase por API, describimos cada endpoint (URL + campo JSON)
  y un único motor genérico hace la petición.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class HostedSource(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    url: str = Field(..., min_length=1)
    field: str = Field(..., min_length=1, description="Campo de texto en el JSON de respuesta.")


USELESS_FACTS = HostedSource(
    name="uselessfacts",
    url="https://uselessfacts.jsph.pl/random.json?language=en",
    field="text",
)
CHUCK_NORRIS = HostedSource(
    name="chucknorris",
    url="https://api.chucknorris.io/jokes/random",
    field="value",
)
CAT_FACTS = HostedSource(
    name="catfact",
    url="https://cat-fact.herokuapp.com/facts/random",
    field="text",
)

# Orden fijo de la cadena de fallback para la categoría "all".
FALLBACK_CHAIN: tuple[HostedSource, ...] = (USELESS_FACTS, CHUCK_NORRIS, CAT_FACTS)
