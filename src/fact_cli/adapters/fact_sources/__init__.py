"""Fuentes de hechos (HTTP y locales).

Cada módulo implementa `fact_cli.core.interfaces.fact_source.FactSource`.
"""

from fact_cli.adapters.fact_sources.hosted import HostedFactSource, build_fallback_chain
from fact_cli.adapters.fact_sources.local import LocalFactSource
from fact_cli.adapters.fact_sources.models import (
	CAT_FACTS,
	CHUCK_NORRIS,
	FALLBACK_CHAIN,
	USELESS_FACTS,
	HostedSource,
)

__all__ = [
	"CAT_FACTS",
	"CHUCK_NORRIS",
	"FALLBACK_CHAIN",
	"USELESS_FACTS",
	"HostedFactSource",
	"HostedSource",
	"LocalFactSource",
	"build_fallback_chain",
]
