"""Errores de fact-cli.

Taxonomía:
- Configuración: fatal, se reporta antes de cualquier I/O.
- Fuente: una fuente falló; el selector pasa a la siguiente.
- Entrega: falló el envío a Telegram; el loop sigue.
"""

from __future__ import annotations


class FactCliError(Exception):
    """Base de todos los errores propios."""


class ConfigurationError(FactCliError):
    """Missing or malformed environment values."""


class SourceUnavailableError(FactCliError):
    """A fact source could not produce a fact.

    The message is always "source unavailable"; `source` names the adapter.
    """

    def __init__(self, source: str | None = None) -> None:
        super().__init__("source unavailable")
        self.source = source


class DeliveryError(FactCliError):
    """The messaging API rejected or never received a message."""
