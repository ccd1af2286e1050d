"""Contrato de entrega de mensajes (Telegram u otros canales)."""

from __future__ import annotations

from typing import Protocol


class Notifier(Protocol):
    """Envía un mensaje de texto plano; lanza `DeliveryError` si falla."""

    async def send(self, text: str) -> None:
        ...
