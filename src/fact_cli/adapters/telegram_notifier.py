"""Telegram Bot API notification adapter.

Sends plain-text messages (no parse mode) to a single chat via `sendMessage`.
"""

from __future__ import annotations

import httpx

from fact_cli.adapters.http_client import build_async_client
from fact_cli.core.config import AppSettings, TelegramSettings
from fact_cli.core.domain.category import Category
from fact_cli.core.errors import DeliveryError
from fact_cli.core.interfaces.notifier import Notifier

API_BASE_URL = "https://api.telegram.org"


def format_delivery_message(fact: str, category: Category) -> str:
    """Header with the category label, a blank line, then the fact verbatim."""

    return f"{category.glyph} {category.display_name} Fact\n\n{fact}"


class TelegramBotNotifier(Notifier):
    """Notifier adapter that sends messages via the Telegram Bot API."""

    def __init__(
        self,
        telegram: TelegramSettings,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._bot_token = telegram.bot_token
        self._chat_id = telegram.chat_id
        self._settings = settings or AppSettings()
        self._transport = transport

    def _endpoint(self) -> str:
        return f"{API_BASE_URL}/bot{self._bot_token}/sendMessage"

    async def send(self, text: str) -> None:
        payload = {"chat_id": self._chat_id, "text": text}
        try:
            async with build_async_client(self._settings, transport=self._transport) as client:
                response = await client.post(self._endpoint(), json=payload)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            # str(exc) may carry the URL, which embeds the token.
            raise DeliveryError(f"Bot API request failed: {exc.__class__.__name__}") from exc

        if not response.is_success:
            raise DeliveryError(f"Bot API error {response.status_code}: {_describe(response)}")
        try:
            data = response.json()
        except ValueError:
            data = None
        if isinstance(data, dict) and data.get("ok") is False:
            raise DeliveryError(f"Bot API error: {_describe(response)}")


def _describe(response: httpx.Response) -> str:
    try:
        data = response.json()
    except ValueError:
        return response.text[:200]
    if isinstance(data, dict) and isinstance(data.get("description"), str):
        return data["description"]
    return response.text[:200]
