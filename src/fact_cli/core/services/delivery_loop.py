"""Scheduled delivery of facts to a messaging channel.

One cycle fetches a fact for the configured category and forwards it to the
notifier; then the loop sleeps for a fixed six hours. Fetch and send failures
are logged and never stop the loop. Side-effects for UI layers (status lines)
are reported through `DeliveryHooks` so the loop itself stays print-free.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable

from fact_cli.core.domain.category import Category
from fact_cli.core.errors import DeliveryError, SourceUnavailableError
from fact_cli.core.interfaces.notifier import Notifier
from fact_cli.core.services.fact_selector import FactSelector

DELIVERY_INTERVAL_SECONDS = 6 * 3600

logger = logging.getLogger(__name__)

MessageFormatter = Callable[[str, Category], str]
Sleep = Callable[[float], Awaitable[object]]


@dataclass
class DeliveryHooks:
    """Optional callbacks for UI layers."""

    fetched: Callable[[str], None] | None = None
    sent: Callable[[], None] | None = None
    waiting: Callable[[float], None] | None = None


class DeliveryLoop:
    def __init__(
        self,
        *,
        selector: FactSelector,
        notifier: Notifier,
        category: Category,
        format_message: MessageFormatter,
        hooks: DeliveryHooks | None = None,
        sleep: Sleep = asyncio.sleep,
    ) -> None:
        self._selector = selector
        self._notifier = notifier
        self._category = category
        self._format_message = format_message
        self._hooks = hooks or DeliveryHooks()
        self._sleep = sleep

    async def run_cycle(self) -> bool:
        """Fetch one fact and send it. Returns True when the send succeeded."""

        try:
            fact = await self._selector.select(self._category)
        except SourceUnavailableError as exc:
            logger.error("Error fetching fact: %s", exc)
            return False

        if self._hooks.fetched:
            self._hooks.fetched(fact)

        try:
            await self._notifier.send(self._format_message(fact, self._category))
        except DeliveryError as exc:
            logger.error("Error sending to Telegram: %s", exc)
            return False

        logger.info("Fact sent to Telegram successfully")
        if self._hooks.sent:
            self._hooks.sent()
        return True

    async def run_forever(self, *, cycles: int | None = None) -> None:
        """Cycle then wait, indefinitely.

        `cycles` bounds the number of iterations (each one still ends with the
        full wait); `None` means run until the process is terminated.
        """

        completed = 0
        while cycles is None or completed < cycles:
            await self.run_cycle()
            if self._hooks.waiting:
                self._hooks.waiting(DELIVERY_INTERVAL_SECONDS)
            await self._sleep(DELIVERY_INTERVAL_SECONDS)
            completed += 1
