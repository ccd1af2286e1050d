from __future__ import annotations

import asyncio
import random

import httpx

from fact_cli.adapters.fact_sources import build_fallback_chain
from fact_cli.adapters.telegram_notifier import TelegramBotNotifier, format_delivery_message
from fact_cli.core.config import AppSettings, TelegramSettings
from fact_cli.core.domain.category import Category
from fact_cli.core.domain.static_facts import SCALING_FACTS, TECH_FACTS
from fact_cli.core.errors import DeliveryError, SourceUnavailableError
from fact_cli.core.services.delivery_loop import (
    DELIVERY_INTERVAL_SECONDS,
    DeliveryHooks,
    DeliveryLoop,
)
from fact_cli.core.services.fact_selector import FactSelector


class FakeNotifier:
    def __init__(self, fail: bool = False) -> None:
        self.sent: list[str] = []
        self._fail = fail

    async def send(self, text: str) -> None:
        self.sent.append(text)
        if self._fail:
            raise DeliveryError("Bot API error 502: Bad Gateway")


class FailingSelector:
    def __init__(self) -> None:
        self.calls = 0

    async def select(self, category: Category) -> str:
        self.calls += 1
        raise SourceUnavailableError("hosted")


class RecordingSleep:
    def __init__(self) -> None:
        self.durations: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.durations.append(seconds)


def _loop(selector, notifier, sleep, category=Category.SCALING, hooks=None) -> DeliveryLoop:
    return DeliveryLoop(
        selector=selector,
        notifier=notifier,
        category=category,
        format_message=format_delivery_message,
        hooks=hooks,
        sleep=sleep,
    )


def test_interval_is_six_hours() -> None:
    assert DELIVERY_INTERVAL_SECONDS == 21_600


def test_one_send_per_cycle_then_wait() -> None:
    notifier = FakeNotifier()
    sleep = RecordingSleep()
    loop = _loop(FactSelector([], rng=random.Random(3)), notifier, sleep)

    asyncio.run(loop.run_forever(cycles=3))

    assert len(notifier.sent) == 3
    assert sleep.durations == [21_600, 21_600, 21_600]
    for message in notifier.sent:
        header, fact = message.split("\n\n", 1)
        assert header == "📈 Scaling Fact"
        assert fact in SCALING_FACTS


def test_send_failure_does_not_stop_loop_or_change_wait() -> None:
    notifier = FakeNotifier(fail=True)
    sleep = RecordingSleep()
    loop = _loop(FactSelector([]), notifier, sleep)

    asyncio.run(loop.run_forever(cycles=2))

    assert len(notifier.sent) == 2
    assert sleep.durations == [21_600, 21_600]


def test_fetch_failure_skips_send() -> None:
    notifier = FakeNotifier()
    sleep = RecordingSleep()
    selector = FailingSelector()
    loop = _loop(selector, notifier, sleep)

    assert asyncio.run(loop.run_cycle()) is False
    asyncio.run(loop.run_forever(cycles=1))

    assert selector.calls == 2
    assert notifier.sent == []
    assert sleep.durations == [21_600]


def test_hooks_report_progress() -> None:
    events: list[str] = []
    hooks = DeliveryHooks(
        fetched=lambda fact: events.append("fetched"),
        sent=lambda: events.append("sent"),
        waiting=lambda seconds: events.append(f"waiting {seconds}"),
    )
    loop = _loop(FactSelector([]), FakeNotifier(), RecordingSleep(), hooks=hooks)

    asyncio.run(loop.run_forever(cycles=1))

    assert events == ["fetched", "sent", "waiting 21600"]


def test_all_hosted_failing_sends_one_tech_fact() -> None:
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(500)

    chain = build_fallback_chain(AppSettings(_env_file=None), transport=httpx.MockTransport(handler))
    notifier = FakeNotifier()
    sleep = RecordingSleep()
    loop = _loop(FactSelector(chain), notifier, sleep, category=Category.ALL)

    asyncio.run(loop.run_forever(cycles=1))

    assert len(requests) == 3
    assert len(notifier.sent) == 1
    header, fact = notifier.sent[0].split("\n\n", 1)
    assert header == "🌟 Random Fact"
    assert fact in TECH_FACTS


def test_unbuildable_bot_url_does_not_stop_loop() -> None:
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json={"ok": True})

    # Bypasses validation: a token pasted with a trailing CR.
    telegram = TelegramSettings.model_construct(bot_token="123:abc\r", chat_id=1)
    notifier = TelegramBotNotifier(
        telegram,
        AppSettings(_env_file=None),
        transport=httpx.MockTransport(handler),
    )
    sleep = RecordingSleep()
    loop = _loop(FactSelector([]), notifier, sleep)

    asyncio.run(loop.run_forever(cycles=2))

    assert requests == []
    assert sleep.durations == [21_600, 21_600]
