"""CLI entrypoint (Typer).

Modes:
- default: print `--count` facts once.
- `--watch`: repeat batches, waiting for Enter between them.
- `--telegram`: send one fact to Telegram every 6 hours (display flags ignored).
"""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.markup import escape

from fact_cli import __version__
from fact_cli.adapters.telegram_notifier import TelegramBotNotifier, format_delivery_message
from fact_cli.cli import doctor
from fact_cli.cli.modes import run_batch, run_watch
from fact_cli.cli.ui_components import print_banner
from fact_cli.core.config import AppSettings, load_app_settings, load_telegram_settings
from fact_cli.core.domain.category import Category
from fact_cli.core.errors import ConfigurationError
from fact_cli.core.log import configure_logging
from fact_cli.core.services.delivery_loop import DeliveryHooks, DeliveryLoop
from fact_cli.core.services.fact_selector import build_fact_selector

app = typer.Typer(
    add_completion=False,
    help="A fun CLI tool that fetches random coding, AI, and scaling facts from APIs!",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


def _version_callback(value: bool) -> None:
    if value:
        _console.print(f"fact-cli {__version__}")
        raise typer.Exit()


def _config_exit(exc: ConfigurationError) -> typer.Exit:
    _err_console.print(f"[red]Configuration error:[/red] {escape(str(exc))}", soft_wrap=True)
    return typer.Exit(code=1)


def _delivery_hooks() -> DeliveryHooks:
    return DeliveryHooks(
        fetched=lambda _fact: _console.print("[bright_blue]📡 Fetched new fact![/bright_blue]"),
        sent=lambda: _console.print("[bright_green]✅ Fact sent to Telegram successfully![/bright_green]"),
        waiting=lambda _seconds: _console.print("[bright_cyan]⏰ Waiting 6 hours for next fact...[/bright_cyan]"),
    )


def _run_telegram(settings: AppSettings, category: Category) -> None:
    try:
        telegram = load_telegram_settings()
    except ConfigurationError as exc:
        raise _config_exit(exc) from exc

    configure_logging(settings.log_level, secrets=[telegram.bot_token])

    loop = DeliveryLoop(
        selector=build_fact_selector(settings),
        notifier=TelegramBotNotifier(telegram, settings),
        category=category,
        format_message=format_delivery_message,
        hooks=_delivery_hooks(),
    )

    print_banner(_console)
    _console.print("[bold bright_green]🤖 Telegram bot started! Sending facts every 6 hours...[/bold bright_green]")
    _console.print("[bright_yellow]Press Ctrl+C to stop.[/bright_yellow]")
    asyncio.run(loop.run_forever())


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    count: int = typer.Option(1, "--count", "-c", min=0, help="Number of facts to display."),
    category: Category = typer.Option(
        Category.default(),
        "--category",
        "-t",
        case_sensitive=False,
        help="Category of facts to display.",
    ),
    watch: bool = typer.Option(False, "--watch", "-w", help="Display facts continuously (Ctrl+C to stop)."),
    telegram: bool = typer.Option(
        False,
        "--telegram",
        "-b",
        help="Start Telegram bot mode (sends facts every 6 hours).",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Get random facts about programming, AI and system scaling."""

    if ctx.invoked_subcommand is not None:
        return

    try:
        settings = load_app_settings()
    except ConfigurationError as exc:
        raise _config_exit(exc) from exc
    configure_logging(settings.log_level)

    if telegram:
        _run_telegram(settings, category)
        return

    selector = build_fact_selector(settings)
    if watch:
        run_watch(
            selector=selector,
            category=category,
            count=count,
            console=_console,
            err_console=_err_console,
        )
        return

    asyncio.run(
        run_batch(
            selector=selector,
            category=category,
            count=count,
            console=_console,
            err_console=_err_console,
        )
    )


def run() -> None:
    app()
