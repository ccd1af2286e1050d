"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from fact_cli.adapters.fact_sources import FALLBACK_CHAIN, HostedFactSource
from fact_cli.core.config import AppSettings, load_app_settings, load_telegram_settings, write_user_env_vars
from fact_cli.core.errors import ConfigurationError, SourceUnavailableError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_sources(settings: AppSettings) -> list[tuple[str, bool, str]]:
    results: list[tuple[str, bool, str]] = []
    for source in FALLBACK_CHAIN:
        try:
            fact = await HostedFactSource(source, settings).fetch()
        except SourceUnavailableError as exc:
            results.append((source.name, False, str(exc)))
            continue
        results.append((source.name, True, f"{len(fact)} chars"))
    return results


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    try:
        settings = load_app_settings()
    except ConfigurationError as exc:
        Console(stderr=True).print(f"[red]Configuration error:[/red] {escape(str(exc))}", soft_wrap=True)
        raise typer.Exit(code=1) from exc

    table = Table(title="fact-cli Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    telegram_ok = True
    try:
        telegram = load_telegram_settings()
        table.add_row("Telegram config", "OK", f"chat_id={telegram.chat_id}")
    except ConfigurationError as exc:
        telegram_ok = False
        table.add_row("Telegram config", "OPTIONAL", f"{exc} -> --telegram unavailable")
    table.add_row("HTTP timeout", "OK", f"{settings.http_timeout_seconds:g}s")

    # Connectivity (best-effort)
    for name, ok, detail in asyncio.run(_check_sources(settings)):
        table.add_row(f"Source {name}", "OK" if ok else "FAIL", detail)

    _console.print(table)

    if not telegram_ok:
        _console.print("\n[yellow]Note:[/yellow] Run `fact-cli doctor setup-telegram` to store bot credentials.")


@app.command(name="setup-telegram")
def setup_telegram() -> None:
    """Interactive Telegram setup (stores config in the user config .env)."""

    bot_token = typer.prompt("Bot token", hide_input=True).strip()
    chat_id = typer.prompt("Chat id").strip()

    if not bot_token or not chat_id:
        raise typer.BadParameter("bot token and chat id are required")
    try:
        int(chat_id)
    except ValueError as exc:
        raise typer.BadParameter("chat id must be an integer") from exc

    env_path = write_user_env_vars(
        {
            "TELEGRAM_BOT_TOKEN": bot_token,
            "TELEGRAM_CHAT_ID": chat_id,
        }
    )

    _console.print(f"[green]Saved Telegram config to:[/green] {env_path}")
