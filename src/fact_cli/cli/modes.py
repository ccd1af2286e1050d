"""Modos interactivos (batch y watch)."""

from __future__ import annotations

import asyncio

from rich.console import Console

from fact_cli.cli.ui_components import print_fact
from fact_cli.core.domain.category import Category
from fact_cli.core.errors import SourceUnavailableError
from fact_cli.core.services.fact_selector import FactSelector

WATCH_PROMPT = "Press Enter for next batch or Ctrl+C to exit... "


async def run_batch(
    *,
    selector: FactSelector,
    category: Category,
    count: int,
    console: Console,
    err_console: Console,
) -> int:
    """Print `count` facts (indices 1..count). Stops at the first fetch error.

    Returns how many facts were printed.
    """

    shown = 0
    for index in range(1, count + 1):
        try:
            fact = await selector.select(category)
        except SourceUnavailableError as exc:
            err_console.print(f"[red]❌ Error fetching fact:[/red] {exc}", soft_wrap=True)
            break
        print_fact(console, fact, category, index)
        shown += 1
    return shown


def run_watch(
    *,
    selector: FactSelector,
    category: Category,
    count: int,
    console: Console,
    err_console: Console,
) -> None:
    """Repeat the batch, waiting for a line of input between batches.

    Only external interruption stops it; end of input (EOF) also returns.
    """

    console.print("[bold bright_green]🔄 Watch mode enabled! Press Ctrl+C to stop.[/bold bright_green]")
    while True:
        asyncio.run(
            run_batch(
                selector=selector,
                category=category,
                count=count,
                console=console,
                err_console=err_console,
            )
        )
        try:
            console.input(f"[bright_cyan]{WATCH_PROMPT}[/bright_cyan]")
        except EOFError:
            return
