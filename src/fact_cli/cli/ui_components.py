"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite testear el bloque de un hecho sin capturar stdout.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from fact_cli.core.domain.category import Category

_FRAME = "bright_blue"


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida."""

    title = Text("FACT-CLI", style="bold cyan")
    subtitle = Text("Coding • AI • Scaling facts", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_fact_lines(fact: str, category: Category, index: int) -> list[Text]:
    """Boxed block for one fact.

    The index line only appears for index > 1. The fact is appended as a
    plain `Text` span so Rich never interprets markup inside it.
    """

    lines = [
        Text.assemble(
            ("┌─", _FRAME),
            " ",
            category.glyph,
            " ",
            (category.display_name, "bold bright_cyan"),
            " ",
            ("Fact", "bold bright_cyan"),
        )
    ]
    if index > 1:
        lines.append(Text.assemble(("│", _FRAME), " ", (f"#{index}", "bright_yellow")))
    lines.append(Text("├─", style=_FRAME))
    lines.append(Text.assemble(("│", _FRAME), " ", (fact, "bright_white")))
    lines.append(Text("└─", style=_FRAME))
    return lines


def print_fact(console: Console, fact: str, category: Category, index: int) -> None:
    console.print()
    for line in build_fact_lines(fact, category, index):
        console.print(line, soft_wrap=True)
    console.print()
