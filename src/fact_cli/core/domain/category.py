"""Fact categories for fact-cli.

This module centralizes the topic filter chosen on the command line. Keeping
it in the domain layer lets the CLI, the selector and the Telegram notifier
share a single source of truth for labels and glyphs.
"""

from __future__ import annotations

from enum import Enum


class Category(str, Enum):
    """Topic filter selecting which source(s) supply a fact."""

    ALL = "all"
    CODING = "coding"
    AI = "ai"
    SCALING = "scaling"
    TECH = "tech"
    PROGRAMMING = "programming"

    @classmethod
    def default(cls) -> "Category":
        """Return the category used when none is requested."""

        return cls.ALL

    @property
    def display_name(self) -> str:
        """Human readable label for headers and messages."""

        return _DISPLAY_NAMES[self]

    @property
    def glyph(self) -> str:
        return _GLYPHS[self]


_DISPLAY_NAMES: dict[Category, str] = {
    Category.ALL: "Random",
    Category.CODING: "Coding",
    Category.PROGRAMMING: "Programming",
    Category.AI: "AI",
    Category.SCALING: "Scaling",
    Category.TECH: "Tech",
}

_GLYPHS: dict[Category, str] = {
    Category.ALL: "🌟",
    Category.CODING: "💻",
    Category.PROGRAMMING: "💻",
    Category.AI: "🤖",
    Category.SCALING: "📈",
    Category.TECH: "⚡",
}
