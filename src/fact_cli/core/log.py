"""Logging setup.

Los errores recuperados (fuentes caídas, envíos fallidos) van a stderr vía
`RichHandler`, con los secretos (token del bot) redactados.
"""

from __future__ import annotations

import logging
from typing import Iterable

from rich.console import Console
from rich.logging import RichHandler


class _RedactingFormatter(logging.Formatter):
    def __init__(self, secrets: Iterable[str], fmt: str) -> None:
        super().__init__(fmt=fmt)
        self._secrets = sorted({s for s in secrets if s}, key=len, reverse=True)

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        for secret in self._secrets:
            message = message.replace(secret, "***")
        return message


def configure_logging(level: str = "INFO", *, secrets: Iterable[str] = ()) -> None:
    """Install a stderr Rich handler on the root logger.

    Calling it again replaces the previous handler (bot mode adds the token).
    """

    resolved = logging.getLevelName(str(level).upper())
    if not isinstance(resolved, int):
        raise ValueError(f"unknown log level: {level!r}")
    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=False,
    )
    handler.setFormatter(_RedactingFormatter(secrets, fmt="%(message)s"))

    logging.basicConfig(level=resolved, handlers=[handler], force=True)
    # httpx logs every request URL at INFO; the Bot API URL embeds the token.
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
