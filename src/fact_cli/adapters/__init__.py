"""Adaptadores de I/O (HTTP, Telegram).

Implementan los contratos de `fact_cli.core.interfaces`.
"""
