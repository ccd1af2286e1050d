from __future__ import annotations

from pathlib import Path

import pytest

from fact_cli.core.config import load_app_settings, load_telegram_settings, write_user_env_vars
from fact_cli.core.errors import ConfigurationError


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("TELEGRAM_BOT_TOKEN", raising=False)
    monkeypatch.delenv("TELEGRAM_CHAT_ID", raising=False)
    monkeypatch.delenv("FACT_CLI_LOG_LEVEL", raising=False)


def test_loads_valid_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "123:abc")
    monkeypatch.setenv("TELEGRAM_CHAT_ID", "-1001234567890")

    settings = load_telegram_settings(_env_file=None)

    assert settings.bot_token == "123:abc"
    assert settings.chat_id == -1001234567890


def test_missing_token_names_the_variable(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TELEGRAM_CHAT_ID", "42")

    with pytest.raises(ConfigurationError, match="TELEGRAM_BOT_TOKEN environment variable not set"):
        load_telegram_settings(_env_file=None)


def test_missing_both_reports_both() -> None:
    with pytest.raises(ConfigurationError) as info:
        load_telegram_settings(_env_file=None)

    assert "TELEGRAM_BOT_TOKEN" in str(info.value)
    assert "TELEGRAM_CHAT_ID" in str(info.value)


def test_empty_chat_id_is_not_set(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "123:abc")
    monkeypatch.setenv("TELEGRAM_CHAT_ID", "")

    with pytest.raises(ConfigurationError, match="TELEGRAM_CHAT_ID environment variable not set"):
        load_telegram_settings(_env_file=None)


@pytest.mark.parametrize("chat_id", ["@mychannel", "9223372036854775808"])
def test_chat_id_must_be_int64(monkeypatch: pytest.MonkeyPatch, chat_id: str) -> None:
    monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "123:abc")
    monkeypatch.setenv("TELEGRAM_CHAT_ID", chat_id)

    with pytest.raises(ConfigurationError, match="TELEGRAM_CHAT_ID is invalid"):
        load_telegram_settings(_env_file=None)


def test_reads_env_file(tmp_path: Path) -> None:
    env_file = write_user_env_vars(
        {"TELEGRAM_BOT_TOKEN": "999:zzz", "TELEGRAM_CHAT_ID": "7"},
        env_path=tmp_path / "fact-cli" / ".env",
    )

    settings = load_telegram_settings(_env_file=env_file)

    assert settings.bot_token == "999:zzz"
    assert settings.chat_id == 7


def test_write_user_env_vars_merges_existing(tmp_path: Path) -> None:
    env_path = tmp_path / ".env"
    env_path.write_text("# old\nFACT_CLI_LOG_LEVEL=DEBUG\nTELEGRAM_CHAT_ID=1\n", encoding="utf-8")

    write_user_env_vars({"TELEGRAM_CHAT_ID": "2"}, env_path=env_path)

    lines = env_path.read_text(encoding="utf-8").splitlines()
    assert "FACT_CLI_LOG_LEVEL=DEBUG" in lines
    assert "TELEGRAM_CHAT_ID=2" in lines
    assert "TELEGRAM_CHAT_ID=1" not in lines


@pytest.mark.parametrize("token", ["123:abc\r", "123:abc def", "123:\tabc"])
def test_token_with_whitespace_or_control_chars_is_invalid(monkeypatch: pytest.MonkeyPatch, token: str) -> None:
    monkeypatch.setenv("TELEGRAM_BOT_TOKEN", token)
    monkeypatch.setenv("TELEGRAM_CHAT_ID", "42")

    with pytest.raises(ConfigurationError, match="TELEGRAM_BOT_TOKEN is invalid"):
        load_telegram_settings(_env_file=None)


def test_log_level_is_case_insensitive(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FACT_CLI_LOG_LEVEL", "debug")

    assert load_app_settings(_env_file=None).log_level == "DEBUG"


@pytest.mark.parametrize("level", ["basic_format", "root", "verbose"])
def test_unknown_log_level_is_configuration_error(monkeypatch: pytest.MonkeyPatch, level: str) -> None:
    monkeypatch.setenv("FACT_CLI_LOG_LEVEL", level)

    with pytest.raises(ConfigurationError, match="FACT_CLI_LOG_LEVEL is invalid"):
        load_app_settings(_env_file=None)
