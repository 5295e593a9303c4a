"""Tests for DevToolsSettings.

Why these tests exist:
- Dump directories and the projectile window come from the environment
- Invalid values must be rejected at load time, not on first tick
"""

import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from devtrace import DevToolsPlugin, DevToolsSettings


def test_defaults(monkeypatch) -> None:
    monkeypatch.delenv("DEVTOOLS_JSON_DUMP_DIR", raising=False)
    settings = DevToolsSettings(_env_file=None)

    assert settings.json_dump_dir == Path("json_dumps")
    assert settings.txt_dump_dir == Path("txt_dumps")
    assert settings.drop_dump_dir == Path("json_dumps")
    assert settings.projectile_window == 15


def test_environment_overrides(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("DEVTOOLS_JSON_DUMP_DIR", str(tmp_path / "structured"))
    monkeypatch.setenv("DEVTOOLS_PROJECTILE_WINDOW", "20")

    settings = DevToolsSettings(_env_file=None)

    assert settings.json_dump_dir == tmp_path / "structured"
    assert settings.projectile_window == 20


@pytest.mark.parametrize(("field", "value"), [("projectile_window", 0), ("json_indent", -1)])
def test_invalid_values_rejected(field, value) -> None:
    with pytest.raises(ValidationError):
        DevToolsSettings(_env_file=None, **{field: value})


def test_unknown_log_level_rejected(monkeypatch) -> None:
    monkeypatch.setenv("DEVTOOLS_LOG_LEVEL", "verbose")

    with pytest.raises(ValidationError):
        DevToolsSettings(_env_file=None)


def test_log_level_applied_on_start_up(client, prompt, settings) -> None:
    plugin = DevToolsPlugin(
        client, prompt, settings=settings.model_copy(update={"log_level": "DEBUG"})
    )
    plugin.start_up()

    assert logging.getLogger("devtrace").level == logging.DEBUG
    logging.getLogger("devtrace").setLevel(logging.NOTSET)
