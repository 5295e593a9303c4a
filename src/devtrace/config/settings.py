"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support.

Usage:
    from devtrace.config import DevToolsSettings

    # Load from environment variables (DEVTOOLS_*)
    settings = DevToolsSettings()

    # Or override with explicit values
    settings = DevToolsSettings(json_dump_dir="/tmp/json")
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DevToolsSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for session recording.

    Attributes:
        json_dump_dir: Directory for structured session files.
        txt_dump_dir: Directory for plain-text session logs.
        drop_dump_dir: Directory for drop-capture files.
        projectile_window: Cycles after the current cycle in which a
            projectile's start still counts as launched this tick.
        json_indent: Indentation for pretty-printed JSON.
        log_level: Level applied to the ``devtrace`` logger on start-up.

    Environment Variables:
        DEVTOOLS_JSON_DUMP_DIR
        DEVTOOLS_TXT_DUMP_DIR
        DEVTOOLS_DROP_DUMP_DIR
        DEVTOOLS_PROJECTILE_WINDOW
        DEVTOOLS_JSON_INDENT
        DEVTOOLS_LOG_LEVEL
    """

    model_config = SettingsConfigDict(
        env_prefix="DEVTOOLS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    json_dump_dir: Path = Path("json_dumps")
    txt_dump_dir: Path = Path("txt_dumps")
    drop_dump_dir: Path = Path("json_dumps")
    projectile_window: int = Field(default=15, ge=1)
    json_indent: int = Field(default=2, ge=0)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
