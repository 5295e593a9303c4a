"""Local filesystem artifact store.

Session saves never overwrite: each of the two files independently probes
``{base}``, ``{base}_1``, ``{base}_2``... until it finds a free name. Drop
saves go to a single fixed path and replace whatever is there.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from devtrace.config.settings import DevToolsSettings

logger = logging.getLogger(__name__)


class PersistenceError(Exception):
    """Raised when an artifact could not be written."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Could not write {path}: {reason}")
        self.path = path
        self.reason = reason


@dataclass(frozen=True, slots=True)
class SavedArtifacts:
    """Paths written by one session save."""

    json_path: Path
    txt_path: Path


def free_path(directory: Path, base_name: str, suffix: str) -> Path:
    """First of ``{base}{suffix}``, ``{base}_1{suffix}``, ... that does not exist."""
    candidate = directory / f"{base_name}{suffix}"
    i = 1
    while candidate.exists():
        candidate = directory / f"{base_name}_{i}{suffix}"
        i += 1
    return candidate


def _check_plain(name: str) -> None:
    if Path(name).name != name:
        raise ValueError(f"{name!r} is not a plain file name")


class LocalArtifactStore:
    """Writes session and drop artifacts under the configured directories."""

    def __init__(self, settings: DevToolsSettings | None = None) -> None:
        self._settings = settings or DevToolsSettings()

    def save_session(
        self, base_name: str, records: Sequence[dict[str, Any]], lines: Sequence[str]
    ) -> SavedArtifacts:
        if not base_name:
            raise ValueError("base_name must not be empty")
        _check_plain(base_name)

        json_dir = self._ensure_dir(self._settings.json_dump_dir)
        txt_dir = self._ensure_dir(self._settings.txt_dump_dir)

        json_path = free_path(json_dir, base_name, ".json")
        txt_path = free_path(txt_dir, base_name, ".txt")

        self._write_json(json_path, records)
        self._write_lines(txt_path, lines)

        logger.info(
            "Saved %d records to %s and %d lines to %s",
            len(records),
            json_path,
            len(lines),
            txt_path,
        )
        return SavedArtifacts(json_path=json_path, txt_path=txt_path)

    def save_drops(self, name: str, records: Sequence[dict[str, Any]]) -> Path:
        if not name:
            raise ValueError("name must not be empty")
        _check_plain(name)

        # No collision check: a repeated name replaces the earlier file.
        path = self._ensure_dir(self._settings.drop_dump_dir) / f"{name}.json"
        self._write_json(path, records)
        logger.info("Saved %d drops to %s", len(records), path)
        return path

    def _ensure_dir(self, directory: Path) -> Path:
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise PersistenceError(directory, str(e)) from e
        return directory

    def _write_json(self, path: Path, records: Sequence[dict[str, Any]]) -> None:
        text = json.dumps(list(records), indent=self._settings.json_indent, ensure_ascii=False)
        try:
            path.write_text(text + "\n", encoding="utf-8")
        except OSError as e:
            raise PersistenceError(path, str(e)) from e

    def _write_lines(self, path: Path, lines: Sequence[str]) -> None:
        try:
            with path.open("w", encoding="utf-8") as f:
                for line in lines:
                    f.write(f"{line}\n")
        except OSError as e:
            raise PersistenceError(path, str(e)) from e
