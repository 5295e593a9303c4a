"""Operator toggles: recording, two-phase save and drop capture."""

from devtrace.control.toggles import DropCaptureToggle, PersistControl, RecordingToggle

__all__ = [
    "DropCaptureToggle",
    "PersistControl",
    "RecordingToggle",
]
