"""Configuration module using Pydantic Settings.

Usage:
    from devtrace.config import DevToolsSettings

    settings = DevToolsSettings(projectile_window=20)
"""

from devtrace.config.settings import DevToolsSettings

__all__ = [
    "DevToolsSettings",
]
