"""
clipboard_manager.config
Configuration and settings management for the clipboard manager.
Overview:
- Provides Pydantic-based settings classes that inherit from FactoryBaseSettings and
    support environment variable overrides via Field aliases.
Contents:
- ClipboardManagerSettings:
    List capacity, preview length, persistence key and location, save debounce delay,
    notification language, and logging options.
- get_settings:
    Cached factory for settings instances (re-exported from the factory module).
Design Notes:
- Default values are provided for all fields enabling zero-configuration startup.
- The list capacity is clamped to at least one at configuration time; a lower value
    never reaches the clipboard list.
"""

from pathlib import Path
from typing import Any, Literal

from pydantic import Field, field_validator

from ..constants import (
    DEFAULT_CAPACITY,
    DEFAULT_PREVIEW_LENGTH,
    DEFAULT_SAVE_DEBOUNCE_SECONDS,
    EXTENSION_NAME,
    MIN_CAPACITY,
)
from .base import APP_ENV, APP_ROOT, AppEnv  # noqa: F401
from .factory import FactoryBaseSettings
from .factory import get_settings  # noqa: F401  This is used externally


class ClipboardManagerSettings(FactoryBaseSettings):
    """
    Clipboard manager configuration settings.
    """

    max_items: int = Field(
        default=DEFAULT_CAPACITY,
        alias="CLIPBOARD_MANAGER_MAX_ITEMS",
        description="Maximum number of saved clipboard items. [Default: 10, Min: 1]",
    )
    preview_length: int = Field(
        default=DEFAULT_PREVIEW_LENGTH,
        ge=1,
        alias="CLIPBOARD_MANAGER_PREVIEW_LENGTH",
        description="Characters shown per row before truncating. [Default: 50]",
    )
    settings_key: str = Field(
        default=EXTENSION_NAME,
        alias="CLIPBOARD_MANAGER_SETTINGS_KEY",
        description="Key the saved list is persisted under.",
    )
    store_path: Path = Field(
        default=APP_ROOT / ".cache" / "clipboard_manager.db",
        alias="CLIPBOARD_MANAGER_STORE_PATH",
        description="SQLite database holding persisted settings.",
    )
    save_debounce_seconds: float = Field(
        default=DEFAULT_SAVE_DEBOUNCE_SECONDS,
        ge=0,
        alias="CLIPBOARD_MANAGER_SAVE_DEBOUNCE",
        description="Delay used to coalesce rapid saves. (Seconds) [Default: 1.0]",
    )
    language: Literal["en", "zh"] = Field(
        default="en",
        alias="CLIPBOARD_MANAGER_LANGUAGE",
        description="Language of notifications and empty-state text.",
    )
    log_level: Literal["debug", "info", "warning", "error", "critical"] = Field(
        default="info",
        alias="CLIPBOARD_MANAGER_LOG_LEVEL",
        description="Log level for the clipboard manager.",
    )
    log_file: Path = Field(
        default=APP_ROOT / "logs" / "clipboard_manager.jsonl",
        alias="CLIPBOARD_MANAGER_LOG_FILE",
        description="JSON-lines log file written by the CLI.",
    )

    @field_validator("max_items", mode="before")
    def clamp_max_items(cls, v: Any) -> Any:
        """Clamp the capacity to at least one."""
        if isinstance(v, str):
            v = v.strip()
        try:
            return max(MIN_CAPACITY, int(v))
        except TypeError as e:
            raise ValueError(f"max_items must be an integer, got {v!r}") from e

    @field_validator("log_level", mode="before")
    def normalize_log_level(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().lower()
        return v


__all__ = [
    "APP_ENV",
    "APP_ROOT",
    "AppEnv",
    "ClipboardManagerSettings",
    "FactoryBaseSettings",
    "get_settings",
]
