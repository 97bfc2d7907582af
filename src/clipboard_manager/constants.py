"""
clipboard_manager.constants

Defaults shared by configuration, the clipboard list and the presenter.
"""

EXTENSION_NAME: str = "st-clipboard-manager"
"""Extension-scoped key the list state is persisted under."""

LOGGER_NAME: str = "clipboard_manager"
"""Name of the package logger; components log to children of it."""

DEFAULT_CAPACITY: int = 10
"""Maximum number of saved entries when nothing else is configured."""

MIN_CAPACITY: int = 1

DEFAULT_PREVIEW_LENGTH: int = 50
"""Number of characters shown for a row before it is truncated."""

PREVIEW_ELLIPSIS: str = "..."

DEFAULT_SAVE_DEBOUNCE_SECONDS: float = 1.0
"""Delay used to coalesce rapid settings saves into a single write."""

SETTINGS_TABLE: str = "extension_settings"
"""sqlite-utils table holding `key -> JSON value` rows."""

SUPPORTED_LANGUAGES: tuple[str, ...] = ("en", "zh")
