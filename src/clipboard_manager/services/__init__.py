"""
clipboard_manager.services
Presenter, collaborator interfaces and their adapters.
Contents:
- Ports: SettingsStore, SystemClipboard, Notifier
- Presenter: ListPresenter, load_clipboard_list
- Settings stores: MemorySettingsStore, SqliteSettingsStore, DebouncedSettingsStore
- Clipboard: PyperclipClipboard
- Notifiers: LoggingNotifier, ConsoleNotifier
"""

from .notifier import ConsoleNotifier, LoggingNotifier  # noqa: F401
from .ports import Notifier, SettingsStore, SystemClipboard  # noqa: F401
from .presenter import ListPresenter, load_clipboard_list  # noqa: F401
from .settings_store import (  # noqa: F401
    DebouncedSettingsStore,
    MemorySettingsStore,
    SqliteSettingsStore,
)
from .system_clipboard import PyperclipClipboard  # noqa: F401

__all__ = [
    "ConsoleNotifier",
    "DebouncedSettingsStore",
    "ListPresenter",
    "LoggingNotifier",
    "MemorySettingsStore",
    "Notifier",
    "PyperclipClipboard",
    "SettingsStore",
    "SqliteSettingsStore",
    "SystemClipboard",
    "load_clipboard_list",
]
