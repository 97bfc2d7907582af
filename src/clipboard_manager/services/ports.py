"""
clipboard_manager.services.ports

Interfaces of the collaborators the presenter depends on. The host application (or
the adapters in this package) provide the implementations.
"""

from typing import Any, Optional, Protocol, runtime_checkable


@runtime_checkable
class SettingsStore(Protocol):
    """Key-value persistence. Saves may be debounced and are not awaited."""

    def load(self, key: str) -> Optional[Any]:
        """Return the value stored under `key`, or None when absent."""
        ...

    def save(self, key: str, value: Any) -> None:
        """Request that `value` be stored under `key` (best effort)."""
        ...


@runtime_checkable
class SystemClipboard(Protocol):
    """Permission-gated system clipboard.

    Both methods raise ClipboardAccessError when access is denied or fails.
    """

    async def read_text(self) -> str: ...

    async def write_text(self, text: str) -> None: ...


@runtime_checkable
class Notifier(Protocol):
    """Toast-style user notifications; fire-and-forget."""

    def notify_success(self, message: str) -> None: ...

    def notify_failure(self, message: str) -> None: ...

    def notify_info(self, message: str) -> None: ...


__all__ = ["SettingsStore", "SystemClipboard", "Notifier"]
