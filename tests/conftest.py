from typing import Optional

import pytest

from clipboard_manager.config import get_settings
from clipboard_manager.exceptions import ClipboardAccessError
from clipboard_manager.models import ClipboardList
from clipboard_manager.services import ListPresenter, MemorySettingsStore

SETTINGS_ENV_VARS = [
    "CLIPBOARD_MANAGER_MAX_ITEMS",
    "CLIPBOARD_MANAGER_PREVIEW_LENGTH",
    "CLIPBOARD_MANAGER_SETTINGS_KEY",
    "CLIPBOARD_MANAGER_STORE_PATH",
    "CLIPBOARD_MANAGER_SAVE_DEBOUNCE",
    "CLIPBOARD_MANAGER_LANGUAGE",
    "CLIPBOARD_MANAGER_LOG_LEVEL",
    "CLIPBOARD_MANAGER_LOG_FILE",
]


class FakeClipboard:
    """In-memory SystemClipboard; set `fail_reads` / `fail_writes` to simulate denial."""

    def __init__(self, text: str = "") -> None:
        self.text = text
        self.fail_reads = False
        self.fail_writes = False
        self.writes: list[str] = []

    async def read_text(self) -> str:
        if self.fail_reads:
            raise ClipboardAccessError("permission denied")
        return self.text

    async def write_text(self, text: str) -> None:
        if self.fail_writes:
            raise ClipboardAccessError("permission denied")
        self.text = text
        self.writes.append(text)


class RecordingNotifier:
    """Notifier that keeps every notification as a (level, message) tuple."""

    def __init__(self) -> None:
        self.events: list[tuple[str, str]] = []

    def notify_success(self, message: str) -> None:
        self.events.append(("success", message))

    def notify_failure(self, message: str) -> None:
        self.events.append(("failure", message))

    def notify_info(self, message: str) -> None:
        self.events.append(("info", message))

    @property
    def last(self) -> Optional[tuple[str, str]]:
        return self.events[-1] if self.events else None


@pytest.fixture(autouse=True)
def clean_settings_env(monkeypatch):
    """Clear settings env vars and the settings cache around every test."""
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def fake_clipboard() -> FakeClipboard:
    return FakeClipboard()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def memory_store() -> MemorySettingsStore:
    return MemorySettingsStore()


@pytest.fixture
def presenter(
    memory_store: MemorySettingsStore,
    fake_clipboard: FakeClipboard,
    notifier: RecordingNotifier,
) -> ListPresenter:
    """Presenter over an empty list with the default capacity of 10."""
    return ListPresenter(ClipboardList(), memory_store, fake_clipboard, notifier)
