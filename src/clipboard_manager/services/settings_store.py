# region Docstring
"""
clipboard_manager.services.settings_store
SettingsStore implementations used to persist the clipboard list.
Overview:
- The presenter only knows the SettingsStore interface (`load` / `save`). These
    adapters make the package usable without a host application.
Contents:
- MemorySettingsStore:
    Dict-backed store; values are deep-copied in and out.
- SqliteSettingsStore:
    Stores each key as a JSON document in a sqlite-utils table
    (`key` primary key, `value` JSON text, `updated_at` ISO timestamp).
- DebouncedSettingsStore:
    Wraps another store and coalesces rapid saves of the same key into a single write
    scheduled with `loop.call_later` on the running asyncio loop. Without a running
    loop, or with a zero delay, saves are written through immediately.
Design notes:
- Saves are fire-and-forget. A failed debounced write is logged; `flush()` re-raises.
- `load` on the debounced store returns a pending value before the backend value so
    a reader never sees data older than the last save request.
"""
# endregion
# region Imports
import asyncio
import copy
import json
from datetime import datetime, timezone
from logging import Logger as T_Logger
from pathlib import Path
from typing import Any, Optional, Union

from sqlite_utils import Database
from sqlite_utils.db import NotFoundError

from ..constants import DEFAULT_SAVE_DEBOUNCE_SECONDS, SETTINGS_TABLE
from ..logger import logger as package_logger
from .ports import SettingsStore


# endregion
# region MemorySettingsStore
class MemorySettingsStore:
    """In-memory SettingsStore."""

    def __init__(self, initial: Optional[dict[str, Any]] = None) -> None:
        self.__data: dict[str, Any] = copy.deepcopy(initial) if initial else {}
        self.save_count = 0

    @property
    def data(self) -> dict[str, Any]:
        return copy.deepcopy(self.__data)

    def load(self, key: str) -> Optional[Any]:
        if key not in self.__data:
            return None
        return copy.deepcopy(self.__data[key])

    def save(self, key: str, value: Any) -> None:
        self.__data[key] = copy.deepcopy(value)
        self.save_count += 1


# endregion
# region SqliteSettingsStore
class SqliteSettingsStore:
    """
    SettingsStore backed by a sqlite-utils Database.

    Attributes:
        table_name (str): Name of the table holding `key -> JSON value` rows.
    """

    __db: Database

    def __init__(self, db: Database, table_name: str = SETTINGS_TABLE) -> None:
        if db is None or not isinstance(db, Database):
            raise ValueError("A valid sqlite_utils.Database instance is required.")
        self.__db = db
        self.table_name = table_name

    @classmethod
    def from_path(
        cls, path: Union[str, Path], table_name: str = SETTINGS_TABLE
    ) -> "SqliteSettingsStore":
        """Open (creating if needed) the database file at `path`."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        return cls(Database(path), table_name=table_name)

    @property
    def db(self) -> Database:
        return self.__db

    def load(self, key: str) -> Optional[Any]:
        table = self.__db.table(self.table_name)
        if not table.exists():
            return None
        try:
            row = table.get(key)
        except NotFoundError:
            return None
        return json.loads(row["value"])

    def save(self, key: str, value: Any) -> None:
        self.__db.table(self.table_name).upsert(
            {
                "key": key,
                "value": json.dumps(value, ensure_ascii=False),
                "updated_at": datetime.now(timezone.utc).isoformat(),
            },
            pk="key",
        )


# endregion
# region DebouncedSettingsStore
class DebouncedSettingsStore:
    """
    SettingsStore wrapper that coalesces rapid saves into one write per key.

    Attributes:
        delay (float): Seconds to wait after the last save of a key before writing it.
    """

    __backend: SettingsStore
    __logger: T_Logger

    def __init__(
        self,
        backend: SettingsStore,
        delay: float = DEFAULT_SAVE_DEBOUNCE_SECONDS,
        logger: Optional[T_Logger] = None,
    ) -> None:
        if delay < 0:
            raise ValueError("delay must not be negative")
        self.__backend = backend
        self.delay = delay
        self.__logger = (logger or package_logger).getChild(self.__class__.__name__)
        self.__pending: dict[str, Any] = {}
        self.__handles: dict[str, asyncio.TimerHandle] = {}

    @property
    def backend(self) -> SettingsStore:
        return self.__backend

    @property
    def pending_keys(self) -> list[str]:
        return list(self.__pending)

    def load(self, key: str) -> Optional[Any]:
        if key in self.__pending:
            return copy.deepcopy(self.__pending[key])
        return self.__backend.load(key)

    def save(self, key: str, value: Any) -> None:
        self.__pending[key] = copy.deepcopy(value)
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            loop = None
        if loop is None or self.delay == 0:
            self._write(key)
            return
        handle = self.__handles.pop(key, None)
        if handle is not None:
            handle.cancel()
        self.__logger.debug("Deferring save of %s by %.2fs", key, self.delay)
        self.__handles[key] = loop.call_later(self.delay, self._write_deferred, key)

    def flush(self) -> None:
        """Write every pending value now."""
        for handle in self.__handles.values():
            handle.cancel()
        self.__handles.clear()
        for key in list(self.__pending):
            self._write(key)

    def _write(self, key: str) -> None:
        self.__handles.pop(key, None)
        value = self.__pending.pop(key)
        try:
            self.__backend.save(key, value)
        except Exception:
            # Keep the value so a later flush can retry it.
            self.__pending.setdefault(key, value)
            raise
        self.__logger.debug("Saved settings for %s", key)

    def _write_deferred(self, key: str) -> None:
        if key not in self.__pending:
            return
        try:
            self._write(key)
        except Exception:
            self.__logger.exception("Deferred save of %s failed", key)


# endregion

__all__ = ["MemorySettingsStore", "SqliteSettingsStore", "DebouncedSettingsStore"]
