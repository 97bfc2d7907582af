# region Docstring
"""
clipboard_manager.services.presenter
Presenter translating panel events into clipboard list operations.
Overview:
- Owns the ClipboardList and the popup panel state. View events (save current
    clipboard, save text, copy row, delete row, set capacity, clear, open/close)
    arrive here. Each is applied to the list, persisted through the SettingsStore,
    reported through the Notifier, and followed by a full re-render.
- render() builds a fresh ClipboardView every call; nothing is patched in place.
Contents:
- Functions:
    - load_clipboard_list(store, key, default_capacity, logger) -> ClipboardList:
        Hydrates the list from the store. On first use it saves the default state.
- Classes:
    - ListPresenter:
        async request_save_from_system_clipboard() -> bool
        request_save_text(text) -> bool
        async request_copy(index) -> bool
        request_delete(index) -> bool
        request_set_capacity(capacity) -> bool
        request_clear() -> None
        render() -> ClipboardView
        open() -> ClipboardView / close() / handle_outside_click() -> bool
Design notes:
- Within an action the order is mutation, persist request, notification, render.
    Clipboard reads happen before the mutation and clipboard writes never mutate.
- Every failure is converted to a notification at this boundary. A failed action
    leaves the list, the view and the store exactly as they were.
- Copy resolves its index against the last rendered view, the same rows the user
    sees. Delete resolves it against the list, which the view always mirrors
    because every mutation re-renders.
"""
# endregion
# region Imports
from logging import Logger as T_Logger
from typing import Any, Mapping, Optional

from pydantic import ValidationError

from ..config import ClipboardManagerSettings
from ..constants import (
    DEFAULT_CAPACITY,
    DEFAULT_PREVIEW_LENGTH,
    EXTENSION_NAME,
    MIN_CAPACITY,
)
from ..exceptions import (
    ClipboardAccessError,
    EmptyInputError,
    IndexOutOfRangeError,
)
from ..logger import logger as package_logger
from ..models import (
    ClipboardList,
    ClipboardRow,
    ClipboardView,
    Messages,
    PanelState,
    RowAction,
    get_messages,
    make_preview,
)
from .ports import Notifier, SettingsStore, SystemClipboard


# endregion
# region Loading
def load_clipboard_list(
    store: SettingsStore,
    key: str = EXTENSION_NAME,
    default_capacity: int = DEFAULT_CAPACITY,
    logger: Optional[T_Logger] = None,
) -> ClipboardList:
    """
    Restore the clipboard list persisted under `key`.

    Arguments:
        store (SettingsStore): Where the list state is persisted.
        key (str): Extension-scoped settings key.
        default_capacity (int): Capacity used when nothing usable is stored.
        logger (Optional[Logger]): Parent logger.

    Returns:
        ClipboardList: The restored list, or an empty one with `default_capacity`.

    A missing value is initialised with the default state and saved right away.
    A stored value is repaired (blank and duplicate entries dropped, trimmed to
    capacity). One that cannot be repaired is logged and replaced by an empty list.
    """
    log = (logger or package_logger).getChild("load_clipboard_list")
    default_capacity = max(MIN_CAPACITY, default_capacity)
    try:
        stored = store.load(key)
    except ValueError as e:
        log.warning("Saved clipboard list under %s could not be decoded: %s", key, e)
        return ClipboardList(capacity=default_capacity)
    if stored is None:
        log.info("No saved clipboard list under %s; starting empty.", key)
        items = ClipboardList(capacity=default_capacity)
        store.save(key, items.to_state().model_dump())
        return items
    if isinstance(stored, Mapping) and stored.get("capacity") is None:
        stored = {**stored, "capacity": default_capacity}
    try:
        items = ClipboardList.from_state(stored)
    except ValidationError as e:
        log.warning("Saved clipboard list under %s is unreadable: %s", key, e)
        return ClipboardList(capacity=default_capacity)
    log.debug("Loaded %s saved item(s) under %s.", len(items), key)
    return items


# endregion
# region ListPresenter Class
class ListPresenter:
    """
    Adapter between the popup panel and the clipboard list.

    Attributes:
        clipboard_list (ClipboardList): The list this presenter owns.
        state (PanelState): Whether the panel is open.
        view (Optional[ClipboardView]): The most recent render, if any.
        messages (Messages): Notification strings.
    """

    __list: ClipboardList
    __store: SettingsStore
    __clipboard: SystemClipboard
    __notifier: Notifier
    __logger: T_Logger

    def __init__(
        self,
        clipboard_list: ClipboardList,
        store: SettingsStore,
        clipboard: SystemClipboard,
        notifier: Notifier,
        settings_key: str = EXTENSION_NAME,
        preview_length: int = DEFAULT_PREVIEW_LENGTH,
        messages: Optional[Messages] = None,
        logger: Optional[T_Logger] = None,
    ) -> None:
        if preview_length < 1:
            raise ValueError("preview_length must be at least 1")
        self.__list = clipboard_list
        self.__store = store
        self.__clipboard = clipboard
        self.__notifier = notifier
        self.__logger = (logger or package_logger).getChild(self.__class__.__name__)
        self.settings_key = settings_key
        self.preview_length = preview_length
        self.messages = messages or get_messages()
        self.__state = PanelState.CLOSED
        self.__view: Optional[ClipboardView] = None

    @classmethod
    def from_settings(
        cls,
        settings: ClipboardManagerSettings,
        store: SettingsStore,
        clipboard: SystemClipboard,
        notifier: Notifier,
        logger: Optional[T_Logger] = None,
    ) -> "ListPresenter":
        """Load the persisted list and build a presenter configured by `settings`."""
        items = load_clipboard_list(
            store, settings.settings_key, settings.max_items, logger=logger
        )
        return cls(
            items,
            store,
            clipboard,
            notifier,
            settings_key=settings.settings_key,
            preview_length=settings.preview_length,
            messages=get_messages(settings.language),
            logger=logger,
        )

    # region Properties
    @property
    def clipboard_list(self) -> ClipboardList:
        return self.__list

    @property
    def state(self) -> PanelState:
        return self.__state

    @property
    def is_open(self) -> bool:
        return self.__state is PanelState.OPEN

    @property
    def view(self) -> Optional[ClipboardView]:
        return self.__view

    # endregion
    # region Rendering
    def render(self) -> ClipboardView:
        """Build the panel view from the current list."""
        rows = [
            ClipboardRow(
                index=index,
                preview=make_preview(entry.text, self.preview_length),
                text=entry.text,
                truncated=len(entry.text) > self.preview_length,
                actions=[
                    RowAction(kind="copy", index=index),
                    RowAction(kind="delete", index=index),
                ],
            )
            for index, entry in enumerate(self.__list)
        ]
        self.__view = ClipboardView(
            rows=rows,
            capacity=self.__list.capacity,
            empty_message=None if rows else self.messages.empty_list,
        )
        return self.__view

    def open(self) -> ClipboardView:
        """Open the panel; always re-renders from the live list."""
        view = self.render()
        self.__state = PanelState.OPEN
        return view

    def close(self) -> None:
        self.__state = PanelState.CLOSED

    def handle_outside_click(self) -> bool:
        """Close the panel on a click outside it. Returns True if it was open."""
        if self.__state is not PanelState.OPEN:
            return False
        self.close()
        return True

    # endregion
    # region Actions
    async def request_save_from_system_clipboard(self) -> bool:
        """Save the current system clipboard text as the most recent entry."""
        try:
            text = await self.__clipboard.read_text()
        except ClipboardAccessError as e:
            self.__logger.warning("Clipboard read failed: %s", e)
            self.__notifier.notify_failure(self.messages.read_failed)
            return False
        try:
            self.__list.insert(text)
        except EmptyInputError:
            self.__logger.info("Clipboard is empty; nothing saved.")
            self.__notifier.notify_failure(self.messages.read_failed)
            return False
        self._commit()
        self.__notifier.notify_success(self.messages.saved)
        self.render()
        return True

    def request_save_text(self, text: str) -> bool:
        """Save `text` as the most recent entry."""
        try:
            self.__list.insert(text)
        except EmptyInputError:
            self.__logger.info("Empty text offered; nothing saved.")
            self.__notifier.notify_failure(self.messages.nothing_to_save)
            return False
        self._commit()
        self.__notifier.notify_success(self.messages.saved)
        self.render()
        return True

    async def request_copy(self, index: int) -> bool:
        """Write the full text of the rendered row at `index` to the system clipboard."""
        view = self.__view if self.__view is not None else self.render()
        row = view.row(index)
        if row is None:
            self.__logger.error(
                "Copy requested for row %s but the view has %s row(s).",
                index,
                len(view.rows),
            )
            self.__notifier.notify_failure(self.messages.invalid_index.format(index=index))
            return False
        try:
            await self.__clipboard.write_text(row.text)
        except ClipboardAccessError as e:
            self.__logger.warning("Clipboard write failed: %s", e)
            self.__notifier.notify_failure(self.messages.copy_failed)
            return False
        self.__notifier.notify_success(self.messages.copied)
        return True

    def request_delete(self, index: int) -> bool:
        """Delete the entry at `index`."""
        try:
            self.__list.remove_at(index)
        except IndexOutOfRangeError as e:
            self.__logger.error("Delete rejected: %s", e)
            self.__notifier.notify_failure(self.messages.invalid_index.format(index=index))
            return False
        self._commit()
        self.__notifier.notify_info(self.messages.deleted)
        self.render()
        return True

    def request_set_capacity(self, capacity: int) -> bool:
        """Change the capacity (clamped to at least one) and evict what no longer fits."""
        try:
            if isinstance(capacity, bool):
                raise TypeError("capacity must be a number")
            if isinstance(capacity, float) and not capacity.is_integer():
                raise ValueError("capacity must be a whole number")
            capacity = max(MIN_CAPACITY, int(capacity))
        except (TypeError, ValueError, OverflowError):
            self.__logger.error("Capacity %r is not a number.", capacity)
            self.__notifier.notify_failure(self.messages.invalid_capacity)
            return False
        evicted = max(0, len(self.__list) - capacity)
        self.__list.set_capacity(capacity)
        if evicted:
            self.__logger.info("Capacity %s evicted %s item(s).", capacity, evicted)
        self._commit()
        self.__notifier.notify_info(self.messages.capacity_changed.format(capacity=capacity))
        self.render()
        return True

    def request_clear(self) -> None:
        self.__list.clear()
        self._commit()
        self.__notifier.notify_info(self.messages.cleared)
        self.render()

    # endregion
    # region Helpers
    def _commit(self) -> None:
        """Request persistence of the current list state; completion is not awaited."""
        payload: dict[str, Any] = self.__list.to_state().model_dump()
        try:
            self.__store.save(self.settings_key, payload)
        except Exception:
            self.__logger.exception("Saving the clipboard list failed.")

    # endregion


# endregion

__all__ = ["ListPresenter", "load_clipboard_list"]
