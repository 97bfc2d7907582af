"""
clipboard_manager.models
Domain and view models for the clipboard manager.
Contents:
- Domain Models:
    - ClipboardEntry, ClipboardListState, ClipboardList
- View Models:
    - PanelState, RowAction, ClipboardRow, ClipboardView
- Messages:
    - Messages catalogue of user-visible strings and get_messages lookup.
"""

from .clipboard_list import ClipboardEntry, ClipboardList, ClipboardListState  # noqa: F401
from .messages import MESSAGE_CATALOGUES, Messages, get_messages  # noqa: F401
from .view import (  # noqa: F401
    ClipboardRow,
    ClipboardView,
    PanelState,
    RowAction,
    make_preview,
)

__domain__ = ["ClipboardEntry", "ClipboardList", "ClipboardListState"]
__views__ = ["ClipboardRow", "ClipboardView", "PanelState", "RowAction", "make_preview"]
__messages__ = ["MESSAGE_CATALOGUES", "Messages", "get_messages"]
__all__ = [*__domain__, *__views__, *__messages__]
