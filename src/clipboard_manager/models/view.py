# region Docstring
"""
clipboard_manager.models.view
Declarative view description produced by the presenter for the popup panel.
Overview:
- The presenter never touches widgets; it returns these models and the host view
    layer decides how to draw and bind them.
Contents:
- PanelState: Closed/Open state of the popup panel.
- RowAction: An action button on a row, addressed by the row's current index.
- ClipboardRow: One rendered entry with a truncated preview and the full text.
- ClipboardView: The full panel contents for a single render.
- make_preview: Truncation helper used when rendering rows.
"""
# endregion
# region Imports
from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..constants import DEFAULT_PREVIEW_LENGTH, PREVIEW_ELLIPSIS


# endregion
# region Helpers
def make_preview(text: str, length: int = DEFAULT_PREVIEW_LENGTH) -> str:
    """
    Return the first `length` characters of `text`, with an ellipsis when cut.

    Example:
        >>> make_preview("abc", 2)
        'ab...'
        >>> make_preview("abc", 3)
        'abc'
    """
    if len(text) > length:
        return text[:length] + PREVIEW_ELLIPSIS
    return text


# endregion
# region Pydantic Models
class PanelState(str, Enum):
    CLOSED = "closed"
    OPEN = "open"


class RowAction(BaseModel):
    kind: Literal["copy", "delete"] = Field(..., description="The action to perform")
    index: int = Field(..., description="Index of the row the action applies to")

    model_config = ConfigDict(frozen=True)


class ClipboardRow(BaseModel):
    """
    A rendered clipboard entry.
    Attributes:
        index (int): Position of the entry in the list at render time.
        preview (str): Truncated text for display.
        text (str): The full, untruncated text; used by copy / view full content.
        truncated (bool): Whether the preview omits part of the text.
        actions (list[RowAction]): Copy and delete actions tagged with `index`.
    """

    index: int = Field(..., description="Position of the entry at render time")
    preview: str = Field(..., description="Truncated text for display")
    text: str = Field(..., description="The full, untruncated text")
    truncated: bool = Field(False, description="Whether the preview was truncated")
    actions: list[RowAction] = Field(
        default_factory=list, description="Actions available on the row"
    )

    model_config = ConfigDict(frozen=True)


class ClipboardView(BaseModel):
    """
    The complete popup panel contents for a single render.
    Attributes:
        rows (list[ClipboardRow]): Rows in list order, most recent first.
        capacity (int): Capacity of the list at render time.
        empty_message (Optional[str]): Message shown when there are no rows.
    """

    rows: list[ClipboardRow] = Field(default_factory=list)
    capacity: int = Field(..., description="Capacity of the list at render time")
    empty_message: Optional[str] = Field(
        None, description="Message shown when there are no rows"
    )

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "examples": [
                {
                    "rows": [
                        {
                            "index": 0,
                            "preview": "hello",
                            "text": "hello",
                            "truncated": False,
                            "actions": [
                                {"kind": "copy", "index": 0},
                                {"kind": "delete", "index": 0},
                            ],
                        }
                    ],
                    "capacity": 10,
                    "empty_message": None,
                }
            ]
        },
    )

    @property
    def is_empty(self) -> bool:
        return not self.rows

    def row(self, index: int) -> Optional[ClipboardRow]:
        """Return the row rendered at `index`, or None if there is no such row."""
        if isinstance(index, bool) or not isinstance(index, int):
            return None
        if 0 <= index < len(self.rows):
            return self.rows[index]
        return None


# endregion

__all__ = ["PanelState", "RowAction", "ClipboardRow", "ClipboardView", "make_preview"]
