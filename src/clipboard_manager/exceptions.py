"""
clipboard_manager.exceptions

Error taxonomy shared by the clipboard list, the presenter and the adapters.

Contents:
- ClipboardManagerError: Base class for every error raised by this package.
- ClipboardAccessError: The system clipboard could not be read or written.
- EmptyInputError: An empty or whitespace-only text was offered for saving.
- IndexOutOfRangeError: A row index does not address an existing entry.
- InvalidCapacityError: A capacity below one was passed to the list.
"""


class ClipboardManagerError(Exception):
    """Base exception for clipboard manager errors."""

    pass


class ClipboardAccessError(ClipboardManagerError):
    """Raised when the system clipboard denies or fails a read/write."""

    pass


class EmptyInputError(ClipboardManagerError, ValueError):
    """Raised when an empty or whitespace-only text is inserted."""

    pass


class IndexOutOfRangeError(ClipboardManagerError, IndexError):
    """Raised when an index does not address an entry of the current list."""

    def __init__(self, index: int, length: int) -> None:
        self.index = index
        self.length = length
        super().__init__(f"Index {index} is out of range for a list of {length} item(s).")


class InvalidCapacityError(ClipboardManagerError, ValueError):
    """Raised when a capacity below one is requested."""

    pass


__all__ = [
    "ClipboardManagerError",
    "ClipboardAccessError",
    "EmptyInputError",
    "IndexOutOfRangeError",
    "InvalidCapacityError",
]
