"""
clipboard_manager
Bounded, deduplicated, most-recently-used list of saved clipboard snapshots, with a
presenter that drives a popup panel over it.

The list lives in `clipboard_manager.models`; the presenter, the collaborator
interfaces and the bundled adapters live in `clipboard_manager.services`.
"""

from .exceptions import (  # noqa: F401
    ClipboardAccessError,
    ClipboardManagerError,
    EmptyInputError,
    IndexOutOfRangeError,
    InvalidCapacityError,
)
from .models import ClipboardEntry, ClipboardList, ClipboardView  # noqa: F401
from .services import ListPresenter  # noqa: F401

__version__ = "1.0.0"
