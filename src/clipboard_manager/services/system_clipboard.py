"""
clipboard_manager.services.system_clipboard

SystemClipboard adapter backed by `pyperclip`.

pyperclip is blocking, so both calls run in a worker thread via `asyncio.to_thread`
and the event loop stays responsive while the OS clipboard tool answers.
"""

import asyncio
from logging import Logger as T_Logger
from typing import Optional

import pyperclip

from ..exceptions import ClipboardAccessError
from ..logger import logger as package_logger


class PyperclipClipboard:
    """Read and write the OS clipboard through pyperclip."""

    __logger: T_Logger

    def __init__(self, logger: Optional[T_Logger] = None) -> None:
        self.__logger = (logger or package_logger).getChild(self.__class__.__name__)

    async def read_text(self) -> str:
        try:
            text = await asyncio.to_thread(pyperclip.paste)
        except pyperclip.PyperclipException as e:
            self.__logger.warning("Reading the clipboard failed: %s", e)
            raise ClipboardAccessError(f"Unable to read the clipboard: {e}") from e
        return text or ""

    async def write_text(self, text: str) -> None:
        try:
            await asyncio.to_thread(pyperclip.copy, text)
        except pyperclip.PyperclipException as e:
            self.__logger.warning("Writing the clipboard failed: %s", e)
            raise ClipboardAccessError(f"Unable to write the clipboard: {e}") from e


__all__ = ["PyperclipClipboard"]
