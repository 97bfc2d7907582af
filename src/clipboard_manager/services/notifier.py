"""
clipboard_manager.services.notifier

Notifier adapters: one writes to a logger, one prints toast-style lines with rich.
"""

from logging import Logger as T_Logger
from typing import Optional

from rich.console import Console
from rich.markup import escape

from ..logger import logger as package_logger


class LoggingNotifier:
    """Send notifications to a logger (success/info at INFO, failure at WARNING)."""

    def __init__(self, logger: Optional[T_Logger] = None) -> None:
        self.logger = (logger or package_logger).getChild("notifications")

    def notify_success(self, message: str) -> None:
        self.logger.info(message)

    def notify_failure(self, message: str) -> None:
        self.logger.warning(message)

    def notify_info(self, message: str) -> None:
        self.logger.info(message)


class ConsoleNotifier:
    """Print notifications to a rich Console in toast colours."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()

    def notify_success(self, message: str) -> None:
        self.console.print(f"[bold green]✔[/bold green] {escape(message)}", highlight=False)

    def notify_failure(self, message: str) -> None:
        self.console.print(f"[bold red]✘[/bold red] {escape(message)}", highlight=False)

    def notify_info(self, message: str) -> None:
        self.console.print(f"[bold cyan]ℹ[/bold cyan] {escape(message)}", highlight=False)


__all__ = ["LoggingNotifier", "ConsoleNotifier"]
