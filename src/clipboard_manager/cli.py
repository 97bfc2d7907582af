"""
clipboard_manager.cli

Command line host for the clipboard manager. Each command plays one panel action
(quick save, save text, open the list, copy/delete a row, change capacity, clear)
against the list persisted in the configured SQLite store.
"""

import asyncio
from contextlib import contextmanager
from typing import Iterator

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .config import ClipboardManagerSettings, get_settings
from .logger import configure_logging
from .models import ClipboardView
from .services import (
    ConsoleNotifier,
    DebouncedSettingsStore,
    ListPresenter,
    PyperclipClipboard,
    SqliteSettingsStore,
)

console = Console(
    highlight=False,
    color_system="auto",
)

app = typer.Typer(
    name="clipboard-manager",
    help="Save clipboard snapshots and copy them back later.",
    no_args_is_help=True,
)

_state = {"verbose": False}


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Also log warnings to the console."
    ),
):
    _state["verbose"] = verbose


@contextmanager
def _session() -> Iterator[ListPresenter]:
    """Build a presenter over the persisted list; pending saves are flushed on exit."""
    settings = get_settings(ClipboardManagerSettings)
    logger = configure_logging(settings, console=_state["verbose"])
    store = DebouncedSettingsStore(
        SqliteSettingsStore.from_path(settings.store_path),
        delay=settings.save_debounce_seconds,
        logger=logger,
    )
    presenter = ListPresenter.from_settings(
        settings,
        store,
        PyperclipClipboard(logger=logger),
        ConsoleNotifier(console),
        logger=logger,
    )
    try:
        yield presenter
    finally:
        store.flush()


def _print_view(view: ClipboardView) -> None:
    if view.is_empty:
        console.print(f"[dim]{escape(view.empty_message or '')}[/dim]")
        return
    table = Table(title=f"Saved items ({len(view.rows)}/{view.capacity})")
    table.add_column("#", justify="right", style="cyan")
    table.add_column("Preview", overflow="fold")
    for row in view.rows:
        table.add_row(str(row.index), escape(row.preview))
    console.print(table)


def _exit_on_failure(ok: bool) -> None:
    if not ok:
        raise typer.Exit(code=1)


@app.command(name="save", help="Save the current system clipboard text.")
def save_clipboard():
    with _session() as presenter:
        ok = asyncio.run(presenter.request_save_from_system_clipboard())
    _exit_on_failure(ok)


@app.command(name="add", help="Save the given text.")
def add_text(text: str = typer.Argument(..., help="Text to save.")):
    with _session() as presenter:
        ok = presenter.request_save_text(text)
    _exit_on_failure(ok)


@app.command(name="list", help="Show the saved items, most recent first.")
def list_items():
    with _session() as presenter:
        view = presenter.open()
        _print_view(view)
        presenter.close()


@app.command(name="show", help="Print the full text of a saved item.")
def show_item(index: int = typer.Argument(..., help="Row number from `list`.")):
    with _session() as presenter:
        row = presenter.open().row(index)
        presenter.close()
        if row is None:
            ConsoleNotifier(console).notify_failure(
                presenter.messages.invalid_index.format(index=index)
            )
            raise typer.Exit(code=1)
        console.print(escape(row.text), soft_wrap=True)


@app.command(name="copy", help="Copy a saved item back to the system clipboard.")
def copy_item(index: int = typer.Argument(..., help="Row number from `list`.")):
    with _session() as presenter:
        presenter.open()
        ok = asyncio.run(presenter.request_copy(index))
        presenter.close()
    _exit_on_failure(ok)


@app.command(name="delete", help="Delete a saved item.")
def delete_item(index: int = typer.Argument(..., help="Row number from `list`.")):
    with _session() as presenter:
        presenter.open()
        ok = presenter.request_delete(index)
        if ok:
            _print_view(presenter.view)
        presenter.close()
    _exit_on_failure(ok)


@app.command(name="capacity", help="Set how many items are kept.")
def set_capacity(
    capacity: int = typer.Argument(..., help="Maximum number of items (min 1)."),
):
    with _session() as presenter:
        ok = presenter.request_set_capacity(capacity)
    _exit_on_failure(ok)


@app.command(name="clear", help="Remove every saved item.")
def clear_items(
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation."),
):
    if not yes:
        typer.confirm("Remove all saved items?", abort=True)
    with _session() as presenter:
        presenter.request_clear()


def entry():
    """Entry point for the clipboard-manager command."""
    app()


if __name__ == "__main__":
    entry()
