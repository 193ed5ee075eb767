#!/usr/bin/env python3
from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass

from rich import box
from rich.console import Console
from rich.table import Table
from rich.theme import Theme

from ..catalog.messages import Message


def isatty(stream, fallback) -> bool:
    if stream is not None:
        try:
            return bool(stream.isatty())
        except (OSError, ValueError, AttributeError):
            return False
    return bool(getattr(fallback, "isatty", lambda: False)())


THEME = Theme(
    {
        "title": "bold cyan",
        "success": "green",
        "warning": "yellow",
        "error": "red",
        "muted": "dim",
    }
)


@dataclass
class UIContext:
    console: Console
    console_err: Console


def _build_console(*, stderr: bool) -> Console:
    raw = sys.__stderr__ if stderr else sys.__stdout__
    fallback = sys.stderr if stderr else sys.stdout
    return Console(stderr=stderr, theme=THEME, force_terminal=isatty(raw, fallback))


DEFAULT_CONTEXT = UIContext(
    console=_build_console(stderr=False),
    console_err=_build_console(stderr=True),
)
console = DEFAULT_CONTEXT.console
console_err = DEFAULT_CONTEXT.console_err


def configure_ui(*, no_color: bool, context: UIContext | None = None) -> None:
    context = context or DEFAULT_CONTEXT
    context.console.no_color = no_color
    context.console_err.no_color = no_color


def build_messages_table(messages: Sequence[Message], *, columns: int) -> Table:
    table = Table(
        title=f"{len(messages)} messages",
        title_style="title",
        box=box.SIMPLE,
        show_lines=False,
    )
    table.add_column("#", style="muted", justify="right", no_wrap=True)
    table.add_column("Cell", style="muted", no_wrap=True)
    table.add_column("Label", style="bold", no_wrap=True)
    table.add_column("Code")
    table.add_column("Description", style="muted")
    for index, message in enumerate(messages):
        row, col = divmod(index, columns)
        table.add_row(
            str(index + 1),
            f"{row + 1},{col + 1}",
            message.display_label,
            message.code,
            message.description,
        )
    return table
