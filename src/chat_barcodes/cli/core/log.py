#!/usr/bin/env python3
from __future__ import annotations

from rich.markup import escape

from ..ui import console_err


def _warn(message: str, *, quiet: bool) -> None:
    if quiet:
        return
    console_err.print(f"[warning]Warning:[/warning] {escape(message)}", highlight=False)


def _error(message: str) -> None:
    console_err.print(f"[error]Error:[/error] {escape(message)}", highlight=False)
