#!/usr/bin/env python3
from __future__ import annotations

import typer

from .commands import (
    messages as messages_command,
    render as render_command,
)


def register(app: typer.Typer) -> None:
    render_command.register(app)
    messages_command.register(app)
