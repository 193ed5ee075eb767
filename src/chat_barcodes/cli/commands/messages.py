#!/usr/bin/env python3
from __future__ import annotations

from pathlib import Path

import typer

from ...catalog.messages import load_catalog
from ...config.loader import load_sheet_config
from ..core.common import _ctx_value, _resolve_config_and_paper, _run_cli
from ..ui import build_messages_table, console


def register(app: typer.Typer) -> None:
    app.command(help="List the messages that go on the sheet.")(messages)


def messages(
    ctx: typer.Context,
    catalog: Path | None = typer.Option(
        None,
        "--catalog",
        help="TOML file with [[messages]] tables (defaults to the built-in catalog).",
        rich_help_panel="Inputs",
    ),
) -> None:
    config_value, paper_value = _resolve_config_and_paper(ctx)

    def _run() -> None:
        config = load_sheet_config(config_value, paper_size=paper_value)
        entries = load_catalog(catalog)
        console.print(build_messages_table(entries, columns=config.grid.columns))

    _run_cli(_run, debug=bool(_ctx_value(ctx, "debug")))
