#!/usr/bin/env python3
# Copyright (C) 2026 Alex Stoyanov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/>.

from __future__ import annotations

from pathlib import Path

import typer

from ..core.common import _ctx_value, _resolve_config_and_paper, _run_cli
from ..flows.render import RenderArgs, run_render

_RENDER_HELP = (
    "Render the QR code sheet to a PNG image.\n\n"
    "Examples:\n"
    "  chat-barcodes render\n"
    "  chat-barcodes --paper letter render -o chat-qr-letter.png\n"
    "  chat-barcodes render --catalog my-messages.toml --columns 3\n"
)


def register(app: typer.Typer) -> None:
    app.command(help=_RENDER_HELP)(render)


def render(
    ctx: typer.Context,
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Output PNG path (defaults to the config's output.path).",
        rich_help_panel="Outputs",
    ),
    catalog: Path | None = typer.Option(
        None,
        "--catalog",
        help="TOML file with [[messages]] tables (defaults to the built-in catalog).",
        rich_help_panel="Inputs",
    ),
    dpi: int | None = typer.Option(
        None,
        "--dpi",
        help="Override the page resolution.",
        rich_help_panel="Layout",
    ),
    columns: int | None = typer.Option(
        None,
        "--columns",
        help="Override the number of grid columns.",
        rich_help_panel="Layout",
    ),
) -> None:
    config_value, paper_value = _resolve_config_and_paper(ctx)
    args = RenderArgs(
        config=config_value,
        paper=paper_value,
        output=output,
        catalog=catalog,
        dpi=dpi,
        columns=columns,
        quiet=bool(_ctx_value(ctx, "quiet")),
    )
    _run_cli(lambda: run_render(args), debug=bool(_ctx_value(ctx, "debug")))
