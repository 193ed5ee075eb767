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

from dataclasses import dataclass, replace
from pathlib import Path

from ...catalog.messages import Message, load_catalog
from ...config.loader import SheetConfig, load_sheet_config
from ...render.fonts import FontCache
from ...render.output import save_png
from ...render.sheet import SheetResult, SkippedItem, render_sheet
from ..core.log import _warn
from ..ui import console


@dataclass(frozen=True)
class RenderArgs:
    config: str | None = None
    paper: str | None = None
    output: str | Path | None = None
    catalog: str | Path | None = None
    dpi: int | None = None
    columns: int | None = None
    quiet: bool = False


@dataclass(frozen=True)
class RenderOutcome:
    output_path: Path
    result: SheetResult


def build_config(args: RenderArgs) -> SheetConfig:
    config = load_sheet_config(args.config, paper_size=args.paper)
    if args.dpi is not None:
        if args.dpi <= 0:
            raise ValueError("--dpi must be a positive integer")
        config = replace(config, page=replace(config.page, dpi=args.dpi))
    if args.columns is not None:
        if args.columns <= 0:
            raise ValueError("--columns must be a positive integer")
        config = replace(config, grid=replace(config.grid, columns=args.columns))
    if args.output is not None:
        config = replace(config, output_path=Path(args.output))
    return config


def run_render(args: RenderArgs) -> RenderOutcome:
    config = build_config(args)
    messages: tuple[Message, ...] = load_catalog(args.catalog)
    if not messages:
        _warn("catalog is empty; only the title and footer will be drawn", quiet=args.quiet)

    def _report(item: SkippedItem) -> None:
        target = "footer" if item.is_footer else f"message {item.index + 1}"
        _warn(f"QR error for {target} {item.code!r}: {item.reason}", quiet=args.quiet)

    fonts = FontCache(config.text.font)
    result = render_sheet(messages, config, fonts=fonts, on_skip=_report)
    output_path = save_png(result.image, config.output_path, dpi=config.page.dpi)
    console.print(f"Saved: {output_path}", style="success", markup=False, highlight=False)
    return RenderOutcome(output_path=output_path, result=result)
