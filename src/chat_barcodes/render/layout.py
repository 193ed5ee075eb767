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

import math
from dataclasses import dataclass

# Share of the smaller cell side given to the QR symbol; the rest holds text.
QR_CELL_RATIO = 0.6

FOOTER_WIDTH_RATIO = 0.18
FOOTER_MARGIN_RATIO = 0.8


@dataclass(frozen=True)
class CellBox:
    index: int
    row: int
    col: int
    x: float
    y: float
    width: float
    height: float

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height


@dataclass(frozen=True)
class GridLayout:
    canvas_width: int
    canvas_height: int
    margin: float
    columns: int
    rows: int
    cell_width: float
    cell_height: float
    qr_size: int
    cells: tuple[CellBox, ...]


def page_size_px(width_in: float, height_in: float, dpi: int) -> tuple[int, int]:
    if width_in <= 0 or height_in <= 0:
        raise ValueError("page dimensions must be positive")
    if dpi <= 0:
        raise ValueError("dpi must be a positive integer")
    return round(width_in * dpi), round(height_in * dpi)


def grid_rows(count: int, columns: int) -> int:
    if columns < 1:
        raise ValueError("columns must be at least 1")
    if count < 0:
        raise ValueError("item count cannot be negative")
    return math.ceil(count / columns)


def qr_size_for_cell(cell_width: float, cell_height: float) -> int:
    return int(math.floor(min(cell_width, cell_height) * QR_CELL_RATIO))


def compute_grid(
    canvas_width: int,
    canvas_height: int,
    margin: float,
    columns: int,
    count: int,
) -> GridLayout:
    """Tile the printable area into ``count`` equal cells, row-major.

    The printable area is the canvas minus ``margin`` on every side. An empty
    catalog yields zero rows and no cells.
    """
    if margin < 0:
        raise ValueError("margin cannot be negative")
    usable_w = canvas_width - 2 * margin
    usable_h = canvas_height - 2 * margin
    if usable_w <= 0 or usable_h <= 0:
        raise ValueError("page too small for the requested margin")

    rows = grid_rows(count, columns)
    cell_width = usable_w / columns
    if rows == 0:
        return GridLayout(
            canvas_width=canvas_width,
            canvas_height=canvas_height,
            margin=margin,
            columns=columns,
            rows=0,
            cell_width=cell_width,
            cell_height=0.0,
            qr_size=0,
            cells=(),
        )
    cell_height = usable_h / rows

    cells = []
    for index in range(count):
        row, col = divmod(index, columns)
        cells.append(
            CellBox(
                index=index,
                row=row,
                col=col,
                x=margin + col * cell_width,
                y=margin + row * cell_height,
                width=cell_width,
                height=cell_height,
            )
        )
    return GridLayout(
        canvas_width=canvas_width,
        canvas_height=canvas_height,
        margin=margin,
        columns=columns,
        rows=rows,
        cell_width=cell_width,
        cell_height=cell_height,
        qr_size=qr_size_for_cell(cell_width, cell_height),
        cells=tuple(cells),
    )


def footer_qr_size(canvas_width: int, margin: float) -> int:
    # The footer symbol has to sit inside the bottom margin.
    return int(min(canvas_width * FOOTER_WIDTH_RATIO, margin * FOOTER_MARGIN_RATIO))
