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

from collections.abc import Callable
from dataclasses import dataclass
from typing import Sequence

from PIL import Image, ImageDraw

from ..catalog.messages import Message
from ..config.loader import SheetConfig
from ..qr.codec import render_qr_image
from .fonts import FontCache
from .layout import CellBox, GridLayout, compute_grid, footer_qr_size, page_size_px
from .text import draw_wrapped_text

BACKGROUND = (255, 255, 255)
INK = (0, 0, 0)
CELL_BORDER = (230, 230, 230)

# Pixel offsets inside a cell.
QR_TOP_OFFSET = 6
LABEL_GAP = 8
DESCRIPTION_GAP = 12
DESCRIPTION_PADDING = 6
DESCRIPTION_LINE_SPACING = 1.3

FOOTER_QR_GAP = 10
FOOTER_TEXT_BOTTOM = 12

FOOTER_INDEX = -1


@dataclass(frozen=True)
class SkippedItem:
    index: int
    code: str
    reason: str

    @property
    def is_footer(self) -> bool:
        return self.index == FOOTER_INDEX


@dataclass(frozen=True)
class SheetResult:
    image: Image.Image
    layout: GridLayout
    skipped: tuple[SkippedItem, ...]
    footer_drawn: bool

    @property
    def drawn_count(self) -> int:
        return len(self.layout.cells) - sum(1 for item in self.skipped if not item.is_footer)


SkipCallback = Callable[[SkippedItem], None]


def render_sheet(
    messages: Sequence[Message],
    config: SheetConfig,
    *,
    fonts: FontCache | None = None,
    on_skip: SkipCallback | None = None,
) -> SheetResult:
    """Draw the title, one cell per message and the footer onto a new canvas.

    QR failures for a single message or for the footer are recorded in
    ``SheetResult.skipped`` and reported through ``on_skip``; font errors
    propagate.
    """
    fonts = fonts if fonts is not None else FontCache(config.text.font)
    width, height = page_size_px(config.page.width_in, config.page.height_in, config.page.dpi)
    margin = config.page.margin_px
    layout = compute_grid(width, height, margin, config.grid.columns, len(messages))

    image = Image.new("RGB", (width, height), BACKGROUND)
    draw = ImageDraw.Draw(image)
    skipped: list[SkippedItem] = []

    def _skip(item: SkippedItem) -> None:
        skipped.append(item)
        if on_skip is not None:
            on_skip(item)

    if config.text.title:
        draw.text(
            (width / 2, margin / 2),
            config.text.title,
            font=fonts.get(config.text.title_size),
            fill=INK,
            anchor="mm",
        )

    for cell, message in zip(layout.cells, messages):
        reason = render_cell(
            image,
            draw,
            cell,
            message,
            qr_size=layout.qr_size,
            config=config,
            fonts=fonts,
        )
        if reason is not None:
            _skip(SkippedItem(index=cell.index, code=message.code, reason=reason))

    footer_drawn = False
    if config.footer.enabled and config.footer.url:
        reason = render_footer(image, draw, config=config, fonts=fonts)
        if reason is None:
            footer_drawn = True
        else:
            _skip(SkippedItem(index=FOOTER_INDEX, code=config.footer.url, reason=reason))

    return SheetResult(
        image=image,
        layout=layout,
        skipped=tuple(skipped),
        footer_drawn=footer_drawn,
    )


def render_cell(
    image: Image.Image,
    draw: ImageDraw.ImageDraw,
    cell: CellBox,
    message: Message,
    *,
    qr_size: int,
    config: SheetConfig,
    fonts: FontCache,
) -> str | None:
    """Draw one message into ``cell``; return a reason when the cell is skipped."""
    draw.rectangle(
        (cell.x, cell.y, cell.right, cell.bottom),
        outline=CELL_BORDER,
        width=1,
    )

    symbol, reason = _symbol(message.code, qr_size)
    if symbol is None:
        return reason

    qr_top = cell.y + QR_TOP_OFFSET
    image.paste(symbol, (int(cell.center_x - symbol.width / 2), int(qr_top)))

    label_y = qr_top + qr_size + LABEL_GAP
    draw.text(
        (cell.center_x, label_y),
        message.display_label,
        font=fonts.get(config.text.label_size),
        fill=INK,
        anchor="ms",
    )

    if message.description:
        description_size = config.text.description_size
        draw_wrapped_text(
            draw,
            message.description,
            center_x=cell.center_x,
            top=label_y + DESCRIPTION_GAP,
            max_width=cell.width - 2 * DESCRIPTION_PADDING,
            font=fonts.get(description_size),
            size_px=fonts.pixel_size(description_size),
            spacing=DESCRIPTION_LINE_SPACING,
            fill=INK,
        )
    return None


def render_footer(
    image: Image.Image,
    draw: ImageDraw.ImageDraw,
    *,
    config: SheetConfig,
    fonts: FontCache,
) -> str | None:
    width, height = image.size
    margin = config.page.margin_px
    size = footer_qr_size(width, margin)
    symbol, reason = _symbol(config.footer.url, size)
    if symbol is None:
        return reason

    qr_x = int(width / 2 - symbol.width / 2)
    qr_y = int(height - margin - size - FOOTER_QR_GAP)
    image.paste(symbol, (qr_x, qr_y))

    draw.text(
        (width / 2, height - FOOTER_TEXT_BOTTOM),
        config.footer.url,
        font=fonts.get(config.text.footer_size),
        fill=INK,
        anchor="ms",
    )
    return None


def _symbol(data: str, size: int) -> tuple[Image.Image | None, str]:
    # segno's DataOverflowError subclasses ValueError, as do scale failures.
    try:
        return render_qr_image(data, size), ""
    except ValueError as exc:
        return None, str(exc) or exc.__class__.__name__
