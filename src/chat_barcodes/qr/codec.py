#!/usr/bin/env python3
from __future__ import annotations

from typing import Any

import segno
from PIL import Image

QR_ERROR_LEVEL = "M"

_DARK = 0
_LIGHT = 255


def make_qr(data: bytes | str) -> Any:
    return segno.make(
        data,
        error=QR_ERROR_LEVEL,
        micro=False,
        boost_error=False,
    )


def scale_qr(qr: Any, size: int) -> Image.Image:
    """Block-scale a symbol onto a white ``size`` x ``size`` square.

    Every module becomes ``size // modules`` pixels on a side, so edges stay
    sharp; leftover pixels are split evenly around the symbol. Raises
    ``ValueError`` when ``size`` cannot hold one pixel per module.
    """
    rows = _matrix_rows(qr)
    modules = len(rows)
    if modules == 0:
        raise ValueError("QR symbol has no modules")
    if size < modules:
        raise ValueError(
            f"cannot scale QR symbol to {size}x{size}, minimum is {modules}x{modules}"
        )
    factor = size // modules

    base = Image.new("L", (modules, modules), _LIGHT)
    base.putdata([_DARK if is_dark else _LIGHT for row in rows for is_dark in row])
    scaled = base.resize((modules * factor, modules * factor), Image.NEAREST)

    image = Image.new("L", (size, size), _LIGHT)
    offset = (size - modules * factor) // 2
    image.paste(scaled, (offset, offset))
    return image


def render_qr_image(data: bytes | str, size: int) -> Image.Image:
    return scale_qr(make_qr(data), size)


def _matrix_rows(qr: Any) -> tuple[tuple[bool, ...], ...]:
    return tuple(
        tuple(bool(is_dark) for is_dark in row)
        for row in qr.matrix_iter(scale=1, border=0)
    )
