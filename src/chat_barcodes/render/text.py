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
from typing import Sequence

from PIL import ImageDraw

from .fonts import Font

Measure = Callable[[str], float]


def font_measure(font: Font) -> Measure:
    return lambda text: float(font.getlength(text))


def wrap_text(text: str, measure: Measure, max_width: float) -> list[str]:
    return wrap_lines_to_width(text.splitlines() or [""], measure, max_width)


def wrap_lines_to_width(lines: Sequence[str], measure: Measure, max_width: float) -> list[str]:
    wrapped: list[str] = []
    for line in lines:
        if not line:
            wrapped.append("")
            continue
        words = line.split(" ")
        current = ""
        for word in words:
            candidate = word if not current else f"{current} {word}"
            if measure(candidate) <= max_width:
                current = candidate
                continue
            if current:
                wrapped.append(current)
                current = ""
            if measure(word) <= max_width:
                current = word
                continue
            parts: list[str] = []
            chunk = ""
            for ch in word:
                next_chunk = f"{chunk}{ch}"
                if chunk and measure(next_chunk) > max_width:
                    parts.append(chunk)
                    chunk = ch
                else:
                    chunk = next_chunk
            if chunk:
                parts.append(chunk)
            wrapped.extend(parts[:-1])
            current = parts[-1] if parts else ""
        if current:
            wrapped.append(current)
    return wrapped


def line_height(size_px: float, multiplier: float = 1.3) -> float:
    return float(size_px) * multiplier


def draw_wrapped_text(
    draw: ImageDraw.ImageDraw,
    text: str,
    *,
    center_x: float,
    top: float,
    max_width: float,
    font: Font,
    size_px: float,
    spacing: float = 1.3,
    fill: str | tuple[int, int, int] = "black",
) -> list[str]:
    """Draw ``text`` wrapped to ``max_width``, each line centred on ``center_x``."""
    lines = wrap_text(text, font_measure(font), max_width)
    step = line_height(size_px, spacing)
    for offset, line in enumerate(lines):
        if not line:
            continue
        draw.text((center_x, top + offset * step), line, font=font, fill=fill, anchor="ma")
    return lines
