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
from typing import Union

from PIL import ImageFont

Font = Union[ImageFont.FreeTypeFont, ImageFont.ImageFont]

POINTS_PER_INCH = 72


class FontCache:
    """Fonts keyed by point size, loaded on first use and kept for the run.

    Without ``font_path`` the embedded Pillow default face is used. Loading
    errors are raised as ``RuntimeError`` since no text can be drawn without
    a font.
    """

    def __init__(self, font_path: str | Path | None = None, *, dpi: int = POINTS_PER_INCH) -> None:
        if dpi <= 0:
            raise ValueError("font dpi must be positive")
        self._font_path = Path(font_path).expanduser() if font_path else None
        self._dpi = dpi
        self._faces: dict[float, Font] = {}

    @property
    def font_path(self) -> Path | None:
        return self._font_path

    def __len__(self) -> int:
        return len(self._faces)

    def __contains__(self, size: object) -> bool:
        return size in self._faces

    def pixel_size(self, size: float) -> int:
        return max(1, round(float(size) * self._dpi / POINTS_PER_INCH))

    def get(self, size: float) -> Font:
        face = self._faces.get(size)
        if face is not None:
            return face
        if size <= 0:
            raise ValueError(f"font size must be positive: {size}")
        face = self._load(self.pixel_size(size))
        self._faces[size] = face
        return face

    def _load(self, pixels: int) -> Font:
        try:
            if self._font_path is None:
                return ImageFont.load_default(size=pixels)
            return ImageFont.truetype(str(self._font_path), pixels)
        except (OSError, ValueError) as exc:
            source = str(self._font_path) if self._font_path else "embedded default font"
            raise RuntimeError(f"failed to load {source} (size={pixels}px): {exc}") from exc
