#!/usr/bin/env python3
from __future__ import annotations

from pathlib import Path

from PIL import Image


def save_png(image: Image.Image, path: str | Path, *, dpi: int | None = None) -> Path:
    output = Path(path).expanduser()
    if output.parent and not output.parent.exists():
        output.parent.mkdir(parents=True, exist_ok=True)
    params: dict[str, object] = {}
    if dpi:
        params["dpi"] = (dpi, dpi)
    image.save(output, format="PNG", **params)
    return output
