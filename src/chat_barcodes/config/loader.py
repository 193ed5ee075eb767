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

import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from .installer import resolve_config_path

DEFAULT_TITLE = "Chat QR Codes – One Scan = One Message"
DEFAULT_FOOTER_URL = "https://github.com/arran4/chat-barcodes"
DEFAULT_OUTPUT_PATH = "chat-qr-a4.png"


@dataclass(frozen=True)
class PageConfig:
    width_in: float = 8.27
    height_in: float = 11.69
    dpi: int = 300
    margin_px: float = 80.0


@dataclass(frozen=True)
class GridConfig:
    columns: int = 4


@dataclass(frozen=True)
class TextConfig:
    title: str = DEFAULT_TITLE
    font: Path | None = None
    title_size: float = 24.0
    label_size: float = 11.0
    description_size: float = 8.0
    footer_size: float = 9.0


@dataclass(frozen=True)
class FooterConfig:
    enabled: bool = True
    url: str = DEFAULT_FOOTER_URL


@dataclass(frozen=True)
class SheetConfig:
    page: PageConfig = field(default_factory=PageConfig)
    grid: GridConfig = field(default_factory=GridConfig)
    text: TextConfig = field(default_factory=TextConfig)
    footer: FooterConfig = field(default_factory=FooterConfig)
    output_path: Path = Path(DEFAULT_OUTPUT_PATH)


def load_sheet_config(
    path: str | Path | None = None,
    *,
    paper_size: str | None = None,
) -> SheetConfig:
    config_path = resolve_config_path(path, paper_size=paper_size)
    data = _load_toml(config_path)
    return parse_sheet_config(data)


def parse_sheet_config(data: dict[str, object]) -> SheetConfig:
    return SheetConfig(
        page=_parse_page(_get_dict(data, "page")),
        grid=_parse_grid(_get_dict(data, "grid")),
        text=_parse_text(_get_dict(data, "text")),
        footer=_parse_footer(_get_dict(data, "footer")),
        output_path=Path(
            _parse_str(
                _get_dict(data, "output").get("path"),
                field="output.path",
                default=DEFAULT_OUTPUT_PATH,
            )
        ),
    )


def _parse_page(cfg: dict[str, object]) -> PageConfig:
    defaults = PageConfig()
    margin = _parse_float(cfg.get("margin_px"), field="page.margin_px", default=defaults.margin_px)
    if margin < 0:
        raise ValueError("page.margin_px cannot be negative")
    return PageConfig(
        width_in=_parse_positive_float(
            cfg.get("width_in"), field="page.width_in", default=defaults.width_in
        ),
        height_in=_parse_positive_float(
            cfg.get("height_in"), field="page.height_in", default=defaults.height_in
        ),
        dpi=_parse_positive_int(cfg.get("dpi"), field="page.dpi", default=defaults.dpi),
        margin_px=margin,
    )


def _parse_grid(cfg: dict[str, object]) -> GridConfig:
    return GridConfig(
        columns=_parse_positive_int(cfg.get("columns"), field="grid.columns", default=4),
    )


def _parse_text(cfg: dict[str, object]) -> TextConfig:
    defaults = TextConfig()
    font = _parse_str(cfg.get("font"), field="text.font", default="")
    return TextConfig(
        title=_parse_str(cfg.get("title"), field="text.title", default=defaults.title),
        font=Path(font).expanduser() if font else None,
        title_size=_parse_positive_float(
            cfg.get("title_size"), field="text.title_size", default=defaults.title_size
        ),
        label_size=_parse_positive_float(
            cfg.get("label_size"), field="text.label_size", default=defaults.label_size
        ),
        description_size=_parse_positive_float(
            cfg.get("description_size"),
            field="text.description_size",
            default=defaults.description_size,
        ),
        footer_size=_parse_positive_float(
            cfg.get("footer_size"), field="text.footer_size", default=defaults.footer_size
        ),
    )


def _parse_footer(cfg: dict[str, object]) -> FooterConfig:
    return FooterConfig(
        enabled=_parse_bool(cfg.get("enabled"), field="footer.enabled", default=True),
        url=_parse_str(cfg.get("url"), field="footer.url", default=DEFAULT_FOOTER_URL),
    )


def _load_toml(path: Path) -> dict[str, object]:
    with path.open("rb") as handle:
        return tomllib.load(handle)


def _get_dict(data: dict[str, object], key: str) -> dict[str, object]:
    value = data.get(key)
    if isinstance(value, dict):
        return value
    return {}


def _parse_str(value: object, *, field: str, default: str) -> str:
    if value is None:
        return default
    if not isinstance(value, str):
        raise ValueError(f"{field} must be a string")
    return value.strip()


def _parse_bool(value: object, *, field: str, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        if value in (0, 1):
            return bool(value)
        raise ValueError(f"{field} must be a boolean")
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
        raise ValueError(f"{field} must be a boolean")
    raise ValueError(f"{field} must be a boolean")


def _parse_int_strict(value: object, *, field: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{field} must be an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"{field} must be an integer")
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            raise ValueError(f"{field} must be an integer")
        try:
            return int(text)
        except ValueError as exc:
            raise ValueError(f"{field} must be an integer") from exc
    raise ValueError(f"{field} must be an integer")


def _parse_positive_int(value: object, *, field: str, default: int) -> int:
    if value is None:
        return default
    parsed = _parse_int_strict(value, field=field)
    if parsed <= 0:
        raise ValueError(f"{field} must be a positive integer")
    return parsed


def _parse_float(value: object, *, field: str, default: float) -> float:
    if value is None:
        return default
    if isinstance(value, bool):
        raise ValueError(f"{field} must be a number")
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError as exc:
            raise ValueError(f"{field} must be a number") from exc
    raise ValueError(f"{field} must be a number")


def _parse_positive_float(value: object, *, field: str, default: float) -> float:
    parsed = _parse_float(value, field=field, default=default)
    if parsed <= 0:
        raise ValueError(f"{field} must be positive")
    return parsed
