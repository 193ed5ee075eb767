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

import os
import sys
from pathlib import Path

from platformdirs import user_config_dir

PACKAGE_ROOT = Path(__file__).resolve().parents[1]
PAPER_CONFIGS = {
    "A4": PACKAGE_ROOT / "config/a4.toml",
    "LETTER": PACKAGE_ROOT / "config/letter.toml",
}
DEFAULT_PAPER_SIZE = "A4"
DEFAULT_CONFIG_PATH = PAPER_CONFIGS[DEFAULT_PAPER_SIZE]
USER_CONFIG_FILENAME = "config.toml"
PAPER_SIZE_ENV = "CHAT_BARCODES_PAPER_SIZE"
XDG_CONFIG_ENV = "XDG_CONFIG_HOME"


def user_config_path() -> Path:
    xdg_override = os.environ.get(XDG_CONFIG_ENV)
    if xdg_override:
        return Path(xdg_override) / "chat-barcodes" / USER_CONFIG_FILENAME
    if sys.platform == "darwin":
        return Path.home() / ".config" / "chat-barcodes" / USER_CONFIG_FILENAME
    return Path(user_config_dir("chat-barcodes", appauthor=False)) / USER_CONFIG_FILENAME


def normalize_paper_size(value: str) -> str:
    normalized = value.strip().upper()
    if normalized not in PAPER_CONFIGS:
        raise ValueError(f"paper must be one of {', '.join(sorted(PAPER_CONFIGS))}: {value}")
    return normalized


def resolve_config_path(path: str | Path | None = None, *, paper_size: str | None = None) -> Path:
    if path is not None and paper_size is not None:
        raise ValueError("use either a config path or a paper size, not both")
    if path is not None:
        config_path = Path(path).expanduser()
        if not config_path.is_file():
            raise ValueError(f"config file not found: {config_path}")
        return config_path
    if paper_size is not None:
        return PAPER_CONFIGS[normalize_paper_size(paper_size)]
    env_paper = os.environ.get(PAPER_SIZE_ENV)
    if env_paper:
        return PAPER_CONFIGS[normalize_paper_size(env_paper)]
    user_path = user_config_path()
    if user_path.is_file():
        return user_path
    return DEFAULT_CONFIG_PATH
