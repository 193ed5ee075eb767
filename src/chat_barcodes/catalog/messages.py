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

import functools
import tomllib
import unicodedata
from dataclasses import dataclass
from pathlib import Path

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent / "messages.toml"


@dataclass(frozen=True)
class Message:
    code: str
    label: str = ""
    description: str = ""

    @property
    def display_label(self) -> str:
        return self.label or self.code


def load_catalog(path: str | Path | None = None) -> tuple[Message, ...]:
    """Read ``[[messages]]`` tables from a TOML file.

    Each table needs a non-empty ``code`` without control characters;
    ``label`` and ``description`` are optional strings.
    """
    catalog_path = Path(path).expanduser() if path is not None else DEFAULT_CATALOG_PATH
    with catalog_path.open("rb") as handle:
        data = tomllib.load(handle)
    entries = data.get("messages", [])
    if not isinstance(entries, list):
        raise ValueError(f"{catalog_path}: messages must be an array of tables")
    return tuple(
        _parse_message(entry, field=f"messages[{index}]") for index, entry in enumerate(entries)
    )


@functools.cache
def default_catalog() -> tuple[Message, ...]:
    return load_catalog(DEFAULT_CATALOG_PATH)


def validate_code(code: str, *, field: str = "code") -> str:
    if not code:
        raise ValueError(f"{field} must be a non-empty string")
    for ch in code:
        if unicodedata.category(ch) == "Cc":
            raise ValueError(f"{field} contains control character {ch!r}")
    return code


def _parse_message(entry: object, *, field: str) -> Message:
    if not isinstance(entry, dict):
        raise ValueError(f"{field} must be a table")
    code = entry.get("code")
    if not isinstance(code, str):
        raise ValueError(f"{field}.code must be a non-empty string")
    return Message(
        code=validate_code(code, field=f"{field}.code"),
        label=_optional_str(entry.get("label"), field=f"{field}.label"),
        description=_optional_str(entry.get("description"), field=f"{field}.description"),
    )


def _optional_str(value: object, *, field: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"{field} must be a string")
    return value.strip()
