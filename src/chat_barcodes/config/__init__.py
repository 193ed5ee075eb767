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

"""Sheet configuration loading."""

from .installer import (
    DEFAULT_CONFIG_PATH,
    DEFAULT_PAPER_SIZE,
    PAPER_CONFIGS,
    PAPER_SIZE_ENV,
    normalize_paper_size,
    resolve_config_path,
    user_config_path,
)
from .loader import (
    DEFAULT_FOOTER_URL,
    DEFAULT_OUTPUT_PATH,
    DEFAULT_TITLE,
    FooterConfig,
    GridConfig,
    PageConfig,
    SheetConfig,
    TextConfig,
    load_sheet_config,
    parse_sheet_config,
)

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_FOOTER_URL",
    "DEFAULT_OUTPUT_PATH",
    "DEFAULT_PAPER_SIZE",
    "DEFAULT_TITLE",
    "FooterConfig",
    "GridConfig",
    "PAPER_CONFIGS",
    "PAPER_SIZE_ENV",
    "PageConfig",
    "SheetConfig",
    "TextConfig",
    "load_sheet_config",
    "normalize_paper_size",
    "parse_sheet_config",
    "resolve_config_path",
    "user_config_path",
]
