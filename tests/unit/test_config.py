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

import os
import tempfile
import unittest
from contextlib import contextmanager
from pathlib import Path
from unittest import mock

from chat_barcodes.config import (
    DEFAULT_CONFIG_PATH,
    DEFAULT_FOOTER_URL,
    DEFAULT_TITLE,
    PAPER_CONFIGS,
    PAPER_SIZE_ENV,
    SheetConfig,
    load_sheet_config,
    parse_sheet_config,
    resolve_config_path,
)


@contextmanager
def isolated_config_env(**overrides: str):
    with tempfile.TemporaryDirectory() as tmpdir:
        env = {"XDG_CONFIG_HOME": tmpdir, **overrides}
        with mock.patch.dict(os.environ, env):
            if PAPER_SIZE_ENV not in overrides:
                os.environ.pop(PAPER_SIZE_ENV, None)
            yield Path(tmpdir)


class TestLoadSheetConfig(unittest.TestCase):
    def test_packaged_a4_preset_matches_defaults(self) -> None:
        with isolated_config_env():
            config = load_sheet_config()
        self.assertEqual((config.page.width_in, config.page.height_in), (8.27, 11.69))
        self.assertEqual(config.page.dpi, 300)
        self.assertEqual(config.page.margin_px, 80.0)
        self.assertEqual(config.grid.columns, 4)
        self.assertEqual(config.text.title, DEFAULT_TITLE)
        self.assertIsNone(config.text.font)
        self.assertEqual(
            (
                config.text.title_size,
                config.text.label_size,
                config.text.description_size,
                config.text.footer_size,
            ),
            (24.0, 11.0, 8.0, 9.0),
        )
        self.assertTrue(config.footer.enabled)
        self.assertEqual(config.footer.url, DEFAULT_FOOTER_URL)
        self.assertEqual(config.output_path, Path("chat-qr-a4.png"))

    def test_letter_preset(self) -> None:
        with isolated_config_env():
            config = load_sheet_config(paper_size="letter")
        self.assertEqual((config.page.width_in, config.page.height_in), (8.5, 11.0))
        self.assertEqual(config.output_path, Path("chat-qr-letter.png"))

    def test_paper_env_selects_preset(self) -> None:
        with isolated_config_env(**{PAPER_SIZE_ENV: "Letter"}):
            self.assertEqual(resolve_config_path(), PAPER_CONFIGS["LETTER"])

    def test_user_config_is_preferred_over_packaged_default(self) -> None:
        with isolated_config_env() as config_home:
            user_path = config_home / "chat-barcodes" / "config.toml"
            user_path.parent.mkdir(parents=True)
            user_path.write_text("[grid]\ncolumns = 3\n", encoding="utf-8")
            config = load_sheet_config()
        self.assertEqual(config.grid.columns, 3)
        self.assertEqual(config.page.dpi, 300)

    def test_explicit_path_and_paper_conflict(self) -> None:
        with self.assertRaises(ValueError):
            resolve_config_path(DEFAULT_CONFIG_PATH, paper_size="A4")

    def test_missing_explicit_path(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            with self.assertRaises(ValueError) as ctx:
                load_sheet_config(Path(tmpdir) / "nope.toml")
        self.assertIn("config file not found", str(ctx.exception))

    def test_unknown_paper(self) -> None:
        with self.assertRaises(ValueError):
            load_sheet_config(paper_size="A3")


class TestParseSheetConfig(unittest.TestCase):
    def test_empty_data_uses_defaults(self) -> None:
        self.assertEqual(parse_sheet_config({}), SheetConfig())

    def test_symbol_level_and_size_ratio_are_not_configurable(self) -> None:
        config = parse_sheet_config({"qr": {"error": "H"}, "grid": {"qr_ratio": 0.05}})
        self.assertEqual(config, SheetConfig())

    def test_string_values_are_coerced(self) -> None:
        config = parse_sheet_config(
            {
                "page": {"dpi": "150", "margin_px": "40.5"},
                "grid": {"columns": 3.0},
                "footer": {"enabled": "no"},
                "text": {"font": "~/fonts/Go-Regular.ttf"},
            }
        )
        self.assertEqual(config.page.dpi, 150)
        self.assertEqual(config.page.margin_px, 40.5)
        self.assertEqual(config.grid.columns, 3)
        self.assertFalse(config.footer.enabled)
        self.assertEqual(config.text.font, Path("~/fonts/Go-Regular.ttf").expanduser())

    def test_invalid_values_name_the_field(self) -> None:
        cases = (
            ({"grid": {"columns": 0}}, "grid.columns"),
            ({"grid": {"columns": 2.5}}, "grid.columns"),
            ({"page": {"dpi": -300}}, "page.dpi"),
            ({"page": {"margin_px": -1}}, "page.margin_px"),
            ({"page": {"width_in": "wide"}}, "page.width_in"),
            ({"text": {"label_size": 0}}, "text.label_size"),
            ({"footer": {"enabled": "maybe"}}, "footer.enabled"),
            ({"output": {"path": 5}}, "output.path"),
        )
        for data, field in cases:
            with self.subTest(field=field):
                with self.assertRaises(ValueError) as ctx:
                    parse_sheet_config(data)
                self.assertIn(field, str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
