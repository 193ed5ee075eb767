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

import tempfile
import unicodedata
import unittest
from pathlib import Path

from chat_barcodes.catalog import Message, default_catalog, load_catalog, validate_code


def _write_catalog(tmpdir: str, text: str) -> Path:
    path = Path(tmpdir) / "messages.toml"
    path.write_text(text, encoding="utf-8")
    return path


class TestDefaultCatalog(unittest.TestCase):
    def test_has_36_messages_in_order(self) -> None:
        messages = default_catalog()
        self.assertEqual(len(messages), 36)
        self.assertEqual(messages[0].code, "On my way, be there soon.")
        self.assertEqual(messages[0].label, "On my way")
        self.assertEqual(messages[-1].label, "React to gauge")

    def test_codes_have_no_control_characters(self) -> None:
        for message in default_catalog():
            with self.subTest(label=message.label):
                self.assertFalse(
                    any(unicodedata.category(ch) == "Cc" for ch in message.code)
                )
                self.assertTrue(message.label)
                self.assertTrue(message.description)

    def test_catalog_is_immutable(self) -> None:
        messages = default_catalog()
        self.assertIsInstance(messages, tuple)
        with self.assertRaises(AttributeError):
            messages[0].code = "changed"  # type: ignore[misc]

    def test_unicode_payloads_survive_loading(self) -> None:
        codes = {message.code for message in default_catalog()}
        self.assertIn("Good morning! 👋", codes)
        self.assertIn("BRB – back in 5 minutes.", codes)


class TestMessage(unittest.TestCase):
    def test_display_label_falls_back_to_code(self) -> None:
        self.assertEqual(Message(code="PING", label="").display_label, "PING")
        self.assertEqual(Message(code="PING", label="Ping").display_label, "Ping")


class TestLoadCatalog(unittest.TestCase):
    def test_optional_fields_default_to_empty(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = _write_catalog(tmpdir, '[[messages]]\ncode = "Hello"\n')
            messages = load_catalog(path)
        self.assertEqual(messages, (Message(code="Hello"),))
        self.assertEqual(messages[0].display_label, "Hello")

    def test_empty_file_gives_empty_catalog(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = _write_catalog(tmpdir, "")
            self.assertEqual(load_catalog(path), ())

    def test_invalid_entries_raise(self) -> None:
        cases = (
            ('[[messages]]\nlabel = "no code"\n', "messages[0].code"),
            ('[[messages]]\ncode = ""\n', "non-empty"),
            ('[[messages]]\ncode = "a\\tb"\n', "control character"),
            ('[[messages]]\ncode = "ok"\nlabel = 3\n', "messages[0].label"),
            ('messages = "nope"\n', "array of tables"),
        )
        for text, expected in cases:
            with self.subTest(expected=expected):
                with tempfile.TemporaryDirectory() as tmpdir:
                    path = _write_catalog(tmpdir, text)
                    with self.assertRaises(ValueError) as ctx:
                        load_catalog(path)
                self.assertIn(expected, str(ctx.exception))

    def test_validate_code_rejects_newline(self) -> None:
        with self.assertRaises(ValueError):
            validate_code("hello\n")
        self.assertEqual(validate_code("hello"), "hello")


if __name__ == "__main__":
    unittest.main()
