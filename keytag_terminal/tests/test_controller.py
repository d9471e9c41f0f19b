"""Tests for the terminal flow (one-shot conversion and interactive session)."""

from __future__ import annotations

import io
import json
import sys
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path
from unittest import mock

ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(ROOT / "src"))

import controller  # noqa: E402
import main  # noqa: E402


def _run(*inputs: str, **kwargs) -> tuple[int, str]:
    buffer = io.StringIO()
    with mock.patch("builtins.input", side_effect=list(inputs)), redirect_stdout(buffer):
        code = controller.run(**kwargs)
    return code, buffer.getvalue()


class TestOneShotConversion(unittest.TestCase):
    def test_valid_mnemonic(self) -> None:
        code, output = _run(mnemonic=["ACADEMIC", "zero"])
        self.assertEqual(code, 0)
        self.assertIn("○○○○ ○○○○ ○○○●", output)
        self.assertIn("○●○○ ○○○○ ○○○○", output)
        self.assertIn("#1", output)
        self.assertIn("academic", output)
        self.assertIn("All 2 word(s) converted.", output)

    def test_invalid_words_reported_by_position(self) -> None:
        code, output = _run(mnemonic=["academic", "bitcoin", "acid", "ethereum"])
        self.assertEqual(code, 1)
        self.assertIn("Found 2 invalid word(s) out of 4", output)
        self.assertIn('Position 2: Word "bitcoin" not found', output)
        self.assertIn('Position 4: Word "ethereum" not found', output)

    def test_too_many_words_for_plate(self) -> None:
        code, output = _run(mnemonic=["acid"] * 21, word_count=20)
        self.assertEqual(code, 1)
        self.assertIn("plate has 20 rows", output)

    def test_unsupported_word_count(self) -> None:
        code, output = _run(mnemonic=["acid"], word_count=24)
        self.assertEqual(code, 1)
        self.assertIn("Unsupported word count 24", output)

    def test_missing_wordlist_file(self) -> None:
        code, output = _run(mnemonic=["acid"], wordlist_path="/nonexistent/wordlist.json")
        self.assertEqual(code, 1)
        self.assertIn("Wordlist file not found", output)

    def test_wordlist_file_with_bad_key(self) -> None:
        words = {str(i): f"word{i:04d}" for i in range(1, 1024)}
        words["²"] = "word1024"
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "wordlist.json"
            path.write_text(json.dumps(words), encoding="utf-8")
            code, output = _run(mnemonic=["word0001"], wordlist_path=str(path))
        self.assertEqual(code, 1)
        self.assertIn("Invalid wordlist index", output)

    def test_custom_wordlist_file(self) -> None:
        words = {str(i): f"word{i:04d}" for i in range(1, 1025)}
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "wordlist.json"
            path.write_text(json.dumps(words), encoding="utf-8")
            code, output = _run(mnemonic=["WORD0754"], wordlist_path=str(path))
        self.assertEqual(code, 0)
        self.assertIn("○○●○ ●●●● ○○●○", output)

    def test_main_parses_arguments(self) -> None:
        buffer = io.StringIO()
        with redirect_stdout(buffer):
            code = main.main(["--words", "33", "acid", "acne"])
        self.assertEqual(code, 0)
        self.assertIn("#2", buffer.getvalue())


class TestInteractiveSession(unittest.TestCase):
    def test_menu_actions(self) -> None:
        code, output = _run(
            "4", "15",
            "3", "001011110010",
            "2", "○○○○ ○○○○ ○○○●", "<", "000000000010", "100000000000", "",
            "9",
            "5",
        )
        self.assertEqual(code, 0)
        self.assertIn("Index 15 (advocate)", output)
        self.assertIn("001011110010 is valid: index 754", output)
        self.assertIn("Row 01 -> #1 academic", output)
        self.assertIn("Row 01 -> #2 acid", output)
        self.assertIn("First bit must be 0 for SLIP39", output)
        self.assertIn("Words (1): acid", output)
        self.assertIn("Invalid action", output)
        self.assertIn("Goodbye.", output)

    def test_unparseable_index_keeps_session_alive(self) -> None:
        code, output = _run("4", "²", "5")
        self.assertEqual(code, 0)
        self.assertIn("Error: Index must be a whole number", output)
        self.assertIn("Goodbye.", output)

    def test_empty_mnemonic_from_menu(self) -> None:
        code, output = _run("1", "   ", "", "5")
        self.assertEqual(code, 0)
        self.assertIn("Mnemonic input is empty.", output)
        self.assertNotIn("converted", output)

    def test_convert_from_menu(self) -> None:
        code, output = _run("1", "academic nope", "", "5")
        self.assertEqual(code, 0)
        self.assertIn("Position 2", output)

    def test_cancel_row_entry(self) -> None:
        code, output = _run("2", "/cancel", "5")
        self.assertEqual(code, 0)
        self.assertIn("Entry cancelled.", output)

    def test_ctrl_c_at_menu(self) -> None:
        buffer = io.StringIO()
        with mock.patch("builtins.input", side_effect=KeyboardInterrupt), redirect_stdout(buffer):
            code = controller.run()
        self.assertEqual(code, 1)
        self.assertIn("Entry cancelled.", buffer.getvalue())


if __name__ == "__main__":
    unittest.main()
