"""Controller logic for the KeyTag conversion flow."""

from __future__ import annotations

from typing import List, Sequence

import view
from converter import WordConverter, WordlistError
from model import (
    DEFAULT_WORD_COUNT,
    KeyTagInputError,
    RowReading,
    collect_words,
    convert_mnemonic,
    describe_index,
    normalize_word_count,
    read_row,
)
from validator import validate_binary
from wordlist import load_wordlist

ENTRY_CANCEL_COMMANDS = {"/cancel", "/exit"}


def _is_back(value: str) -> bool:
    return value.strip() == "<"


def _convert_and_display(raw: str, converter: WordConverter, word_count: int) -> bool:
    try:
        result = convert_mnemonic(raw, converter, word_count)
    except KeyTagInputError as exc:
        view.display_error(str(exc))
        return False

    if not result.is_valid:
        view.display_conversion_errors(result.errors, result.word_count)
        return False

    view.display_pattern_table(result.patterns)
    view.display_info(f"All {result.word_count} word(s) converted. Check each row before marking the plate.")
    return True


def collect_rows(converter: WordConverter, word_count: int) -> List[RowReading]:
    """Read hand-entered rows until all rows are filled or input is empty."""
    readings: List[RowReading] = []
    view.display_row_entry_hint(word_count)
    while len(readings) < word_count:
        raw = view.get_row_input(len(readings) + 1)
        if (raw or "").strip().lower() in ENTRY_CANCEL_COMMANDS:
            raise KeyboardInterrupt
        if not (raw or "").strip():
            break
        if _is_back(raw):
            if readings:
                readings.pop()
            else:
                view.display_error("Already at the first row.")
            continue
        reading = read_row(raw, converter)
        view.display_row_reading(len(readings) + 1, reading)
        if reading.error:
            view.display_error("Row not accepted. Re-enter it.")
            continue
        readings.append(reading)
    return readings


def _enter_rows(converter: WordConverter, word_count: int) -> None:
    try:
        readings = collect_rows(converter, word_count)
    except KeyboardInterrupt:
        view.display_cancelled()
        return
    view.display_row_summary(readings, collect_words(readings))


def _check_binary() -> None:
    binary = view.get_binary_input().strip()
    view.display_validation_result(binary, validate_binary(binary))


def _show_index(converter: WordConverter) -> None:
    try:
        pattern = describe_index(view.get_index_input())
    except KeyTagInputError as exc:
        view.display_error(str(exc))
        return
    view.display_index_pattern(pattern, converter.word_for_index(pattern.index))


def _session_loop(converter: WordConverter, word_count: int) -> int:
    while True:
        try:
            action = view.prompt_main_menu_choice(word_count)
        except KeyboardInterrupt:
            view.display_cancelled()
            return 1

        try:
            if action == "1":
                _convert_and_display(view.get_mnemonic_input(), converter, word_count)
                view.wait_for_continue()
            elif action == "2":
                _enter_rows(converter, word_count)
            elif action == "3":
                _check_binary()
            elif action == "4":
                _show_index(converter)
            elif action == "5":
                view.display_goodbye()
                return 0
            else:
                view.display_error("Invalid action. Choose 1, 2, 3, 4, or 5.")
        except KeyboardInterrupt:
            view.display_cancelled()


def run(
    word_count: int = DEFAULT_WORD_COUNT,
    wordlist_path: str | None = None,
    mnemonic: Sequence[str] | None = None,
) -> int:
    try:
        rows = normalize_word_count(word_count)
        converter = WordConverter(load_wordlist(wordlist_path))
    except (KeyTagInputError, WordlistError) as exc:
        view.display_error(str(exc))
        return 1

    if mnemonic:
        ok = _convert_and_display(" ".join(mnemonic), converter, rows)
        return 0 if ok else 1

    view.display_welcome(rows, len(converter))
    view.display_layout_hint()
    return _session_loop(converter, rows)
