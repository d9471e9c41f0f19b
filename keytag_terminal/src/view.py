"""Terminal UI helpers for KeyTag dot pattern conversion."""

from __future__ import annotations

from dot_pattern import COLUMN_WEIGHTS, EMPTY, FILLED


def display_welcome(word_count: int, wordlist_size: int) -> None:
    print("SLIP39 KeyTag dot pattern converter")
    print(f"Wordlist loaded: {wordlist_size} words. Plate rows: {word_count}.")
    print(f"Legend: {FILLED} = punched dot (bit 1), {EMPTY} = intact (bit 0).")


def display_layout_hint() -> None:
    weights = "   ".join(" ".join(str(w) for w in column) for column in COLUMN_WEIGHTS)
    print(f"Column weights: {weights}")


def prompt_main_menu_choice(word_count: int) -> str:
    print("\nActions:")
    print("  [1] Convert mnemonic to dot rows")
    print(f"  [2] Enter dot rows by hand ({word_count} rows)")
    print("  [3] Check a 12-bit binary string")
    print("  [4] Show pattern for a word index")
    print("  [5] Exit")
    return input("Choose action [1-5]: ").strip()


def get_mnemonic_input() -> str:
    return input("Enter SLIP39 mnemonic words: ")


def get_row_input(row_number: int) -> str:
    return input(f"Row {row_number:02d}: ")


def get_binary_input() -> str:
    return input("Enter 12-bit binary (e.g. 001011110010): ")


def get_index_input() -> str:
    return input("Enter word index (1-1024): ")


def display_row_entry_hint(word_count: int) -> None:
    print(f"\nEnter up to {word_count} rows as 12 (or 11) symbols of 0/1 or {EMPTY}/{FILLED}.")
    print("Empty input finishes, '<' goes back one row, '/cancel' aborts.")


def display_pattern_table(patterns) -> None:
    """Print one line per converted word, in plate order.

    Args:
        patterns: ConversionResult objects in mnemonic order
    """
    print()
    for position, pattern in enumerate(patterns, 1):
        columns = " ".join(pattern.columns)
        print(f"{position:>2}. {columns}   #{pattern.index:<4} {pattern.word.lower()}")


def display_conversion_errors(errors, word_count: int) -> None:
    print(f"\nFound {len(errors)} invalid word(s) out of {word_count}:")
    for err in errors:
        print(f"  Position {err.position}: {err.error}")
    print("Nothing should be marked on the plate until every word is valid.")


def display_row_reading(row_number: int, reading) -> None:
    print(f"  Row {row_number:02d} -> {reading.label}")


def display_row_summary(readings, words) -> None:
    print("\nRows entered:")
    for row_number, reading in enumerate(readings, 1):
        print(f"  {row_number:>2}. {reading.label}")
    if words:
        print(f"\nWords ({len(words)}): {' '.join(words)}")
    else:
        print("\nNo words recognised.")


def display_validation_result(binary: str, result) -> None:
    if result.is_valid:
        print(f"{binary} is valid: index {result.index}")
        return
    print(f"{binary or '(empty)'} is not valid: {result.error}")


def display_index_pattern(pattern, word: str | None) -> None:
    print(f"\nIndex {pattern.index} ({word or 'unknown'})")
    print(f"Binary:  {pattern.to_binary()}")
    print(f"Dots:    {pattern.to_display_string()}")


def display_error(message: str) -> None:
    print(f"Error: {message}")


def display_info(message: str) -> None:
    print(message)


def display_cancelled() -> None:
    print("Entry cancelled.")


def display_goodbye() -> None:
    print("Goodbye.")


def wait_for_continue() -> None:
    input("Press Enter to continue...")
