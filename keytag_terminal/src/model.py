"""KeyTag plate helpers: mnemonic entry, hand-entered dot rows, and lookups."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional

from converter import BatchConversionResult, WordConverter
from dot_pattern import BIT_COUNT, DOT_TO_BIT, DotPattern, DotPatternError
from validator import validate_binary


class KeyTagInputError(ValueError):
    """Raised when user input for the KeyTag workflow fails validation."""


# SLIP39 share lengths; a plate has one row per word.
SHARE_WORD_COUNTS = (20, 33)
DEFAULT_WORD_COUNT = 20

ROW_EMPTY = "empty"
ROW_VALID = "valid"
ROW_UNKNOWN = "unknown"
ROW_INVALID = "invalid"


@dataclass(frozen=True)
class RowReading:
    """What a single plate row currently spells.

    An unmarked row is ROW_EMPTY with index None; it is never reported as
    index 0.
    """

    status: str
    binary: str = ""
    index: Optional[int] = None
    word: Optional[str] = None
    error: Optional[str] = None

    @property
    def label(self) -> str:
        if self.status == ROW_VALID:
            return f"#{self.index} {self.word}"
        if self.status == ROW_UNKNOWN:
            return f"#{self.index} (unknown)"
        if self.status == ROW_EMPTY:
            return "(empty)"
        return f"invalid: {self.error}"


def normalize_word_count(value) -> int:
    """Validate the number of rows on the plate (one per mnemonic word)."""
    try:
        count = int(value)
    except (TypeError, ValueError) as exc:
        raise KeyTagInputError(f"Word count must be a number, got '{value}'.") from exc
    if count not in SHARE_WORD_COUNTS:
        supported = " or ".join(str(c) for c in SHARE_WORD_COUNTS)
        raise KeyTagInputError(f"Unsupported word count {count}. Use {supported}.")
    return count


def sanitize_mnemonic(raw: str) -> List[str]:
    if raw is None:
        return []
    return raw.split()


def sanitize_bit_input(raw: str) -> str:
    """Normalize a typed row to a candidate 12-character binary string.

    Accepts 0/1 or ○/● (mixing is fine) with any whitespace. Eleven
    characters mean the row was typed without the fixed 2048 position,
    so a leading '0' is added. Anything else is passed through for
    validate_binary() to report.
    """
    if raw is None:
        return ""
    compact = "".join(raw.split())
    binary = "".join(DOT_TO_BIT.get(ch, ch) for ch in compact)
    if len(binary) == BIT_COUNT - 1:
        binary = "0" + binary
    return binary


def read_row(raw: str, converter: WordConverter) -> RowReading:
    """Decode one hand-entered row into the word it spells."""
    binary = sanitize_bit_input(raw)
    if binary and set(binary) == {"0"} and len(binary) == BIT_COUNT:
        return RowReading(status=ROW_EMPTY, binary=binary)

    validation = validate_binary(binary)
    if not validation.is_valid:
        return RowReading(
            status=ROW_INVALID,
            binary=binary,
            index=validation.index,
            error=validation.error,
        )

    word = converter.word_for_index(validation.index)
    if word is None:
        return RowReading(status=ROW_UNKNOWN, binary=binary, index=validation.index)
    return RowReading(status=ROW_VALID, binary=binary, index=validation.index, word=word)


def collect_words(readings: Iterable[RowReading]) -> List[str]:
    """Rebuild the mnemonic from row readings, skipping rows without a word."""
    return [reading.word for reading in readings if reading.status == ROW_VALID]


def convert_mnemonic(
    raw: str, converter: WordConverter, word_count: int = DEFAULT_WORD_COUNT
) -> BatchConversionResult:
    """Convert a typed mnemonic for a plate with ``word_count`` rows."""
    rows = normalize_word_count(word_count)
    words = sanitize_mnemonic(raw)
    if not words:
        raise KeyTagInputError("Mnemonic input is empty.")
    if len(words) > rows:
        raise KeyTagInputError(
            f"Mnemonic has {len(words)} words but the plate has {rows} rows. "
            f"Use --words {max(SHARE_WORD_COUNTS)} for longer shares."
        )
    return converter.convert_with_validation(words)


def describe_index(raw_index) -> DotPattern:
    """Parse a typed word index and return its dot pattern."""
    value = str(raw_index if raw_index is not None else "").strip()
    if not value:
        raise KeyTagInputError("Index input is empty.")
    if not value.isdecimal():
        raise KeyTagInputError(f"Index must be a whole number, got '{value}'.")
    try:
        return DotPattern.from_index(int(value))
    except DotPatternError as exc:
        raise KeyTagInputError(str(exc)) from exc
