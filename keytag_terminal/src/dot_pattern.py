"""SLIP39 word index <-> 12-bit KeyTag dot pattern codec (no external dependencies).

Layout of a plate row, left to right:

    column 1        column 2        column 3
    2048 1024 512 256   128 64 32 16   8 4 2 1

The 2048 position is never marked: the largest SLIP39 index (1024) fits in
11 bits.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

MIN_INDEX = 1
MAX_INDEX = 1024
BIT_COUNT = 12
COLUMN_SIZE = 4

FILLED = "●"
EMPTY = "○"
DOT_TO_BIT = {FILLED: "1", EMPTY: "0"}
BIT_TO_DOT = {"1": FILLED, "0": EMPTY}

COLUMN_WEIGHTS = (
    (2048, 1024, 512, 256),
    (128, 64, 32, 16),
    (8, 4, 2, 1),
)


class DotPatternError(ValueError):
    """Raised when a dot pattern cannot be constructed."""


class IndexRangeError(DotPatternError):
    """Raised when an index falls outside the SLIP39 range."""


class DotStringError(DotPatternError):
    """Raised when a dot string is malformed."""


def sanitize_dot_input(raw: str) -> str:
    """Remove all whitespace (column separators, newlines) from a dot string."""
    if raw is None:
        return ""
    return "".join(raw.split())


def _check_index(index: int) -> None:
    if isinstance(index, bool) or not isinstance(index, int):
        raise TypeError(f"Index must be an integer, got {type(index).__name__}")
    if index < MIN_INDEX or index > MAX_INDEX:
        raise IndexRangeError(
            f"Index {index} out of SLIP39 range ({MIN_INDEX}-{MAX_INDEX})"
        )


@dataclass(frozen=True)
class DotPattern:
    index: int

    def __post_init__(self) -> None:
        _check_index(self.index)

    @classmethod
    def from_index(cls, index: int) -> "DotPattern":
        return cls(index)

    @classmethod
    def from_dots(cls, dot_string: str) -> "DotPattern":
        """Parse a ●/○ string; whitespace between columns is ignored.

        A well-formed string can still decode to 0 or to a value above 1024,
        in which case IndexRangeError is raised exactly as for from_index().
        """
        cleaned = sanitize_dot_input(dot_string)
        if len(cleaned) != BIT_COUNT:
            raise DotStringError(
                f"Dot string must be {BIT_COUNT} characters long, got {len(cleaned)}"
            )
        bits = []
        for dot in cleaned:
            if dot not in DOT_TO_BIT:
                raise DotStringError(
                    f"Invalid dot character: {dot}. Use {FILLED} or {EMPTY}"
                )
            bits.append(DOT_TO_BIT[dot])
        return cls.from_index(int("".join(bits), 2))

    def to_binary(self) -> str:
        return format(self.index, f"0{BIT_COUNT}b")

    def to_bit_array(self) -> List[int]:
        return [int(bit) for bit in self.to_binary()]

    def to_dots(self) -> str:
        return "".join(BIT_TO_DOT[bit] for bit in self.to_binary())

    def to_columns(self) -> List[str]:
        """Split the dots into the three 4-dot plate columns (see COLUMN_WEIGHTS)."""
        dots = self.to_dots()
        return [dots[i : i + COLUMN_SIZE] for i in range(0, BIT_COUNT, COLUMN_SIZE)]

    def to_display_string(self) -> str:
        return " ".join(self.to_columns())

    def __str__(self) -> str:
        return self.to_display_string()
