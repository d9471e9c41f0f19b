"""SLIP39 constraint checks for raw 12-bit binary strings.

validate_binary() never raises. Interactive callers re-run it on every edit
of a row, so every outcome comes back as a ValidationResult.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from dot_pattern import BIT_COUNT, MAX_INDEX, MIN_INDEX

BINARY_CHARS = frozenset("01")


@dataclass(frozen=True)
class ValidationResult:
    is_valid: bool
    error: Optional[str] = None
    index: Optional[int] = None


def validate_binary(binary: str) -> ValidationResult:
    """Check a binary string against SLIP39 rules and extract its index.

    Checks run in a fixed order and the first failure is reported:

    1. non-empty string
    2. exactly 12 characters
    3. only '0' and '1'
    4. leading bit is '0' (index is still returned)
    5. value within 1..1024 (index is still returned)
    """
    if not isinstance(binary, str) or not binary:
        return ValidationResult(False, "Binary must be a non-empty string")
    if len(binary) != BIT_COUNT:
        return ValidationResult(
            False, f"Binary must be {BIT_COUNT} bits long, got {len(binary)}"
        )
    if not set(binary) <= BINARY_CHARS:
        return ValidationResult(False, "Binary string must contain only 0 and 1")

    index = int(binary, 2)
    if binary[0] == "1":
        return ValidationResult(False, "First bit must be 0 for SLIP39", index)
    if index < MIN_INDEX or index > MAX_INDEX:
        return ValidationResult(
            False, f"Index {index} out of SLIP39 range ({MIN_INDEX}-{MAX_INDEX})", index
        )
    return ValidationResult(True, None, index)
