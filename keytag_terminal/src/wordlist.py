"""SLIP39 wordlist loading and validation."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, Mapping, Optional, Union

from embit.wordlists.slip39 import SLIP39_WORDS

from converter import WordlistError

WORDLIST_SIZE = 1024


def _from_sequence(words) -> Dict[str, str]:
    return {str(index): word for index, word in enumerate(words, start=1)}


def validate_wordlist(
    wordlist: Mapping[Union[str, int], str], expected_size: int = WORDLIST_SIZE
) -> Dict[str, str]:
    """Check a keyed wordlist is complete and bijective; return it normalized.

    Keys must cover "1".."expected_size" exactly once (int keys are accepted),
    words must be lowercase and unique.
    """
    if not wordlist:
        raise WordlistError("Wordlist is empty")
    if len(wordlist) != expected_size:
        raise WordlistError(
            f"Expected {expected_size} wordlist entries, got {len(wordlist)}"
        )

    normalized: Dict[str, str] = {}
    seen: Dict[str, str] = {}
    for key, word in wordlist.items():
        key_str = str(key).strip()
        if not key_str.isdecimal() or not 1 <= int(key_str) <= expected_size:
            raise WordlistError(f"Invalid wordlist index {key!r}")
        key_str = str(int(key_str))
        if key_str in normalized:
            raise WordlistError(f"Duplicate wordlist index {key_str}")
        if not isinstance(word, str) or not word:
            raise WordlistError(f"Wordlist entry {key_str} is not a word")
        if word != word.lower() or word != word.strip():
            raise WordlistError(f"Wordlist entry {key_str} must be lowercase: '{word}'")
        if word in seen:
            raise WordlistError(
                f"Word '{word}' appears at both index {seen[word]} and {key_str}"
            )
        seen[word] = key_str
        normalized[key_str] = word
    return normalized


def load_default_wordlist() -> Dict[str, str]:
    """Return the SLIP39 wordlist shipped with embit, keyed "1".."1024"."""
    return validate_wordlist(_from_sequence(SLIP39_WORDS))


def load_wordlist_file(path: Union[str, Path]) -> Dict[str, str]:
    """Load a JSON wordlist: either {"1": "academic", ...} or a 1024-item list."""
    raw_path = str(path or "").strip()
    if not raw_path:
        raise WordlistError("Wordlist path is empty.")

    source = Path(raw_path).expanduser()
    if not source.is_file():
        raise WordlistError(f"Wordlist file not found: {source}")

    try:
        data = json.loads(source.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        raise WordlistError(f"Unable to read wordlist file {source}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise WordlistError(f"Wordlist file {source} is not valid JSON: {exc}") from exc

    if isinstance(data, list):
        data = _from_sequence(data)
    if not isinstance(data, dict):
        raise WordlistError(
            "Wordlist JSON must be an object keyed by index or a list of words."
        )
    return validate_wordlist(data)


def load_wordlist(path: Optional[Union[str, Path]] = None) -> Dict[str, str]:
    if path:
        return load_wordlist_file(path)
    return load_default_wordlist()
