"""SLIP39 word -> KeyTag dot pattern conversion with per-word error reporting."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import List, Mapping, Optional, Sequence, Tuple, Union

from dot_pattern import MAX_INDEX, MIN_INDEX, DotPattern


class WordlistError(ValueError):
    """Raised when a wordlist mapping is empty or malformed."""


class WordNotFoundError(LookupError):
    """Raised when a word is not part of the SLIP39 wordlist."""


@dataclass(frozen=True)
class ConversionResult:
    word: str
    index: int
    binary: str
    dots: str
    columns: Tuple[str, ...]


@dataclass(frozen=True)
class PositionError:
    position: int
    word: str
    error: str


@dataclass
class BatchConversionResult:
    is_valid: bool
    word_count: int
    words: List[str] = field(default_factory=list)
    patterns: List[ConversionResult] = field(default_factory=list)
    errors: List[PositionError] = field(default_factory=list)


def _parse_wordlist_key(key: Union[str, int]) -> int:
    if isinstance(key, bool):
        raise WordlistError(f"Invalid wordlist index {key!r}")
    try:
        index = int(key)
    except (TypeError, ValueError) as exc:
        raise WordlistError(f"Invalid wordlist index {key!r}") from exc
    if index < MIN_INDEX or index > MAX_INDEX:
        raise WordlistError(
            f"Wordlist index {index} out of SLIP39 range ({MIN_INDEX}-{MAX_INDEX})"
        )
    return index


def build_reverse_wordlist(wordlist: Mapping[Union[str, int], str]) -> dict:
    """Build the case-insensitive word -> index table for a wordlist mapping."""
    if not wordlist:
        raise WordlistError("Wordlist is empty")

    reverse: dict = {}
    indices: set = set()
    for key, word in wordlist.items():
        index = _parse_wordlist_key(key)
        if index in indices:
            raise WordlistError(f"Duplicate wordlist index {index}")
        indices.add(index)
        if not isinstance(word, str) or not word.strip():
            raise WordlistError(f"Wordlist entry {key!r} is not a word")
        normalized = word.strip().lower()
        if normalized in reverse:
            raise WordlistError(
                f"Word '{normalized}' appears at both index {reverse[normalized]} and {index}"
            )
        reverse[normalized] = index
    return reverse


class WordConverter:
    """Resolve SLIP39 words to dot patterns against one fixed wordlist.

    The word -> index table is built once here and exposed read-only, so a
    converter can be shared between threads without locking.
    """

    def __init__(self, wordlist: Mapping[Union[str, int], str]) -> None:
        reverse = build_reverse_wordlist(wordlist)
        self._wordlist = MappingProxyType({index: word for word, index in reverse.items()})
        self._reverse = MappingProxyType(reverse)

    @property
    def wordlist(self) -> Mapping[int, str]:
        return self._wordlist

    @property
    def reverse_wordlist(self) -> Mapping[str, int]:
        return self._reverse

    def __len__(self) -> int:
        return len(self._reverse)

    def index_for_word(self, word: str) -> int:
        if not isinstance(word, str):
            raise TypeError(f"Word must be a string, got {type(word).__name__}")
        index = self._reverse.get(word.strip().lower())
        if index is None:
            raise WordNotFoundError(f'Word "{word}" not found in SLIP39 wordlist')
        return index

    def word_for_index(self, index: int) -> Optional[str]:
        return self._wordlist.get(index)

    def convert_word_to_dots(self, word: str) -> ConversionResult:
        index = self.index_for_word(word)
        pattern = DotPattern.from_index(index)
        return ConversionResult(
            word=word,
            index=index,
            binary=pattern.to_binary(),
            dots=pattern.to_dots(),
            columns=tuple(pattern.to_columns()),
        )

    def convert_with_validation(
        self, mnemonic: Union[str, Sequence[str]]
    ) -> BatchConversionResult:
        """Convert every word of a mnemonic, collecting failures by position.

        A bad word never stops the batch: it is recorded in ``errors`` with its
        1-based position and the remaining words are still converted.
        An empty mnemonic counts as one empty word, so it is never reported
        as valid.
        """
        if isinstance(mnemonic, str):
            words = mnemonic.split()
        elif isinstance(mnemonic, (list, tuple)):
            words = list(mnemonic)
        else:
            raise TypeError(
                f"Mnemonic must be a string or a list of words, got {type(mnemonic).__name__}"
            )
        if not words:
            words = [""]

        result = BatchConversionResult(is_valid=True, word_count=len(words))
        for position, word in enumerate(words, start=1):
            try:
                conversion = self.convert_word_to_dots(word)
            except (WordNotFoundError, TypeError) as exc:
                result.is_valid = False
                result.errors.append(PositionError(position, word, str(exc)))
                continue
            result.words.append(word)
            result.patterns.append(conversion)
        return result
