"""Module for word list loading and pattern lookup."""

from os import PathLike
from pathlib import Path
from typing import Iterable

from bitarray import bitarray
from bitarray.util import ones, zeros
from sortedcontainers import SortedList

WordBits = list[list[bitarray]]
"""Element [pos][ch] is a bitarray over the words of one length.

Bit `i` is True if word `i` of that length has letter `ch` (0-25) at position `pos`.
"""


def is_word(word: str) -> bool:
    """Whether `word` consists only of the letters A-Z."""
    return bool(word) and all("A" <= ch <= "Z" for ch in word)


def load_word_list(
    path: str | PathLike, *, min_len: int = 2, max_len: int | None = None
) -> set[str]:
    """Load a word list file, one word per line.

    Words are stripped and uppercased.  Blank lines and words containing anything other
    than letters are skipped.

    Args:
        path: Path to the word list file.
        min_len: Minimum word length to include.
        max_len: Optional maximum word length to include.

    Raises:
        OSError: If the file is missing or unreadable.
    """
    words: set[str] = set()
    with Path(path).open("r", encoding="utf-8") as f:
        for line in f:
            word = line.strip().upper()
            if not is_word(word):
                continue
            if len(word) < min_len:
                continue
            if max_len is not None and len(word) > max_len:
                continue
            words.add(word)
    return words


class WordIndex:
    """Words bucketed by length, with per-position letter bitarrays for pattern lookup."""

    def __init__(self, words: Iterable[str]) -> None:
        self.words_by_length: dict[int, SortedList] = {}
        """Uppercase words keyed by length, each bucket in sorted order."""

        for word in {w.upper() for w in words}:
            if not is_word(word):
                raise ValueError(f"Invalid word: {word!r}")
            self.words_by_length.setdefault(len(word), SortedList()).add(word)

        # The buckets must not be modified after this point, or the bitarrays would no
        # longer line up with the word indexes.
        self._bits: dict[int, WordBits] = {
            length: self._create_word_bits(length, bucket)
            for length, bucket in self.words_by_length.items()
        }

    @staticmethod
    def _create_word_bits(length: int, bucket: SortedList) -> WordBits:
        bits = [[zeros(len(bucket)) for _ in range(26)] for _ in range(length)]
        for word_index, word in enumerate(bucket):
            for pos, ch in enumerate(word):
                bits[pos][ord(ch) - ord("A")][word_index] = True
        return bits

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self.words_by_length.values())

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        bucket = self.words_by_length.get(len(word))
        return bucket is not None and word.upper() in bucket

    def matching(self, pattern: str) -> list[str]:
        """Get all words matching the given pattern, in sorted order.

        Args:
            pattern: Uppercase letters and '.' wildcards, one character per position.

        Raises:
            ValueError: If the pattern contains any other character.
        """
        length = len(pattern)
        bucket = self.words_by_length.get(length)
        if bucket is None:
            return []

        bits = ones(len(bucket))
        for pos, ch in enumerate(pattern):
            if ch == ".":
                continue
            if not ("A" <= ch <= "Z"):
                raise ValueError(f"Invalid character {ch!r} in pattern.")
            bits &= self._bits[length][pos][ord(ch) - ord("A")]
            if not bits.any():
                return []

        return [bucket[i] for i in bits.search(1)]
