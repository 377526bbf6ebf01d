"""Word cleaning, validation and frequency counting with worker threads."""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor

_LETTERS = "A-Za-zÁÉÍÓÚÑáéíóúñÀ-ÿ"
_WORD = re.compile(rf"[{_LETTERS}][{_LETTERS}0-9\-']*[{_LETTERS}0-9]|[{_LETTERS}]")
_EDGE_PUNCTUATION = re.compile(rf"^[^{_LETTERS}0-9]+|[^{_LETTERS}0-9]+\Z")

# Below this many words, cleaning is done on the calling thread.
_PARALLEL_THRESHOLD = 1000


def _chunks(items: Sequence[str], parts: int) -> list[Sequence[str]]:
    """Split ``items`` into ``parts`` contiguous chunks of near-equal size."""
    size = -(-len(items) // parts)
    return [items[i * size:(i + 1) * size] for i in range(parts)]


class WordCounter:
    """Counts valid words in text, spreading the work over ``workers`` threads."""

    def __init__(self, workers: int = 1) -> None:
        self.workers = workers

    def is_valid_word(self, word: str) -> bool:
        """Return whether ``word`` looks like a word.

        A word starts with a letter, may contain letters, digits, hyphens and
        apostrophes, and ends with a letter or digit.
        """
        return _WORD.fullmatch(word) is not None

    def _clean_chunk(self, words: Iterable[str]) -> list[str]:
        stripped = (_EDGE_PUNCTUATION.sub("", word) for word in words)
        return [word for word in stripped if word and self.is_valid_word(word)]

    def clean_words(self, words: Iterable[str]) -> list[str]:
        """Strip leading and trailing punctuation and keep only valid words.

        The order of the input is preserved.
        """
        words = list(words)
        if len(words) < _PARALLEL_THRESHOLD or self.workers <= 1:
            return self._clean_chunk(words)
        with ThreadPoolExecutor(max_workers=self.workers) as pool:
            cleaned = pool.map(self._clean_chunk, _chunks(words, self.workers))
            return [word for chunk in cleaned for word in chunk]

    def count_word_frequency(self, text: str) -> dict[str, int]:
        """Return how many times each valid word occurs in ``text``."""
        words = self.clean_words(text.split())
        workers = max(self.workers, 1)
        if workers == 1:
            return dict(Counter(words))
        total: Counter[str] = Counter()
        with ThreadPoolExecutor(max_workers=workers) as pool:
            for partial in pool.map(Counter, _chunks(words, workers)):
                total.update(partial)
        return dict(total)

    def count_words(self, text: str) -> int:
        """Return the total number of valid words in ``text``."""
        return sum(self.count_word_frequency(text).values())