"""
Word Validator

Holds the legal words: used to pick secrets and to reject illegal guesses.
"""

import random
from typing import Iterable, Optional

from ..config.game_settings import WORD_SIZE, get_word_list, load_word_list


class WordValidator:
    """
    Membership test and random selection over the legal word list.

    Words are stored uppercase; lookups are case-insensitive.
    """

    def __init__(self, words: Iterable[str], word_size: int = WORD_SIZE,
                 rng: Optional[random.Random] = None):
        self.word_size = word_size
        self.words = [word.strip().upper() for word in words]
        self._word_set = frozenset(self.words)
        # Only words of the right length can become secrets
        self._candidates = sorted(w for w in self._word_set if len(w) == word_size)
        if not self._candidates:
            raise ValueError(f"Word list has no {word_size}-letter words")
        self.rng = rng or random.Random()

    @classmethod
    def from_file(cls, json_file_path: Optional[str] = None, word_size: int = WORD_SIZE,
                  rng: Optional[random.Random] = None) -> "WordValidator":
        """Build a validator from a JSON word list (the bundled one by default)."""
        if json_file_path is None and word_size == WORD_SIZE:
            return cls(get_word_list(), word_size, rng)
        return cls(load_word_list(json_file_path, word_size), word_size, rng)

    def is_legal(self, word: str) -> bool:
        """Is the word in the legal word list?"""
        return word.upper() in self._word_set

    def random_word(self) -> str:
        """A uniformly chosen legal word of the configured length."""
        return self.rng.choice(self._candidates)

    def __contains__(self, word) -> bool:
        return isinstance(word, str) and self.is_legal(word)

    def __len__(self) -> int:
        return len(self._word_set)
