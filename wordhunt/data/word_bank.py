"""Candidate word catalog and random selection."""

from __future__ import annotations

import random
from typing import Iterable, List, Optional, Tuple

from ..core.constants import GRID_WIDTH
from ..core.exceptions import WordBankError
from ..utils.logger import get_logger
from .normalization import clean_word


LOGGER = get_logger(__name__)

WORD_CATALOG: Tuple[str, ...] = (
    "STORY", "PLAYER", "WEAPON", "VAULT", "DESERT", "WATER", "QUEST", "WORLD",
    "POWER", "HUMAN", "ROBOT", "TRIBE", "GUARD", "TRADE", "RUINS", "TOWN",
    "SKILL", "MAP", "DOG", "CAT",
)


class WordBank:
    """Read-only word list filtered to what fits on one grid row."""

    def __init__(
        self,
        catalog: Iterable[str] = WORD_CATALOG,
        max_length: int = GRID_WIDTH,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.max_length = max_length
        self._rng = rng or random.Random()
        seen = set()
        words: List[str] = []
        for raw in catalog:
            word = clean_word(raw)
            if not word or word in seen:
                continue
            if len(word) > max_length:
                LOGGER.debug("Dropping %s: longer than %s", word, max_length)
                continue
            seen.add(word)
            words.append(word)
        self._words: Tuple[str, ...] = tuple(words)

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def available_words(self) -> Tuple[str, ...]:
        return self._words

    def first_word(self) -> Optional[str]:
        return self._words[0] if self._words else None

    def select_random_subset(self, count: int) -> List[str]:
        """Return ``count`` distinct words (or all of them) in random order.

        Uses ``random.Random.shuffle`` (Fisher-Yates), so every ordering of
        the catalog is equally likely.
        """

        if count < 0:
            raise WordBankError(f"Cannot select a negative number of words: {count}")
        shuffled = list(self._words)
        self._rng.shuffle(shuffled)
        return shuffled[: min(count, len(shuffled))]
