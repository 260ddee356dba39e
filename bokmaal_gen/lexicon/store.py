# bokmaal_gen/lexicon/store.py
"""
In-memory lexicon: one insertion-ordered list per word category plus a
list of bare modal strings.

The lexicon is filled once by the loader and only read afterwards.
Entries are never removed or mutated.
"""

from __future__ import annotations

import random
from typing import Dict, List, Sequence, Tuple, Union

from bokmaal_gen.core.domain.exceptions import CategoryExhaustedError, LexiconError
from bokmaal_gen.core.domain.models import (
    ENTRY_TYPES,
    Determiner,
    Gender,
    Noun,
    Verb,
    WordCategory,
    WordEntry,
)
from bokmaal_gen.utils.logging_setup import get_logger

logger = get_logger(__name__)


def _coerce_category(category: Union[WordCategory, str]) -> WordCategory:
    """Accept a WordCategory or its one-letter tag. Raises ValueError."""
    if isinstance(category, WordCategory):
        return category
    return WordCategory(category)


class Lexicon:
    """
    Typed word store with uniform random retrieval by category.
    """

    def __init__(self) -> None:
        self._entries: Dict[WordCategory, List[WordEntry]] = {
            WordCategory.NOUN: [],
            WordCategory.DETERMINER: [],
            WordCategory.VERB: [],
        }
        self._modals: List[str] = []

    # mutation ---------------------------------------------------------------

    def insert(self, category: Union[WordCategory, str], entry: WordEntry) -> None:
        """
        Append `entry` to the list for `category` (noun, determiner or verb).

        Unknown categories and type mismatches are reported and ignored.
        """
        try:
            cat = _coerce_category(category)
        except ValueError:
            logger.error("lexicon_invalid_category", category=str(category))
            return

        expected = ENTRY_TYPES.get(cat)
        if expected is None:
            logger.error("lexicon_invalid_category", category=cat.value)
            return
        if not isinstance(entry, expected):
            logger.error(
                "lexicon_entry_type_mismatch",
                category=cat.value,
                entry_type=type(entry).__name__,
            )
            return

        self._entries[cat].append(entry)

    def insert_modal(self, text: str) -> None:
        self._modals.append(text)

    # sampling ---------------------------------------------------------------

    def sample(self, category: Union[WordCategory, str], rng: random.Random) -> WordEntry:
        """
        Return an entry of `category` chosen with probability 1/n.

        Raises:
            CategoryExhaustedError: the category holds no entries.
            LexiconError: `category` is not noun, determiner or verb.
        """
        try:
            cat = _coerce_category(category)
        except ValueError:
            raise LexiconError(f"Invalid word category: {category!r}") from None
        if cat not in self._entries:
            raise LexiconError(f"Invalid word category: {cat.value!r}")
        return self._choose(self._entries[cat], cat, rng)

    def sample_modal(self, rng: random.Random) -> str:
        return self._choose(self._modals, WordCategory.MODAL, rng)

    @staticmethod
    def _choose(pool: Sequence, category: WordCategory, rng: random.Random):
        if not pool:
            raise CategoryExhaustedError(category.name.lower())
        return rng.choice(pool)

    # queries ----------------------------------------------------------------

    def agreeing_determiners(self, gender: Gender, plural: bool) -> List[Determiner]:
        """Determiners that may precede a noun of this gender/number."""
        return [
            det
            for det in self._entries[WordCategory.DETERMINER]
            if det.agrees_with(gender, plural)
        ]

    @property
    def nouns(self) -> Tuple[Noun, ...]:
        return tuple(self._entries[WordCategory.NOUN])

    @property
    def determiners(self) -> Tuple[Determiner, ...]:
        return tuple(self._entries[WordCategory.DETERMINER])

    @property
    def verbs(self) -> Tuple[Verb, ...]:
        return tuple(self._entries[WordCategory.VERB])

    @property
    def modals(self) -> Tuple[str, ...]:
        return tuple(self._modals)

    def counts(self) -> Dict[str, int]:
        data = {cat.value: len(entries) for cat, entries in self._entries.items()}
        data[WordCategory.MODAL.value] = len(self._modals)
        return data

    def __len__(self) -> int:
        return sum(self.counts().values())

    def __repr__(self) -> str:
        return f"Lexicon({self.counts()})"
