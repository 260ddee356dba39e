# tests/conftest.py
import os
import random
from typing import Iterable, List, Sequence

import pytest

from bokmaal_gen.lexicon.loader import load_lexicon, load_lexicon_lines
from bokmaal_gen.lexicon.store import Lexicon

# Project root: one level above tests/
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
LEXICON_FILE = os.path.join(PROJECT_ROOT, "data", "lexicon", "no.in")


class ScriptedRandom(random.Random):
    """
    Random source whose draws can be forced.

    `draws` feeds randrange() in call order (noun/verb form, negation,
    auxiliary); `picks` feeds choice() with indices into the sampled
    sequence. Once a script runs out, the generator's own seeded state
    takes over.
    """

    def __new__(cls, *args, **kwargs):
        # random.Random.__new__ would try to seed from the draws list
        return super().__new__(cls)

    def __init__(self, draws: Iterable[int] = (), picks: Iterable[int] = (), *, seed: int = 0):
        super().__init__(seed)
        self.draws: List[int] = list(draws)
        self.picks: List[int] = list(picks)

    def randrange(self, start, stop=None, step=1):
        if self.draws:
            return self.draws.pop(0)
        return super().randrange(start, stop, step)

    def choice(self, seq: Sequence):
        if self.picks:
            return seq[self.picks.pop(0)]
        return super().choice(seq)


@pytest.fixture
def make_rng():
    """Factory for ScriptedRandom instances: make_rng(draws, picks)."""
    return ScriptedRandom


@pytest.fixture
def hus_lexicon() -> Lexicon:
    """One neuter noun, one neuter determiner, one intransitive verb."""
    return load_lexicon_lines(
        [
            "N neut hus huset hus husene",
            "D neut et",
            "V 0 gå går gikk gått",
            "M vil",
        ]
    )


@pytest.fixture
def small_lexicon() -> Lexicon:
    """A few entries of every kind, with determiners for every agreement slot."""
    return load_lexicon_lines(
        [
            "N neut hus huset hus husene",
            "N masc bil bilen biler bilene",
            "D neut et",
            "D masc en",
            "D plur mange",
            "V C vite vet visste visst",
            "V 0 sove sover sov sovet",
            "V L reise reiser reiste reist",
            "V N spise spiser spiste spist",
            "M vil",
            "M kan",
        ]
    )


@pytest.fixture
def clause_only_lexicon() -> Lexicon:
    """Every verb takes a clause, so recursion never bottoms out on its own."""
    return load_lexicon_lines(
        [
            "N neut hus huset hus husene",
            "D neut et",
            "D plur mange",
            "V C vite vet visste visst",
            "M vil",
        ]
    )


@pytest.fixture(scope="session")
def full_lexicon() -> Lexicon:
    """The shipped Bokmål lexicon."""
    if not os.path.exists(LEXICON_FILE):
        pytest.skip("Shipped lexicon data not present")
    return load_lexicon(LEXICON_FILE, strict=True)
