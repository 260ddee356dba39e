# tests/test_lexicon_store.py
"""
Unit tests for the in-memory Lexicon: insertion rules, sampling and the
empty-category error.
"""

from __future__ import annotations

import random
from collections import Counter

import pytest
from structlog.testing import capture_logs

from bokmaal_gen.core.domain.exceptions import CategoryExhaustedError, LexiconError
from bokmaal_gen.core.domain.models import (
    Determiner,
    Gender,
    Noun,
    Verb,
    WordCategory,
)
from bokmaal_gen.lexicon.store import Lexicon

HUS = Noun(Gender.NEUTER, "hus", "huset", "hus", "husene")
BIL = Noun(Gender.MASCULINE, "bil", "bilen", "biler", "bilene")


def test_insert_by_enum_or_tag() -> None:
    lex = Lexicon()
    lex.insert(WordCategory.NOUN, HUS)
    lex.insert("N", BIL)
    lex.insert("D", Determiner("et", agrees_neuter_singular=True))
    lex.insert(WordCategory.VERB, Verb("sove", "sover", "sov", "sovet"))
    lex.insert_modal("vil")

    assert lex.nouns == (HUS, BIL)
    assert lex.counts() == {"N": 2, "D": 1, "V": 1, "M": 1}
    assert len(lex) == 5


def test_insert_unknown_category_is_reported_not_raised() -> None:
    lex = Lexicon()
    with capture_logs() as logs:
        lex.insert("X", HUS)
        lex.insert(WordCategory.MODAL, HUS)

    assert len(lex) == 0
    assert [e["event"] for e in logs] == [
        "lexicon_invalid_category",
        "lexicon_invalid_category",
    ]


def test_insert_entry_of_wrong_type_is_ignored() -> None:
    lex = Lexicon()
    with capture_logs() as logs:
        lex.insert(WordCategory.VERB, HUS)

    assert lex.verbs == ()
    assert logs[0]["event"] == "lexicon_entry_type_mismatch"


@pytest.mark.parametrize(
    "category", [WordCategory.NOUN, WordCategory.DETERMINER, WordCategory.VERB]
)
def test_sample_from_empty_category_raises(category) -> None:
    with pytest.raises(CategoryExhaustedError):
        Lexicon().sample(category, random.Random(0))


def test_sample_modal_from_empty_lexicon_raises() -> None:
    with pytest.raises(CategoryExhaustedError) as exc:
        Lexicon().sample_modal(random.Random(0))
    assert exc.value.category == "modal"


def test_sample_invalid_category_raises() -> None:
    with pytest.raises(LexiconError):
        Lexicon().sample("Q", random.Random(0))


def test_sample_returns_stored_entries_roughly_uniformly() -> None:
    lex = Lexicon()
    lex.insert(WordCategory.NOUN, HUS)
    lex.insert(WordCategory.NOUN, BIL)
    rng = random.Random(1234)

    counts = Counter(lex.sample(WordCategory.NOUN, rng).base for _ in range(2000))

    assert set(counts) == {"hus", "bil"}
    assert 800 < counts["hus"] < 1200


def test_agreeing_determiners() -> None:
    lex = Lexicon()
    en = Determiner("en", agrees_masculine_singular=True)
    et = Determiner("et", agrees_neuter_singular=True)
    mange = Determiner("mange", agrees_plural=True)
    for det in (en, et, mange, Determiner("dummy")):
        lex.insert(WordCategory.DETERMINER, det)

    assert lex.agreeing_determiners(Gender.MASCULINE, False) == [en]
    assert lex.agreeing_determiners(Gender.NEUTER, False) == [et]
    assert lex.agreeing_determiners(Gender.NEUTER, True) == [mange]
    assert lex.agreeing_determiners(Gender.MASCULINE, True) == [mange]
