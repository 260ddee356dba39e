"""
morphology/agreement.py

Determiner agreement for Bokmål noun phrases.

A determiner must match the noun it precedes:

- singular masculine nouns take masculine determiners ("en bil"),
- singular neuter nouns take neuter determiners ("et hus"),
- plural nouns of either gender take plural determiners ("mange biler").

Candidates are partitioned by agreement before drawing, so the result is
uniform over the agreeing determiners (counted with repetition, exactly as
repeated sampling of the whole category would be) and always terminates.
Determiners with no agreement flag set are never returned.
"""

from __future__ import annotations

import random

from bokmaal_gen.core.domain.exceptions import (
    CategoryExhaustedError,
    NoAgreeingDeterminerError,
)
from bokmaal_gen.core.domain.models import Gender, WordCategory
from bokmaal_gen.lexicon.store import Lexicon


def resolve_determiner(
    lexicon: Lexicon, gender: Gender, plural: bool, rng: random.Random
) -> str:
    """
    Return the base form of a random determiner agreeing with gender/number.

    Raises:
        CategoryExhaustedError: the lexicon has no determiners at all.
        NoAgreeingDeterminerError: none of them agree.
    """
    if not lexicon.determiners:
        raise CategoryExhaustedError(WordCategory.DETERMINER.name.lower())

    candidates = lexicon.agreeing_determiners(gender, plural)
    if not candidates:
        raise NoAgreeingDeterminerError(gender.value, plural)

    return rng.choice(candidates).base
