# bokmaal_gen/constructions/verb_phrase.py
"""
Verb phrase construction: an inflected verb with its tense decoration,
followed by whatever complement the verb takes.

Tense (uniform over four forms):

    BASE          -> <modal> <base>                  "vil spise"
    PRESENT       -> <present> [ikke]                "spiser ikke"
    PAST          -> <past> [ikke]                   "spiste"
    PAST_PERFECT  -> har <pp> | hadde <pp> | <modal> ha <pp>

Complement:

    NONE      -> nothing
    NOUN      -> NP
    LOCATIVE  -> til NP
    CLAUSE    -> at NP VP   (embedded clause, one level deeper)
"""

from __future__ import annotations

import random
from typing import List, Optional

from bokmaal_gen.constructions.noun_phrase import generate_np
from bokmaal_gen.core.domain.exceptions import SentenceTooDeepError
from bokmaal_gen.core.domain.models import (
    Complement,
    GenerationOptions,
    VerbForm,
    WordCategory,
)
from bokmaal_gen.lexicon.store import Lexicon
from bokmaal_gen.utils.logging_setup import get_logger

logger = get_logger(__name__)

NEGATION = "ikke"
LOCATIVE_PREPOSITION = "til"
SUBORDINATOR = "at"
PERFECT_PRESENT_AUX = "har"
PERFECT_PAST_AUX = "hadde"
PERFECT_INFINITIVE_AUX = "ha"

# Range of the legacy auxiliary draw (a signed 32-bit integer)
_LEGACY_AUX_RANGE = (-(2 ** 31), 2 ** 31)


def _maybe_negate(buffer: List[str], rng: random.Random) -> None:
    if rng.randrange(2) == 1:
        buffer.append(NEGATION)


def _perfect_auxiliary(
    buffer: List[str], lexicon: Lexicon, rng: random.Random, legacy: bool
) -> None:
    if legacy:
        # Almost never 0 or 1, so this nearly always takes the modal branch
        status = rng.randrange(*_LEGACY_AUX_RANGE)
    else:
        status = rng.randrange(3)

    if status == 0:
        buffer.append(PERFECT_PRESENT_AUX)
    elif status == 1:
        buffer.append(PERFECT_PAST_AUX)
    else:
        buffer.append(lexicon.sample_modal(rng))
        buffer.append(PERFECT_INFINITIVE_AUX)


def generate_vp(
    buffer: List[str],
    lexicon: Lexicon,
    rng: random.Random,
    *,
    options: Optional[GenerationOptions] = None,
    depth: int = 0,
) -> List[str]:
    """
    Append one verb phrase (with complement) to `buffer` and return it.

    `depth` counts the embedded clauses above this VP; the top-level VP is
    depth 0.

    Raises:
        SentenceTooDeepError: depth exceeds options.max_clause_depth.
    """
    options = options or GenerationOptions()
    if depth > options.max_clause_depth:
        raise SentenceTooDeepError(depth, options.max_clause_depth)

    verb = lexicon.sample(WordCategory.VERB, rng)
    form = VerbForm(rng.randrange(len(VerbForm)))

    # Tense
    if form == VerbForm.BASE:
        buffer.append(lexicon.sample_modal(rng))
        buffer.append(verb.base)
    elif form == VerbForm.PRESENT:
        buffer.append(verb.present)
        _maybe_negate(buffer, rng)
    elif form == VerbForm.PAST:
        buffer.append(verb.past)
        _maybe_negate(buffer, rng)
    else:
        _perfect_auxiliary(buffer, lexicon, rng, options.legacy_perfect_auxiliary)
        buffer.append(verb.past_perfect)

    # Complement
    if verb.complement == Complement.LOCATIVE:
        buffer.append(LOCATIVE_PREPOSITION)
        generate_np(buffer, lexicon, rng)
    elif verb.complement == Complement.NOUN:
        generate_np(buffer, lexicon, rng)
    elif verb.complement == Complement.CLAUSE:
        logger.debug("embedded_clause", depth=depth + 1, verb=verb.base)
        buffer.append(SUBORDINATOR)
        generate_np(buffer, lexicon, rng)
        generate_vp(buffer, lexicon, rng, options=options, depth=depth + 1)

    return buffer
