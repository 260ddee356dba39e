# bokmaal_gen/constructions/noun_phrase.py
"""
Noun phrase construction: a noun in one of four forms, with an agreeing
determiner in front of the indefinite ones.

    BASE             -> [determiner, base]          "et hus"
    DEFINITE         -> [definite]                  "huset"
    PLURAL           -> [determiner, plural]        "mange hus"
    PLURAL_DEFINITE  -> [plural_definite]           "husene"

Bokmål marks definiteness with a suffix, so definite forms stand alone.
"""

from __future__ import annotations

import random
from typing import List

from bokmaal_gen.core.domain.models import NounForm, WordCategory
from bokmaal_gen.lexicon.store import Lexicon
from bokmaal_gen.morphology.agreement import resolve_determiner


def generate_np(buffer: List[str], lexicon: Lexicon, rng: random.Random) -> List[str]:
    """Append one noun phrase (1 or 2 tokens) to `buffer` and return it."""
    noun = lexicon.sample(WordCategory.NOUN, rng)
    form = NounForm(rng.randrange(len(NounForm)))

    if form == NounForm.BASE:
        buffer.append(resolve_determiner(lexicon, noun.gender, False, rng))
        buffer.append(noun.base)
    elif form == NounForm.DEFINITE:
        buffer.append(noun.definite)
    elif form == NounForm.PLURAL:
        buffer.append(resolve_determiner(lexicon, noun.gender, True, rng))
        buffer.append(noun.plural)
    else:
        buffer.append(noun.plural_definite)

    return buffer
