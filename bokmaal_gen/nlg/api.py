# bokmaal_gen/nlg/api.py
"""
Top-level sentence assembly: subject NP, then predicate VP, into one
token buffer, then formatting.

    from bokmaal_gen.core.domain.models import GenerationOptions
    from bokmaal_gen.lexicon.loader import load_lexicon
    from bokmaal_gen.nlg.api import generate_sentence

    lex = load_lexicon("data/lexicon/no.in")
    sentence = generate_sentence(lex, options=GenerationOptions(seed=7))
    print(sentence.text)
"""

from __future__ import annotations

import random
from typing import List, Optional

from bokmaal_gen.constructions.noun_phrase import generate_np
from bokmaal_gen.constructions.verb_phrase import generate_vp
from bokmaal_gen.core.domain.models import GenerationOptions, Sentence
from bokmaal_gen.lexicon.store import Lexicon
from bokmaal_gen.nlg.formatter import format_sentence
from bokmaal_gen.shared.config import settings
from bokmaal_gen.utils.logging_setup import get_logger

logger = get_logger(__name__)


def generate_tokens(
    lexicon: Lexicon,
    rng: random.Random,
    options: Optional[GenerationOptions] = None,
) -> List[str]:
    """Generate the surface tokens of one sentence (NP + VP)."""
    sentence: List[str] = []
    generate_np(sentence, lexicon, rng)
    generate_vp(sentence, lexicon, rng, options=options)
    return sentence


def generate_sentence(
    lexicon: Lexicon,
    *,
    options: Optional[GenerationOptions] = None,
    rng: Optional[random.Random] = None,
    debug: bool = False,
) -> Sentence:
    """
    Main entry point: lexicon -> one formatted sentence.

    If `rng` is None a new random.Random seeded with `options.seed` is used,
    so a fixed seed gives byte-identical output for the same lexicon.

    Raises:
        DomainError: an empty category, a missing agreeing determiner, or
        clause nesting beyond options.max_clause_depth.
    """
    options = options or GenerationOptions.from_settings()
    if rng is None:
        rng = random.Random(options.seed)

    tokens = generate_tokens(lexicon, rng, options)
    text = format_sentence(tokens)
    logger.debug("sentence_generated", tokens=len(tokens), seed=options.seed)

    return Sentence(
        text=text,
        tokens=tokens,
        lang_code=settings.LANG_CODE,
        seed=options.seed,
        debug_info={"lexicon": lexicon.counts()} if debug else None,
    )
