# bokmaal_gen/nlg/formatter.py

from __future__ import annotations

from typing import Sequence


def format_sentence(tokens: Sequence[str]) -> str:
    """
    Turn a token list into a sentence: space-separated, first letter
    capitalized, terminated with a period.

    >>> format_sentence(["et", "hus", "går"])
    'Et hus går.'
    """
    if not tokens:
        raise ValueError("Cannot format an empty sentence.")

    text = " ".join(tokens)
    return text[:1].upper() + text[1:] + "."
