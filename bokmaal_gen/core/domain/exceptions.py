# bokmaal_gen/core/domain/exceptions.py
"""
Error taxonomy for lexicon loading and sentence generation.

Only the CLI turns a DomainError into an exit status; library code lets
these propagate.
"""

from __future__ import annotations

from typing import Optional


class DomainError(Exception):
    """Base exception for every failure the generator reports on purpose."""


# ---------------------------------------------------------------------------
# Lexicon
# ---------------------------------------------------------------------------


class LexiconError(DomainError):
    """Base exception for lexicon-related problems."""


class LexiconFormatError(LexiconError):
    """Raised when a lexicon line has too few fields for its type tag."""

    def __init__(self, message: str, *, line: str = "", line_no: Optional[int] = None):
        self.line = line
        self.line_no = line_no
        where = f"line {line_no}: " if line_no is not None else ""
        super().__init__(f"{where}{message} ({line.strip()!r})")


class CategoryExhaustedError(LexiconError):
    """Raised when sampling from a word category that holds no entries."""

    def __init__(self, category: str):
        self.category = category
        super().__init__(f"Lexicon has no entries for category '{category}'.")


# ---------------------------------------------------------------------------
# Generation
# ---------------------------------------------------------------------------


class GenerationError(DomainError):
    """Base exception for failures while assembling a sentence."""


class NoAgreeingDeterminerError(GenerationError):
    """Raised when no determiner agrees with the requested gender/number."""

    def __init__(self, gender: str, plural: bool):
        self.gender = gender
        self.plural = plural
        wanted = "plural" if plural else f"{gender} singular"
        super().__init__(f"No agreeing determiner available for {wanted} nouns.")


class SentenceTooDeepError(GenerationError):
    """Raised when embedded clauses nest deeper than the configured limit."""

    def __init__(self, depth: int, max_depth: int):
        self.depth = depth
        self.max_depth = max_depth
        super().__init__(
            f"Sentence too deep: clause depth {depth} exceeds maximum {max_depth}."
        )
