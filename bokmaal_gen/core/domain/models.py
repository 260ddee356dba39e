# bokmaal_gen/core/domain/models.py
"""
Word entry model for the Bokmål lexicon.

Entries are a tagged union over three frozen dataclasses that all carry a
`base` form:

    WordEntry = Noun | Determiner | Verb

A modal is a bare string with no inflection. Nothing here holds a
reference to the lexicon or to other entries; the generator links words
only by sampling within a category.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field

from bokmaal_gen.shared.config import Settings, settings

# --- Enums ---


class Gender(str, Enum):
    """Grammatical gender. Feminine ("ei") is folded into masculine."""
    MASCULINE = "masc"
    NEUTER = "neut"


class Complement(str, Enum):
    """What a verb takes after it."""
    NONE = "0"       # "barnet sov"
    LOCATIVE = "L"   # til + NP: "gikk til byen"
    NOUN = "N"       # object NP: "spiste eplet"
    CLAUSE = "C"     # at + NP + VP: "vet at gutten sov"

    @classmethod
    def from_code(cls, code: str) -> "Complement":
        """Map the first character of a lexicon <takes> field to a tag."""
        head = code[:1]
        for member in (cls.LOCATIVE, cls.NOUN, cls.CLAUSE):
            if head == member.value:
                return member
        return cls.NONE


class WordCategory(str, Enum):
    """Lexicon categories; values double as the lexicon-file type tags."""
    NOUN = "N"
    DETERMINER = "D"
    VERB = "V"
    MODAL = "M"


class NounForm(IntEnum):
    BASE = 0
    DEFINITE = 1
    PLURAL = 2
    PLURAL_DEFINITE = 3


class VerbForm(IntEnum):
    BASE = 0          # Preceded by a modal: "vil spise"
    PRESENT = 1
    PAST = 2
    PAST_PERFECT = 3  # Preceded by an auxiliary: "har spist"


# --- Entries ---


@dataclass(frozen=True, slots=True)
class Noun:
    # Irregular plurals (mann/menn, barn/barna) rule out suffix rules
    gender: Gender
    base: str
    definite: str
    plural: str
    plural_definite: str


@dataclass(frozen=True, slots=True)
class Determiner:
    base: str
    agrees_masculine_singular: bool = False
    agrees_neuter_singular: bool = False
    agrees_plural: bool = False

    def agrees_with(self, gender: Gender, plural: bool) -> bool:
        """
        True if this determiner can precede a noun of the given gender/number.
        Gender is irrelevant for plurals.
        """
        if plural:
            return self.agrees_plural
        if gender == Gender.MASCULINE:
            return self.agrees_masculine_singular
        return self.agrees_neuter_singular

    @property
    def selectable(self) -> bool:
        return (
            self.agrees_masculine_singular
            or self.agrees_neuter_singular
            or self.agrees_plural
        )


@dataclass(frozen=True, slots=True)
class Verb:
    base: str
    present: str
    past: str
    past_perfect: str
    complement: Complement = Complement.NONE


WordEntry = Union[Noun, Determiner, Verb]

ENTRY_TYPES = {
    WordCategory.NOUN: Noun,
    WordCategory.DETERMINER: Determiner,
    WordCategory.VERB: Verb,
}


# --- Generation controls ---


@dataclass
class GenerationOptions:
    """
    High-level generation controls.

    seed:
        Seed for the random source; None draws from system entropy.
    max_clause_depth:
        How many embedded clauses may nest below the top-level VP.
    legacy_perfect_auxiliary:
        Use the legacy full-range integer draw for the past-perfect
        auxiliary instead of a fair 3-way choice.
    """

    seed: Optional[int] = None
    max_clause_depth: int = 16
    legacy_perfect_auxiliary: bool = False

    @classmethod
    def from_settings(
        cls, cfg: Optional[Settings] = None, **overrides: Any
    ) -> "GenerationOptions":
        cfg = cfg or settings
        values: Dict[str, Any] = {
            "max_clause_depth": cfg.MAX_CLAUSE_DEPTH,
            "legacy_perfect_auxiliary": cfg.LEGACY_PERFECT_AUXILIARY,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)


# --- Output ---


class Sentence(BaseModel):
    """The output generated text."""
    text: str
    tokens: List[str] = Field(default_factory=list)
    lang_code: str = "nb"
    seed: Optional[int] = None

    # Debug info (e.g. lexicon counts) surfaced by the CLI with --debug
    debug_info: Optional[Dict[str, Any]] = None
