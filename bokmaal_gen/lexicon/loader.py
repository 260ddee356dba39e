"""
lexicon/loader.py
=================

Loader for the flat-file Bokmål lexicon.

What it loads
-------------
One entry per line, whitespace-delimited. The first field is a type tag:

    N <gend> <base> <definite> <plural> <pluralDefinite>
    D <gend> <base>
    V <takes> <base> <present> <past> <pastPerfect>
    M <word>

Examples:

    N neut hus huset hus husene
    N masc bil bilen biler bilene
    D neut et
    D masc en
    D plur mange
    V N spise spiser spiste spist
    M vil

- Noun `<gend>`: "neut" is neuter; anything else is masculine.
- Determiner `<gend>`: exactly one of "neut", "masc", "plur".
- Verb `<takes>`: first character L (locative), N (noun), C (clause);
  anything else means the verb takes no complement.

What it returns
---------------
A populated `bokmaal_gen.lexicon.store.Lexicon`.

Error behaviour
---------------
- Unknown determiner form: logged, and an unselectable dummy determiner
  (all agreement flags false) is inserted in its place.
- Unknown type tag: logged, nothing inserted.
- Too few fields: LexiconFormatError. Lenient mode logs and skips the line;
  strict mode lets the error propagate.
- Missing, unreadable or non-UTF-8 file: logged, an empty Lexicon is
  returned.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Union

from bokmaal_gen.core.domain.exceptions import LexiconFormatError
from bokmaal_gen.core.domain.models import (
    Complement,
    Determiner,
    Gender,
    Noun,
    Verb,
    WordCategory,
)
from bokmaal_gen.lexicon.store import Lexicon
from bokmaal_gen.shared.config import settings
from bokmaal_gen.utils.logging_setup import get_logger

logger = get_logger(__name__)

# Placeholder inserted for determiner lines with an unknown form
DUMMY_DETERMINER = Determiner("dummy", False, False, False)

# Determiner <gend> field -> (masc singular, neut singular, plural)
_DETERMINER_FLAGS: Dict[str, tuple] = {
    "masc": (True, False, False),
    "neut": (False, True, False),
    "plur": (False, False, True),
}


# ---------------------------------------------------------------------------
# Per-tag parsers
# ---------------------------------------------------------------------------


def _require(fields: List[str], count: int, line: str, line_no: Optional[int]) -> None:
    if len(fields) < count:
        raise LexiconFormatError(
            f"expected {count} fields for '{fields[0]}' entry, got {len(fields)}",
            line=line,
            line_no=line_no,
        )


def _add_noun(fields: List[str], lexicon: Lexicon, line_no: Optional[int]) -> None:
    gender = Gender.NEUTER if fields[1] == "neut" else Gender.MASCULINE
    lexicon.insert(WordCategory.NOUN, Noun(gender, *fields[2:6]))


def _add_determiner(fields: List[str], lexicon: Lexicon, line_no: Optional[int]) -> None:
    flags = _DETERMINER_FLAGS.get(fields[1])
    if flags is None:
        logger.warning(
            "lexicon_unknown_determiner_form", form=fields[1], line_no=line_no
        )
        lexicon.insert(WordCategory.DETERMINER, DUMMY_DETERMINER)
        return
    lexicon.insert(WordCategory.DETERMINER, Determiner(fields[2], *flags))


def _add_verb(fields: List[str], lexicon: Lexicon, line_no: Optional[int]) -> None:
    complement = Complement.from_code(fields[1])
    lexicon.insert(WordCategory.VERB, Verb(*fields[2:6], complement=complement))


def _add_modal(fields: List[str], lexicon: Lexicon, line_no: Optional[int]) -> None:
    lexicon.insert_modal(fields[1])


# tag -> (minimum field count, parser)
_PARSERS: Dict[str, tuple[int, Callable[[List[str], Lexicon, Optional[int]], None]]] = {
    WordCategory.NOUN.value: (6, _add_noun),
    WordCategory.DETERMINER.value: (3, _add_determiner),
    WordCategory.VERB.value: (6, _add_verb),
    WordCategory.MODAL.value: (2, _add_modal),
}


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def parse_entry(line: str, lexicon: Lexicon, *, line_no: Optional[int] = None) -> None:
    """
    Add the entry described by one lexicon line to `lexicon`.

    Blank lines are ignored. Extra trailing fields are ignored.

    Raises:
        LexiconFormatError: the line has too few fields for its tag.
    """
    fields = line.split()
    if not fields:
        return

    spec = _PARSERS.get(fields[0])
    if spec is None:
        logger.warning("lexicon_unknown_word_type", tag=fields[0], line_no=line_no)
        return

    count, parser = spec
    _require(fields, count, line, line_no)
    parser(fields, lexicon, line_no)


def load_lexicon_lines(lines: Iterable[str], *, strict: bool = False) -> Lexicon:
    """
    Build a Lexicon from an iterable of lexicon lines.

    Args:
        lines: Lines in the flat-file format (trailing newlines are fine).
        strict: Re-raise LexiconFormatError instead of skipping the line.
    """
    lexicon = Lexicon()
    for line_no, line in enumerate(lines, start=1):
        try:
            parse_entry(line, lexicon, line_no=line_no)
        except LexiconFormatError as e:
            if strict:
                raise
            logger.warning("lexicon_line_skipped", line_no=line_no, error=str(e))
    return lexicon


def load_lexicon(
    path: Union[str, Path, None] = None, *, strict: Optional[bool] = None
) -> Lexicon:
    """
    Read a lexicon file.

    Args:
        path: Lexicon file. Defaults to settings.LEXICON_FILE.
        strict: Defaults to settings.LEXICON_STRICT.

    Returns:
        The populated Lexicon, or an empty one when the file cannot be read.
    """
    lex_path = Path(path) if path is not None else Path(settings.LEXICON_FILE)
    if strict is None:
        strict = settings.LEXICON_STRICT

    try:
        with lex_path.open("r", encoding="utf-8") as f:
            lexicon = load_lexicon_lines(f, strict=strict)
    except FileNotFoundError:
        logger.error("lexicon_file_missing", path=str(lex_path))
        return Lexicon()
    except (OSError, UnicodeDecodeError) as e:
        logger.error("lexicon_read_error", path=str(lex_path), error=str(e))
        return Lexicon()

    logger.info("lexicon_loaded", path=str(lex_path), **lexicon.counts())
    return lexicon


__all__ = [
    "DUMMY_DETERMINER",
    "parse_entry",
    "load_lexicon_lines",
    "load_lexicon",
]
