"""
bokmaal_gen/nlg/cli_frontend.py

Command-line interface for the sentence generator.

Typical usage:

    bokmaal-gen
    bokmaal-gen --seed 42 --count 5
    bokmaal-gen --lexicon path/to/no.in --max-depth 3 --debug

The CLI:

- Loads the lexicon (settings.LEXICON_FILE unless --lexicon is given).
- Generates one sentence (or --count sentences sharing one random source).
- Prints the sentences to stdout, one per line, and optional debug info
  to stderr.

Exit status is 0 on success and 1 when generation fails (for instance on
an empty lexicon); in that case nothing is written to stdout.
"""

from __future__ import annotations

import argparse
import json
import random
import sys
from typing import List, Optional

from bokmaal_gen.core.domain.exceptions import DomainError
from bokmaal_gen.core.domain.models import GenerationOptions, Sentence
from bokmaal_gen.lexicon.loader import load_lexicon
from bokmaal_gen.nlg.api import generate_sentence
from bokmaal_gen.shared.config import settings
from bokmaal_gen.utils.logging_setup import get_logger, init_logging

logger = get_logger(__name__)


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bokmaal-gen",
        description="Generate a random inflected Norwegian Bokmål sentence.",
    )

    parser.add_argument(
        "--lexicon",
        metavar="PATH",
        default=None,
        help=f"Lexicon file (default: {settings.LEXICON_PATH}).",
    )

    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducible output.",
    )

    parser.add_argument(
        "--count",
        type=int,
        default=1,
        help="Number of sentences to generate (default: 1).",
    )

    parser.add_argument(
        "--max-depth",
        type=int,
        default=None,
        help=(
            "Maximum number of nested embedded clauses "
            f"(default: {settings.MAX_CLAUSE_DEPTH})."
        ),
    )

    parser.add_argument(
        "--legacy-perfect-auxiliary",
        action="store_true",
        default=None,
        help="Use the legacy past-perfect auxiliary draw (almost always \"<modal> ha\").",
    )

    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Fail on malformed lexicon lines instead of skipping them.",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print tokens and lexicon counts to stderr.",
    )

    return parser


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _build_generation_options(args: argparse.Namespace) -> GenerationOptions:
    """
    Construct a GenerationOptions instance from CLI arguments, falling back
    to settings for anything not given.
    """
    return GenerationOptions.from_settings(
        seed=args.seed,
        max_clause_depth=args.max_depth,
        legacy_perfect_auxiliary=args.legacy_perfect_auxiliary,
    )


def _print_debug(sentence: Sentence) -> None:
    payload = {"tokens": sentence.tokens, **(sentence.debug_info or {})}
    print("[DEBUG]", json.dumps(payload, ensure_ascii=False), file=sys.stderr)


# ---------------------------------------------------------------------------
# Command handler
# ---------------------------------------------------------------------------


def _cmd_generate(args: argparse.Namespace) -> int:
    lexicon = load_lexicon(args.lexicon, strict=args.strict)
    options = _build_generation_options(args)
    rng = random.Random(options.seed)

    # Generate everything first so a failure leaves stdout empty
    sentences: List[Sentence] = [
        generate_sentence(lexicon, options=options, rng=rng, debug=args.debug)
        for _ in range(args.count)
    ]

    for sentence in sentences:
        print(sentence.text)
        if args.debug:
            _print_debug(sentence)

    return 0


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: Optional[list[str]] = None) -> None:
    parser = _build_arg_parser()
    args = parser.parse_args(argv)

    if args.count < 1:
        parser.error("--count must be at least 1")
    if args.max_depth is not None and args.max_depth < 0:
        parser.error("--max-depth must be non-negative")

    init_logging()

    try:
        exit_code = _cmd_generate(args)
    except DomainError as e:
        logger.error("generation_failed", error=str(e), error_type=type(e).__name__)
        print(f"Error: {e}", file=sys.stderr)
        exit_code = 1

    raise SystemExit(exit_code)


if __name__ == "__main__":
    main()
