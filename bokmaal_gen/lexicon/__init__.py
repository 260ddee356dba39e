# bokmaal_gen/lexicon/__init__.py
"""
Lexicon storage and the flat-file loader.

    from bokmaal_gen.lexicon import Lexicon, load_lexicon
"""

from .loader import load_lexicon, load_lexicon_lines
from .store import Lexicon

__all__ = ["Lexicon", "load_lexicon", "load_lexicon_lines"]
