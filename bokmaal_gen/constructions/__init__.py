# bokmaal_gen/constructions/__init__.py
from .noun_phrase import generate_np
from .verb_phrase import generate_vp

__all__ = ["generate_np", "generate_vp"]
