"""
bokmaal_gen

Random sentence generator for Norwegian Bokmål. Builds one inflected
subject-verb(-object) sentence from a flat-file lexicon of nouns,
determiners, verbs and modals.
"""

__version__ = "1.0.0"
