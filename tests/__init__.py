# tests/__init__.py
"""
Test Suite for the Bokmål sentence generator

Organization:
- `test_lexicon_*`: Lexicon store and flat-file loader.
- `test_agreement`, `test_constructions`: Grammar with forced random draws.
- `test_generation`, `test_cli`: End-to-end through the API and the entry point.
"""
