"""
spellchk Tests Package
======================
Test suite for the spellchk package.

Run all tests: python3 -m pytest tests/test_spellchk/ -v
Run specific: python3 -m pytest tests/test_spellchk/test_checker.py -v
"""

__version__ = "1.0.0"
