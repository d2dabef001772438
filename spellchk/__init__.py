"""
spellchk v1.0.0
===============
Format-aware spell checker for Markdown, source code and plain text.

Features:
- Checks Markdown prose, code comments and string literals, or plain text
- Splits camelCase, snake_case and kebab-case identifiers before lookup
- Staged suggestion engine (prefix search, common typos, short-word scan)
- Personal dictionary and ignore patterns
- Automatic and interactive fixing
"""

__version__ = "1.0.0"

from .models import (
    FileFormat,
    LanguageFamily,
    FileType,
    TextSpan,
    SpellError,
    CheckResult
)
from .dictionary import Dictionary
from .config import SpellchkConfig, load_config
from .checker import SpellChecker, PersonalWordSet, IgnorePatterns, ADD_TO_DICTIONARY

__all__ = [
    'FileFormat',
    'LanguageFamily',
    'FileType',
    'TextSpan',
    'SpellError',
    'CheckResult',
    'Dictionary',
    'SpellchkConfig',
    'load_config',
    'SpellChecker',
    'PersonalWordSet',
    'IgnorePatterns',
    'ADD_TO_DICTIONARY',
]
