"""
spellchk Checker v1.0.0
=======================
Drives one file through extraction, filtering and suggestion.

For every extracted span, in order:
    1. personal dictionary hit      -> skip
    2. ignore pattern hit           -> skip (also 1-char and all-numeric text)
    3. dictionary hit               -> skip
    4. otherwise                    -> SpellError with suggestions

Fix modes reuse the same pipeline and write the chosen corrections back to
the file. Replacements are applied by character offset, back to front; spans
whose offsets cannot be verified fall back to replacing the first textual
occurrence of the word.
"""

import bisect
import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Sequence, Tuple, Union

from config_logging import get_logger, StructuredLogger, FileError

from .config import SpellchkConfig
from .dictionary import Dictionary
from .models import CheckResult, SpellError, TextSpan
from .parsers import parse_file
from . import suggestions as suggestion_engine

logger = get_logger('checker')


class PromptChoice(Enum):
    ADD_TO_DICTIONARY = "add_to_dictionary"


ADD_TO_DICTIONARY = PromptChoice.ADD_TO_DICTIONARY

# prompt(span, suggestions) -> None (skip), ADD_TO_DICTIONARY, or a replacement word
PromptCallback = Callable[[TextSpan, List[str]], Union[None, str, PromptChoice]]


# =============================================================================
# PERSONAL DICTIONARY
# =============================================================================

class PersonalWordSet:
    """
    Words the user has approved, stored one per line in a plain text file.

    Lines starting with ``#`` are comments. New words are kept pending and
    appended to the file by ``flush()``.
    """

    def __init__(self, words: Iterable[str] = (), path: Optional[Path] = None):
        self.path = path
        self._words = {w.strip().lower() for w in words if w.strip()}
        self._pending: List[str] = []

    @classmethod
    def load(cls, path: Optional[Union[str, Path]]) -> 'PersonalWordSet':
        """Load a personal dictionary; a missing file gives an empty set."""
        if path is None:
            return cls()
        path = Path(path)
        if not path.exists():
            return cls(path=path)

        try:
            text = path.read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            raise FileError(f"Cannot read personal dictionary {path}: {e}", filename=str(path))

        words = [
            line.strip() for line in text.splitlines()
            if line.strip() and not line.strip().startswith('#')
        ]
        logger.debug("Personal dictionary loaded", path=str(path), word_count=len(words))
        return cls(words, path=path)

    def __contains__(self, word: str) -> bool:
        return word.lower() in self._words

    def __len__(self) -> int:
        return len(self._words)

    def add(self, word: str) -> bool:
        """Add a word; returns False if it was already known."""
        word = word.strip().lower()
        if not word or word in self._words:
            return False
        self._words.add(word)
        self._pending.append(word)
        return True

    def flush(self) -> int:
        """Append pending words to the file. Returns the number of words written."""
        if not self._pending:
            return 0
        if self.path is None:
            count = len(self._pending)
            self._pending.clear()
            return count

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            needs_newline = (
                self.path.exists()
                and self.path.stat().st_size > 0
                and not self.path.read_text(encoding='utf-8').endswith('\n')
            )
            with open(self.path, 'a', encoding='utf-8') as f:
                if needs_newline:
                    f.write('\n')
                for word in self._pending:
                    f.write(f"{word}\n")
        except OSError as e:
            raise FileError(f"Cannot write personal dictionary {self.path}: {e}",
                            filename=str(self.path))

        count = len(self._pending)
        logger.info("Personal dictionary updated", path=str(self.path), added=count)
        self._pending.clear()
        return count


# =============================================================================
# IGNORE PATTERNS
# =============================================================================

class IgnorePatterns:
    """Compiled ignore patterns. Invalid expressions are logged and dropped."""

    def __init__(self, patterns: Iterable[str] = ()):
        self.patterns: List[re.Pattern] = []
        for pattern in patterns:
            try:
                self.patterns.append(re.compile(pattern))
            except re.error as e:
                logger.warning("Skipping invalid ignore pattern", pattern=pattern, error=str(e))

    def matches(self, text: str) -> bool:
        """True when ``text`` must never be flagged."""
        if len(text) <= 1:
            return True
        if text.isdigit():
            return True
        return any(p.search(text) for p in self.patterns)

    def covered_ranges(self, content: str) -> List[Tuple[int, int]]:
        """Character ranges of ``content`` matched by any pattern, sorted and merged."""
        ranges = sorted(
            m.span() for p in self.patterns for m in p.finditer(content) if m.end() > m.start()
        )
        merged: List[Tuple[int, int]] = []
        for start, end in ranges:
            if merged and start <= merged[-1][1]:
                merged[-1] = (merged[-1][0], max(merged[-1][1], end))
            else:
                merged.append((start, end))
        return merged


def _covered(span: TextSpan, ranges: Sequence[Tuple[int, int]]) -> bool:
    if not span.has_offsets or not ranges:
        return False
    i = bisect.bisect_right(ranges, (span.start, float('inf'))) - 1
    return i >= 0 and ranges[i][0] <= span.start and span.end <= ranges[i][1]


# =============================================================================
# REPLACEMENT
# =============================================================================

@dataclass
class Replacement:
    """A correction chosen for one span."""
    span: TextSpan
    word: str


def match_case(original: str, replacement: str) -> str:
    """Give ``replacement`` the capitalisation pattern of ``original``."""
    if len(original) > 1 and original.isupper():
        return replacement.upper()
    if original[:1].isupper():
        return replacement[:1].upper() + replacement[1:]
    return replacement


def _offsets_verified(content: str, span: TextSpan) -> bool:
    return (
        span.has_offsets
        and span.end <= len(content)
        and content[span.start:span.end].lower() == span.text.lower()
    )


def _find_word(content: str, word: str) -> int:
    pos = content.find(word)
    if pos < 0:
        lowered = content.lower()
        if len(lowered) == len(content):
            pos = lowered.find(word.lower())
    return pos


def apply_replacements(content: str, replacements: Sequence[Replacement]) -> Tuple[str, List[Replacement]]:
    """
    Apply corrections to ``content``.

    Returns:
        (new content, replacements that could not be applied)
    """
    by_offset = [r for r in replacements if _offsets_verified(content, r.span)]
    by_text = [r for r in replacements if not _offsets_verified(content, r.span)]

    for r in sorted(by_offset, key=lambda r: r.span.start, reverse=True):
        original = content[r.span.start:r.span.end]
        content = content[:r.span.start] + match_case(original, r.word) + content[r.span.end:]

    failed = []
    for r in by_text:
        pos = _find_word(content, r.span.text)
        if pos < 0:
            failed.append(r)
            continue
        end = pos + len(r.span.text)
        content = content[:pos] + match_case(content[pos:end], r.word) + content[end:]

    return content, failed


# =============================================================================
# CHECKER
# =============================================================================

class SpellChecker:
    """
    Spell checks files against one dictionary, a personal word set and a set
    of ignore patterns.

    Usage:
        checker = SpellChecker(load_config())
        result = checker.check("README.md")
    """

    def __init__(self, config: SpellchkConfig, dictionary: Optional[Dictionary] = None):
        self.config = config
        self.dictionary = dictionary or Dictionary.load(config.language, config.data_dir)
        self.personal = PersonalWordSet.load(config.personal_dictionary)
        self.ignore = IgnorePatterns(config.ignore_patterns)
        logger.debug("Checker ready", language=config.language,
                     dictionary_words=len(self.dictionary), personal_words=len(self.personal),
                     ignore_patterns=len(self.ignore.patterns))

    # ------------------------------------------------------------------
    # Filtering
    # ------------------------------------------------------------------

    def is_correct(self, word: str) -> bool:
        """Whether a bare word passes the personal, ignore and dictionary filters."""
        if word in self.personal:
            return True
        if self.ignore.matches(word):
            return True
        return self.dictionary.contains(word.lower())

    def suggest(self, word: str) -> List[str]:
        return suggestion_engine.generate(word.lower(), self.dictionary, self.config.max_suggestions)

    def _find_misses(self, path: Union[str, Path], content: str) -> List[Tuple[TextSpan, List[str]]]:
        ranges = self.ignore.covered_ranges(content)
        misses = []
        for span in parse_file(path, content):
            if self.is_correct(span.text) or _covered(span, ranges):
                continue
            misses.append((span, self.suggest(span.text)))
        return misses

    @staticmethod
    def _to_error(span: TextSpan, suggestions: List[str]) -> SpellError:
        return SpellError(
            word=span.text,
            line=span.line,
            column=span.column,
            context=span.original_text,
            suggestions=suggestions,
        )

    # ------------------------------------------------------------------
    # File access
    # ------------------------------------------------------------------

    @staticmethod
    def _read(path: Union[str, Path]) -> str:
        try:
            with open(path, 'r', encoding='utf-8', newline='') as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise FileError(f"Cannot read {path}: {e}", filename=str(path))

    @staticmethod
    def _write(path: Union[str, Path], content: str):
        try:
            with open(path, 'w', encoding='utf-8', newline='') as f:
                f.write(content)
        except OSError as e:
            raise FileError(f"Cannot write {path}: {e}", filename=str(path))

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def check_content(self, path: Union[str, Path], content: str) -> CheckResult:
        """Check already-read content; ``path`` only selects the format."""
        errors = [self._to_error(span, sugg) for span, sugg in self._find_misses(path, content)]
        return CheckResult(error_count=len(errors), errors=errors)

    def check(self, path: Union[str, Path]) -> CheckResult:
        """Check a file on disk."""
        StructuredLogger.new_correlation_id()
        with logger.log_operation("check_file", file=str(path)):
            result = self.check_content(path, self._read(path))
            logger.debug("File checked", file=str(path), errors=result.error_count)
            return result

    def fix_auto(self, path: Union[str, Path]) -> CheckResult:
        """
        Replace every misspelling that has a suggestion with its top suggestion.

        The returned result counts the replacements written in ``fixed_count``;
        misspellings without any suggestion stay in ``errors``.
        """
        StructuredLogger.new_correlation_id()
        with logger.log_operation("fix_file", file=str(path), mode='auto'):
            content = self._read(path)
            replacements = []
            unresolved = []
            for span, sugg in self._find_misses(path, content):
                if sugg:
                    replacements.append(Replacement(span, sugg[0]))
                else:
                    unresolved.append(self._to_error(span, sugg))

            return self._finish_fix(path, content, replacements, unresolved)

    def fix_interactive(self, path: Union[str, Path], prompt: PromptCallback) -> CheckResult:
        """
        Ask ``prompt`` what to do with every misspelling.

        Skipped words stay in ``errors``. Words added to the personal
        dictionary are accepted for the rest of the run and written to the
        personal dictionary file once the file is done.
        """
        StructuredLogger.new_correlation_id()
        with logger.log_operation("fix_file", file=str(path), mode='interactive'):
            content = self._read(path)
            replacements = []
            unresolved = []
            for span, sugg in self._find_misses(path, content):
                if span.text in self.personal:
                    continue

                choice = prompt(span, sugg)
                if choice is None:
                    unresolved.append(self._to_error(span, sugg))
                elif choice is ADD_TO_DICTIONARY:
                    self.personal.add(span.text)
                else:
                    replacements.append(Replacement(span, choice))

            self.personal.flush()
            return self._finish_fix(path, content, replacements, unresolved)

    def _finish_fix(self, path, content: str, replacements: List[Replacement],
                    unresolved: List[SpellError]) -> CheckResult:
        fixed_content, failed = apply_replacements(content, replacements)
        for r in failed:
            logger.warning("Could not locate word to replace", file=str(path), word=r.span.text)
            unresolved.append(self._to_error(r.span, [r.word]))

        fixed_count = len(replacements) - len(failed)
        if fixed_count:
            self._write(path, fixed_content)

        unresolved.sort(key=lambda e: (e.line, e.column))
        return CheckResult(error_count=len(unresolved), fixed_count=fixed_count, errors=unresolved)

    def add_words(self, words: Iterable[str]) -> int:
        """Add words to the personal dictionary and persist them."""
        for word in words:
            self.personal.add(word)
        return self.personal.flush()
