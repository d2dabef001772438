"""
spellchk Dictionary v1.0.0
==========================
Immutable, sorted word set for one language.

Words are kept in a sorted tuple so membership and prefix enumeration are
binary searches: a prefix query costs O(log n + matches), which is what the
suggestion engine leans on.

On-disk format (``<language>.dict``) is gzip-compressed JSON:
    {"format": "spellchk-dict", "version": 1, "word_count": n, "words": [...]}
"""

import bisect
import gzip
import json
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

from config_logging import get_logger, DictionaryError

from .config import data_dir as default_data_dir
from .wordlist import get_basic_wordlist

logger = get_logger('dictionary')

DICT_FORMAT = "spellchk-dict"
DICT_VERSION = 1
DICT_SUFFIX = ".dict"


def dictionary_path(language: str, data_dir: Union[str, Path]) -> Path:
    """Location of the dictionary file for ``language``."""
    return Path(data_dir) / f"{language}{DICT_SUFFIX}"


def _normalize(words: Iterable[str]) -> Tuple[str, ...]:
    return tuple(sorted({w for w in words if w}))


class Dictionary:
    """
    Sorted set of correctly spelled (lowercase) words.

    Lookups are case-sensitive; callers lowercase before asking.
    """

    def __init__(self, words: Iterable[str], language: Optional[str] = None,
                 path: Optional[Path] = None):
        self._words = _normalize(words)
        self.language = language
        self.path = path

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_words(cls, words: Iterable[str], language: Optional[str] = None) -> 'Dictionary':
        """Build an in-memory dictionary (duplicates and empty strings dropped)."""
        return cls(words, language=language)

    @classmethod
    def load(cls, language: str, data_dir: Optional[Union[str, Path]] = None) -> 'Dictionary':
        """
        Load the dictionary for ``language`` from ``data_dir``.

        When no dictionary file exists yet, the embedded bootstrap list is
        written to disk first so a fresh install is usable right away.

        Raises:
            DictionaryError: file corrupt, or bootstrap could not be written
        """
        if data_dir is None:
            data_dir = default_data_dir()

        path = dictionary_path(language, data_dir)
        if not path.exists():
            logger.info("Dictionary not found, building bootstrap word list",
                        language=language, path=str(path))
            cls.build_from_words(get_basic_wordlist(language), path)

        dictionary = cls.load_from_path(path)
        dictionary.language = language
        return dictionary

    @classmethod
    def load_from_path(cls, path: Union[str, Path]) -> 'Dictionary':
        """Read a dictionary file, validating its structure."""
        path = Path(path)
        try:
            with gzip.open(path, 'rt', encoding='utf-8') as f:
                data = json.load(f)
        except FileNotFoundError:
            raise DictionaryError(f"Dictionary file not found: {path}", path=str(path))
        except (OSError, EOFError, ValueError) as e:
            raise DictionaryError(f"Dictionary file is corrupt: {path} ({e})", path=str(path))

        words = cls._validate(data, path)
        dictionary = cls.__new__(cls)
        dictionary._words = tuple(words)
        dictionary.language = path.stem
        dictionary.path = path
        logger.debug("Dictionary loaded", path=str(path), word_count=len(words))
        return dictionary

    @staticmethod
    def _validate(data, path: Path) -> List[str]:
        def corrupt(reason: str) -> DictionaryError:
            return DictionaryError(f"Dictionary file is corrupt: {path} ({reason})", path=str(path))

        if not isinstance(data, dict) or data.get('format') != DICT_FORMAT:
            raise corrupt("not a spellchk dictionary")
        if data.get('version') != DICT_VERSION:
            raise corrupt(f"unsupported version {data.get('version')!r}")

        words = data.get('words')
        if not isinstance(words, list) or not all(isinstance(w, str) for w in words):
            raise corrupt("word list missing")
        if data.get('word_count') != len(words):
            raise corrupt("word count mismatch")
        if any(a >= b for a, b in zip(words, words[1:])):
            raise corrupt("words not sorted and unique")
        return words

    @staticmethod
    def build_from_words(words: Iterable[str], destination: Union[str, Path]) -> int:
        """
        Deduplicate, sort and write a word list as a dictionary file.

        Returns:
            Number of words written

        Raises:
            DictionaryError: destination not writable
        """
        destination = Path(destination)
        normalized = _normalize(words)
        payload = {
            'format': DICT_FORMAT,
            'version': DICT_VERSION,
            'word_count': len(normalized),
            'words': list(normalized),
        }

        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
            with gzip.open(destination, 'wt', encoding='utf-8') as f:
                json.dump(payload, f, separators=(',', ':'))
        except OSError as e:
            raise DictionaryError(f"Cannot write dictionary {destination}: {e}",
                                  path=str(destination))

        logger.info("Dictionary built", path=str(destination), word_count=len(normalized))
        return len(normalized)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def contains(self, word: str) -> bool:
        """Exact membership test."""
        i = bisect.bisect_left(self._words, word)
        return i < len(self._words) and self._words[i] == word

    def words_with_prefix(self, prefix: str) -> List[str]:
        """All words starting with ``prefix``, in sorted order."""
        if not prefix:
            return list(self._words)
        lo = bisect.bisect_left(self._words, prefix)
        hi = lo
        while hi < len(self._words) and self._words[hi].startswith(prefix):
            hi += 1
        return list(self._words[lo:hi])

    def all_words(self) -> Tuple[str, ...]:
        """
        Every word in the dictionary.

        Linear in dictionary size; only the short-word fallback of the
        suggestion engine should need it.
        """
        return self._words

    @property
    def word_count(self) -> int:
        return len(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __repr__(self) -> str:
        return f"Dictionary(language={self.language!r}, words={len(self._words)})"
