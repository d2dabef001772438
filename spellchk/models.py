"""
spellchk Models v1.0.0
======================
Data classes shared by the parsers, the checker and the reporting layer.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Dict, Optional, Any, Union


class FileFormat(Enum):
    """How a file's checkable text is extracted."""
    MARKDOWN = "markdown"
    SOURCE_CODE = "source_code"
    PLAIN_TEXT = "plain_text"


class LanguageFamily(Enum):
    """Comment syntax family of a source file."""
    C_STYLE = "c_style"            # // comments
    PYTHON_STYLE = "python_style"  # # comments


MARKDOWN_EXTENSIONS = frozenset({'md', 'mdx', 'markdown'})
C_STYLE_EXTENSIONS = frozenset({
    'rs', 'go', 'java', 'c', 'h', 'cpp', 'cc', 'cxx', 'hpp', 'hh',
    'js', 'mjs', 'cjs', 'ts', 'mts', 'cts', 'jsx', 'tsx',
})
PYTHON_STYLE_EXTENSIONS = frozenset({'py', 'pyw'})


@dataclass(frozen=True)
class FileType:
    """
    Detected format of a file.

    Attributes:
        format: Extraction strategy
        family: Comment family, only set for SOURCE_CODE
    """
    format: FileFormat
    family: Optional[LanguageFamily] = None

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> 'FileType':
        """Detect the file type from its extension (case-insensitive)."""
        ext = Path(path).suffix.lstrip('.').lower()

        if ext in MARKDOWN_EXTENSIONS:
            return cls(FileFormat.MARKDOWN)
        if ext in C_STYLE_EXTENSIONS:
            return cls(FileFormat.SOURCE_CODE, LanguageFamily.C_STYLE)
        if ext in PYTHON_STYLE_EXTENSIONS:
            return cls(FileFormat.SOURCE_CODE, LanguageFamily.PYTHON_STYLE)
        return cls(FileFormat.PLAIN_TEXT)


@dataclass(frozen=True)
class TextSpan:
    """
    A single extracted word candidate.

    Attributes:
        text: The word (compound parts after the first are lowercased)
        line: 1-based line number
        column: 1-based column within the line
        original_text: Short surrounding context for display
        start: Character offset of the word in the file content (0 if unknown)
        end: Character end offset (0 if unknown)
    """
    text: str
    line: int
    column: int
    original_text: str = ""
    start: int = 0
    end: int = 0

    @property
    def has_offsets(self) -> bool:
        return self.end > self.start


@dataclass
class SpellError:
    """A misspelled word with ranked suggestions (best first)."""
    word: str
    line: int
    column: int
    context: str = ""
    suggestions: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'word': self.word,
            'line': self.line,
            'column': self.column,
            'context': self.context,
            'suggestions': list(self.suggestions),
        }


@dataclass
class CheckResult:
    """
    Outcome of checking (or fixing) one file.

    Attributes:
        error_count: Number of unresolved misspellings
        fixed_count: Number of replacements written back to the file
        errors: Unresolved misspellings in document order
    """
    error_count: int = 0
    fixed_count: int = 0
    errors: List[SpellError] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'error_count': self.error_count,
            'fixed_count': self.fixed_count,
            'errors': [e.to_dict() for e in self.errors],
        }
