"""
Source code parser.

Only comments and string literals are checked. Each physical line is run
through a small state machine (normal code, line comment, string literal)
so comment markers inside strings and quotes inside comments are handled
without regex guesswork.

Families:
    C_STYLE       ``//`` comments; an unterminated string runs to end of line,
                  except a lone quote before an identifier (a Rust lifetime)
    PYTHON_STYLE  ``#`` comments; only strings closed on the line are checked

Block comments and strings spanning several lines are not tracked.
"""

from enum import Enum
from typing import List, NamedTuple, Tuple

from ..models import LanguageFamily, TextSpan
from ..tokenizer import extract_words, iter_lines

QUOTES = ('"', "'")


class ScanState(Enum):
    NORMAL = "normal"
    LINE_COMMENT = "line_comment"
    STRING = "string"


class Region(NamedTuple):
    """Checkable text found on a line."""
    kind: str             # 'comment' or 'string'
    text: str             # Comment text or string interior (escapes decoded)
    positions: Tuple[int, ...]  # Source column of every character of ``text``


def _opens_comment(line: str, i: int, family: LanguageFamily) -> bool:
    if family == LanguageFamily.PYTHON_STYLE:
        return line[i] == "#"
    return line.startswith("//", i)


def _is_lifetime(line: str, i: int) -> bool:
    """A quote starting an identifier that never closes, like Rust's `&'static str`."""
    following = line[i + 1:i + 2]
    return (following.isalpha() or following == "_") and "'" not in line[i + 1:]


def scan_line(line: str, family: LanguageFamily) -> List[Region]:
    """
    Split one line into its comment and string regions, left to right.

    Escape sequences inside strings are replaced by a space, except escaped
    quotes which keep the quote character.
    """
    regions: List[Region] = []
    state = ScanState.NORMAL
    quote = ""
    escaped = False
    chars: List[str] = []
    positions: List[int] = []
    i = 0

    while i < len(line):
        ch = line[i]

        if state == ScanState.NORMAL:
            if _opens_comment(line, i, family):
                state = ScanState.LINE_COMMENT
                start = i + (1 if family == LanguageFamily.PYTHON_STYLE else 2)
                regions.append(Region(
                    'comment', line[start:], tuple(range(start, len(line)))
                ))
                break
            if ch in QUOTES and not (
                ch == "'" and family == LanguageFamily.C_STYLE and _is_lifetime(line, i)
            ):
                state = ScanState.STRING
                quote = ch
                escaped = False
                chars, positions = [], []

        elif state == ScanState.STRING:
            if escaped:
                escaped = False
                chars.append(ch if ch in QUOTES else " ")
                positions.append(i)
            elif ch == "\\":
                escaped = True
            elif ch == quote:
                regions.append(Region('string', "".join(chars), tuple(positions)))
                state = ScanState.NORMAL
            else:
                chars.append(ch)
                positions.append(i)

        i += 1

    if state == ScanState.STRING and family == LanguageFamily.C_STYLE:
        regions.append(Region('string', "".join(chars), tuple(positions)))

    return regions


def parse(content: str, family: LanguageFamily) -> List[TextSpan]:
    """Extract word spans from the comments and string literals of a source file."""
    spans: List[TextSpan] = []

    for line_num, line, line_offset in iter_lines(content):
        for region in scan_line(line, family):
            if not region.text.strip():
                continue
            context = region.text.strip()
            for word, offset in extract_words(region.text):
                # escaped quotes inside the word widen its source range
                first = region.positions[offset]
                last = region.positions[offset + len(word) - 1]
                spans.append(TextSpan(
                    text=word,
                    line=line_num,
                    column=first + 1,
                    original_text=context,
                    start=line_offset + first,
                    end=line_offset + last + 1,
                ))

    return spans
