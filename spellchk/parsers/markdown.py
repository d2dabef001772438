"""
Markdown parser.

Walks the CommonMark token stream produced by markdown-it-py and checks the
prose only: fenced and indented code blocks, inline code, raw HTML, autolinks,
link destinations and image sources are skipped. Image alt text is prose and
is checked.

Every word is located in its source line so columns and offsets are exact in
the common case. When markdown-it rewrote the text (escapes, entities) or a
skipped construct cannot be found again in the source, the cursor is lost for
the rest of the inline block: columns become approximate and the offsets are
0/0, so fixes fall back to a textual replace.
"""

from typing import List, Optional

from markdown_it import MarkdownIt
from markdown_it.token import Token

from ..models import TextSpan
from ..tokenizer import extract_words, get_context, iter_lines

_md = MarkdownIt("commonmark").enable("table")


def _find_run(line: str, run: str, start: int) -> int:
    """Find a backtick run of exactly ``len(run)`` characters."""
    pos = line.find(run, start)
    while pos >= 0:
        end = pos + len(run)
        if (pos == 0 or line[pos - 1] != run[0]) and (end >= len(line) or line[end] != run[0]):
            return pos
        while end < len(line) and line[end] == run[0]:
            end += 1
        pos = line.find(run, end)
    return -1


class _LineCursor:
    """Tracks the current source line and column while walking inline tokens."""

    def __init__(self, lines: List[str], offsets: List[int], line_index: Optional[int],
                 line_hint: int, end: Optional[int] = None):
        self.lines = lines
        self.offsets = offsets
        self.line_index = line_index
        self.line_hint = line_hint
        self.end = len(lines) if end is None else min(end, len(lines))
        self.column = 0
        self.lost = line_index is None

    @property
    def line(self) -> str:
        if self.line_index is None or self.line_index >= len(self.lines):
            return ""
        return self.lines[self.line_index]

    def next_line(self):
        if self.line_index is not None:
            self.line_index += 1
        self.line_hint += 1
        self.column = 0

    def _move_to(self, index: int, column: int):
        self.line_hint += index - self.line_index
        self.line_index = index
        self.column = column

    def find(self, text: str) -> int:
        """Find ``text`` at or after the cursor, case-insensitively. Returns -1 if absent."""
        if not text or self.lost:
            return -1
        line = self.line
        lowered = line.lower()
        if len(lowered) != len(line):
            return line.find(text, self.column)
        return lowered.find(text.lower(), self.column)

    def skip_past(self, text: str) -> bool:
        """Move the cursor after ``text`` on the current line, or lose it."""
        if not text:
            return not self.lost
        pos = self.find(text)
        if pos < 0:
            self.lost = True
            return False
        self.column = pos + len(text)
        return True

    def skip_lines(self, text: str):
        """Move past raw source text that may span several lines."""
        pieces = text.rstrip("\n").split("\n")
        if not self.skip_past(pieces[0]):
            return
        for piece in pieces[1:]:
            self.next_line()
            if not self.skip_past(piece.strip()):
                return

    def seek(self, needle: str, exact_run: bool = False) -> bool:
        """Move past the next ``needle``, looking ahead across the block's lines."""
        if self.lost:
            return False
        index, column = self.line_index, self.column
        while index < self.end:
            line = self.lines[index]
            pos = _find_run(line, needle, column) if exact_run else line.find(needle, column)
            if pos >= 0:
                self._move_to(index, pos + len(needle))
                return True
            index += 1
            column = 0
        self.lost = True
        return False

    def seek_destination_end(self) -> bool:
        """Move past the ``)`` closing a link destination and optional title."""
        if self.lost:
            return False
        depth = 0
        quote = None
        angle = False
        escaped = False
        index, column = self.line_index, self.column
        while index < self.end:
            line = self.lines[index]
            while column < len(line):
                ch = line[column]
                after_space = column == 0 or line[column - 1].isspace()
                column += 1
                if escaped:
                    escaped = False
                elif ch == "\\":
                    escaped = True
                elif quote:
                    if ch == quote:
                        quote = None
                elif angle:
                    if ch == ">":
                        angle = False
                elif ch == "<" and (after_space or line[column - 2] == "("):
                    angle = True
                elif ch in "\"'" and after_space:
                    quote = ch
                elif ch == "(":
                    depth += 1
                elif ch == ")":
                    if depth == 0:
                        self._move_to(index, column)
                        return True
                    depth -= 1
            index += 1
            column = 0
        self.lost = True
        return False


def parse(content: str) -> List[TextSpan]:
    """Extract word spans from the prose of a Markdown document."""
    lines = []
    offsets = []
    for _, line, line_offset in iter_lines(content):
        lines.append(line)
        offsets.append(line_offset)

    spans: List[TextSpan] = []
    last_line = 0

    for token in _md.parse(content):
        if token.type != "inline" or not token.children:
            continue
        if token.map:
            cursor = _LineCursor(lines, offsets, token.map[0], token.map[0], token.map[1])
        else:
            cursor = _LineCursor(lines, offsets, None, last_line)
        _walk_inline(token.children, cursor, spans)
        last_line = cursor.line_hint

    return spans


def _skip_link_tail(cursor: _LineCursor):
    """Move past ``](destination "title")`` or ``][label]`` after link text."""
    if not cursor.seek("]"):
        return
    rest = cursor.line[cursor.column:]
    if rest.startswith("("):
        cursor.column += 1
        cursor.seek_destination_end()
    elif rest.startswith("["):
        cursor.seek("]")


def _walk_inline(children: List[Token], cursor: _LineCursor, spans: List[TextSpan]):
    autolinks: List[bool] = []

    for child in children:
        if child.type in ("softbreak", "hardbreak"):
            cursor.next_line()
        elif child.type == "link_open":
            autolinks.append(child.markup == "autolink")
        elif child.type == "link_close":
            if autolinks and autolinks.pop():
                cursor.seek(">")
            else:
                _skip_link_tail(cursor)
        elif child.type == "image":
            _walk_inline(child.children or [], cursor, spans)
            _skip_link_tail(cursor)
        elif child.type == "code_inline":
            if cursor.seek(child.markup, exact_run=True):
                cursor.seek(child.markup, exact_run=True)
        elif child.type == "html_inline":
            cursor.skip_lines(child.content)
        elif child.type == "text":
            if autolinks and autolinks[-1]:
                continue
            _add_text_spans(child.content, cursor, spans)


def _add_text_spans(text: str, cursor: _LineCursor, spans: List[TextSpan]):
    approximate_base = cursor.column

    for word, offset in extract_words(text):
        pos = cursor.find(word)
        if pos >= 0:
            cursor.column = pos + len(word)
            start = cursor.offsets[cursor.line_index] + pos
            spans.append(TextSpan(
                text=word,
                line=cursor.line_index + 1,
                column=pos + 1,
                original_text=get_context(cursor.line, pos, len(word)),
                start=start,
                end=start + len(word),
            ))
        else:
            spans.append(TextSpan(
                text=word,
                line=cursor.line_hint + 1,
                column=approximate_base + offset + 1,
                original_text=get_context(text, offset, len(word)),
            ))
