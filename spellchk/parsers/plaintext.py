"""
Plain text parser: every word on every line is checkable.
"""

from typing import List

from ..models import TextSpan
from ..tokenizer import extract_words, get_context, iter_lines


def parse(content: str) -> List[TextSpan]:
    """Extract word spans line by line with exact positions."""
    spans = []

    for line_num, line, line_offset in iter_lines(content):
        for word, column in extract_words(line):
            start = line_offset + column
            spans.append(TextSpan(
                text=word,
                line=line_num,
                column=column + 1,
                original_text=get_context(line, column, len(word)),
                start=start,
                end=start + len(word),
            ))

    return spans
