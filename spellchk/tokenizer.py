"""
Word extraction shared by every format parser.

A word is a run of alphabetic characters that may contain apostrophes and
hyphens between letters ("don't", "well-known"). Each word is decomposed into
compound parts (camelCase, snake_case, kebab-case) before it is checked.
"""

from typing import Iterator, List, Tuple

WORD_INNER_CHARS = ("'", "-")
COMPOUND_SEPARATORS = ("_", "-")
CONTEXT_RADIUS = 20


def _is_word_char(ch: str) -> bool:
    return ch.isalpha() or ch in WORD_INNER_CHARS


def _split_with_offsets(word: str) -> List[Tuple[str, int]]:
    """Split a compound word, keeping the offset of every part inside ``word``."""
    parts: List[Tuple[str, int]] = []
    current: List[str] = []
    current_start = 0
    previous = ""

    for i, ch in enumerate(word):
        if ch in COMPOUND_SEPARATORS:
            if current:
                parts.append(("".join(current), current_start))
                current = []
        elif ch.isupper() and previous.islower() and current:
            parts.append(("".join(current), current_start))
            current = [ch.lower()]
            current_start = i
        else:
            if not current:
                current_start = i
            current.append(ch)
        previous = ch

    if current:
        parts.append(("".join(current), current_start))

    return parts


def split_compound_word(word: str) -> List[str]:
    """
    Split camelCase, snake_case and kebab-case words into their parts.

    An uppercase letter that follows a lowercase letter starts a new part,
    which is lowercased. A word without boundaries is returned unchanged.

    Examples:
        >>> split_compound_word("camelCase")
        ['camel', 'case']
        >>> split_compound_word("snake_case")
        ['snake', 'case']
        >>> split_compound_word("Hello")
        ['Hello']
    """
    parts = [part for part, _ in _split_with_offsets(word)]
    return parts or [word]


def extract_words(
    text: str,
    split_compounds: bool = True,
    min_length: int = 2
) -> List[Tuple[str, int]]:
    """
    Extract candidate words from a text buffer.

    Args:
        text: Text to scan (one line, a comment, a string literal...)
        split_compounds: Decompose compound identifiers into parts
        min_length: Parts shorter than this are dropped

    Returns:
        List of (word, offset) tuples, offset being the character index of
        the word in ``text``
    """
    words: List[Tuple[str, int]] = []
    length = len(text)
    i = 0

    while i < length:
        if not text[i].isalpha():
            i += 1
            continue

        start = i
        while i < length and _is_word_char(text[i]):
            i += 1
        end = i
        # words start and end with a letter
        while end > start and not text[end - 1].isalpha():
            end -= 1

        run = text[start:end]
        parts = _split_with_offsets(run) if split_compounds else [(run, 0)]
        for part, part_offset in parts:
            stripped = part.strip("'")
            if len(stripped) < min_length:
                continue
            lead = len(part) - len(part.lstrip("'"))
            words.append((stripped, start + part_offset + lead))

    return words


def get_context(line: str, offset: int, length: int, radius: int = CONTEXT_RADIUS) -> str:
    """Return the text around a word, with ``...`` where the line was cut."""
    start = max(0, offset - radius)
    end = min(len(line), offset + length + radius)
    context = line[start:end]

    if start > 0:
        context = f"...{context}"
    if end < len(line):
        context = f"{context}..."
    return context


def iter_lines(content: str) -> Iterator[Tuple[int, str, int]]:
    """
    Iterate over the physical lines of a file.

    Yields (line_number, line_text, line_offset) with 1-based line numbers.
    Only ``\\n`` separates lines and a trailing ``\\r`` is dropped from the
    text, so ``line_offset`` is an exact index into ``content``.
    """
    offset = 0
    for number, raw in enumerate(content.split("\n"), start=1):
        line = raw[:-1] if raw.endswith("\r") else raw
        yield number, line, offset
        offset += len(raw) + 1
