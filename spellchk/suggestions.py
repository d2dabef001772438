"""
Suggestion engine.

Candidates are collected in stages of increasing cost; a stage runs only
while fewer than ``max_suggestions`` candidates have been found:

    1. words sharing the first 3 characters, distance <= 2, ranked by distance
    2. single deletions, adjacent transpositions and common letter confusions
    3. words sharing the first 2 characters, distance <= 3
    4. short words only (<= 3 chars): bounded scan of the whole dictionary

Later stages append in discovery order; earlier rankings are never re-sorted.
"""

from typing import Iterator, List, Tuple

from .dictionary import Dictionary

# Letters commonly confused with each other, applied in both directions
CONFUSION_PAIRS = (
    ('a', 'e'), ('e', 'i'), ('i', 'o'), ('o', 'u'),
    ('b', 'v'), ('c', 'k'), ('f', 'v'), ('g', 'j'),
    ('m', 'n'), ('s', 'z'), ('t', 'd'),
)

PREFIX_DISTANCE = 2
SHORT_PREFIX_DISTANCE = 3
SHORT_WORD_LENGTH = 3
SCAN_DISTANCE = 2
SCAN_POOL_SIZE = 100


def _build_confusions() -> dict:
    table = {}
    for a, b in CONFUSION_PAIRS:
        table.setdefault(a, []).append(b)
        table.setdefault(b, []).append(a)
    return table


CONFUSIONS = _build_confusions()


def edit_distance(s1: str, s2: str) -> int:
    """Calculate Levenshtein edit distance between two strings."""
    if len(s1) < len(s2):
        return edit_distance(s2, s1)

    if len(s2) == 0:
        return len(s1)

    previous_row = range(len(s2) + 1)
    for i, c1 in enumerate(s1):
        current_row = [i + 1]
        for j, c2 in enumerate(s2):
            insertions = previous_row[j + 1] + 1
            deletions = current_row[j] + 1
            substitutions = previous_row[j] + (c1 != c2)
            current_row.append(min(insertions, deletions, substitutions))
        previous_row = current_row

    return previous_row[-1]


def generate_transformations(word: str) -> Iterator[str]:
    """Yield deletions, adjacent transpositions, then confusion substitutions of ``word``."""
    for i in range(len(word)):
        yield word[:i] + word[i + 1:]

    for i in range(len(word) - 1):
        yield word[:i] + word[i + 1] + word[i] + word[i + 2:]

    for i, ch in enumerate(word):
        for replacement in CONFUSIONS.get(ch, ()):
            yield word[:i] + replacement + word[i + 1:]


def _ranked_by_prefix(word: str, dictionary: Dictionary, prefix_len: int,
                      max_distance: int) -> List[Tuple[str, int]]:
    candidates = [
        (candidate, edit_distance(word, candidate))
        for candidate in dictionary.words_with_prefix(word[:prefix_len])
    ]
    candidates.sort(key=lambda x: x[1])
    return [(c, d) for c, d in candidates if d <= max_distance]


def generate(word: str, dictionary: Dictionary, max_suggestions: int) -> List[str]:
    """
    Suggest corrections for a misspelled (already lowercased) word.

    Args:
        word: The misspelled word
        dictionary: Dictionary to draw candidates from
        max_suggestions: Upper bound on the returned list

    Returns:
        At most ``max_suggestions`` words, best first. May be empty.
    """
    if max_suggestions <= 0:
        return []

    length = len(word)
    suggestions: List[str] = []

    if length >= 3:
        ranked = _ranked_by_prefix(word, dictionary, 3, PREFIX_DISTANCE)
        suggestions = [c for c, _ in ranked[:max_suggestions]]

    if len(suggestions) < max_suggestions:
        for candidate in generate_transformations(word):
            if candidate and candidate not in suggestions and dictionary.contains(candidate):
                suggestions.append(candidate)
                if len(suggestions) >= max_suggestions:
                    break

    if len(suggestions) < max_suggestions and length >= 2:
        for candidate, _ in _ranked_by_prefix(word, dictionary, 2, SHORT_PREFIX_DISTANCE):
            if candidate not in suggestions:
                suggestions.append(candidate)
                if len(suggestions) >= max_suggestions:
                    break

    if len(suggestions) < max_suggestions and length <= SHORT_WORD_LENGTH:
        pool = []
        for candidate in dictionary.all_words():
            if abs(len(candidate) - length) <= 1:
                pool.append(candidate)
                if len(pool) >= SCAN_POOL_SIZE:
                    break

        scored = [(c, edit_distance(word, c)) for c in pool]
        scored = sorted((item for item in scored if item[1] <= SCAN_DISTANCE), key=lambda x: x[1])
        for candidate, _ in scored:
            if candidate not in suggestions:
                suggestions.append(candidate)
                if len(suggestions) >= max_suggestions:
                    break

    return suggestions[:max_suggestions]
