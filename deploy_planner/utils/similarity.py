"""Name similarity scoring"""

import math


def edit_distance(a: str, b: str) -> int:
    """
    Levenshtein edit distance between two strings

    Args:
        a: First string
        b: Second string

    Returns:
        Minimum number of single-character insertions, deletions and
        substitutions turning ``a`` into ``b``
    """
    if len(a) < len(b):
        a, b = b, a

    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i]
        for j, char_b in enumerate(b, start=1):
            current.append(min(
                previous[j] + 1,
                current[j - 1] + 1,
                previous[j - 1] + (0 if char_a == char_b else 1)
            ))
        previous = current

    return previous[-1]


def similarity(a: str, b: str) -> int:
    """
    Case-insensitive similarity score on a 0-100 scale

    ``round(100 * (max_len - distance) / max_len)`` with halves rounded up.
    Identical strings, including two empty strings, score 100.

    Args:
        a: First name
        b: Second name

    Returns:
        Integer score between 0 and 100
    """
    a = (a or "").lower()
    b = (b or "").lower()
    if a == b:
        return 100

    max_len = max(len(a), len(b))
    distance = edit_distance(a, b)
    return int(math.floor(100 * (max_len - distance) / max_len + 0.5))
