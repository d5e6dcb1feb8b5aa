# String Metrics - similarity primitives for RetailStack search
# Jaro-Winkler similarity and Levenshtein edit distance

from rapidfuzz.distance import Levenshtein

# Winkler prefix boost
PREFIX_LIMIT = 4
PREFIX_SCALE = 0.1


def similarity(a: str, b: str) -> float:
    """
    Jaro-Winkler similarity in [0, 1], case-insensitive.

    Two empty strings are identical (1.0); an empty string against a
    non-empty one scores 0.0.
    """
    s1 = (a or "").lower()
    s2 = (b or "").lower()
    len1, len2 = len(s1), len(s2)

    if len1 == 0:
        return 1.0 if len2 == 0 else 0.0
    if len2 == 0:
        return 0.0

    # Clamped so single characters still match themselves
    match_window = max(0, max(len1, len2) // 2 - 1)
    s1_matches = [False] * len1
    s2_matches = [False] * len2

    matches = 0
    for i in range(len1):
        start = max(0, i - match_window)
        end = min(i + match_window + 1, len2)
        for j in range(start, end):
            if s2_matches[j] or s1[i] != s2[j]:
                continue
            s1_matches[i] = True
            s2_matches[j] = True
            matches += 1
            break

    if matches == 0:
        return 0.0

    transpositions = 0
    k = 0
    for i in range(len1):
        if not s1_matches[i]:
            continue
        while not s2_matches[k]:
            k += 1
        if s1[i] != s2[k]:
            transpositions += 1
        k += 1

    jaro = (
        matches / len1
        + matches / len2
        + (matches - transpositions / 2) / matches
    ) / 3

    prefix = 0
    for i in range(min(len1, len2, PREFIX_LIMIT)):
        if s1[i] != s2[i]:
            break
        prefix += 1

    return jaro + prefix * PREFIX_SCALE * (1 - jaro)


def edit_distance(a: str, b: str) -> int:
    """Levenshtein distance with unit cost for insert, delete and substitute."""
    return Levenshtein.distance(a or "", b or "")


def edit_similarity(a: str, b: str) -> float:
    """
    Edit-distance based similarity in [0, 1] used for merging tag spellings.

    Containment scores the length ratio of the two strings, anything else
    scores 1 - distance / longest length.
    """
    s1 = (a or "").lower().strip()
    s2 = (b or "").lower().strip()

    if s1 == s2:
        return 1.0

    longer = max(len(s1), len(s2))
    if s1 in s2 or s2 in s1:
        return min(len(s1), len(s2)) / longer

    return 1.0 - edit_distance(s1, s2) / longer
