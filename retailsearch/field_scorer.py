# Field Scorer - per-field relevance for a search query
# Substring hits beat word-prefix hits, which beat fuzzy word hits

from .string_metrics import similarity

# Field weights applied by the ranker
NAME_WEIGHT = 1.0
CATEGORY_WEIGHT = 0.8
TAG_WEIGHT = 0.6
# SKU / barcode containment is never fuzzy
IDENTIFIER_SCORE = 100.0

PREFIX_WORD_SCORE = 80.0
CONTAINS_WORD_SCORE = 60.0
FUZZY_WORD_SCALE = 40.0
FUZZY_MIN_SIMILARITY = 0.7
FUZZY_MIN_WORD_LENGTH = 3


def _substring_score(query: str, field: str) -> float:
    position = field.index(query) / len(field)
    if len(query) == 1:
        return 90.0 - position * 10
    return 100.0 - position * 20


def _word_score(query_word: str, field_words) -> float:
    best = 0.0
    for field_word in field_words:
        if field_word.startswith(query_word):
            best = max(best, PREFIX_WORD_SCORE)
        elif query_word in field_word:
            best = max(best, CONTAINS_WORD_SCORE)
        elif len(query_word) >= FUZZY_MIN_WORD_LENGTH:
            ratio = similarity(query_word, field_word)
            if ratio > FUZZY_MIN_SIMILARITY:
                best = max(best, ratio * FUZZY_WORD_SCALE)
    return best


def score_field(query: str, field: str) -> float:
    """
    Score a query against one text field, 0-100, case-insensitive.

    A substring hit scores 100 at index 0 and loses up to 20 points the
    later it starts (single characters: 90, losing up to 10). Otherwise each
    query word is scored against the field's words and the matching words'
    scores are averaged.
    """
    if not query or not field:
        return 0.0

    query = query.lower()
    field = field.lower()

    if query in field:
        return _substring_score(query, field)

    field_words = field.split()
    total = 0.0
    matched = 0
    for query_word in query.split():
        best = _word_score(query_word, field_words)
        if best > 0:
            total += best
            matched += 1

    return total / matched if matched else 0.0
