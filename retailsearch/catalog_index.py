# Catalog Search Index - search-box suggestions built from a catalog
# Rebuilt from scratch on every catalog change

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Sequence

from .product import Product
from .string_metrics import edit_distance

DEFAULT_SUGGESTION_LIMIT = 8
DEFAULT_RECENT_LIMIT = 5


class SuggestionKind(str, Enum):
    PRODUCT = "product"
    CATEGORY = "category"
    TAG = "tag"
    RECENT = "recent"


@dataclass
class SearchSuggestion:
    """A single suggestion shown under the search box"""
    id: str
    text: str
    kind: SuggestionKind
    count: int = 1


def suggestion_score(query: str, text: str) -> float:
    """
    Looser scoring used while typing: substring hits lose up to 50 points
    by position, and fuzzy word hits use normalized edit distance. Unlike
    field scoring, the word average runs over every query word.
    """
    if not query or not text:
        return 0.0

    query = query.lower()
    text = text.lower()

    if query in text:
        return 100.0 - (text.index(query) / len(text)) * 50

    query_words = query.split()
    text_words = text.split()
    total = 0.0
    matched = 0

    for query_word in query_words:
        best = 0.0
        for text_word in text_words:
            if text_word.startswith(query_word):
                best = max(best, 80.0)
            elif query_word in text_word:
                best = max(best, 60.0)
            elif len(query_word) > 2:
                longest = max(len(query_word), len(text_word))
                ratio = (longest - edit_distance(query_word, text_word)) / longest
                if ratio > 0.6:
                    best = max(best, ratio * 40)
        if best > 0:
            total += best
            matched += 1

    return total / len(query_words) if matched else 0.0


class CatalogSearchIndex:
    """Builds and filters search suggestions for a product catalog"""

    def __init__(self, limit: int = DEFAULT_SUGGESTION_LIMIT,
                 recent_limit: int = DEFAULT_RECENT_LIMIT):
        self.limit = limit
        self.recent_limit = recent_limit

    def suggestions(self, products: Sequence[Product]) -> List[SearchSuggestion]:
        """
        One suggestion per distinct (kind, lower-cased text) over product
        names, categories and tags. ``count`` is the number of occurrences;
        order is first occurrence.
        """
        entries: Dict[str, SearchSuggestion] = {}

        def add(kind: SuggestionKind, text: str, suggestion_id: str):
            key = f"{kind.value}-{text.lower()}"
            existing = entries.get(key)
            if existing:
                existing.count += 1
            else:
                entries[key] = SearchSuggestion(id=suggestion_id, text=text, kind=kind)

        for product in products:
            if product.name:
                add(SuggestionKind.PRODUCT, product.name, f"product-{product.id}")
            if product.category:
                add(SuggestionKind.CATEGORY, product.category,
                    f"category-{product.category.lower()}")
            for tag in product.tags:
                add(SuggestionKind.TAG, tag, f"tag-{tag.lower()}")

        return list(entries.values())

    def match(self, query: str, suggestions: Sequence[SearchSuggestion],
              recent: Sequence[str] = ()) -> List[SearchSuggestion]:
        """
        Suggestions to show for what has been typed so far. A blank query
        shows the most recent searches instead.
        """
        if not query or not query.strip():
            return [
                SearchSuggestion(id=f"recent-{i}", text=text, kind=SuggestionKind.RECENT)
                for i, text in enumerate(recent[:self.recent_limit])
            ]

        scored = []
        for suggestion in suggestions:
            score = suggestion_score(query, suggestion.text)
            if score > 0:
                scored.append((suggestion, score))

        scored.sort(key=lambda item: item[1], reverse=True)
        return [suggestion for suggestion, _ in scored[:self.limit]]
