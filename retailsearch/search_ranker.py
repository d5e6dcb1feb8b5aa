# Search Ranker - multi-field fuzzy ranking of a product catalog

import logging
from typing import List, Sequence, Tuple

from .field_scorer import (
    CATEGORY_WEIGHT,
    IDENTIFIER_SCORE,
    NAME_WEIGHT,
    TAG_WEIGHT,
    score_field,
)
from .product import Product

logger = logging.getLogger(__name__)


class SearchRanker:
    """Ranks products by their best weighted field score for a query"""

    def score(self, query: str, product: Product) -> float:
        """Best weighted score of a single product; 0 means no match."""
        query_lower = query.lower()
        best = 0.0

        if product.name:
            best = max(best, score_field(query_lower, product.name) * NAME_WEIGHT)

        if product.category:
            best = max(best, score_field(query_lower, product.category) * CATEGORY_WEIGHT)

        for tag in product.tags:
            best = max(best, score_field(query_lower, tag) * TAG_WEIGHT)

        if product.sku and query_lower in product.sku.lower():
            best = max(best, IDENTIFIER_SCORE)

        # Barcodes are numeric, compared literally
        if product.barcode and query in product.barcode:
            best = max(best, IDENTIFIER_SCORE)

        return best

    def rank_with_scores(self, query: str, products: Sequence[Product]) -> List[Tuple[Product, float]]:
        """Matching products with their scores, best first, ties in catalog order."""
        matches = []
        for product in products:
            product_score = self.score(query, product)
            if product_score > 0:
                matches.append((product, product_score))

        # sorted() is stable, so equal scores keep catalog order
        matches = sorted(matches, key=lambda match: match[1], reverse=True)
        logger.debug("Query %r matched %d/%d products", query, len(matches), len(products))
        return matches

    def rank(self, query: str, products: Sequence[Product]) -> Sequence[Product]:
        """
        Filter and order products by relevance to the query.

        A blank query means no filtering: the input sequence is returned
        as-is. Otherwise products scoring 0 are dropped.
        """
        if not query or not query.strip():
            return products
        return [product for product, _ in self.rank_with_scores(query, products)]


def rank_products(query: str, products: Sequence[Product]) -> Sequence[Product]:
    return SearchRanker().rank(query, products)
