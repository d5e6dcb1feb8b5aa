# Tests for search suggestions

import pytest
from retailsearch.catalog_index import (
    CatalogSearchIndex,
    SearchSuggestion,
    SuggestionKind,
    suggestion_score,
)
from retailsearch.product import Product


class TestSuggestions:
    """Test suggestion building"""

    def setup_method(self):
        self.index = CatalogSearchIndex()
        self.catalog = [
            Product(id='1', name='Red Apple', category='Fruit', tags=['Organic', 'fresh']),
            Product(id='2', name='red apple', category='fruit', tags=['organic']),
            Product(id='3', name='Banana', category='Fruit'),
        ]

    def test_counts_and_first_occurrence_order(self):
        """Test entries fold case-insensitively and keep insertion order"""
        suggestions = self.index.suggestions(self.catalog)

        assert [(s.text, s.kind, s.count) for s in suggestions] == [
            ('Red Apple', SuggestionKind.PRODUCT, 2),
            ('Fruit', SuggestionKind.CATEGORY, 3),
            ('Organic', SuggestionKind.TAG, 2),
            ('fresh', SuggestionKind.TAG, 1),
            ('Banana', SuggestionKind.PRODUCT, 1),
        ]

    def test_ids(self):
        """Test suggestion ids per kind"""
        ids = [s.id for s in self.index.suggestions(self.catalog)]

        assert ids == ['product-1', 'category-fruit', 'tag-organic', 'tag-fresh', 'product-3']

    def test_same_text_different_kinds(self):
        """Test a name and a category with the same text stay separate"""
        suggestions = self.index.suggestions([Product(id='1', name='Fruit', category='Fruit')])

        assert [s.kind for s in suggestions] == [SuggestionKind.PRODUCT, SuggestionKind.CATEGORY]

    def test_missing_fields(self):
        """Test products without name, category or tags add nothing"""
        assert self.index.suggestions([Product(id='1')]) == []

    def test_fresh_on_every_call(self):
        """Test counts do not accumulate across calls"""
        self.index.suggestions(self.catalog)
        suggestions = self.index.suggestions(self.catalog)

        assert suggestions[0].count == 2


class TestMatch:
    """Test filtering suggestions while typing"""

    def setup_method(self):
        self.index = CatalogSearchIndex(limit=3, recent_limit=2)
        self.suggestions = [
            SearchSuggestion(id='product-1', text='Red Apple', kind=SuggestionKind.PRODUCT),
            SearchSuggestion(id='product-2', text='Apple Juice', kind=SuggestionKind.PRODUCT),
            SearchSuggestion(id='category-fruit', text='Fruit', kind=SuggestionKind.CATEGORY),
            SearchSuggestion(id='product-3', text='Pineapple', kind=SuggestionKind.PRODUCT),
            SearchSuggestion(id='tag-apples', text='apples', kind=SuggestionKind.TAG),
        ]

    def test_blank_query_shows_recent(self):
        """Test recent searches are offered for an empty box"""
        result = self.index.match('', self.suggestions, ['milk', 'bread', 'tea'])

        assert result == [
            SearchSuggestion(id='recent-0', text='milk', kind=SuggestionKind.RECENT),
            SearchSuggestion(id='recent-1', text='bread', kind=SuggestionKind.RECENT),
        ]

    def test_ranked_and_limited(self):
        """Test best matches first, capped at the limit"""
        result = self.index.match('apple', self.suggestions)

        assert [s.text for s in result] == ['Apple Juice', 'apples', 'Red Apple']

    def test_no_match(self):
        """Test unrelated query gives nothing"""
        assert self.index.match('zzz', self.suggestions) == []


class TestSuggestionScore:
    """Test typing-time scoring"""

    def test_substring_position(self):
        """Test substring penalty of up to 50 points"""
        assert suggestion_score('apple', 'Red Apple') == pytest.approx(100 - (4 / 9) * 50)

    def test_typo(self):
        """Test edit-distance fuzzy word match"""
        assert suggestion_score('bananna', 'Banana') == pytest.approx((6 / 7) * 40)

    def test_average_over_all_words(self):
        """Test unmatched query words still count in the average"""
        assert suggestion_score('banana zzz', 'Banana') == pytest.approx(40.0)
