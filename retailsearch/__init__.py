# RetailStack Search
# Fuzzy product search and tag canonicalization

__version__ = '0.1.0'

from .string_metrics import similarity, edit_distance, edit_similarity
from .tag_normalizer import normalize_tags, format_tags_for_display, collect_tags
from .tag_clusterer import TagCluster, TagClusterer, cluster_tags
from .field_scorer import score_field
from .product import Product, load_products
from .search_ranker import SearchRanker, rank_products
from .catalog_index import CatalogSearchIndex, SearchSuggestion, SuggestionKind
from .recent_searches import RecentSearchStore
from .storage import MemoryStore, SQLiteStore
from .errors import SearchEngineError, StorageError, CatalogError, ConfigError
from .config import EngineConfig, load_config
from .engine import SearchEngine

__all__ = [
    'similarity',
    'edit_distance',
    'edit_similarity',
    'normalize_tags',
    'format_tags_for_display',
    'collect_tags',
    'TagCluster',
    'TagClusterer',
    'cluster_tags',
    'score_field',
    'Product',
    'load_products',
    'SearchRanker',
    'rank_products',
    'CatalogSearchIndex',
    'SearchSuggestion',
    'SuggestionKind',
    'RecentSearchStore',
    'MemoryStore',
    'SQLiteStore',
    'SearchEngineError',
    'StorageError',
    'CatalogError',
    'ConfigError',
    'EngineConfig',
    'load_config',
    'SearchEngine',
]
