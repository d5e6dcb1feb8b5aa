# Search Engine - wires ranking, suggestions, tags and recent searches
# together for one catalog source and one store

import logging
from typing import Callable, List, Optional, Sequence

from .catalog_client import CatalogClient, StubCatalogClient
from .catalog_index import CatalogSearchIndex, SearchSuggestion
from .config import EngineConfig
from .errors import CatalogError, StorageError
from .product import Product
from .recent_searches import RecentSearchStore
from .search_ranker import SearchRanker
from .storage import SQLiteStore
from .string_metrics import edit_similarity, similarity
from .tag_clusterer import TagCluster, TagClusterer
from .tag_normalizer import collect_tags

logger = logging.getLogger(__name__)

METRICS = {
    'jaro-winkler': similarity,
    'edit': edit_similarity,
}


def build_catalog_client(config: EngineConfig):
    """API client when a catalog URL is configured, file reader otherwise"""
    if config.catalog_url:
        return CatalogClient(config.catalog_url, api_key=config.api_key, timeout=config.timeout)
    if config.catalog_path:
        return StubCatalogClient(config.catalog_path)
    raise CatalogError('No catalog source configured (set catalog_url or catalog_path)')


class SearchEngine:
    """Product search, suggestions and tag maintenance over one catalog"""

    def __init__(self, config: Optional[EngineConfig] = None, storage=None, catalog_client=None):
        self.config = config or EngineConfig()
        self.storage = storage if storage is not None else SQLiteStore(self.config.db_path)
        self.catalog_client = catalog_client
        self.ranker = SearchRanker()
        self.index = CatalogSearchIndex(
            limit=self.config.suggestion_limit,
            recent_limit=self.config.recent_suggestion_limit,
        )
        self.recent = RecentSearchStore(self.storage, max_entries=self.config.max_recent_searches)
        self._products: Optional[List[Product]] = None

    @property
    def products(self) -> List[Product]:
        """Catalog snapshot, fetched on first use"""
        if self._products is None:
            client = self.catalog_client or build_catalog_client(self.config)
            self._products = client.fetch_products()
        return self._products

    def load_catalog(self, products: Sequence[Product]):
        """Replace the catalog snapshot"""
        self._products = list(products)

    def search(self, query: str, record: bool = True) -> Sequence[Product]:
        results = self.ranker.rank(query, self.products)
        if record:
            self.record_search(query)
        logger.info(f"Search {query!r}: {len(results)} results")
        return results

    def record_search(self, query: str) -> bool:
        """Remember a submitted query. Storage failures are logged, not raised."""
        try:
            self.recent.record(query)
            return True
        except StorageError as e:
            logger.warning(f"Could not save recent search {query!r}: {e}")
            return False

    def suggestions(self) -> List[SearchSuggestion]:
        return self.index.suggestions(self.products)

    def suggest(self, query: str) -> List[SearchSuggestion]:
        return self.index.match(query, self.suggestions(), self.recent.list())

    def tags(self) -> List[str]:
        return collect_tags(self.products)

    def clusterer(self, threshold: Optional[float] = None, metric: str = 'jaro-winkler') -> TagClusterer:
        scorer: Callable[[str, str], float] = METRICS[metric]
        if threshold is None:
            threshold = self.config.cluster_threshold
        return TagClusterer(threshold, scorer)

    def tag_clusters(self, threshold: Optional[float] = None, metric: str = 'jaro-winkler') -> List[TagCluster]:
        return self.clusterer(threshold, metric).clusters(self.tags())
