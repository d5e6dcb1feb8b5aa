# Catalog Client - fetches product catalog snapshots for the CLI
# The engine itself never fetches; it is handed a catalog

import json
import logging
import time
from pathlib import Path
from typing import Any, Dict, List

import requests

from .errors import CatalogError
from .product import Product, load_products

logger = logging.getLogger(__name__)


def _extract_records(payload: Any) -> List[Dict]:
    """Accept a bare list or a {"products": [...]} / {"data": [...]} envelope."""
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict):
        for key in ("products", "data"):
            if isinstance(payload.get(key), list):
                return payload[key]
    raise CatalogError("Catalog payload is not a product list")


class CatalogClient:
    """REST API client for reading the RetailStack product catalog"""

    def __init__(self, base_url: str, api_key: str = None, timeout: int = 30,
                 products_path: str = '/api/products'):
        self.base_url = base_url.rstrip('/')
        self.products_path = products_path if products_path.startswith('/') else '/' + products_path
        self.timeout = timeout
        self.session = requests.Session()

        if api_key:
            self.session.headers.update({'Authorization': f'Bearer {api_key}'})

        self.session.headers.update({
            'Accept': 'application/json',
            'User-Agent': 'RetailStack-Search/1.0'
        })

        # Retry settings
        self.max_retries = 3
        self.retry_delay = 2  # seconds

    def fetch_products(self) -> List[Product]:
        """Fetch the full catalog, retrying timeouts, connection errors and 5xx"""
        endpoint = f"{self.base_url}{self.products_path}"
        last_error = 'Max retries exceeded'

        for attempt in range(self.max_retries):
            try:
                response = self.session.get(endpoint, timeout=self.timeout)
            except requests.exceptions.Timeout:
                last_error = 'Timeout'
                logger.warning(f"Timeout, retry {attempt + 1}/{self.max_retries}")
            except requests.exceptions.ConnectionError:
                last_error = 'Connection error'
                logger.warning(f"Connection error, retry {attempt + 1}/{self.max_retries}")
            else:
                if response.status_code == 200:
                    try:
                        records = _extract_records(response.json())
                    except ValueError as e:
                        raise CatalogError(f"Catalog response is not JSON: {e}") from e
                    products = load_products(records)
                    logger.info(f"Fetched {len(products)} products from {endpoint}")
                    return products

                if response.status_code == 401:
                    raise CatalogError('Authentication failed - check API key')

                if response.status_code < 500:
                    raise CatalogError(f"Catalog request failed ({response.status_code}): {response.text}")

                last_error = f"Server error {response.status_code}"
                logger.warning(f"Server error {response.status_code}, retry {attempt + 1}/{self.max_retries}")

            if attempt + 1 < self.max_retries:
                time.sleep(self.retry_delay * (attempt + 1))

        raise CatalogError(f"Could not fetch catalog from {endpoint}: {last_error}")


class StubCatalogClient:
    """Reads the catalog from a local JSON export instead of the API"""

    def __init__(self, path: str):
        self.path = Path(path)

    def fetch_products(self) -> List[Product]:
        try:
            with open(self.path, encoding='utf-8') as f:
                payload = json.load(f)
        except (OSError, ValueError) as e:
            raise CatalogError(f"Cannot read catalog {self.path}: {e}") from e
        products = load_products(_extract_records(payload))
        logger.info(f"[STUB] Loaded {len(products)} products from {self.path}")
        return products
