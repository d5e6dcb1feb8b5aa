# Errors raised by the RetailStack search engine and its CLI


class SearchEngineError(Exception):
    """Base error for the search engine."""


class StorageError(SearchEngineError):
    """Key-value store could not be read or written."""


class CatalogError(SearchEngineError):
    """Product catalog could not be fetched or parsed."""


class ConfigError(SearchEngineError):
    """Config file is unreadable or invalid."""
