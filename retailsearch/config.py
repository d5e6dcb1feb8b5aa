# Config - engine and CLI settings loaded from config.json

import json
import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional, Union

from .errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILE = "config.json"


@dataclass
class EngineConfig:
    """Settings for the search engine and the CLI around it"""
    max_recent_searches: int = 10
    cluster_threshold: float = 0.7
    suggestion_limit: int = 8
    recent_suggestion_limit: int = 5
    db_path: str = "retailsearch.db"
    # Catalog source: API takes precedence over a local JSON file
    catalog_url: Optional[str] = None
    catalog_path: Optional[str] = None
    api_key: Optional[str] = None
    timeout: int = 30
    log_level: str = "INFO"
    log_file: Optional[str] = None


def load_config(path: Union[str, Path, None] = None) -> EngineConfig:
    """Read config.json; a missing file gives the defaults."""
    config_path = Path(path or CONFIG_FILE)
    if not config_path.exists():
        return EngineConfig()

    try:
        with open(config_path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise ConfigError(f"Cannot read {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"{config_path} must contain a JSON object")

    known = {f.name for f in fields(EngineConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        logger.warning(f"Ignoring unknown config keys: {', '.join(unknown)}")

    config = EngineConfig(**{k: v for k, v in data.items() if k in known})
    validate_config(config)
    return config


def validate_config(config: EngineConfig) -> None:
    for name in ("max_recent_searches", "suggestion_limit", "recent_suggestion_limit", "timeout"):
        value = getattr(config, name)
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            raise ConfigError(f"{name} must be a positive integer, got {value!r}")

    threshold = config.cluster_threshold
    if isinstance(threshold, bool) or not isinstance(threshold, (int, float)) \
            or not 0 <= threshold <= 1:
        raise ConfigError(f"cluster_threshold must be between 0 and 1, got {threshold!r}")
