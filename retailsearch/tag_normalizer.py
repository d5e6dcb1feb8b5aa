# Tag Normalizer - single entry point for raw product tags
# Tags arrive as lists, JSON-encoded arrays or comma-separated strings

import json
import logging
from typing import Any, Iterable, List

logger = logging.getLogger(__name__)


def _split_csv(value: str) -> List[str]:
    return [part.strip() for part in value.split(",") if part.strip()]


def _reject_constant(name: str):
    # NaN and Infinity are not JSON
    raise ValueError(f"Invalid JSON constant {name}")


def _dedupe(tags: Iterable[str]) -> List[str]:
    # First spelling wins; "Organic" and "organic" are the same tag
    seen = set()
    result = []
    for tag in tags:
        key = tag.lower()
        if key not in seen:
            seen.add(key)
            result.append(tag)
    return result


def normalize_tags(raw: Any) -> List[str]:
    """
    Resolve any tag representation into an ordered list of unique,
    trimmed, non-empty tags. Case is preserved.

    - list/tuple: non-string and blank entries are dropped
    - '["a", "b"]': parsed as JSON; falls back to comma-splitting if the
      string is not a valid JSON array
    - 'a, b': comma-split
    """
    if raw is None:
        return []

    if isinstance(raw, (list, tuple)):
        return _dedupe(
            tag.strip() for tag in raw
            if isinstance(tag, str) and tag.strip()
        )

    if isinstance(raw, str):
        value = raw.strip()
        if value.startswith("[") and value.endswith("]"):
            try:
                parsed = json.loads(value, parse_constant=_reject_constant)
            except ValueError:
                logger.debug("Tags look like JSON but failed to parse: %r", raw)
            else:
                return normalize_tags(parsed)
        return _dedupe(_split_csv(value))

    logger.debug("Ignoring tags of unsupported type %s", type(raw).__name__)
    return []


def format_tags_for_display(raw: Any) -> str:
    """Comma-joined tags without JSON brackets or quotes."""
    return ", ".join(normalize_tags(raw))


def collect_tags(products: Iterable[Any]) -> List[str]:
    """All distinct tags across a catalog, sorted."""
    tags = set()
    for product in products:
        tags.update(normalize_tags(getattr(product, "tags", None)))
    return sorted(tags)
