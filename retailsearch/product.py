# Product - read-only catalog record consumed by the search engine

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple

from .tag_normalizer import normalize_tags


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def _number(value: Any, default: float = 0.0) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


@dataclass(frozen=True)
class Product:
    """Catalog product as supplied by the backend"""
    id: str
    name: str = ""
    category: str = ""
    tags: Tuple[str, ...] = field(default_factory=tuple)
    sku: str = ""
    barcode: str = ""
    description: str = ""
    price: float = 0.0
    stock_quantity: float = 0
    min_stock_level: float = 0
    unit: str = ""

    def __post_init__(self):
        # Tags are resolved here once; nothing downstream re-parses them
        object.__setattr__(self, "tags", tuple(normalize_tags(self.tags)))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Product":
        """Build a product from an API record (``_id`` or ``id``)."""
        product_id = data.get("_id", data.get("id"))
        return cls(
            id=_text(product_id),
            name=_text(data.get("name")),
            category=_text(data.get("category")),
            tags=data.get("tags"),
            sku=_text(data.get("sku")),
            barcode=_text(data.get("barcode")),
            description=_text(data.get("description")),
            price=_number(data.get("price")),
            stock_quantity=_number(data.get("stock_quantity")),
            min_stock_level=_number(data.get("min_stock_level")),
            unit=_text(data.get("unit")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "tags": list(self.tags),
            "sku": self.sku,
            "barcode": self.barcode,
            "description": self.description,
            "price": self.price,
            "stock_quantity": self.stock_quantity,
            "min_stock_level": self.min_stock_level,
            "unit": self.unit,
        }


def load_products(records: Optional[Iterable[Dict[str, Any]]]) -> List[Product]:
    """Convert raw API records to products, keeping catalog order."""
    if not records:
        return []
    return [Product.from_dict(record) for record in records if isinstance(record, dict)]
