"""
Product data models.

Immutable snapshots of catalog products as returned by the Admin API.
No business logic - only data structure definitions and parsing.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple, Union

ResourceId = Union[int, str]


@dataclass(frozen=True)
class Variant:
    """Product variant with its 1-based position among siblings."""
    id: ResourceId
    title: str
    position: int

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Variant":
        return cls(
            id=data["id"],
            title=data.get("title") or "",
            position=int(data["position"]),
        )


@dataclass(frozen=True)
class Product:
    """
    Catalog product as fetched from one listing page.

    Variants keep the order the API returned them in, which is not
    necessarily position order.
    """
    id: ResourceId
    title: str
    variants: Tuple[Variant, ...] = field(default_factory=tuple)

    def __post_init__(self):
        """Validate required fields after initialization."""
        if self.id is None or self.id == "":
            raise ValueError("Product id is required")

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Product":
        """
        Build a Product from a `products.json` entry.

        Raises:
            ValueError: If the entry has no id
        """
        return cls(
            id=data.get("id"),
            title=data.get("title") or "",
            variants=tuple(Variant.from_api(v) for v in data.get("variants") or []),
        )


@dataclass(frozen=True)
class ProductBatch:
    """One page of products from the listing endpoint."""
    page_number: int
    products: Tuple[Product, ...]

    def __len__(self) -> int:
        return len(self.products)
