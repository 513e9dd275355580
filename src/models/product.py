"""Product models: the persisted record and its boundary-facing view."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class ProductRecord:
    """Persisted representation of a product.

    ``id`` stays ``None`` until the repository assigns one on insert.
    """

    id: Optional[int]
    name: str
    price: float


@dataclass
class ProductView:
    """Product data exchanged with callers.

    Nothing is enforced here; the service validates views at its boundary.
    """

    id: Optional[int] = None
    name: Optional[str] = None
    price: Optional[float] = None

    @classmethod
    def from_record(cls, record: ProductRecord) -> "ProductView":
        """Build a view from a persisted record."""
        return cls(id=record.id, name=record.name, price=record.price)
