"""Client modules for persistence."""

from src.clients.sqlite_client import SqliteClient
from src.clients.product_repository import (
    EntityNotFoundError,
    ProductRepository,
    SqliteProductRepository,
)

__all__ = [
    "SqliteClient",
    "EntityNotFoundError",
    "ProductRepository",
    "SqliteProductRepository",
]
