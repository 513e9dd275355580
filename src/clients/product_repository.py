"""Product persistence: the repository contract and its SQLite implementation."""

import logging
from typing import Optional, Protocol

from src.clients.sqlite_client import SqliteClient
from src.models import ProductRecord

logger = logging.getLogger(__name__)

CREATE_TABLE_SQL = """
CREATE TABLE IF NOT EXISTS products (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    price REAL NOT NULL
)
"""


class EntityNotFoundError(Exception):
    """Raised when no product record exists for a requested id."""

    def __init__(self, product_id: int):
        super().__init__(f"Unable to find ProductRecord with id {product_id}")
        self.product_id = product_id


class ProductRepository(Protocol):
    """Persistence operations the product service depends on."""

    def save(self, record: ProductRecord) -> ProductRecord:
        """Insert a new record or update an existing one."""
        ...

    def get_reference_by_id(self, product_id: int) -> ProductRecord:
        """Return the record for ``product_id`` or raise EntityNotFoundError."""
        ...

    def find_by_id(self, product_id: int) -> Optional[ProductRecord]:
        ...

    def find_all(self) -> list[ProductRecord]:
        ...


class SqliteProductRepository:
    """ProductRepository backed by a ``products`` table in SQLite."""

    def __init__(self, sqlite_client: SqliteClient):
        """Initialize the repository and create the table if needed.

        Args:
            sqlite_client: Open client for the products database.
        """
        self._sqlite_client = sqlite_client
        self._ensure_table_exists()

    def _ensure_table_exists(self) -> None:
        self._sqlite_client.execute_query(CREATE_TABLE_SQL)
        logger.debug("Products table initialized")

    def save(self, record: ProductRecord) -> ProductRecord:
        """Persist a record in a single transaction.

        New records (``id is None``) are inserted and receive the generated id.
        Existing records are updated in place.

        Args:
            record: The record to persist. Mutated with the assigned id on insert.

        Returns:
            The persisted record.

        Raises:
            EntityNotFoundError: If updating an id that has no row.
        """
        with self._sqlite_client.transaction():
            if record.id is None:
                _, new_id = self._sqlite_client.execute_write(
                    "INSERT INTO products (name, price) VALUES (?, ?)",
                    (record.name, record.price),
                )
                record.id = new_id
                logger.info(f"Inserted product {record.id}: {record.name}")
            else:
                rowcount, _ = self._sqlite_client.execute_write(
                    "UPDATE products SET name = ?, price = ? WHERE id = ?",
                    (record.name, record.price, record.id),
                )
                if rowcount == 0:
                    raise EntityNotFoundError(record.id)
                logger.info(f"Updated product {record.id}: {record.name}")

        return record

    def get_reference_by_id(self, product_id: int) -> ProductRecord:
        record = self.find_by_id(product_id)
        if record is None:
            raise EntityNotFoundError(product_id)
        return record

    def find_by_id(self, product_id: int) -> Optional[ProductRecord]:
        """Get a product record by its id.

        Returns:
            ProductRecord if found, None otherwise.
        """
        result = self._sqlite_client.execute_query(
            "SELECT id, name, price FROM products WHERE id = ?",
            (product_id,),
        )

        if not result:
            return None

        row = result[0]
        return ProductRecord(id=row[0], name=row[1], price=row[2])

    def find_all(self) -> list[ProductRecord]:
        """Get all product records ordered by id."""
        rows = self._sqlite_client.execute_query(
            "SELECT id, name, price FROM products ORDER BY id"
        )
        return [ProductRecord(id=row[0], name=row[1], price=row[2]) for row in rows]
