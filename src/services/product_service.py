"""Product service: validation and persistence orchestration.

Every operation validates its input before touching the repository, so a
validation failure never leaves a persisted change behind.
"""

import logging
from typing import Callable

from src.clients import EntityNotFoundError, ProductRepository
from src.models import ProductRecord, ProductView
from src.services.exceptions import InvalidDataError, ResourceNotFoundError

logger = logging.getLogger(__name__)

Validator = Callable[[ProductView], None]

NOT_FOUND_MESSAGE = "Resource not found"


def validate_product_data(view: ProductView) -> None:
    """Check that a product view carries a usable name and price.

    Raises:
        InvalidDataError: If the name is missing or blank, or the price is
            missing or not positive.
    """
    if view.name is None or not view.name.strip():
        raise InvalidDataError("Name field is empty or null")
    if view.price is None or view.price <= 0:
        raise InvalidDataError("Invalid price field")


def _copy_view_to_record(view: ProductView, record: ProductRecord) -> None:
    record.name = view.name
    record.price = view.price


class ProductService:
    """Service for creating, updating and reading products."""

    def __init__(
        self,
        repository: ProductRepository,
        validator: Validator = validate_product_data,
    ):
        """Initialize the product service.

        Args:
            repository: Persistence collaborator for product records.
            validator: Callable raising InvalidDataError for unacceptable views.
        """
        self._repository = repository
        self._validator = validator

    def validate_data(self, view: ProductView) -> None:
        self._validator(view)

    def insert(self, view: ProductView) -> ProductView:
        """Validate and persist a new product.

        Args:
            view: Product data; its id is ignored.

        Returns:
            View of the persisted product, carrying the assigned id.

        Raises:
            InvalidDataError: If validation fails. Nothing is persisted.
        """
        self.validate_data(view)

        record = ProductRecord(id=None, name=view.name, price=view.price)
        record = self._repository.save(record)

        logger.info(f"Created product {record.id}: {record.name}")
        return ProductView.from_record(record)

    def update(self, product_id: int, view: ProductView) -> ProductView:
        """Validate and apply new name and price to an existing product.

        Validation runs before the record is fetched, so invalid data on a
        missing id raises InvalidDataError rather than ResourceNotFoundError.

        Args:
            product_id: Id of the product to update.
            view: New product data; its id is ignored.

        Returns:
            View of the updated product.

        Raises:
            InvalidDataError: If validation fails.
            ResourceNotFoundError: If no product exists for ``product_id``.
        """
        self.validate_data(view)

        try:
            record = self._repository.get_reference_by_id(product_id)
            _copy_view_to_record(view, record)
            record = self._repository.save(record)
        except EntityNotFoundError as e:
            logger.warning(f"Update of missing product {product_id}: {e}")
            raise ResourceNotFoundError(NOT_FOUND_MESSAGE) from e

        logger.info(f"Updated product {record.id}: {record.name}")
        return ProductView.from_record(record)

    def find_by_id(self, product_id: int) -> ProductView:
        """Get a product by id.

        Raises:
            ResourceNotFoundError: If no product exists for ``product_id``.
        """
        record = self._repository.find_by_id(product_id)
        if record is None:
            raise ResourceNotFoundError(NOT_FOUND_MESSAGE)
        return ProductView.from_record(record)

    def find_all(self) -> list[ProductView]:
        return [ProductView.from_record(record) for record in self._repository.find_all()]
