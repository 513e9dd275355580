"""Service layer module."""

from src.services.exceptions import InvalidDataError, ResourceNotFoundError, ServiceError
from src.services.product_service import ProductService, validate_product_data

__all__ = [
    "InvalidDataError",
    "ProductService",
    "ResourceNotFoundError",
    "ServiceError",
    "validate_product_data",
]
