"""Data models module."""

from src.models.product import ProductRecord, ProductView

__all__ = ["ProductRecord", "ProductView"]
