"""HTTP controllers."""

from src.api.controller.product_controller import get_product_service, router as product_router

__all__ = ["get_product_service", "product_router"]
