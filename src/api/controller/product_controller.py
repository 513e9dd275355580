"""REST controller for product operations."""

import logging
from typing import Iterator, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from src.clients import SqliteClient, SqliteProductRepository
from src.config import get_config
from src.models import ProductView
from src.services import ProductService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/products", tags=["products"])


class ProductPayload(BaseModel):
    """Incoming product data. Business rules are checked by the service."""

    name: Optional[str] = None
    price: Optional[float] = None

    def to_view(self) -> ProductView:
        return ProductView(name=self.name, price=self.price)


class ProductResponse(BaseModel):
    """Outgoing product representation."""

    id: Optional[int]
    name: Optional[str]
    price: Optional[float]

    @classmethod
    def from_view(cls, view: ProductView) -> "ProductResponse":
        return cls(id=view.id, name=view.name, price=view.price)


def get_product_service() -> Iterator[ProductService]:
    """Provide a ProductService bound to the configured database for one request."""
    config = get_config()
    with SqliteClient(config.database.path) as sqlite_client:
        yield ProductService(SqliteProductRepository(sqlite_client))


@router.get("", response_model=list[ProductResponse])
def find_all(service: ProductService = Depends(get_product_service)) -> list[ProductResponse]:
    return [ProductResponse.from_view(view) for view in service.find_all()]


@router.get("/{product_id}", response_model=ProductResponse)
def find_by_id(
    product_id: int,
    service: ProductService = Depends(get_product_service),
) -> ProductResponse:
    return ProductResponse.from_view(service.find_by_id(product_id))


@router.post("", response_model=ProductResponse, status_code=201)
def insert(
    payload: ProductPayload,
    service: ProductService = Depends(get_product_service),
) -> ProductResponse:
    """Create a product."""
    view = service.insert(payload.to_view())
    logger.info(f"POST /products created id={view.id}")
    return ProductResponse.from_view(view)


@router.put("/{product_id}", response_model=ProductResponse)
def update(
    product_id: int,
    payload: ProductPayload,
    service: ProductService = Depends(get_product_service),
) -> ProductResponse:
    """Replace a product's name and price."""
    return ProductResponse.from_view(service.update(product_id, payload.to_view()))
