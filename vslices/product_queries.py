"""Queries of the products slice: fetching one product or all of them."""

from __future__ import annotations

from typing import Any, Callable, Protocol, Union
from uuid import UUID

from fastapi import APIRouter, FastAPI
from pydantic import BaseModel, Field

from vslices.fails import _server_errors
from vslices.product import Product
from vslices.product_commands import _add_products_route, _ProductDetails


class ProductDTO(_ProductDetails):
    """A product as returned by the get query."""

    id: UUID = Field(description="Product ID")


class GetProductResponse(BaseModel):
    """Response body of the get query."""

    product: ProductDTO = Field(description="Product")


class ListItemProductDTO(ProductDTO):
    """A product as listed by the list query."""


class ListProductsResponse(BaseModel):
    """Response body of the list query."""

    products: list[ListItemProductDTO] = Field(description="List of products")


class _Getter(Protocol):
    def get_by_id(self, id: UUID) -> Product: ...


class _Lister(Protocol):
    def list_all(self) -> list[Product]: ...


def _fields(product: Product) -> dict[str, Any]:
    return {"id": product.id, "sku": product.sku, "name": product.name, "price": product.price}


def make_get_product_handler(repo: _Getter) -> Callable[[UUID], ProductDTO]:
    """Build a handler that looks a product up by id."""

    def handle(id: UUID) -> ProductDTO:
        return ProductDTO(**_fields(repo.get_by_id(id)))

    return handle


def make_list_products_handler(repo: _Lister) -> Callable[[], list[ListItemProductDTO]]:
    """Build a handler that lists every product."""

    def handle() -> list[ListItemProductDTO]:
        return [ListItemProductDTO(**_fields(p)) for p in repo.list_all()]

    return handle


def register_get_product(api: Union[FastAPI, APIRouter], repo: _Getter) -> None:
    """Expose ``GET /products/{id}``."""
    handler = make_get_product_handler(repo)

    def get_product(id: UUID) -> GetProductResponse:
        with _server_errors():
            return GetProductResponse(product=handler(id))

    _add_products_route(
        api,
        "/products/{id}",
        get_product,
        "GET",
        response_model=GetProductResponse,
        operation_id="getProduct",
        summary="Get a Product",
    )


def register_list_products(api: Union[FastAPI, APIRouter], repo: _Lister) -> None:
    """Expose ``GET /products``."""
    handler = make_list_products_handler(repo)

    def list_products() -> ListProductsResponse:
        with _server_errors():
            return ListProductsResponse(products=handler())

    _add_products_route(
        api,
        "/products",
        list_products,
        "GET",
        response_model=ListProductsResponse,
        operation_id="listProducts",
        summary="List all Product",
    )