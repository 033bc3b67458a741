"""Commands of the products slice: creating and deleting products."""

from __future__ import annotations

from typing import Any, Callable, Protocol, Union
from uuid import UUID

from fastapi import APIRouter, FastAPI
from pydantic import BaseModel, Field

from vslices.fails import _server_errors
from vslices.product import Product


class _ProductDetails(BaseModel):
    """Descriptive fields of a product as seen on the wire."""

    sku: str = Field(max_length=15, examples=["P001"], description="Product SKU")
    name: str = Field(max_length=30, examples=["Product 1"], description="Product name")
    price: float = Field(examples=[10.99], description="Product price")


class CreateProductCommand(_ProductDetails):
    """Request body for creating a product."""


class CreateProductResponse(BaseModel):
    """Response body carrying the id of the new product."""

    id: UUID = Field(
        examples=["00000000-0000-0000-0000-000000000000"], description="Product ID"
    )


class _Creator(Protocol):
    def create(self, product: Product) -> None: ...


class _Deleter(Protocol):
    def delete(self, id: UUID) -> None: ...


def _add_products_route(
    api: Union[FastAPI, APIRouter],
    path: str,
    endpoint: Callable[..., Any],
    method: str,
    **options: Any,
) -> None:
    api.add_api_route(path, endpoint, methods=[method], tags=["products"], **options)


def make_create_product_handler(repo: _Creator) -> Callable[[CreateProductCommand], UUID]:
    """Build a handler that stores a new product with no stock and returns its id."""

    def handle(cmd: CreateProductCommand) -> UUID:
        product = Product.create(cmd.sku, cmd.name, cmd.price, 0)
        repo.create(product)
        return product.id

    return handle


def make_delete_product_handler(repo: _Deleter) -> Callable[[UUID], None]:
    """Build a handler that deletes a product by id."""
    return repo.delete


def register_create_product(api: Union[FastAPI, APIRouter], repo: _Creator) -> None:
    """Expose ``POST /products``."""
    handler = make_create_product_handler(repo)

    def create_product(cmd: CreateProductCommand) -> CreateProductResponse:
        with _server_errors():
            return CreateProductResponse(id=handler(cmd))

    _add_products_route(
        api,
        "/products",
        create_product,
        "POST",
        response_model=CreateProductResponse,
        operation_id="createProduct",
        summary="Create Product",
        description="Create a new product",
    )


def register_delete_product(api: Union[FastAPI, APIRouter], repo: _Deleter) -> None:
    """Expose ``DELETE /products/{id}``."""
    handler = make_delete_product_handler(repo)

    def delete_product(id: UUID) -> None:
        with _server_errors():
            handler(id)

    _add_products_route(
        api,
        "/products/{id}",
        delete_product,
        "DELETE",
        status_code=204,
        response_model=None,
        operation_id="deleteProduct",
        summary="Delete Product",
    )