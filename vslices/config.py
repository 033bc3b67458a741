"""Wiring of infrastructure, repositories, event handlers and HTTP routes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from fastapi import APIRouter, FastAPI

from vslices.eventbus import EventBus
from vslices.events import OrderCreated
from vslices.order_commands import register_create_order, register_delete_order
from vslices.order_queries import register_get_order, register_list_orders
from vslices.order_repository import OrderRepository
from vslices.product_commands import register_create_product, register_delete_product
from vslices.product_eventhandlers import make_order_created_handler
from vslices.product_queries import register_get_product, register_list_products
from vslices.product_repository import ProductRepository


@dataclass
class Config:
    """The shared components of the application, filled in by the wire functions."""

    event_bus: EventBus | None = None
    products_repo: ProductRepository | None = None
    orders_repo: OrderRepository | None = None


def wire_infra(config: Config) -> None:
    """Create the event bus."""
    config.event_bus = EventBus()


def wire_repositories(config: Config) -> None:
    """Create the repositories; orders publish to the configured event bus."""
    config.products_repo = ProductRepository()
    config.orders_repo = OrderRepository(config.event_bus)


def wire_product_event_handlers(config: Config) -> None:
    """Subscribe the products slice to events of other slices."""
    config.event_bus.register(OrderCreated, make_order_created_handler(config.products_repo))


def wire_product_api(config: Config, api: Union[FastAPI, APIRouter]) -> None:
    """Expose the product routes."""
    register_create_product(api, config.products_repo)
    register_delete_product(api, config.products_repo)
    register_get_product(api, config.products_repo)
    register_list_products(api, config.products_repo)


def wire_order_api(config: Config, api: Union[FastAPI, APIRouter]) -> None:
    """Expose the order routes; stock is checked against the products repository."""
    register_create_order(api, config.orders_repo, config.products_repo)
    register_delete_order(api, config.orders_repo)
    register_get_order(api, config.orders_repo)
    register_list_orders(api, config.orders_repo)