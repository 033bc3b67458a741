# vslices

HTTP routes for products and orders, built with FastAPI. Each use case is a
self-contained slice with its own handler and route: commands (create, delete)
and queries (get, list) for products and for orders. Data lives in memory, and
the slices talk to each other through an in-process event bus.

## Installing

```
pip install .
```

With the test dependencies:

```
pip install .[test]
```

## Building an application

The functions in `vslices.config` fill a `Config` with the shared components
and add the routes to a `FastAPI` application or an `APIRouter`:

```python
from fastapi import FastAPI

from vslices.config import (
    Config,
    wire_infra,
    wire_order_api,
    wire_product_api,
    wire_product_event_handlers,
    wire_repositories,
)

app = FastAPI(title="My API", version="1.0.0")

config = Config()
wire_infra(config)                   # creates the EventBus
wire_repositories(config)            # ProductRepository and OrderRepository
wire_product_event_handlers(config)  # products react to OrderCreated
wire_product_api(config, app)
wire_order_api(config, app)
```

The order matters: the repositories need the event bus, and the event handlers
and routes need the repositories.

## Endpoints

| Method | Path              | Body / result                                          |
|--------|-------------------|--------------------------------------------------------|
| POST   | `/products`       | `{"sku", "name", "price"}` → `{"id"}`                  |
| GET    | `/products`       | `{"products": [{"id", "sku", "name", "price"}, ...]}`  |
| GET    | `/products/{id}`  | `{"product": {"id", "sku", "name", "price"}}`          |
| DELETE | `/products/{id}`  | 204, no body                                           |
| POST   | `/orders`         | `{"productId", "quantity"}` → `{"id"}`                 |
| GET    | `/orders`         | `{"orders": [{"id", "productId", "quantity"}, ...]}`   |
| GET    | `/orders/{id}`    | `{"order": {"id", "productId", "quantity"}}`           |
| DELETE | `/orders/{id}`    | 204, no body                                           |

`sku` is at most 15 characters and `name` at most 30. A request body that fails
validation is answered with 422. Any other failure, including an unknown id or
insufficient stock, is answered with 500 and the detail
`"unexpected error occurred"`.

## Behaviour

- A new product starts with a stock of zero. `Product.increase_stock` exists
  on the domain object, but no route calls it.
- Placing an order asks the products repository for the product's stock. If
  the product is unknown, or its stock is lower than the quantity, the order is
  refused.
- A stored order publishes an `OrderCreated` event. The products slice handles
  it by decreasing the product's stock. A failure while publishing is logged;
  the order stays stored.
- `EventBus.publish` delivers only to the first handler registered for the
  first message kind that has one.
- Deleting an id that is not stored succeeds silently.

## Pieces

- `vslices.db.InMemoryDB`: a thread-safe table keyed by UUID, raising
  `DoesNotExistError` and `UniquenessViolationError`.
- `vslices.product_repository.ProductRepository` and
  `vslices.order_repository.OrderRepository`: storage that raises
  `vslices.fails.NotFoundError` and `AlreadyExistsError`.
- `vslices.product.Product` and `vslices.order.Order`: the domain objects, with
  `Product.create`, `Order.create`, `hydrate_product` and `hydrate_order`.
- `vslices.eventbus.EventBus`, `Message` and `Publisher`, and
  `vslices.events.OrderCreated`.
- `make_*_handler` functions in `vslices.product_commands`,
  `vslices.product_queries`, `vslices.order_commands`, `vslices.order_queries`
  and `vslices.product_eventhandlers`: the use cases without HTTP; the
  matching `register_*` functions add the routes.

## What it does not do

The package has no command and does not start a server. It gives you the
routes and their wiring; serve the application you build with an ASGI server
of your choice. Nothing is persisted: all data is lost when the process ends.