# stockroom

A small HTTP service that keeps track of products, the sources they come
from, and the transactions that sell them.

## Installing

```
pip install .
```

For running the tests as well:

```
pip install .[test]
pytest
```

## Running

```
stockroom
```

This starts the service on `0.0.0.0`, port `8080` (or the port named in the
`PORT` environment variable). Both can be set on the command line:

```
stockroom --host 127.0.0.1 --port 5000
```

## The API

Every response is a JSON object with a `message`. Most responses also carry
`data` (the record or list asked for, or `null`) and `error` (a short reason,
or `null` on success). `GET /`, `GET /ping` and `DELETE /products/<id>`
answer with a `message` alone.

| Method | Path                 | What it does                          |
|--------|----------------------|---------------------------------------|
| GET    | `/`                  | answers `welcome!`                    |
| GET    | `/ping`              | answers `pong!`                       |
| GET    | `/products`          | list all products                     |
| GET    | `/products/<id>`     | one product                           |
| POST   | `/products`          | add a product                         |
| PUT    | `/products/<id>`     | change some fields of a product       |
| DELETE | `/products/<id>`     | remove a product                      |
| GET    | `/sources`           | list all sources                      |
| GET    | `/sources/<id>`      | one source                            |
| POST   | `/sources`           | add a source                          |
| PUT    | `/sources/<id>`      | rename a source                       |
| DELETE | `/sources/<id>`      | remove a source                       |
| GET    | `/transactions`      | list all transactions                 |
| GET    | `/transactions/<id>` | one transaction                       |
| POST   | `/transactions`      | sell some units of a product          |

Requests that carry a body (POST and PUT) need a JSON object; an empty or
malformed body, or a field of the wrong type, is answered with `400` and the
message `error - Invalid input`. Unknown ids give `404`.

New records get an id from the service as a string: one more than the number
of records of that kind held at the time (`"1"`, `"2"`, …). Because of this,
an id can be handed out again after a record has been deleted. Any `id` in a
POST body is ignored. Field names in a POST body are matched without regard to
case, unknown fields are ignored, and `null` values leave a field at its
default.

### Products

A product has `id`, `name`, `description`, `price`, `stock` and
`source_id`. A new product needs a non-empty `name`, a `price` above zero and
a `stock` that is not negative; otherwise the answer is `400`.

A PUT changes only the fields it names. A `name` given must be a non-empty
string, a `price` given must be a number above zero, and a `stock` given must
not be negative; these are checked before the product is looked up, so a bad
update is answered with `400` even for an unknown id.

### Sources

A source has an `id` and a `name`. A PUT changes the `name` when it is given
as a string.

### Transactions

A transaction has `id`, `product_id`, `quantity` and `total`, and is created
from a `product_id` and a `quantity`. The product must exist and its
`source_id` must name an existing source (`404` otherwise); the quantity must
be above zero and no more than the product's stock (`400` otherwise). On
success the product's stock goes down, the transaction gets an `id` and a
`total` of quantity times price, and the answer is `201`.

## Using it from Python

The same rules are available without HTTP through
`stockroom.inventory.Inventory`:

```python
from stockroom.inventory import Inventory
from stockroom.models import InvalidInputError, NotFoundError

inventory = Inventory()
source = inventory.add_source({"name": "Main warehouse"})
product = inventory.add_product(
    {"name": "Lamp", "price": 12.5, "stock": 4, "source_id": source.id}
)
sale = inventory.add_transaction({"product_id": product.id, "quantity": 2})
print(sale.total)  # 25.0
```

`Inventory` has `list_`, `get_`, `add_`, `update_` and `delete_` methods for
products and sources, and `list_transactions`, `get_transaction` and
`add_transaction` for transactions. Records are the dataclasses `Product`,
`Source` and `Transaction` from `stockroom.models`, each with a `to_dict()`
method. Lookups of unknown ids raise `NotFoundError`; rejected input raises
`InvalidInputError`. Both carry a `message` and an `error` attribute, which
are the values the HTTP responses use.

An application can be built around an inventory of your own with
`stockroom.app.create_app(inventory)`, which returns a Flask application;
called without an inventory it starts from an empty one.

## What it does not do

Everything lives in memory. Nothing is written to disk or a database, so
restarting the service starts from an empty stockroom. There is no
authentication: anyone who can reach the service can change it.