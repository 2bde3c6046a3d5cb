"""HTTP interface to the stockroom inventory."""

from __future__ import annotations

import argparse
import json
import os
from typing import Any

from flask import Flask, jsonify, request

from .inventory import Inventory
from .models import InvalidInputError, NotFoundError

_INVALID_INPUT = "error - Invalid input"
_DEFAULT_PORT = 8080


def _read_body() -> Any:
    """Decode the request body as JSON, raising on an empty or malformed body."""
    raw = request.get_data()
    if not raw.strip():
        raise InvalidInputError(_INVALID_INPUT, "EOF")
    try:
        return json.loads(raw)
    except ValueError as exc:
        raise InvalidInputError(_INVALID_INPUT, str(exc)) from exc


def _reply(status: int, message: str, data: Any = None):
    return jsonify({"message": message, "data": data, "error": None}), status


def _failure(exc: NotFoundError | InvalidInputError, status: int):
    return jsonify({"message": exc.message, "data": None, "error": exc.error}), status


def create_app(inventory: Inventory | None = None) -> Flask:
    """Build the web application serving the given inventory (a fresh one by default)."""
    store = inventory if inventory is not None else Inventory()
    app = Flask(__name__)
    app.json.sort_keys = False
    app.extensions["inventory"] = store

    app.register_error_handler(NotFoundError, lambda exc: _failure(exc, 404))
    app.register_error_handler(InvalidInputError, lambda exc: _failure(exc, 400))

    @app.get("/")
    def welcome():
        return jsonify({"message": "welcome!"}), 200

    @app.get("/ping")
    def ping():
        return jsonify({"message": "pong!"}), 200

    # Products

    @app.get("/products")
    def list_products():
        products = [p.to_dict() for p in store.list_products()]
        return _reply(200, "success get all products", products)

    @app.get("/products/<product_id>")
    def get_product(product_id: str):
        product = store.get_product(product_id)
        return _reply(200, "success get product by ID", product.to_dict())

    @app.post("/products")
    def add_product():
        product = store.add_product(_read_body())
        return _reply(201, "Success - Product added", product.to_dict())

    @app.put("/products/<product_id>")
    def update_product(product_id: str):
        product = store.update_product(product_id, _read_body())
        return _reply(200, "Success - Product updated", product.to_dict())

    @app.delete("/products/<product_id>")
    def delete_product(product_id: str):
        store.delete_product(product_id)
        return jsonify({"message": "Success - Product deleted"}), 200

    # Sources

    @app.get("/sources")
    def list_sources():
        sources = [s.to_dict() for s in store.list_sources()]
        return _reply(200, "success get all sources", sources)

    @app.get("/sources/<source_id>")
    def get_source(source_id: str):
        source = store.get_source(source_id)
        return _reply(200, "success get source by ID", source.to_dict())

    @app.post("/sources")
    def add_source():
        source = store.add_source(_read_body())
        return _reply(201, "Success - Source added", source.to_dict())

    @app.put("/sources/<source_id>")
    def update_source(source_id: str):
        source = store.update_source(source_id, _read_body())
        return _reply(200, "Success - Source updated", source.to_dict())

    @app.delete("/sources/<source_id>")
    def delete_source(source_id: str):
        store.delete_source(source_id)
        return _reply(200, "Success - Source deleted")

    # Transactions

    @app.get("/transactions")
    def list_transactions():
        transactions = [t.to_dict() for t in store.list_transactions()]
        return _reply(200, "success get all transactions", transactions)

    @app.get("/transactions/<transaction_id>")
    def get_transaction(transaction_id: str):
        transaction = store.get_transaction(transaction_id)
        return _reply(200, "success get transaction by ID", transaction.to_dict())

    @app.post("/transactions")
    def add_transaction():
        transaction = store.add_transaction(_read_body())
        return _reply(201, "Success - Transaction created", transaction.to_dict())

    return app


def main(argv: list[str] | None = None) -> int:
    """Run the stockroom HTTP server."""
    parser = argparse.ArgumentParser(prog="stockroom", description="Serve the stockroom API.")
    parser.add_argument("--host", default="0.0.0.0", help="address to listen on")
    parser.add_argument(
        "--port",
        type=int,
        default=int(os.environ.get("PORT", _DEFAULT_PORT)),
        help="port to listen on (default: $PORT or 8080)",
    )
    args = parser.parse_args(argv)
    create_app().run(host=args.host, port=args.port)
    return 0