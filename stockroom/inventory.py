"""In-memory store of products, sources and transactions."""

from __future__ import annotations

from typing import Any, Callable

from .models import InvalidInputError, NotFoundError, Product, Source, Transaction

_INVALID_INPUT = "error - Invalid input"
_INVALID_PRODUCT = "error - Invalid product input"


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _as_string(field: str, value: Any) -> str:
    if isinstance(value, str):
        return value
    raise InvalidInputError(_INVALID_INPUT, f"field {field!r} must be a string")


def _as_float(field: str, value: Any) -> float:
    if _is_number(value):
        return float(value)
    raise InvalidInputError(_INVALID_INPUT, f"field {field!r} must be a number")


def _as_int(field: str, value: Any) -> int:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    raise InvalidInputError(_INVALID_INPUT, f"field {field!r} must be an integer")


_Converter = Callable[[str, Any], Any]

_PRODUCT_FIELDS: dict[str, _Converter] = {
    "id": _as_string,
    "name": _as_string,
    "description": _as_string,
    "price": _as_float,
    "stock": _as_int,
    "source_id": _as_string,
}
_SOURCE_FIELDS: dict[str, _Converter] = {"id": _as_string, "name": _as_string}
_TRANSACTION_FIELDS: dict[str, _Converter] = {
    "id": _as_string,
    "product_id": _as_string,
    "quantity": _as_int,
    "total": _as_float,
}


def _object(data: Any) -> dict:
    """Return the body as a mapping; a null body counts as an empty one."""
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise InvalidInputError(_INVALID_INPUT, "request body must be a JSON object")
    return data


def _bind(data: Any, fields: dict[str, _Converter]) -> dict[str, Any]:
    """Pick the known fields out of a body, matching names without regard to case."""
    bound: dict[str, Any] = {}
    for key, value in _object(data).items():
        name = str(key).lower()
        convert = fields.get(name)
        if convert is None or value is None:
            continue
        bound[name] = convert(name, value)
    return bound


class Inventory:
    """Holds every record in memory and enforces the rules on changing them."""

    def __init__(self) -> None:
        self.products: list[Product] = []
        self.sources: list[Source] = []
        self.transactions: list[Transaction] = []

    # Products

    def list_products(self) -> list[Product]:
        return list(self.products)

    def get_product(self, product_id: str) -> Product:
        for product in self.products:
            if product.id == product_id:
                return product
        raise NotFoundError("Error - Product not found", "Product not found")

    def add_product(self, data: Any) -> Product:
        fields = _bind(data, _PRODUCT_FIELDS)
        fields.pop("id", None)
        product = Product(**fields)
        if not product.name or product.price <= 0 or product.stock < 0:
            raise InvalidInputError(_INVALID_PRODUCT, "Invalid product input")
        product.id = str(len(self.products) + 1)
        self.products.append(product)
        return product

    def update_product(self, product_id: str, data: Any) -> Product:
        updates = _object(data)

        if "name" in updates:
            name = updates["name"]
            if not isinstance(name, str) or not name:
                raise InvalidInputError(_INVALID_PRODUCT, "Product name cannot be empty")
        if "price" in updates:
            price = updates["price"]
            price_value = float(price) if _is_number(price) else 0.0
            if price_value <= 0:
                raise InvalidInputError(
                    _INVALID_PRODUCT, "Product price must be greater than 0"
                )
        if "stock" in updates:
            stock = updates["stock"]
            stock_value = int(stock) if _is_number(stock) else 0
            if stock_value < 0:
                raise InvalidInputError(_INVALID_PRODUCT, "Product stock cannot be negative")

        product = self.get_product(product_id)
        if isinstance(updates.get("name"), str):
            product.name = updates["name"]
        if isinstance(updates.get("description"), str):
            product.description = updates["description"]
        if _is_number(updates.get("price")):
            product.price = float(updates["price"])
        if _is_number(updates.get("stock")):
            product.stock = int(updates["stock"])
        if isinstance(updates.get("source_id"), str):
            product.source_id = updates["source_id"]
        return product

    def delete_product(self, product_id: str) -> Product:
        product = self.get_product(product_id)
        self.products.remove(product)
        return product

    # Sources

    def list_sources(self) -> list[Source]:
        return list(self.sources)

    def get_source(self, source_id: str) -> Source:
        for source in self.sources:
            if source.id == source_id:
                return source
        raise NotFoundError("Error - Source not found", "Source not found")

    def add_source(self, data: Any) -> Source:
        fields = _bind(data, _SOURCE_FIELDS)
        fields.pop("id", None)
        source = Source(**fields)
        source.id = str(len(self.sources) + 1)
        self.sources.append(source)
        return source

    def update_source(self, source_id: str, data: Any) -> Source:
        updates = _object(data)
        source = self.get_source(source_id)
        if isinstance(updates.get("name"), str):
            source.name = updates["name"]
        return source

    def delete_source(self, source_id: str) -> Source:
        source = self.get_source(source_id)
        self.sources.remove(source)
        return source

    # Transactions

    def list_transactions(self) -> list[Transaction]:
        return list(self.transactions)

    def get_transaction(self, transaction_id: str) -> Transaction:
        for transaction in self.transactions:
            if transaction.id == transaction_id:
                return transaction
        raise NotFoundError("Error - Transaction not found", "Transaction not found")

    def add_transaction(self, data: Any) -> Transaction:
        fields = _bind(data, _TRANSACTION_FIELDS)
        fields.pop("id", None)
        fields.pop("total", None)
        transaction = Transaction(**fields)

        product = next(
            (p for p in self.products if p.id == transaction.product_id), None
        )
        if product is None:
            raise NotFoundError("Error - Product not found", "Product not found")

        if not any(s.id == product.source_id for s in self.sources):
            raise NotFoundError(
                "Error - Source for this product not found",
                "Source for this product not found",
            )

        if transaction.quantity <= 0:
            raise InvalidInputError(
                "Error - Quantity must be greater than 0",
                "Quantity must be greater than 0",
            )
        if product.stock < transaction.quantity:
            raise InvalidInputError("Error - Not enough stock", "Not enough stock")

        product.stock -= transaction.quantity
        transaction.id = str(len(self.transactions) + 1)
        transaction.total = float(transaction.quantity) * product.price
        self.transactions.append(transaction)
        return transaction