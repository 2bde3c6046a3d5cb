"""Records kept by the stockroom and the errors its operations raise."""

from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass
class Product:
    """An item for sale, with its price, stock level and supplying source."""

    id: str = ""
    name: str = ""
    description: str = ""
    price: float = 0.0
    stock: int = 0
    source_id: str = ""

    def to_dict(self) -> dict:
        """Return the product as a JSON-ready mapping."""
        return asdict(self)


@dataclass
class Source:
    """A supplier that products come from."""

    id: str = ""
    name: str = ""

    def to_dict(self) -> dict:
        """Return the source as a JSON-ready mapping."""
        return asdict(self)


@dataclass
class Transaction:
    """A sale of some quantity of one product."""

    id: str = ""
    product_id: str = ""
    quantity: int = 0
    total: float = 0.0

    def to_dict(self) -> dict:
        """Return the transaction as a JSON-ready mapping."""
        return asdict(self)


class _RequestError(Exception):
    """An operation failed; carries a summary message and the error detail."""

    def __init__(self, message: str, error: str) -> None:
        super().__init__(error)
        self.message = message
        self.error = error


class NotFoundError(_RequestError):
    """The requested record does not exist."""


class InvalidInputError(_RequestError):
    """The supplied data is malformed or breaks a rule."""