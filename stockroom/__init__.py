"""In-memory inventory of products, sources and transactions, served as a JSON HTTP API."""

__version__ = "0.1.0"