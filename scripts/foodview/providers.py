"""
Catalog data providers.

Protocols define the interface; implementations can be swapped
for testing or alternative data sources.
"""

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class Product:
    """One search hit. Either field may be missing from the catalog."""

    code: str | None = None
    name: str | None = None


@dataclass(frozen=True)
class ProductDetail:
    """Full record for a single product."""

    code: str
    name: str | None = None
    ingredients_text: str | None = None
    brand: str | None = None


class CatalogError(Exception):
    """Base class for failed catalog lookups."""


class TransportError(CatalogError):
    """Connection failure, timeout or non-success HTTP status."""


class DecodeError(CatalogError):
    """Response body missing, malformed or of an unexpected shape."""


class CatalogProvider(Protocol):
    """Protocol for looking up products. Calls may block."""

    def search(self, term: str) -> list[Product]:
        """Search products by name."""
        ...

    def get_product(self, code: str) -> ProductDetail:
        """Get details of a specific product."""
        ...
