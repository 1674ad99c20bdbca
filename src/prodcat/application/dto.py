"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry display-ready data from the application handlers to the
console session without exposing domain objects to the renderer.
"""

from __future__ import annotations

from dataclasses import dataclass

from prodcat.domain.model.product import Product


@dataclass(frozen=True)
class ProductLineDTO:
    """Output: a single product row as displayed to the user."""

    category: str
    name: str
    price: str  # formatted, e.g. "$15.00"

    @classmethod
    def from_product(cls, product: Product) -> ProductLineDTO:
        return cls(
            category=product.category,
            name=product.name,
            price=str(product.price),
        )


@dataclass(frozen=True)
class CatalogListingDTO:
    """Output: the whole catalog, cheapest first, with the price total."""

    lines: list[ProductLineDTO]
    total: str
