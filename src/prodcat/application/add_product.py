"""Application service: Add Product use case."""

from __future__ import annotations

import logging
from decimal import Decimal

from prodcat.domain.model.product import Product
from prodcat.domain.model.value_objects import Money
from prodcat.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository, currency: str = "USD") -> None:
        self._product_repo = product_repo
        self._currency = currency

    def handle(self, category: str, name: str, price: str | Decimal) -> Product:
        """Add a new product to the catalog.

        Duplicate names are allowed; a search simply returns every match.
        Blank text and non-positive prices are rejected by the entity and
        the price factory, so nothing is stored on failure.
        """
        product = Product(
            category=category,
            name=name,
            price=Money.price(price, self._currency),
        )
        self._product_repo.add(product)
        logger.debug(
            "Added product %r in %r at %s (catalog size %d)",
            product.name, product.category, product.price, self._product_repo.count(),
        )
        return product
