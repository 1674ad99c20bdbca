"""Process-lifetime implementation of ProductRepository.

Nothing is written to disk: the catalog disappears when the session ends.
"""

from __future__ import annotations

from prodcat.domain.model.product import Product
from prodcat.domain.repository.product_repository import ProductRepository


class InMemoryProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._products: list[Product] = list(products or [])

    # --- ProductRepository interface ------------------------------------------

    def add(self, product: Product) -> None:
        self._products.append(product)

    def list_all(self) -> list[Product]:
        return list(self._products)

    def find_by_name(self, name: str) -> list[Product]:
        return [p for p in self._products if p.matches_name(name)]

    def count(self) -> int:
        return len(self._products)
