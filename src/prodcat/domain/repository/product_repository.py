"""Abstract repository for the Product catalog.

Defined in the domain layer so the domain never depends on
infrastructure. The concrete in-memory store lives in the
infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from prodcat.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def add(self, product: Product) -> None:
        """Append a new product to the catalog."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in insertion order."""

    @abstractmethod
    def find_by_name(self, name: str) -> list[Product]:
        """Return products whose name matches, case-insensitively, in insertion order."""

    @abstractmethod
    def count(self) -> int:
        """Return the number of products in the catalog."""
