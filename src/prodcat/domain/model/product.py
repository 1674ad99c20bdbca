"""Product entity.

Products are created once, on a successful add, and never change
afterwards. There is no update or delete in the catalog.
"""

from __future__ import annotations

from dataclasses import dataclass

from prodcat.domain.exceptions import InvalidPriceError, ValidationError
from prodcat.domain.model.value_objects import Money


@dataclass(frozen=True)
class Product:
    """A product in the catalog.

    Invariants:
    - ``category`` and ``name`` are non-blank and stored trimmed
    - ``price`` is strictly greater than zero
    """

    category: str
    name: str
    price: Money

    def __post_init__(self) -> None:
        if not self.category or not self.category.strip():
            raise ValidationError("Product category is required")
        if not self.name or not self.name.strip():
            raise ValidationError("Product name is required")
        if not self.price.is_positive:
            raise InvalidPriceError("Product price must be greater than zero")
        # frozen: bypass __setattr__ to store the trimmed text
        object.__setattr__(self, "category", self.category.strip())
        object.__setattr__(self, "name", self.name.strip())

    def matches_name(self, name: str) -> bool:
        """Case-insensitive exact comparison against the product name."""
        return self.name.casefold() == name.strip().casefold()
