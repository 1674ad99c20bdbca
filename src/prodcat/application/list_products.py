"""Application service: List Products use case (query)."""

from __future__ import annotations

from decimal import MAX_PREC, localcontext

from prodcat.application.dto import CatalogListingDTO, ProductLineDTO
from prodcat.domain.model.value_objects import Money
from prodcat.domain.repository.product_repository import ProductRepository


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository, currency: str = "USD") -> None:
        self._product_repo = product_repo
        self._currency = currency

    def handle(self) -> CatalogListingDTO:
        """Return every product sorted by price, with the sum of all prices.

        ``sorted`` is stable, so equal prices keep their insertion order.
        """
        products = sorted(self._product_repo.list_all(), key=lambda p: p.price)

        # exact sum: prices may carry more digits than the default 28
        total = Money.zero(self._currency)
        with localcontext() as ctx:
            ctx.prec = MAX_PREC
            for product in products:
                total = total + product.price

        return CatalogListingDTO(
            lines=[ProductLineDTO.from_product(p) for p in products],
            total=str(total),
        )
