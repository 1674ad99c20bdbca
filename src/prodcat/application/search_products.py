"""Application service: Search Products use case (query)."""

from __future__ import annotations

import logging

from prodcat.application.dto import ProductLineDTO
from prodcat.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class SearchProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, name: str) -> list[ProductLineDTO]:
        """Return products named exactly *name* (ignoring case), in insertion order."""
        matches = self._product_repo.find_by_name(name)
        logger.debug("Search for %r matched %d product(s)", name, len(matches))
        return [ProductLineDTO.from_product(p) for p in matches]
