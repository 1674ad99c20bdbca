"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from prodcat.application.add_product import AddProductHandler
from prodcat.application.list_products import ListProductsHandler
from prodcat.application.search_products import SearchProductsHandler
from prodcat.domain.repository.product_repository import ProductRepository
from prodcat.infrastructure.cli.console import ClickConsole, Console
from prodcat.infrastructure.cli.line_source import LineSource, StreamLineSource
from prodcat.infrastructure.cli.session import CatalogSession
from prodcat.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)


def product_repository() -> InMemoryProductRepository:
    return InMemoryProductRepository()


def catalog_session(
    *,
    color: bool | None = None,
    clear_screen: bool = True,
    currency: str = "USD",
    product_repo: ProductRepository | None = None,
    line_source: LineSource | None = None,
    console: Console | None = None,
) -> CatalogSession:
    repo = product_repo if product_repo is not None else product_repository()
    return CatalogSession(
        add_product=AddProductHandler(repo, currency=currency),
        list_products=ListProductsHandler(repo, currency=currency),
        search_products=SearchProductsHandler(repo),
        line_source=line_source if line_source is not None else StreamLineSource(),
        console=console if console is not None else ClickConsole(color, clear_screen),
    )
