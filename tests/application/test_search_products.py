"""Integration tests for the SearchProducts use case."""

import pytest

from prodcat.application.add_product import AddProductHandler
from prodcat.application.search_products import SearchProductsHandler
from prodcat.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)


@pytest.fixture
def repo():
    repo = InMemoryProductRepository()
    add = AddProductHandler(repo)
    add.handle("Electronics", "Laptop", "1200")
    add.handle("Electronics", "Phone", "900")
    add.handle("Accessories", "Mouse", "50")
    return repo


class TestSearchProducts:

    @pytest.mark.parametrize("term", ["phone", "Phone", "PHONE", "  pHoNe "])
    def test_exact_match_ignoring_case(self, repo, term):
        matches = SearchProductsHandler(repo).handle(term)
        assert [m.name for m in matches] == ["Phone"]

    def test_no_match_returns_empty(self, repo):
        assert SearchProductsHandler(repo).handle("Tablet") == []

    def test_partial_name_is_not_a_match(self, repo):
        assert SearchProductsHandler(repo).handle("Lap") == []

    def test_multiple_matches_keep_insertion_order(self, repo):
        AddProductHandler(repo).handle("Refurbished", "phone", "400")
        matches = SearchProductsHandler(repo).handle("PHONE")
        assert [(m.category, m.price) for m in matches] == [
            ("Electronics", "$900.00"),
            ("Refurbished", "$400.00"),
        ]
