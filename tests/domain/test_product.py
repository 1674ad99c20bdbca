"""Unit tests for the Product entity."""

import dataclasses
from decimal import Decimal

import pytest

from prodcat.domain.exceptions import InvalidPriceError, ValidationError
from prodcat.domain.model.product import Product
from prodcat.domain.model.value_objects import Money


class TestProductCreation:

    def test_happy_path(self):
        p = Product(category="Electronics", name="Laptop", price=Money.price("1200"))
        assert p.category == "Electronics"
        assert p.name == "Laptop"
        assert p.price.amount == Decimal("1200")

    def test_text_is_trimmed(self):
        p = Product(category="  Books ", name=" Dune  ", price=Money.price("9.99"))
        assert p.category == "Books"
        assert p.name == "Dune"

    @pytest.mark.parametrize("category", ["", "   "])
    def test_blank_category_rejected(self, category):
        with pytest.raises(ValidationError, match="category is required"):
            Product(category=category, name="Dune", price=Money.price("9.99"))

    @pytest.mark.parametrize("name", ["", "\t"])
    def test_blank_name_rejected(self, name):
        with pytest.raises(ValidationError, match="name is required"):
            Product(category="Books", name=name, price=Money.price("9.99"))

    def test_zero_price_rejected(self):
        with pytest.raises(InvalidPriceError, match="greater than zero"):
            Product(category="Books", name="Dune", price=Money.zero())

    def test_products_are_immutable(self):
        p = Product(category="Books", name="Dune", price=Money.price("9.99"))
        with pytest.raises(dataclasses.FrozenInstanceError):
            p.name = "Emma"  # type: ignore[misc]


class TestProductNameMatching:

    def test_match_ignores_case(self):
        p = Product(category="Electronics", name="Phone", price=Money.price("900"))
        assert p.matches_name("phone")
        assert p.matches_name("PHONE")

    def test_match_ignores_surrounding_whitespace_of_term(self):
        p = Product(category="Electronics", name="Phone", price=Money.price("900"))
        assert p.matches_name("  phone ")

    def test_partial_name_does_not_match(self):
        p = Product(category="Electronics", name="Phone", price=Money.price("900"))
        assert not p.matches_name("Pho")
        assert not p.matches_name("Phones")
