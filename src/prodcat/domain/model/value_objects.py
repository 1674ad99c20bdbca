"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from prodcat.domain.exceptions import InvalidPriceError, ValidationError

# Plain decimal notation: optional sign, digits, optional fraction.
_DECIMAL_PATTERN = re.compile(r"^[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)$")


def is_valid_price(text: str) -> tuple[bool, Decimal]:
    """Parse *text* as a price.

    Returns ``(True, value)`` when the text is a plain decimal number
    greater than zero, otherwise ``(False, Decimal("0"))``. Parsing does
    not depend on the process locale: the decimal separator is always
    ``"."``.
    """
    candidate = text.strip() if text else ""
    if not _DECIMAL_PATTERN.match(candidate):
        return False, Decimal("0")
    try:
        value = Decimal(candidate)
    except InvalidOperation:
        return False, Decimal("0")
    if value <= 0:
        return False, Decimal("0")
    return True, value


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    Uses Decimal to avoid floating-point rounding errors in totals.
    """

    amount: Decimal
    currency: str = "USD"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __lt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount < other.amount

    @property
    def is_positive(self) -> bool:
        return self.amount > Decimal("0")

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        if self.currency == "USD":
            return f"${self._digits()}"
        return f"{self._digits()} {self.currency}"

    def _digits(self) -> str:
        """At least two decimals, never rounding away sub-cent digits."""
        if self.amount.as_tuple().exponent >= -2:
            return f"{self.amount:.2f}"
        return f"{self.amount:f}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def zero(currency: str = "USD") -> Money:
        return Money(Decimal("0"), currency)

    @staticmethod
    def price(amount: str | Decimal, currency: str = "USD") -> Money:
        """Build a strictly positive price, rejecting anything else."""
        if isinstance(amount, Decimal):
            if not amount.is_finite() or amount <= 0:
                raise InvalidPriceError()
            return Money(amount, currency)
        valid, value = is_valid_price(amount)
        if not valid:
            raise InvalidPriceError()
        return Money(value, currency)
