"""
Money Value Type

Immutable integer amount in one of a fixed set of currencies.

DESIGN DECISION: All conversions pivot through USD. The rate table
states how many native units one US dollar buys, so converting
from A to B is `amount / rate[A] * rate[B]`.

Arithmetic is done in Decimal and rounded half away from zero, so
results do not depend on binary floating point.
"""

from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Any, Final, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from household.errors import UnsupportedCurrencyError


# =============================================================================
# CURRENCIES
# =============================================================================

class Currency(str, Enum):
    """Supported currency codes."""
    USD = "USD"
    GBP = "GBP"
    EUR = "EUR"
    CAN = "CAN"


# Native units per USD
USD_RATES: Final[dict[Currency, Decimal]] = {
    Currency.USD: Decimal("1.0"),
    Currency.GBP: Decimal("0.5"),
    Currency.EUR: Decimal("1.5"),
    Currency.CAN: Decimal("1.25"),
}


def parse_currency(value: Any) -> Currency:
    """
    Resolve a currency code to a Currency member.

    Accepts Currency members and case-insensitive code strings.

    Raises:
        UnsupportedCurrencyError: If the code is not supported
    """
    if isinstance(value, Currency):
        return value
    if isinstance(value, str):
        try:
            return Currency(value.strip().upper())
        except ValueError:
            pass
    supported = ", ".join(c.value for c in Currency)
    raise UnsupportedCurrencyError(
        value,
        f"Unsupported currency: {value!r}. Supported: {supported}",
    )


def round_half_up(value: Union[int, float, Decimal]) -> int:
    """
    Round to the nearest integer, halves away from zero.

    Floats go through their shortest repr so 2.5 stays 2.5.
    """
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


# =============================================================================
# MONEY
# =============================================================================

class Money(BaseModel):
    """
    Immutable money value.

    Examples:
        >>> Money(amount=10, currency="USD").convert("GBP")
        Money(amount=5, currency=<Currency.GBP: 'GBP'>)

        >>> str(Money(amount=5, currency="GBP") + Money(amount=10, currency="USD"))
        '20 USD'
    """

    model_config = ConfigDict(frozen=True)

    amount: int = Field(
        ...,
        strict=True,
        description="Whole units of the currency (any sign)"
    )
    currency: Currency = Field(
        ...,
        description="Currency code"
    )

    @field_validator('currency', mode='before')
    @classmethod
    def validate_currency(cls, v: Any) -> Currency:
        """Reject unsupported codes with a domain error."""
        return parse_currency(v)

    def convert(self, to: Union[Currency, str]) -> "Money":
        """
        Convert to another currency, pivoting through USD.

        Raises:
            UnsupportedCurrencyError: If `to` is not supported
        """
        target = parse_currency(to)
        if target == self.currency:
            return Money(amount=self.amount, currency=target)

        usd = Decimal(self.amount) / USD_RATES[self.currency]
        return Money(amount=round_half_up(usd * USD_RATES[target]), currency=target)

    def add(self, other: "Money") -> "Money":
        """Add, converting self into other's currency. Result is in other's currency."""
        converted = self.convert(other.currency)
        return Money(amount=converted.amount + other.amount, currency=other.currency)

    def subtract(self, other: "Money") -> "Money":
        """Subtract other, converting self into other's currency first."""
        converted = self.convert(other.currency)
        return Money(amount=converted.amount - other.amount, currency=other.currency)

    def __add__(self, other: "Money") -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: "Money") -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        return self.subtract(other)

    def __str__(self) -> str:
        return f"{self.amount} {self.currency.value}"
