"""
Money Model

An integer amount in one of the supported currencies.

DESIGN DECISION: Conversion always goes through USD using two fixed tables
(source -> USD, USD -> target). The tables are NOT exact reciprocals, so a
round trip through USD can lose value. This is expected behaviour.

ROUNDING: Converted amounts are rounded half away from zero
(0.5 -> 1, -0.5 -> -1). Every conversion rounds exactly once.
Converting to the currency the amount is already in returns it unchanged.
"""

from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from types import MappingProxyType
from typing import Final, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field

from domain_model.audit import get_logger
from domain_model.errors import UnsupportedCurrencyError


logger = get_logger(__name__)


class Currency(str, Enum):
    """Supported currency codes."""
    USD = "USD"
    EUR = "EUR"
    GBP = "GBP"
    CAN = "CAN"


# =============================================================================
# RATE TABLES - illustrative fixed rates, not market data
# =============================================================================

# 1 unit of the key currency = N USD
TO_USD_RATES: Final[Mapping[Currency, float]] = MappingProxyType({
    Currency.USD: 1.0,
    Currency.GBP: 2.0,
    Currency.EUR: 0.667,
    Currency.CAN: 0.8,
})

# 1 USD = N units of the key currency
FROM_USD_RATES: Final[Mapping[Currency, float]] = MappingProxyType({
    Currency.USD: 1.0,
    Currency.GBP: 0.5,
    Currency.EUR: 1.5,
    Currency.CAN: 1.25,
})


def to_currency(value: Union[Currency, str]) -> Currency:
    """
    Resolve a currency code to a Currency.

    Raises:
        UnsupportedCurrencyError: If the code is not supported
    """
    if isinstance(value, Currency):
        return value
    try:
        return Currency(value)
    except ValueError:
        logger.warning("currency_unsupported", currency=repr(value))
        raise UnsupportedCurrencyError(value) from None


def _round_half_away(value: float) -> int:
    return int(Decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_UP))


class Money(BaseModel):
    """
    Immutable amount + currency.

    Unknown currencies are rejected at construction, so any Money that
    exists can be converted.

    USAGE:
        price = Money(amount=100, currency="EUR")
        in_usd = price.convert("USD")        # 67 USD
        total = price.add(Money(amount=100, currency="USD"))   # 167 USD
    """
    model_config = ConfigDict(frozen=True)

    amount: int = Field(
        ...,
        description="Amount in whole currency units"
    )
    currency: Currency = Field(
        ...,
        description="Currency code"
    )

    def convert(self, target: Union[Currency, str]) -> "Money":
        """
        Convert to another currency via USD.

        Args:
            target: Target currency code

        Returns:
            New Money in the target currency

        Raises:
            UnsupportedCurrencyError: If target is not a supported currency
        """
        target_currency = to_currency(target)
        # EUR rates multiply to 1.0005, so same-currency must skip the tables
        if target_currency == self.currency:
            return Money(amount=self.amount, currency=target_currency)

        usd_amount = self.amount * TO_USD_RATES[self.currency]
        final_amount = usd_amount * FROM_USD_RATES[target_currency]
        return Money(amount=_round_half_away(final_amount), currency=target_currency)

    def add(self, other: "Money") -> "Money":
        """
        Sum in the currency of `other`.

        NOTE: a.add(b) and b.add(a) generally differ, both in currency and
        by conversion rounding.
        """
        left = self.convert(other.currency)
        return Money(amount=left.amount + other.amount, currency=other.currency)

    def extract(self, other: "Money") -> "Money":
        """Subtract `other` from self, in the currency of `other`."""
        left = self.convert(other.currency)
        return Money(amount=left.amount - other.amount, currency=other.currency)

    def __str__(self) -> str:
        return f"{self.amount} {self.currency.value}"
