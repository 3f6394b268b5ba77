"""
Price Reconciler — kwoty z etykiet strony jako Decimal.

Nigdy float: 29.99 + 9.99 na floatach daje 39.980000000000004, a tu
porównujemy z tym co sklep wyrenderował z dokładnością do grosza.
"""

import re
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable

from verification.errors import MismatchError, ParseError

KNOWN_SYMBOLS = ("$", "£", "€")

# Tolerancja zaokrąglenia do dwóch miejsc
TOLERANCE = Decimal("0.01")
CENT = Decimal("0.01")

# Cała kwota: bez dodatkowych cyfr przed i po, ze znakiem żeby odrzucić ujemne
AMOUNT_PATTERN = re.compile(r"(?<![\d.])-?\d+\.\d{2}(?!\d)")


@dataclass(frozen=True)
class LineItem:
    name: str
    unit_price: Decimal

    def __post_init__(self):
        if not self.name:
            raise ValueError("LineItem.name nie może być pusty")
        if self.unit_price < 0:
            raise ValueError(f"Ujemna cena dla {self.name!r}: {self.unit_price}")


@dataclass(frozen=True)
class PriceSummary:
    subtotal: Decimal
    tax: Decimal
    total: Decimal


def parse_currency(text: str | None, symbols: Iterable[str] = KNOWN_SYMBOLS) -> Decimal:
    """
    "$29.99"                 → Decimal('29.99')
    "Item total: $1,029.99"  → Decimal('1029.99')
    "Tax: £2.40"             → Decimal('2.40')
    "29.9" / "" / None       → ParseError
    "$29.999" / "-$5.00"     → ParseError
    """
    if text is None:
        raise ParseError(text, "brak tekstu")

    cleaned = text.strip()
    for symbol in symbols:
        cleaned = cleaned.replace(symbol, "")
    cleaned = cleaned.replace(",", "")

    match = AMOUNT_PATTERN.search(cleaned)
    if not match:
        raise ParseError(text)
    if match.group(0).startswith("-"):
        raise ParseError(text, "ujemna kwota")
    return Decimal(match.group(0))


def currency_symbol(text: str | None, symbols: Iterable[str] = KNOWN_SYMBOLS) -> str | None:
    """Pierwszy znany symbol waluty w etykiecie albo None."""
    if not text:
        return None
    for char in text:
        if char in symbols:
            return char
    return None


def line_item(name: str, price_text: str) -> LineItem:
    return LineItem(name=name.strip(), unit_price=parse_currency(price_text))


def sum_prices(items: Iterable[LineItem]) -> Decimal:
    """Suma cen w kolejności wejścia, zaokrąglenie TYLKO na końcu."""
    total = sum((item.unit_price for item in items), Decimal("0"))
    return total.quantize(CENT, rounding=ROUND_HALF_UP)


def verify_totals(summary: PriceSummary) -> MismatchError | None:
    expected = summary.subtotal + summary.tax
    if abs(summary.total - expected) <= TOLERANCE:
        return None
    return MismatchError(expected=expected, actual=summary.total, label="total")


def verify_subtotal(items: Iterable[LineItem], subtotal: Decimal) -> MismatchError | None:
    expected = sum_prices(items)
    if abs(subtotal - expected) <= TOLERANCE:
        return None
    return MismatchError(expected=expected, actual=subtotal, label="subtotal")
