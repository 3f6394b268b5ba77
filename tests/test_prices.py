import itertools
from decimal import Decimal

import pytest

from verification.errors import MismatchError, ParseError
from verification.prices import (
    LineItem,
    PriceSummary,
    currency_symbol,
    line_item,
    parse_currency,
    sum_prices,
    verify_subtotal,
    verify_totals,
)


class TestParseCurrency:
    @pytest.mark.parametrize("text, expected", [
        ("$29.99", Decimal("29.99")),
        ("£7.99", Decimal("7.99")),
        ("€1,029.50", Decimal("1029.50")),
        ("Item total: $39.98", Decimal("39.98")),
        ("Tax: $3.20", Decimal("3.20")),
        ("  $0.00 ", Decimal("0.00")),
    ])
    def test_parses_amount(self, text, expected):
        assert parse_currency(text) == expected

    @pytest.mark.parametrize("text", ["", "$29", "29.9", "Total:", "free"])
    def test_rejects_text_without_two_decimal_amount(self, text):
        with pytest.raises(ParseError) as exc:
            parse_currency(text)
        assert exc.value.raw == text

    def test_extra_digit_not_truncated(self):
        with pytest.raises(ParseError):
            parse_currency("$29.999")

    @pytest.mark.parametrize("text", ["-$5.00", "Total: -$5.00", "£-5.00"])
    def test_negative_amount_rejected(self, text):
        with pytest.raises(ParseError) as exc:
            parse_currency(text)
        assert exc.value.reason == "ujemna kwota"

    def test_none_is_parse_error(self):
        with pytest.raises(ParseError):
            parse_currency(None)

    def test_result_is_exact_decimal(self):
        assert isinstance(parse_currency("$15.99"), Decimal)


class TestCurrencySymbol:
    def test_finds_symbol_after_label(self):
        assert currency_symbol("Total: $32.39") == "$"

    def test_pound(self):
        assert currency_symbol("£9.99") == "£"

    def test_no_symbol(self):
        assert currency_symbol("9.99") is None
        assert currency_symbol(None) is None


class TestLineItem:
    def test_from_page_text(self):
        item = line_item(" Sauce Labs Backpack ", "$29.99")
        assert item == LineItem("Sauce Labs Backpack", Decimal("29.99"))

    def test_empty_name_rejected(self):
        with pytest.raises(ValueError):
            LineItem("", Decimal("1.00"))

    def test_negative_price_rejected(self):
        with pytest.raises(ValueError):
            LineItem("x", Decimal("-0.01"))


class TestSumPrices:
    ITEMS = [
        LineItem("Sauce Labs Backpack", Decimal("29.99")),
        LineItem("Sauce Labs Bike Light", Decimal("9.99")),
        LineItem("Sauce Labs Onesie", Decimal("7.99")),
    ]

    def test_sum(self):
        assert sum_prices(self.ITEMS) == Decimal("47.97")

    def test_empty_is_zero(self):
        assert sum_prices([]) == Decimal("0.00")

    def test_invariant_under_permutation(self):
        results = {sum_prices(p) for p in itertools.permutations(self.ITEMS)}
        assert results == {Decimal("47.97")}

    def test_rounds_only_at_the_end(self):
        # Zaokrąglenie per składnik dałoby 0.03, suma dokładna 0.015 → 0.02
        items = [LineItem("a", Decimal("0.005")), LineItem("b", Decimal("0.005")), LineItem("c", Decimal("0.005"))]
        assert sum_prices(items) == Decimal("0.02")


class TestVerifyTotals:
    def test_passes_when_total_matches(self):
        summary = PriceSummary(Decimal("24.98"), Decimal("2.00"), Decimal("26.98"))
        assert verify_totals(summary) is None

    def test_fails_with_signed_delta(self):
        summary = PriceSummary(Decimal("24.98"), Decimal("2.00"), Decimal("27.00"))
        error = verify_totals(summary)
        assert isinstance(error, MismatchError)
        assert error.delta == Decimal("0.02")
        assert error.expected == Decimal("26.98")
        assert error.actual == Decimal("27.00")

    def test_negative_delta(self):
        summary = PriceSummary(Decimal("24.98"), Decimal("2.00"), Decimal("26.90"))
        assert verify_totals(summary).delta == Decimal("-0.08")

    def test_one_cent_is_within_tolerance(self):
        summary = PriceSummary(Decimal("24.98"), Decimal("2.00"), Decimal("26.99"))
        assert verify_totals(summary) is None


class TestVerifySubtotal:
    def test_matches_item_sum(self):
        items = [LineItem("a", Decimal("29.99")), LineItem("b", Decimal("9.99"))]
        assert verify_subtotal(items, Decimal("39.98")) is None

    def test_reports_mismatch(self):
        items = [LineItem("a", Decimal("29.99"))]
        error = verify_subtotal(items, Decimal("39.98"))
        assert error.label == "subtotal"
        assert error.delta == Decimal("9.99")
