from verification.errors import (
    VerificationError, ParseError, MismatchError, OrderMismatchError,
    CartOperationError, DuplicatePolicyError, NotFoundError,
)
from verification.prices import (
    LineItem, PriceSummary, parse_currency, currency_symbol, line_item,
    sum_prices, verify_totals, verify_subtotal,
)
from verification.ordering import SortKey, expected_order, verify_order
from verification.cart_tracker import (
    CartSnapshot, EMPTY, apply_add, apply_remove,
    expected_badge_count, badge_visible, snapshot_total,
)
