"""
Cart State Tracker — lustro koszyka w pamięci.

Snapshot jest krotką: każda operacja zwraca NOWY snapshot, stary zostaje
bez zmian. Służy tylko do przewidzenia licznika na ikonie koszyka i sumy,
które potem porównujemy z tym co pokazuje strona.
"""

from decimal import Decimal

from verification.errors import DuplicatePolicyError, NotFoundError
from verification.prices import LineItem, sum_prices

CartSnapshot = tuple[LineItem, ...]

EMPTY: CartSnapshot = ()


def contains(snapshot: CartSnapshot, name: str) -> bool:
    return any(item.name == name for item in snapshot)


def apply_add(snapshot: CartSnapshot, item: LineItem, allow_duplicates: bool = False) -> CartSnapshot:
    # Sauce Demo nie pozwala dodać tego samego produktu drugi raz
    if not allow_duplicates and contains(snapshot, item.name):
        raise DuplicatePolicyError("add", item.name, len(snapshot))
    return snapshot + (item,)


def apply_remove(snapshot: CartSnapshot, name: str) -> CartSnapshot:
    for index, item in enumerate(snapshot):
        if item.name == name:
            return snapshot[:index] + snapshot[index + 1:]
    raise NotFoundError("remove", name, len(snapshot))


def expected_badge_count(snapshot: CartSnapshot) -> int:
    """0 oznacza "brak badge'a", a nie badge z zerem."""
    return len(snapshot)


def badge_visible(snapshot: CartSnapshot) -> bool:
    return expected_badge_count(snapshot) > 0


def snapshot_total(snapshot: CartSnapshot) -> Decimal:
    return sum_prices(snapshot)


def names(snapshot: CartSnapshot) -> list[str]:
    return [item.name for item in snapshot]
