"""
Order Verifier — czy lista na stronie jest posortowana tak jak obiecuje
wybrana opcja sortowania.
"""

import enum
from typing import Any, Callable, Sequence, TypeVar

from verification.errors import OrderMismatchError

T = TypeVar("T")


class SortKey(enum.Enum):
    # (wartość <option> w selekcie Sauce Demo, malejąco?)
    NAME_ASC = ("az", False)
    NAME_DESC = ("za", True)
    PRICE_ASC = ("lohi", False)
    PRICE_DESC = ("hilo", True)

    def __init__(self, option: str, descending: bool):
        self.option = option
        self.descending = descending

    @property
    def by_price(self) -> bool:
        return self in (SortKey.PRICE_ASC, SortKey.PRICE_DESC)

    @classmethod
    def from_option(cls, option: str) -> "SortKey":
        for key in cls:
            if key.option == option:
                return key
        raise ValueError(f"Nieznana opcja sortowania: {option!r}")


def expected_order(items: Sequence[T], key: SortKey, extract: Callable[[T], Any]) -> list[T]:
    """
    Stabilne sortowanie kopii. sorted() z reverse=True też zachowuje kolejność
    wejścia dla remisów: nazwy i ceny produktów nie muszą być unikalne.
    """
    return sorted(items, key=extract, reverse=key.descending)


def verify_order(
    displayed: Sequence[T],
    items: Sequence[T],
    key: SortKey,
    extract: Callable[[T], Any],
) -> OrderMismatchError | None:
    expected = expected_order(items, key, extract)

    for index, (want, got) in enumerate(zip(expected, displayed)):
        if want != got:
            return OrderMismatchError(index=index, expected=want, actual=got, key=key)

    if len(expected) != len(displayed):
        index = min(len(expected), len(displayed))
        want = expected[index] if index < len(expected) else None
        got = displayed[index] if index < len(displayed) else None
        return OrderMismatchError(index=index, expected=want, actual=got, key=key)

    return None
