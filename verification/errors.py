"""
Błędy weryfikacji — wszystkie dziedziczą po VerificationError.

Funkcje verify_* ZWRACAJĄ błąd (albo None), parsowanie i tracker koszyka
RZUCAJĄ. Rules łapią VerificationError i zamieniają go na alert —
pojedyncza nieudana weryfikacja nigdy nie przerywa scenariusza.
"""

from decimal import Decimal
from typing import Any


class VerificationError(Exception):
    """Baza dla wszystkich błędów weryfikacji."""


class ParseError(VerificationError):
    def __init__(self, raw: str | None, reason: str = "brak wzorca \\d+\\.\\d{2}"):
        self.raw = raw
        self.reason = reason
        super().__init__(f"Nie można sparsować kwoty {raw!r}: {reason}")


class MismatchError(VerificationError):
    """Oczekiwana kwota różni się od wyświetlonej. delta = actual - expected."""

    def __init__(self, expected: Decimal, actual: Decimal, label: str = "total"):
        self.expected = expected
        self.actual = actual
        self.delta = actual - expected
        self.label = label
        super().__init__(
            f"{label}: oczekiwano {expected}, jest {actual} (delta {self.delta:+})"
        )


class OrderMismatchError(VerificationError):
    def __init__(self, index: int, expected: Any, actual: Any, key: Any = None):
        self.index = index
        self.expected = expected
        self.actual = actual
        self.key = key
        super().__init__(
            f"Kolejność {getattr(key, 'name', key)}: pozycja {index} — "
            f"oczekiwano {expected!r}, jest {actual!r}"
        )


class CartOperationError(VerificationError):
    """Naruszony warunek wstępny operacji na snapshocie koszyka."""

    def __init__(self, operation: str, name: str, size: int, message: str):
        self.operation = operation
        self.name = name
        self.size = size
        super().__init__(f"{operation}({name!r}) przy {size} pozycjach: {message}")


class DuplicatePolicyError(CartOperationError):
    def __init__(self, operation: str, name: str, size: int):
        super().__init__(operation, name, size, "sklep nie pozwala dodać tego samego produktu drugi raz")


class NotFoundError(CartOperationError):
    def __init__(self, operation: str, name: str, size: int):
        super().__init__(operation, name, size, "brak produktu w koszyku")
