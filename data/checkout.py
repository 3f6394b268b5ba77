import random
from dataclasses import dataclass


@dataclass(frozen=True)
class CheckoutInfo:
    first_name: str
    last_name: str
    postal_code: str

    @property
    def missing_field(self) -> str | None:
        # Kolejność walidacji formularza w sklepie
        if not self.first_name:
            return 'first_name'
        if not self.last_name:
            return 'last_name'
        if not self.postal_code:
            return 'postal_code'
        return None


VALID = CheckoutInfo("John", "Doe", "SW1A 1AA")
VALID_ALT = CheckoutInfo("Jane", "Smith", "M1 1AE")
UK_POSTCODE_1 = CheckoutInfo("Test", "User", "EC1A 1BB")
UK_POSTCODE_2 = CheckoutInfo("QA", "Engineer", "W1A 0AX")

EMPTY_FIRST_NAME = CheckoutInfo("", "Doe", "SW1A 1AA")
EMPTY_LAST_NAME = CheckoutInfo("John", "", "SW1A 1AA")
EMPTY_POSTAL_CODE = CheckoutInfo("John", "Doe", "")
ALL_EMPTY = CheckoutInfo("", "", "")

PAYMENT_INFO = "SauceCard"
SHIPPING_INFO = "Free Pony Express Delivery!"
CONFIRMATION_HEADER = "Thank you for your order!"

# Wymaganie biznesowe: ceny w funtach. Sklep pokazuje dolary (znana rozbieżność).
REQUIRED_CURRENCY = "£"


def random_checkout_info() -> CheckoutInfo:
    first_names = ['John', 'Jane', 'Bob', 'Alice', 'Charlie', 'Diana']
    last_names = ['Smith', 'Johnson', 'Williams', 'Brown', 'Jones', 'Davis']
    postcodes = ['SW1A 1AA', 'M1 1AE', 'EC1A 1BB', 'W1A 0AX', 'N1 9GU']
    return CheckoutInfo(
        first_name=random.choice(first_names),
        last_name=random.choice(last_names),
        postal_code=random.choice(postcodes),
    )
