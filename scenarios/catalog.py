"""
Katalog scenariuszy — zwykłe dane, z których powstaje ScenarioContext.

Klucze wpisu:
  user               — data.users.User (domyślnie standard_user)
  sort               — SortKey albo wartość opcji ('az', 'za', 'lohi', 'hilo')
  add                — nazwy produktów do dodania na listingu, w tej kolejności
  remove_on_listing  — nazwy do usunięcia przyciskiem Remove na listingu
  resort             — sortowania po dodaniu produktów (badge ma się nie zmienić)
  remove_in_cart     — nazwy do usunięcia w koszyku
  checkout           — data.checkout.CheckoutInfo; brak = koniec na koszyku
  flags              — stop_at_cart, stop_at_overview, cancel_at_info, cancel_at_overview,
                       continue_shopping, check_protected_pages
"""

from data import checkout, users
from data.products import BACKPACK, BIKE_LIGHT, BOLT_TSHIRT, FLEECE_JACKET, ONESIE, PRODUCT_NAMES, TSHIRT_RED
from scenarios.context import ScenarioContext
from verification.ordering import SortKey

SCENARIOS: dict[str, dict] = {
    # ── Pełne zakupy ──────────────────────────────────────────────────────────
    'purchase_single_item': {
        'add': [BACKPACK.name],
        'checkout': checkout.VALID,
    },
    'purchase_multiple_items': {
        'add': [BACKPACK.name, BIKE_LIGHT.name, BOLT_TSHIRT.name],
        'checkout': checkout.VALID_ALT,
    },
    'modify_cart_then_checkout': {
        'add': [BACKPACK.name, BIKE_LIGHT.name, ONESIE.name],
        'remove_in_cart': [BIKE_LIGHT.name],
        'checkout': checkout.UK_POSTCODE_1,
    },
    'add_all_products': {
        'add': list(PRODUCT_NAMES),
        'checkout': checkout.UK_POSTCODE_2,
    },
    'purchase_random_customer': {
        'add': [TSHIRT_RED.name],
        'checkout': checkout.random_checkout_info(),
    },

    # ── Sortowanie ────────────────────────────────────────────────────────────
    'sort_name_desc_then_purchase': {
        'sort': SortKey.NAME_DESC,
        'add': [FLEECE_JACKET.name],
        'checkout': checkout.VALID,
    },
    'sort_price_asc_then_purchase': {
        'sort': SortKey.PRICE_ASC,
        'add': [ONESIE.name],
        'checkout': checkout.VALID,
    },
    'sort_price_desc': {
        'sort': SortKey.PRICE_DESC,
        'add': [FLEECE_JACKET.name, BACKPACK.name],
        'flags': {'stop_at_cart': True},
    },
    'sort_name_asc': {
        'sort': SortKey.NAME_ASC,
    },
    'cart_persists_across_sorting': {
        'add': [BACKPACK.name, BIKE_LIGHT.name],
        'resort': [SortKey.NAME_DESC, SortKey.PRICE_ASC],
        'flags': {'stop_at_cart': True},
    },

    # ── Koszyk ────────────────────────────────────────────────────────────────
    'add_remove_on_listing': {
        'add': [BACKPACK.name, BIKE_LIGHT.name],
        'remove_on_listing': [BACKPACK.name],
    },
    'cart_continue_shopping': {
        'add': [BACKPACK.name, ONESIE.name],
        'checkout': checkout.VALID,
        'flags': {'continue_shopping': True},
    },
    'add_same_product_twice': {
        'add': [BACKPACK.name, BACKPACK.name],
    },
    'empty_cart_checkout': {
        'checkout': checkout.VALID,
        'flags': {'stop_at_overview': True},
    },

    # ── Logowanie ─────────────────────────────────────────────────────────────
    'login_required_for_protected_pages': {
        'flags': {'check_protected_pages': True},
    },
    'login_locked_out': {'user': users.LOCKED_OUT},
    'login_invalid_credentials': {'user': users.INVALID},
    'login_empty_username': {'user': users.User('', users.VALID_PASSWORD)},
    'login_empty_password': {'user': users.User(users.STANDARD.username, '')},
    'login_performance_glitch': {
        'user': users.PERFORMANCE_GLITCH,
        'add': [BIKE_LIGHT.name],
        'flags': {'stop_at_cart': True},
    },
    'login_problem_user': {
        'user': users.PROBLEM,
        'add': [BACKPACK.name, ONESIE.name],
        'flags': {'stop_at_cart': True},
    },
    'login_error_user': {
        'user': users.ERROR,
        'add': [BACKPACK.name],
        'checkout': checkout.VALID,
    },

    # ── Checkout ──────────────────────────────────────────────────────────────
    'checkout_missing_first_name': {'add': [BACKPACK.name], 'checkout': checkout.EMPTY_FIRST_NAME},
    'checkout_missing_last_name': {'add': [BACKPACK.name], 'checkout': checkout.EMPTY_LAST_NAME},
    'checkout_missing_postal_code': {'add': [BACKPACK.name], 'checkout': checkout.EMPTY_POSTAL_CODE},
    'checkout_cancel_at_info': {
        'add': [BACKPACK.name],
        'checkout': checkout.VALID,
        'flags': {'cancel_at_info': True},
    },
    'checkout_cancel_at_overview': {
        'add': [BACKPACK.name],
        'checkout': checkout.VALID,
        'flags': {'cancel_at_overview': True},
    },
}


def names() -> list[str]:
    return list(SCENARIOS)


def build_context(name: str, base_url: str) -> ScenarioContext:
    if name not in SCENARIOS:
        raise KeyError(f"Nieznany scenariusz: {name}")
    return ScenarioContext.from_dict(name, SCENARIOS[name], base_url)


def build_contexts(selected: list[str] | None, base_url: str) -> list[ScenarioContext]:
    return [build_context(name, base_url) for name in (selected or names())]
