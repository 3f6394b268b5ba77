"""
Katalog Sauce Demo — ceny wg strony w dniu przygotowania danych.
Jeśli sklep zmieni cennik, GlobalRules zgłosi CATALOG_PRICE_CHANGED.
"""

from decimal import Decimal

from verification.prices import LineItem

BACKPACK = LineItem("Sauce Labs Backpack", Decimal("29.99"))
BIKE_LIGHT = LineItem("Sauce Labs Bike Light", Decimal("9.99"))
BOLT_TSHIRT = LineItem("Sauce Labs Bolt T-Shirt", Decimal("15.99"))
FLEECE_JACKET = LineItem("Sauce Labs Fleece Jacket", Decimal("49.99"))
ONESIE = LineItem("Sauce Labs Onesie", Decimal("7.99"))
TSHIRT_RED = LineItem("Test.allTheThings() T-Shirt (Red)", Decimal("15.99"))

PRODUCTS = [BACKPACK, BIKE_LIGHT, BOLT_TSHIRT, FLEECE_JACKET, ONESIE, TSHIRT_RED]
PRODUCT_NAMES = [p.name for p in PRODUCTS]
CATALOG = {p.name: p for p in PRODUCTS}

EXPECTED_PRODUCT_COUNT = len(PRODUCTS)
