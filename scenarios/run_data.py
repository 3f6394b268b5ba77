"""
Surowe dane zebrane przez pages — same teksty ze strony.
Parsowanie kwot i ocena poprawności należą do rules.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class LoginData:
    username: str
    logged_in: bool = False
    error_message: Optional[str] = None
    url: Optional[str] = None
    # Komunikat błędu zniknął po kliknięciu X. None = nie sprawdzano
    error_closed: Optional[bool] = None
    # Chronione strony otwierane przed logowaniem: ścieżka → URL po przekierowaniu
    protected_urls: dict[str, str] = field(default_factory=dict)


@dataclass
class ProductRow:
    name: str
    price_text: str
    description: str = ""
    image_src: Optional[str] = None


@dataclass
class CartAction:
    operation: str          # 'add' / 'remove'
    name: str
    clicked: bool = True    # False gdy przycisku nie było na kafelku


@dataclass
class ListingData:
    title: Optional[str] = None
    products: list[ProductRow] = field(default_factory=list)
    sort_option: Optional[str] = None
    actions: list[CartAction] = field(default_factory=list)
    badge_text: Optional[str] = None
    cart_icon_box: Optional[dict] = None     # {'x', 'y', 'width', 'height'}
    viewport_width: Optional[int] = None
    # Badge po ponownym sortowaniu: [(opcja, tekst badge'a)]
    badges_after_sort: list[tuple[str, Optional[str]]] = field(default_factory=list)


@dataclass
class CartItemRow:
    name: str
    price_text: str
    quantity_text: Optional[str] = None
    description: str = ""


@dataclass
class CartData:
    title: Optional[str] = None
    url: Optional[str] = None
    items: list[CartItemRow] = field(default_factory=list)
    actions: list[CartAction] = field(default_factory=list)
    items_after: list[CartItemRow] = field(default_factory=list)
    badge_text: Optional[str] = None
    total_text: Optional[str] = None
    checkout_enabled: bool = False
    # Continue Shopping: dokąd prowadzi i badge na listingu
    continue_url: Optional[str] = None
    badge_after_continue: Optional[str] = None


@dataclass
class CheckoutInfoData:
    title: Optional[str] = None
    error_message: Optional[str] = None
    cancelled: bool = False
    url: Optional[str] = None


@dataclass
class OverviewData:
    title: Optional[str] = None
    items: list[CartItemRow] = field(default_factory=list)
    payment_info: Optional[str] = None
    shipping_info: Optional[str] = None
    subtotal_text: Optional[str] = None
    tax_text: Optional[str] = None
    total_text: Optional[str] = None
    cancelled: bool = False
    url: Optional[str] = None


@dataclass
class CompleteData:
    header: Optional[str] = None
    text: Optional[str] = None
    url: Optional[str] = None
    back_home_url: Optional[str] = None
    badge_text: Optional[str] = None


@dataclass
class RunData:
    login:         Optional[LoginData]        = None
    listing:       Optional[ListingData]      = None
    cart:          Optional[CartData]         = None
    checkout_info: Optional[CheckoutInfoData] = None
    overview:      Optional[OverviewData]     = None
    complete:      Optional[CompleteData]     = None
