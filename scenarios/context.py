from dataclasses import dataclass, field
from typing import Optional

from data import users
from data.checkout import CheckoutInfo
from verification.ordering import SortKey


@dataclass
class ScenarioContext:
    # Identyfikacja
    scenario_name: str
    base_url: str

    # Logowanie
    username: str = users.STANDARD.username
    password: str = users.STANDARD.password

    # Listing — akcje wykonywane w tej kolejności
    sort_key: Optional[SortKey] = None
    add_products: list[str] = field(default_factory=list)
    remove_on_listing: list[str] = field(default_factory=list)
    # Sortowania po dodaniu produktów, badge musi zostać ten sam
    resort_keys: list[SortKey] = field(default_factory=list)

    # Koszyk
    remove_in_cart: list[str] = field(default_factory=list)

    # Checkout — None = nie przechodzimy dalej niż koszyk
    checkout: Optional[CheckoutInfo] = None

    # Flagi — {name: is_enabled}
    flags: dict[str, bool] = field(default_factory=dict)

    def flag(self, name: str, default: bool = False) -> bool:
        return self.flags.get(name, default)

    def url(self, path: str = "/") -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    @property
    def expected_login_error(self) -> str | None:
        return users.expected_login_error(self.username, self.password)

    @property
    def goes_to_checkout(self) -> bool:
        return self.checkout is not None

    @classmethod
    def from_dict(cls, name: str, data: dict, base_url: str) -> "ScenarioContext":
        """Buduje kontekst z wpisu katalogu scenariuszy."""
        user = data.get('user', users.STANDARD)
        sort = data.get('sort')
        if isinstance(sort, str):
            sort = SortKey.from_option(sort)
        resort = [
            SortKey.from_option(k) if isinstance(k, str) else k
            for k in data.get('resort', [])
        ]

        return cls(
            scenario_name=name,
            base_url=base_url.rstrip('/'),
            username=user.username,
            password=user.password,
            sort_key=sort,
            add_products=list(data.get('add', [])),
            remove_on_listing=list(data.get('remove_on_listing', [])),
            resort_keys=resort,
            remove_in_cart=list(data.get('remove_in_cart', [])),
            checkout=data.get('checkout'),
            flags=dict(data.get('flags', {})),
        )
