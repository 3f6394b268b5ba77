from decimal import Decimal

from data.checkout import REQUIRED_CURRENCY
from data.products import CATALOG
from scenarios.context import ScenarioContext
from scenarios.run_data import RunData
from scenarios.rules_result import AlertResult, RulesResult, BUG, CONFIG, KNOWN_DIVERGENCE
from verification.cart_tracker import EMPTY, CartSnapshot, apply_add, apply_remove
from verification.errors import CartOperationError, DuplicatePolicyError, ParseError
from verification.prices import LineItem, currency_symbol, parse_currency


class BaseRules:
    def __init__(self, context: ScenarioContext):
        self.context = context

    def check(self, run_data: RunData) -> RulesResult:
        raise NotImplementedError

    def alert(
        self,
        business_rule: str,
        description: str = "",
        alert_type: str = BUG,
    ) -> AlertResult:
        return AlertResult(
            business_rule=business_rule,
            description=description,
            alert_type=alert_type,
        )

    def divergence(self, business_rule: str, description: str) -> AlertResult:
        """Znana rozbieżność sklepu z wymaganiami — zapisana, ale nie liczona."""
        return self.alert(business_rule, description, alert_type=KNOWN_DIVERGENCE)

    def ok(
        self,
        alerts: list[AlertResult] = None,
        instructions: dict = None,
    ) -> RulesResult:
        """
        Brak stopu — test kontynuuje.
          - brak alertów:                    return self.ok()
          - alerty ale test idzie dalej:     return self.ok(alerts=alerts)
          - instrukcje dla kolejnego etapu:  return self.ok(instructions={...})
        """
        return RulesResult(
            alerts=alerts or [],
            instructions=instructions or {},
        )

    def stop(
        self,
        alerts: list[AlertResult],
        reason: str,
        expected: bool = True,
        instructions: dict = None,
    ) -> RulesResult:
        """
        Zatrzymaj test — dalsze etapy nie mają sensu.
          expected=True  → scenariusz negatywny doszedł tam gdzie miał (np. błąd logowania)
          expected=False → sklep nie pozwala iść dalej, run oblany
        """
        return RulesResult(
            alerts=alerts,
            should_stop=True,
            stop_reason=reason,
            stop_expected=expected,
            instructions=instructions or {},
        )

    # ── Kwoty ─────────────────────────────────────────────────────────────────

    def parse(self, text: str | None, business_rule: str, alerts: list[AlertResult]) -> Decimal | None:
        """parse_currency, a ParseError zamienia na alert zamiast przerywać regułę."""
        try:
            return parse_currency(text)
        except ParseError as e:
            alerts.append(self.alert(business_rule, str(e)))
            return None

    def check_currency(self, texts: list[str | None], where: str) -> list[AlertResult]:
        symbols = {currency_symbol(t) for t in texts if t}
        symbols.discard(None)
        wrong = sorted(s for s in symbols if s != REQUIRED_CURRENCY)
        if not wrong:
            return []
        return [self.divergence(
            'DIVERGENCE_CURRENCY_SYMBOL',
            f'{where}: ceny w {", ".join(wrong)}, wymaganie {REQUIRED_CURRENCY}',
        )]

    def listing_prices(self, run_data: RunData) -> dict[str, Decimal]:
        prices = {p.name: p.unit_price for p in CATALOG.values()}
        if run_data.listing:
            for row in run_data.listing.products:
                try:
                    prices[row.name] = parse_currency(row.price_text)
                except ParseError:
                    pass  # zgłoszone przez ListingRules, zostaje cena z katalogu
        return prices

    # ── Koszyk ────────────────────────────────────────────────────────────────

    def replay_cart(self, run_data: RunData, include_cart: bool = True) -> tuple[CartSnapshot, list[CartOperationError]]:
        """
        Odtwarza oczekiwany koszyk z akcji wykonanych przez pages.
        Błędy trackera zbieramy, snapshot po błędzie zostaje bez zmian,
        tak samo jak koszyk w sklepie.
        """
        prices = self.listing_prices(run_data)
        actions = list(run_data.listing.actions) if run_data.listing else []
        if include_cart and run_data.cart:
            actions += run_data.cart.actions

        snapshot = EMPTY
        errors = []
        for action in actions:
            try:
                if action.operation == 'add':
                    item = LineItem(action.name, prices.get(action.name, Decimal("0")))
                    snapshot = apply_add(snapshot, item)
                else:
                    snapshot = apply_remove(snapshot, action.name)
            except CartOperationError as e:
                errors.append(e)
        return snapshot, errors

    def tracker_alerts(self, errors: list[CartOperationError]) -> list[AlertResult]:
        alerts = []
        for e in errors:
            if isinstance(e, DuplicatePolicyError):
                alerts.append(self.divergence(
                    'DIVERGENCE_DUPLICATE_ADD',
                    f'Nie można dodać "{e.name}" drugi raz (koszyk: {e.size} poz.)',
                ))
            else:
                alerts.append(self.alert(
                    'SCENARIO_REMOVE_NOT_IN_CART',
                    str(e),
                    alert_type=CONFIG,
                ))
        return alerts

    @staticmethod
    def badge_matches(text: str | None, expected: int) -> bool:
        # Pusty koszyk = brak badge'a. Badge z "0" to też błąd.
        if expected == 0:
            return not text
        return text == str(expected)

    @staticmethod
    def badge_count(text: str | None) -> int | None:
        """Brak badge'a = 0. None gdy badge pokazuje coś co nie jest liczbą."""
        if text is None or text == "":
            return 0
        return int(text) if text.isdigit() else None
