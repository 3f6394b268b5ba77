from data.products import CATALOG
from scenarios.run_data import RunData
from scenarios.rules_result import RulesResult, TO_VERIFY
from scenarios.rules.base_rules import BaseRules
from verification.errors import ParseError
from verification.prices import parse_currency


# ── Global — dane ze wszystkich etapów ───────────────────────────────────────

class GlobalRules(BaseRules):
    def check(self, run_data: RunData) -> RulesResult:
        alerts = []
        listing_prices = self.listing_prices(run_data)

        # Cennik na listingu vs dane katalogu
        if run_data.listing:
            for row in run_data.listing.products:
                known = CATALOG.get(row.name)
                price = self._price(row.price_text)
                if known and price is not None and price != known.unit_price:
                    alerts.append(self.alert(
                        'CATALOG_PRICE_CHANGED',
                        f'{row.name}: katalog {known.unit_price} → listing {price}',
                        alert_type=TO_VERIFY,
                    ))

        # Cena produktu na listingu vs w koszyku i w podsumowaniu
        for stage, rows in (
            ('koszyk', run_data.cart.items if run_data.cart else []),
            ('podsumowanie', run_data.overview.items if run_data.overview else []),
        ):
            for row in rows:
                price = self._price(row.price_text)
                listed = listing_prices.get(row.name)
                if price is not None and listed is not None and price != listed:
                    alerts.append(self.alert(
                        'GLOBAL_PRICE_CHANGED',
                        f'{row.name}: listing {listed} → {stage} {price}',
                    ))

        return self.ok(alerts=alerts)

    @staticmethod
    def _price(text):
        try:
            return parse_currency(text)
        except ParseError:
            return None   # zgłoszone przez regułę etapu
