from data.checkout import PAYMENT_INFO, SHIPPING_INFO
from scenarios.run_data import RunData
from scenarios.rules_result import RulesResult, TO_VERIFY
from scenarios.rules.base_rules import BaseRules
from verification.prices import LineItem, PriceSummary, verify_subtotal, verify_totals


# ── Overview — podsumowanie zamówienia ────────────────────────────────────────

class OverviewRules(BaseRules):
    def check(self, run_data: RunData) -> RulesResult:
        overview = run_data.overview
        alerts = []

        if overview.title != 'Checkout: Overview':
            alerts.append(self.alert(
                'OVERVIEW_TITLE',
                f'Tytuł strony "{overview.title}"',
                alert_type=TO_VERIFY,
            ))

        # Pozycje w podsumowaniu = pozycje w koszyku po usunięciach
        cart_names = [i.name for i in run_data.cart.items_after] if run_data.cart else []
        shown = [i.name for i in overview.items]
        if shown != cart_names:
            alerts.append(self.alert(
                'OVERVIEW_ITEMS_MISMATCH',
                f'Koszyk: {cart_names} | Podsumowanie: {shown}',
            ))

        if not overview.payment_info or not overview.payment_info.startswith(PAYMENT_INFO):
            alerts.append(self.alert(
                'OVERVIEW_PAYMENT_INFO',
                f'Płatność "{overview.payment_info}", oczekiwano "{PAYMENT_INFO}"',
                alert_type=TO_VERIFY,
            ))
        if overview.shipping_info != SHIPPING_INFO:
            alerts.append(self.alert(
                'OVERVIEW_SHIPPING_INFO',
                f'Dostawa "{overview.shipping_info}", oczekiwano "{SHIPPING_INFO}"',
                alert_type=TO_VERIFY,
            ))

        subtotal = self.parse(overview.subtotal_text, 'OVERVIEW_SUBTOTAL_UNPARSEABLE', alerts)
        tax = self.parse(overview.tax_text, 'OVERVIEW_TAX_UNPARSEABLE', alerts)
        total = self.parse(overview.total_text, 'OVERVIEW_TOTAL_UNPARSEABLE', alerts)

        if None not in (subtotal, tax, total):
            error = verify_totals(PriceSummary(subtotal=subtotal, tax=tax, total=total))
            if error:
                alerts.append(self.alert(
                    'OVERVIEW_TOTAL_MISMATCH',
                    f'subtotal {subtotal} + tax {tax} != total {total} (delta {error.delta:+})',
                ))
            if overview.items and tax <= 0:
                alerts.append(self.alert('OVERVIEW_TAX_MISSING', f'Podatek {tax} przy niepustym koszyku'))

        if subtotal is not None:
            items = []
            for row in overview.items:
                price = self.parse(row.price_text, 'OVERVIEW_PRICE_UNPARSEABLE', alerts)
                if price is None:
                    break
                items.append(LineItem(row.name or '?', price))
            else:
                error = verify_subtotal(items, subtotal)
                if error:
                    alerts.append(self.alert('OVERVIEW_SUBTOTAL_MISMATCH', str(error)))

        alerts.extend(self.check_currency(
            [overview.subtotal_text, overview.tax_text, overview.total_text],
            'Podsumowanie',
        ))

        if overview.cancelled:
            if not overview.url or 'inventory.html' not in overview.url:
                alerts.append(self.alert('OVERVIEW_CANCEL', f'Cancel nie wrócił do listingu: {overview.url}'))
            return self.stop(alerts=alerts, reason='Anulowano checkout na podsumowaniu')

        return self.ok(alerts=alerts)
