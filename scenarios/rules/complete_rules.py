from data.checkout import CONFIRMATION_HEADER
from scenarios.run_data import RunData
from scenarios.rules_result import RulesResult
from scenarios.rules.base_rules import BaseRules


# ── Complete — potwierdzenie i wyczyszczony koszyk ───────────────────────────

class CompleteRules(BaseRules):
    def check(self, run_data: RunData) -> RulesResult:
        complete = run_data.complete
        alerts = []

        if not complete.url or 'checkout-complete.html' not in complete.url:
            return self.stop(
                alerts=[self.alert('ORDER_NOT_COMPLETED', f'Brak strony potwierdzenia: {complete.url}')],
                reason='Zamówienie nie złożone',
                expected=False,
            )

        if complete.header != CONFIRMATION_HEADER:
            alerts.append(self.alert(
                'ORDER_CONFIRMATION_HEADER',
                f'Nagłówek "{complete.header}", oczekiwano "{CONFIRMATION_HEADER}"',
            ))
        if not complete.text:
            alerts.append(self.alert('ORDER_CONFIRMATION_TEXT', 'Brak treści potwierdzenia'))

        if not complete.back_home_url or 'inventory.html' not in complete.back_home_url:
            alerts.append(self.alert('ORDER_BACK_HOME', f'Back Home prowadzi do: {complete.back_home_url}'))

        # Po zamówieniu koszyk pusty: brak badge'a, nie "0"
        if complete.badge_text is not None:
            alerts.append(self.alert(
                'ORDER_CART_NOT_CLEARED',
                f'Badge "{complete.badge_text}" po złożeniu zamówienia',
            ))

        return self.ok(alerts=alerts)
