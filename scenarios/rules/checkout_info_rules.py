from data.users import ERROR_MESSAGES
from scenarios.run_data import RunData
from scenarios.rules_result import RulesResult, TO_VERIFY
from scenarios.rules.base_rules import BaseRules


# ── Checkout krok 1 — dane klienta ────────────────────────────────────────────

class CheckoutInfoRules(BaseRules):
    def check(self, run_data: RunData) -> RulesResult:
        step = run_data.checkout_info
        alerts = []

        if step.title != 'Checkout: Your Information':
            alerts.append(self.alert(
                'CHECKOUT_INFO_TITLE',
                f'Tytuł strony "{step.title}"',
                alert_type=TO_VERIFY,
            ))

        if step.cancelled:
            if not step.url or 'cart.html' not in step.url:
                alerts.append(self.alert('CHECKOUT_INFO_CANCEL', f'Cancel nie wrócił do koszyka: {step.url}'))
            return self.stop(alerts=alerts, reason='Anulowano checkout na danych klienta')

        missing = self.context.checkout.missing_field
        if missing:
            expected = ERROR_MESSAGES[f'{missing}_required']
            if step.error_message is None:
                return self.stop(
                    alerts=alerts + [self.alert(
                        'CHECKOUT_INFO_NOT_VALIDATED',
                        f'Formularz przyjęty bez pola {missing}',
                    )],
                    reason='Brak walidacji formularza',
                    expected=False,
                )
            if expected not in step.error_message:
                alerts.append(self.alert(
                    'CHECKOUT_INFO_ERROR_MESSAGE',
                    f'Komunikat: oczekiwano "{expected}", jest "{step.error_message}"',
                    alert_type=TO_VERIFY,
                ))
            return self.stop(alerts=alerts, reason=f'Oczekiwany błąd walidacji: {missing}')

        if step.error_message:
            return self.stop(
                alerts=alerts + [self.alert('CHECKOUT_INFO_REJECTED', step.error_message)],
                reason='Poprawne dane odrzucone',
                expected=False,
            )

        return self.ok(alerts=alerts)
