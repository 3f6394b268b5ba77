from scenarios.run_data import RunData
from scenarios.rules_result import RulesResult, TO_VERIFY
from scenarios.rules.base_rules import BaseRules
from verification.cart_tracker import expected_badge_count, names
from verification.prices import LineItem, sum_prices, verify_subtotal


# ── Cart — zawartość koszyka vs to co dodaliśmy na listingu ──────────────────

class CartRules(BaseRules):
    def check(self, run_data: RunData) -> RulesResult:
        cart = run_data.cart
        alerts = []

        if cart.title != 'Your Cart':
            alerts.append(self.alert(
                'CART_TITLE',
                f'Tytuł strony "{cart.title}" zamiast "Your Cart"',
                alert_type=TO_VERIFY,
            ))

        # Przed usunięciami w koszyku: stan po listingu
        before, listing_errors = self.replay_cart(run_data, include_cart=False)
        alerts.extend(self._compare_items('CART_ITEMS_MISMATCH', names(before), cart.items))

        for item in cart.items:
            if item.quantity_text != '1':
                alerts.append(self.alert(
                    'CART_QUANTITY',
                    f'{item.name}: ilość "{item.quantity_text}", oczekiwano "1"',
                ))

        items = self._line_items(cart.items, alerts)
        if items is not None:
            error = verify_subtotal(before, sum_prices(items))
            if error:
                alerts.append(self.alert('CART_SUM_MISMATCH', f'Suma cen w koszyku vs listing — {error}'))

        alerts.extend(self._check_total_label(cart, items, alerts))
        alerts.extend(self.check_currency([i.price_text for i in cart.items], 'Koszyk'))

        # Po usunięciach w koszyku
        after, all_errors = self.replay_cart(run_data, include_cart=True)
        alerts.extend(self.tracker_alerts(all_errors[len(listing_errors):]))
        if cart.actions:
            alerts.extend(self._compare_items('CART_ITEMS_AFTER_REMOVE', names(after), cart.items_after))

        expected = expected_badge_count(after)
        if not self.badge_matches(cart.badge_text, expected):
            alerts.append(self.alert(
                'CART_BADGE_COUNT',
                f'Badge: oczekiwano {expected or "brak"}, jest {cart.badge_text or "brak"}',
            ))

        if cart.continue_url is not None:
            alerts.extend(self._check_continue_shopping(cart, expected))

        # Wymaganie: checkout niedostępny dla pustego koszyka. Sklep go nie blokuje.
        if not cart.items_after and cart.checkout_enabled:
            alerts.append(self.divergence(
                'DIVERGENCE_EMPTY_CART_CHECKOUT',
                'Przycisk Checkout aktywny przy pustym koszyku',
            ))

        instructions = {}
        if self.context.flag('stop_at_overview'):
            instructions['stop_at_overview'] = True

        return self.ok(alerts=alerts, instructions=instructions)

    def _check_continue_shopping(self, cart, expected: int) -> list:
        alerts = []
        if 'inventory.html' not in cart.continue_url:
            alerts.append(self.alert(
                'CART_CONTINUE_SHOPPING',
                f'Continue Shopping prowadzi do: {cart.continue_url}',
            ))
        if not self.badge_matches(cart.badge_after_continue, expected):
            alerts.append(self.alert(
                'CART_BADGE_AFTER_CONTINUE',
                f'Badge na listingu: {cart.badge_after_continue or "brak"}, oczekiwano {expected or "brak"}',
            ))
        return alerts

    def _compare_items(self, business_rule: str, expected: list[str], rows) -> list:
        shown = [row.name for row in rows]
        if shown == expected:
            return []
        missing = [n for n in expected if n not in shown]
        unexpected = [n for n in shown if n not in expected]
        if not missing and not unexpected:
            description = f'Inna kolejność: oczekiwano {expected}, jest {shown}'
        else:
            description = f'Brakuje: {missing or "-"} | Nadmiarowe: {unexpected or "-"}'
        return [self.alert(business_rule, description)]

    def _line_items(self, rows, alerts) -> list[LineItem] | None:
        items = []
        for row in rows:
            price = self.parse(row.price_text, 'CART_PRICE_UNPARSEABLE', alerts)
            if price is None:
                return None
            items.append(LineItem(row.name or '?', price))
        return items

    def _check_total_label(self, cart, items, alerts) -> list:
        if not cart.items:
            return []
        if cart.total_text is None:
            return [self.divergence(
                'DIVERGENCE_CART_TOTAL_MISSING',
                'Koszyk nie pokazuje sumy — jest dopiero w podsumowaniu checkoutu',
            )]
        total = self.parse(cart.total_text, 'CART_TOTAL_UNPARSEABLE', alerts)
        if total is None or items is None:
            return []
        error = verify_subtotal(items, total)
        return [self.alert('CART_TOTAL_MISMATCH', str(error))] if error else []
