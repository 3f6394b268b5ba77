from data.products import EXPECTED_PRODUCT_COUNT
from scenarios.run_data import RunData
from scenarios.rules_result import RulesResult, TO_VERIFY
from scenarios.rules.base_rules import BaseRules
from verification.cart_tracker import expected_badge_count
from verification.ordering import SortKey, verify_order


# ── Listing — produkty, sortowanie, badge ─────────────────────────────────────

class ListingRules(BaseRules):
    def check(self, run_data: RunData) -> RulesResult:
        listing = run_data.listing
        alerts = []

        if not listing or not listing.products:
            return self.stop(
                alerts=[self.alert('LISTING_EMPTY', 'Brak produktów na listingu')],
                reason='Pusty listing',
                expected=False,
            )

        if listing.title != 'Products':
            alerts.append(self.alert(
                'LISTING_TITLE',
                f'Tytuł strony "{listing.title}" zamiast "Products"',
                alert_type=TO_VERIFY,
            ))

        if len(listing.products) != EXPECTED_PRODUCT_COUNT:
            alerts.append(self.alert(
                'LISTING_PRODUCT_COUNT',
                f'Produktów: {len(listing.products)}, oczekiwano {EXPECTED_PRODUCT_COUNT}',
                alert_type=TO_VERIFY,
            ))

        alerts.extend(self._check_tiles(listing))
        alerts.extend(self._check_sort(listing))
        alerts.extend(self.check_currency([p.price_text for p in listing.products], 'Listing'))
        alerts.extend(self._check_badge(run_data))
        alerts.extend(self._check_badge_after_sort(run_data))
        alerts.extend(self._check_cart_icon(listing))

        instructions = {}
        if self.context.flag('stop_at_cart'):
            instructions['stop_at_cart'] = True

        return self.ok(alerts=alerts, instructions=instructions)

    def _check_tiles(self, listing) -> list:
        alerts = []
        for i, product in enumerate(listing.products):
            missing = []
            if not product.name:
                missing.append('nazwa')
            if not product.description:
                missing.append('opis')
            if not product.image_src or '.jpg' not in product.image_src:
                missing.append('obrazek')
            if missing:
                alerts.append(self.alert(
                    'LISTING_PRODUCT_INCOMPLETE',
                    f'Produkt #{i} "{product.name}": brak {", ".join(missing)}',
                ))

            price = self.parse(product.price_text, 'LISTING_PRICE_UNPARSEABLE', alerts)
            if price is not None and price <= 0:
                alerts.append(self.alert('LISTING_PRICE_NOT_POSITIVE', f'{product.name}: {price}'))
        return alerts

    def _check_sort(self, listing) -> list:
        # Bez wybranego sortowania sklep ma pokazywać A→Z
        key = SortKey.from_option(listing.sort_option) if listing.sort_option else SortKey.NAME_ASC

        if key.by_price:
            prices = self._prices_in_order(listing)
            if prices is None:
                return []   # nieparsowalne ceny już zgłoszone
            error = verify_order(prices, prices, key, lambda p: p)
        else:
            names = [p.name for p in listing.products]
            error = verify_order(names, names, key, lambda n: n)

        if error:
            return [self.alert('LISTING_SORT_ORDER', str(error))]
        return []

    def _prices_in_order(self, listing):
        ignored = []
        prices = [self.parse(p.price_text, 'LISTING_PRICE_UNPARSEABLE', ignored) for p in listing.products]
        return None if ignored else prices

    def _check_badge(self, run_data: RunData) -> list:
        snapshot, errors = self.replay_cart(run_data, include_cart=False)
        alerts = self.tracker_alerts(errors)

        expected = expected_badge_count(snapshot)
        if not self.badge_matches(run_data.listing.badge_text, expected):
            if expected == 0:
                description = f'Badge "{run_data.listing.badge_text}" przy pustym koszyku (oczekiwano braku badge\'a)'
            else:
                description = f'Badge: oczekiwano {expected}, jest {run_data.listing.badge_text or "brak"}'
            alerts.append(self.alert('LISTING_BADGE_COUNT', description))

        added = set()
        for action in run_data.listing.actions:
            if action.operation == 'add':
                if not action.clicked and action.name not in added:
                    alerts.append(self.alert(
                        'LISTING_ADD_BUTTON_MISSING',
                        f'Brak przycisku "Add to cart" dla "{action.name}"',
                    ))
                added.add(action.name)
            elif not action.clicked and action.name in added:
                alerts.append(self.alert(
                    'LISTING_REMOVE_BUTTON_MISSING',
                    f'Brak przycisku "Remove" dla "{action.name}"',
                ))
        return alerts

    def _check_badge_after_sort(self, run_data: RunData) -> list:
        # Zmiana sortowania nie może ruszyć koszyka
        snapshot, _ = self.replay_cart(run_data, include_cart=False)
        expected = expected_badge_count(snapshot)
        alerts = []
        for option, badge in run_data.listing.badges_after_sort:
            if not self.badge_matches(badge, expected):
                alerts.append(self.alert(
                    'LISTING_BADGE_AFTER_SORT',
                    f'Po sortowaniu "{option}": badge {badge or "brak"}, oczekiwano {expected or "brak"}',
                ))
        return alerts

    def _check_cart_icon(self, listing) -> list:
        box = listing.cart_icon_box
        if not box:
            return [self.alert('LISTING_CART_ICON_MISSING', 'Ikona koszyka niewidoczna')]

        alerts = []
        if box['y'] >= 200:
            alerts.append(self.alert(
                'LISTING_CART_ICON_POSITION',
                f'Ikona koszyka nie w nagłówku (y={box["y"]:.0f})',
            ))
        # Wymaganie: lewy górny róg. Sklep ma ikonę po prawej.
        if listing.viewport_width and box['x'] > listing.viewport_width / 2:
            alerts.append(self.divergence(
                'DIVERGENCE_CART_ICON_POSITION',
                f'Ikona koszyka po prawej (x={box["x"]:.0f}), wymaganie: lewy górny róg',
            ))
        return alerts
