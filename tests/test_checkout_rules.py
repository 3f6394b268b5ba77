from data import checkout, users
from data.products import BACKPACK, BIKE_LIGHT, ONESIE
from scenarios.rules import (
    CartRules, CheckoutInfoRules, CompleteRules, GlobalRules, LoginRules, OverviewRules,
)
from scenarios.run_data import CartAction, CheckoutInfoData, CompleteData, LoginData
from tests.builders import cart, cart_rows, counted_rules_of, listing, overview, rules_of


# ── Login ─────────────────────────────────────────────────────────────────────

class TestLoginRules:
    def test_standard_user_logs_in(self, make_context, run_data):
        run_data.login = LoginData(username="standard_user", logged_in=True)
        assert not LoginRules(make_context()).check(run_data).should_stop

    def test_standard_user_rejected(self, make_context, run_data):
        run_data.login = LoginData(username="standard_user", error_message="Epic sadface: boom")
        result = LoginRules(make_context()).check(run_data)
        assert result.should_stop and not result.stop_expected
        assert rules_of(result) == ['LOGIN_FAILED']

    def test_locked_out_user_stops_as_expected(self, make_context, run_data):
        run_data.login = LoginData(
            username="locked_out_user",
            error_message=users.ERROR_MESSAGES['locked_out'],
        )
        result = LoginRules(make_context(user=users.LOCKED_OUT)).check(run_data)
        assert result.should_stop and result.stop_expected
        assert result.alerts == []

    def test_wrong_error_message(self, make_context, run_data):
        run_data.login = LoginData(username="invalid_user", error_message="Epic sadface: something else")
        result = LoginRules(make_context(user=users.INVALID)).check(run_data)
        assert result.stop_expected
        assert rules_of(result) == ['LOGIN_ERROR_MESSAGE_MISMATCH']

    def test_invalid_credentials_rejected_as_expected(self, make_context, run_data):
        assert users.expected_login_error("invalid_user", "wrong_password") == users.ERROR_MESSAGES['invalid_credentials']
        run_data.login = LoginData(
            username="invalid_user",
            error_message=users.ERROR_MESSAGES['invalid_credentials'],
        )
        result = LoginRules(make_context(user=users.INVALID)).check(run_data)
        assert result.should_stop and result.stop_expected
        assert result.alerts == []

    def test_negative_login_that_succeeds(self, make_context, run_data):
        run_data.login = LoginData(username="locked_out_user", logged_in=True)
        result = LoginRules(make_context(user=users.LOCKED_OUT)).check(run_data)
        assert not result.stop_expected
        assert rules_of(result) == ['LOGIN_SHOULD_FAIL']

    def test_protected_pages_redirect_to_login(self, make_context, run_data):
        run_data.login = LoginData(
            username="standard_user",
            logged_in=True,
            protected_urls={
                '/inventory.html': "https://www.saucedemo.com/",
                '/cart.html': "https://www.saucedemo.com/",
            },
        )
        result = LoginRules(make_context(flags={'check_protected_pages': True})).check(run_data)
        assert result.alerts == []

    def test_protected_page_open_without_login(self, make_context, run_data):
        run_data.login = LoginData(
            username="standard_user",
            logged_in=True,
            protected_urls={
                '/inventory.html': "https://www.saucedemo.com/",
                '/checkout-step-one.html': "https://www.saucedemo.com/checkout-step-one.html",
            },
        )
        result = LoginRules(make_context(flags={'check_protected_pages': True})).check(run_data)

        assert not result.should_stop
        assert rules_of(result) == ['LOGIN_PROTECTED_PAGE_OPEN']
        assert '/checkout-step-one.html' in result.alerts[0].description

    def test_error_that_cannot_be_closed(self, make_context, run_data):
        run_data.login = LoginData(
            username="",
            error_message=users.ERROR_MESSAGES['username_required'],
            error_closed=False,
        )
        result = LoginRules(make_context(user=users.User('', users.VALID_PASSWORD))).check(run_data)
        assert result.stop_expected
        assert rules_of(result) == ['LOGIN_ERROR_NOT_CLOSABLE']

    def test_closed_error_is_fine(self, make_context, run_data):
        run_data.login = LoginData(
            username="",
            error_message=users.ERROR_MESSAGES['username_required'],
            error_closed=True,
        )
        result = LoginRules(make_context(user=users.User('', users.VALID_PASSWORD))).check(run_data)
        assert result.alerts == []

    def test_expected_errors_for_empty_fields(self):
        assert users.expected_login_error("", "x") == users.ERROR_MESSAGES['username_required']
        assert users.expected_login_error("standard_user", "") == users.ERROR_MESSAGES['password_required']
        assert users.expected_login_error("standard_user", "secret_sauce") is None


# ── Cart ──────────────────────────────────────────────────────────────────────

class TestCartRules:
    def test_cart_matches_listing(self, make_context, run_data):
        run_data.listing = listing(added=[BACKPACK, BIKE_LIGHT], badge="2")
        run_data.cart = cart([BACKPACK, BIKE_LIGHT], "2")
        result = CartRules(make_context()).check(run_data)

        assert counted_rules_of(result) == []
        assert 'DIVERGENCE_CART_TOTAL_MISSING' in rules_of(result)
        assert 'DIVERGENCE_CURRENCY_SYMBOL' in rules_of(result)

    def test_missing_item(self, make_context, run_data):
        run_data.listing = listing(added=[BACKPACK, BIKE_LIGHT], badge="2")
        run_data.cart = cart([BACKPACK], "1")
        result = CartRules(make_context()).check(run_data)

        alert = next(a for a in result.alerts if a.business_rule == 'CART_ITEMS_MISMATCH')
        assert BIKE_LIGHT.name in alert.description
        assert 'CART_BADGE_COUNT' in counted_rules_of(result)

    def test_sum_delta_is_shown_minus_expected(self, make_context, run_data):
        run_data.listing = listing(added=[BACKPACK, BIKE_LIGHT], badge="2")
        run_data.cart = cart([BACKPACK], "1")
        result = CartRules(make_context()).check(run_data)

        alert = next(a for a in result.alerts if a.business_rule == 'CART_SUM_MISMATCH')
        # koszyk pokazuje 29.99, z listingu wynika 39.98
        assert 'oczekiwano 39.98, jest 29.99' in alert.description
        assert 'delta -9.99' in alert.description

    def test_remove_in_cart(self, make_context, run_data):
        run_data.listing = listing(added=[BACKPACK, BIKE_LIGHT, ONESIE], badge="3")
        run_data.cart = cart(
            [BACKPACK, BIKE_LIGHT, ONESIE], "2",
            items_after=cart_rows([BACKPACK, ONESIE]),
            actions=[CartAction('remove', BIKE_LIGHT.name)],
        )
        result = CartRules(make_context()).check(run_data)
        assert counted_rules_of(result) == []

    def test_remove_not_reflected(self, make_context, run_data):
        run_data.listing = listing(added=[BACKPACK, BIKE_LIGHT], badge="2")
        run_data.cart = cart(
            [BACKPACK, BIKE_LIGHT], "2",
            actions=[CartAction('remove', BIKE_LIGHT.name)],
        )
        result = CartRules(make_context()).check(run_data)
        assert 'CART_ITEMS_AFTER_REMOVE' in counted_rules_of(result)
        assert 'CART_BADGE_COUNT' in counted_rules_of(result)

    def test_quantity_other_than_one(self, make_context, run_data):
        run_data.listing = listing(added=[BACKPACK], badge="1")
        run_data.cart = cart([BACKPACK], "1")
        run_data.cart.items[0].quantity_text = "2"
        assert 'CART_QUANTITY' in rules_of(CartRules(make_context()).check(run_data))

    def test_empty_cart_checkout_is_known_divergence(self, make_context, run_data):
        run_data.listing = listing()
        run_data.cart = cart([], None)
        result = CartRules(make_context()).check(run_data)

        assert counted_rules_of(result) == []
        assert rules_of(result) == ['DIVERGENCE_EMPTY_CART_CHECKOUT']

    def test_cart_total_label_checked_when_present(self, make_context, run_data):
        run_data.listing = listing(added=[BACKPACK], badge="1")
        run_data.cart = cart([BACKPACK], "1", total_text="Total: $30.99")
        result = CartRules(make_context()).check(run_data)
        assert 'CART_TOTAL_MISMATCH' in rules_of(result)
        assert 'DIVERGENCE_CART_TOTAL_MISSING' not in rules_of(result)

    def test_continue_shopping_keeps_cart(self, make_context, run_data):
        run_data.listing = listing(added=[BACKPACK, ONESIE], badge="2")
        run_data.cart = cart(
            [BACKPACK, ONESIE], "2",
            continue_url="https://www.saucedemo.com/inventory.html",
            badge_after_continue="2",
        )
        result = CartRules(make_context(flags={'continue_shopping': True})).check(run_data)
        assert counted_rules_of(result) == []

    def test_continue_shopping_wrong_target_and_badge(self, make_context, run_data):
        run_data.listing = listing(added=[BACKPACK, ONESIE], badge="2")
        run_data.cart = cart(
            [BACKPACK, ONESIE], "2",
            continue_url="https://www.saucedemo.com/",
            badge_after_continue=None,
        )
        result = CartRules(make_context(flags={'continue_shopping': True})).check(run_data)
        assert counted_rules_of(result) == ['CART_CONTINUE_SHOPPING', 'CART_BADGE_AFTER_CONTINUE']

    def test_stop_at_overview_instruction(self, make_context, run_data):
        run_data.listing = listing()
        run_data.cart = cart([], None, checkout_enabled=False)
        result = CartRules(make_context(flags={'stop_at_overview': True})).check(run_data)
        assert result.instructions == {'stop_at_overview': True}


# ── Checkout info ─────────────────────────────────────────────────────────────

class TestCheckoutInfoRules:
    TITLE = "Checkout: Your Information"

    def test_valid_info_continues(self, make_context, run_data):
        run_data.checkout_info = CheckoutInfoData(title=self.TITLE)
        result = CheckoutInfoRules(make_context(checkout=checkout.VALID)).check(run_data)
        assert not result.should_stop
        assert result.alerts == []

    def test_missing_postal_code_expected_error(self, make_context, run_data):
        run_data.checkout_info = CheckoutInfoData(
            title=self.TITLE,
            error_message=users.ERROR_MESSAGES['postal_code_required'],
        )
        result = CheckoutInfoRules(make_context(checkout=checkout.EMPTY_POSTAL_CODE)).check(run_data)
        assert result.should_stop and result.stop_expected
        assert result.alerts == []

    def test_first_missing_field_wins(self):
        assert checkout.ALL_EMPTY.missing_field == 'first_name'
        assert checkout.EMPTY_LAST_NAME.missing_field == 'last_name'
        assert checkout.VALID.missing_field is None

    def test_missing_field_not_validated(self, make_context, run_data):
        run_data.checkout_info = CheckoutInfoData(title=self.TITLE)
        result = CheckoutInfoRules(make_context(checkout=checkout.EMPTY_FIRST_NAME)).check(run_data)
        assert not result.stop_expected
        assert rules_of(result) == ['CHECKOUT_INFO_NOT_VALIDATED']

    def test_valid_info_rejected(self, make_context, run_data):
        run_data.checkout_info = CheckoutInfoData(title=self.TITLE, error_message="Error: nope")
        result = CheckoutInfoRules(make_context(checkout=checkout.VALID)).check(run_data)
        assert not result.stop_expected
        assert rules_of(result) == ['CHECKOUT_INFO_REJECTED']

    def test_cancel_returns_to_cart(self, make_context, run_data):
        run_data.checkout_info = CheckoutInfoData(
            title=self.TITLE, cancelled=True, url="https://www.saucedemo.com/cart.html",
        )
        result = CheckoutInfoRules(make_context(checkout=checkout.VALID)).check(run_data)
        assert result.should_stop and result.stop_expected
        assert result.alerts == []


# ── Overview ──────────────────────────────────────────────────────────────────

class TestOverviewRules:
    def test_consistent_summary(self, make_context, run_data):
        run_data.cart = cart([BACKPACK, BIKE_LIGHT], "2")
        run_data.overview = overview([BACKPACK, BIKE_LIGHT], "39.98", "3.20", "43.18")
        result = OverviewRules(make_context(checkout=checkout.VALID)).check(run_data)

        assert counted_rules_of(result) == []
        assert rules_of(result) == ['DIVERGENCE_CURRENCY_SYMBOL']

    def test_total_mismatch_reports_delta(self, make_context, run_data):
        run_data.cart = cart([BACKPACK], "1")
        run_data.overview = overview([BACKPACK], "29.99", "2.40", "32.49")
        result = OverviewRules(make_context(checkout=checkout.VALID)).check(run_data)

        alert = next(a for a in result.alerts if a.business_rule == 'OVERVIEW_TOTAL_MISMATCH')
        assert '+0.10' in alert.description

    def test_subtotal_not_sum_of_items(self, make_context, run_data):
        run_data.cart = cart([BACKPACK, BIKE_LIGHT], "2")
        run_data.overview = overview([BACKPACK, BIKE_LIGHT], "29.99", "2.40", "32.39")
        result = OverviewRules(make_context(checkout=checkout.VALID)).check(run_data)
        assert counted_rules_of(result) == ['OVERVIEW_SUBTOTAL_MISMATCH']

    def test_items_differ_from_cart(self, make_context, run_data):
        run_data.cart = cart([BACKPACK, BIKE_LIGHT], "2")
        run_data.overview = overview([BACKPACK], "29.99", "2.40", "32.39")
        result = OverviewRules(make_context(checkout=checkout.VALID)).check(run_data)
        assert 'OVERVIEW_ITEMS_MISMATCH' in counted_rules_of(result)

    def test_unparseable_total(self, make_context, run_data):
        run_data.cart = cart([BACKPACK], "1")
        run_data.overview = overview([BACKPACK], "29.99", "2.40", "32.39", total_text="Total: --")
        result = OverviewRules(make_context(checkout=checkout.VALID)).check(run_data)
        assert counted_rules_of(result) == ['OVERVIEW_TOTAL_UNPARSEABLE']

    def test_wrong_payment_info(self, make_context, run_data):
        run_data.cart = cart([BACKPACK], "1")
        run_data.overview = overview([BACKPACK], "29.99", "2.40", "32.39", payment_info="PayPal")
        result = OverviewRules(make_context(checkout=checkout.VALID)).check(run_data)
        assert 'OVERVIEW_PAYMENT_INFO' in rules_of(result)

    def test_cancel_stops(self, make_context, run_data):
        run_data.cart = cart([BACKPACK], "1")
        run_data.overview = overview(
            [BACKPACK], "29.99", "2.40", "32.39",
            cancelled=True, url="https://www.saucedemo.com/inventory.html",
        )
        result = OverviewRules(make_context(checkout=checkout.VALID)).check(run_data)
        assert result.should_stop and result.stop_expected
        assert counted_rules_of(result) == []


# ── Complete ──────────────────────────────────────────────────────────────────

class TestCompleteRules:
    def _complete(self, **kwargs) -> CompleteData:
        data = CompleteData(
            header=checkout.CONFIRMATION_HEADER,
            text="Your order has been dispatched",
            url="https://www.saucedemo.com/checkout-complete.html",
            back_home_url="https://www.saucedemo.com/inventory.html",
        )
        for key, value in kwargs.items():
            setattr(data, key, value)
        return data

    def test_order_completed(self, make_context, run_data):
        run_data.complete = self._complete()
        assert CompleteRules(make_context()).check(run_data).alerts == []

    def test_cart_not_cleared(self, make_context, run_data):
        run_data.complete = self._complete(badge_text="1")
        assert rules_of(CompleteRules(make_context()).check(run_data)) == ['ORDER_CART_NOT_CLEARED']

    def test_not_on_confirmation_page(self, make_context, run_data):
        run_data.complete = self._complete(url="https://www.saucedemo.com/checkout-step-two.html")
        result = CompleteRules(make_context()).check(run_data)
        assert result.should_stop and not result.stop_expected


# ── Global ────────────────────────────────────────────────────────────────────

class TestGlobalRules:
    def test_cart_price_differs_from_listing(self, make_context, run_data):
        run_data.listing = listing(added=[BACKPACK], badge="1")
        run_data.cart = cart([BACKPACK], "1")
        run_data.cart.items[0].price_text = "$31.99"
        result = GlobalRules(make_context()).check(run_data)
        assert rules_of(result) == ['GLOBAL_PRICE_CHANGED']

    def test_catalog_price_changed(self, make_context, run_data):
        run_data.listing = listing()
        run_data.listing.products[0].price_text = "$30.99"
        result = GlobalRules(make_context()).check(run_data)
        assert rules_of(result) == ['CATALOG_PRICE_CHANGED']

    def test_nothing_collected(self, make_context, run_data):
        assert GlobalRules(make_context()).check(run_data).alerts == []
