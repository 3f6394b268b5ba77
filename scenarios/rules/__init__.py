from scenarios.rules.login_rules import LoginRules
from scenarios.rules.listing_rules import ListingRules
from scenarios.rules.cart_rules import CartRules
from scenarios.rules.checkout_info_rules import CheckoutInfoRules
from scenarios.rules.overview_rules import OverviewRules
from scenarios.rules.complete_rules import CompleteRules
from scenarios.rules.global_rules import GlobalRules
