from scenarios.pages.login_page import LoginPage
from scenarios.pages.products_page import ProductsPage
from scenarios.pages.cart_page import CartPage
from scenarios.pages.checkout_info_page import CheckoutInfoPage
from scenarios.pages.overview_page import OverviewPage
from scenarios.pages.complete_page import CompletePage
