from playwright.async_api import Page
from scenarios.context import ScenarioContext
import logging

logger = logging.getLogger(__name__)


class BasePage:
    TITLE      = ('locator', '.title')
    CART_BADGE = ('locator', '.shopping_cart_badge')
    CART_ICON  = ('locator', '.shopping_cart_link')

    def __init__(self, page: Page, context: ScenarioContext):
        self.page = page
        self.context = context

    # ── Lokator ───────────────────────────────────────────────────────────────

    def loc(self, selector: tuple, within=None):
        """
        Interpretuje tuple selektora i zwraca Playwright Locator.

        Formaty:
          ('locator',  'css_or_xpath')
          ('test',     'login-button')          → [data-test="login-button"]
          ('role',     'button', {'name': 'Checkout'})
          ('text',     'Products', {'exact': True})

        within — opcjonalny Locator rodzica (np. kafelek produktu).
        """
        root = within if within is not None else self.page
        kind = selector[0]

        if kind == 'locator':
            return root.locator(selector[1])
        elif kind == 'test':
            return root.locator(f'[data-test="{selector[1]}"]')
        elif kind == 'role':
            kwargs = selector[2] if len(selector) > 2 else {}
            return root.get_by_role(selector[1], **kwargs)
        elif kind == 'text':
            kwargs = selector[2] if len(selector) > 2 else {}
            return root.get_by_text(selector[1], **kwargs)
        else:
            raise ValueError(f"Nieznany typ selektora: {kind}")

    # ── Helpers ───────────────────────────────────────────────────────────────

    async def wait_for_navigation(self):
        # Sauce Demo to SPA bez ruchu w tle — domcontentloaded wystarcza
        await self.page.wait_for_load_state('domcontentloaded')

    async def safe_click(self, selector: tuple):
        el = self.loc(selector)
        await el.scroll_into_view_if_needed()
        await el.click()

    async def safe_fill(self, selector: tuple, value: str):
        el = self.loc(selector)
        await el.clear()
        await el.fill(value)

    async def get_text(self, selector: tuple, within=None) -> str | None:
        try:
            el = self.loc(selector, within)
            if await el.count() == 0:
                return None
            return (await el.first.inner_text()).strip()
        except Exception:
            return None

    async def get_texts(self, selector: tuple, within=None) -> list[str]:
        """Teksty wszystkich pasujących elementów w kolejności wyświetlania."""
        texts = await self.loc(selector, within).all_inner_texts()
        return [t.strip() for t in texts]

    async def is_visible(self, selector: tuple, within=None) -> bool:
        try:
            return await self.loc(selector, within).first.is_visible()
        except Exception:
            return False

    async def badge_text(self) -> str | None:
        # Brak badge'a = pusty koszyk, nie "0"
        if not await self.is_visible(self.CART_BADGE):
            return None
        return await self.get_text(self.CART_BADGE)

    def log(self, msg: str):
        logger.info(f"[{self.__class__.__name__}] {msg}")
