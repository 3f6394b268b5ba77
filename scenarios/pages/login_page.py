from scenarios.pages.base_page import BasePage
from scenarios.run_data import LoginData

# ── LoginPage ─────────────────────────────────────────────────────────────────

class LoginPage(BasePage):
    USERNAME     = ('test', 'username')
    PASSWORD     = ('test', 'password')
    BTN_LOGIN    = ('test', 'login-button')
    ERROR        = ('test', 'error')
    ERROR_CLOSE  = ('locator', '.error-button')

    INVENTORY_PATH = 'inventory.html'
    # Bez logowania każda z nich ma przekierować na stronę logowania
    PROTECTED_PATHS = (
        '/inventory.html',
        '/cart.html',
        '/checkout-step-one.html',
        '/checkout-step-two.html',
    )

    async def execute(self, instructions: dict) -> LoginData:
        protected_urls = {}
        if self.context.flag('check_protected_pages'):
            protected_urls = await self._open_protected_pages()

        self.log(f"Loguję jako: {self.context.username or '<pusty>'}")
        await self.page.goto(self.context.url('/'))
        await self.wait_for_navigation()

        await self.safe_fill(self.USERNAME, self.context.username)
        await self.safe_fill(self.PASSWORD, self.context.password)
        await self.safe_click(self.BTN_LOGIN)
        await self.wait_for_navigation()

        logged_in = self.INVENTORY_PATH in self.page.url
        error = None
        error_closed = None
        if not logged_in and await self.is_visible(self.ERROR):
            error = await self.get_text(self.ERROR)
            error_closed = await self._close_error()

        return LoginData(
            username=self.context.username,
            logged_in=logged_in,
            error_message=error,
            url=self.page.url,
            error_closed=error_closed,
            protected_urls=protected_urls,
        )

    async def _open_protected_pages(self) -> dict[str, str]:
        urls = {}
        for path in self.PROTECTED_PATHS:
            await self.page.goto(self.context.url(path))
            await self.wait_for_navigation()
            urls[path] = self.page.url
            self.log(f"{path} → {self.page.url}")
        return urls

    async def _close_error(self) -> bool:
        """Klika X przy komunikacie. True gdy komunikat zniknął."""
        if not await self.is_visible(self.ERROR_CLOSE):
            return False
        await self.safe_click(self.ERROR_CLOSE)
        return not await self.is_visible(self.ERROR)
