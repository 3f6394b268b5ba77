from scenarios.pages.base_page import BasePage
from scenarios.run_data import CompleteData

# ── CompletePage — potwierdzenie zamówienia ───────────────────────────────────

class CompletePage(BasePage):
    HEADER        = ('locator', '.complete-header')
    TEXT          = ('locator', '.complete-text')
    BTN_BACK_HOME = ('test', 'back-to-products')

    async def execute(self, instructions: dict) -> CompleteData:
        await self.wait_for_navigation()

        data = CompleteData(
            header=await self.get_text(self.HEADER),
            text=await self.get_text(self.TEXT),
            url=self.page.url,
        )

        await self.safe_click(self.BTN_BACK_HOME)
        await self.wait_for_navigation()

        data.back_home_url = self.page.url
        data.badge_text = await self.badge_text()
        return data
