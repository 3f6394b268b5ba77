from scenarios.pages.base_page import BasePage
from scenarios.run_data import CheckoutInfoData

# ── CheckoutInfoPage — checkout krok 1, dane klienta ─────────────────────────

class CheckoutInfoPage(BasePage):
    FIRST_NAME   = ('test', 'firstName')
    LAST_NAME    = ('test', 'lastName')
    POSTAL_CODE  = ('test', 'postalCode')
    BTN_CONTINUE = ('test', 'continue')
    BTN_CANCEL   = ('test', 'cancel')
    ERROR        = ('test', 'error')

    async def execute(self, instructions: dict) -> CheckoutInfoData:
        await self.wait_for_navigation()
        data = CheckoutInfoData(title=await self.get_text(self.TITLE))

        info = self.context.checkout
        await self.safe_fill(self.FIRST_NAME, info.first_name)
        await self.safe_fill(self.LAST_NAME, info.last_name)
        await self.safe_fill(self.POSTAL_CODE, info.postal_code)

        if self.context.flag('cancel_at_info'):
            await self.safe_click(self.BTN_CANCEL)
            data.cancelled = True
        else:
            await self.safe_click(self.BTN_CONTINUE)

        await self.wait_for_navigation()

        if await self.is_visible(self.ERROR):
            data.error_message = await self.get_text(self.ERROR)
        data.url = self.page.url
        return data
