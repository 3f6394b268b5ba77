from scenarios.pages.cart_page import CartPage
from scenarios.run_data import OverviewData

# ── OverviewPage — checkout krok 2, podsumowanie ──────────────────────────────

class OverviewPage(CartPage):
    PAYMENT_INFO  = ('test', 'payment-info-value')
    SHIPPING_INFO = ('test', 'shipping-info-value')
    SUBTOTAL      = ('locator', '.summary_subtotal_label')
    TAX           = ('locator', '.summary_tax_label')
    TOTAL         = ('locator', '.summary_total_label')
    BTN_FINISH    = ('test', 'finish')
    BTN_CANCEL    = ('test', 'cancel')

    async def execute(self, instructions: dict) -> OverviewData:
        await self.wait_for_navigation()

        data = OverviewData(
            title=await self.get_text(self.TITLE),
            items=await self.read_items(),
            payment_info=await self.get_text(self.PAYMENT_INFO),
            shipping_info=await self.get_text(self.SHIPPING_INFO),
            subtotal_text=await self.get_text(self.SUBTOTAL),
            tax_text=await self.get_text(self.TAX),
            total_text=await self.get_text(self.TOTAL),
        )

        if self.context.flag('cancel_at_overview'):
            await self.safe_click(self.BTN_CANCEL)
            data.cancelled = True
        elif not instructions.get('stop_at_overview'):
            await self.safe_click(self.BTN_FINISH)

        await self.wait_for_navigation()
        data.url = self.page.url
        return data
