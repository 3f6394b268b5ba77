from scenarios.pages.base_page import BasePage
from scenarios.run_data import CartAction, CartData, CartItemRow

# ── CartPage — koszyk ─────────────────────────────────────────────────────────

class CartPage(BasePage):
    CART_ITEM     = ('locator', '.cart_item')
    ITEM_NAME     = ('locator', '.inventory_item_name')
    ITEM_DESC     = ('locator', '.inventory_item_desc')
    ITEM_PRICE    = ('locator', '.inventory_item_price')
    ITEM_QUANTITY = ('locator', '.cart_quantity')
    BTN_REMOVE    = ('locator', 'button[id^="remove"]')
    # Wymaganie mówi o sumie w koszyku — Sauce Demo jej nie renderuje
    CART_TOTAL    = ('locator', '.cart_total, .cart_footer .summary_total_label')
    BTN_CONTINUE  = ('test', 'continue-shopping')
    BTN_CHECKOUT  = ('test', 'checkout')

    async def execute(self, instructions: dict) -> CartData:
        await self.safe_click(self.CART_ICON)
        await self.wait_for_navigation()

        data = CartData(title=await self.get_text(self.TITLE), url=self.page.url)
        data.items = await self.read_items()

        for name in self.context.remove_in_cart:
            data.actions.append(CartAction('remove', name, await self._remove(name)))
        data.items_after = await self.read_items() if data.actions else list(data.items)

        data.badge_text = await self.badge_text()
        data.total_text = await self.get_text(self.CART_TOTAL)
        data.checkout_enabled = await self.loc(self.BTN_CHECKOUT).is_enabled()

        if self.context.flag('continue_shopping'):
            await self._continue_shopping(data)

        if self.context.goes_to_checkout and not instructions.get('stop_at_cart'):
            await self.safe_click(self.BTN_CHECKOUT)
            await self.wait_for_navigation()

        return data

    async def _continue_shopping(self, data: CartData):
        """Continue Shopping prowadzi na listing z tym samym koszykiem, potem wracamy."""
        await self.safe_click(self.BTN_CONTINUE)
        await self.wait_for_navigation()
        data.continue_url = self.page.url
        data.badge_after_continue = await self.badge_text()

        await self.safe_click(self.CART_ICON)
        await self.wait_for_navigation()

    async def read_items(self) -> list[CartItemRow]:
        rows = []
        items = self.loc(self.CART_ITEM)
        for i in range(await items.count()):
            item = items.nth(i)
            rows.append(CartItemRow(
                name=await self.get_text(self.ITEM_NAME, within=item) or "",
                price_text=await self.get_text(self.ITEM_PRICE, within=item) or "",
                quantity_text=await self.get_text(self.ITEM_QUANTITY, within=item),
                description=await self.get_text(self.ITEM_DESC, within=item) or "",
            ))
        return rows

    async def _remove(self, name: str) -> bool:
        item = self.loc(self.CART_ITEM).filter(has_text=name)
        btn = self.loc(self.BTN_REMOVE, within=item)
        if await btn.count() == 0:
            self.log(f"Brak produktu do usunięcia: {name}")
            return False
        await btn.first.click()
        return True
