from scenarios.pages.base_page import BasePage
from scenarios.run_data import CartAction, ListingData, ProductRow

# ── ProductsPage — listing, sortowanie, dodawanie do koszyka ─────────────────

class ProductsPage(BasePage):
    SORT_SELECT   = ('test', 'product-sort-container')
    PRODUCT_ITEM  = ('locator', '.inventory_item')
    PRODUCT_NAME  = ('locator', '.inventory_item_name')
    PRODUCT_DESC  = ('locator', '.inventory_item_desc')
    PRODUCT_PRICE = ('locator', '.inventory_item_price')
    PRODUCT_IMAGE = ('locator', '.inventory_item_img img')
    BTN_ADD       = ('locator', 'button[id^="add-to-cart"]')
    BTN_REMOVE    = ('locator', 'button[id^="remove"]')

    async def execute(self, instructions: dict) -> ListingData:
        await self.wait_for_navigation()
        data = ListingData(title=await self.get_text(self.TITLE))

        if self.context.sort_key:
            self.log(f"Sortuję: {self.context.sort_key.name}")
            await self.loc(self.SORT_SELECT).select_option(self.context.sort_key.option)
            data.sort_option = self.context.sort_key.option

        data.products = await self.read_products()

        for name in self.context.add_products:
            data.actions.append(CartAction('add', name, await self._click_on_tile(name, self.BTN_ADD)))
        for name in self.context.remove_on_listing:
            data.actions.append(CartAction('remove', name, await self._click_on_tile(name, self.BTN_REMOVE)))

        data.badge_text = await self.badge_text()

        for key in self.context.resort_keys:
            self.log(f"Sortuję ponownie: {key.name}")
            await self.loc(self.SORT_SELECT).select_option(key.option)
            data.badges_after_sort.append((key.option, await self.badge_text()))

        data.cart_icon_box = await self.loc(self.CART_ICON).bounding_box()
        viewport = self.page.viewport_size
        data.viewport_width = viewport['width'] if viewport else None
        return data

    async def read_products(self) -> list[ProductRow]:
        names = await self.get_texts(self.PRODUCT_NAME)
        prices = await self.get_texts(self.PRODUCT_PRICE)
        descriptions = await self.get_texts(self.PRODUCT_DESC)
        images = self.loc(self.PRODUCT_IMAGE)
        image_count = await images.count()

        rows = []
        for i, name in enumerate(names):
            rows.append(ProductRow(
                name=name,
                price_text=prices[i] if i < len(prices) else "",
                description=descriptions[i] if i < len(descriptions) else "",
                image_src=await images.nth(i).get_attribute("src") if i < image_count else None,
            ))
        return rows

    async def _click_on_tile(self, name: str, button: tuple) -> bool:
        """
        Klika przycisk na kafelku produktu. False gdy przycisku nie ma —
        np. "Add to cart" dla produktu który już jest w koszyku.
        """
        tile = self.loc(self.PRODUCT_ITEM).filter(has_text=name)
        btn = self.loc(button, within=tile)
        if await btn.count() == 0:
            self.log(f"Brak przycisku {button[1]} dla: {name}")
            return False
        await btn.first.click()
        return True
