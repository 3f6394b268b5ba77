"""
ShopRunner — główny orkiestrator testu.
Odpowiedzialności:
  1. Uruchamia pages w kolejności: login → listing → koszyk → checkout
  2. Przekazuje instructions między etapami (rules → pages)
  3. Obsługuje zatrzymanie testu (StopTest)
  4. Zbiera alerty ze wszystkich etapów
"""
import logging
from dataclasses import dataclass, field

from playwright.async_api import Page

from scenarios.context import ScenarioContext
from scenarios.run_data import RunData
from scenarios.rules_result import AlertResult, RulesResult

# Pages
from scenarios.pages import (
    LoginPage, ProductsPage, CartPage,
    CheckoutInfoPage, OverviewPage, CompletePage,
)

# Rules
from scenarios.rules import (
    LoginRules, ListingRules, CartRules,
    CheckoutInfoRules, OverviewRules, CompleteRules,
    GlobalRules,
)

logger = logging.getLogger(__name__)


@dataclass
class ShopRunResult:
    run_data: RunData
    alerts: list[AlertResult] = field(default_factory=list)
    stopped_at: str | None = None
    stop_reason: str | None = None
    success: bool = True
    screenshots: dict[str, str] = field(default_factory=dict)  # stage → file path


class StopTest(Exception):
    """
    Rzucane gdy test ma się zatrzymać.
    expected=True  → stop był oczekiwany (flaga stop_at_* albo scenariusz negatywny)
    expected=False → stop oznacza błąd sklepu
    """
    def __init__(self, stage: str, reason: str, expected: bool = True):
        super().__init__(reason)
        self.stage = stage
        self.reason = reason
        self.expected = expected


class ShopRunner:
    def __init__(self, page: Page, context: ScenarioContext, screenshot_dir: str | None = None):
        self.page = page
        self.context = context
        self.run_data = RunData()
        self.alerts: list[AlertResult] = []
        # Instrukcje akumulowane między etapami
        self.instructions: dict = {}
        self._current_stage = 'init'
        self.screenshot_dir = screenshot_dir
        self.screenshots: dict[str, str] = {}

    # ── Helpers ───────────────────────────────────────────────────────────────

    async def _screenshot(self, stage: str) -> None:
        if not self.screenshot_dir:
            return
        path = f"{self.screenshot_dir}/{stage}.png"
        try:
            await self.page.screenshot(path=path, full_page=True)
            self.screenshots[stage] = path
        except Exception as e:
            # Screenshot nigdy nie przerywa runu
            logger.warning(f"[{self.context.scenario_name}] Screenshot {stage} nieudany: {e}")

    def _result(self, success: bool, stopped_at: str | None = None, reason: str | None = None) -> ShopRunResult:
        return ShopRunResult(
            run_data=self.run_data,
            alerts=self.alerts,
            stopped_at=stopped_at,
            stop_reason=reason,
            success=success,
            screenshots=self.screenshots,
        )

    # ── Publiczne API ─────────────────────────────────────────────────────────

    async def run(self) -> ShopRunResult:
        try:
            await self._run_login()
            await self._run_listing()
            await self._run_cart()

            if self.context.goes_to_checkout:
                await self._run_checkout_info()
                await self._run_overview()
                await self._run_complete()

        except StopTest as e:
            if e.expected:
                logger.info(
                    f"[{self.context.scenario_name}] "
                    f"Test zatrzymany na '{e.stage}': {e.reason}"
                )
            else:
                logger.warning(
                    f"[{self.context.scenario_name}] "
                    f"Test przerwany na '{e.stage}' (nieoczekiwane): {e.reason}"
                )
            self._run_global()
            return self._result(success=e.expected, stopped_at=e.stage, reason=e.reason)

        except Exception as e:
            logger.exception(f"[{self.context.scenario_name}] Nieoczekiwany błąd: {e}")
            await self._screenshot('error')
            return self._result(success=False, stopped_at=self._current_stage, reason=str(e))

        self._run_global()
        return self._result(success=True)

    # ── Etapy ─────────────────────────────────────────────────────────────────

    async def _run_login(self):
        self._current_stage = 'login'
        self.run_data.login = await self._get_page(LoginPage).execute(self.instructions)
        await self._screenshot('login')
        self._process_result(LoginRules(self.context).check(self.run_data), 'login')

    async def _run_listing(self):
        self._current_stage = 'listing'
        self.run_data.listing = await self._get_page(ProductsPage).execute(self.instructions)
        await self._screenshot('listing')
        self._process_result(ListingRules(self.context).check(self.run_data), 'listing')

    async def _run_cart(self):
        self._current_stage = 'cart'
        self.run_data.cart = await self._get_page(CartPage).execute(self.instructions)
        await self._screenshot('cart')
        self._process_result(CartRules(self.context).check(self.run_data), 'cart')

        if self.context.flag('stop_at_cart'):
            raise StopTest('cart', 'Oczekiwane zatrzymanie na koszyku', expected=True)

    async def _run_checkout_info(self):
        self._current_stage = 'checkout_info'
        self.run_data.checkout_info = await self._get_page(CheckoutInfoPage).execute(self.instructions)
        await self._screenshot('checkout_info')
        self._process_result(CheckoutInfoRules(self.context).check(self.run_data), 'checkout_info')

    async def _run_overview(self):
        self._current_stage = 'overview'
        self.run_data.overview = await self._get_page(OverviewPage).execute(self.instructions)
        await self._screenshot('overview')
        self._process_result(OverviewRules(self.context).check(self.run_data), 'overview')

        if self.context.flag('stop_at_overview'):
            raise StopTest('overview', 'Oczekiwane zatrzymanie na podsumowaniu', expected=True)

    async def _run_complete(self):
        self._current_stage = 'complete'
        self.run_data.complete = await self._get_page(CompletePage).execute(self.instructions)
        await self._screenshot('complete')
        self._process_result(CompleteRules(self.context).check(self.run_data), 'complete')

    def _run_global(self):
        # Global rules — mają dostęp do danych ze wszystkich etapów
        result = GlobalRules(self.context).check(self.run_data)
        for alert in result.alerts:
            alert.stage = 'global'
            logger.warning(f"[global] ALERT: {alert.business_rule} — {alert.description}")
        self.alerts.extend(result.alerts)

    def _get_page(self, page_cls):
        return page_cls(self.page, self.context)

    def _process_result(self, result: RulesResult, stage: str):
        """
        Przetwarza wynik rules:
        - Zapisuje alerty (z etapem)
        - Akumuluje instrukcje dla kolejnych pages
        - Rzuca StopTest jeśli rules zdecydowały o zatrzymaniu
        """
        for alert in result.alerts:
            alert.stage = stage
            if alert.is_counted:
                logger.warning(f"[{stage}] ALERT: {alert.business_rule} — {alert.description}")
            else:
                logger.info(f"[{stage}] ZNANA ROZBIEŻNOŚĆ: {alert.business_rule} — {alert.description}")
        self.alerts.extend(result.alerts)

        # Instrukcje są addytywne, kolejne etapy mogą je nadpisywać
        self.instructions.update(result.instructions)

        if result.should_stop:
            raise StopTest(stage=stage, reason=result.stop_reason, expected=result.stop_expected)
