"""
Scenario Executor — uruchamia pojedynczy scenariusz testowy.
Tworzy run w bazie, otwiera izolowany kontekst przeglądarki i oddaje
sterowanie do ShopRunner.
"""

import logging
from datetime import datetime, timezone
from pathlib import Path

from playwright.async_api import Browser
from sqlalchemy.orm import Session

import config
from core.alert_engine import AlertEngine
from models.basket_snapshot import BasketSnapshot
from models.run import ScenarioRun, RunStatus
from scenarios.context import ScenarioContext
from scenarios.rules.base_rules import BaseRules
from scenarios.shop_runner import ShopRunner, ShopRunResult
from verification.errors import ParseError
from verification.prices import parse_currency

logger = logging.getLogger(__name__)


class ScenarioExecutor:
    """Wykonuje pojedynczy scenariusz testowy przez Playwright."""

    def __init__(self, context: ScenarioContext, browser: Browser, db: Session, screenshot_root: str | None = None):
        self.context = context
        self.browser = browser
        self.db = db
        self.screenshot_root = screenshot_root or config.SCREENSHOT_DIR
        self.scenario_run = None
        self.alert_engine = None

    async def run(self) -> ScenarioRun:
        """Uruchamia scenariusz i zwraca ScenarioRun z wynikami."""

        self.scenario_run = ScenarioRun(
            scenario_name=self.context.scenario_name,
            base_url=self.context.base_url,
            username=self.context.username,
            status=RunStatus.RUNNING,
            started_at=datetime.now(timezone.utc),
        )
        self.db.add(self.scenario_run)
        self.db.commit()
        self.db.refresh(self.scenario_run)

        self.alert_engine = AlertEngine(run_id=self.scenario_run.id, db=self.db)

        logger.info(f"[RUN #{self.scenario_run.id}] Start: {self.context.scenario_name}")

        try:
            result = await self._execute()

            if not result.success or self.alert_engine.counted_alerts() > 0:
                self.scenario_run.status = RunStatus.FAILED
            else:
                self.scenario_run.status = RunStatus.SUCCESS

        except Exception as e:
            logger.error(f"[RUN #{self.scenario_run.id}] Nieoczekiwany błąd: {e}", exc_info=True)
            self.scenario_run.status = RunStatus.FAILED
            self.alert_engine.add_alert("SCENARIO_UNEXPECTED_ERROR", description=str(e))

        finally:
            self.alert_engine.save_all()
            self.scenario_run.finished_at = datetime.now(timezone.utc)
            self.db.commit()

            logger.info(
                f"[RUN #{self.scenario_run.id}] Finished: {self.scenario_run.status.value} | "
                f"Duration: {self.scenario_run.duration_seconds}s | "
                f"Alerts: {self.alert_engine.counted_alerts()}"
            )

        return self.scenario_run

    async def _execute(self) -> ShopRunResult:
        # Każdy scenariusz we własnym kontekście: osobne cookies i koszyk
        browser_context = await self.browser.new_context(viewport=config.VIEWPORT)
        page = await browser_context.new_page()

        try:
            screenshot_dir = f"{self.screenshot_root}/{self.scenario_run.id}"
            Path(screenshot_dir).mkdir(parents=True, exist_ok=True)

            runner = ShopRunner(page=page, context=self.context, screenshot_dir=screenshot_dir)
            result = await runner.run()

            self._save_run_data(result)

            for alert in result.alerts:
                self.alert_engine.add(alert)

            if result.stopped_at:
                self.scenario_run.stopped_at = result.stopped_at
                self.scenario_run.stop_reason = result.stop_reason
                logger.info(
                    f"[RUN #{self.scenario_run.id}] "
                    f"Zatrzymano na: {result.stopped_at} | "
                    f"Sukces: {result.success}"
                )

            return result

        finally:
            await browser_context.close()

    def _save_run_data(self, result: ShopRunResult) -> None:
        rd = result.run_data

        if rd.cart and rd.cart.items_after:
            self.scenario_run.product_names = ", ".join(i.name for i in rd.cart.items_after)

        if result.screenshots:
            self.scenario_run.screenshot_url = list(result.screenshots.values())[-1]

        snapshots = []
        if rd.listing:
            snapshots.append(BasketSnapshot(
                run_id=self.scenario_run.id,
                stage='listing',
                badge_count=BaseRules.badge_count(rd.listing.badge_text),
                raw_data={
                    'screenshot': result.screenshots.get('listing'),
                    'sort_option': rd.listing.sort_option,
                    'products': [[p.name, p.price_text] for p in rd.listing.products],
                },
            ))
        if rd.cart:
            snapshots.append(BasketSnapshot(
                run_id=self.scenario_run.id,
                stage='cart',
                item_count=len(rd.cart.items_after),
                badge_count=BaseRules.badge_count(rd.cart.badge_text),
                total_price=_amount(rd.cart.total_text),
                raw_data={
                    'screenshot': result.screenshots.get('cart'),
                    'items': [[i.name, i.price_text] for i in rd.cart.items_after],
                },
            ))
        if rd.overview:
            snapshots.append(BasketSnapshot(
                run_id=self.scenario_run.id,
                stage='overview',
                item_count=len(rd.overview.items),
                subtotal=_amount(rd.overview.subtotal_text),
                tax=_amount(rd.overview.tax_text),
                total_price=_amount(rd.overview.total_text),
                raw_data={
                    'screenshot': result.screenshots.get('overview'),
                    'subtotal': rd.overview.subtotal_text,
                    'tax': rd.overview.tax_text,
                    'total': rd.overview.total_text,
                },
            ))
        if rd.complete:
            snapshots.append(BasketSnapshot(
                run_id=self.scenario_run.id,
                stage='complete',
                badge_count=BaseRules.badge_count(rd.complete.badge_text),
                raw_data={'screenshot': result.screenshots.get('complete'), 'header': rd.complete.header},
            ))
        if snapshots:
            self.db.add_all(snapshots)


def _amount(text: str | None):
    # Snapshot to historia, nieparsowalna kwota jest już alertem z rules
    try:
        return parse_currency(text)
    except ParseError:
        return None
