"""
Suite Executor — uruchamia listę scenariuszy równolegle i agreguje wyniki.
Jedna przeglądarka, osobny kontekst na scenariusz, limit przez semaphore.
"""

import asyncio
import logging
import traceback
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from playwright.async_api import async_playwright
from sqlalchemy.orm import Session, sessionmaker

import config
from models.run import RunStatus
from scenarios.context import ScenarioContext
from scenarios.scenario_executor import ScenarioExecutor

logger = logging.getLogger(__name__)


@dataclass
class SuiteResult:
    total: int = 0
    success: int = 0
    failed: int = 0
    counted_alerts: int = 0
    runs: list[dict] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.failed == 0


class SuiteExecutor:
    """Orchestrator — uruchamia scenariusze, zbiera statusy i alerty."""

    def __init__(
        self,
        contexts: list[ScenarioContext],
        session_factory: sessionmaker,
        workers: int = config.WORKERS,
        headless: bool = config.HEADLESS,
    ):
        self.contexts = contexts
        self.session_factory = session_factory
        self.workers = max(1, workers)
        self.headless = headless
        self.log_file = None

    async def run(self) -> SuiteResult:
        logger.info(f"\n{'='*60}")
        logger.info(f"[SUITE] Scenariusze: {len(self.contexts)} | Workers: {self.workers}")
        logger.info(f"{'='*60}\n")

        self._setup_traceback_file()
        semaphore = asyncio.Semaphore(self.workers)

        async with async_playwright() as p:
            browser = await p.chromium.launch(headless=self.headless)

            async def run_with_limit(context: ScenarioContext) -> dict:
                async with semaphore:
                    db: Session = self.session_factory()
                    try:
                        run = await ScenarioExecutor(context=context, browser=browser, db=db).run()
                        return {
                            'scenario': context.scenario_name,
                            'run_id': run.id,
                            'status': run.status.value,
                            'stopped_at': run.stopped_at,
                            'alerts': [
                                a.business_rule for a in run.alerts if a.is_counted
                            ],
                        }
                    except Exception as e:
                        logger.error(f"Błąd w scenariuszu {context.scenario_name}: {e}")
                        self._write_raw_traceback(context.scenario_name, e)
                        return {'scenario': context.scenario_name, 'status': RunStatus.FAILED.value, 'alerts': []}
                    finally:
                        db.close()

            try:
                results = await asyncio.gather(*(run_with_limit(c) for c in self.contexts))
            finally:
                await browser.close()

        return self._summarize(results)

    def _summarize(self, results: list[dict]) -> SuiteResult:
        summary = SuiteResult(total=len(results), runs=results)
        for r in results:
            if r['status'] == RunStatus.SUCCESS.value:
                summary.success += 1
            else:
                summary.failed += 1
            summary.counted_alerts += len(r['alerts'])

        logger.info(f"\n{'='*60}")
        for r in results:
            alerts = f" | {', '.join(r['alerts'])}" if r['alerts'] else ""
            logger.info(f"  {r['status'].upper():8} {r['scenario']}{alerts}")
        logger.info(
            f"[SUITE] Sukces: {summary.success}/{summary.total} | "
            f"Nieudane: {summary.failed} | Alerty: {summary.counted_alerts}"
        )
        logger.info(f"{'='*60}\n")
        return summary

    def _setup_traceback_file(self):
        log_dir = Path(config.LOG_DIR)
        log_dir.mkdir(exist_ok=True)
        self.log_file = log_dir / f"tracebacks_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"

    def _write_raw_traceback(self, scenario_name: str, exception: Exception):
        if not self.log_file:
            return
        try:
            tb_lines = traceback.format_exception(type(exception), exception, exception.__traceback__)
            with open(self.log_file, 'a', encoding='utf-8') as f:
                f.write('=' * 80 + '\n')
                f.write(f'ERROR in scenario: {scenario_name}\n')
                f.write('=' * 80 + '\n')
                f.write(''.join(tb_lines))
                f.write('=' * 80 + '\n\n')
        except OSError as e:
            logger.error(f"Nie udało się zapisać tracebacku: {e}")
