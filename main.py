"""
Sauce Monitor
=============
Uruchamia scenariusze z katalogu równolegle z użyciem asyncio.

Użycie:
    python main.py                                  # wszystkie scenariusze
    python main.py --list                           # lista scenariuszy
    python main.py --scenario purchase_single_item  # jeden (albo kilka po przecinku)
    python main.py --workers 4                      # nadpisz liczbę workers
    python main.py --headless                       # bez okna przeglądarki (domyślnie)
    python main.py --headed                         # z oknem przeglądarki
    python main.py --base-url http://localhost:3000 # inna instancja sklepu
"""

import asyncio
import logging
import sys
from datetime import datetime
from pathlib import Path

import config
from database import SessionLocal, init_db
from scenarios import catalog
from scenarios.suite_executor import SuiteExecutor

logger = logging.getLogger(__name__)


def setup_logging():
    Path(config.LOG_DIR).mkdir(exist_ok=True)
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s | %(levelname)-8s | %(message)s",
        datefmt="%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),
            logging.FileHandler(
                f"{config.LOG_DIR}/run_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log",
                encoding="utf-8"
            )
        ]
    )


def _arg_value(argv: list[str], name: str) -> str | None:
    if name not in argv:
        return None
    idx = argv.index(name)
    if idx + 1 >= len(argv):
        raise SystemExit(f"Brak wartości dla {name}")
    return argv[idx + 1]


def parse_args(argv: list[str]):
    scenarios = None
    workers = config.WORKERS
    base_url = config.BASE_URL
    headless = "--headless" in argv or (config.HEADLESS and "--headed" not in argv)

    value = _arg_value(argv, "--scenario")
    if value:
        scenarios = [s.strip() for s in value.split(",") if s.strip()]

    value = _arg_value(argv, "--workers")
    if value:
        workers = int(value)

    value = _arg_value(argv, "--base-url")
    if value:
        base_url = value.rstrip("/")

    return scenarios, workers, base_url, headless


def main(argv: list[str]) -> int:
    if "--list" in argv:
        for name in catalog.names():
            print(name)
        return 0

    scenarios, workers, base_url, headless = parse_args(argv)
    setup_logging()

    try:
        contexts = catalog.build_contexts(scenarios, base_url)
    except KeyError as e:
        logger.error(e.args[0])
        return 2

    init_db()
    logger.info(f"Sklep: {base_url} | Scenariusze: {len(contexts)}")

    executor = SuiteExecutor(
        contexts=contexts,
        session_factory=SessionLocal,
        workers=workers,
        headless=headless,
    )
    result = asyncio.run(executor.run())
    return 0 if result.ok else 1


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
