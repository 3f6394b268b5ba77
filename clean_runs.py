"""
Clean Runs — usuwa historię runów, screenshoty i logi.

Użycie:
    python clean_runs.py              # interaktywne potwierdzenie
    python clean_runs.py --force      # bez pytania
    python clean_runs.py --keep-logs  # nie usuwaj logów
"""

import shutil
import sys
from pathlib import Path

import config
from database import SessionLocal, init_db
from models.alert import Alert
from models.basket_snapshot import BasketSnapshot
from models.run import ScenarioRun


def clean_runs(force: bool = False, keep_logs: bool = False):
    """Usuwa wszystkie runy razem z alertami i snapshotami."""

    if not force:
        print("⚠️  UWAGA: To usunie całą historię runów!")
        confirm = input("Czy kontynuować? (yes/no): ")
        if confirm.lower() not in ['yes', 'y']:
            print("Anulowano.")
            return

    init_db()
    db = SessionLocal()

    try:
        print("\n🗑️  Usuwanie runów...")

        # Kolejność ważna — od zależnych do głównych
        counts = {}
        counts['basket_snapshots'] = db.query(BasketSnapshot).delete()
        counts['alerts'] = db.query(Alert).delete()
        counts['scenario_runs'] = db.query(ScenarioRun).delete()

        db.commit()

        print("\n📊 Usunięte rekordy:")
        for table, count in counts.items():
            print(f"   {table}: {count}")

        screenshots = Path(config.SCREENSHOT_DIR)
        if screenshots.exists():
            shutil.rmtree(screenshots)
            print(f"\n🗑️  Usunięto katalog {screenshots}")

        if not keep_logs:
            logs_dir = Path(config.LOG_DIR)
            if logs_dir.exists():
                log_files = list(logs_dir.glob("*.log"))
                for log_file in log_files:
                    log_file.unlink()
                print(f"\n🗑️  Usunięto {len(log_files)} plików logów")

        print("\n✅ Runy wyczyszczone!")

    except Exception as e:
        db.rollback()
        print(f"\n❌ Błąd: {e}")
        raise
    finally:
        db.close()


if __name__ == "__main__":
    force = "--force" in sys.argv or "-f" in sys.argv
    keep_logs = "--keep-logs" in sys.argv

    clean_runs(force=force, keep_logs=keep_logs)
