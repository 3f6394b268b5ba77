"""
Alert Engine — zbiera alerty z rules i zapisuje do bazy.

ZASADA: znane rozbieżności (known_divergence) zapisujemy z is_counted=False —
są widoczne w historii, ale nie oblewają runu.
"""

import logging
from sqlalchemy.orm import Session

from models.alert import Alert, AlertType
from scenarios.rules_result import AlertResult

logger = logging.getLogger(__name__)


class AlertEngine:
    """Zbiera alerty podczas wykonywania scenariusza."""

    def __init__(self, run_id: int, db: Session):
        self.run_id = run_id
        self.db = db
        self.alerts: list[Alert] = []

    def add(self, result: AlertResult):
        self.add_alert(
            result.business_rule,
            description=result.description,
            alert_type=result.alert_type,
            stage=result.stage,
        )

    def add_alert(
        self,
        rule: str,
        description: str | None = None,
        alert_type: str = AlertType.BUG.value,
        stage: str | None = None,
    ):
        """
        Args:
            rule: business_rule (np. "OVERVIEW_TOTAL_MISMATCH")
            description: szczegóły (np. obie kwoty i delta)
        """
        try:
            kind = AlertType(alert_type)
        except ValueError:
            logger.warning(f"Nieznany typ alertu '{alert_type}' dla {rule} — zapisuję jako bug")
            kind = AlertType.BUG

        alert = Alert(
            run_id=self.run_id,
            alert_type=kind,
            stage=stage or None,
            business_rule=rule,
            description=description,
            is_counted=kind != AlertType.KNOWN_DIVERGENCE,
        )
        self.alerts.append(alert)
        logger.debug(f"Alert dodany: {rule} [{kind.value}]")

    def counted_alerts(self) -> int:
        return len([a for a in self.alerts if a.is_counted])

    def save_all(self):
        if not self.alerts:
            logger.debug("Brak alertów do zapisania")
            return

        self.db.add_all(self.alerts)
        self.db.flush()

        logger.info(f"Zapisano {len(self.alerts)} alertów ({self.counted_alerts()} liczonych)")
