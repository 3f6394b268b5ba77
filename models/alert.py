from sqlalchemy import String, Boolean, ForeignKey, Text, Enum
from sqlalchemy.orm import Mapped, mapped_column, relationship
from models.base import Base, UTCDateTime, now_utc
from datetime import datetime
import enum


class AlertType(str, enum.Enum):
    BUG = "bug"
    TO_VERIFY = "to_verify"
    CONFIG = "config"
    KNOWN_DIVERGENCE = "known_divergence"


class Alert(Base):
    """
    Alert z reguły biznesowej podczas uruchomienia scenariusza.

    is_counted=False dla znanych rozbieżności sklepu z wymaganiami —
    zapisujemy je osobno, ale nie oblewają runu.
    """
    __tablename__ = "alerts"

    id: Mapped[int] = mapped_column(primary_key=True)
    run_id: Mapped[int] = mapped_column(ForeignKey("scenario_runs.id"), nullable=False)

    alert_type: Mapped[AlertType] = mapped_column(Enum(AlertType), nullable=False)
    stage: Mapped[str | None] = mapped_column(String(50))
    business_rule: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    is_counted: Mapped[bool] = mapped_column(Boolean, default=True)
    created_at: Mapped[datetime] = mapped_column(UTCDateTime, default=now_utc)

    # Relacje
    run: Mapped["ScenarioRun"] = relationship(back_populates="alerts")

    def __repr__(self) -> str:
        return f"<Alert [{self.alert_type}] {self.business_rule} | {(self.description or '')[:50]}>"
