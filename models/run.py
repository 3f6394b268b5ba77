from sqlalchemy import String, Enum, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from models.base import Base, UTCDateTime, as_utc, now_utc
from datetime import datetime
import enum


class RunStatus(str, enum.Enum):
    RUNNING = "running"
    SUCCESS = "success"
    FAILED = "failed"


class ScenarioRun(Base):
    """
    Jedno uruchomienie scenariusza z katalogu.
    Status FAILED gdy jest choć jeden liczony alert albo test stanął nieoczekiwanie.
    """
    __tablename__ = "scenario_runs"

    id: Mapped[int] = mapped_column(primary_key=True)
    scenario_name: Mapped[str] = mapped_column(String(255), nullable=False)
    base_url: Mapped[str] = mapped_column(String(500), nullable=False)
    username: Mapped[str | None] = mapped_column(String(100))

    status: Mapped[RunStatus] = mapped_column(
        Enum(RunStatus), default=RunStatus.RUNNING, nullable=False
    )
    started_at: Mapped[datetime] = mapped_column(UTCDateTime, default=now_utc)
    finished_at: Mapped[datetime | None] = mapped_column(UTCDateTime)

    # Wyniki
    stopped_at: Mapped[str | None] = mapped_column(String(50))
    stop_reason: Mapped[str | None] = mapped_column(Text)
    product_names: Mapped[str | None] = mapped_column(Text)   # nazwy w koszyku, po przecinku
    screenshot_url: Mapped[str | None] = mapped_column(String(1000))

    # Relacje
    basket_snapshots: Mapped[list["BasketSnapshot"]] = relationship(
        back_populates="run", cascade="all, delete-orphan"
    )
    alerts: Mapped[list["Alert"]] = relationship(
        back_populates="run", cascade="all, delete-orphan"
    )

    @property
    def duration_seconds(self) -> int | None:
        if self.finished_at and self.started_at:
            return int((as_utc(self.finished_at) - as_utc(self.started_at)).total_seconds())
        return None

    def __repr__(self) -> str:
        return f"<ScenarioRun id={self.id} scenario={self.scenario_name} status={self.status}>"
