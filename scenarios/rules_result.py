from dataclasses import dataclass, field

# Typy alertów — known_divergence to znane rozbieżności sklepu z wymaganiami,
# zapisywane osobno i NIE liczone do wyniku runu
BUG = "bug"
TO_VERIFY = "to_verify"
CONFIG = "config"
KNOWN_DIVERGENCE = "known_divergence"


@dataclass
class AlertResult:
    business_rule: str
    description: str = ""
    alert_type: str = BUG
    stage: str = ""

    @property
    def is_counted(self) -> bool:
        return self.alert_type != KNOWN_DIVERGENCE


@dataclass
class RulesResult:
    alerts: list[AlertResult] = field(default_factory=list)
    should_stop: bool = False
    stop_reason: str = ""
    # Stop oczekiwany (scenariusz negatywny) vs stop z powodu błędu sklepu
    stop_expected: bool = True
    instructions: dict = field(default_factory=dict)
    # Przykłady instrukcji przekazywanych do kolejnych pages:
    # {'stop_at_cart': True}
    # {'stop_at_overview': True}
