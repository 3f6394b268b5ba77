# Wszystkie modele w jednym miejscu — create_all musi je widzieć
from models.base import Base
from models.run import ScenarioRun, RunStatus
from models.basket_snapshot import BasketSnapshot
from models.alert import Alert, AlertType
