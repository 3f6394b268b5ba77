import pytest

from scenarios.context import ScenarioContext
from scenarios.run_data import RunData
from tests.builders import BASE_URL


@pytest.fixture
def make_context():
    def _make(**data) -> ScenarioContext:
        return ScenarioContext.from_dict("test", data, BASE_URL)
    return _make


@pytest.fixture
def run_data() -> RunData:
    return RunData()
