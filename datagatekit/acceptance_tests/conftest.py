# datagatekit/acceptance_tests/conftest.py
import pytest
from .drivers.gate_driver import InMemoryDriver, SQLiteDriver
from .dsl.gate_dsl import GateDSL


@pytest.fixture(params=[InMemoryDriver, SQLiteDriver], ids=["inmemory", "sqlite"])
def driver(request):
    return request.param()


@pytest.fixture
def dsl(driver):
    scenario = GateDSL(driver)
    yield scenario
    if scenario.orchestrator is not None:
        scenario.orchestrator.close()
