import sys
from pathlib import Path

# Ensure flat-layout packages import for tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from visualizers import VisualizerRegistry, register_all


class FakeClock:
    """Millisecond clock the tests advance by hand."""

    def __init__(self, start: float = 0.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(1000.0)


@pytest.fixture
def fresh_registry() -> VisualizerRegistry:
    return register_all(VisualizerRegistry())


@pytest.fixture
def client(fresh_registry):
    from main import create_app

    app = create_app({"TESTING": True}, registry=fresh_registry)
    with app.test_client() as c:
        yield c
