"""Shared fixtures. Puts the app directory on sys.path like the other Tests scripts."""

import sys
from pathlib import Path

import pytest

app_dir = Path(__file__).resolve().parent.parent / "scrum-onboarding"
sys.path.insert(0, str(app_dir))

from flow.session import OnboardingSession  # noqa: E402

ANALYTICS_DELAY = 2.0


class FakeClock:
    """Manually advanced stand-in for time.monotonic."""

    def __init__(self, start: float = 100.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def tick(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def session(clock):
    return OnboardingSession(clock=clock, analytics_delay=ANALYTICS_DELAY)


@pytest.fixture
def ctrl(session):
    return session.controller


def walk_to(ctrl, step: int) -> None:
    """Drive the controller forward to ``step`` satisfying each gate on the way."""
    while ctrl.step < step:
        if ctrl.step == 2 and ctrl.selected_agent_id is None:
            ctrl.select_agent(1)
        if ctrl.step == 3 and not ctrl.integrations.any_connected():
            ctrl.set_integration("github", True)
        result = ctrl.advance()
        assert result.ok, result.message
