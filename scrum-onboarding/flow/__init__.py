"""
Flow package — the onboarding step-flow controller and its session.

Quick-start:

    from flow import create_session

    session = create_session()
    ctrl = session.controller

    ctrl.login(provider="google")       # welcome -> agent selection
    ctrl.select_agent(2)
    result = ctrl.advance()              # agent selection -> integrations
    if not result.ok:
        print(result.error, result.message)
"""

from flow.gates import GATES
from flow.timer import DeferredTransition
from flow.controller import FlowController
from flow.session import OnboardingSession, create_session

__all__ = [
    "GATES",
    "DeferredTransition",
    "FlowController",
    "OnboardingSession",
    "create_session",
]
