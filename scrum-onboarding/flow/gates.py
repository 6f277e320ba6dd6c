"""
Forward-navigation gates, one per step.

Each gate is a pure predicate over the controller's current state. The
table covers every step, so can_advance() never falls through.
"""

from typing import Any, Callable

from models.flow import Step

Gate = Callable[[Any], bool]


def _always(state) -> bool:
    return True


def _agent_selected(state) -> bool:
    return state.selected_agent_id is not None


def _integration_connected(state) -> bool:
    return state.integrations.any_connected()


def _knowledge_base_filled(state) -> bool:
    return len(state.knowledge_base) > 0


def _terminal(state) -> bool:
    return False


GATES: dict[Step, Gate] = {
    Step.WELCOME: _always,
    Step.AGENT_SELECTION: _agent_selected,
    Step.INTEGRATIONS: _integration_connected,
    Step.CONFIRMATION: _always,
    Step.KNOWLEDGE_BASE: _knowledge_base_filled,
    Step.DASHBOARD: _terminal,
}

# Human-readable reason shown when a gate blocks
GATE_HINTS: dict[Step, str] = {
    Step.AGENT_SELECTION: "Select an agent to continue",
    Step.INTEGRATIONS: "Connect at least one integration to continue",
    Step.KNOWLEDGE_BASE: "Add at least one knowledge base item to continue",
    Step.DASHBOARD: "Already at the final step",
}


def gate_for(step: int) -> Gate:
    return GATES[Step(step)]
