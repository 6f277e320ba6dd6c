"""
Flow models — step metadata plus the read-only views handed to the
presentation layer.

FlowSnapshot:    Everything a stage needs to render, captured at one moment.
OperationResult: Outcome of a mutating operation, carrying the snapshot.
"""

from enum import IntEnum
from pydantic import BaseModel, Field
from typing import Optional

from config import TOTAL_STEPS
from models.agent import Agent, TeamMember
from models.knowledge import KnowledgeItem


class Step(IntEnum):
    WELCOME = 1
    AGENT_SELECTION = 2
    INTEGRATIONS = 3
    CONFIRMATION = 4
    KNOWLEDGE_BASE = 5
    DASHBOARD = 6


FIRST_STEP = Step.WELCOME
LAST_STEP = Step(TOTAL_STEPS)


# ------------------------------------------------------------------ #
# Step metadata (for UI display)                                      #
# ------------------------------------------------------------------ #

STEP_META = {
    Step.WELCOME: {"key": "welcome", "label": "Welcome"},
    Step.AGENT_SELECTION: {"key": "agent_selection", "label": "Choose your agent"},
    Step.INTEGRATIONS: {"key": "integrations", "label": "Connect your tools"},
    Step.CONFIRMATION: {"key": "confirmation", "label": "Agent onboarded"},
    Step.KNOWLEDGE_BASE: {"key": "knowledge_base", "label": "Knowledge base"},
    Step.DASHBOARD: {"key": "dashboard", "label": "Dashboard"},
}


class FlowSnapshot(BaseModel):
    step: int
    step_key: str
    can_advance: bool
    selected_agent: Optional[Agent] = None
    integrations: dict[str, bool] = Field(default_factory=dict)
    knowledge_base: list[KnowledgeItem] = Field(default_factory=list)
    agents: list[Agent] = Field(default_factory=list)
    team: list[TeamMember] = Field(default_factory=list)
    analytics_ready: bool = False

    # login stage state (inert, no backing service)
    login_email: str = ""
    logged_in: bool = False
    is_guest: bool = False


class OperationResult(BaseModel):
    ok: bool
    item: Optional[KnowledgeItem] = None   # set by add_knowledge_item
    error: Optional[str] = None       # failure reason code, e.g. "not_found"
    message: str = ""
    snapshot: FlowSnapshot
