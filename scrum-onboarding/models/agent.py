"""
Agent models — the selectable assistant personas and the team roster.

Agent:      A selectable onboarding agent. Name and avatar are editable
            during agent selection; the voice tag is fixed at creation.
TeamMember: A read-only roster entry shown on the dashboard.
"""

from pydantic import BaseModel, ConfigDict
from typing import Literal

CONTRIBUTION_LEVELS = Literal["Low", "Medium", "High"]

# Ordinal ranking so contribution levels can be compared and sorted
CONTRIBUTION_RANK = {"Low": 0, "Medium": 1, "High": 2}


class Agent(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    id: int
    name: str
    avatar: str                # one of the allowed avatar references
    voice: str                 # voice tag, e.g. "calm"


class TeamMember(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    role: str
    contribution: CONTRIBUTION_LEVELS = "Medium"

    @property
    def contribution_rank(self) -> int:
        return CONTRIBUTION_RANK[self.contribution]
