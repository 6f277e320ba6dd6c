"""
Default agents and seed data shipped with the onboarding flow.

These are copied into every new session and restored on reset.
Users can rename agents and swap avatars but cannot delete them.
"""

from models.agent import Agent, TeamMember
from models.knowledge import KnowledgeItem

# ------------------------------------------------------------------ #
# Avatars and voices                                                  #
# ------------------------------------------------------------------ #

AVATAR_OPTIONS: tuple[str, ...] = (
    "https://placehold.co/100x100?text=SB",
    "https://placehold.co/100x100?text=AM",
    "https://placehold.co/100x100?text=SM",
)

VOICE_SAMPLES: dict[str, str] = {
    "calm": "https://example.com/calm.mp3",
    "energetic": "https://example.com/energetic.mp3",
    "formal": "https://example.com/formal.mp3",
}

# ------------------------------------------------------------------ #
# Agents                                                              #
# ------------------------------------------------------------------ #

DEFAULT_AGENTS: list[Agent] = [
    Agent(id=1, name="ScrumBot", avatar=AVATAR_OPTIONS[0], voice="calm"),
    Agent(id=2, name="AgileMate", avatar=AVATAR_OPTIONS[1], voice="energetic"),
    Agent(id=3, name="SprintMaster", avatar=AVATAR_OPTIONS[2], voice="formal"),
]

# ------------------------------------------------------------------ #
# Team roster (read-only)                                             #
# ------------------------------------------------------------------ #

DEFAULT_TEAM: list[TeamMember] = [
    TeamMember(id=1, name="Alice Johnson", role="Product Owner", contribution="High"),
    TeamMember(id=2, name="Bob Smith", role="Developer", contribution="Medium"),
    TeamMember(id=3, name="Cara Lee", role="QA Engineer", contribution="High"),
]

# ------------------------------------------------------------------ #
# Knowledge base seed                                                 #
# ------------------------------------------------------------------ #

SEED_KNOWLEDGE_BASE: list[KnowledgeItem] = [
    KnowledgeItem(id=1, type="text", content="Project mission: Empower agile teams with AI."),
    KnowledgeItem(id=2, type="link", content="https://scrum.ai/docs"),
]
