from .default_agents import (
    AVATAR_OPTIONS,
    VOICE_SAMPLES,
    DEFAULT_AGENTS,
    DEFAULT_TEAM,
    SEED_KNOWLEDGE_BASE,
)

__all__ = [
    "AVATAR_OPTIONS",
    "VOICE_SAMPLES",
    "DEFAULT_AGENTS",
    "DEFAULT_TEAM",
    "SEED_KNOWLEDGE_BASE",
]
