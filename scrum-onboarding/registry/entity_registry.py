"""
EntityRegistry — the agent catalog and team roster for one session.

Usage:
    from registry import EntityRegistry

    reg = EntityRegistry()

    # Look up an agent by id
    agent = reg.get_agent(2)

    # Rename and re-skin an agent (avatar must be an allowed option)
    reg.update_agent(2, name="Mate", avatar=AVATAR_OPTIONS[0])

    # Read-only roster
    members = reg.team_members()
"""

import logging
from typing import Iterable, Optional

from agents.default_agents import (
    AVATAR_OPTIONS,
    DEFAULT_AGENTS,
    DEFAULT_TEAM,
    VOICE_SAMPLES,
)
from errors import EmptyContent, InvalidAvatar, NotFound
from models.agent import Agent, TeamMember

logger = logging.getLogger(__name__)


class EntityRegistry:
    """Registry that maps agent ids to Agent instances, plus the team roster."""

    def __init__(
        self,
        agents: Optional[Iterable[Agent]] = None,
        team: Optional[Iterable[TeamMember]] = None,
        avatar_options: Iterable[str] = AVATAR_OPTIONS,
    ) -> None:
        self._seed_agents = [a.model_copy() for a in (DEFAULT_AGENTS if agents is None else agents)]
        self._team = tuple(DEFAULT_TEAM if team is None else team)
        self._avatar_options = tuple(avatar_options)
        self._agents: dict[int, Agent] = {}
        self.reset()

    # ------------------------------------------------------------------ #
    # Agents                                                              #
    # ------------------------------------------------------------------ #

    def list_agents(self) -> list[Agent]:
        """Return copies of all agents in catalog order."""
        return [a.model_copy() for a in self._agents.values()]

    def has_agent(self, agent_id: int) -> bool:
        return agent_id in self._agents

    def get_agent(self, agent_id: int) -> Agent:
        """Return a copy of the agent, or raise NotFound."""
        agent = self._agents.get(agent_id)
        if agent is None:
            raise NotFound(f"Agent {agent_id!r} does not exist")
        return agent.model_copy()

    def update_agent(
        self,
        agent_id: int,
        *,
        name: Optional[str] = None,
        avatar: Optional[str] = None,
    ) -> Agent:
        """
        Patch an agent's name and/or avatar in place.

        Both fields are validated before either is written, so a rejected
        patch leaves the agent untouched.
        """
        agent = self._agents.get(agent_id)
        if agent is None:
            raise NotFound(f"Agent {agent_id!r} does not exist")
        if name is not None and not name.strip():
            raise EmptyContent("Agent name cannot be blank")
        if avatar is not None and avatar not in self._avatar_options:
            raise InvalidAvatar(f"Avatar {avatar!r} is not one of the allowed options")

        if name is not None:
            agent.name = name
        if avatar is not None:
            agent.avatar = avatar
        logger.debug("EntityRegistry: updated agent %d (name=%r, avatar=%r)", agent_id, name, avatar)
        return agent.model_copy()

    @property
    def avatar_options(self) -> tuple[str, ...]:
        return self._avatar_options

    def voice_sample(self, agent_id: int) -> Optional[str]:
        """Return the sample reference for the agent's voice tag, if one exists."""
        return VOICE_SAMPLES.get(self.get_agent(agent_id).voice)

    # ------------------------------------------------------------------ #
    # Team                                                                #
    # ------------------------------------------------------------------ #

    def team_members(self) -> list[TeamMember]:
        return list(self._team)

    # ------------------------------------------------------------------ #
    # Lifecycle                                                           #
    # ------------------------------------------------------------------ #

    def reset(self) -> None:
        """Restore every agent to its seed name and avatar."""
        self._agents = {a.id: a.model_copy() for a in self._seed_agents}
        logger.debug("EntityRegistry: restored %d seed agents", len(self._agents))

    def __repr__(self) -> str:
        return f"<EntityRegistry agents={list(self._agents)}>"
