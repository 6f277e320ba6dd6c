"""
OnboardingSession — one isolated instance of the onboarding flow.

Holds the three stores and the controller that mutates them. A
presentation layer keeps a reference to the session and talks to
``session.controller``; nothing is looked up implicitly.
"""

import logging
import time
import uuid
from typing import Callable, Optional

from config import ANALYTICS_DELAY_SECONDS
from flow.controller import FlowController
from registry.entity_registry import EntityRegistry
from storage.integrations import IntegrationToggleSet
from storage.knowledge_base import KnowledgeBaseStore

logger = logging.getLogger(__name__)


def _short_id() -> str:
    return uuid.uuid4().hex[:8]


class OnboardingSession:
    def __init__(
        self,
        registry: Optional[EntityRegistry] = None,
        knowledge_base: Optional[KnowledgeBaseStore] = None,
        integrations: Optional[IntegrationToggleSet] = None,
        clock: Callable[[], float] = time.monotonic,
        analytics_delay: float = ANALYTICS_DELAY_SECONDS,
    ):
        self.id = _short_id()
        self.registry = registry if registry is not None else EntityRegistry()
        self.knowledge_base = knowledge_base if knowledge_base is not None else KnowledgeBaseStore()
        self.integrations = integrations if integrations is not None else IntegrationToggleSet()
        self.controller = FlowController(
            self.registry,
            self.knowledge_base,
            self.integrations,
            clock=clock,
            analytics_delay=analytics_delay,
        )
        logger.info("OnboardingSession %s: created", self.id)

    def snapshot(self):
        return self.controller.snapshot()

    def reset(self):
        return self.controller.reset()

    def __repr__(self) -> str:
        return f"<OnboardingSession id={self.id} step={self.controller.step}>"


def create_session(**kwargs) -> OnboardingSession:
    """Start a fresh session seeded with the default catalog."""
    return OnboardingSession(**kwargs)
