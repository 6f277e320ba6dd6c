"""
FlowController — step position, forward gating and edit dispatch for one
onboarding session.

The controller owns the current step and the selected-agent reference.
It shares the EntityRegistry, KnowledgeBaseStore and IntegrationToggleSet
with its Session and is the only thing that mutates them.

Every mutating operation returns an OperationResult:
  - ok=True with a fresh FlowSnapshot, or
  - ok=False with the failure reason and the unchanged snapshot.

Failed operations never leave partial changes behind: each one validates
before it writes.

The dashboard step has one timed behaviour. Entering it schedules a
DeferredTransition that flips ``analytics_ready`` after
ANALYTICS_DELAY_SECONDS; leaving it cancels the transition, and
re-entering restarts it from False.
"""

import logging
import time
from typing import Callable, Optional

from config import ANALYTICS_DELAY_SECONDS
from errors import EmptyContent, FlowError, InvalidKey, NotAllowed, NotFound
from flow.gates import GATE_HINTS, gate_for
from flow.timer import DeferredTransition
from models.agent import Agent
from models.flow import FIRST_STEP, LAST_STEP, STEP_META, FlowSnapshot, OperationResult, Step
from models.integration import LOGIN_PROVIDERS
from models.knowledge import KnowledgeItem
from registry.entity_registry import EntityRegistry
from storage.integrations import IntegrationToggleSet
from storage.knowledge_base import KnowledgeBaseStore

logger = logging.getLogger(__name__)


class FlowController:
    def __init__(
        self,
        registry: EntityRegistry,
        knowledge_base: KnowledgeBaseStore,
        integrations: IntegrationToggleSet,
        clock: Callable[[], float] = time.monotonic,
        analytics_delay: float = ANALYTICS_DELAY_SECONDS,
    ):
        self.registry = registry
        self.knowledge_base = knowledge_base
        self.integrations = integrations

        self._step: Step = FIRST_STEP
        self.selected_agent_id: Optional[int] = None
        self._analytics_ready = False
        self._analytics = DeferredTransition(
            analytics_delay, self._mark_analytics_ready, clock=clock, name="analytics"
        )

        # login stage (inert flags, no backing service)
        self.login_email = ""
        self.logged_in = False
        self.is_guest = False

    # ------------------------------------------------------------------ #
    # Read accessors                                                      #
    # ------------------------------------------------------------------ #

    @property
    def step(self) -> int:
        return int(self._step)

    @property
    def step_key(self) -> str:
        return STEP_META[self._step]["key"]

    @property
    def selected_agent(self) -> Optional[Agent]:
        if self.selected_agent_id is None:
            return None
        return self.registry.get_agent(self.selected_agent_id)

    @property
    def analytics_ready(self) -> bool:
        self.poll()
        return self._analytics_ready

    @property
    def analytics_pending(self) -> bool:
        return self._analytics.pending

    def poll(self) -> None:
        """Run the dashboard transition if its delay has elapsed."""
        self._analytics.poll()

    def can_advance(self) -> bool:
        return gate_for(self._step)(self)

    def voice_sample(self, agent_id: int) -> Optional[str]:
        return self.registry.voice_sample(agent_id)

    def snapshot(self) -> FlowSnapshot:
        self.poll()
        return FlowSnapshot(
            step=self.step,
            step_key=self.step_key,
            can_advance=self.can_advance(),
            selected_agent=self.selected_agent,
            integrations=self.integrations.snapshot(),
            knowledge_base=self.knowledge_base.list_items(),
            agents=self.registry.list_agents(),
            team=self.registry.team_members(),
            analytics_ready=self._analytics_ready,
            login_email=self.login_email,
            logged_in=self.logged_in,
            is_guest=self.is_guest,
        )

    # ------------------------------------------------------------------ #
    # Navigation                                                          #
    # ------------------------------------------------------------------ #

    def advance(self) -> OperationResult:
        def _advance():
            if not self.can_advance():
                raise NotAllowed(GATE_HINTS.get(self._step, "Cannot continue from this step"))
            self._move_to(Step(self._step + 1))

        return self._run("advance", _advance)

    def retreat(self) -> OperationResult:
        def _retreat():
            if self._step > FIRST_STEP:
                self._move_to(Step(self._step - 1))

        return self._run("retreat", _retreat)

    def _move_to(self, target: Step) -> None:
        # a transition that is already due fires before the step changes
        self._analytics.poll()
        previous = self._step
        if previous == LAST_STEP and target != LAST_STEP:
            self._analytics.cancel()
        self._step = target
        if target == LAST_STEP and previous != LAST_STEP:
            self._analytics_ready = False
            self._analytics.schedule()
        logger.info("FlowController: step %d -> %d (%s)", previous, target, STEP_META[target]["key"])

    def _mark_analytics_ready(self) -> None:
        if self._step != LAST_STEP:
            return
        self._analytics_ready = True
        logger.info("FlowController: analytics ready")

    # ------------------------------------------------------------------ #
    # Welcome / login                                                     #
    # ------------------------------------------------------------------ #

    def set_login_email(self, email: str) -> OperationResult:
        def _set():
            self.login_email = (email or "").strip()

        return self._run("set_login_email", _set)

    def login(self, provider: Optional[str] = None) -> OperationResult:
        """
        Record a login and move on to agent selection.

        Provider buttons log in directly; the plain Continue path needs an
        email first.
        """
        def _login():
            self._require_step(Step.WELCOME, "login")
            if provider is not None and provider not in LOGIN_PROVIDERS:
                raise InvalidKey(f"Unknown login provider {provider!r}")
            if provider is None and not self.login_email:
                raise EmptyContent("Enter an email address to continue")
            self.logged_in = True
            self.is_guest = False
            self._move_to(Step.AGENT_SELECTION)

        return self._run("login", _login)

    def continue_as_guest(self) -> OperationResult:
        """Skip login and agent selection, landing on the integrations step."""
        def _guest():
            self._require_step(Step.WELCOME, "continue_as_guest")
            self.is_guest = True
            self.logged_in = False
            self._move_to(Step.INTEGRATIONS)

        return self._run("continue_as_guest", _guest)

    def _require_step(self, step: Step, action: str) -> None:
        if self._step != step:
            raise NotAllowed(f"{action} is only available on the {STEP_META[step]['key']} step")

    # ------------------------------------------------------------------ #
    # Agents                                                              #
    # ------------------------------------------------------------------ #

    def select_agent(self, agent_id: int) -> OperationResult:
        def _select():
            if not self.registry.has_agent(agent_id):
                raise NotFound(f"Agent {agent_id!r} does not exist")
            self.selected_agent_id = agent_id
            logger.debug("FlowController: selected agent %s", agent_id)

        return self._run("select_agent", _select)

    def update_agent(
        self,
        agent_id: int,
        name: Optional[str] = None,
        avatar: Optional[str] = None,
    ) -> OperationResult:
        return self._run(
            "update_agent",
            lambda: self.registry.update_agent(agent_id, name=name, avatar=avatar),
        )

    # ------------------------------------------------------------------ #
    # Integrations                                                        #
    # ------------------------------------------------------------------ #

    def set_integration(self, key: str, value: bool) -> OperationResult:
        return self._run("set_integration", lambda: self.integrations.set(key, value))

    # ------------------------------------------------------------------ #
    # Knowledge base                                                      #
    # ------------------------------------------------------------------ #

    def add_knowledge_item(self, type: str, content: str) -> OperationResult:
        added: list[KnowledgeItem] = []
        result = self._run(
            "add_knowledge_item",
            lambda: added.append(self.knowledge_base.add(type, content)),
        )
        if added:
            result.item = added[0]
        return result

    def remove_knowledge_item(self, item_id: int) -> OperationResult:
        def _remove():
            if not self.knowledge_base.remove(item_id):
                logger.debug("FlowController: knowledge item %s already absent", item_id)

        return self._run("remove_knowledge_item", _remove)

    # ------------------------------------------------------------------ #
    # Reset                                                               #
    # ------------------------------------------------------------------ #

    def reset(self) -> OperationResult:
        def _reset():
            self._analytics.cancel()
            self._analytics_ready = False
            self._step = FIRST_STEP
            self.selected_agent_id = None
            self.login_email = ""
            self.logged_in = False
            self.is_guest = False
            self.integrations.reset()
            self.knowledge_base.reset()
            self.registry.reset()
            logger.info("FlowController: reset to seed state")

        return self._run("reset", _reset)

    # ------------------------------------------------------------------ #
    # Internals                                                           #
    # ------------------------------------------------------------------ #

    def _run(self, op: str, fn: Callable[[], object]) -> OperationResult:
        try:
            fn()
        except FlowError as exc:
            logger.warning("FlowController: %s rejected (%s): %s", op, exc.reason, exc.message)
            return OperationResult(
                ok=False, error=exc.reason, message=exc.message, snapshot=self.snapshot()
            )
        return OperationResult(ok=True, snapshot=self.snapshot())

    def __repr__(self) -> str:
        return f"<FlowController step={self.step} agent={self.selected_agent_id}>"
