"""
DeferredTransition — a one-shot delayed state change that can be cancelled.

There are no threads: the owner calls poll() and the callback runs only
when the deadline has passed. Each schedule() or cancel() bumps a
generation counter; fire() ignores any generation that is no longer
current, so a stale firing can never apply its effect.
"""

import logging
import time
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class DeferredTransition:
    def __init__(
        self,
        delay: float,
        callback: Callable[[], None],
        clock: Callable[[], float] = time.monotonic,
        name: str = "transition",
    ) -> None:
        self.delay = delay
        self.name = name
        self._callback = callback
        self._clock = clock
        self._generation = 0
        self._deadline: Optional[float] = None

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def pending(self) -> bool:
        return self._deadline is not None

    def schedule(self) -> int:
        """Start (or restart) the timer and return the captured generation."""
        self._generation += 1
        self._deadline = self._clock() + self.delay
        logger.debug("DeferredTransition[%s]: scheduled gen %d in %.2fs", self.name, self._generation, self.delay)
        return self._generation

    def cancel(self) -> None:
        if self._deadline is not None:
            logger.debug("DeferredTransition[%s]: cancelled gen %d", self.name, self._generation)
        self._generation += 1
        self._deadline = None

    def fire(self, generation: int) -> bool:
        """Apply the transition if ``generation`` is still current. Returns True if applied."""
        if generation != self._generation or self._deadline is None:
            logger.debug("DeferredTransition[%s]: ignoring stale gen %d", self.name, generation)
            return False
        self._deadline = None
        self._callback()
        return True

    def poll(self) -> bool:
        """Fire the pending transition if its deadline has passed."""
        if self._deadline is None or self._clock() < self._deadline:
            return False
        return self.fire(self._generation)
