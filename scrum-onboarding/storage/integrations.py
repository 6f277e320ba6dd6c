"""
IntegrationToggleSet — fixed-key map of integration name to connected flag.

The key set never changes; only the values toggle. No integration here
talks to a real service.
"""

import logging

from errors import InvalidKey
from models.integration import INTEGRATION_ORDER

logger = logging.getLogger(__name__)


class IntegrationToggleSet:
    def __init__(self) -> None:
        self._state: dict[str, bool] = {}
        self.reset()

    def _check(self, key: str) -> None:
        if key not in INTEGRATION_ORDER:
            raise InvalidKey(f"Unknown integration {key!r}; expected one of {list(INTEGRATION_ORDER)}")

    def get(self, key: str) -> bool:
        self._check(key)
        return self._state[key]

    def set(self, key: str, value: bool) -> None:
        self._check(key)
        self._state[key] = bool(value)
        logger.debug("IntegrationToggleSet: %s -> %s", key, self._state[key])

    def items(self) -> list[tuple[str, bool]]:
        """All (key, value) pairs in the fixed display order."""
        return [(key, self._state[key]) for key in INTEGRATION_ORDER]

    def snapshot(self) -> dict[str, bool]:
        return dict(self.items())

    def any_connected(self) -> bool:
        return any(self._state.values())

    def reset(self) -> None:
        self._state = {key: False for key in INTEGRATION_ORDER}
