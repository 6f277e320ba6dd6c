"""
KnowledgeBaseStore — ordered, in-memory collection of KnowledgeItems.

Items keep insertion order. Ids come from a counter that only moves
forward, so an id is never handed out twice by the same store, even
across reset().
"""

import logging
from typing import Iterable, Optional

from pydantic import ValidationError

from agents.default_agents import SEED_KNOWLEDGE_BASE
from errors import EmptyContent, InvalidKey
from models.knowledge import KnowledgeItem, knowledge_type_names

logger = logging.getLogger(__name__)


class KnowledgeBaseStore:
    """Single access point for the session's knowledge base."""

    def __init__(self, seed: Optional[Iterable[KnowledgeItem]] = None) -> None:
        self._seed = tuple(SEED_KNOWLEDGE_BASE if seed is None else seed)
        self._items: list[KnowledgeItem] = []
        self._next_id = 1
        self.reset()

    def list_items(self) -> list[KnowledgeItem]:
        return list(self._items)

    def get(self, item_id: int) -> Optional[KnowledgeItem]:
        for item in self._items:
            if item.id == item_id:
                return item
        return None

    def add(self, type: str, content: str) -> KnowledgeItem:
        if type not in knowledge_type_names():
            raise InvalidKey(f"Unknown knowledge type {type!r}")
        if content is None or not content.strip():
            raise EmptyContent("Knowledge item content cannot be blank")
        try:
            item = KnowledgeItem(id=self._next_id, type=type, content=content.strip())
        except ValidationError as exc:
            raise InvalidKey(str(exc)) from exc
        self._next_id += 1
        self._items.append(item)
        logger.debug("KnowledgeBaseStore: added %s item %d", item.type, item.id)
        return item

    def remove(self, item_id: int) -> bool:
        """Remove the item if present. Returns False when there was nothing to remove."""
        remaining = [i for i in self._items if i.id != item_id]
        if len(remaining) == len(self._items):
            return False
        self._items = remaining
        logger.debug("KnowledgeBaseStore: removed item %d", item_id)
        return True

    def reset(self) -> None:
        """Restore the seed content. The id counter is never rewound."""
        self._items = list(self._seed)
        highest = max((i.id for i in self._seed), default=0)
        self._next_id = max(self._next_id, highest + 1)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)
