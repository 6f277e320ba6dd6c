"""
Knowledge base models.

A KnowledgeItem is immutable once created: replacing one means removing it
and adding a new item with a fresh id.
"""

from pydantic import BaseModel, ConfigDict
from typing import Literal, get_args

KNOWLEDGE_TYPES = Literal["text", "link", "pdf", "video"]


class KnowledgeItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    type: KNOWLEDGE_TYPES
    content: str


# ------------------------------------------------------------------ #
# Knowledge type metadata (for UI display)                            #
# ------------------------------------------------------------------ #

KNOWLEDGE_TYPE_META = {
    "text": {"label": "Text", "emoji": "📝"},
    "link": {"label": "Link", "emoji": "🔗"},
    "pdf": {"label": "PDF", "emoji": "📄"},
    "video": {"label": "Video", "emoji": "🎬"},
}


def knowledge_type_names() -> tuple[str, ...]:
    return get_args(KNOWLEDGE_TYPES)
