from .knowledge_base import KnowledgeBaseStore
from .integrations import IntegrationToggleSet

__all__ = ["KnowledgeBaseStore", "IntegrationToggleSet"]
