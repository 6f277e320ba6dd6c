from .entity_registry import EntityRegistry

__all__ = ["EntityRegistry"]
