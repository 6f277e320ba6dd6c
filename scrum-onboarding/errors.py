"""
Errors raised by the onboarding stores and the flow controller.

All of these are validation failures: local, synchronous and non-fatal.
The controller turns them into OperationResult failures; nothing retries.
"""


class FlowError(Exception):
    """Base class. ``reason`` is the stable code reported to the UI."""

    reason = "flow_error"

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.reason)
        self.message = message or self.reason


class NotFound(FlowError):
    reason = "not_found"


class InvalidKey(FlowError):
    reason = "invalid_key"


class EmptyContent(FlowError):
    reason = "empty_content"


class NotAllowed(FlowError):
    reason = "not_allowed"


class InvalidAvatar(FlowError):
    reason = "invalid_avatar"
