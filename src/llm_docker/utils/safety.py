"""Operation safety classification for Docker tools."""

from enum import Enum


class OperationSafety(str, Enum):
    """Classification of operation safety levels.

    Used to advertise MCP tool annotations; it does not gate execution.
    """

    SAFE = "safe"  # Read-only operations (list, logs)
    MODERATE = "moderate"  # State-changing but reversible (create, start, stop, pull)
    DESTRUCTIVE = "destructive"  # Permanent changes (remove, recreate)
