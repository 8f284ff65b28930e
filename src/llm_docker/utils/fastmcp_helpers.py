"""Helper functions for FastMCP integration."""

from typing import Any

from fastmcp import FastMCP

from llm_docker.utils.safety import OperationSafety
from llm_docker.version import __version__


def create_fastmcp_app(name: str = "llm-docker") -> FastMCP:
    """Create and configure a FastMCP application instance.

    Args:
        name: Application name (default: "llm-docker")

    Returns:
        Configured FastMCP instance
    """
    return FastMCP(
        name=name,
        version=__version__,
    )


def get_mcp_annotations(
    safety_level: OperationSafety,
    idempotent: bool = False,
    open_world: bool = False,
) -> dict[str, Any]:
    """Get MCP tool annotations for a tool.

    Args:
        safety_level: The safety level of the operation
        idempotent: Whether repeating the call has no additional effect
        open_world: Whether the tool reaches outside the local Docker daemon

    Returns:
        Dictionary of MCP annotation hints

    Example:
        >>> get_mcp_annotations(OperationSafety.SAFE, idempotent=True)["readOnlyHint"]
        True
    """
    return {
        "readOnlyHint": safety_level == OperationSafety.SAFE,
        "destructiveHint": safety_level == OperationSafety.DESTRUCTIVE,
        "idempotentHint": idempotent,
        "openWorldHint": open_world,
    }
