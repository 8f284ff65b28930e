"""Parsing of flattened tool arguments.

Agent runtimes only pass flat scalar parameters reliably, so structured values
arrive as strings and are re-parsed here:

- Environment lists: ``"A=1, B=2"`` is split on commas, each entry trimmed,
  empty entries dropped. Lists are accepted and cleaned the same way.
- Commands: ``'sh -c "echo hi"'`` is split with POSIX shell quoting rules
  into ``["sh", "-c", "echo hi"]``. Lists are accepted as-is.
- JSON objects: dicts pass through; strings are decoded as JSON.

Blank strings mean "not provided" and parse to ``None``.
"""

import json
import shlex
from typing import Any

from llm_docker.utils.logger import get_logger

logger = get_logger(__name__)


def split_env_list(value: str | list[str] | None) -> list[str] | None:
    """Parse a comma-separated ``KEY=VALUE`` string into discrete entries.

    Args:
        value: Comma-separated string, list of entries, or None

    Returns:
        List of trimmed, non-empty entries, or None if nothing remains

    Example:
        >>> split_env_list("DEBUG=true, PORT=3000,")
        ['DEBUG=true', 'PORT=3000']
    """
    if value is None:
        return None
    items = value.split(",") if isinstance(value, str) else value
    entries = [str(item).strip() for item in items if str(item).strip()]
    return entries or None


def split_command(value: str | list[str] | None) -> list[str] | None:
    """Split a shell-style command string into an argument vector.

    Args:
        value: Command string, argument list, or None

    Returns:
        Argument vector, or None for a blank command

    Raises:
        ValueError: If the string has unbalanced quotes
    """
    if value is None:
        return None
    if isinstance(value, list):
        return [str(arg) for arg in value] or None
    if not value.strip():
        return None
    return shlex.split(value)


def parse_json_string_field(v: Any, field_name: str = "field") -> Any:
    """Parse JSON strings to objects (workaround for MCP client serialization bug).

    Args:
        v: The value to parse (dict or JSON string)
        field_name: Name of the field for error messages

    Returns:
        Parsed object if v was a string, otherwise v unchanged

    Raises:
        ValueError: If v is a string but not valid JSON
    """
    if isinstance(v, str):
        if not v.strip():
            return None
        try:
            parsed = json.loads(v)
        except json.JSONDecodeError as e:
            raise ValueError(
                f"Received invalid JSON string for {field_name}: {v[:100]}... "
                f"Expected an object/dict, not a string. Error: {e}"
            ) from e
        logger.warning(
            f"Received JSON string instead of object for {field_name}, auto-parsing. "
            "This is a workaround for MCP client serialization issues."
        )
        return parsed
    return v


def resolve_image_reference(image: str, tag: str | None = None) -> str:
    """Build the full reference for an image pull.

    An explicit tag wins; a reference that already carries a colon is used
    unchanged; anything else gets ``:latest``.

    Example:
        >>> resolve_image_reference("ubuntu")
        'ubuntu:latest'
        >>> resolve_image_reference("ubuntu", "22.04")
        'ubuntu:22.04'
    """
    if tag:
        return f"{image}:{tag}"
    if ":" in image:
        return image
    return f"{image}:latest"


__all__ = [
    "parse_json_string_field",
    "resolve_image_reference",
    "split_command",
    "split_env_list",
]
