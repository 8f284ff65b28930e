"""Version information for llm-docker.

Version is defined in pyproject.toml and read at runtime via importlib.metadata.
"""

from importlib.metadata import PackageNotFoundError, version


def get_version() -> str:
    """Get version string from package metadata."""
    try:
        return version("llm-docker")
    except PackageNotFoundError:
        # Fallback for running from a source checkout
        return "0.0.0+dev"


__version__ = get_version()
