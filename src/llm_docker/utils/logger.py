"""Logging configuration using loguru.

Console output always goes to stderr: under the stdio transport stdout carries
MCP protocol frames, and a stray log line there corrupts the session.
"""

import os
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from loguru import logger

from llm_docker.config import ServerConfig

LOG_PATH_ENV = "LLM_DOCKER_LOG_PATH"
DEFAULT_LOG_FILE = Path("llm_docker.log")
DEFAULT_COMPONENT = "llm_docker"

FILE_ROTATION = "10 MB"
FILE_RETENTION = "7 days"


def resolve_log_file(environ: Mapping[str, str] | None = None) -> Path:
    """Return the log file path, honouring ``LLM_DOCKER_LOG_PATH``.

    Args:
        environ: Environment to read (defaults to ``os.environ``)

    Returns:
        The configured path, or ``llm_docker.log`` in the working directory

    """
    env = os.environ if environ is None else environ
    log_path = env.get(LOG_PATH_ENV, "").strip()
    return Path(log_path).expanduser() if log_path else DEFAULT_LOG_FILE


def _sink_options(config: ServerConfig) -> dict[str, Any]:
    if config.json_logging:
        # Tool arguments can carry env values; keep variable dumps out of JSON records
        return {"level": config.log_level, "serialize": True, "backtrace": True, "diagnose": False}
    return {
        "level": config.log_level,
        "format": config.log_format,
        "backtrace": True,
        "diagnose": True,
    }


def setup_logger(config: ServerConfig, log_file: Path | None = None) -> None:
    """Configure loguru sinks for the tool server.

    Args:
        config: Server configuration (level, format, JSON switch)
        log_file: Optional rotating file sink, usually from :func:`resolve_log_file`

    """
    logger.remove()
    logger.configure(extra={"component": DEFAULT_COMPONENT})

    options = _sink_options(config)
    logger.add(sys.stderr, colorize=not config.json_logging, **options)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            rotation=FILE_ROTATION,
            retention=FILE_RETENTION,
            compression="zip",
            **options,
        )

    logger.info(f"Logger initialized with level: {config.log_level}")
    if log_file:
        logger.info(f"Logging to file: {log_file}")


def get_logger(name: str | None = None) -> Any:
    """Get the shared logger, bound to a component name when one is given.

    Args:
        name: Optional module name, recorded as ``extra["component"]``

    Returns:
        Loguru logger instance

    """
    if name is None:
        return logger
    return logger.bind(component=name)
