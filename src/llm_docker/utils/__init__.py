"""Utility modules for llm-docker."""

from llm_docker.utils.docker_error_handler import render_docker_errors
from llm_docker.utils.errors import (
    DockerConnectionError,
    DockerHealthCheckError,
    ExecTimeoutError,
    LLMDockerError,
)
from llm_docker.utils.logger import setup_logger
from llm_docker.utils.parsing import (
    parse_json_string_field,
    resolve_image_reference,
    split_command,
    split_env_list,
)
from llm_docker.utils.safety import OperationSafety

__all__ = [
    "DockerConnectionError",
    "DockerHealthCheckError",
    "ExecTimeoutError",
    "LLMDockerError",
    "OperationSafety",
    "parse_json_string_field",
    "render_docker_errors",
    "resolve_image_reference",
    "setup_logger",
    "split_command",
    "split_env_list",
]
