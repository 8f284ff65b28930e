"""Container inspection tools: list containers, fetch logs."""

import json

from pydantic import Field

from llm_docker.docker_wrapper.client import DockerClientWrapper
from llm_docker.tools.base import DockerTool, ToolInput
from llm_docker.utils.docker_error_handler import render_docker_errors
from llm_docker.utils.logger import get_logger
from llm_docker.utils.messages import ERROR_CONTAINER_NOT_FOUND
from llm_docker.utils.safety import OperationSafety

logger = get_logger(__name__)


class ListContainersInput(ToolInput):
    """Input for listing containers."""

    all: bool = Field(
        default=True,
        description="Show all containers (default shows all containers including stopped ones)",
    )


class FetchContainerLogsInput(ToolInput):
    """Input for fetching container logs."""

    container_id: str = Field(description="Container ID or name")
    stdout: bool = Field(default=True, description="Include stdout")
    stderr: bool = Field(default=True, description="Include stderr")
    tail: int | None = Field(
        default=None,
        description="Number of lines to show from the end of logs (default: all)",
    )
    timestamps: bool = Field(default=False, description="Show timestamps")


def create_list_containers_tool(docker_client: DockerClientWrapper) -> DockerTool:
    """Create the list_containers tool."""

    @render_docker_errors("Error listing containers")
    def list_containers(all: bool = True) -> str:  # noqa: A002 - Engine API parameter name
        """List Docker containers as JSON records."""
        logger.info(f"Listing containers (all={all})")
        containers = docker_client.client.containers.list(all=all, sparse=True)
        records = [container.attrs for container in containers]

        logger.info(f"Found {len(records)} containers")
        return json.dumps(records, indent=2, default=str)

    return DockerTool(
        "docker_list_containers",
        "List Docker containers",
        OperationSafety.SAFE,
        True,  # idempotent
        False,  # not open_world
        ListContainersInput,
        list_containers,
    )


def create_fetch_container_logs_tool(docker_client: DockerClientWrapper) -> DockerTool:
    """Create the fetch_container_logs tool."""

    @render_docker_errors("Error fetching logs", not_found=ERROR_CONTAINER_NOT_FOUND)
    def fetch_container_logs(  # noqa: PLR0913 - mirrors the Engine API logs options
        container_id: str,
        stdout: bool = True,
        stderr: bool = True,
        tail: int | None = None,
        timestamps: bool = False,
    ) -> str:
        """Fetch the logs of a Docker container.

        Args:
            container_id: Container ID or name
            stdout: Include stdout
            stderr: Include stderr
            tail: Number of lines from the end (None for all)
            timestamps: Prefix each line with its timestamp

        Returns:
            The log text
        """
        logger.info(f"Fetching logs for container: {container_id} (tail={tail})")
        container = docker_client.client.containers.get(container_id)

        kwargs: dict[str, object] = {
            "stdout": stdout,
            "stderr": stderr,
            "timestamps": timestamps,
        }
        if tail is not None:
            kwargs["tail"] = tail

        logs = container.logs(**kwargs)
        if isinstance(logs, bytes):
            return logs.decode("utf-8", errors="replace")
        return str(logs)

    return DockerTool(
        "docker_fetch_container_logs",
        "Fetch Docker container logs",
        OperationSafety.SAFE,
        True,  # idempotent
        False,  # not open_world
        FetchContainerLogsInput,
        fetch_container_logs,
    )


__all__ = ["create_fetch_container_logs_tool", "create_list_containers_tool"]
