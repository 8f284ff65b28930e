"""Container lifecycle tools: create, run, start, stop, remove, recreate."""

from typing import Any

from docker.errors import NotFound
from pydantic import Field, field_validator

from llm_docker.docker_wrapper.client import DockerClientWrapper
from llm_docker.tools.base import DockerTool, ToolInput
from llm_docker.utils.docker_error_handler import error_message, render_docker_errors
from llm_docker.utils.errors import LLMDockerError
from llm_docker.utils.logger import get_logger
from llm_docker.utils.messages import (
    ERROR_CONTAINER_EXISTS,
    ERROR_CONTAINER_NOT_FOUND,
    ERROR_IMAGE_NOT_FOUND,
)
from llm_docker.utils.parsing import parse_json_string_field, split_command, split_env_list
from llm_docker.utils.safety import OperationSafety

logger = get_logger(__name__)

# Common field descriptions
DESC_CONTAINER_ID = "Container ID or name"
DESC_STOP_TIMEOUT = "Seconds to wait before killing the container when stopping"

# Input Models


class ContainerConfigInput(ToolInput):
    """Input for creating (and optionally starting) a container."""

    image: str = Field(description='Image name to use (e.g., "ubuntu:22.04")')
    name: str | None = Field(default=None, description="Container name")
    cmd: str | list[str] | None = Field(
        default=None,
        description='Command to run as a shell-style string (e.g., "npm start" or "python app.py")',
    )
    env: str | list[str] | None = Field(
        default=None,
        description=(
            "Environment variables as comma-separated KEY=VALUE pairs "
            '(e.g., "VAR1=value1,VAR2=value2")'
        ),
    )
    exposed_ports: dict[str, Any] | str | None = Field(
        default=None,
        description='Exposed ports as {"port/protocol": {}} (e.g., {"80/tcp": {}})',
    )
    host_config: dict[str, Any] | str | None = Field(
        default=None,
        description=(
            "Engine API host configuration including port bindings, volumes, etc. "
            'Example: {"PortBindings": {"80/tcp": [{"HostPort": "8080"}]}}'
        ),
    )

    @field_validator("cmd", mode="before")
    @classmethod
    def parse_cmd(cls, v: Any) -> Any:
        """Split a shell-style command string into an argument vector."""
        return split_command(v)

    @field_validator("env", mode="before")
    @classmethod
    def parse_env(cls, v: Any) -> Any:
        """Split comma-separated environment variables."""
        return split_env_list(v)

    @field_validator("exposed_ports", "host_config", mode="before")
    @classmethod
    def parse_json_strings(cls, v: Any, info: Any) -> Any:
        """Parse JSON strings to objects (workaround for MCP client serialization bug)."""
        field_name = info.field_name if hasattr(info, "field_name") else "field"
        return parse_json_string_field(v, field_name)


class StartContainerInput(ToolInput):
    """Input for starting a container."""

    container_id: str = Field(description=DESC_CONTAINER_ID)


class StopContainerInput(ToolInput):
    """Input for stopping a container."""

    container_id: str = Field(description=DESC_CONTAINER_ID)
    timeout: int = Field(default=10, description=DESC_STOP_TIMEOUT)


class RemoveContainerInput(ToolInput):
    """Input for removing a container."""

    container_id: str = Field(description=DESC_CONTAINER_ID)
    force: bool = Field(default=False, description="Force removal of running container")
    volumes: bool = Field(default=False, description="Remove associated volumes")


class RecreateContainerInput(ToolInput):
    """Input for recreating a container."""

    container_id: str = Field(description="Container ID or name to recreate")
    timeout: int = Field(default=10, description=DESC_STOP_TIMEOUT)


# Helpers


def _build_container_config(input_data: ContainerConfigInput) -> dict[str, Any]:
    """Build the Engine API create body from validated input.

    Args:
        input_data: Container creation parameters

    Returns:
        Create body containing only the supplied keys
    """
    config: dict[str, Any] = {"Image": input_data.image}

    if input_data.cmd:
        config["Cmd"] = input_data.cmd
    if input_data.env:
        config["Env"] = input_data.env
    if input_data.exposed_ports:
        config["ExposedPorts"] = input_data.exposed_ports
    if input_data.host_config:
        config["HostConfig"] = input_data.host_config

    return config


def _capture_container_config(attrs: dict[str, Any]) -> tuple[dict[str, Any], str | None]:
    """Extract the configuration a recreated container should reuse.

    Args:
        attrs: Inspect data of the existing container

    Returns:
        Tuple of (create body, container name without leading slash)
    """
    config = attrs.get("Config") or {}
    captured = {
        "Image": config.get("Image"),
        "Cmd": config.get("Cmd"),
        "Env": config.get("Env"),
        "ExposedPorts": config.get("ExposedPorts"),
        "HostConfig": attrs.get("HostConfig"),
    }
    name = (attrs.get("Name") or "").removeprefix("/") or None
    return {key: value for key, value in captured.items() if value is not None}, name


# Tool Functions


def create_create_container_tool(docker_client: DockerClientWrapper) -> DockerTool:
    """Create the create_container tool.

    Args:
        docker_client: Docker client wrapper

    Returns:
        DockerTool record
    """

    @render_docker_errors(
        "Error creating container",
        not_found=ERROR_IMAGE_NOT_FOUND,
        conflict=ERROR_CONTAINER_EXISTS,
    )
    def create_container(  # noqa: PLR0913 - mirrors the Engine API create body
        image: str,
        name: str | None = None,
        cmd: str | list[str] | None = None,
        env: str | list[str] | None = None,
        exposed_ports: dict[str, Any] | str | None = None,
        host_config: dict[str, Any] | str | None = None,
    ) -> str:
        """Create a Docker container without starting it.

        Args:
            image: Image name to use
            name: Optional container name
            cmd: Command as a shell-style string
            env: Comma-separated KEY=VALUE pairs
            exposed_ports: Exposed ports as {"port/protocol": {}}
            host_config: Engine API host configuration

        Returns:
            Confirmation with the new container's ID and name
        """
        input_data = ContainerConfigInput(
            image=image,
            name=name,
            cmd=cmd,
            env=env,
            exposed_ports=exposed_ports,
            host_config=host_config,
        )
        logger.info(f"Creating container from image: {image}")

        container = docker_client.create_container(
            _build_container_config(input_data), input_data.name
        )

        logger.info(f"Successfully created container: {container.id}")
        return f"Container created successfully. ID: {container.id}, Name: {container.name}"

    return DockerTool(
        "docker_create_container",
        "Create a Docker container",
        OperationSafety.MODERATE,
        False,  # not idempotent (creates new container each time)
        False,  # not open_world
        ContainerConfigInput,
        create_container,
    )


def create_run_container_tool(docker_client: DockerClientWrapper) -> DockerTool:
    """Create the run_container tool (create and start)."""

    @render_docker_errors(
        "Error running container",
        not_found=ERROR_IMAGE_NOT_FOUND,
        conflict=ERROR_CONTAINER_EXISTS,
    )
    def run_container(  # noqa: PLR0913 - mirrors the Engine API create body
        image: str,
        name: str | None = None,
        cmd: str | list[str] | None = None,
        env: str | list[str] | None = None,
        exposed_ports: dict[str, Any] | str | None = None,
        host_config: dict[str, Any] | str | None = None,
    ) -> str:
        """Create a Docker container and start it."""
        input_data = ContainerConfigInput(
            image=image,
            name=name,
            cmd=cmd,
            env=env,
            exposed_ports=exposed_ports,
            host_config=host_config,
        )
        logger.info(f"Running container from image: {image}")

        container = docker_client.create_container(
            _build_container_config(input_data), input_data.name
        )
        container.start()

        logger.info(f"Successfully started container: {container.id}")
        return f"Container started successfully. ID: {container.id}, Name: {container.name}"

    return DockerTool(
        "docker_run_container",
        "Run a Docker container (create and start)",
        OperationSafety.MODERATE,
        False,  # not idempotent (creates new container each time)
        False,  # not open_world
        ContainerConfigInput,
        run_container,
    )


def create_start_container_tool(docker_client: DockerClientWrapper) -> DockerTool:
    """Create the start_container tool."""

    @render_docker_errors("Error starting container", not_found=ERROR_CONTAINER_NOT_FOUND)
    def start_container(container_id: str) -> str:
        """Start an existing Docker container."""
        logger.info(f"Starting container: {container_id}")
        container = docker_client.client.containers.get(container_id)
        container.start()

        logger.info(f"Successfully started container: {container_id}")
        return f"Container {container_id} started successfully"

    return DockerTool(
        "docker_start_container",
        "Start a Docker container",
        OperationSafety.MODERATE,
        True,  # idempotent - starting converges to running state
        False,  # not open_world
        StartContainerInput,
        start_container,
    )


def create_stop_container_tool(docker_client: DockerClientWrapper) -> DockerTool:
    """Create the stop_container tool."""

    @render_docker_errors("Error stopping container", not_found=ERROR_CONTAINER_NOT_FOUND)
    def stop_container(container_id: str, timeout: int = 10) -> str:
        """Stop a running Docker container gracefully.

        Args:
            container_id: Container ID or name
            timeout: Seconds to wait before killing the container
        """
        logger.info(f"Stopping container: {container_id} (timeout={timeout})")
        container = docker_client.client.containers.get(container_id)
        container.stop(timeout=timeout)

        logger.info(f"Successfully stopped container: {container_id}")
        return f"Container {container_id} stopped successfully"

    return DockerTool(
        "docker_stop_container",
        "Stop a Docker container",
        OperationSafety.MODERATE,
        True,  # idempotent - stopping converges to stopped state
        False,  # not open_world
        StopContainerInput,
        stop_container,
    )


def create_remove_container_tool(docker_client: DockerClientWrapper) -> DockerTool:
    """Create the remove_container tool."""

    @render_docker_errors("Error removing container", not_found=ERROR_CONTAINER_NOT_FOUND)
    def remove_container(container_id: str, force: bool = False, volumes: bool = False) -> str:
        """Remove a Docker container."""
        logger.info(f"Removing container: {container_id} (force={force}, volumes={volumes})")
        container = docker_client.client.containers.get(container_id)
        container.remove(force=force, v=volumes)

        logger.info(f"Successfully removed container: {container_id}")
        return f"Container {container_id} removed successfully"

    return DockerTool(
        "docker_remove_container",
        "Remove a Docker container",
        OperationSafety.DESTRUCTIVE,
        False,  # not idempotent (container is gone after first removal)
        False,  # not open_world
        RemoveContainerInput,
        remove_container,
    )


def create_recreate_container_tool(docker_client: DockerClientWrapper) -> DockerTool:
    """Create the recreate_container tool.

    Recreation is stop (if running), remove, create with the captured
    configuration, start (if it was running). The sequence is not atomic:
    a failure after removal leaves the old container gone and is reported
    as a generic error with no rollback.
    """

    @render_docker_errors("Error recreating container", not_found=ERROR_CONTAINER_NOT_FOUND)
    def recreate_container(container_id: str, timeout: int = 10) -> str:
        """Recreate a Docker container with the same configuration.

        Args:
            container_id: Container ID or name to recreate
            timeout: Seconds to wait before killing the container when stopping

        Returns:
            Confirmation with the new container's ID
        """
        old_container = docker_client.client.containers.get(container_id)
        attrs = old_container.attrs
        new_config, name = _capture_container_config(attrs)
        was_running = bool((attrs.get("State") or {}).get("Running"))

        if was_running:
            logger.info(f"Recreate {container_id}: stopping (timeout={timeout})")
            old_container.stop(timeout=timeout)

        logger.info(f"Recreate {container_id}: removing old container")
        old_container.remove()

        try:
            logger.info(f"Recreate {container_id}: creating from {new_config.get('Image')}")
            new_container = docker_client.create_container(new_config, name)
            if was_running:
                logger.info(f"Recreate {container_id}: starting {new_container.id}")
                new_container.start()
        except NotFound as e:
            # Past this point a not-found is about the image or a network,
            # not the container the caller named.
            raise LLMDockerError(error_message(e)) from e

        logger.info(f"Successfully recreated container {container_id} as {new_container.id}")
        return f"Container {container_id} recreated successfully. New ID: {new_container.id}"

    return DockerTool(
        "docker_recreate_container",
        "Recreate a Docker container (stops, removes, and recreates with same configuration)",
        OperationSafety.DESTRUCTIVE,
        False,  # not idempotent (new container ID each time)
        False,  # not open_world
        RecreateContainerInput,
        recreate_container,
    )


__all__ = [
    "ContainerConfigInput",
    "create_create_container_tool",
    "create_recreate_container_tool",
    "create_remove_container_tool",
    "create_run_container_tool",
    "create_start_container_tool",
    "create_stop_container_tool",
]
