"""Tools that reach inside a running container: exec and host-to-container copy.

SECURITY: exec provides arbitrary command execution within the target
container. Both tools are registered as open-world, state-changing operations.
"""

from pathlib import Path
from typing import Any

from pydantic import Field, field_validator

from llm_docker.docker_wrapper.client import DockerClientWrapper, ExecResult
from llm_docker.tools.base import DockerTool, ToolInput
from llm_docker.utils.archive import build_tar_archive
from llm_docker.utils.docker_error_handler import render_docker_errors
from llm_docker.utils.errors import ExecTimeoutError
from llm_docker.utils.logger import get_logger
from llm_docker.utils.messages import (
    ERROR_CONTAINER_NOT_FOUND,
    EXEC_TIMED_OUT,
    SOURCE_PATH_NOT_FOUND,
)
from llm_docker.utils.parsing import split_command, split_env_list
from llm_docker.utils.safety import OperationSafety

logger = get_logger(__name__)

DEFAULT_EXEC_TIMEOUT = 60


class ExecContainerInput(ToolInput):
    """Input for executing a command in a container."""

    container_id: str = Field(description="Container ID or name")
    cmd: str | list[str] = Field(
        description='Command to execute (e.g., "ls -la /app" or "python script.py")'
    )
    working_dir: str | None = Field(default=None, description="Working directory for the command")
    user: str | None = Field(
        default=None, description='User to run the command as (e.g., "1000" or "username")'
    )
    env: str | list[str] | None = Field(
        default=None,
        description='Environment variables as comma-separated KEY=VALUE pairs (e.g., "A=1,B=2")',
    )
    stdin: str | None = Field(default=None, description="Input to send to the command via stdin")
    timeout: int = Field(
        default=DEFAULT_EXEC_TIMEOUT, gt=0, description="Timeout in seconds (default: 60)"
    )

    @field_validator("cmd", mode="before")
    @classmethod
    def parse_cmd(cls, v: Any) -> Any:
        """Split the command; a blank command is rejected."""
        argv = split_command(v)
        if not argv:
            raise ValueError("cmd must not be empty")
        return argv

    @field_validator("env", mode="before")
    @classmethod
    def parse_env(cls, v: Any) -> Any:
        """Split comma-separated environment variables."""
        return split_env_list(v)


class CopyToContainerInput(ToolInput):
    """Input for copying a host path into a container."""

    container_id: str = Field(description="Container ID or name")
    source_path: str = Field(
        description="Path to the file or directory on the local filesystem to copy"
    )
    destination_path: str = Field(
        description="Path inside the container where the file/directory should be copied"
    )
    owner: str | None = Field(
        default=None,
        description='Owner for the copied files (e.g., "1000:1000" or "username:group")',
    )


def format_exec_result(container_id: str, result: ExecResult) -> str:
    """Render an exec outcome as agent-facing text.

    A stream section is omitted when the stream is blank after trimming.
    """
    text = f"Command executed in container {container_id}\n"
    text += f"Exit code: {result.exit_code}\n\n"

    if result.stdout.strip():
        text += f"STDOUT:\n{result.stdout}\n"
    if result.stderr.strip():
        text += f"\nSTDERR:\n{result.stderr}\n"

    return text.strip()


def create_exec_container_tool(docker_client: DockerClientWrapper) -> DockerTool:
    """Create the exec_container tool."""

    @render_docker_errors("Error executing command", not_found=ERROR_CONTAINER_NOT_FOUND)
    def exec_container(  # noqa: PLR0913 - exec options map 1:1 to the Engine API
        container_id: str,
        cmd: str | list[str],
        working_dir: str | None = None,
        user: str | None = None,
        env: str | list[str] | None = None,
        stdin: str | None = None,
        timeout: int = DEFAULT_EXEC_TIMEOUT,
    ) -> str:
        """Execute a command inside a running Docker container.

        Args:
            container_id: Container ID or name
            cmd: Command as a shell-style string
            working_dir: Working directory for the command
            user: User to run the command as
            env: Comma-separated KEY=VALUE pairs
            stdin: Payload written to the command's stdin
            timeout: Seconds to wait for the command

        Returns:
            Exit code and output sections, or the timeout text
        """
        input_data = ExecContainerInput(
            container_id=container_id,
            cmd=cmd,
            working_dir=working_dir,
            user=user,
            env=env,
            stdin=stdin,
            timeout=timeout,
        )
        container = docker_client.client.containers.get(container_id)
        assert isinstance(input_data.cmd, list)  # validator splits strings
        env_list = input_data.env if isinstance(input_data.env, list) else None

        logger.info(f"Executing in container {container_id}: {input_data.cmd}")
        try:
            result = docker_client.exec_in_container(
                container,
                input_data.cmd,
                stdin=input_data.stdin,
                workdir=input_data.working_dir,
                user=input_data.user,
                environment=env_list,
                timeout=input_data.timeout,
            )
        except ExecTimeoutError:
            return EXEC_TIMED_OUT.format(input_data.timeout)

        logger.info(f"Command in {container_id} exited with code {result.exit_code}")
        return format_exec_result(container_id, result)

    return DockerTool(
        "docker_exec_container",
        "Execute a command inside a running Docker container. "
        "WARNING: This provides arbitrary command execution within the container.",
        OperationSafety.MODERATE,
        False,  # not idempotent (commands may have side effects)
        True,  # open_world (commands may reach external systems)
        ExecContainerInput,
        exec_container,
    )


def create_copy_to_container_tool(docker_client: DockerClientWrapper) -> DockerTool:
    """Create the copy_to_container tool."""

    @render_docker_errors("Error copying to container", not_found=ERROR_CONTAINER_NOT_FOUND)
    def copy_to_container(
        container_id: str,
        source_path: str,
        destination_path: str,
        owner: str | None = None,
    ) -> str:
        """Copy a host file or directory into a running Docker container.

        Args:
            container_id: Container ID or name
            source_path: Host path of the file or directory
            destination_path: Directory inside the container
            owner: Optional owner applied recursively to the copied tree

        Returns:
            Confirmation naming the kind of source and the destination
        """
        container = docker_client.client.containers.get(container_id)

        source = Path(source_path)
        if not source.exists():
            logger.warning(f"Copy source does not exist: {source_path}")
            return SOURCE_PATH_NOT_FOUND.format(source_path)

        archive = build_tar_archive(source)
        logger.info(f"Copying {source_path} to {container_id}:{destination_path}")
        container.put_archive(destination_path, archive)

        if owner:
            chown_path = f"{destination_path.rstrip('/')}/{source.name}"
            logger.info(f"Changing ownership of {chown_path} to {owner}")
            container.exec_run(["chown", "-R", owner, chown_path])

        file_type = "directory" if source.is_dir() else "file"
        text = (
            f"Successfully copied {file_type} from {source_path} "
            f"to {container_id}:{destination_path}"
        )
        if owner:
            text += f"\nOwnership changed to {owner}"
        return text

    return DockerTool(
        "docker_copy_to_container",
        "Copy a file or directory from the local filesystem into a running Docker container",
        OperationSafety.MODERATE,
        False,  # not idempotent (ownership and file contents may change between calls)
        False,  # not open_world
        CopyToContainerInput,
        copy_to_container,
    )


__all__ = [
    "create_copy_to_container_tool",
    "create_exec_container_tool",
    "format_exec_result",
]
