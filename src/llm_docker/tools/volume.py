"""Volume tools: list, create, remove."""

import json

from pydantic import Field

from llm_docker.docker_wrapper.client import DockerClientWrapper
from llm_docker.tools.base import DockerTool, ToolInput
from llm_docker.utils.docker_error_handler import render_docker_errors
from llm_docker.utils.logger import get_logger
from llm_docker.utils.messages import ERROR_VOLUME_EXISTS, ERROR_VOLUME_NOT_FOUND
from llm_docker.utils.safety import OperationSafety

logger = get_logger(__name__)


class ListVolumesInput(ToolInput):
    """Input for listing volumes."""


class CreateVolumeInput(ToolInput):
    """Input for creating a volume."""

    name: str = Field(description="Name of the volume")
    driver: str = Field(default="local", description="Driver to use (default: local)")


class RemoveVolumeInput(ToolInput):
    """Input for removing a volume."""

    name: str = Field(description="Volume name")
    force: bool = Field(default=False, description="Force removal of the volume")


def create_list_volumes_tool(docker_client: DockerClientWrapper) -> DockerTool:
    """Create the list_volumes tool."""

    @render_docker_errors("Error listing volumes")
    def list_volumes() -> str:
        """List Docker volumes as JSON records."""
        logger.info("Listing volumes")
        volumes = docker_client.client.volumes.list()
        records = [volume.attrs for volume in volumes]

        logger.info(f"Found {len(records)} volumes")
        return json.dumps(records, indent=2, default=str)

    return DockerTool(
        "docker_list_volumes",
        "List Docker volumes",
        OperationSafety.SAFE,
        True,  # idempotent
        False,  # not open_world
        ListVolumesInput,
        list_volumes,
    )


def create_create_volume_tool(docker_client: DockerClientWrapper) -> DockerTool:
    """Create the create_volume tool."""

    @render_docker_errors("Error creating volume", conflict=ERROR_VOLUME_EXISTS)
    def create_volume(name: str, driver: str = "local") -> str:
        """Create a Docker volume."""
        logger.info(f"Creating volume: {name} (driver={driver})")
        docker_client.client.volumes.create(name=name, driver=driver)

        logger.info(f"Successfully created volume: {name}")
        return f"Volume {name} created successfully"

    return DockerTool(
        "docker_create_volume",
        "Create a Docker volume",
        OperationSafety.MODERATE,
        False,  # not idempotent
        False,  # not open_world
        CreateVolumeInput,
        create_volume,
    )


def create_remove_volume_tool(docker_client: DockerClientWrapper) -> DockerTool:
    """Create the remove_volume tool."""

    @render_docker_errors("Error removing volume", not_found=ERROR_VOLUME_NOT_FOUND)
    def remove_volume(name: str, force: bool = False) -> str:
        """Remove a Docker volume."""
        logger.info(f"Removing volume: {name} (force={force})")
        volume = docker_client.client.volumes.get(name)
        volume.remove(force=force)

        logger.info(f"Successfully removed volume: {name}")
        return f"Volume {name} removed successfully"

    return DockerTool(
        "docker_remove_volume",
        "Remove a Docker volume",
        OperationSafety.DESTRUCTIVE,
        False,  # not idempotent
        False,  # not open_world
        RemoveVolumeInput,
        remove_volume,
    )


__all__ = [
    "create_create_volume_tool",
    "create_list_volumes_tool",
    "create_remove_volume_tool",
]
