"""Network tools: list, create, remove."""

import json

from pydantic import Field

from llm_docker.docker_wrapper.client import DockerClientWrapper
from llm_docker.tools.base import DockerTool, ToolInput
from llm_docker.utils.docker_error_handler import render_docker_errors
from llm_docker.utils.logger import get_logger
from llm_docker.utils.messages import ERROR_NETWORK_EXISTS, ERROR_NETWORK_NOT_FOUND
from llm_docker.utils.safety import OperationSafety

logger = get_logger(__name__)


class ListNetworksInput(ToolInput):
    """Input for listing networks."""


class CreateNetworkInput(ToolInput):
    """Input for creating a network."""

    name: str = Field(description="Name of the network")
    driver: str = Field(default="bridge", description="Driver to use (default: bridge)")
    check_duplicate: bool = Field(
        default=True, description="Check for networks with duplicate names"
    )


class RemoveNetworkInput(ToolInput):
    """Input for removing a network."""

    network_id: str = Field(description="Network ID or name")


def create_list_networks_tool(docker_client: DockerClientWrapper) -> DockerTool:
    """Create the list_networks tool."""

    @render_docker_errors("Error listing networks")
    def list_networks() -> str:
        """List Docker networks as JSON records."""
        logger.info("Listing networks")
        networks = docker_client.client.networks.list()
        records = [network.attrs for network in networks]

        logger.info(f"Found {len(records)} networks")
        return json.dumps(records, indent=2, default=str)

    return DockerTool(
        "docker_list_networks",
        "List Docker networks",
        OperationSafety.SAFE,
        True,  # idempotent
        False,  # not open_world
        ListNetworksInput,
        list_networks,
    )


def create_create_network_tool(docker_client: DockerClientWrapper) -> DockerTool:
    """Create the create_network tool."""

    @render_docker_errors("Error creating network", conflict=ERROR_NETWORK_EXISTS)
    def create_network(name: str, driver: str = "bridge", check_duplicate: bool = True) -> str:
        """Create a Docker network."""
        logger.info(f"Creating network: {name} (driver={driver})")
        network = docker_client.client.networks.create(
            name, driver=driver, check_duplicate=check_duplicate
        )

        logger.info(f"Successfully created network: {name} ({network.id})")
        return f"Network {name} created successfully. ID: {network.id}"

    return DockerTool(
        "docker_create_network",
        "Create a Docker network",
        OperationSafety.MODERATE,
        False,  # not idempotent (second call conflicts)
        False,  # not open_world
        CreateNetworkInput,
        create_network,
    )


def create_remove_network_tool(docker_client: DockerClientWrapper) -> DockerTool:
    """Create the remove_network tool."""

    @render_docker_errors("Error removing network", not_found=ERROR_NETWORK_NOT_FOUND)
    def remove_network(network_id: str) -> str:
        """Remove a Docker network."""
        logger.info(f"Removing network: {network_id}")
        network = docker_client.client.networks.get(network_id)
        network.remove()

        logger.info(f"Successfully removed network: {network_id}")
        return f"Network {network_id} removed successfully"

    return DockerTool(
        "docker_remove_network",
        "Remove a Docker network",
        OperationSafety.DESTRUCTIVE,
        False,  # not idempotent
        False,  # not open_world
        RemoveNetworkInput,
        remove_network,
    )


__all__ = [
    "create_create_network_tool",
    "create_list_networks_tool",
    "create_remove_network_tool",
]
