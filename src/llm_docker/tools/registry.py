"""The fixed catalog of Docker tools and its registration with FastMCP.

The catalog is static: 22 tools in a stable order. Order matters to agent
runtimes that present tools as a list, so new tools are appended.
"""

from collections.abc import Callable
from typing import Any

from llm_docker.docker_wrapper.client import DockerClientWrapper
from llm_docker.tools.base import DockerTool
from llm_docker.tools.container_exec import (
    create_copy_to_container_tool,
    create_exec_container_tool,
)
from llm_docker.tools.container_inspection import (
    create_fetch_container_logs_tool,
    create_list_containers_tool,
)
from llm_docker.tools.container_lifecycle import (
    create_create_container_tool,
    create_recreate_container_tool,
    create_remove_container_tool,
    create_run_container_tool,
    create_start_container_tool,
    create_stop_container_tool,
)
from llm_docker.tools.image import (
    create_build_image_tool,
    create_list_images_tool,
    create_pull_image_tool,
    create_push_image_tool,
    create_remove_image_tool,
    create_tag_image_tool,
)
from llm_docker.tools.network import (
    create_create_network_tool,
    create_list_networks_tool,
    create_remove_network_tool,
)
from llm_docker.tools.volume import (
    create_create_volume_tool,
    create_list_volumes_tool,
    create_remove_volume_tool,
)
from llm_docker.utils.logger import get_logger

logger = get_logger(__name__)

ToolFactory = Callable[[DockerClientWrapper], DockerTool]

TOOL_FACTORIES: tuple[ToolFactory, ...] = (
    # Containers
    create_list_containers_tool,
    create_create_container_tool,
    create_run_container_tool,
    create_start_container_tool,
    create_stop_container_tool,
    create_remove_container_tool,
    create_recreate_container_tool,
    create_exec_container_tool,
    create_copy_to_container_tool,
    create_fetch_container_logs_tool,
    # Images
    create_list_images_tool,
    create_pull_image_tool,
    create_build_image_tool,
    create_tag_image_tool,
    create_push_image_tool,
    create_remove_image_tool,
    # Networks
    create_list_networks_tool,
    create_create_network_tool,
    create_remove_network_tool,
    # Volumes
    create_list_volumes_tool,
    create_create_volume_tool,
    create_remove_volume_tool,
)


def all_tools(docker_client: DockerClientWrapper) -> list[DockerTool]:
    """Build every tool in catalog order, bound to one Docker client.

    Args:
        docker_client: Docker client wrapper shared by all tools

    Returns:
        List of DockerTool records

    Example:
        ```python
        from llm_docker import Config, DockerClientWrapper, all_tools

        docker_client = DockerClientWrapper(Config().docker)
        tools = {tool.name: tool for tool in all_tools(docker_client)}
        print(tools["docker_stop_container"](container_id="web-1"))
        ```
    """
    return [factory(docker_client) for factory in TOOL_FACTORIES]


def register_all_tools(app: Any, docker_client: DockerClientWrapper) -> list[str]:
    """Register every tool with a FastMCP application.

    Args:
        app: FastMCP application instance
        docker_client: Docker client wrapper

    Returns:
        Registered tool names in catalog order
    """
    logger.info("Registering Docker tools...")
    registered_names = []

    for tool in all_tools(docker_client):
        app.tool(
            name=tool.name,
            description=tool.description,
            annotations=tool.annotations,
        )(tool.func)

        registered_names.append(tool.name)
        logger.debug(f"Registered tool: {tool.name} (safety: {tool.safety_level.value})")

    logger.success(f"Registered {len(registered_names)} tools")
    return registered_names


__all__ = ["TOOL_FACTORIES", "all_tools", "register_all_tools"]
