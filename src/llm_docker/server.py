"""MCP server exposing the Docker tool catalog.

The server owns one Docker client wrapper and one FastMCP application with
all tools registered. Tool invocations arrive as name + arguments over the
chosen transport; FastMCP dispatches them to the tool functions.
"""

import asyncio

from fastmcp import FastMCP

from llm_docker.config import Config
from llm_docker.docker_wrapper.client import DockerClientWrapper
from llm_docker.tools import register_all_tools
from llm_docker.utils.fastmcp_helpers import create_fastmcp_app
from llm_docker.utils.logger import get_logger

logger = get_logger(__name__)


class DockerToolServer:
    """FastMCP server wrapping the Docker tools."""

    def __init__(self, config: Config) -> None:
        """Initialize the server and register every tool.

        Args:
            config: Server configuration
        """
        self.config = config
        self.docker_client = DockerClientWrapper(config.docker)

        logger.info("Initializing Docker tool server")
        self.app = create_fastmcp_app(name=config.server.server_name)
        self.tool_names = register_all_tools(self.app, self.docker_client)

        logger.info(f"Registered {len(self.tool_names)} tools with {config.server.server_name}")

    async def start(self) -> None:
        """Start the server.

        The Docker daemon may come up after the server, so a failed health
        check is logged and startup continues.
        """
        logger.info("Starting Docker tool server")

        try:
            health_status = await asyncio.to_thread(self.docker_client.health_check)
            status = health_status.get("status", "unknown")
            if status == "healthy":
                logger.info("Docker daemon is healthy")
            else:
                logger.warning(f"Docker daemon health check failed: {status}")
        except Exception as e:
            logger.warning(f"Docker daemon health check failed: {e}")

    async def stop(self) -> None:
        """Stop the server and release the Docker connection."""
        logger.info("Stopping Docker tool server")
        await asyncio.to_thread(self.docker_client.close)

    def get_app(self) -> FastMCP:
        """Get the underlying FastMCP application.

        Returns:
            FastMCP application instance
        """
        return self.app
