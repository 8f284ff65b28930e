"""Docker Engine operations exposed as tools for LLM agents.

Example:
    ```python
    from fastmcp import FastMCP
    from llm_docker import DockerClientWrapper, DockerConfig, register_all_tools

    app = FastMCP("docker-tools")
    register_all_tools(app, DockerClientWrapper(DockerConfig()))
    ```
"""

from llm_docker.config import Config, DockerConfig, ServerConfig
from llm_docker.docker_wrapper.client import DockerClientWrapper
from llm_docker.tools import DockerTool, all_tools, register_all_tools
from llm_docker.version import __version__

__all__ = [
    "Config",
    "DockerClientWrapper",
    "DockerConfig",
    "DockerTool",
    "ServerConfig",
    "__version__",
    "all_tools",
    "register_all_tools",
]
