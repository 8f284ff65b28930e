"""Docker tools exposed to agent runtimes.

Organization:
- container_lifecycle.py: create, run, start, stop, remove, recreate
- container_inspection.py: list containers, fetch logs
- container_exec.py: exec and host-to-container copy
- image.py: image management tools
- network.py: network management tools
- volume.py: volume management tools
- registry.py: the ordered catalog and FastMCP registration
"""

from llm_docker.tools.base import DockerTool, ToolInput
from llm_docker.tools.registry import TOOL_FACTORIES, all_tools, register_all_tools

__all__ = ["TOOL_FACTORIES", "DockerTool", "ToolInput", "all_tools", "register_all_tools"]
