"""Tool record and input base model shared by all Docker tools."""

from collections.abc import Callable
from typing import Any, NamedTuple

from pydantic import BaseModel, ConfigDict

from llm_docker.utils.fastmcp_helpers import get_mcp_annotations
from llm_docker.utils.safety import OperationSafety


class ToolInput(BaseModel):
    """Base input model for tools."""

    model_config = ConfigDict(extra="forbid")


class DockerTool(NamedTuple):
    """A named, schema-described callable wrapping one Docker operation.

    ``func`` takes keyword arguments matching ``input_model`` and always
    returns result text; Docker errors are rendered, never raised.
    """

    name: str
    description: str
    safety_level: OperationSafety
    idempotent: bool
    open_world: bool
    input_model: type[ToolInput]
    func: Callable[..., str]

    @property
    def parameters(self) -> dict[str, Any]:
        """JSON Schema of the tool's parameters."""
        return self.input_model.model_json_schema()

    @property
    def annotations(self) -> dict[str, Any]:
        """MCP annotation hints derived from the tool's safety level."""
        return get_mcp_annotations(self.safety_level, self.idempotent, self.open_world)

    def __call__(self, **arguments: Any) -> str:
        """Invoke the tool with keyword arguments."""
        return self.func(**arguments)

    def __repr__(self) -> str:
        """Return string representation."""
        return f"DockerTool(name={self.name}, safety={self.safety_level.value})"
