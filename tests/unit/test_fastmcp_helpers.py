"""Unit tests for FastMCP helpers and the tool record."""

from unittest.mock import Mock

import pytest
from fastmcp import FastMCP

from llm_docker.tools.base import DockerTool, ToolInput
from llm_docker.utils.fastmcp_helpers import create_fastmcp_app, get_mcp_annotations
from llm_docker.utils.safety import OperationSafety


class TestGetMcpAnnotations:
    """Test annotation hints per safety level."""

    @pytest.mark.parametrize(
        "level,read_only,destructive",
        [
            (OperationSafety.SAFE, True, False),
            (OperationSafety.MODERATE, False, False),
            (OperationSafety.DESTRUCTIVE, False, True),
        ],
    )
    def test_hints(self, level: OperationSafety, read_only: bool, destructive: bool) -> None:
        """Test read-only and destructive hints follow the safety level."""
        annotations = get_mcp_annotations(level)
        assert annotations["readOnlyHint"] is read_only
        assert annotations["destructiveHint"] is destructive

    def test_idempotent_and_open_world(self) -> None:
        """Test the behavioral flags are passed through."""
        annotations = get_mcp_annotations(
            OperationSafety.MODERATE, idempotent=True, open_world=True
        )
        assert annotations["idempotentHint"] is True
        assert annotations["openWorldHint"] is True


def test_create_fastmcp_app() -> None:
    """Test the application carries the requested name."""
    app = create_fastmcp_app(name="docker-tools")
    assert isinstance(app, FastMCP)
    assert app.name == "docker-tools"


class TestDockerTool:
    """Test the DockerTool record."""

    class EchoInput(ToolInput):
        text: str

    def _tool(self, func: Mock) -> DockerTool:
        return DockerTool(
            "docker_echo",
            "Echo text",
            OperationSafety.SAFE,
            True,
            False,
            self.EchoInput,
            func,
        )

    def test_unpacks_with_func_last(self) -> None:
        """Test the function is the record's last field."""
        func = Mock(return_value="hi")
        *_, unpacked = self._tool(func)
        assert unpacked is func

    def test_call_delegates(self) -> None:
        """Test calling the record calls the function with keyword arguments."""
        func = Mock(return_value="hi")
        assert self._tool(func)(text="hi") == "hi"
        func.assert_called_once_with(text="hi")

    def test_parameters_schema(self) -> None:
        """Test the schema comes from the input model."""
        schema = self._tool(Mock()).parameters
        assert schema["required"] == ["text"]
        assert schema["additionalProperties"] is False

    def test_repr(self) -> None:
        """Test string representation names the tool and its safety level."""
        assert repr(self._tool(Mock())) == "DockerTool(name=docker_echo, safety=safe)"
