"""Unit tests for tools/container_inspection.py."""

import json
from unittest.mock import Mock

from docker.errors import NotFound

from llm_docker.tools.container_inspection import (
    create_fetch_container_logs_tool,
    create_list_containers_tool,
)
from llm_docker.utils.safety import OperationSafety


class TestListContainersTool:
    """Test docker_list_containers."""

    def test_list_all_by_default(self, mock_wrapper: Mock) -> None:
        """Test stopped containers are included unless asked otherwise."""
        container = Mock()
        container.attrs = {"Id": "abc123", "Names": ["/web-1"], "State": "exited"}
        mock_wrapper.client.containers.list.return_value = [container]

        *_, func = create_list_containers_tool(mock_wrapper)
        result = func()

        assert json.loads(result) == [{"Id": "abc123", "Names": ["/web-1"], "State": "exited"}]
        mock_wrapper.client.containers.list.assert_called_once_with(all=True, sparse=True)

    def test_list_running_only(self, mock_wrapper: Mock) -> None:
        """Test all=False is passed through."""
        mock_wrapper.client.containers.list.return_value = []

        *_, func = create_list_containers_tool(mock_wrapper)

        assert json.loads(func(all=False)) == []
        mock_wrapper.client.containers.list.assert_called_once_with(all=False, sparse=True)

    def test_list_error(self, mock_wrapper: Mock) -> None:
        """Test failures render as the generic list error."""
        mock_wrapper.client.containers.list.side_effect = RuntimeError("daemon unreachable")

        *_, func = create_list_containers_tool(mock_wrapper)
        assert func() == "Error listing containers: daemon unreachable"

    def test_list_is_read_only(self, mock_wrapper: Mock) -> None:
        """Test listing is safe and read-only."""
        tool = create_list_containers_tool(mock_wrapper)
        assert tool.safety_level == OperationSafety.SAFE
        assert tool.annotations["readOnlyHint"] is True


class TestFetchContainerLogsTool:
    """Test docker_fetch_container_logs."""

    def test_fetch_defaults(self, mock_wrapper: Mock) -> None:
        """Test both streams without timestamps and no tail by default."""
        container = Mock()
        container.logs.return_value = b"line 1\nline 2\n"
        mock_wrapper.client.containers.get.return_value = container

        *_, func = create_fetch_container_logs_tool(mock_wrapper)

        assert func(container_id="web-1") == "line 1\nline 2\n"
        container.logs.assert_called_once_with(stdout=True, stderr=True, timestamps=False)

    def test_fetch_with_tail_and_timestamps(self, mock_wrapper: Mock) -> None:
        """Test tail and timestamps are passed through."""
        container = Mock()
        container.logs.return_value = b"2024-01-01T00:00:00Z ready\n"
        mock_wrapper.client.containers.get.return_value = container

        *_, func = create_fetch_container_logs_tool(mock_wrapper)
        func(container_id="web-1", stderr=False, tail=50, timestamps=True)

        container.logs.assert_called_once_with(
            stdout=True, stderr=False, timestamps=True, tail=50
        )

    def test_fetch_not_found(self, mock_wrapper: Mock) -> None:
        """Test a missing container names the caller's identifier."""
        mock_wrapper.client.containers.get.side_effect = NotFound("No such container")

        *_, func = create_fetch_container_logs_tool(mock_wrapper)
        assert func(container_id="ghost") == "Container ghost not found"

    def test_fetch_error(self, mock_wrapper: Mock) -> None:
        """Test other failures render as the generic logs error."""
        container = Mock()
        container.logs.side_effect = RuntimeError(
            "configured logging driver does not support reading"
        )
        mock_wrapper.client.containers.get.return_value = container

        *_, func = create_fetch_container_logs_tool(mock_wrapper)
        assert func(container_id="web-1") == (
            "Error fetching logs: configured logging driver does not support reading"
        )
