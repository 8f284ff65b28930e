"""Unit tests for tools/network.py."""

import json
from unittest.mock import Mock

from docker.errors import APIError, NotFound

from llm_docker.tools.network import (
    create_create_network_tool,
    create_list_networks_tool,
    create_remove_network_tool,
)


class TestListNetworksTool:
    """Test docker_list_networks."""

    def test_list(self, mock_wrapper: Mock) -> None:
        """Test network records are returned as JSON."""
        network = Mock()
        network.attrs = {"Id": "net1", "Name": "bridge", "Driver": "bridge"}
        mock_wrapper.client.networks.list.return_value = [network]

        *_, func = create_list_networks_tool(mock_wrapper)

        assert json.loads(func()) == [{"Id": "net1", "Name": "bridge", "Driver": "bridge"}]


class TestCreateNetworkTool:
    """Test docker_create_network."""

    def test_create_defaults(self, mock_wrapper: Mock) -> None:
        """Test bridge driver and duplicate checking by default."""
        mock_wrapper.client.networks.create.return_value = Mock(id="net123")

        *_, func = create_create_network_tool(mock_wrapper)
        result = func(name="backend")

        assert result == "Network backend created successfully. ID: net123"
        mock_wrapper.client.networks.create.assert_called_once_with(
            "backend", driver="bridge", check_duplicate=True
        )

    def test_create_overlay(self, mock_wrapper: Mock) -> None:
        """Test driver and check_duplicate are passed through."""
        mock_wrapper.client.networks.create.return_value = Mock(id="net456")

        *_, func = create_create_network_tool(mock_wrapper)
        func(name="mesh", driver="overlay", check_duplicate=False)

        mock_wrapper.client.networks.create.assert_called_once_with(
            "mesh", driver="overlay", check_duplicate=False
        )

    def test_create_conflict(self, mock_wrapper: Mock) -> None:
        """Test an existing name renders the conflict text."""
        mock_wrapper.client.networks.create.side_effect = APIError(
            "Conflict",
            response=Mock(status_code=409),
            explanation="network with name backend already exists",
        )

        *_, func = create_create_network_tool(mock_wrapper)
        assert func(name="backend") == "Network backend already exists"


class TestRemoveNetworkTool:
    """Test docker_remove_network."""

    def test_remove(self, mock_wrapper: Mock) -> None:
        """Test removing a network."""
        network = Mock()
        mock_wrapper.client.networks.get.return_value = network

        *_, func = create_remove_network_tool(mock_wrapper)

        assert func(network_id="backend") == "Network backend removed successfully"
        network.remove.assert_called_once_with()

    def test_remove_not_found(self, mock_wrapper: Mock) -> None:
        """Test a missing network names the caller's identifier."""
        mock_wrapper.client.networks.get.side_effect = NotFound("network ghost not found")

        *_, func = create_remove_network_tool(mock_wrapper)
        assert func(network_id="ghost") == "Network ghost not found"

    def test_remove_in_use(self, mock_wrapper: Mock) -> None:
        """Test a network with endpoints renders the daemon's explanation."""
        network = Mock()
        network.remove.side_effect = APIError(
            "Forbidden",
            response=Mock(status_code=403),
            explanation="error while removing network: network backend has active endpoints",
        )
        mock_wrapper.client.networks.get.return_value = network

        *_, func = create_remove_network_tool(mock_wrapper)
        assert func(network_id="backend") == (
            "Error removing network: error while removing network: "
            "network backend has active endpoints"
        )
