"""Pytest configuration and shared fixtures."""

from unittest.mock import Mock

import pytest

from llm_docker.config import Config, DockerConfig, ServerConfig
from llm_docker.docker_wrapper.client import DockerClientWrapper


@pytest.fixture
def docker_config() -> DockerConfig:
    """Create test Docker configuration."""
    return DockerConfig(
        base_url="unix:///var/run/docker.sock",
        timeout=30,
    )


@pytest.fixture
def server_config() -> ServerConfig:
    """Create test server configuration."""
    return ServerConfig(
        server_name="llm-docker-test",
        log_level="DEBUG",
    )


@pytest.fixture
def config(docker_config: DockerConfig, server_config: ServerConfig) -> Config:
    """Create complete test configuration."""
    test_config = Config.__new__(Config)
    test_config.docker = docker_config
    test_config.server = server_config
    return test_config


@pytest.fixture
def mock_wrapper() -> Mock:
    """Create a mock DockerClientWrapper for tool factories."""
    wrapper = Mock(spec=DockerClientWrapper)
    wrapper.client = Mock()
    return wrapper


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "integration: Integration tests requiring Docker")
    config.addinivalue_line("markers", "slow: Slow running tests")
