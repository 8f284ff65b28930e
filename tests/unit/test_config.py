"""Tests for configuration module."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from llm_docker.config import Config, DockerConfig, ServerConfig


class TestDockerConfig:
    """Tests for DockerConfig."""

    def test_default_values(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test default configuration values."""
        import platform

        monkeypatch.delenv("DOCKER_BASE_URL", raising=False)
        monkeypatch.delenv("DOCKER_CLI_PATH", raising=False)

        config = DockerConfig()
        expected_socket = (
            "npipe:////./pipe/docker_engine"
            if platform.system().lower() == "windows"
            else "unix:///var/run/docker.sock"
        )
        assert config.base_url == expected_socket
        assert config.timeout == 60
        assert config.tls_verify is False
        assert config.tls_ca_cert is None
        assert config.cli_path == "docker"

    def test_custom_values(self) -> None:
        """Test custom configuration values."""
        config = DockerConfig(base_url="tcp://127.0.0.1:2375", timeout=30)
        assert config.base_url == "tcp://127.0.0.1:2375"
        assert config.timeout == 30

    def test_env_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test values are read from DOCKER_* environment variables."""
        monkeypatch.setenv("DOCKER_TIMEOUT", "15")
        monkeypatch.setenv("DOCKER_CLI_PATH", "/usr/local/bin/docker")

        config = DockerConfig()
        assert config.timeout == 15
        assert config.cli_path == "/usr/local/bin/docker"

    def test_timeout_validation(self) -> None:
        """Test timeout must be positive."""
        with pytest.raises(ValidationError):
            DockerConfig(timeout=0)

        with pytest.raises(ValidationError):
            DockerConfig(timeout=-1)

    def test_http_socket_rejected(self) -> None:
        """Test plain HTTP daemon URLs are refused."""
        with pytest.raises(ValidationError, match="Insecure HTTP"):
            DockerConfig(base_url="http://docker.example.com:2375")

    def test_network_tcp_socket_warns(self) -> None:
        """Test a non-local TCP socket produces a warning."""
        with pytest.warns(UserWarning, match="exposed on network"):
            DockerConfig(base_url="tcp://docker.example.com:2375")

    def test_missing_cert_path_rejected(self, tmp_path: Path) -> None:
        """Test certificate paths must exist."""
        with pytest.raises(ValidationError, match="Certificate file not found"):
            DockerConfig(tls_verify=True, tls_ca_cert=tmp_path / "missing.pem")

    def test_certs_without_tls_verify_warn(self, tmp_path: Path) -> None:
        """Test certificates without tls_verify produce a warning."""
        ca_cert = tmp_path / "ca.pem"
        ca_cert.write_text("cert")

        with pytest.warns(UserWarning, match="tls_verify=False"):
            config = DockerConfig(tls_ca_cert=ca_cert)
        assert config.tls_ca_cert == ca_cert


class TestServerConfig:
    """Tests for ServerConfig."""

    def test_default_values(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test default server configuration values."""
        monkeypatch.delenv("LLM_DOCKER_LOG_LEVEL", raising=False)
        monkeypatch.delenv("LLM_DOCKER_SERVER_NAME", raising=False)

        config = ServerConfig()
        assert config.server_name == "llm-docker"
        assert config.log_level == "INFO"
        assert config.json_logging is False

    @pytest.mark.parametrize("level", ["debug", "Warning", "ERROR"])
    def test_log_level_normalized(self, level: str) -> None:
        """Test log levels are accepted case-insensitively."""
        config = ServerConfig(log_level=level)
        assert config.log_level == level.upper()

    def test_invalid_log_level(self) -> None:
        """Test an unknown log level is rejected."""
        with pytest.raises(ValidationError, match="Invalid log level"):
            ServerConfig(log_level="VERBOSE")

    def test_env_prefix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test values are read from LLM_DOCKER_* environment variables."""
        monkeypatch.setenv("LLM_DOCKER_SERVER_NAME", "docker-tools")
        monkeypatch.setenv("LLM_DOCKER_JSON_LOGGING", "true")

        config = ServerConfig()
        assert config.server_name == "docker-tools"
        assert config.json_logging is True


class TestConfig:
    """Tests for the main Config container."""

    def test_sections(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test Config builds both sections."""
        monkeypatch.setenv("DOCKER_BASE_URL", "tcp://127.0.0.1:2375")

        config = Config()
        assert isinstance(config.docker, DockerConfig)
        assert isinstance(config.server, ServerConfig)
        assert config.docker.base_url == "tcp://127.0.0.1:2375"

    def test_repr(self) -> None:
        """Test string representation names both sections."""
        config = Config()
        assert repr(config).startswith("Config(docker=")
        assert "server=" in repr(config)
