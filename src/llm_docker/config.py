"""Configuration management for llm-docker."""

import platform
import warnings
from pathlib import Path

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _get_default_docker_socket() -> str:
    """Detect OS and return appropriate Docker socket URL.

    Returns:
        str: Platform-specific Docker socket URL:
            - Windows: npipe:////./pipe/docker_engine
            - Linux/macOS/WSL: unix:///var/run/docker.sock
    """
    system = platform.system().lower()
    if system == "windows":
        return "npipe:////./pipe/docker_engine"
    return "unix:///var/run/docker.sock"


class DockerConfig(BaseSettings):
    """Docker client configuration."""

    model_config = SettingsConfigDict(
        env_prefix="DOCKER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    base_url: str = Field(
        default_factory=_get_default_docker_socket,
        description=(
            "Docker daemon socket URL (auto-detected based on OS, overridable via DOCKER_BASE_URL)"
        ),
    )
    timeout: int = Field(
        default=60,
        description="Default timeout for Docker API requests in seconds",
        gt=0,
    )
    tls_verify: bool = Field(
        default=False,
        description="Enable TLS verification for Docker daemon",
    )
    tls_ca_cert: Path | None = Field(
        default=None,
        description="Path to CA certificate for TLS",
    )
    tls_client_cert: Path | None = Field(
        default=None,
        description="Path to client certificate for TLS",
    )
    tls_client_key: Path | None = Field(
        default=None,
        description="Path to client key for TLS",
    )
    cli_path: str = Field(
        default="docker",
        description="Docker command-line executable used for registry pushes",
    )

    @field_validator("base_url")
    @classmethod
    def validate_docker_socket_security(cls, url: str) -> str:
        """Validate Docker socket URL for security concerns."""
        if url.startswith("tcp://") and not url.startswith("tcp://127.0.0.1"):
            warnings.warn(
                f"Docker socket exposed on network: {url}. "
                "This allows unauthenticated root access. Use TLS or unix socket.",
                UserWarning,
                stacklevel=2,
            )

        if url.startswith("http://"):
            raise ValueError(
                "Insecure HTTP Docker socket not allowed. Use HTTPS with TLS verification."
            )

        return url

    @field_validator("tls_ca_cert", "tls_client_cert", "tls_client_key")
    @classmethod
    def validate_cert_paths(cls, cert_path: Path | None) -> Path | None:
        """Validate that certificate paths exist if provided."""
        if cert_path is not None and not cert_path.exists():
            raise ValueError(f"Certificate file not found: {cert_path}")
        return cert_path

    @model_validator(mode="after")
    def validate_tls_config(self) -> "DockerConfig":
        """Warn about certificates that will be ignored."""
        if not self.tls_verify and (
            self.tls_ca_cert or self.tls_client_cert or self.tls_client_key
        ):
            warnings.warn(
                "TLS certificates configured but tls_verify=False. "
                "Set DOCKER_TLS_VERIFY=true to enable TLS verification.",
                UserWarning,
                stacklevel=2,
            )
        return self


class ServerConfig(BaseSettings):
    """MCP server and logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="LLM_DOCKER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    server_name: str = Field(
        default="llm-docker",
        description="Name the MCP server advertises to clients",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_format: str = Field(
        default=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
            "<level>{message}</level>"
        ),
        description="Log format string for loguru",
    )
    json_logging: bool = Field(
        default=False,
        description="Enable JSON structured logging",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, level: str) -> str:
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        level_upper = level.upper()
        if level_upper not in valid_levels:
            raise ValueError(f"Invalid log level: {level}. Must be one of {valid_levels}")
        return level_upper


class Config:
    """Main configuration container."""

    def __init__(self) -> None:
        """Initialize configuration from environment and .env file."""
        self.docker = DockerConfig()
        self.server = ServerConfig()

    def __repr__(self) -> str:
        """Return string representation of config."""
        return f"Config(docker={self.docker!r}, server={self.server!r})"
