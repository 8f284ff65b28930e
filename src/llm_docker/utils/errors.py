"""Custom exceptions for llm-docker."""


class LLMDockerError(Exception):
    """Base exception for all llm-docker errors."""


class DockerConnectionError(LLMDockerError):
    """Raised when unable to connect to Docker daemon."""


class DockerHealthCheckError(LLMDockerError):
    """Raised when Docker health check fails."""


class ExecTimeoutError(LLMDockerError):
    """Raised when a command run inside a container exceeds its timeout."""

    def __init__(self, timeout: float) -> None:
        super().__init__(f"Command did not finish within {timeout} seconds")
        self.timeout = timeout
