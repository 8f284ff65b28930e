"""Docker SDK client wrapper."""

from llm_docker.docker_wrapper.client import DockerClientWrapper, ExecResult

__all__ = ["DockerClientWrapper", "ExecResult"]
