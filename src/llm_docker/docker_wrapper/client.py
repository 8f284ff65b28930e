"""Docker client wrapper with connection management and health checks."""

import socket
import subprocess
import threading
from pathlib import Path
from typing import Any, NamedTuple

import docker
from docker import DockerClient
from docker.errors import DockerException
from docker.models.containers import Container
from docker.utils.socket import STDERR, frames_iter
from loguru import logger

from llm_docker.config import DockerConfig
from llm_docker.utils.errors import (
    DockerConnectionError,
    DockerHealthCheckError,
    ExecTimeoutError,
)


class ExecResult(NamedTuple):
    """Outcome of a command run inside a container."""

    exit_code: int | None
    stdout: str
    stderr: str


def _decode(stream: bytes | None) -> str:
    return stream.decode("utf-8", errors="replace") if stream else ""


def _raw_socket(sock: Any) -> Any:
    """Return the OS-level socket behind an attached exec stream."""
    return getattr(sock, "_sock", sock)


def _clear_socket_timeout(sock: Any) -> None:
    for candidate in (sock, getattr(sock, "_sock", None)):
        if candidate is not None and hasattr(candidate, "settimeout"):
            candidate.settimeout(None)


def _collect_frames(sock: Any) -> tuple[bytes, bytes]:
    """Read multiplexed exec frames until EOF and split them by stream."""
    stdout: list[bytes] = []
    stderr: list[bytes] = []
    for stream, data in frames_iter(sock, tty=False):
        (stderr if stream == STDERR else stdout).append(data)
    return b"".join(stdout), b"".join(stderr)


class DockerClientWrapper:
    """Docker client wrapper with lazy connection and the composite calls tools need."""

    def __init__(self, config: DockerConfig) -> None:
        """Initialize Docker client wrapper.

        Args:
            config: Docker configuration settings

        """
        self.config = config
        self._client: DockerClient | None = None
        logger.debug(f"Initialized DockerClientWrapper with base_url={config.base_url}")

    @property
    def client(self) -> DockerClient:
        """Get Docker client with lazy initialization and health check.

        Returns:
            Initialized and healthy Docker client

        Raises:
            DockerConnectionError: If unable to connect to Docker daemon

        """
        if self._client is None:
            self._connect()
        assert self._client is not None  # _connect() raises on failure
        return self._client

    def _connect(self) -> None:
        """Establish connection to Docker daemon with health check.

        Raises:
            DockerConnectionError: If connection fails

        """
        try:
            logger.info(f"Connecting to Docker daemon at {self.config.base_url}")

            if self.config.base_url.startswith("unix://"):
                socket_path = Path(self.config.base_url.replace("unix://", ""))
                if not socket_path.exists():
                    logger.error(f"Docker socket not found: {socket_path}")
                    raise DockerConnectionError(f"Docker socket not found: {socket_path}")

            tls_config = None
            if self.config.tls_verify:
                tls_config = docker.tls.TLSConfig(
                    client_cert=(
                        str(self.config.tls_client_cert),
                        str(self.config.tls_client_key),
                    )
                    if self.config.tls_client_cert and self.config.tls_client_key
                    else None,
                    ca_cert=str(self.config.tls_ca_cert) if self.config.tls_ca_cert else None,
                    verify=True,
                )

            self._client = docker.DockerClient(
                base_url=self.config.base_url,
                timeout=self.config.timeout,
                tls=tls_config,
            )

            self._client.ping()  # type: ignore[no-untyped-call]
            logger.success("Successfully connected to Docker daemon")

        except DockerConnectionError:
            raise
        except DockerException as e:
            logger.error(f"Failed to connect to Docker daemon: {e}")
            raise DockerConnectionError(f"Cannot connect to Docker daemon: {e}") from e
        except Exception as e:
            logger.error(f"Unexpected error connecting to Docker daemon: {e}")
            raise DockerConnectionError(f"Unexpected error: {e}") from e

    def health_check(self) -> dict[str, Any]:
        """Perform health check of Docker daemon.

        Returns:
            Health status dictionary with daemon info

        Raises:
            DockerHealthCheckError: If health check fails

        """
        try:
            self.client.ping()  # type: ignore[no-untyped-call]
            info = self.client.info()  # type: ignore[no-untyped-call]
            version = self.client.version()  # type: ignore[no-untyped-call]

            health_status = {
                "status": "healthy",
                "daemon_info": {
                    "name": info.get("Name"),
                    "server_version": version.get("Version"),
                    "api_version": version.get("ApiVersion"),
                    "os": info.get("OperatingSystem"),
                },
                "containers": {
                    "total": info.get("Containers"),
                    "running": info.get("ContainersRunning"),
                },
                "images": info.get("Images"),
            }

            logger.debug("Docker health check passed")
            return health_status

        except DockerException as e:
            logger.error(f"Docker health check failed: {e}")
            raise DockerHealthCheckError(f"Health check failed: {e}") from e

    def create_container(self, config: dict[str, Any], name: str | None = None) -> Container:
        """Create a container from a raw Engine API configuration body.

        Args:
            config: Container create body (Image, Cmd, Env, ExposedPorts, HostConfig, ...)
            name: Optional container name

        Returns:
            The created container

        Raises:
            docker.errors.ImageNotFound: If the image does not exist locally
            docker.errors.APIError: With status 409 if the name is taken

        """
        logger.debug(f"Creating container from config: {config} (name={name})")
        result = self.client.api.create_container_from_config(config, name)
        for warning in result.get("Warnings") or []:
            logger.warning(f"Docker warning while creating container: {warning}")
        return self.client.containers.get(result["Id"])

    def exec_in_container(  # noqa: PLR0913 - exec options map 1:1 to the Engine API
        self,
        container: Container,
        cmd: list[str],
        stdin: str | None = None,
        workdir: str | None = None,
        user: str | None = None,
        environment: list[str] | None = None,
        timeout: float | None = None,
    ) -> ExecResult:
        """Run a command inside a running container and capture its output.

        Args:
            container: Target container
            cmd: Argument vector to execute
            stdin: Optional payload written to the command's stdin, then closed
            workdir: Working directory for the command
            user: User to run the command as
            environment: ``KEY=VALUE`` entries for the command
            timeout: Seconds to wait for the command (None waits forever)

        Returns:
            Exit code with decoded stdout and stderr

        Raises:
            ExecTimeoutError: If the command does not finish within the timeout

        """
        api = self.client.api
        exec_id = api.exec_create(
            container.id,
            cmd,
            stdout=True,
            stderr=True,
            stdin=stdin is not None,
            user=user or "",
            environment=environment,
            workdir=workdir,
        )["Id"]

        sock = api.exec_start(exec_id, socket=True)
        raw = _raw_socket(sock)
        # Only the exec deadline bounds the read, never the client request timeout
        _clear_socket_timeout(sock)

        outcome: dict[str, Any] = {}

        def read_output() -> None:
            try:
                if stdin is not None:
                    raw.sendall(stdin.encode("utf-8"))
                    raw.shutdown(socket.SHUT_WR)
                outcome["streams"] = _collect_frames(sock)
            except Exception as e:  # noqa: BLE001 - re-raised on the calling thread
                outcome["error"] = e
            finally:
                sock.close()

        # Daemon, so an abandoned reader cannot block interpreter exit
        reader = threading.Thread(
            target=read_output, name=f"docker-exec-{exec_id[:12]}", daemon=True
        )
        reader.start()
        reader.join(timeout)

        if reader.is_alive():
            logger.warning(f"Exec {exec_id} in {container.id} timed out after {timeout}s")
            # Wakes the reader's blocked poll; the command keeps running in the container
            try:
                raw.shutdown(socket.SHUT_RDWR)
            except OSError as e:
                logger.debug(f"Exec socket already closed: {e}")
            raise ExecTimeoutError(timeout or 0)

        if "error" in outcome:
            raise outcome["error"]

        stdout, stderr = outcome["streams"]
        exit_code = api.exec_inspect(exec_id).get("ExitCode")
        return ExecResult(exit_code=exit_code, stdout=_decode(stdout), stderr=_decode(stderr))

    def push_image(self, reference: str) -> subprocess.CompletedProcess[str]:
        """Push an image with the Docker CLI.

        The CLI handles registry credentials. The call blocks until the CLI exits.

        Args:
            reference: Image reference to push

        Returns:
            Completed process with captured stdout and stderr

        Raises:
            FileNotFoundError: If the Docker CLI executable is missing

        """
        cmd = [self.config.cli_path, "push", reference]
        logger.debug(f"Executing: {' '.join(cmd)}")
        return subprocess.run(  # noqa: S603 - fixed executable, no shell
            cmd,
            capture_output=True,
            text=True,
            check=False,
        )

    def close(self) -> None:
        """Close the Docker client connection."""
        if self._client is not None:
            try:
                self._client.close()  # type: ignore[no-untyped-call]
                logger.debug("Docker client connection closed")
            except Exception as e:
                logger.warning(f"Error closing Docker client: {e}")
            finally:
                self._client = None

    def __enter__(self) -> "DockerClientWrapper":
        """Enter context manager."""
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Exit context manager and close client."""
        self.close()

    def __repr__(self) -> str:
        """Return string representation."""
        status = "connected" if self._client is not None else "disconnected"
        return f"DockerClientWrapper(base_url={self.config.base_url}, status={status})"
