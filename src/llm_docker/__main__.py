"""llm-docker server entry point."""

import asyncio
from enum import Enum
from typing import Any

import typer

from llm_docker.config import Config
from llm_docker.server import DockerToolServer
from llm_docker.utils.logger import get_logger, resolve_log_file, setup_logger
from llm_docker.version import __version__


class Transport(str, Enum):
    """Supported transport types."""

    stdio = "stdio"
    http = "http"


LOCALHOST_ADDRESSES = ("127.0.0.1", "localhost", "::1")
SHUTDOWN_COMPLETE_MSG = "llm-docker server shutdown complete"


def run_server(
    logger: Any,
    server: DockerToolServer,
    transport: Transport,
    host: str,
    port: int,
) -> None:
    """Run the server on the given transport until it exits.

    FastMCP's run() is synchronous, so startup and shutdown each get their
    own event loop around it.
    """
    asyncio.run(server.start())

    try:
        if transport == Transport.stdio:
            logger.info("Starting server with stdio transport")
            server.get_app().run(transport="stdio")
        else:
            logger.info(f"Starting server with HTTP transport on http://{host}:{port}")
            if host not in LOCALHOST_ADDRESSES:
                logger.warning(
                    "Running HTTP server on a non-localhost address. "
                    "Anyone who can reach it can run Docker commands on this host."
                )
            server.get_app().run(transport="http", host=host, port=port)
    finally:
        asyncio.run(server.stop())
        logger.info(SHUTDOWN_COMPLETE_MSG)


app = typer.Typer(
    name="llm-docker",
    help="Docker tools for LLM agents over MCP",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"llm-docker {__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main(  # noqa: B008
    transport: Transport = typer.Option(
        Transport.stdio,
        "--transport",
        help="Transport type",
    ),
    host: str = typer.Option(
        "127.0.0.1",
        "--host",
        help="Host to bind server (http transport)",
    ),
    port: int = typer.Option(
        8000,
        "--port",
        help="Port to bind server (http transport)",
    ),
    version: bool = typer.Option(  # noqa: ARG001
        False,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Run the llm-docker server with the specified transport."""
    config = Config()

    setup_logger(config.server, resolve_log_file())

    logger = get_logger(__name__)
    logger.info(f"llm-docker v{__version__}")
    logger.info(f"Configuration: {config}")

    server = DockerToolServer(config)

    try:
        run_server(logger, server, transport, host, port)
    except KeyboardInterrupt:
        logger.info("Received interrupt signal")
    except Exception as e:
        logger.exception(f"Server error: {e}")
        raise


if __name__ == "__main__":
    app()
