"""Docker error rendering for tool functions.

Tools never raise past their own boundary. This decorator absorbs every
exception and renders it as the text the agent sees:

- ``docker.errors.NotFound`` -> the tool's not-found template
- ``docker.errors.APIError`` with HTTP 409 -> the tool's conflict template
- anything else -> ``"<failure>: <message>"``

Templates are filled with the call's bound arguments (defaults applied), so
``"Container {container_id} not found"`` names whatever the caller passed.
"""

import functools
import inspect
from collections.abc import Callable
from http import HTTPStatus
from typing import Any, TypeVar

from docker.errors import APIError
from docker.errors import NotFound as DockerNotFound

from llm_docker.utils.logger import get_logger
from llm_docker.utils.messages import UNKNOWN_ERROR

logger = get_logger(__name__)

F = TypeVar("F", bound=Callable[..., str])


def error_message(error: BaseException) -> str:
    """Return the human-readable part of an exception.

    Docker API errors carry the daemon's explanation separately from the
    HTTP status line; prefer it when present.
    """
    if isinstance(error, APIError) and error.explanation:
        return str(error.explanation)
    return str(error) or UNKNOWN_ERROR


def is_conflict(error: APIError) -> bool:
    """Check whether a Docker API error is a name conflict (HTTP 409)."""
    return error.status_code == HTTPStatus.CONFLICT


def _bound_arguments(
    signature: inspect.Signature,
    args: tuple[Any, ...],
    kwargs: dict[str, Any],
) -> dict[str, Any]:
    try:
        bound = signature.bind_partial(*args, **kwargs)
    except TypeError:
        return dict(kwargs)
    bound.apply_defaults()
    return dict(bound.arguments)


def render_docker_errors(
    failure: str,
    not_found: str | None = None,
    conflict: str | None = None,
) -> Callable[[F], F]:
    """Decorator that turns exceptions from a tool function into result text.

    Args:
        failure: Prefix for generic failures (e.g., "Error stopping container")
        not_found: Template for missing resources (e.g., "Container {container_id} not found").
            When omitted, not-found errors are rendered as generic failures.
        conflict: Template for HTTP 409 conflicts (e.g., "Network {name} already exists").
            When omitted, conflicts are rendered as generic failures.

    Returns:
        Decorated function that always returns a string

    Example:
        @render_docker_errors(
            "Error starting container",
            not_found="Container {container_id} not found",
        )
        def start_container(container_id: str) -> str:
            docker_client.client.containers.get(container_id).start()
            return f"Container {container_id} started successfully"
    """

    def decorator(func: F) -> F:
        signature = inspect.signature(func)

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> str:
            try:
                return func(*args, **kwargs)
            except DockerNotFound as e:
                if not_found is None:
                    logger.error(f"{failure}: {error_message(e)}")
                    return f"{failure}: {error_message(e)}"
                message = not_found.format_map(_bound_arguments(signature, args, kwargs))
                logger.warning(message)
                return message
            except APIError as e:
                if conflict is not None and is_conflict(e):
                    message = conflict.format_map(_bound_arguments(signature, args, kwargs))
                    logger.warning(message)
                    return message
                logger.error(f"{failure}: {error_message(e)}")
                return f"{failure}: {error_message(e)}"
            except Exception as e:
                logger.error(f"{failure}: {type(e).__name__}: {e}")
                return f"{failure}: {error_message(e)}"

        return wrapper  # type: ignore[return-value]

    return decorator


__all__ = ["error_message", "is_conflict", "render_docker_errors"]
