"""Image tools: list, pull, build, tag, push, remove."""

import io
import json

from docker.errors import NotFound
from docker.utils import parse_repository_tag
from pydantic import Field

from llm_docker.docker_wrapper.client import DockerClientWrapper
from llm_docker.tools.base import DockerTool, ToolInput
from llm_docker.utils.docker_error_handler import render_docker_errors
from llm_docker.utils.logger import get_logger
from llm_docker.utils.messages import (
    ERROR_IMAGE_NOT_FOUND,
    PUSH_FAILED_DEFAULT,
    PUSH_REQUIRES_NAMESPACE,
)
from llm_docker.utils.parsing import resolve_image_reference
from llm_docker.utils.safety import OperationSafety

logger = get_logger(__name__)

DEFAULT_TAG = "latest"

# Input Models


class ListImagesInput(ToolInput):
    """Input for listing images."""


class PullImageInput(ToolInput):
    """Input for pulling an image."""

    image: str = Field(description='Image name to pull (e.g., "ubuntu" or "ubuntu:22.04")')
    tag: str | None = Field(
        default=None,
        description='Tag to pull (defaults to "latest" if not specified in image)',
    )


class BuildImageInput(ToolInput):
    """Input for building an image."""

    dockerfile: str = Field(description="Dockerfile content as a string")
    tag: str | None = Field(
        default=None, description='Tag for the built image (e.g., "myimage:latest")'
    )


class TagImageInput(ToolInput):
    """Input for tagging an image."""

    image: str = Field(description="Image ID or current name:tag")
    repo: str = Field(
        description='Repository name (e.g., "username/imagename" or "registry/username/imagename")'
    )
    tag: str = Field(default=DEFAULT_TAG, description='Tag for the image (default: "latest")')
    force: bool = Field(default=True, description="Force tag even if it already exists")


class PushImageInput(ToolInput):
    """Input for pushing an image."""

    name: str = Field(description="Image name or ID to push")
    tag: str | None = Field(default=None, description="Tag to push")
    repo_tag: str | None = Field(
        default=None, description='Full repo:tag to push (e.g., "registry/repo:tag")'
    )


class RemoveImageInput(ToolInput):
    """Input for removing an image."""

    image: str = Field(description="Image ID, name, or name:tag")
    force: bool = Field(default=False, description="Force removal of the image")
    noprune: bool = Field(default=False, description="Do not delete untagged parents")


# Tool Functions


def create_list_images_tool(docker_client: DockerClientWrapper) -> DockerTool:
    """Create the list_images tool."""

    @render_docker_errors("Error listing images")
    def list_images() -> str:
        """List Docker images as JSON records."""
        logger.info("Listing images")
        images = docker_client.client.images.list()
        records = [image.attrs for image in images]

        logger.info(f"Found {len(records)} images")
        return json.dumps(records, indent=2, default=str)

    return DockerTool(
        "docker_list_images",
        "List Docker images",
        OperationSafety.SAFE,
        True,  # idempotent
        False,  # not open_world
        ListImagesInput,
        list_images,
    )


def create_pull_image_tool(docker_client: DockerClientWrapper) -> DockerTool:
    """Create the pull_image tool."""

    @render_docker_errors("Error pulling image")
    def pull_image(image: str, tag: str | None = None) -> str:
        """Pull a Docker image from a registry.

        Args:
            image: Image name, optionally with a tag
            tag: Explicit tag; wins over any tag in ``image``

        Returns:
            Confirmation with the resolved reference and image ID
        """
        reference = resolve_image_reference(image, tag)
        logger.info(f"Pulling image: {reference}")

        try:
            pulled = docker_client.client.images.pull(reference)
        except NotFound:
            logger.warning(f"Image not found in registry: {reference}")
            return ERROR_IMAGE_NOT_FOUND.format(image=reference)

        logger.info(f"Successfully pulled image: {reference}")
        return f"Image {reference} pulled successfully. ID: {pulled.id}"

    return DockerTool(
        "docker_pull_image",
        "Pull a Docker image",
        OperationSafety.MODERATE,
        True,  # idempotent (pulling same image multiple times)
        True,  # open_world (contacts external registry)
        PullImageInput,
        pull_image,
    )


def create_build_image_tool(docker_client: DockerClientWrapper) -> DockerTool:
    """Create the build_image tool."""

    @render_docker_errors("Error building image")
    def build_image(dockerfile: str, tag: str | None = None) -> str:
        """Build a Docker image from Dockerfile content.

        The Dockerfile is the whole build context, so ``COPY``/``ADD`` of
        local files is not available.

        Args:
            dockerfile: Dockerfile content
            tag: Optional ``repo[:tag]`` applied after the build

        Returns:
            Confirmation with the image ID and tag
        """
        logger.info("Building image from Dockerfile content")
        image, _ = docker_client.client.images.build(
            fileobj=io.BytesIO(dockerfile.encode("utf-8")),
            rm=True,
        )

        if tag:
            repo, image_tag = parse_repository_tag(tag)
            image.tag(repo, image_tag or DEFAULT_TAG, force=True)
            logger.info(f"Tagged built image {image.id} as {repo}:{image_tag or DEFAULT_TAG}")

        text = f"Image built successfully. ID: {image.id}"
        if tag:
            text += f", Tag: {tag}"
        return text

    return DockerTool(
        "docker_build_image",
        "Build a Docker image",
        OperationSafety.MODERATE,
        False,  # not idempotent (builds may differ)
        True,  # open_world (may pull base images)
        BuildImageInput,
        build_image,
    )


def create_tag_image_tool(docker_client: DockerClientWrapper) -> DockerTool:
    """Create the tag_image tool."""

    @render_docker_errors("Error tagging image", not_found=ERROR_IMAGE_NOT_FOUND)
    def tag_image(image: str, repo: str, tag: str = DEFAULT_TAG, force: bool = True) -> str:
        """Tag a Docker image with a new repository and tag."""
        logger.info(f"Tagging image {image} as {repo}:{tag}")
        docker_image = docker_client.client.images.get(image)
        docker_image.tag(repo, tag, force=force)

        return f"Image tagged successfully as {repo}:{tag}"

    return DockerTool(
        "docker_tag_image",
        "Tag a Docker image",
        OperationSafety.MODERATE,
        True,  # idempotent
        False,  # not open_world
        TagImageInput,
        tag_image,
    )


def create_push_image_tool(docker_client: DockerClientWrapper) -> DockerTool:
    """Create the push_image tool.

    Pushing goes through the Docker CLI so the host's registry credentials
    apply. Untargeted local names are rejected before Docker is contacted.
    """

    @render_docker_errors("Error pushing image")
    def push_image(name: str, tag: str | None = None, repo_tag: str | None = None) -> str:
        """Push a Docker image to a registry.

        Args:
            name: Image name or ID
            tag: Optional tag appended to ``name``
            repo_tag: Full ``registry/repo:tag`` to push instead of ``name``

        Returns:
            Confirmation or the CLI's error output
        """
        if "/" not in name and "/" not in (repo_tag or ""):
            logger.warning(f"Refusing to push image without registry prefix: {name}")
            return PUSH_REQUIRES_NAMESPACE.format(name)

        identifier = f"{name}:{tag}" if tag else name
        try:
            docker_client.client.images.get(identifier)
        except NotFound:
            return ERROR_IMAGE_NOT_FOUND.format(image=identifier)

        target = repo_tag or identifier
        logger.info(f"Pushing image: {target}")
        result = docker_client.push_image(target)

        if result.returncode == 0:
            logger.info(f"Successfully pushed image: {target}")
            return f"Image {target} pushed successfully"

        error_msg = (result.stderr or "").strip() or PUSH_FAILED_DEFAULT
        logger.error(f"Push of {target} failed: {error_msg}")
        return f"Error pushing image: {error_msg}"

    return DockerTool(
        "docker_push_image",
        "Push a Docker image",
        OperationSafety.MODERATE,
        True,  # idempotent (pushing the same image twice converges)
        True,  # open_world (contacts external registry)
        PushImageInput,
        push_image,
    )


def create_remove_image_tool(docker_client: DockerClientWrapper) -> DockerTool:
    """Create the remove_image tool."""

    @render_docker_errors("Error removing image", not_found=ERROR_IMAGE_NOT_FOUND)
    def remove_image(image: str, force: bool = False, noprune: bool = False) -> str:
        """Remove a Docker image."""
        logger.info(f"Removing image: {image} (force={force}, noprune={noprune})")
        docker_client.client.images.remove(image=image, force=force, noprune=noprune)

        logger.info(f"Successfully removed image: {image}")
        return f"Image {image} removed successfully"

    return DockerTool(
        "docker_remove_image",
        "Remove a Docker image",
        OperationSafety.DESTRUCTIVE,
        False,  # not idempotent (image is gone after first removal)
        False,  # not open_world
        RemoveImageInput,
        remove_image,
    )


__all__ = [
    "create_build_image_tool",
    "create_list_images_tool",
    "create_pull_image_tool",
    "create_push_image_tool",
    "create_remove_image_tool",
    "create_tag_image_tool",
]
