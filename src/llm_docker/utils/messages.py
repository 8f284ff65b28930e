"""Centralized message templates for tool results.

Templates use format() placeholders. Not-found and conflict templates are
filled with the tool's bound call arguments by name.
"""

# Resource not found
ERROR_CONTAINER_NOT_FOUND = "Container {container_id} not found"
ERROR_IMAGE_NOT_FOUND = "Image {image} not found"
ERROR_NETWORK_NOT_FOUND = "Network {network_id} not found"
ERROR_VOLUME_NOT_FOUND = "Volume {name} not found"

# Resource already exists
ERROR_CONTAINER_EXISTS = "Container with name {name} already exists"
ERROR_NETWORK_EXISTS = "Network {name} already exists"
ERROR_VOLUME_EXISTS = "Volume {name} already exists"

# Tool-specific
EXEC_TIMED_OUT = "Command execution timed out after {} seconds"
SOURCE_PATH_NOT_FOUND = "Source path not found: {}"
PUSH_REQUIRES_NAMESPACE = (
    "Error: Image name must include registry/username "
    "(e.g., 'username/{}'). Local images cannot be "
    "pushed without a registry prefix."
)
PUSH_FAILED_DEFAULT = "Failed to push image"

# Exceptions that carry no message
UNKNOWN_ERROR = "unknown error"
