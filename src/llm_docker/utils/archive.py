"""In-memory tar archives for copying host files into containers."""

import io
import tarfile
from pathlib import Path

from llm_docker.utils.logger import get_logger

logger = get_logger(__name__)


def build_tar_archive(source: str | Path) -> bytes:
    """Archive a file or directory tree into an in-memory tar.

    The archive root is the source's basename, so extracting it at a
    destination directory produces ``<destination>/<basename>``. Directories
    are recursed and file mode bits are preserved.

    Args:
        source: Host path of the file or directory to archive

    Returns:
        Uncompressed tar bytes

    Raises:
        FileNotFoundError: If the source does not exist
    """
    source_path = Path(source)
    if not source_path.exists():
        raise FileNotFoundError(source_path)

    buffer = io.BytesIO()
    with tarfile.open(fileobj=buffer, mode="w") as tar:
        tar.add(str(source_path), arcname=source_path.name, recursive=True)

    data = buffer.getvalue()
    logger.debug(f"Archived {source_path} ({len(data)} bytes)")
    return data
