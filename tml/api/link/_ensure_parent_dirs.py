"""Create the missing ancestor directories of a link destination."""

import os

from ...logging_config import get_logger
from .LinkError import DirectoryCreationFailed

logger = get_logger("link")


def _ensure_parent_dirs(destination: str) -> list[str]:
    """Create every missing ancestor of ``destination``; return the ones created."""
    parent = os.path.dirname(destination)
    if not parent:
        return []

    missing = []
    current = parent
    while current and not os.path.lexists(current):
        missing.append(current)
        head = os.path.dirname(current)
        if head == current:
            break
        current = head

    try:
        os.makedirs(parent, exist_ok=True)
    except OSError as e:
        raise DirectoryCreationFailed(parent) from e

    if missing:
        logger.debug("Created directories %s", ", ".join(reversed(missing)))
    return list(reversed(missing))
