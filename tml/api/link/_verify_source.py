"""Check that a link target will resolve from the link's own directory."""

import os

from ...logging_config import get_logger
from .LinkError import SourceMissing

logger = get_logger("link")


def _source_from_destination(source: str, destination: str) -> str:
    """Path at which ``source`` will be found once the link exists at ``destination``."""
    if os.path.isabs(source):
        return source
    parent = os.path.dirname(destination)
    if not parent:
        return source
    return os.path.join(parent, source)


def _verify_source(source: str, destination: str) -> str:
    """Check that the link target resolves from the destination's directory.

    Raises:
        SourceMissing: If the target does not exist.
    """
    path = _source_from_destination(source, destination)
    if not os.path.exists(path):
        raise SourceMissing(path)
    logger.debug("Verified %s exists", path)
    return path
