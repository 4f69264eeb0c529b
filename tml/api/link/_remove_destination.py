"""Clear the way for a forced link without ever deleting the link target."""

import os
import stat

from ...logging_config import get_logger
from .FileIdentity import FileIdentity
from .LinkError import SameFile, UnknownFileType

logger = get_logger("link")


def _remove_destination(source: str, destination: str) -> bool:
    """Remove whatever occupies ``destination`` so the link can take its place.

    Files and symlinks are unlinked, directories are removed only when empty.

    Returns:
        True if something was removed, False if ``destination`` did not exist.

    Raises:
        SameFile: If ``source`` and ``destination`` are the same object.
        UnknownFileType: If ``destination`` is a device, socket, fifo, etc.
        OSError: If removal fails, e.g. the directory is not empty.
    """
    if FileIdentity.same(source, destination):
        raise SameFile(source, destination)

    try:
        mode = os.lstat(destination).st_mode
    except FileNotFoundError:
        return False

    if stat.S_ISREG(mode) or stat.S_ISLNK(mode):
        os.unlink(destination)
    elif stat.S_ISDIR(mode):
        os.rmdir(destination)
    else:
        raise UnknownFileType(destination)

    logger.debug("Removed existing %s", destination)
    return True
