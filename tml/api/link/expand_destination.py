"""Expand a raw destination into the path that will receive the link."""

import os
from pathlib import PurePosixPath

from .LinkError import NoBasename


def _basename(source: str) -> str:
    # PurePosixPath drops trailing separators and "." segments; "" and "/"
    # yield an empty name and ".." is never a usable link name.
    name = PurePosixPath(source).name
    if name in ("", ".."):
        raise NoBasename(source)
    return name


def expand_destination(source: str, destination: str | None) -> str:
    """Expand ``destination`` based on ``source``.

    Rules:
        * The basename of ``source`` is returned if ``destination`` is empty.
        * The basename of ``source`` is appended to ``destination`` if it ends with ``/``.
        * Otherwise ``destination`` is returned verbatim.

    Raises:
        NoBasename: If a basename is needed and ``source`` has none.
    """
    if not destination:
        return _basename(source)
    if destination.endswith(os.sep):
        return os.path.join(destination, _basename(source))
    return destination
