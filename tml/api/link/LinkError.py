"""Errors raised while creating a link.

Each error keeps the offending path(s) as attributes. Lower-level causes are
attached with ``raise ... from err`` and walked by :func:`error_chain`.
"""


class LinkError(Exception):
    """Base class for every link creation failure."""


class NoBasename(LinkError):
    """A path has no final segment to use as a link name."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Failed to find basename of {path}")


class DirectoryCreationFailed(LinkError):
    """An ancestor directory of the destination could not be created."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Failed to create directory {path}")


class SourceMissing(LinkError):
    """The link target does not exist as seen from the destination directory."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"{path} does not exist")


class SameFile(LinkError):
    """Forced removal would delete the file the link points to."""

    def __init__(self, source: str, destination: str):
        self.source = source
        self.destination = destination
        super().__init__(f"{source} and {destination} are the same file")


class UnknownFileType(LinkError):
    """The destination exists but is not a file, symlink or directory."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Unknown file type of {path}")


class LinkCreationFailed(LinkError):
    """The symlink call itself failed."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Failed to create {path}")


def error_chain(exc: BaseException) -> list[str]:
    """Return the message of ``exc`` followed by each chained cause, outermost first."""
    messages = []
    current: BaseException | None = exc
    while current is not None:
        messages.append(str(current))
        current = current.__cause__
    return messages
