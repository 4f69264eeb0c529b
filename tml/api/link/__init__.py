"""Link API domain."""

from .._output_schemas.link import LinkCreateOutput
from .create_link import create_link
from .expand_destination import expand_destination
from .FileIdentity import FileIdentity
from .LinkError import (
    DirectoryCreationFailed,
    LinkCreationFailed,
    LinkError,
    NoBasename,
    SameFile,
    SourceMissing,
    UnknownFileType,
    error_chain,
)
from .LinkPlan import LinkPlan

__all__ = [
    "DirectoryCreationFailed",
    "FileIdentity",
    "LinkCreateOutput",
    "LinkCreationFailed",
    "LinkError",
    "LinkPlan",
    "NoBasename",
    "SameFile",
    "SourceMissing",
    "UnknownFileType",
    "create_link",
    "error_chain",
    "expand_destination",
]
