"""Output schemas for link commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class LinkCreateOutput(BaseOutputSchema):
    """Output schema for link create command.

    Output structure:
    - errors: list[str] - error message followed by each cause, outermost first
    - warnings: list[str] - list of warning messages, empty list if no warnings
    - source: str - link target exactly as given
    - destination: str - resolved destination, or the raw destination if resolution failed
    - verify: bool - whether the source was verified
    - force: bool - whether an existing destination could be removed
    - removed: bool - whether an existing destination was removed
    - created_dirs: list[str] - ancestor directories created for the destination
    """

    source: str = Field(..., description="Link target exactly as given")
    destination: str = Field(..., description="Resolved destination, raw destination if resolution failed")
    verify: bool = Field(..., description="Whether the source was verified")
    force: bool = Field(..., description="Whether an existing destination could be removed")
    removed: bool = Field(False, description="Whether an existing destination was removed")
    created_dirs: list[str] = Field(default_factory=list, description="Ancestor directories created")


register_output_schema("link", "create", LinkCreateOutput)
