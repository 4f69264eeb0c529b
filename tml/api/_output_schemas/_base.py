"""Fields shared by every command output."""

from pydantic import BaseModel, Field


class BaseOutputSchema(BaseModel):
    """Common part of a command's ``StageResult.output``.

    ``errors`` carries a failure message followed by its causes, which the
    CLI prints as ``error:`` and ``caused by:`` lines.
    """

    errors: list[str] = Field(default_factory=list, description="Failure message then its causes, outermost first")
    warnings: list[str] = Field(default_factory=list, description="Non-fatal problems, empty if none")
