"""Create API function.

Create a symbolic link, creating parent directories as needed.
Matches CLI: tml <source> [<dest>]
"""

from collections.abc import Iterator

from ..StageResult import StageResult
from . import LinkCreateOutput
from .create_link import link_stages
from .LinkError import LinkError, error_chain
from .LinkPlan import LinkPlan


def cmd_create(source: str, destination: str | None = None, verify: bool = True, force: bool = False) -> StageResult:
    """Create a symbolic link to ``source`` at ``destination``.

    Args:
        source: Link target, stored in the link verbatim
        destination: Raw destination; empty or trailing ``/`` appends the basename of ``source``
        verify: Check that ``source`` exists relative to the destination directory
        force: Remove an existing destination that is not ``source`` itself

    Returns:
        StageResult with link creation results
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        plan = LinkPlan(source=source)
        errors: list[str] = []
        try:
            yield from link_stages(plan, destination, verify, force)
        except (LinkError, OSError) as e:
            errors = error_chain(e)

        success = not errors
        if success:
            yield (1.0, "Complete")

        result_obj.output = LinkCreateOutput(
            errors=errors,
            warnings=[],
            source=source,
            destination=plan.destination or destination or "",
            verify=verify,
            force=force,
            removed=plan.removed,
            created_dirs=plan.created_dirs,
        ).model_dump(mode="python")
        result_obj.result = f"Linked {plan.destination} -> {source}" if success else errors[0]
        result_obj.success = success

    return StageResult(
        announce=f"Linking {destination or ''} -> {source}...",
        progress_callback=do_work,
    )
