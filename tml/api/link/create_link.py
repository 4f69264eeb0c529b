"""Create a symbolic link at an expanded destination."""

import os
from collections.abc import Iterator

from ...logging_config import get_logger
from ._ensure_parent_dirs import _ensure_parent_dirs
from ._remove_destination import _remove_destination
from ._verify_source import _verify_source
from .expand_destination import expand_destination
from .LinkError import LinkCreationFailed
from .LinkPlan import LinkPlan

logger = get_logger("link")


def link_stages(
    plan: LinkPlan, destination: str | None, verify: bool, force: bool
) -> Iterator[tuple[float, str]]:
    """Run the link stages in order, yielding progress before each one.

    ``plan`` is updated as stages complete so callers can report partial side
    effects when a later stage raises.
    """
    yield (0.1, "Expanding destination...")
    plan.destination = expand_destination(plan.source, destination)
    logger.debug("Expanded destination %r to %r", destination, plan.destination)

    yield (0.3, "Creating parent directories...")
    plan.created_dirs = _ensure_parent_dirs(plan.destination)

    if verify:
        yield (0.5, "Verifying source...")
        _verify_source(plan.source, plan.destination)

    if force:
        yield (0.7, "Removing existing destination...")
        plan.removed = _remove_destination(plan.source, plan.destination)

    yield (0.9, "Creating link...")
    try:
        os.symlink(plan.source, plan.destination)
    except OSError as e:
        raise LinkCreationFailed(plan.destination) from e
    logger.debug("Linked %s -> %s", plan.destination, plan.source)


def create_link(source: str, destination: str | None = None, verify: bool = True, force: bool = False) -> LinkPlan:
    """Create a symbolic link to ``source`` at the expanded ``destination``.

    Stages run strictly in order and the first failure aborts the rest:

    1. expand the destination
    2. create missing parent directories
    3. verify the source relative to the destination directory (``verify``)
    4. remove an existing destination (``force``)
    5. create the link

    Side effects of earlier stages are not rolled back on failure.

    Raises:
        LinkError: For any failure of the taxonomy.
        OSError: If an existing destination could not be removed.
    """
    plan = LinkPlan(source=source)
    for _ in link_stages(plan, destination, verify, force):
        pass
    return plan
