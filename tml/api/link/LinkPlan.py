"""Record of what a link creation did to the filesystem."""

from dataclasses import dataclass, field


@dataclass
class LinkPlan:
    """Link target plus the side effects performed so far.

    ``destination`` stays empty until the destination has been expanded.
    """

    source: str
    destination: str = ""
    created_dirs: list[str] = field(default_factory=list)
    removed: bool = False
