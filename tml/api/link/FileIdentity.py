"""Device and inode comparison key for "is this the same filesystem object"."""

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class FileIdentity:
    """Identity of a filesystem object as seen by a non-following stat."""

    device: int
    inode: int

    @classmethod
    def of(cls, path: str) -> "FileIdentity | None":
        """Stat ``path`` without following symlinks; None if it cannot be stat'ed."""
        try:
            st = os.lstat(path)
        except (OSError, ValueError):
            return None
        return cls(device=st.st_dev, inode=st.st_ino)

    @classmethod
    def same(cls, a: str, b: str) -> bool:
        """True only if both paths stat successfully and share device and inode."""
        first = cls.of(a)
        if first is None:
            return False
        return first == cls.of(b)
