"""Abstract OS filesystem boundary.

Implementations report outcomes the way the ``os`` module does: a call that
succeeds returns, a call that fails raises the matching ``OSError``
subclass (``FileNotFoundError``, ``FileExistsError``, ``PermissionError``,
``NotADirectoryError``, ``IsADirectoryError``) or a plain ``OSError``.
Translating those into result variants is the path model's job.
"""
from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class FileStat:
    """Metadata for a file or directory"""
    path: str
    is_file: bool
    is_directory: bool
    size_bytes: int = 0


class FileSystem(Protocol):
    """Protocol for filesystem backends used by Directory and File"""

    async def stat(self, path: str) -> FileStat:
        """Return metadata for ``path``, following symlinks."""
        ...

    async def mkdir(self, path: str) -> None:
        """Create a single directory; parents must already exist."""
        ...

    async def read_text_file(self, path: str) -> str:
        ...

    async def write_text_file(self, path: str, content: str) -> None:
        """Create or truncate ``path`` and write ``content``."""
        ...
