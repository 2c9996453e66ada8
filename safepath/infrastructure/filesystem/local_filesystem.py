"""Local disk filesystem backend."""
import stat as stat_module
from typing import Optional

import aiofiles
import aiofiles.os

from safepath.core.config import get_settings

from .interface import FileStat


class LocalFileSystem:
    """Handles raw operations against the local disk only."""

    def __init__(
        self,
        directory_mode: Optional[int] = None,
        encoding: Optional[str] = None
    ):
        settings = get_settings()
        self.directory_mode = (
            settings.directory_mode if directory_mode is None else directory_mode
        )
        self.encoding = encoding or settings.text_encoding

    async def stat(self, path: str) -> FileStat:
        """Stat path, following symlinks."""
        result = await aiofiles.os.stat(path)
        return FileStat(
            path=path,
            is_file=stat_module.S_ISREG(result.st_mode),
            is_directory=stat_module.S_ISDIR(result.st_mode),
            size_bytes=result.st_size
        )

    async def mkdir(self, path: str) -> None:
        """Create a single directory with the configured permissions."""
        await aiofiles.os.mkdir(path, mode=self.directory_mode)

    async def read_text_file(self, path: str) -> str:
        """Read entire file content as text."""
        async with aiofiles.open(
            path, 'r', encoding=self.encoding, errors='replace'
        ) as f:
            return await f.read()

    async def write_text_file(self, path: str, content: str) -> None:
        """Write text content, truncating any existing file."""
        async with aiofiles.open(path, 'w', encoding=self.encoding) as f:
            await f.write(content)

    def __repr__(self) -> str:
        return f"LocalFileSystem(directory_mode={oct(self.directory_mode)}, encoding={self.encoding!r})"
