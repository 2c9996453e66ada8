"""File leaf of the path tree and its read/write operations."""
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from safepath.core.filename import is_valid_name
from safepath.core.result import Result
from safepath.infrastructure.filesystem import FileSystem
from safepath.infrastructure.logging import get_logger

from .path_types import (
    FileNotFound,
    FileReadError,
    FileWriteError,
    IoError,
    IsDirectory,
    ParentNotFound,
    PathType,
    PermissionDenied,
)

if TYPE_CHECKING:
    from .directory import Directory

logger = get_logger(__name__)


@dataclass(frozen=True, repr=False)
class File:
    """Immutable file node owned by exactly one directory.

    Build instances with ``Directory.file(name)``; direct construction
    with a name that fails validation raises ``ValueError``.
    """
    kind: ClassVar[PathType] = PathType.FILE
    name: str
    parent: "Directory"

    def __post_init__(self):
        if self.parent is None:
            raise ValueError("A file must have a parent directory")
        if not is_valid_name(self.name):
            raise ValueError(f"Invalid file name: {self.name!r}")

    @property
    def full_path(self) -> str:
        parent_path = self.parent.full_path
        if parent_path == "/":
            return f"/{self.name}"
        return f"{parent_path}/{self.name}"

    @property
    def filesystem(self) -> FileSystem:
        return self.parent.filesystem

    async def read(self) -> Result[str, FileReadError]:
        """Read the whole file as text."""
        path = self.full_path
        try:
            content = await self.filesystem.read_text_file(path)
        except FileNotFoundError:
            return Result.fail(FileNotFound(path))
        except PermissionError:
            return Result.fail(PermissionDenied(path))
        except IsADirectoryError:
            return Result.fail(IsDirectory(path))
        except OSError as e:
            logger.warning("file_read_failed", path=path, error=str(e))
            return Result.fail(IoError(path, str(e)))
        return Result.ok(content)

    async def write(self, content: str) -> Result[None, FileWriteError]:
        """Write text, replacing any existing content.

        A failed write leaves the file in whatever state the OS left it.
        """
        path = self.full_path
        try:
            await self.filesystem.write_text_file(path, content)
        except PermissionError:
            return Result.fail(PermissionDenied(path))
        except IsADirectoryError:
            return Result.fail(IsDirectory(path))
        except FileNotFoundError:
            return Result.fail(ParentNotFound(path))
        except (OSError, UnicodeEncodeError) as e:
            logger.warning("file_write_failed", path=path, error=str(e))
            return Result.fail(IoError(path, str(e)))
        logger.debug("file_written", path=path, length=len(content))
        return Result.ok(None)

    def __str__(self) -> str:
        return self.full_path

    def __repr__(self) -> str:
        return f"File({self.full_path!r})"
