"""Directory nodes of the path tree.

A ``Directory`` is an immutable value holding its validated name and a
reference to its already-built parent. The root is the directory with an
empty name and no parent. Nodes never reference their children, so the
structure is always a tree and parents can be shared freely between
sibling subtrees.

Filesystem operations are coroutines. Each one is a check-then-act against
a filesystem this package does not own: other processes may create or
remove the same path between any two calls, and the operations classify
what they observe instead of trying to prevent it.
"""
from dataclasses import dataclass, field
from typing import ClassVar, List, Optional

from safepath.core.filename import Finding, is_valid_name, validate
from safepath.core.result import Result
from safepath.infrastructure.filesystem import FileSystem, LocalFileSystem
from safepath.infrastructure.logging import get_logger

from .file import File
from .symbolic_link import SymbolicLink
from .path_types import (
    BuildDirectoryError,
    DirectoryExistsError,
    FileExists,
    InvalidPathSegment,
    InvalidTrailingSlash,
    IoError,
    MkdirError,
    MkdirpError,
    NotAbsolutePath,
    ParentNotFound,
    PathSegmentError,
    PathType,
    PermissionDenied,
)

logger = get_logger(__name__)


@dataclass(frozen=True, repr=False)
class Directory:
    """Immutable directory node.

    Equality is structural over ``(name, parent)``, which makes two
    directories equal exactly when their full paths are equal. The
    filesystem backend is inherited from the parent and takes no part in
    equality.
    """
    kind: ClassVar[PathType] = PathType.DIRECTORY
    name: str = ""
    parent: Optional["Directory"] = None
    filesystem: Optional[FileSystem] = field(default=None, compare=False)

    def __post_init__(self):
        if self.parent is None:
            if self.name != "":
                raise ValueError(f"Root directory must have an empty name, got {self.name!r}")
        elif not is_valid_name(self.name):
            raise ValueError(f"Invalid directory name: {self.name!r}")

        if self.filesystem is None:
            inherited = self.parent.filesystem if self.parent is not None else LocalFileSystem()
            object.__setattr__(self, "filesystem", inherited)

    @classmethod
    def root(cls, filesystem: Optional[FileSystem] = None) -> "Directory":
        return cls(name="", parent=None, filesystem=filesystem)

    @classmethod
    def build(
        cls,
        path: str,
        filesystem: Optional[FileSystem] = None
    ) -> Result["Directory", BuildDirectoryError]:
        """
        Build a directory chain from an absolute POSIX path

        Every segment is validated. All failing segments are collected into
        a single INVALID_PATH_SEGMENT error instead of stopping at the first.

        Args:
            path: Absolute path such as "/home/user/documents"
            filesystem: Backend for filesystem operations (local disk by default)

        Returns:
            Result with the innermost Directory, or the build error
        """
        if not path.startswith("/"):
            return Result.fail(NotAbsolutePath(path))

        current = cls.root(filesystem)
        if path == "/":
            return Result.ok(current)

        if path.endswith("/"):
            return Result.fail(InvalidTrailingSlash(path))

        segment_errors: List[PathSegmentError] = []
        for segment in path.split("/")[1:]:
            validated = validate(segment)
            if not validated.success:
                segment_errors.append(PathSegmentError(segment, tuple(validated.error)))
            elif not segment_errors:
                current = cls(name=segment, parent=current, filesystem=current.filesystem)

        if segment_errors:
            return Result.fail(InvalidPathSegment(path, tuple(segment_errors)))

        return Result.ok(current)

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def full_path(self) -> str:
        names = []
        node = self
        while node.parent is not None:
            names.append(node.name)
            node = node.parent
        return "/" + "/".join(reversed(names))

    def ancestors(self) -> List["Directory"]:
        """Parents from the nearest up to the root"""
        chain = []
        node = self.parent
        while node is not None:
            chain.append(node)
            node = node.parent
        return chain

    def directory(self, name: str) -> Result["Directory", List[Finding]]:
        """Child directory of this one; no filesystem access"""
        return validate(name).map(
            lambda valid: Directory(name=valid, parent=self, filesystem=self.filesystem)
        )

    def file(self, name: str) -> Result[File, List[Finding]]:
        """File inside this directory; no filesystem access"""
        return validate(name).map(lambda valid: File(name=valid, parent=self))

    def symbolic_link(self, name: str) -> Result[SymbolicLink, List[Finding]]:
        """Symbolic link inside this directory; no filesystem access"""
        return validate(name).map(lambda valid: SymbolicLink(name=valid, parent=self))

    async def exists(self) -> Result[bool, DirectoryExistsError]:
        """
        Check whether this directory exists

        Returns:
            ok(True) for a directory, ok(False) when nothing is there,
            FILE_EXISTS when a file occupies the path or one of its ancestors
        """
        path = self.full_path
        try:
            stat = await self.filesystem.stat(path)
        except FileNotFoundError:
            return Result.ok(False)
        except NotADirectoryError:
            return Result.fail(FileExists(path))
        except OSError as e:
            return Result.fail(IoError(path, str(e)))

        if stat.is_directory:
            return Result.ok(True)
        return Result.fail(FileExists(path))

    async def mkdir(self) -> Result[bool, MkdirError]:
        """
        Create this directory; the parent must already exist

        Returns:
            ok(True) when created, ok(False) when a directory was already there
        """
        path = self.full_path
        try:
            await self.filesystem.mkdir(path)
        except FileExistsError:
            return await self._classify_existing(path)
        except PermissionError:
            return Result.fail(PermissionDenied(path))
        except FileNotFoundError:
            return Result.fail(ParentNotFound(path))
        except OSError as e:
            logger.warning("mkdir_failed", path=path, error=str(e))
            return Result.fail(IoError(path, str(e)))

        logger.debug("directory_created", path=path)
        return Result.ok(True)

    async def _classify_existing(self, path: str) -> Result[bool, MkdirError]:
        # mkdir saw something at the path; look again to find out what
        existing = await self.exists()
        if not existing.success:
            return Result.fail(existing.error)
        if existing.value:
            return Result.ok(False)

        logger.warning("mkdir_race_detected", path=path)
        return Result.fail(IoError(
            path,
            f"mkdir reported that {path} already exists, "
            "but it was gone when checked again"
        ))

    async def mkdirp(self) -> Result[bool, MkdirpError]:
        """
        Create this directory and every missing ancestor

        Ancestors are ensured first, from the root down. The first ancestor
        failure is returned unchanged and nothing below it is attempted.

        Returns:
            ok(True) when this directory itself was created by this call
        """
        if self.parent is not None:
            ensured = await self.parent.mkdirp()
            if not ensured.success:
                return ensured

        created = await self.mkdir()
        if not created.success and isinstance(created.error, ParentNotFound):
            path = self.full_path
            logger.error("mkdirp_parent_vanished", path=path)
            return Result.fail(IoError(
                path,
                f"Parent of {path} was not found although it was just ensured"
            ))
        return created

    def __str__(self) -> str:
        return self.full_path

    def __repr__(self) -> str:
        return f"Directory({self.full_path!r})"
