"""Path-related type definitions and error variants"""
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Tuple, Union

from safepath.core.filename import Finding


class PathType(str, Enum):
    """Kinds of node in the path tree (POSIX only)"""
    DIRECTORY = "directory"
    FILE = "file"
    SYMBOLIC_LINK = "symbolic_link"


class PathErrorKind(str, Enum):
    """Path build and filesystem failure kinds"""
    NOT_ABSOLUTE_PATH = "NOT_ABSOLUTE_PATH"
    INVALID_TRAILING_SLASH = "INVALID_TRAILING_SLASH"
    INVALID_PATH_SEGMENT = "INVALID_PATH_SEGMENT"
    FILE_EXISTS = "FILE_EXISTS"
    FILE_NOT_FOUND = "FILE_NOT_FOUND"
    PERMISSION_DENIED = "PERMISSION_DENIED"
    PARENT_NOT_FOUND = "PARENT_NOT_FOUND"
    IS_DIRECTORY = "IS_DIRECTORY"
    IO_ERROR = "IO_ERROR"


@dataclass(frozen=True)
class NotAbsolutePath:
    """Path does not start with "/" """
    kind: ClassVar[PathErrorKind] = PathErrorKind.NOT_ABSOLUTE_PATH
    path: str


@dataclass(frozen=True)
class InvalidTrailingSlash:
    """Path other than "/" ends with "/" """
    kind: ClassVar[PathErrorKind] = PathErrorKind.INVALID_TRAILING_SLASH
    path: str


@dataclass(frozen=True)
class PathSegmentError:
    """A single path segment and every finding raised against it"""
    segment: str
    errors: Tuple[Finding, ...]


@dataclass(frozen=True)
class InvalidPathSegment:
    """One or more segments failed validation, in encounter order"""
    kind: ClassVar[PathErrorKind] = PathErrorKind.INVALID_PATH_SEGMENT
    path: str
    path_segment_errors: Tuple[PathSegmentError, ...]


@dataclass(frozen=True)
class FileExists:
    """A non-directory entry occupies the path or one of its ancestors"""
    kind: ClassVar[PathErrorKind] = PathErrorKind.FILE_EXISTS
    path: str


@dataclass(frozen=True)
class FileNotFound:
    kind: ClassVar[PathErrorKind] = PathErrorKind.FILE_NOT_FOUND
    path: str


@dataclass(frozen=True)
class PermissionDenied:
    kind: ClassVar[PathErrorKind] = PathErrorKind.PERMISSION_DENIED
    path: str


@dataclass(frozen=True)
class ParentNotFound:
    kind: ClassVar[PathErrorKind] = PathErrorKind.PARENT_NOT_FOUND
    path: str


@dataclass(frozen=True)
class IsDirectory:
    kind: ClassVar[PathErrorKind] = PathErrorKind.IS_DIRECTORY
    path: str


@dataclass(frozen=True)
class IoError:
    """Any other OS failure, or an inconsistent state observed on disk"""
    kind: ClassVar[PathErrorKind] = PathErrorKind.IO_ERROR
    path: str
    message: str


BuildDirectoryError = Union[NotAbsolutePath, InvalidTrailingSlash, InvalidPathSegment]

DirectoryExistsError = Union[FileExists, IoError]

MkdirError = Union[FileExists, PermissionDenied, ParentNotFound, IoError]

MkdirpError = Union[FileExists, PermissionDenied, IoError]

FileReadError = Union[FileNotFound, PermissionDenied, IsDirectory, IoError]

FileWriteError = Union[PermissionDenied, IsDirectory, ParentNotFound, IoError]
