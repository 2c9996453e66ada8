"""Path tree core module"""
from .directory import Directory
from .file import File
from .symbolic_link import SymbolicLink
from .formatter import (
    build_directory_error_to_string,
    directory_exists_error_to_string,
    mkdir_error_to_string,
    mkdirp_error_to_string,
    file_read_error_to_string,
    file_write_error_to_string
)
from .path_types import (
    PathType,
    PathErrorKind,
    NotAbsolutePath,
    InvalidTrailingSlash,
    PathSegmentError,
    InvalidPathSegment,
    FileExists,
    FileNotFound,
    PermissionDenied,
    ParentNotFound,
    IsDirectory,
    IoError,
    BuildDirectoryError,
    DirectoryExistsError,
    MkdirError,
    MkdirpError,
    FileReadError,
    FileWriteError
)

__all__ = [
    'Directory',
    'File',
    'SymbolicLink',
    'build_directory_error_to_string',
    'directory_exists_error_to_string',
    'mkdir_error_to_string',
    'mkdirp_error_to_string',
    'file_read_error_to_string',
    'file_write_error_to_string',
    'PathType',
    'PathErrorKind',
    'NotAbsolutePath',
    'InvalidTrailingSlash',
    'PathSegmentError',
    'InvalidPathSegment',
    'FileExists',
    'FileNotFound',
    'PermissionDenied',
    'ParentNotFound',
    'IsDirectory',
    'IoError',
    'BuildDirectoryError',
    'DirectoryExistsError',
    'MkdirError',
    'MkdirpError',
    'FileReadError',
    'FileWriteError'
]
