"""Human-readable rendering of path errors.

One renderer per error union. Each accepts only the variants of its union
and raises ``UnhandledVariantError`` for anything else. Display only.
"""
from typing import Any, Tuple, Type

from safepath.core.errors import UnhandledVariantError
from safepath.core.filename import file_name_validation_errors_to_strings

from .path_types import (
    BuildDirectoryError,
    DirectoryExistsError,
    FileExists,
    FileNotFound,
    FileReadError,
    FileWriteError,
    InvalidPathSegment,
    InvalidTrailingSlash,
    IoError,
    IsDirectory,
    MkdirError,
    MkdirpError,
    NotAbsolutePath,
    ParentNotFound,
    PermissionDenied,
)


def _describe(error: Any) -> str:
    if isinstance(error, NotAbsolutePath):
        return f'Path "{error.path}" is not absolute'
    if isinstance(error, InvalidTrailingSlash):
        return f'Path "{error.path}" must not end with "/"'
    if isinstance(error, InvalidPathSegment):
        segments = "; ".join(
            f'"{segment_error.segment}": '
            f'{", ".join(file_name_validation_errors_to_strings(segment_error.errors))}'
            for segment_error in error.path_segment_errors
        )
        return f'Path "{error.path}" contains invalid segments: {segments}'
    if isinstance(error, FileExists):
        return f'A file already exists at "{error.path}"'
    if isinstance(error, FileNotFound):
        return f'File not found: "{error.path}"'
    if isinstance(error, PermissionDenied):
        return f'Permission denied: "{error.path}"'
    if isinstance(error, ParentNotFound):
        return f'Parent directory of "{error.path}" does not exist'
    if isinstance(error, IsDirectory):
        return f'"{error.path}" is a directory'
    if isinstance(error, IoError):
        return f'I/O error at "{error.path}": {error.message}'
    raise UnhandledVariantError("path_error", error)


def _render(site: str, error: Any, allowed: Tuple[Type, ...]) -> str:
    if not isinstance(error, allowed):
        raise UnhandledVariantError(site, error)
    return _describe(error)


def build_directory_error_to_string(error: BuildDirectoryError) -> str:
    return _render(
        "build_directory_error_to_string",
        error,
        (NotAbsolutePath, InvalidTrailingSlash, InvalidPathSegment)
    )


def directory_exists_error_to_string(error: DirectoryExistsError) -> str:
    return _render("directory_exists_error_to_string", error, (FileExists, IoError))


def mkdir_error_to_string(error: MkdirError) -> str:
    return _render(
        "mkdir_error_to_string",
        error,
        (FileExists, PermissionDenied, ParentNotFound, IoError)
    )


def mkdirp_error_to_string(error: MkdirpError) -> str:
    return _render(
        "mkdirp_error_to_string",
        error,
        (FileExists, PermissionDenied, IoError)
    )


def file_read_error_to_string(error: FileReadError) -> str:
    return _render(
        "file_read_error_to_string",
        error,
        (FileNotFound, PermissionDenied, IsDirectory, IoError)
    )


def file_write_error_to_string(error: FileWriteError) -> str:
    return _render(
        "file_write_error_to_string",
        error,
        (PermissionDenied, IsDirectory, ParentNotFound, IoError)
    )
