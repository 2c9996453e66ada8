"""Cross-filesystem name validation and a typed model of POSIX absolute paths."""
from .core.filename import (
    Finding,
    FindingKind,
    file_name_validation_error_to_string,
    file_name_validation_errors_to_strings,
    validate,
)
from .core.path import (
    Directory,
    File,
    SymbolicLink,
    PathType,
    build_directory_error_to_string,
    directory_exists_error_to_string,
    file_read_error_to_string,
    file_write_error_to_string,
    mkdir_error_to_string,
    mkdirp_error_to_string,
)
from .core.result import Result

__version__ = "0.1.0"

__all__ = [
    'Directory',
    'File',
    'Finding',
    'FindingKind',
    'PathType',
    'Result',
    'SymbolicLink',
    'build_directory_error_to_string',
    'directory_exists_error_to_string',
    'file_name_validation_error_to_string',
    'file_name_validation_errors_to_strings',
    'file_read_error_to_string',
    'file_write_error_to_string',
    'mkdir_error_to_string',
    'mkdirp_error_to_string',
    'validate',
]
