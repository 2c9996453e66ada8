"""File name validation core module"""
from .validator import validate, is_valid_name
from .formatter import (
    file_name_validation_error_to_string,
    file_name_validation_errors_to_strings
)
from .filename_types import (
    MAX_NAME_LENGTH,
    MAX_NAME_BYTES,
    WINDOWS_INVALID_CHARS,
    WINDOWS_FILESYSTEMS,
    FindingKind,
    Finding,
    FileNameValidationResult,
    EmptyName,
    NameTooLong,
    ReservedName,
    ContainsPathSeparator,
    ContainsNull,
    InvalidChar,
    ControlChar,
    Utf8TooLong
)

__all__ = [
    'validate',
    'is_valid_name',
    'file_name_validation_error_to_string',
    'file_name_validation_errors_to_strings',
    'MAX_NAME_LENGTH',
    'MAX_NAME_BYTES',
    'WINDOWS_INVALID_CHARS',
    'WINDOWS_FILESYSTEMS',
    'FindingKind',
    'Finding',
    'FileNameValidationResult',
    'EmptyName',
    'NameTooLong',
    'ReservedName',
    'ContainsPathSeparator',
    'ContainsNull',
    'InvalidChar',
    'ControlChar',
    'Utf8TooLong'
]
