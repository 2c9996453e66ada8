"""File name validation findings.

Each validator rule has its own frozen dataclass. The ``kind`` class
attribute identifies the rule and the fields carry its payload.
"""
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, List, Tuple, Union

from safepath.core.result import Result

# 255 is the common limit across FAT32, exFAT, NTFS, ext2/3/4 and XFS
MAX_NAME_LENGTH = 255

# APFS counts UTF-8 bytes instead of characters
MAX_NAME_BYTES = 255

WINDOWS_INVALID_CHARS: Tuple[str, ...] = ('"', '*', ':', '<', '>', '?', '\\', '|')
WINDOWS_FILESYSTEMS = "FAT32/exFAT/NTFS"

RESERVED_NAMES = (".", "..")


class FindingKind(str, Enum):
    """Validation rules, in evaluation order"""
    EMPTY = "EMPTY"
    TOO_LONG = "TOO_LONG"
    RESERVED = "RESERVED"
    CONTAINS_PATH_SEPARATOR = "CONTAINS_PATH_SEPARATOR"
    CONTAINS_NULL = "CONTAINS_NULL"
    INVALID_CHAR = "INVALID_CHAR"
    CONTROL_CHAR = "CONTROL_CHAR"
    UTF8_TOO_LONG = "UTF8_TOO_LONG"


@dataclass(frozen=True)
class EmptyName:
    """Name has no characters"""
    kind: ClassVar[FindingKind] = FindingKind.EMPTY


@dataclass(frozen=True)
class NameTooLong:
    """Name has more characters than any supported filesystem allows"""
    kind: ClassVar[FindingKind] = FindingKind.TOO_LONG
    max: int
    actual: int


@dataclass(frozen=True)
class ReservedName:
    """Name is "." or ".." """
    kind: ClassVar[FindingKind] = FindingKind.RESERVED
    name: str


@dataclass(frozen=True)
class ContainsPathSeparator:
    kind: ClassVar[FindingKind] = FindingKind.CONTAINS_PATH_SEPARATOR


@dataclass(frozen=True)
class ContainsNull:
    kind: ClassVar[FindingKind] = FindingKind.CONTAINS_NULL


@dataclass(frozen=True)
class InvalidChar:
    """Name contains characters rejected by Windows filesystems.

    ``chars`` follows the order of ``WINDOWS_INVALID_CHARS``, not the order
    the characters appear in the name.
    """
    kind: ClassVar[FindingKind] = FindingKind.INVALID_CHAR
    chars: Tuple[str, ...]
    filesystem: str = WINDOWS_FILESYSTEMS


@dataclass(frozen=True)
class ControlChar:
    """First control character (0x00-0x1F) found in the name"""
    kind: ClassVar[FindingKind] = FindingKind.CONTROL_CHAR
    code: int


@dataclass(frozen=True)
class Utf8TooLong:
    """UTF-8 encoding of the name is longer than APFS allows"""
    kind: ClassVar[FindingKind] = FindingKind.UTF8_TOO_LONG
    max: int
    actual: int


Finding = Union[
    EmptyName,
    NameTooLong,
    ReservedName,
    ContainsPathSeparator,
    ContainsNull,
    InvalidChar,
    ControlChar,
    Utf8TooLong,
]

FileNameValidationResult = Result[str, List[Finding]]
