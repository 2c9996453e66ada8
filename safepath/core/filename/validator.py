"""File name validation only"""
from typing import List

from safepath.core.result import Result

from .filename_types import (
    MAX_NAME_BYTES,
    MAX_NAME_LENGTH,
    RESERVED_NAMES,
    WINDOWS_FILESYSTEMS,
    WINDOWS_INVALID_CHARS,
    ContainsNull,
    ContainsPathSeparator,
    ControlChar,
    EmptyName,
    FileNameValidationResult,
    Finding,
    InvalidChar,
    NameTooLong,
    ReservedName,
    Utf8TooLong,
)


def validate(name: str) -> FileNameValidationResult:
    """
    Validate a file or directory name for use across filesystems.

    Checks the restrictions of FAT32, exFAT, NTFS, APFS, ext2/3/4 and XFS.
    ext2/3/4 and XFS only reject NUL and "/", which the other rules cover.
    Every rule is evaluated, so a single name can produce several findings.

    Args:
        name: File or directory name to validate

    Returns:
        Result holding the unmodified name, or the findings in rule order
    """
    findings: List[Finding] = []

    if len(name) == 0:
        findings.append(EmptyName())

    if len(name) > MAX_NAME_LENGTH:
        findings.append(NameTooLong(max=MAX_NAME_LENGTH, actual=len(name)))

    if name in RESERVED_NAMES:
        findings.append(ReservedName(name=name))

    if "/" in name:
        findings.append(ContainsPathSeparator())

    if "\0" in name:
        findings.append(ContainsNull())

    found_chars = tuple(char for char in WINDOWS_INVALID_CHARS if char in name)
    if found_chars:
        findings.append(InvalidChar(chars=found_chars, filesystem=WINDOWS_FILESYSTEMS))

    # exFAT rejects 0x00-0x1F; only the first one is reported
    for char in name:
        code = ord(char)
        if code <= 0x1F:
            findings.append(ControlChar(code=code))
            break

    byte_length = len(name.encode("utf-8", "surrogatepass"))
    if byte_length > MAX_NAME_BYTES:
        findings.append(Utf8TooLong(max=MAX_NAME_BYTES, actual=byte_length))

    if findings:
        return Result.fail(findings)

    return Result.ok(name)


def is_valid_name(name: str) -> bool:
    """Check a name without building the finding list for the caller"""
    return validate(name).success
