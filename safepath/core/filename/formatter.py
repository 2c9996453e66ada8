"""Human-readable rendering of validation findings.

For display only: callers branch on the finding type, never on these strings.
"""
from typing import List, Sequence

from safepath.core.errors import UnhandledVariantError

from .filename_types import (
    ContainsNull,
    ContainsPathSeparator,
    ControlChar,
    EmptyName,
    Finding,
    InvalidChar,
    NameTooLong,
    ReservedName,
    Utf8TooLong,
)


def file_name_validation_error_to_string(finding: Finding) -> str:
    if isinstance(finding, EmptyName):
        return "Name cannot be empty"
    if isinstance(finding, NameTooLong):
        return f"Name exceeds {finding.max} characters ({finding.actual} characters)"
    if isinstance(finding, ReservedName):
        return f'"{finding.name}" is a reserved name'
    if isinstance(finding, ContainsPathSeparator):
        return 'Name cannot contain "/" character'
    if isinstance(finding, ContainsNull):
        return "Name cannot contain null character"
    if isinstance(finding, InvalidChar):
        return (
            f"Name contains characters invalid on {finding.filesystem}: "
            f"{' '.join(finding.chars)}"
        )
    if isinstance(finding, ControlChar):
        return f"Name contains control character (code {finding.code}) which is invalid on exFAT"
    if isinstance(finding, Utf8TooLong):
        return f"Name exceeds {finding.max} UTF-8 bytes for APFS ({finding.actual} bytes)"
    raise UnhandledVariantError("file_name_validation_error_to_string", finding)


def file_name_validation_errors_to_strings(findings: Sequence[Finding]) -> List[str]:
    return [file_name_validation_error_to_string(finding) for finding in findings]
