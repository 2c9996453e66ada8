"""Symbolic link leaf of the path tree."""
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from safepath.core.filename import is_valid_name

from .path_types import PathType

if TYPE_CHECKING:
    from .directory import Directory


@dataclass(frozen=True, repr=False)
class SymbolicLink:
    """Immutable symbolic link node owned by exactly one directory.

    Only the name is modeled; the link target is never read or created.
    """
    kind: ClassVar[PathType] = PathType.SYMBOLIC_LINK
    name: str
    parent: "Directory"

    def __post_init__(self):
        if self.parent is None:
            raise ValueError("A symbolic link must have a parent directory")
        if not is_valid_name(self.name):
            raise ValueError(f"Invalid symbolic link name: {self.name!r}")

    @property
    def full_path(self) -> str:
        parent_path = self.parent.full_path
        if parent_path == "/":
            return f"/{self.name}"
        return f"{parent_path}/{self.name}"

    def __str__(self) -> str:
        return self.full_path

    def __repr__(self) -> str:
        return f"SymbolicLink({self.full_path!r})"
