"""Pytest configuration and fixtures"""

import posixpath
from pathlib import Path
from typing import Dict, List, Tuple

import pytest

from safepath.core.path import Directory
from safepath.infrastructure.filesystem import FileStat, LocalFileSystem


class ScriptedFileSystem:
    """In-memory FileSystem that can inject OS failures per call.

    Scripted exceptions for an (operation, path) pair are raised in order,
    one per call, before the in-memory state is consulted. This produces
    outcomes a real disk cannot reproduce deterministically, such as a
    directory that disappears between mkdir and the follow-up stat.
    """

    def __init__(self):
        self.directories = {"/"}
        self.files: Dict[str, str] = {}
        self.failures: Dict[Tuple[str, str], List[OSError]] = {}
        self.calls: List[Tuple[str, str]] = []

    def fail(self, operation: str, path: str, *errors: OSError) -> None:
        self.failures.setdefault((operation, path), []).extend(errors)

    def _raise_scripted(self, operation: str, path: str) -> None:
        self.calls.append((operation, path))
        queue = self.failures.get((operation, path))
        if queue:
            raise queue.pop(0)

    def _blocked_by_file(self, path: str) -> bool:
        return any(path.startswith(f"{name}/") for name in self.files)

    async def stat(self, path: str) -> FileStat:
        self._raise_scripted("stat", path)
        if path in self.directories:
            return FileStat(path=path, is_file=False, is_directory=True)
        if path in self.files:
            return FileStat(
                path=path, is_file=True, is_directory=False,
                size_bytes=len(self.files[path])
            )
        if self._blocked_by_file(path):
            raise NotADirectoryError(20, "Not a directory", path)
        raise FileNotFoundError(2, "No such file or directory", path)

    async def mkdir(self, path: str) -> None:
        self._raise_scripted("mkdir", path)
        if path in self.directories or path in self.files:
            raise FileExistsError(17, "File exists", path)
        if self._blocked_by_file(path):
            raise NotADirectoryError(20, "Not a directory", path)
        if posixpath.dirname(path) not in self.directories:
            raise FileNotFoundError(2, "No such file or directory", path)
        self.directories.add(path)

    async def read_text_file(self, path: str) -> str:
        self._raise_scripted("read", path)
        if path in self.directories:
            raise IsADirectoryError(21, "Is a directory", path)
        if path not in self.files:
            raise FileNotFoundError(2, "No such file or directory", path)
        return self.files[path]

    async def write_text_file(self, path: str, content: str) -> None:
        self._raise_scripted("write", path)
        if path in self.directories:
            raise IsADirectoryError(21, "Is a directory", path)
        if posixpath.dirname(path) not in self.directories:
            raise FileNotFoundError(2, "No such file or directory", path)
        self.files[path] = content


@pytest.fixture
def scripted_fs() -> ScriptedFileSystem:
    """Fake filesystem containing only the root directory"""
    return ScriptedFileSystem()


@pytest.fixture
def local_fs() -> LocalFileSystem:
    """Local disk backend with fixed settings"""
    return LocalFileSystem(directory_mode=0o755, encoding="utf-8")


@pytest.fixture
def base_dir(tmp_path: Path, local_fs: LocalFileSystem) -> Directory:
    """Directory node for the per-test temporary directory"""
    return Directory.build(str(tmp_path), filesystem=local_fs).unwrap()
