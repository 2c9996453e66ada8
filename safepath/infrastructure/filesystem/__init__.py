"""Filesystem infrastructure module."""
from .interface import FileSystem, FileStat
from .local_filesystem import LocalFileSystem

__all__ = [
    'FileSystem',
    'FileStat',
    'LocalFileSystem'
]
