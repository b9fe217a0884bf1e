"""File system types: attributes, access modes, seek origins and entries."""

from __future__ import annotations

import datetime
from dataclasses import dataclass
from enum import IntEnum, IntFlag

MAX_NAME_LEN = 127
_MAX_SIZE = 0xFFFFFFFF


class FileAttributes(IntFlag):
    """Attribute bits of a file or directory."""

    READ_ONLY = 0x01
    HIDDEN = 0x02
    SYSTEM = 0x04
    VOLUME_NAME = 0x08
    DIRECTORY = 0x10
    ARCHIVE = 0x20


class FileMode(IntFlag):
    """Access mode bits used when opening a file."""

    READ = 1
    WRITE = 2
    CREATE = 4
    TRUNC = 8


class SeekOrigin(IntEnum):
    """Reference point for a seek."""

    SET = 0
    CUR = 1
    END = 2


def _check_size(size: int) -> None:
    if not 0 <= size <= _MAX_SIZE:
        raise ValueError(f"file size {size} does not fit in 32 bits")


@dataclass
class FileStat:
    """Status of a file."""

    attributes: FileAttributes = FileAttributes(0)
    size: int = 0
    modified: datetime.datetime | None = None

    def __post_init__(self) -> None:
        self.attributes = FileAttributes(self.attributes)
        _check_size(self.size)

    def is_directory(self):
        """Return True if the entry is a directory."""
        return FileAttributes.DIRECTORY in self.attributes


@dataclass
class DirEntry:
    """An entry read from a directory."""

    name: str
    attributes: FileAttributes = FileAttributes(0)
    size: int = 0
    modified: datetime.datetime | None = None

    def __post_init__(self) -> None:
        if len(self.name) > MAX_NAME_LEN:
            raise ValueError(
                f"name longer than {MAX_NAME_LEN} characters: {self.name!r}"
            )
        self.attributes = FileAttributes(self.attributes)
        _check_size(self.size)

    def is_directory(self):
        """Return True if the entry is a directory."""
        return FileAttributes.DIRECTORY in self.attributes