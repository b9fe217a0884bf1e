"""Read-only archive of embedded resources organised as a directory tree.

Layout, all integers little-endian:

* header: total size (u32), then the root entry;
* entry: type (u8), data start (u32), data length (u32), name length (u8),
  followed by the name bytes (the root entry has no name).

A directory entry's data is the sequence of its child entries; a file
entry's data is the file contents.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum
from typing import Mapping, Union

from .errors import ErrorCode, StackError

_ENTRY = struct.Struct("<BIIB")
_HEADER = struct.Struct("<I")
_HEADER_SIZE = _HEADER.size + _ENTRY.size
_SEPARATORS = b"/\\"


class ResourceType(IntEnum):
    """Kind of an archive entry."""

    DIR = 1
    FILE = 2


@dataclass(frozen=True)
class ResourceInfo:
    """Location and kind of an entry found in an archive."""

    type: int
    data_start: int
    data_length: int


def _token_length(raw: bytes, pos: int) -> int:
    end = pos
    while end < len(raw) and raw[end] not in _SEPARATORS:
        end += 1
    return end - pos


class ResourceArchive:
    """Look up files in an archive held in memory."""

    def __init__(self, data):
        self._data = bytes(data)

    def _invalid(self) -> StackError:
        return StackError(ErrorCode.INVALID_RESOURCE)

    def _root(self) -> tuple[int, int]:
        if len(self._data) < _HEADER_SIZE:
            raise self._invalid()
        (total_size,) = _HEADER.unpack_from(self._data, 0)
        if total_size < _HEADER_SIZE:
            raise self._invalid()
        _, start, length, _ = _ENTRY.unpack_from(self._data, _HEADER.size)
        return start, length

    def _lookup(self, path: str, misplaced_file: ErrorCode) -> ResourceInfo:
        data = self._data
        dir_start, dir_length = self._root()
        raw = path.encode("utf-8")
        pos = 0
        found: ResourceInfo | None = None

        while found is None and pos < len(raw):
            n = _token_length(raw, pos)
            if n == 0:
                pos += 1
                n = _token_length(raw, pos)
            token = raw[pos:pos + n].lower()

            cursor, remaining = dir_start, dir_length
            matched = False
            while not matched and remaining > 0:
                if remaining < _ENTRY.size:
                    raise self._invalid()
                if cursor + _ENTRY.size > len(data):
                    raise self._invalid()
                etype, estart, elength, name_length = _ENTRY.unpack_from(data, cursor)
                if remaining < _ENTRY.size + name_length:
                    raise self._invalid()
                name_start = cursor + _ENTRY.size
                if name_start + name_length > len(data):
                    raise self._invalid()
                name = data[name_start:name_start + name_length]

                if name_length == n and name.lower() == token:
                    if etype == ResourceType.DIR:
                        dir_start, dir_length = estart, elength
                    else:
                        if pos + n < len(raw):
                            raise StackError(misplaced_file)
                        found = ResourceInfo(etype, estart, elength)
                    matched = True
                else:
                    remaining -= _ENTRY.size + name_length
                    cursor = name_start + name_length

            if not matched:
                raise StackError(ErrorCode.NOT_FOUND)
            pos += n + 1

        if found is None:
            raise StackError(ErrorCode.NOT_FOUND)
        return found

    def get_data(self, path):
        """Return the contents of the file at path.

        Raises StackError with NOT_FOUND or INVALID_RESOURCE.
        """
        info = self._lookup(path, ErrorCode.NOT_FOUND)
        if info.type != ResourceType.FILE:
            raise StackError(ErrorCode.NOT_FOUND)
        end = info.data_start + info.data_length
        if end > len(self._data):
            raise self._invalid()
        return self._data[info.data_start:end]

    def search_file(self, path):
        """Return where the file at path is stored.

        Raises StackError with NOT_FOUND, INVALID_PATH or INVALID_RESOURCE.
        """
        return self._lookup(path, ErrorCode.INVALID_PATH)


Tree = Mapping[str, Union[bytes, bytearray, memoryview, "Tree"]]


def build_archive(tree):
    """Pack a nested mapping of names to bytes (files) or mappings (directories)."""
    buf = bytearray(_HEADER_SIZE)

    def emit(directory: Mapping) -> tuple[int, int]:
        encoded = []
        for name, value in directory.items():
            raw_name = name.encode("utf-8")
            if len(raw_name) > 0xFF:
                raise ValueError(f"entry name too long: {name!r}")
            if any(sep in raw_name for sep in _SEPARATORS):
                raise ValueError(f"entry name contains a separator: {name!r}")
            encoded.append((raw_name, value))

        block_start = len(buf)
        block_length = sum(_ENTRY.size + len(raw) for raw, _ in encoded)
        buf.extend(bytes(block_length))

        cursor = block_start
        for raw_name, value in encoded:
            if isinstance(value, Mapping):
                etype = ResourceType.DIR
                start, length = emit(value)
            elif isinstance(value, (bytes, bytearray, memoryview)):
                etype = ResourceType.FILE
                start, length = len(buf), len(value)
                buf.extend(value)
            else:
                raise TypeError(
                    f"unsupported resource value of type {type(value).__name__}"
                )
            _ENTRY.pack_into(buf, cursor, etype, start, length, len(raw_name))
            buf[cursor + _ENTRY.size:cursor + _ENTRY.size + len(raw_name)] = raw_name
            cursor += _ENTRY.size + len(raw_name)
        return block_start, block_length

    root_start, root_length = emit(tree)
    if len(buf) > 0xFFFFFFFF:
        raise ValueError("archive larger than 4 GiB")
    _HEADER.pack_into(buf, 0, len(buf))
    _ENTRY.pack_into(buf, _HEADER.size, ResourceType.DIR, root_start, root_length, 0)
    return bytes(buf)