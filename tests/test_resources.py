import struct

import pytest

from rtcommon.errors import ErrorCode, StackError
from rtcommon.resources import (
    ResourceArchive,
    ResourceInfo,
    ResourceType,
    build_archive,
)

INDEX = b"<html>index</html>"
STYLE = b"body { color: black; }"
README = b"read me"

TREE = {
    "index.html": INDEX,
    "css": {"style.css": STYLE},
    "docs": {"inner": {"readme.txt": README}, "empty": {}},
}


@pytest.fixture
def archive():
    return ResourceArchive(build_archive(TREE))


def test_empty_archive_header_bytes():
    assert build_archive({}) == (
        b"\x0e\x00\x00\x00" + b"\x01" + b"\x0e\x00\x00\x00" + b"\x00\x00\x00\x00" + b"\x00"
    )


def test_total_size_field_matches_length():
    data = build_archive(TREE)
    assert struct.unpack_from("<I", data, 0)[0] == len(data)


def test_get_top_level_file(archive):
    assert archive.get_data("index.html") == INDEX


def test_get_nested_files(archive):
    assert archive.get_data("css/style.css") == STYLE
    assert archive.get_data("docs/inner/readme.txt") == README


def test_leading_slash_and_backslashes(archive):
    assert archive.get_data("/css/style.css") == STYLE
    assert archive.get_data("\\docs\\inner\\readme.txt") == README


def test_case_insensitive_lookup(archive):
    assert archive.get_data("CSS/Style.CSS") == STYLE


def test_missing_file_not_found(archive):
    with pytest.raises(StackError) as info:
        archive.get_data("css/missing.css")
    assert info.value.code is ErrorCode.NOT_FOUND


def test_empty_path_not_found(archive):
    with pytest.raises(StackError) as info:
        archive.get_data("")
    assert info.value.code is ErrorCode.NOT_FOUND


def test_directory_path_not_found(archive):
    with pytest.raises(StackError) as info:
        archive.get_data("docs/inner")
    assert info.value.code is ErrorCode.NOT_FOUND


def test_search_in_empty_directory_not_found(archive):
    with pytest.raises(StackError) as info:
        archive.search_file("docs/empty/x")
    assert info.value.code is ErrorCode.NOT_FOUND


def test_file_in_middle_of_path_get_data(archive):
    with pytest.raises(StackError) as info:
        archive.get_data("index.html/more")
    assert info.value.code is ErrorCode.NOT_FOUND


def test_file_in_middle_of_path_search_file(archive):
    with pytest.raises(StackError) as info:
        archive.search_file("index.html/more")
    assert info.value.code is ErrorCode.INVALID_PATH


def test_search_file_locates_contents():
    data = build_archive(TREE)
    info = ResourceArchive(data).search_file("docs/inner/readme.txt")
    assert info.type == ResourceType.FILE
    assert info.data_length == len(README)
    assert data[info.data_start:info.data_start + info.data_length] == README


def test_search_file_returns_resource_info(archive):
    info = archive.search_file("index.html")
    assert info == ResourceInfo(ResourceType.FILE, info.data_start, len(INDEX))


def test_header_too_short_is_invalid():
    with pytest.raises(StackError) as info:
        ResourceArchive(b"\x00" * 5).get_data("a")
    assert info.value.code is ErrorCode.INVALID_RESOURCE


def test_total_size_too_small_is_invalid():
    data = bytearray(build_archive(TREE))
    struct.pack_into("<I", data, 0, 3)
    with pytest.raises(StackError) as info:
        ResourceArchive(data).get_data("index.html")
    assert info.value.code is ErrorCode.INVALID_RESOURCE


def test_directory_length_too_small_is_invalid():
    data = bytearray(build_archive(TREE))
    struct.pack_into("<I", data, 9, 5)
    with pytest.raises(StackError) as info:
        ResourceArchive(data).get_data("index.html")
    assert info.value.code is ErrorCode.INVALID_RESOURCE


def test_truncated_archive_is_invalid():
    data = build_archive({"a.txt": b"x"})
    with pytest.raises(StackError) as info:
        ResourceArchive(data[:20]).get_data("a.txt")
    assert info.value.code is ErrorCode.INVALID_RESOURCE


def test_build_rejects_separator_in_name():
    with pytest.raises(ValueError):
        build_archive({"a/b": b"x"})


def test_build_rejects_long_name():
    with pytest.raises(ValueError):
        build_archive({"n" * 256: b"x"})


def test_build_rejects_unsupported_value():
    with pytest.raises(TypeError):
        build_archive({"a": 42})


def test_round_trip_every_file():
    tree = {"a": b"1", "b": {"c": b"22", "d": {"e": b""}}}
    archive = ResourceArchive(build_archive(tree))
    assert archive.get_data("a") == b"1"
    assert archive.get_data("b/c") == b"22"
    assert archive.get_data("b/d/e") == b""