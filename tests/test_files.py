import pytest

from zenkit.files import (
    append_buffer_to_file,
    append_string_to_file,
    get_file_extension,
    load_file_to_buffer,
    load_file_to_string,
    write_buffer_to_file,
    write_string_to_file,
)


@pytest.mark.parametrize(
    "path, ext",
    [("bee.wav", "wav"), ("res/ft.ttf", "ttf"), ("noext", ""), ("a.b.png", "png"), ("dot.", "")],
)
def test_get_file_extension(path, ext):
    assert get_file_extension(path) == ext


def test_buffer_round_trip(tmp_path):
    target = tmp_path / "data.bin"
    payload = bytes(range(256))
    write_buffer_to_file(target, payload)
    assert load_file_to_buffer(target) == payload


def test_write_replaces_content(tmp_path):
    target = tmp_path / "f.bin"
    write_buffer_to_file(target, b"first content")
    write_buffer_to_file(target, b"two")
    assert load_file_to_buffer(target) == b"two"


def test_append_buffer(tmp_path):
    target = tmp_path / "f.bin"
    append_buffer_to_file(target, b"hello")
    append_buffer_to_file(target, b"world")
    assert load_file_to_buffer(target) == b"helloworld"


def test_string_round_trip(tmp_path):
    target = tmp_path / "t.txt"
    write_string_to_file(target, "ABCD甲乙丙丁\n")
    assert load_file_to_string(target) == "ABCD甲乙丙丁\n"
    write_string_to_file(target, "x")
    assert load_file_to_string(target) == "x"


def test_append_string(tmp_path):
    target = tmp_path / "t.txt"
    append_string_to_file(target, "a")
    append_string_to_file(target, "b")
    assert load_file_to_string(target) == "ab"


def test_load_string_stops_at_nul(tmp_path):
    target = tmp_path / "t.txt"
    write_buffer_to_file(target, b"abc\0def")
    assert load_file_to_string(target) == "abc"
    assert load_file_to_buffer(target) == b"abc\0def"


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_file_to_buffer(tmp_path / "missing.bin")
    with pytest.raises(FileNotFoundError):
        load_file_to_string(tmp_path / "missing.txt")