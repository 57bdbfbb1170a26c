import datetime
import plistlib

import pytest

from plist_emit.loaders import detect_format, load_file, load_input


def test_detect_format_by_extension_and_first_byte() -> None:
    assert detect_format(b"{}", "a.JSON") == "json"
    assert detect_format(b"{}", "a.plist") == "plist"
    assert detect_format(b"  \n[1]") == "json"
    assert detect_format(b"<?xml") == "plist"
    assert detect_format(b"bplist00") == "plist"


def test_load_input_reads_xml_and_binary_plist() -> None:
    value = {"a": [1, True], "b": b"\x00\x01", "c": datetime.datetime(2021, 1, 1)}
    assert load_input(plistlib.dumps(value)) == value
    assert load_input(plistlib.dumps(value, fmt=plistlib.FMT_BINARY)) == value


def test_load_input_reads_json() -> None:
    assert load_input(b'{"x": [1, 2.5, null]}') == {"x": [1, 2.5, None]}


def test_load_input_forced_format() -> None:
    with pytest.raises(ValueError):
        load_input(b"[1]", fmt="plist")
    with pytest.raises(ValueError):
        load_input(b"[1]", fmt="yaml")


def test_load_file_uses_extension(tmp_path) -> None:
    path = tmp_path / "in.json"
    path.write_text('["a"]', encoding="utf-8")
    assert load_file(str(path)) == ["a"]
