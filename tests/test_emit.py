import threading
from dataclasses import dataclass

import pytest

from plist_emit.emit import PlistEmitMixin, dump, save_plist
from plist_emit.types import SnapshotUnavailableError


@dataclass
class Settings(PlistEmitMixin):
    name: str
    retries: int


def test_save_plist_writes_utf8_document(tmp_path) -> None:
    path = tmp_path / "out.plist"
    value = {"title": "héllo", "n": [1, 2]}
    save_plist(value, str(path))
    assert path.read_bytes() == dump(value).encode("utf-8")


def test_save_plist_truncates_existing_file(tmp_path) -> None:
    path = tmp_path / "out.plist"
    path.write_bytes(b"x" * 10000)
    save_plist(True, str(path))
    assert path.read_bytes() == dump(True).encode("utf-8")


def test_save_plist_propagates_os_error(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        save_plist({}, str(tmp_path / "missing" / "out.plist"))


def test_save_plist_writes_nothing_when_encoding_fails(tmp_path) -> None:
    path = tmp_path / "out.plist"
    with pytest.raises(SnapshotUnavailableError):
        save_plist([threading.Lock()], str(path))
    assert not path.exists()


def test_save_plist_honours_indent(tmp_path) -> None:
    path = tmp_path / "out.plist"
    save_plist(["a"], str(path), indent="    ")
    assert "\n    <string>a</string>\n" in path.read_text(encoding="utf-8")


def test_mixin_to_plist_matches_dump() -> None:
    settings = Settings("demo", 3)
    assert settings.to_plist() == dump(settings)
    assert settings.to_plist(False) == (
        "<dict>\n"
        "\t<key>name</key>\n"
        "\t<string>demo</string>\n"
        "\t<key>retries</key>\n"
        "\t<integer>3</integer>\n"
        "</dict>\n"
    )


def test_mixin_save_plist(tmp_path) -> None:
    path = tmp_path / "settings.plist"
    Settings("demo", 3).save_plist(str(path))
    assert path.read_text(encoding="utf-8") == dump({"name": "demo", "retries": 3})
