import ctypes
import logging

import pytest

from liteini import IniReader, StringSource

SAMPLE = """\
; game settings
version = 3

[Video]
Width = 1920          ; px
Height = 1080 # px
Scale = 1.25 // percent-ish
VSync = on
Mode = FullScreen
Tag =
Depth = 12abc

[Player]
Name = Guest
Volume = 300
Fast = TRUE

[Video]
Width = 2560
"""


@pytest.fixture
def ini():
    return IniReader.from_string(SAMPLE)


def test_read_types(ini):
    assert ini.read("Video", "Width", 0) == 2560
    assert ini.read("Video", "Height", 0) == 1080
    assert ini.read("Video", "Scale", 0.0) == 1.25
    assert ini.read("Video", "VSync", False) is True
    assert ini.read("Video", "Mode", "") == "FullScreen"
    assert ini.read("", "version", 0) == 3


def test_reopened_section_keeps_keys(ini):
    assert ini.read("Video", "Height", 0) == 1080
    assert ini.read("Video", "Width", 0) == 2560


def test_partial_number_gives_default(ini):
    assert ini.read("Video", "Depth", 24) == 24


def test_bool_is_case_sensitive(ini):
    assert ini.read("Player", "Fast", True) is False


def test_missing_returns_same_default(ini):
    default = "fallback-value"
    assert ini.read("Nope", "Width", default) is default
    assert ini.read("Video", "Nope", default) is default
    sentinel = 12345678901234567890
    assert ini.read("Video", "Nope", sentinel) is sentinel


def test_lowercase_on_read(ini):
    assert ini.read("Video", "Mode", "", lowercase=True) == "fullscreen"
    assert ini.read("Player", "Name", "", lowercase=True) == "guest"
    assert ini.read_str("Video", "Mode", "", lowercase=True) == "fullscreen"


def test_empty_value_is_found(ini):
    assert ini.read("Video", "Tag", "none") == ""
    assert ini.read("Video", "Tag", True) is False
    assert ini.read_char("Video", "Tag", "?") == "?"


def test_typed_methods(ini):
    assert ini.read_bool("Video", "VSync", False) is True
    assert ini.read_bool("Video", "Missing", True) is True
    assert ini.read_char("Video", "Mode", "?") == "F"
    assert ini.read_int("Player", "Volume", 50) == 300
    assert ini.read_int("Player", "Volume", 50, ctypes.c_uint8) == 50
    assert ini.read_float("Video", "Scale", 1.0, ctypes.c_float) == 1.25
    assert ini.read_str("Player", "Name", "") == "Guest"


def test_unsupported_type_raises_before_lookup(ini):
    with pytest.raises(TypeError):
        ini.read("Nope", "Nope", None)
    with pytest.raises(TypeError):
        ini.read_int("Nope", "Nope", 0, ctypes.c_double)
    with pytest.raises(TypeError):
        ini.read_float("Nope", "Nope", 0.0, ctypes.c_int)


def test_queries(ini):
    assert ini.sections() == ["", "Video", "Player"]
    assert ini.has_section("Player")
    assert "Video" in ini
    assert "video" not in ini
    assert ini.has_key("Video", "Tag")
    assert not ini.has_key("Video", "tag")
    assert len(ini) == 3
    assert ini.document["Player"]["Name"] == "Guest"


def test_missing_file_is_empty(tmp_path, caplog):
    ini = IniReader(tmp_path / "nope.ini")
    assert len(ini) == 0
    assert ini.read("S", "k", 7) == 7
    assert ini.read("S", "k", "x") == "x"
    assert "not readable" in caplog.text


def test_none_source_is_empty():
    ini = IniReader(None)
    assert ini.sections() == []
    assert ini.read("S", "k", False) is False


def test_reads_file(tmp_path):
    path = tmp_path / "conf.ini"
    path.write_text("[Net]\nport = 8080\nhost = Example.org\n", encoding="utf-8")
    ini = IniReader(str(path), 4, 2)
    assert ini.read("Net", "port", 0) == 8080
    assert ini.read("Net", "host", "", lowercase=True) == "example.org"


def test_reads_stream(tmp_path):
    path = tmp_path / "conf.ini"
    path.write_text("[A]\nx = 1\n", encoding="utf-8")
    with open(path, encoding="utf-8") as fp:
        ini = IniReader(fp)
    assert ini.read("A", "x", 0) == 1


def test_reads_iterable():
    ini = IniReader(["[A]", "x = yes"])
    assert ini.read("A", "x", False) is True


def test_explicit_source():
    ini = IniReader(StringSource("k = v"))
    assert ini.read("", "k", "") == "v"


def test_fallback_does_not_change_result(ini, caplog):
    caplog.set_level(logging.DEBUG)
    assert ini.read("Video", "Depth", 8) == 8
    assert "falling back" in caplog.text


def test_undecodable_stream_is_empty(tmp_path, caplog):
    path = tmp_path / "bad.ini"
    path.write_bytes(b"\xff\xfe\xfa")
    with open(path, encoding="utf-8") as fp:
        ini = IniReader(fp)
    assert len(ini) == 0
    assert ini.read("S", "k", 5) == 5
    assert "stream read aborted" in caplog.text
