import pytest

from gamebreaker.ini import IniFile


@pytest.fixture
def ini_path(tmp_path):
    target = tmp_path / "settings.ini"
    target.write_text("[video]\nwidth = 640\nTitle = My Game\n")
    return str(target)


def test_read_existing_values(ini_path):
    with IniFile(ini_path) as ini:
        assert ini.read_int("video", "width", -1) == 640
        assert ini.read_str("video", "Title", "none") == "My Game"


def test_missing_section_gives_default(ini_path):
    with IniFile(ini_path) as ini:
        assert ini.read_int("audio", "volume", 77) == 77
        assert ini.read_str("audio", "device", "fallback") == "fallback"


def test_missing_key_gives_default(ini_path):
    with IniFile(ini_path) as ini:
        assert ini.read_int("video", "height", 480) == 480


def test_write_and_reopen(ini_path):
    with IniFile(ini_path) as ini:
        ini.write_int("audio", "volume", 42)
        ini.write_str("player", "name", "hero")
    with IniFile(ini_path) as again:
        assert again.read_int("audio", "volume", 0) == 42
        assert again.read_str("player", "name", "") == "hero"
        assert again.read_int("video", "width", 0) == 640


def test_overwrite_value(ini_path):
    with IniFile(ini_path) as ini:
        ini.write_int("video", "width", 1024)
        assert ini.read_int("video", "width", 0) == 1024


def test_new_file_created_on_write(tmp_path):
    fname = str(tmp_path / "fresh.ini")
    with IniFile(fname) as ini:
        assert ini.read_str("a", "b", "d") == "d"
        ini.write_str("a", "b", "value")
    assert (tmp_path / "fresh.ini").exists()
    with IniFile(fname) as again:
        assert again.read_str("a", "b", "d") == "value"


def test_non_integer_value_raises(ini_path):
    with IniFile(ini_path) as ini:
        with pytest.raises(ValueError):
            ini.read_int("video", "Title", 0)


def test_use_after_close_raises(ini_path):
    ini = IniFile(ini_path)
    ini.close()
    with pytest.raises(ValueError):
        ini.read_int("video", "width", 0)