import pytest

from lsview.theme import (
    ThemeError,
    ThemeFormatError,
    ThemePathError,
    load_theme,
    parse_theme_yaml,
)

DEFAULT = {"color": "default", "icon": "fancy", "git-theme": None}


def test_empty_yaml_gives_default():
    assert parse_theme_yaml("   \n", DEFAULT) == DEFAULT


def test_missing_fields_take_default():
    result = parse_theme_yaml("icon: unicode\n", DEFAULT)
    assert result["icon"] == "unicode"
    assert result["color"] == DEFAULT["color"]


def test_unknown_field_rejected():
    with pytest.raises(ThemeFormatError):
        parse_theme_yaml("bogus: 1\n", DEFAULT)


def test_invalid_yaml_rejected():
    with pytest.raises(ThemeFormatError):
        parse_theme_yaml("icon: [unclosed\n", DEFAULT)


def test_non_mapping_rejected():
    with pytest.raises(ThemeFormatError):
        parse_theme_yaml("- a\n- b\n", DEFAULT)


def test_error_messages():
    assert str(ThemePathError("x")) == "Theme file path invalid x"
    assert str(ThemeFormatError()) == "Theme file format invalid"
    assert issubclass(ThemePathError, ThemeError)


def test_load_from_search_dirs_prefers_yaml(tmp_path):
    first = tmp_path / "first"
    second = tmp_path / "second"
    first.mkdir()
    second.mkdir()
    (second / "mine.yaml").write_text("icon: from-yaml\n")
    (second / "mine.yml").write_text("icon: from-yml\n")
    result = load_theme("mine", [first, second], DEFAULT)
    assert result["icon"] == "from-yaml"


def test_load_yml_extension(tmp_path):
    (tmp_path / "t.yml").write_text("color: custom\n")
    assert load_theme("t", [tmp_path], DEFAULT)["color"] == "custom"


def test_load_absolute_path(tmp_path):
    (tmp_path / "abs.yaml").write_text("icon: x\n")
    result = load_theme(str(tmp_path / "abs"), [], DEFAULT)
    assert result["icon"] == "x"


def test_load_missing_file(tmp_path):
    with pytest.raises(ThemePathError) as info:
        load_theme("nothing", [tmp_path], DEFAULT)
    assert info.value.path == "No valid theme file found"


def test_load_invalid_home(tmp_path):
    with pytest.raises(ThemePathError):
        load_theme("~no_such_user_for_lsview/theme", [tmp_path], DEFAULT)


def test_load_bad_format(tmp_path):
    (tmp_path / "bad.yaml").write_text("unknown: 1\n")
    with pytest.raises(ThemeFormatError):
        load_theme("bad", [tmp_path], DEFAULT)