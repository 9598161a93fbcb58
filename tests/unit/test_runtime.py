import logging

import pytest

from tessera.errors import InvalidArgumentError
from tessera.picture import Picture
from tessera.runtime import RenderOptions, apply_options, parse_file_flags, strip_file_flags


def test_parse_key_value_directive():
    source = "# @tessera: frame=true; rotate=1; fill=.\nabc"
    assert parse_file_flags(source) == {"frame": True, "rotate": 1, "fill": "."}


def test_parse_json_directive():
    source = '// @tessera: {"border": "*", "transpose": true}\nabc'
    assert parse_file_flags(source) == {"border": "*", "transpose": True}


def test_malformed_json_directive_is_ignored():
    assert parse_file_flags("# @tessera: {frame: true\nabc") == {}


def test_quoted_values_and_plain_text():
    flags = parse_file_flags("# @tessera: fill=' '; reflect=vertical")
    assert flags == {"fill": " ", "reflect": "vertical"}


def test_only_comment_lines_are_directives():
    source = "email me @tessera: frame=true\n# @tessera: rotate=2"
    assert parse_file_flags(source) == {"rotate": 2}
    assert parse_file_flags("") == {}


def test_directives_past_scan_window_are_picture_text():
    source = "\n".join(["x"] * 30 + ["# @tessera: frame=true"])
    assert parse_file_flags(source) == {}
    assert strip_file_flags(source) == source


def test_strip_file_flags():
    source = "# @tessera: frame=true\nab\ncd"
    assert strip_file_flags(source) == "ab\ncd"
    assert strip_file_flags("ab") == "ab"


def test_from_env():
    options = RenderOptions.from_env({"TESSERA_POSITION": "0", "TESSERA_FILL": ".", "TESSERA_FRAME": "yes"})
    assert options == RenderOptions(position=0, fill=".", frame=True)
    assert RenderOptions.from_env({}) == RenderOptions()


def test_bad_env_values_warn_and_are_ignored(caplog):
    env = {"TESSERA_POSITION": "left", "TESSERA_FILL": "ab", "TESSERA_FRAME": "maybe"}
    with caplog.at_level(logging.WARNING, logger="tessera.runtime.options"):
        options = RenderOptions.from_env(env)
    assert options == RenderOptions()
    messages = " ".join(record.getMessage() for record in caplog.records)
    assert "TESSERA_POSITION" in messages
    assert "TESSERA_FILL" in messages
    assert "TESSERA_FRAME" in messages


def test_merged_overrides_and_skips_unknown_keys():
    base = RenderOptions(position=0, fill=".")
    options = base.merged({"fill": "*", "rotate": "3", "colour": "red", "border": None})
    assert options.fill == "*"
    assert options.rotate == 3
    assert options.position == 0
    assert options.border is None
    assert base.fill == "."


@pytest.mark.parametrize("flags", [
    {"reflect": "diagonal"},
    {"rotate": "lots"},
    {"frame": "maybe"},
    {"transpose": 2},
    {"border": True},
    {"border": "**"},
    {"fill": ""},
])
def test_merged_rejects_bad_values(flags):
    with pytest.raises(InvalidArgumentError):
        RenderOptions().merged(flags)


def test_json_boolean_words_follow_key_value_form():
    for word in ("no", "false", "off", "0"):
        flags = parse_file_flags(f'# @tessera: {{"frame": "{word}", "transpose": "{word}"}}')
        options = RenderOptions(frame=True, transpose=True).merged(flags)
        assert options.frame is False
        assert options.transpose is False
    flags = parse_file_flags('# @tessera: {"frame": "yes", "transpose": 1}')
    assert RenderOptions().merged(flags) == RenderOptions(frame=True, transpose=True)
    assert RenderOptions().merged(parse_file_flags("# @tessera: frame=no")).frame is False


def test_single_character_options():
    flags = parse_file_flags("# @tessera: fill=1; border=' '")
    options = RenderOptions().merged(flags)
    assert options.fill == "1"
    assert options.border == " "


def test_apply_options_order():
    picture = Picture("abc\ndef")
    assert apply_options(picture, RenderOptions()) == picture
    rotated = apply_options(picture, RenderOptions(rotate=1, frame=True))
    assert str(rotated) == "----\n|da|\n|eb|\n|fc|\n----"
    flipped = apply_options(picture, RenderOptions(transpose=True, reflect="horizontal"))
    assert flipped.rows() == ["cf", "be", "ad"]


def test_apply_options_fixes_size_before_border():
    options = RenderOptions(width=5, depth=2, position=0, fill=".", border="#")
    result = apply_options(Picture("ab\ncd\nef"), options)
    assert str(result) == "#######\n#ab...#\n#cd...#\n#######"
