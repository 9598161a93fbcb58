import pytest
from click.testing import CliRunner

from tessera import __version__
from tessera.cli.main import _expand_args, cli, main


@pytest.fixture
def runner():
    return CliRunner()


def test_version(runner):
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_box(runner):
    result = runner.invoke(cli, ["box", "2", "3", "x"])
    assert result.exit_code == 0
    assert result.output == "xxx\nxxx\n"


def test_framed_box(runner):
    result = runner.invoke(cli, ["box", "1", "2", "--frame"])
    assert result.output == "----\n|##|\n----\n"


def test_box_rejects_long_fill(runner):
    result = runner.invoke(cli, ["box", "1", "2", "ab"])
    assert result.exit_code != 0


def test_table_row_and_col(runner):
    assert runner.invoke(cli, ["table", "a", "b"]).output == "|a|b|\n"
    result = runner.invoke(cli, ["table", "--col", "a", "bbb"])
    assert result.output == "---\n a \n---\nbbb\n---\n"


def test_table_cells_may_span_lines(runner):
    result = runner.invoke(cli, ["table", "a", "b\\nc"])
    assert result.output == "|a|b|\n| |c|\n"


def test_board(runner):
    result = runner.invoke(cli, ["board"])
    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert len(lines) == 11
    assert lines[3] == "+" * 23


def test_board_with_wrong_tile_count_fails(runner):
    result = runner.invoke(cli, ["board", "123"])
    assert result.exit_code == 1
    assert "Error" in result.output


def test_render_file_with_directives(runner, tmp_path):
    path = tmp_path / "pic.txt"
    path.write_text("# @tessera: frame=true\nab")
    result = runner.invoke(cli, ["render", str(path)])
    assert result.exit_code == 0
    assert result.output == "----\n|ab|\n----\n"


def test_render_stdin_rotated(runner):
    result = runner.invoke(cli, ["render", "-", "--rotate", "1"], input="abc\ndef")
    assert result.output == "da\neb\nfc\n"


def test_flags_override_directives(runner):
    source = "# @tessera: rotate=1\nabc\ndef"
    result = runner.invoke(cli, ["render", "-", "--rotate", "0"], input=source)
    assert result.output == "abc\ndef\n"


def test_render_padding(runner):
    result = runner.invoke(cli, ["render", "-", "--position", "0", "--width", "4", "--fill", "."], input="ab")
    assert result.output == "ab..\n"


def test_environment_supplies_defaults(runner):
    result = runner.invoke(cli, ["render", "-", "--width", "4"], input="ab", env={"TESSERA_FILL": "*"})
    assert result.output == "*ab*\n"


def test_bad_directive_is_reported(runner):
    result = runner.invoke(cli, ["render", "-"], input="# @tessera: reflect=diagonal\nab")
    assert result.exit_code == 1
    assert "reflect" in result.output


def test_json_directive_false_word_turns_frame_off(runner):
    result = runner.invoke(cli, ["render", "-"], input='# @tessera: {"frame": "no"}\nab', env={"TESSERA_FRAME": "1"})
    assert result.output == "ab\n"


def test_argument_shorthands():
    assert _expand_args([]) == ["--help"]
    assert _expand_args(["pic.txt"]) == ["render", "pic.txt"]
    assert _expand_args(["box", "1", "1"]) == ["box", "1", "1"]


def test_main_renders_a_lone_text_file(tmp_path, capsys):
    path = tmp_path / "pic.txt"
    path.write_text("ab\ncd\n")
    with pytest.raises(SystemExit) as excinfo:
        main([str(path)])
    assert excinfo.value.code == 0
    assert capsys.readouterr().out == "ab\ncd\n"
