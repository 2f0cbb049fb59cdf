import pytest

from pipex.cli import USAGE_MESSAGE, main
from pipex.pipeline import NOT_FOUND_MESSAGE, OPEN_ERROR_MESSAGE


@pytest.fixture
def infile(tmp_path):
    path = tmp_path / "in.txt"
    path.write_text("alpha\nbeta\ngamma\n")
    return path


@pytest.mark.parametrize(
    "args",
    [[], ["a", "b", "c"], ["a", "b", "c", "d", "e"]],
)
def test_wrong_argument_count(args, capsys):
    assert main(args) == 1
    assert capsys.readouterr().out == USAGE_MESSAGE


def test_round_trip(tmp_path, infile):
    outfile = tmp_path / "out.txt"
    assert main([str(infile), "cat", "cat", str(outfile)]) == 0
    assert outfile.read_text() == infile.read_text()


def test_filtering_pipeline(tmp_path, infile):
    outfile = tmp_path / "out.txt"
    assert main([str(infile), "grep beta", "cat", str(outfile)]) == 0
    assert outfile.read_text() == "beta\n"


def test_second_command_not_found(tmp_path, infile, capsys):
    outfile = tmp_path / "out.txt"
    assert main([str(infile), "cat", "no-such-tool", str(outfile)]) == 1
    assert NOT_FOUND_MESSAGE in capsys.readouterr().err


def test_empty_second_command(tmp_path, infile, capsys):
    outfile = tmp_path / "out.txt"
    assert main([str(infile), "cat", "", str(outfile)]) == 1
    assert NOT_FOUND_MESSAGE in capsys.readouterr().err


def test_unopenable_outfile(tmp_path, infile, capsys):
    outfile = tmp_path / "missing" / "out.txt"
    assert main([str(infile), "cat", "cat", str(outfile)]) == 1
    assert capsys.readouterr().err.startswith(OPEN_ERROR_MESSAGE)


def test_exit_status_of_second_command(tmp_path, infile):
    script = tmp_path / "finish"
    script.write_text("#!/bin/sh\ncat >/dev/null\nexit 7\n")
    script.chmod(0o755)
    assert main([str(infile), "cat", str(script), str(tmp_path / "out")]) == 7