from click.testing import CliRunner

from kanjipost.cli import main
from kanjipost.config import KEY_ENV


def _encode(runner, text):
    result = runner.invoke(main, ["encode", text])
    assert result.exit_code == 0, result.output
    return result.stdout.splitlines()


def test_encode_then_decode_arguments():
    runner = CliRunner()
    units = _encode(runner, "hello from the cli")
    assert len(units) == 1
    assert len(units[0]) == 140

    result = runner.invoke(main, ["decode", *units])
    assert result.exit_code == 0
    assert result.stdout == "hello from the cli\n"


def test_decode_from_stdin_multi_unit():
    runner = CliRunner()
    text = "x" * 600
    units = _encode(runner, text)
    assert len(units) == 3

    result = runner.invoke(main, ["decode"], input="\n".join(units) + "\n\n")
    assert result.exit_code == 0
    assert result.stdout == text + "\n"


def test_encode_from_stdin():
    runner = CliRunner()
    result = runner.invoke(main, ["encode"], input="piped")
    assert result.exit_code == 0
    units = result.stdout.splitlines()
    decoded = runner.invoke(main, ["decode", *units])
    assert decoded.stdout == "piped\n"


def test_decode_rejects_malformed_unit():
    runner = CliRunner()
    result = runner.invoke(main, ["decode", "abc"])
    assert result.exit_code == 1


def test_invalid_key_in_environment():
    runner = CliRunner()
    result = runner.invoke(main, ["encode", "hi"], env={KEY_ENV: "zz"})
    assert result.exit_code == 1


def test_decoy_units():
    runner = CliRunner()
    result = runner.invoke(main, ["--log-level", "warning", "decoy", "--count", "3"])
    assert result.exit_code == 0
    lines = result.stdout.splitlines()
    assert len(lines) == 3
    assert all(len(line) == 140 for line in lines)
