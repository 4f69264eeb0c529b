"""Unit tests for the tml CLI."""

import importlib
import os

import pytest
from typer.testing import CliRunner

from tml.cli import main
from tml.cli._create_app import _create_app

pytestmark = pytest.mark.cli

runner = CliRunner()


@pytest.fixture(autouse=True)
def plain_console(monkeypatch):
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("TTY_COMPATIBLE", raising=False)


def test_success_is_silent(workdir, tmp_path):
    target = tmp_path / "file"
    target.touch()

    result = runner.invoke(_create_app(), [str(target), "out/"])

    assert result.exit_code == 0
    assert result.output == ""
    assert os.readlink(workdir / "out" / "file") == str(target)


def test_destination_defaults_to_basename(workdir, tmp_path):
    target = tmp_path / "file"
    target.touch()

    result = runner.invoke(_create_app(), [str(target)])

    assert result.exit_code == 0
    assert (workdir / "file").is_symlink()


def test_empty_destination_defaults_to_basename(workdir, tmp_path):
    target = tmp_path / "file"
    target.touch()

    result = runner.invoke(_create_app(), [str(target), ""])

    assert result.exit_code == 0
    assert (workdir / "file").is_symlink()


def test_missing_source_fails(workdir):
    result = runner.invoke(_create_app(), ["missing", "out/link"])

    assert result.exit_code == 1
    assert "error: out/missing does not exist" in result.output
    assert "caused by" not in result.output
    assert (workdir / "out").is_dir()


def test_no_verify_flag(workdir):
    result = runner.invoke(_create_app(), ["-n", "missing", "out/link"])

    assert result.exit_code == 0
    assert (workdir / "out" / "link").is_symlink()


def test_error_with_cause(workdir):
    (workdir / "target").touch()
    (workdir / "link").touch()

    result = runner.invoke(_create_app(), ["target", "link"])

    assert result.exit_code == 1
    lines = result.output.splitlines()
    assert "error: Failed to create link" in lines
    assert any(line.startswith("caused by: ") and "File exists" in line for line in lines)


def test_force_flag(workdir):
    (workdir / "target").touch()
    (workdir / "link").touch()

    result = runner.invoke(_create_app(), ["-f", "target", "link"])

    assert result.exit_code == 0
    assert os.readlink(workdir / "link") == "target"


def test_force_same_file(workdir):
    (workdir / "file").touch()

    result = runner.invoke(_create_app(), ["--force", "file", "file"])

    assert result.exit_code == 1
    assert "error: file and file are the same file" in result.output
    assert not (workdir / "file").is_symlink()


def test_path_with_brackets_printed_literally(workdir):
    result = runner.invoke(_create_app(), ["[bold]missing[/bold]", "out/link"])

    assert result.exit_code == 1
    assert "error: out/[bold]missing[/bold] does not exist" in result.output


def test_config_disables_verify(workdir, write_config):
    write_config({"verify": False})

    result = runner.invoke(_create_app(), ["missing", "link"])

    assert result.exit_code == 0
    assert (workdir / "link").is_symlink()


def test_config_enables_force(workdir, write_config):
    write_config({"force": True})
    (workdir / "target").touch()
    (workdir / "link").touch()

    result = runner.invoke(_create_app(), ["target", "link"])

    assert result.exit_code == 0
    assert (workdir / "link").is_symlink()


def test_invalid_config(workdir, write_config):
    path = write_config("{broken")

    result = runner.invoke(_create_app(), ["target", "link"])

    assert result.exit_code == 1
    assert f"error: Invalid JSON in config file {path.resolve()}" in result.output
    assert "caused by: " in result.output
    assert not os.path.lexists(workdir / "link")


def test_verbose_logs_progress(workdir):
    (workdir / "target").touch()

    result = runner.invoke(_create_app(), ["-v", "target", "link"])

    assert result.exit_code == 0
    assert "Progress: Creating link..." in result.output
    assert "Linked link -> target" in result.output


def test_log_file_from_config(workdir, write_config, tmp_path):
    log_file = tmp_path / "logs" / "tml.log"
    write_config({"log_level": "DEBUG", "log_file": str(log_file)})
    (workdir / "target").touch()

    result = runner.invoke(_create_app(), ["target", "link"])

    assert result.exit_code == 0
    assert "tml.link - DEBUG - Linked link -> target" in log_file.read_text()


def test_help_describes_rules():
    result = runner.invoke(_create_app(), ["--help"])

    assert result.exit_code == 0
    assert "SOURCE" in result.output
    assert "--no-verify" in result.output
    assert "--force" in result.output


def test_missing_argument_is_usage_error():
    result = runner.invoke(_create_app(), [])
    assert result.exit_code == 2


def test_main_success(workdir):
    (workdir / "target").touch()
    assert main(["target", "link"]) == 0
    assert (workdir / "link").is_symlink()


def test_main_failure(workdir, capsys):
    assert main(["missing", "link"]) == 1
    assert capsys.readouterr().err == "error: missing does not exist\n"


def test_main_usage_error(workdir, capsys):
    assert main([]) == 2
    assert "Missing" in capsys.readouterr().err
    assert list(workdir.iterdir()) == []


def test_main_help(capsys):
    assert main(["--help"]) == 0
    assert "SOURCE" in capsys.readouterr().out


def test_main_version_after_separator_is_a_path(workdir, capsys):
    (workdir / "--version").touch()

    assert main(["--", "--version", "link"]) == 0

    assert capsys.readouterr().out == ""
    assert os.readlink(workdir / "link") == "--version"


def test_main_version(capsys, monkeypatch):
    module = importlib.import_module("tml.api.config.get_package_version")
    monkeypatch.setattr(module, "_VERSION_CACHE", "9.9.9")

    assert main(["--version"]) == 0
    assert capsys.readouterr().out == "tml 9.9.9\n"
