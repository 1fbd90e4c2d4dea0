"""Tests for the foxxy-env CLI (foxxy.main)."""

import json
import sys
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from foxxy import RemoteInfo
from foxxy.main import create_parser, main

pytestmark = pytest.mark.usefixtures("restore_root_logging")


def test_parser_requires_command() -> None:
    """Test a subcommand is mandatory."""
    with pytest.raises(SystemExit):
        create_parser().parse_args([])


def test_parser_remote_defaults() -> None:
    """Test the remote command defaults to origin in the current directory."""
    args = create_parser().parse_args(["remote"])
    assert args.remote == "origin"
    assert args.directory is None


# === config ===


def test_main_config_prints_json(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Test 'config' prints the parsed document."""
    (tmp_path / "foxxy.toml").write_text('name = "widget"\n', encoding="utf-8")

    with pytest.raises(SystemExit) as exc_info:
        main(["config", "foxxy", "-d", str(tmp_path)])

    assert exc_info.value.code == 0
    assert json.loads(capsys.readouterr().out) == {"name": "widget"}


def test_main_config_missing(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Test 'config' exits with status 1 when there is no config."""
    with pytest.raises(SystemExit) as exc_info:
        main(["config", "foxxy", "-d", str(tmp_path)])

    assert exc_info.value.code == 1
    assert "Failed to find a config file named foxxy" in capsys.readouterr().err


# === exec ===


def test_main_exec_echoes_output(capsys: pytest.CaptureFixture[str]) -> None:
    """Test 'exec' announces the command, echoes output and keeps the exit code."""
    with pytest.raises(SystemExit) as exc_info:
        main(["exec", "--", sys.executable, "-c", "print('hi'); raise SystemExit(4)"])

    assert exc_info.value.code == 4
    out = capsys.readouterr().out
    assert out.startswith(f"  - Executing: {sys.executable} -c")
    assert out.endswith("hi\n")


def test_main_exec_quiet(capsys: pytest.CaptureFixture[str]) -> None:
    """Test 'exec -q' prints only the command's output."""
    with pytest.raises(SystemExit) as exc_info:
        main(["exec", "-q", "--", sys.executable, "-c", "print('hi')"])

    assert exc_info.value.code == 0
    assert capsys.readouterr().out == "hi\n"


def test_main_exec_strict_failure(capsys: pytest.CaptureFixture[str]) -> None:
    """Test 'exec --strict' turns a failing command into a fatal error."""
    with pytest.raises(SystemExit) as exc_info:
        main(
            [
                "exec",
                "--strict",
                "-q",
                "--",
                sys.executable,
                "-c",
                "import sys; print('oops', file=sys.stderr); sys.exit(2)",
            ]
        )

    assert exc_info.value.code == 1
    captured = capsys.readouterr()
    assert captured.out == "STDOUT\n\nSTDERR\n"
    assert captured.err == "oops\nError: Executing process unexpectedly failed. Exiting\n"


# === remote ===


@patch("foxxy.main.get_remote_info")
def test_main_remote_prints_json(
    mock_get: MagicMock, capsys: pytest.CaptureFixture[str]
) -> None:
    """Test 'remote' prints site, owner, repo and web URL."""
    mock_get.return_value = RemoteInfo("github.com", "acme", "widget")

    with pytest.raises(SystemExit) as exc_info:
        main(["remote", "-C", "/workspace", "-r", "upstream"])

    assert exc_info.value.code == 0
    mock_get.assert_called_once_with("/workspace", "upstream")
    assert json.loads(capsys.readouterr().out) == {
        "site": "github.com",
        "owner": "acme",
        "repo": "widget",
        "web_url": "https://github.com/acme/widget",
    }


def test_main_exec_output_is_verbatim(capsys: pytest.CaptureFixture[str]) -> None:
    """Test 'exec' echoes tabs in the command's output unchanged."""
    with pytest.raises(SystemExit) as exc_info:
        main(
            [
                "exec",
                "-q",
                "--",
                sys.executable,
                "-c",
                "import sys; sys.stdout.write('a\\tb\\n'); sys.stderr.write('x\\ty')",
            ]
        )

    assert exc_info.value.code == 0
    captured = capsys.readouterr()
    assert captured.out == "a\tb\n"
    assert captured.err == "x\ty"
