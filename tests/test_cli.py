from __future__ import annotations

import io
import logging
from pathlib import Path

import pytest

from fizzbuzz_workflow.cli import main
from fizzbuzz_workflow.observability.logging import JsonFormatter, KeyValueFormatter


@pytest.fixture(autouse=True)
def _isolate(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    # No .env from the repo; drop the stderr handler main() installs.
    monkeypatch.chdir(tmp_path)
    root = logging.getLogger()
    level = root.level
    yield
    for h in list(root.handlers):
        if isinstance(h.formatter, (JsonFormatter, KeyValueFormatter)):
            root.removeHandler(h)
    root.setLevel(level)


def test_number_success(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--number", "3"]) == 0
    out = capsys.readouterr().out
    assert out == "Here is the output:\n1\n2\nFizz\n"


def test_number_parse_error(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--number", "abc"]) == 1
    assert capsys.readouterr().out == "abc is not an integer\n"


def test_number_validation_error(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--number", "4001"]) == 1
    assert (
        capsys.readouterr().out
        == "You entered 4001. Please enter a valid integer between 1 and 4000.\n"
    )


def test_interactive_single_answer(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("5\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Please enter a number between 1 and 4000:\n")
    assert out.endswith("Here is the output:\n1\n2\nFizz\n4\nBuzz\n")


def test_interactive_no_input(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main([]) == 1


def test_interactive_repeat(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("0\nabc\nexit\n"))
    assert main(["--repeat"]) == 0
    out = capsys.readouterr().out
    assert "You entered 0. Please enter a valid integer between 1 and 4000." in out
    assert "abc is not an integer" in out
    assert out.count("Please enter a number between 1 and 4000:") == 3


def test_repeat_from_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    cfg = tmp_path / "app.yaml"
    cfg.write_text("shell:\n  repeat: true\n  quit_words: [stop]\n", encoding="utf-8")
    monkeypatch.setattr("sys.stdin", io.StringIO("1\nstop\n2\n"))

    assert main(["--config", str(cfg)]) == 0
    out = capsys.readouterr().out
    assert "Here is the output:\n1\n" in out
    assert "Here is the output:\n1\n2" not in out


def test_config_error_exit_code(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--config", str(tmp_path / "missing.yaml")]) == 2
    assert "config error" in capsys.readouterr().err


def test_log_level_flag_is_case_insensitive(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--number", "3", "--log-level", "debug"]) == 0
    assert logging.getLogger().level == logging.DEBUG
    assert capsys.readouterr().out == "Here is the output:\n1\n2\nFizz\n"


def test_unknown_log_level_flag_exits_2(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as ei:
        main(["--number", "3", "--log-level", "LOUD"])

    assert ei.value.code == 2
    assert "--log-level" in capsys.readouterr().err
