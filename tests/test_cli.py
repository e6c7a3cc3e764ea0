from pathlib import Path

import pytest
from typer.testing import CliRunner

from pollwatch import cli
from pollwatch.cli import app

runner = CliRunner()


@pytest.fixture
def captured(monkeypatch: pytest.MonkeyPatch) -> dict:
    calls: dict = {}

    def fake_watch(store, dispatcher, interval=0.0, max_cycles=None):
        calls["store"] = store
        calls["dispatcher"] = dispatcher
        calls["interval"] = interval

    monkeypatch.setattr(cli, "watch", fake_watch)
    return calls


def test_missing_root_exits_with_error(tmp_path: Path) -> None:
    result = runner.invoke(app, [str(tmp_path / "missing"), "echo", "hi"])
    assert result.exit_code == 1


def test_wires_store_and_command(tree: Path, captured: dict) -> None:
    result = runner.invoke(app, [str(tree), "echo", "hello", "world"])

    assert result.exit_code == 0, result.output
    assert len(captured["store"]) == 3
    dispatcher = captured["dispatcher"]
    assert dispatcher.command == "echo"
    assert dispatcher.args == ["hello", "world"]
    assert dispatcher.pass_path is False
    assert dispatcher.show_failed_output is False
    assert captured["interval"] == 0.0


def test_dash_arguments_belong_to_the_command(tree: Path, captured: dict) -> None:
    result = runner.invoke(app, [str(tree), "ls", "-l", "--all"])

    assert result.exit_code == 0, result.output
    assert captured["dispatcher"].command == "ls"
    assert captured["dispatcher"].args == ["-l", "--all"]


def test_command_without_arguments(tree: Path, captured: dict) -> None:
    result = runner.invoke(app, [str(tree), "true"])

    assert result.exit_code == 0, result.output
    assert captured["dispatcher"].args == []


def test_options_before_root(tree: Path, captured: dict) -> None:
    result = runner.invoke(
        app,
        ["--interval", "0.5", "--pass-path", "--show-failed-output", str(tree), "make"],
    )

    assert result.exit_code == 0, result.output
    assert captured["interval"] == 0.5
    assert captured["dispatcher"].pass_path is True
    assert captured["dispatcher"].show_failed_output is True


def test_options_from_environment(tree: Path, captured: dict) -> None:
    result = runner.invoke(
        app,
        [str(tree), "make"],
        env={"POLLWATCH_INTERVAL": "2", "POLLWATCH_PASS_PATH": "1"},
    )

    assert result.exit_code == 0, result.output
    assert captured["interval"] == 2.0
    assert captured["dispatcher"].pass_path is True


def test_negative_interval_is_rejected(tree: Path, captured: dict) -> None:
    result = runner.invoke(app, ["--interval", "-1", str(tree), "make"])

    assert result.exit_code == 2
    assert captured == {}


def test_ctrl_c_stops_cleanly(tree: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    def interrupted(*args, **kwargs):
        raise KeyboardInterrupt

    monkeypatch.setattr(cli, "watch", interrupted)
    result = runner.invoke(app, [str(tree), "echo"])

    assert result.exit_code == 0
