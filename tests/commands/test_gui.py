import pytest
from typer.testing import CliRunner

from reversi.commands import gui
from reversi.config import WindowConfig

runner = CliRunner()


class FakeWindow:
    configs: list[WindowConfig] = []

    def __init__(self, config: WindowConfig) -> None:
        FakeWindow.configs.append(config)

    def run(self) -> None:
        pass


@pytest.fixture(autouse=True)
def fake_window(monkeypatch: pytest.MonkeyPatch) -> None:
    FakeWindow.configs = []
    monkeypatch.setattr(gui, "Window", FakeWindow)
    monkeypatch.setattr(gui, "configure_logging", lambda level: None)
    monkeypatch.delenv("REVERSI_SQUARE_SIZE", raising=False)
    monkeypatch.delenv("REVERSI_LOG_LEVEL", raising=False)


def test_gui_square_size_option() -> None:
    result = runner.invoke(gui.app, ["-s", "40"])

    assert result.exit_code == 0
    assert len(FakeWindow.configs) == 1
    assert FakeWindow.configs[0].square_size == 40


def test_gui_invalid_square_size() -> None:
    result = runner.invoke(gui.app, ["--square-size", "5"])

    assert result.exit_code != 0
    assert isinstance(result.exception, ValueError)
    assert FakeWindow.configs == []


def test_gui_invalid_log_level() -> None:
    result = runner.invoke(gui.app, ["--log-level", "loud"])

    assert isinstance(result.exception, ValueError)
    assert FakeWindow.configs == []
