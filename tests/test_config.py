import logging
import pytest

from reversi.config import (
    DEFAULT_FRAME_RATE,
    DEFAULT_SQUARE_SIZE,
    LOG_FORMAT,
    WindowConfig,
    configure_logging,
    get_log_level,
)

ENV_VARS = ["REVERSI_SQUARE_SIZE", "REVERSI_FRAME_RATE", "REVERSI_LOG_LEVEL"]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_window_config_defaults() -> None:
    config = WindowConfig()
    assert config.square_size == DEFAULT_SQUARE_SIZE
    assert config.frame_rate == DEFAULT_FRAME_RATE


def test_window_config_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("REVERSI_SQUARE_SIZE", "50")
    monkeypatch.setenv("REVERSI_FRAME_RATE", "30")

    config = WindowConfig()
    assert config.square_size == 50
    assert config.frame_rate == 30


def test_window_config_arguments_override_env(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("REVERSI_SQUARE_SIZE", "50")

    config = WindowConfig(square_size=100, frame_rate=10)
    assert config.square_size == 100
    assert config.frame_rate == 10


@pytest.mark.parametrize(
    ["name", "value"],
    [
        pytest.param("REVERSI_SQUARE_SIZE", "big", id="square-size-not-a-number"),
        pytest.param("REVERSI_SQUARE_SIZE", "19", id="square-size-too-small"),
        pytest.param("REVERSI_FRAME_RATE", "1.5", id="frame-rate-not-an-int"),
        pytest.param("REVERSI_FRAME_RATE", "0", id="frame-rate-zero"),
    ],
)
def test_window_config_error(
    monkeypatch: pytest.MonkeyPatch, name: str, value: str
) -> None:
    monkeypatch.setenv(name, value)

    with pytest.raises(ValueError, match=name):
        WindowConfig()


def test_get_log_level_default() -> None:
    assert get_log_level() == "WARNING"


def test_get_log_level_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("REVERSI_LOG_LEVEL", "debug")
    assert get_log_level() == "DEBUG"


def test_get_log_level_argument_overrides_env(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("REVERSI_LOG_LEVEL", "debug")
    assert get_log_level("info") == "INFO"


def test_get_log_level_error() -> None:
    with pytest.raises(ValueError, match="REVERSI_LOG_LEVEL"):
        get_log_level("loud")


def test_configure_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[dict[str, str]] = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    configure_logging("INFO")

    assert calls == [{"level": "INFO", "format": LOG_FORMAT}]
