import logging
import os
from dotenv import load_dotenv
from typing import Optional

load_dotenv()

DEFAULT_SQUARE_SIZE = 75
MIN_SQUARE_SIZE = 20
DEFAULT_FRAME_RATE = 60
DEFAULT_LOG_LEVEL = "WARNING"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default

    try:
        return int(raw)
    except ValueError:
        raise ValueError(f'Invalid value for {name}: "{raw}"') from None


class WindowConfig:
    def __init__(
        self, square_size: Optional[int] = None, frame_rate: Optional[int] = None
    ) -> None:
        if square_size is None:
            square_size = get_int_env("REVERSI_SQUARE_SIZE", DEFAULT_SQUARE_SIZE)

        if frame_rate is None:
            frame_rate = get_int_env("REVERSI_FRAME_RATE", DEFAULT_FRAME_RATE)

        if square_size < MIN_SQUARE_SIZE:
            raise ValueError(
                f"REVERSI_SQUARE_SIZE must be at least {MIN_SQUARE_SIZE}, "
                f"got {square_size}"
            )

        if frame_rate < 1:
            raise ValueError(f"REVERSI_FRAME_RATE must be positive, got {frame_rate}")

        self.square_size = square_size
        self.frame_rate = frame_rate


def get_log_level(level: Optional[str] = None) -> str:
    if level is None:
        level = os.getenv("REVERSI_LOG_LEVEL", DEFAULT_LOG_LEVEL)

    level = level.upper()

    # getLevelName() maps known names to their numeric level.
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f'Invalid value for REVERSI_LOG_LEVEL: "{level}"')

    return level


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
