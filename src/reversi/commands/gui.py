# Don't complain about setting env var in the middle of imports.
# ruff: noqa: E402

import os
import typer
from typing import Annotated, Optional

# Disable pygame start-up text.
# This needs to be before first pygame import.
os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "hide"

from reversi.config import WindowConfig, configure_logging, get_log_level
from reversi.window import Window

app = typer.Typer(pretty_exceptions_enable=False)


@app.command()
def main(
    square_size: Annotated[Optional[int], typer.Option("--square-size", "-s")] = None,
    log_level: Annotated[Optional[str], typer.Option("--log-level", "-l")] = None,
) -> None:
    configure_logging(get_log_level(log_level))
    config = WindowConfig(square_size=square_size)

    Window(config).run()


if __name__ == "__main__":
    app()
