#!/usr/bin/env python3
"""Memory Match Game.

Usage::

    python main.py                      # interactive menu
    python main.py -f pygame            # Pygame GUI
    python main.py -f rich              # Rich terminal
    python main.py --scores             # view the high score
    python main.py -f pygame --config tuning.yaml --duration-ms 90000
"""

import importlib
import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer

ROOT = Path(__file__).resolve().parent
DATA_DIR = ROOT / "data"
ASSETS_DIR = ROOT / "assets"

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.config import GameConfig, load_config  # noqa: E402
from backend.errors import ConfigError  # noqa: E402

logger = logging.getLogger(__name__)


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    rich = "rich"
    pygame = "pygame"


class LogLevel(StrEnum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


_RUNNERS = {
    Frontend.rich: "frontend.cli.rich.app",
    Frontend.pygame: "frontend.gui.pygame.app",
}


# -- helpers ------------------------------------------------------------------


def _print_highscore(data_dir: Path) -> None:
    from backend.models.highscore import HighScoreStore

    best = HighScoreStore(data_dir / "highscore.txt").load()

    print("\n  === HIGH SCORE ===")
    if best == 0:
        print("  No high score yet.\n")
        return
    print(f"  {best} points\n")


def _launch(frontend: Frontend, data_dir: Path, config: GameConfig) -> None:
    mod = importlib.import_module(_RUNNERS[frontend])
    logger.info("Launching %s frontend", frontend.value)
    if frontend is Frontend.pygame:
        mod.run(data_dir=data_dir, assets_dir=ASSETS_DIR, config=config)
    else:
        mod.run(data_dir=data_dir, config=config)


def _menu_loop(data_dir: Path, config: GameConfig) -> None:
    while True:
        print()
        print("  ====================================")
        print("         M E M O R Y   M A T C H      ")
        print("  ====================================")
        print()
        print("  1.  Play  (Pygame GUI)")
        print("  2.  Play  (Rich Terminal)")
        print("  3.  View High Score")
        print("  0.  Quit")
        print()

        choice = input("  Select: ").strip()

        if choice == "0":
            print("\n  Goodbye!\n")
            return

        if choice == "1":
            _launch(Frontend.pygame, data_dir, config)
        elif choice == "2":
            _launch(Frontend.rich, data_dir, config)
        elif choice == "3":
            _print_highscore(data_dir)
        else:
            print("  Unknown option.")


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Optional[Frontend] = typer.Option(
        None, "-f", "--frontend",
        help="Frontend to launch. Omit for interactive menu.",
    ),
    scores: bool = typer.Option(
        False, "--scores",
        help="Show the high score and exit.",
    ),
    config_file: Optional[Path] = typer.Option(
        None, "--config",
        exists=True, dir_okay=False,
        help="YAML file with a 'game:' section of tuning overrides.",
    ),
    duration_ms: Optional[int] = typer.Option(
        None, "--duration-ms", help="Round length in milliseconds (default 60000).",
    ),
    flip_delay_ms: Optional[int] = typer.Option(
        None, "--flip-delay-ms", help="How long a mismatched pair stays visible (default 500).",
    ),
    match_bonus: Optional[int] = typer.Option(
        None, "--match-bonus", help="Points for a matched pair (default 15).",
    ),
    mismatch_penalty: Optional[int] = typer.Option(
        None, "--mismatch-penalty", help="Points lost on a mismatch (default 5).",
    ),
    data_dir: Path = typer.Option(
        DATA_DIR, "--data-dir", file_okay=False,
        help="Directory holding highscore.txt.",
    ),
    log_level: LogLevel = typer.Option(
        LogLevel.WARNING, "--log-level", case_sensitive=False,
        help="Logging level.",
    ),
) -> None:
    """Memory Match Game."""
    logging.basicConfig(
        level=log_level.value,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if scores:
        _print_highscore(data_dir)
        return

    try:
        config = load_config(config_file) if config_file else GameConfig()
        config = config.with_overrides(
            duration_ms=duration_ms,
            flip_delay_ms=flip_delay_ms,
            match_bonus=match_bonus,
            mismatch_penalty=mismatch_penalty,
        )
    except ConfigError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=2)

    if frontend is None:
        _menu_loop(data_dir, config)
        return

    _launch(frontend, data_dir, config)


if __name__ == "__main__":
    app()
