"""Rich terminal frontend.

The grid is drawn as a Rich table.  A cursor moved with the arrow keys
or WASD picks a cell, and Enter "clicks" the centre of that cell, so the
terminal drives exactly the same pointer-click state machine as the GUI.
"""

from __future__ import annotations

import sys
from pathlib import Path

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.config import GRID_COLS, GRID_ROWS, GameConfig
from backend.engine.gameplay import GameSnapshot, MemoryGame
from backend.engine.gamestate import Phase
from backend.engine.scoring import format_remaining, is_low_time
from backend.models.highscore import HighScoreStore
from backend.models.layout import Layout
from frontend.cli.input_handler import get_key_timeout

console = Console()

POLL_SECONDS = 0.1

# One glyph and colour per symbol.
_FACES: dict[int, tuple[str, str]] = {
    1: ("♠", "bold red"),
    2: ("♥", "bold magenta"),
    3: ("♦", "bold yellow"),
    4: ("♣", "bold green"),
    5: ("★", "bold cyan"),
    6: ("●", "bold blue"),
    7: ("▲", "bold bright_red"),
    8: ("■", "bold bright_green"),
}

_MOVES: dict[str, tuple[int, int]] = {
    "up": (-1, 0),
    "down": (1, 0),
    "left": (0, -1),
    "right": (0, 1),
}


# -- helpers ------------------------------------------------------------------


def move_cursor(cursor: tuple[int, int], action: str) -> tuple[int, int]:
    """Return the cursor moved by *action*, clamped to the grid."""
    dr, dc = _MOVES.get(action, (0, 0))
    r, c = cursor
    return (
        min(max(r + dr, 0), GRID_ROWS - 1),
        min(max(c + dc, 0), GRID_COLS - 1),
    )


def click_point(layout: Layout, phase: Phase, cursor: tuple[int, int]) -> tuple[int, int]:
    """Screen coordinates that Enter should click in *phase*."""
    if phase is Phase.MENU:
        return layout.start_button.center
    if phase in (Phase.WON, Phase.LOST):
        return layout.restart_button.center
    return layout.cell_rect(*cursor).center


# -- grid rendering -----------------------------------------------------------


def _render_grid(snap: GameSnapshot, cursor: tuple[int, int]) -> Table:
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        show_lines=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(GRID_COLS):
        table.add_column(width=3, justify="center")

    for row in snap.cells:
        cells: list[Text] = []
        for cell in row:
            if cell.face_up:
                glyph, style = _FACES[cell.symbol]
                if cell.matched:
                    style = f"{style} dim"
            else:
                glyph, style = "·", "white"
            if (cell.row, cell.col) == cursor:
                style = f"{style} reverse"
            cells.append(Text(f" {glyph} ", style=style))
        table.add_row(*cells)

    return table


# -- screens ------------------------------------------------------------------


def _draw_menu(snap: GameSnapshot) -> None:
    console.clear()

    best = Text()
    best.append("High score: ", style="dim")
    best.append(str(snap.high_score), style="bold yellow")

    opts = Text()
    opts.append("Enter", style="bold cyan")
    opts.append("  start    ")
    opts.append("Q", style="dim bold")
    opts.append("  quit", style="dim")

    body = Group(
        Text(""),
        Align.center(best),
        Text(""),
        Align.center(opts),
        Text(""),
    )
    console.print()
    console.print(
        Align.center(
            Panel(
                body,
                title="[bold]M E M O R Y   M A T C H[/bold]",
                border_style="bright_blue",
                padding=(1, 4),
            )
        )
    )


def _draw_game(snap: GameSnapshot, cursor: tuple[int, int]) -> None:
    console.clear()

    stats = Text()
    stats.append("Score: ", style="dim")
    stats.append(str(snap.score), style="bold yellow")
    stats.append("    ")
    time_style = "bold red" if is_low_time(snap.remaining_ms) else "bold yellow"
    stats.append(format_remaining(snap.remaining_ms), style=time_style)

    controls = Text()
    controls.append("↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  move   ", style="dim")
    controls.append("Enter", style="bold cyan")
    controls.append("  flip   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  menu", style="dim")

    panel = Panel(
        Align.center(_render_grid(snap, cursor)),
        title="[bold cyan]Memory Match[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(stats))
    console.print(Align.center(controls))


def _draw_result(snap: GameSnapshot) -> None:
    console.clear()
    won = snap.phase is Phase.WON

    headline = Text()
    if won:
        headline.append("★ ALL PAIRS FOUND ★", style="bold green")
    else:
        headline.append("Time's up!", style="bold red")

    lines = [Align.center(headline), Text("")]
    score = Text()
    score.append("Score: ", style="dim")
    score.append(str(snap.score), style="bold yellow")
    if won:
        score.append("    Flips: ", style="dim")
        score.append(str(snap.flips), style="bold yellow")
    lines.append(Align.center(score))

    best = Text()
    best.append("New high score: " if snap.new_record else "High score: ", style="dim")
    best.append(str(snap.high_score), style="bold yellow")
    lines.append(Align.center(best))

    panel = Panel(
        Group(*lines),
        title="[bold]Memory Match[/bold]",
        border_style="bold green" if won else "red",
        padding=(1, 4),
    )
    console.print()
    console.print(Align.center(panel))
    console.print(
        Align.center(Text("\nEnter  play again    Q  menu\n", style="dim"))
    )


# -- game loop ----------------------------------------------------------------


def _redraw(game: MemoryGame, cursor: tuple[int, int]) -> GameSnapshot:
    snap = game.snapshot()
    if snap.phase is Phase.MENU:
        _draw_menu(snap)
    elif snap.phase is Phase.PLAYING:
        _draw_game(snap, cursor)
    else:
        _draw_result(snap)
    sys.stdout.flush()
    return snap


def _loop(game: MemoryGame) -> None:
    cursor = (0, 0)
    shown = _redraw(game, cursor)

    while True:
        key = get_key_timeout(POLL_SECONDS)
        game.tick()

        if key == "quit":
            if game.phase is Phase.MENU:
                console.clear()
                console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
                return
            game.quit_to_menu()
        elif key in _MOVES:
            cursor = move_cursor(cursor, key)
        elif key == "enter":
            if game.phase is not Phase.PLAYING:
                cursor = (0, 0)
            game.on_pointer_down(*click_point(game.layout, game.phase, cursor))
            game.tick()

        snap = game.snapshot()
        # Redraw on input, or when the visible state changed (clock, flip-back).
        if key is not None or _visible_change(shown, snap):
            shown = _redraw(game, cursor)


def _visible_change(old: GameSnapshot, new: GameSnapshot) -> bool:
    return (
        old.phase is not new.phase
        or old.cells != new.cells
        or old.remaining_ms // 1000 != new.remaining_ms // 1000
    )


# -- public entry point -------------------------------------------------------


def run(data_dir: Path, config: GameConfig | None = None) -> None:
    """Launch the Rich terminal frontend (opens on the menu)."""
    store = HighScoreStore(data_dir / "highscore.txt")
    _loop(MemoryGame(store, config=config))
