"""Terminal cursor handling: keys move a cursor, Enter becomes a click."""

from __future__ import annotations

import pytest

from backend.engine.gamestate import Phase
from backend.models.layout import Layout
from frontend.cli.input_handler import resolve
from frontend.cli.rich.app import click_point, move_cursor

LAYOUT = Layout()


@pytest.mark.parametrize(
    ("cursor", "action", "expected"),
    [
        ((1, 1), "up", (0, 1)),
        ((1, 1), "down", (2, 1)),
        ((1, 1), "left", (1, 0)),
        ((1, 1), "right", (1, 2)),
        ((0, 0), "up", (0, 0)),
        ((0, 0), "left", (0, 0)),
        ((3, 3), "down", (3, 3)),
        ((3, 3), "right", (3, 3)),
        ((2, 2), "enter", (2, 2)),
    ],
)
def test_move_cursor_clamps(
    cursor: tuple[int, int], action: str, expected: tuple[int, int]
) -> None:
    assert move_cursor(cursor, action) == expected


@pytest.mark.parametrize("cursor", [(0, 0), (1, 3), (3, 0), (3, 3)])
def test_enter_while_playing_clicks_cursor_cell(cursor: tuple[int, int]) -> None:
    x, y = click_point(LAYOUT, Phase.PLAYING, cursor)
    assert LAYOUT.cell_at(x, y) == cursor


def test_enter_on_menu_hits_start_button() -> None:
    assert LAYOUT.start_button.contains(*click_point(LAYOUT, Phase.MENU, (2, 2)))


@pytest.mark.parametrize("phase", [Phase.WON, Phase.LOST])
def test_enter_on_result_hits_restart_button(phase: Phase) -> None:
    assert LAYOUT.restart_button.contains(*click_point(LAYOUT, phase, (0, 0)))


@pytest.mark.parametrize(
    ("ch", "action"),
    [
        ("w", "up"),
        ("S", "down"),
        ("a", "left"),
        ("D", "right"),
        ("\r", "enter"),
        (" ", "enter"),
        ("Q", "quit"),
        ("\x03", "quit"),
        ("x", ""),
    ],
)
def test_resolve_keys(ch: str, action: str) -> None:
    assert resolve(ch) == action
