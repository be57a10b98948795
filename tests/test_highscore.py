"""High score file: best-effort load and save."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from backend.engine.gameplay import MemoryGame
from backend.models.highscore import HighScoreStore


def test_missing_file_reads_zero(tmp_path: Path) -> None:
    assert HighScoreStore(tmp_path / "nope.txt").load() == 0


@pytest.mark.parametrize(
    ("content", "expected"),
    [
        ("120", 120),
        ("120\n", 120),
        ("  42  \n", 42),
        ("", 0),
        ("   \n", 0),
        ("abc", 0),
        ("12.5", 0),
        ("-3", 0),
    ],
    ids=["plain", "newline", "padded", "empty", "blank", "text", "float", "negative"],
)
def test_load_parses_or_defaults(tmp_path: Path, content: str, expected: int) -> None:
    path = tmp_path / "highscore.txt"
    path.write_text(content)
    assert HighScoreStore(path).load() == expected


def test_invalid_utf8_reads_zero(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    path = tmp_path / "highscore.txt"
    path.write_bytes(b"\xff\xfe\x80")

    with caplog.at_level(logging.WARNING, logger="backend.models.highscore"):
        assert HighScoreStore(path).load() == 0

    assert "corrupt" in caplog.text


def test_game_starts_with_undecodable_high_score_file(tmp_path: Path) -> None:
    path = tmp_path / "highscore.txt"
    path.write_bytes(b"\xff\xfe\x80")

    game = MemoryGame(HighScoreStore(path))

    assert game.high_score == 0


def test_save_overwrites(tmp_path: Path) -> None:
    store = HighScoreStore(tmp_path / "highscore.txt")
    store.save(45)
    store.save(120)

    assert store.load() == 120
    assert (tmp_path / "highscore.txt").read_text() == "120\n"


def test_save_creates_parent_dirs(tmp_path: Path) -> None:
    store = HighScoreStore(tmp_path / "nested" / "dir" / "highscore.txt")
    store.save(7)
    assert store.load() == 7


def test_unreadable_path_reads_zero(tmp_path: Path) -> None:
    # A directory where the file should be.
    path = tmp_path / "highscore.txt"
    path.mkdir()
    assert HighScoreStore(path).load() == 0


def test_failed_save_is_logged_not_raised(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    store = HighScoreStore(blocker / "highscore.txt")

    with caplog.at_level(logging.WARNING, logger="backend.models.highscore"):
        store.save(99)

    assert "Cannot save high score" in caplog.text
    assert store.load() == 0


def test_game_loads_high_score_once(tmp_path: Path) -> None:
    path = tmp_path / "highscore.txt"
    path.write_text("80")
    game = MemoryGame(HighScoreStore(path))

    path.write_text("5")
    assert game.high_score == 80
    assert game.snapshot(now=0).high_score == 80
