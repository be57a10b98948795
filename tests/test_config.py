"""GameConfig defaults, validation and YAML loading."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from backend.config import GameConfig, load_config
from backend.errors import ConfigError


def _write(tmp_path: Path, raw: object) -> Path:
    path = tmp_path / "game.yaml"
    path.write_text(yaml.dump(raw))
    return path


def test_defaults() -> None:
    cfg = GameConfig()
    assert cfg.duration_ms == 60_000
    assert cfg.flip_delay_ms == 500
    assert cfg.match_bonus == 15
    assert cfg.mismatch_penalty == 5


def test_load_partial_override(tmp_path: Path) -> None:
    cfg = load_config(_write(tmp_path, {"game": {"duration_ms": 90_000, "mismatch_penalty": 0}}))
    assert cfg.duration_ms == 90_000
    assert cfg.mismatch_penalty == 0
    assert cfg.match_bonus == 15


def test_load_empty_file_gives_defaults(tmp_path: Path) -> None:
    path = tmp_path / "game.yaml"
    path.write_text("")
    assert load_config(path) == GameConfig()


@pytest.mark.parametrize(
    "raw",
    [
        {"game": {"grid_size": 6}},
        {"game": {"duration_ms": 0}},
        {"game": {"flip_delay_ms": -1}},
        {"game": {"match_bonus": -15}},
        {"game": {"match_bonus": "lots"}},
        {"game": {"match_bonus": True}},
        {"game": [1, 2]},
        [1, 2],
    ],
    ids=[
        "unknown-key",
        "zero-duration",
        "negative-delay",
        "negative-bonus",
        "string",
        "bool",
        "game-not-mapping",
        "top-not-mapping",
    ],
)
def test_load_rejects_bad_values(tmp_path: Path, raw: object) -> None:
    with pytest.raises(ConfigError):
        load_config(_write(tmp_path, raw))


def test_load_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_config(tmp_path / "missing.yaml")


def test_load_invalid_yaml(tmp_path: Path) -> None:
    path = tmp_path / "game.yaml"
    path.write_text("game: [unclosed\n")
    with pytest.raises(ConfigError):
        load_config(path)


def test_with_overrides_skips_none() -> None:
    cfg = GameConfig().with_overrides(duration_ms=None, match_bonus=20)
    assert cfg.match_bonus == 20
    assert cfg.duration_ms == 60_000
    assert GameConfig().with_overrides() == GameConfig()


def test_with_overrides_validates() -> None:
    with pytest.raises(ConfigError):
        GameConfig().with_overrides(duration_ms=-5)


@pytest.mark.parametrize(
    "text",
    [
        "game:\n  1: 5\n",
        "game:\n  1: 5\n  colours: 3\n",
    ],
    ids=["int-key", "mixed-keys"],
)
def test_load_rejects_non_string_keys(tmp_path: Path, text: str) -> None:
    path = tmp_path / "game.yaml"
    path.write_text(text)
    with pytest.raises(ConfigError, match="setting names must be strings"):
        load_config(path)


def test_load_rejects_invalid_utf8(tmp_path: Path) -> None:
    path = tmp_path / "game.yaml"
    path.write_bytes(b"game:\n  duration_ms: \xff\xfe\x80\n")
    with pytest.raises(ConfigError):
        load_config(path)
