"""Game tuning constants and their YAML loader.

Every value has a default, so the game runs without any config file.  A file
only needs to name the keys it overrides::

    game:
      duration_ms: 90000
      mismatch_penalty: 0
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

import yaml

from backend.errors import ConfigError

# Grid shape is fixed: eight symbols, each placed twice.
GRID_ROWS = 4
GRID_COLS = 4
SYMBOL_COUNT = GRID_ROWS * GRID_COLS // 2


@dataclass(frozen=True)
class GameConfig:
    duration_ms: int = 60_000
    flip_delay_ms: int = 500
    match_bonus: int = 15
    mismatch_penalty: int = 5

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise ConfigError(f"{f.name} must be an integer, got {value!r}")
        if self.duration_ms <= 0:
            raise ConfigError("duration_ms must be positive")
        if self.flip_delay_ms < 0:
            raise ConfigError("flip_delay_ms must not be negative")
        if self.match_bonus < 0 or self.mismatch_penalty < 0:
            raise ConfigError("match_bonus and mismatch_penalty must not be negative")

    def with_overrides(self, **overrides: Any) -> GameConfig:
        """Return a copy with every non-``None`` override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes) if changes else self


def load_config(path: Path) -> GameConfig:
    """Load a ``GameConfig`` from the ``game:`` mapping of a YAML file."""
    try:
        with open(path, encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise ConfigError(f"Config file {path} is not valid UTF-8: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigError(f"{path}: top level must be a mapping")
    section = raw.get("game") or {}
    if not isinstance(section, dict):
        raise ConfigError(f"{path}: 'game' must be a mapping")

    bad_keys = [k for k in section if not isinstance(k, str)]
    if bad_keys:
        raise ConfigError(f"{path}: setting names must be strings, got {bad_keys!r}")

    known = {f.name for f in fields(GameConfig)}
    unknown = sorted(set(section) - known)
    if unknown:
        raise ConfigError(f"{path}: unknown game settings: {', '.join(unknown)}")

    return GameConfig(**section)
