"""Score arithmetic and countdown helpers.

All times are integer milliseconds.
"""

from __future__ import annotations

LOW_TIME_MS = 10_000


def apply_match(score: int, bonus: int) -> int:
    return score + bonus


def apply_mismatch(score: int, penalty: int) -> int:
    """Subtract *penalty*, never dropping below zero."""
    return max(0, score - penalty)


def elapsed_ms(started_at: int, now: int) -> int:
    return now - started_at


def is_expired(started_at: int, now: int, duration: int) -> bool:
    return elapsed_ms(started_at, now) >= duration


def remaining_ms(started_at: int, now: int, duration: int) -> int:
    """Time left for display, clamped at zero."""
    return max(0, duration - elapsed_ms(started_at, now))


def format_remaining(ms: int) -> str:
    return f"Time: {ms // 1000}s"


def is_low_time(ms: int) -> bool:
    return ms <= LOW_TIME_MS
