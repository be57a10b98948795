from backend.engine.scoring.scoring import (
    apply_match,
    apply_mismatch,
    format_remaining,
    is_expired,
    is_low_time,
    remaining_ms,
)

__all__ = [
    "apply_match",
    "apply_mismatch",
    "format_remaining",
    "is_expired",
    "is_low_time",
    "remaining_ms",
]
