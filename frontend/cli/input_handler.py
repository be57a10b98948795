"""Non-blocking single-keypress reader for the terminal frontend.

The game clock has to keep running while the player thinks, so keys are
polled with a timeout instead of read with ``input()``.
Works on macOS / Linux (tty+termios+select) and Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys
import time

# -- key mapping ---------------------------------------------------------------

_KEY_MAP: dict[str, str] = {
    "w": "up",
    "s": "down",
    "a": "left",
    "d": "right",
    "q": "quit",
    "\x03": "quit",  # Ctrl-C
    " ": "enter",
    "\r": "enter",
    "\n": "enter",
}

# Final byte of ESC [ x.
_ARROW_MAP: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}

# Byte after the \xe0 / \x00 prefix on Windows.
_WIN_ARROW_MAP: dict[str, str] = {
    "H": "up",
    "P": "down",
    "M": "right",
    "K": "left",
}


def resolve(ch: str) -> str:
    """Map one raw character to its action string ("" if unmapped)."""
    return _KEY_MAP.get(ch.lower(), "")


# -- platform readers ----------------------------------------------------------


def _poll_windows(timeout: float) -> str | None:
    import msvcrt  # type: ignore[import-not-found]

    end = time.monotonic() + timeout
    while time.monotonic() < end:
        if msvcrt.kbhit():
            ch = msvcrt.getwch()
            if ch in ("\x00", "\xe0"):
                return _WIN_ARROW_MAP.get(msvcrt.getwch(), "")
            if ch == "\x1b":
                return "quit"
            return resolve(ch)
        time.sleep(0.02)
    return None


def _poll_unix(timeout: float) -> str | None:
    import select
    import termios
    import tty

    fd = sys.stdin.fileno()

    def _read(wait: float) -> str | None:
        ready, _, _ = select.select([fd], [], [], wait)
        if not ready:
            return None
        # os.read is unbuffered, so select() still sees the rest of an
        # escape sequence.
        return os.read(fd, 1).decode("utf-8", errors="ignore")

    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ch = _read(timeout)
        if ch is None:
            return None
        if ch != "\x1b":
            return resolve(ch)

        # ESC [ A/B/C/D is an arrow key; a lone ESC means quit.
        if _read(0.1) != "[":
            return "quit"
        return _ARROW_MAP.get(_read(0.1) or "", "")
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)


# -- public API ----------------------------------------------------------------


def get_key_timeout(timeout: float) -> str | None:
    """Wait up to *timeout* seconds for a keypress.

    Returns ``None`` when no key arrived, otherwise one of:
        "up", "down", "left", "right"  : arrows / WASD
        "enter"                        : Enter / Space
        "quit"                         : q / Ctrl-C / Escape
        ""                             : any other key
    """
    if os.name == "nt":
        return _poll_windows(timeout)
    return _poll_unix(timeout)
