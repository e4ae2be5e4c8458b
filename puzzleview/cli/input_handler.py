"""Single-keypress reader for the terminal frontend.

Arrow keys slide tiles; letters map to reset, hint toggling, the debug dump
and quitting.  Works on macOS / Linux (tty+termios) and Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys


# -- low-level character readers -----------------------------------------------


def _getch_unix() -> str:
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ch = sys.stdin.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
    return ch


def _getch_windows() -> str:
    import msvcrt  # type: ignore[import-not-found]

    return msvcrt.getch().decode("utf-8", errors="ignore")


_getch = _getch_windows if os.name == "nt" else _getch_unix


# -- key mapping ---------------------------------------------------------------

_KEY_MAP: dict[str, str] = {
    "q": "quit",
    "Q": "quit",
    "\x03": "quit",  # Ctrl-C
    "r": "reset",
    "R": "reset",
    "h": "hints",
    "H": "hints",
    "d": "debug",
    "D": "debug",
}

_ARROW_MAP: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}


def resolve(ch: str) -> str:
    """Map a raw character to its action string."""
    return _KEY_MAP.get(ch, "")


def resolve_escape(seq: str) -> str:
    """Map the characters following ESC to an action.

    ``"[A"``..``"[D"`` are arrow keys; anything else (including a bare
    Escape) quits.
    """
    if seq[:1] == "[":
        return _ARROW_MAP.get(seq[1:2], "")
    return "quit"


# -- public API ----------------------------------------------------------------


def get_key() -> str:
    """Read a single keypress and return a normalised action string.

    Blocks until a key is pressed.

    Possible return values:
        "up", "down", "left", "right"  : slide a tile
        "reset"                        : r (new shuffle)
        "hints"                        : h (toggle legal-move highlighting)
        "debug"                        : d (show the board diagnostics)
        "quit"                         : q / Ctrl-C / Escape
        ""                             : unrecognised key
    """
    ch = _getch()

    # Arrow keys (Unix escape sequences: ESC [ A/B/C/D)
    if ch == "\x1b":
        ch2 = _getch()
        if ch2 == "[":
            return resolve_escape(ch2 + _getch())
        return resolve_escape(ch2)

    return resolve(ch)
