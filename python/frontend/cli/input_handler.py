"""Cross-platform single-keypress reader for the CLI frontend.

Handles arrow keys, A/D, and the command letters without requiring Enter.
Works on macOS / Linux (tty+termios) and Windows (msvcrt).
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

    ch = msvcrt.getch()
    # Arrow keys arrive as a 0xe0 / 0x00 prefix plus a scan code.
    if ch in (b"\xe0", b"\x00"):
        return _WIN_ARROWS.get(msvcrt.getch(), "")
    return ch.decode("utf-8", errors="ignore")


_WIN_ARROWS: dict[bytes, str] = {b"K": "\x1b[D", b"M": "\x1b[C"}

_getch = _getch_windows if os.name == "nt" else _getch_unix


# -- key mapping ----------------------------------------------------------------

_KEY_MAP: dict[str, str] = {
    "a": "left",
    "A": "left",
    "d": "right",
    "D": "right",
    " ": "grab",
    "g": "grab",
    "G": "grab",
    "q": "quit",
    "Q": "quit",
    "\x03": "quit",  # Ctrl-C
    "r": "restart",
    "R": "restart",
    "h": "help",
    "?": "help",
    "v": "solve",
    "V": "solve",
    "n": "hint",
    "N": "hint",
    "\r": "enter",
    "\n": "enter",
}

_ARROW_MAP: dict[str, str] = {
    "C": "right",
    "D": "left",
}


def _resolve(ch: str) -> str:
    """Map a raw character to its action string."""
    return _KEY_MAP.get(ch, ch if ch.isprintable() else "")


# -- public API ----------------------------------------------------------------


def get_key() -> str:
    """Read a single keypress and return a normalised action string.

    Blocks until a key is pressed.

    Possible return values:
        "left", "right"   — cursor / held tile movement
        "grab"            — space / g (pick up or drop a tile)
        "quit"            — q / Ctrl-C / Escape
        "restart"         — r (new puzzle)
        "help"            — h / ?
        "solve"           — v (auto-solve)
        "hint"            — n (next best move)
        "enter"           — Enter / Return
        "<char>"          — unmapped printable char
        ""                — unrecognised key
    """
    ch = _getch()

    # Windows arrows are translated to the same escape sequence above.
    if len(ch) > 1:
        return _ARROW_MAP.get(ch[-1], "")

    # Arrow keys (Unix escape sequences: ESC [ C/D)
    if ch == "\x1b":
        ch2 = _getch()
        if ch2 == "[":
            ch3 = _getch()
            return _ARROW_MAP.get(ch3, "")
        return "quit"  # bare Escape

    return _resolve(ch)
