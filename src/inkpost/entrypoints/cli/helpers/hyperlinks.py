"""OSC-8 hyperlink utilities for the INKPOST CLI."""

import os
import sys
from typing import TextIO

OSC8_TERMINAL_PROGRAMS = {"apple_terminal", "vscode", "iterm.app", "wezterm", "kitty"}
OSC8_TERM_PREFIXES = ("alacritty", "konsole")


def supports_osc8(stream: TextIO | None = None) -> bool:
    """Heuristically detect whether `stream` (default stdout) renders OSC-8 links.

    Non-TTY streams never do. For terminals, a conservative allowlist of
    terminal identifiers is consulted.
    """
    stream = stream or sys.stdout
    if not getattr(stream, "isatty", lambda: False)():
        return False
    return bool(
        (os.getenv("TERM_PROGRAM") or "").lower() in OSC8_TERMINAL_PROGRAMS
        or os.getenv("WT_SESSION")  # Windows Terminal
        or os.getenv("VTE_VERSION")  # GNOME Terminal, Tilix, etc.
        or os.getenv("TERM", "").startswith(OSC8_TERM_PREFIXES)
    )


def hyperlink(url: str, label: str | None = None) -> str:
    """Return `url` as a clickable OSC-8 link, or as plain text when unsupported."""
    if not supports_osc8():
        return url
    return f"\x1b]8;;{url}\x07{label or url}\x1b]8;;\x07"  # OSC 8 ; ; URL BEL
