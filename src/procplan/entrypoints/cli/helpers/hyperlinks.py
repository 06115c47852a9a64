"""OSC-8 hyperlink rendering for the PROCPLAN CLI help text."""

import os
import sys
from typing import TextIO

# TERM_PROGRAM values known to render OSC-8 links
OSC8_TERMINAL_PROGRAMS = frozenset(
    {"apple_terminal", "vscode", "iterm.app", "wezterm", "kitty"}
)


def supports_osc8(stream: TextIO | None = None) -> bool:
    """Best-effort guess whether ``stream`` (default stdout) renders OSC-8 links.

    Piped or redirected streams never do. Otherwise the terminal is matched
    against a small allowlist (TERM_PROGRAM, Windows Terminal, VTE-based
    terminals, Alacritty, Konsole).
    """
    stream = stream or sys.stdout
    if not getattr(stream, "isatty", lambda: False)():
        return False
    if (os.getenv("TERM_PROGRAM") or "").lower() in OSC8_TERMINAL_PROGRAMS:
        return True
    if os.getenv("WT_SESSION") or os.getenv("VTE_VERSION"):
        return True
    return os.getenv("TERM", "").startswith(("alacritty", "konsole"))


def hyperlink(url: str, label: str | None = None) -> str:
    """Render ``url`` as a clickable link, or as plain text when unsupported.

    Args:
        url: Target URL.
        label: Visible text; defaults to the URL itself.
    """
    text = label or url
    if not supports_osc8():
        return url if label is None else f"{label} ({url})"
    return f"\x1b]8;;{url}\x07{text}\x1b]8;;\x07"
