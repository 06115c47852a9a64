"""Unit tests for the stderr message helpers.

Glyphs depend on the encoding of the stream Click reports for stderr, and
that stream is looked up again on every call.
"""

import io
import sys

import click
import pytest

from procplan.entrypoints.cli.helpers.messages import (
    _supports_character,
    caution_glyph,
    error,
    error_glyph,
    success,
    success_glyph,
    warn,
)

BOLD = "\x1b[1m"
COLORS = {"yellow": "\x1b[33m", "green": "\x1b[32m", "red": "\x1b[31m"}


class EncodedTTY(io.StringIO):
    """Terminal-like text stream with a chosen encoding."""

    def __init__(self, encoding: str):
        super().__init__()
        self._encoding = encoding

    @property
    def encoding(self) -> str:
        return self._encoding

    def isatty(self) -> bool:
        return True


@pytest.fixture
def stderr_as(monkeypatch):
    """Route Click's stderr lookup and sys.stderr to a fresh EncodedTTY."""

    def _install(encoding: str) -> EncodedTTY:
        stream = EncodedTTY(encoding)
        monkeypatch.setattr(click, "get_text_stream", lambda name: stream)
        monkeypatch.setattr(sys, "stderr", stream)
        monkeypatch.delenv("NO_COLOR", raising=False)
        return stream

    return _install


def test_ascii_terminal_gets_fallbacks(stderr_as):
    """ASCII-only terminals see bracketed markers."""
    stderr_as("ascii")
    assert (caution_glyph(), success_glyph(), error_glyph()) == ("[!]", "[OK]", "[X]")


def test_utf8_terminal_gets_emoji(stderr_as):
    """UTF-8 terminals see emoji markers."""
    stderr_as("utf-8")
    assert (caution_glyph(), success_glyph(), error_glyph()) == ("⚠️", "✅", "❌")


def test_stream_is_looked_up_on_every_call(monkeypatch):
    """Switching stderr between calls changes the answer."""
    encodings = iter(["ascii", "utf-8"])
    monkeypatch.setattr(click, "get_text_stream", lambda name: EncodedTTY(next(encodings)))

    assert _supports_character("✅") is False
    assert _supports_character("✅") is True


@pytest.mark.parametrize(
    ("func", "color", "glyph"),
    [(warn, "yellow", "[!]"), (success, "green", "[OK]"), (error, "red", "[X]")],
)
def test_messages_are_bold_and_colored(stderr_as, func, color, glyph):
    """Each helper writes one styled line to stderr."""
    stream = stderr_as("ascii")

    func("user not found")

    out = stream.getvalue()
    assert out.endswith("\n")
    assert f"{glyph}  user not found" in out
    assert BOLD in out
    assert COLORS[color] in out


def test_messages_leave_stdout_alone(capsys):
    """Human-oriented messages never reach stdout."""
    error("plan/procedure combination not found")
    captured = capsys.readouterr()
    assert "plan/procedure combination not found" in captured.err
    assert captured.out == ""
