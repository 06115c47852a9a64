"""Terminal message helpers for the PROCPLAN CLI.

Each helper writes one styled line to stderr, so stdout stays free for
machine-readable output. Emoji glyphs fall back to ASCII on terminals whose
encoding cannot represent them.
"""

import click

CAUTION_GLYPHS = ("⚠️", "[!]")  # pragma: no mutate
SUCCESS_GLYPHS = ("✅", "[OK]")  # pragma: no mutate
ERROR_GLYPHS = ("❌", "[X]")  # pragma: no mutate


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on stderr.

    The stream is looked up on every call; Click may swap it (e.g. in tests).
    """
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def _glyph(choices: tuple[str, str]) -> str:
    emoji, fallback = choices
    return emoji if _supports_character(emoji) else fallback


def caution_glyph() -> str:
    """Warning marker: an emoji, or "[!]" on ASCII-only terminals."""
    return _glyph(CAUTION_GLYPHS)


def success_glyph() -> str:
    """Success marker: an emoji, or "[OK]" on ASCII-only terminals."""
    return _glyph(SUCCESS_GLYPHS)


def error_glyph() -> str:
    """Error marker: an emoji, or "[X]" on ASCII-only terminals."""
    return _glyph(ERROR_GLYPHS)


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to **stderr**.

    Example:
        ``⚠️  This will modify your database.``
    """
    click.secho(f"{caution_glyph()}  {msg}", fg="yellow", bold=True, err=True)


def success(msg: str) -> None:
    """Emit a green, bold success line to **stderr**.

    Example:
        ``✅  Added user 2 to procedure 1010 of plan 19.``
    """
    click.secho(f"{success_glyph()}  {msg}", fg="green", bold=True, err=True)


def error(msg: str) -> None:
    """Emit a red, bold error line to **stderr**.

    Example:
        ``❌  user not found``
    """
    click.secho(f"{error_glyph()}  {msg}", fg="red", bold=True, err=True)
