"""Colour markup for console text: ``$<digit>`` switches colour, ``%`` formats values."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .cstring import double_to_ascii, hex_to_ascii, int_to_ascii


class Color(Enum):
    """Console text colours."""

    BLUE = "blue"
    GREEN = "green"
    CYAN = "cyan"
    RED = "red"
    MAGENTA = "magenta"
    YELLOW = "yellow"
    GREY = "grey"
    WHITE = "white"
    DARK_BLUE = "dark_blue"
    DARK_GREEN = "dark_green"
    DARK_CYAN = "dark_cyan"
    DARK_RED = "dark_red"
    DARK_MAGENTA = "dark_magenta"
    DARK_YELLOW = "dark_yellow"
    DARK_GREY = "dark_grey"


_MARKUP_COLORS = dict(
    zip(
        "0123456789ABCDE",
        (
            Color.BLUE,
            Color.GREEN,
            Color.CYAN,
            Color.RED,
            Color.MAGENTA,
            Color.YELLOW,
            Color.GREY,
            Color.WHITE,
            Color.DARK_BLUE,
            Color.DARK_GREEN,
            Color.DARK_CYAN,
            Color.DARK_RED,
            Color.DARK_MAGENTA,
            Color.DARK_YELLOW,
            Color.DARK_GREY,
        ),
    )
)

_RAINBOW = (Color.GREEN, Color.CYAN, Color.BLUE, Color.MAGENTA, Color.RED, Color.YELLOW)


@dataclass(frozen=True)
class Segment:
    """A run of text shown in one colour."""

    text: str
    color: Color


def parse_markup(message: str, default_color: Color = Color.WHITE) -> tuple[list[Segment], Color]:
    """Split ``message`` into coloured segments.

    ``$`` followed by one of ``0-9A-E`` selects a colour; any other ``$`` is dropped.
    Returns the segments and the colour in effect at the end.
    """
    segments: list[Segment] = []
    color = default_color
    chunk: list[str] = []

    def flush() -> None:
        if chunk:
            segments.append(Segment("".join(chunk), color))
            chunk.clear()

    i = 0
    while i < len(message):
        ch = message[i]
        i += 1
        if ch != "$":
            chunk.append(ch)
            continue
        flush()
        selector = message[i : i + 1]
        if selector and selector in _MARKUP_COLORS:
            color = _MARKUP_COLORS[selector]
            i += 1
    flush()
    return segments, color


def msprint(*args: str) -> list[Segment]:
    """Parse several messages in turn, each starting in the colour the last one ended in."""
    segments: list[Segment] = []
    color = Color.WHITE
    for message in args:
        parsed, color = parse_markup(message, color)
        segments.extend(parsed)
    return segments


def _as_char(value: Any) -> str:
    if isinstance(value, int):
        return chr(value)
    text = str(value)
    if len(text) != 1:
        raise ValueError(f"%c expects a single character, got {text!r}")
    return text


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "s": str,
    "d": lambda value: int_to_ascii(int(value)),
    "x": lambda value: hex_to_ascii(int(value)),
    "c": _as_char,
    "f": lambda value: double_to_ascii(float(value)),
}


def format_markup(fmt: str, *args: Any) -> list[Segment]:
    """Format ``fmt`` with ``%s %d %x %c %f`` and parse its colour markup.

    Literal runs and converted values are parsed one at a time, carrying the colour
    along, so markup never spans a conversion. A ``%`` before any other character
    is dropped. Raises TypeError when there are too few arguments.
    """
    segments: list[Segment] = []
    color = Color.WHITE
    values = iter(args)
    literal: list[str] = []

    def emit(text: str) -> None:
        nonlocal color
        parsed, color = parse_markup(text, color)
        segments.extend(parsed)

    i = 0
    while i < len(fmt):
        ch = fmt[i]
        if ch != "%":
            literal.append(ch)
            i += 1
            continue
        emit("".join(literal))
        literal.clear()
        convert = _CONVERSIONS.get(fmt[i + 1 : i + 2])
        if convert is None:
            i += 1
            continue
        try:
            value = next(values)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None
        emit(convert(value))
        i += 2
    emit("".join(literal))
    return segments


def rainbow(message: str) -> list[Segment]:
    """Colour each character of ``message`` in turn with a six-colour cycle."""
    return [Segment(ch, _RAINBOW[i % len(_RAINBOW)]) for i, ch in enumerate(message)]