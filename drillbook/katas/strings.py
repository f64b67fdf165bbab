"""String exercises: colour words, trimming, composing and replacing."""

from __future__ import annotations

_COLOR_WORDS = frozenset({"green", "blue", "red"})


def is_a_color_word(attempt: str) -> bool:
    """Whether the text is one of the known colour words."""
    return attempt in _COLOR_WORDS


def trim_me(text: str) -> str:
    """Remove whitespace from both ends of the text."""
    return text.strip()


def compose_me(text: str) -> str:
    """Append " world!" to the text."""
    return f"{text} world!"


def replace_me(text: str) -> str:
    """Replace every "cars" with "balloons"."""
    return text.replace("cars", "balloons")