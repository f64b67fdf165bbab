"""Messages that drive a small state machine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class Point:
    """A position."""

    x: int
    y: int


@dataclass(frozen=True)
class Move:
    """Move to a point."""

    point: Point


@dataclass(frozen=True)
class Echo:
    """Print some text."""

    text: str


@dataclass(frozen=True)
class ChangeColor:
    """Change the colour."""

    red: int
    green: int
    blue: int


@dataclass(frozen=True)
class Quit:
    """Stop."""


Message = Union[Move, Echo, ChangeColor, Quit]


@dataclass
class State:
    """Colour, position and whether a quit was requested."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    quit: bool = False

    def process(self, message: Message) -> None:
        """Apply one message to the state."""
        match message:
            case ChangeColor(red=red, green=green, blue=blue):
                self.color = (red, green, blue)
            case Echo(text=text):
                print(text)
            case Move(point=point):
                self.position = point
            case Quit():
                self.quit = True
            case _:
                raise TypeError(f"unknown message: {message!r}")