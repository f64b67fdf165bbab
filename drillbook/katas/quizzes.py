"""Quiz solutions: apple pricing, a string transformer and report cards."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Union


def calculate_price_of_apples(n: int) -> int:
    """Two per apple, or one per apple for orders above 40."""
    return n if n > 40 else n * 2


@dataclass(frozen=True)
class Uppercase:
    """Upper-case the string."""


@dataclass(frozen=True)
class Trim:
    """Strip surrounding whitespace."""


@dataclass(frozen=True)
class Append:
    """Append "bar" the given number of times."""

    times: int


Command = Union[Uppercase, Trim, Append]


def transformer(items: Iterable[tuple[str, Command]]) -> list[str]:
    """Apply each command to its string."""
    output = []
    for text, command in items:
        match command:
            case Uppercase():
                output.append(text.upper())
            case Trim():
                output.append(text.strip())
            case Append(times=times):
                output.append(text + "bar" * times)
            case _:
                raise TypeError(f"unknown command: {command!r}")
    return output


@dataclass
class ReportCard:
    """A student's report card with a grade of any printable kind."""

    grade: Any
    student_name: str
    student_age: int

    def render(self) -> str:
        return (
            f"{self.student_name} ({self.student_age}) - "
            f"achieved a grade of {self.grade}"
        )