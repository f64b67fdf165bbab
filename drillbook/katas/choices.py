"""Simple choices: the bigger number, fizz words and ice cream left."""

from __future__ import annotations


def bigger(a: int, b: int) -> int:
    """Return the bigger of two numbers."""
    return a if a > b else b


def foo_if_fizz(fizzish: str) -> str:
    """"foo" for "fizz", "bar" for "fuzz", "baz" otherwise."""
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"


def maybe_icecream(time_of_day: int) -> int | None:
    """Ice creams left at an hour of the day; None for an hour outside 0..=23."""
    if 0 <= time_of_day <= 21:
        return 5
    if 22 <= time_of_day <= 23:
        return 0
    return None