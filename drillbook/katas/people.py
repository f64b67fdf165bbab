"""People parsed from "name,age" text, leniently or strictly."""

from __future__ import annotations

import re
from dataclasses import dataclass

_USIZE_MAX = 2**64 - 1
_DIGITS = re.compile(r"\+?[0-9]+")


def _parse_usize(text: str) -> int:
    """Parse an unsigned 64-bit integer written in plain ASCII digits."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _DIGITS.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value > _USIZE_MAX:
        raise ValueError("number too large to fit in target type")
    return value


class ParsePersonError(ValueError):
    """The text does not describe a person."""


class EmptyInput(ParsePersonError):
    """The text is empty."""

    def __init__(self) -> None:
        super().__init__("empty input")


class BadLength(ParsePersonError):
    """The text does not have exactly two comma separated fields."""

    def __init__(self) -> None:
        super().__init__("incorrect number of fields")


class NoName(ParsePersonError):
    """The name field is empty."""

    def __init__(self) -> None:
        super().__init__("empty name field")


class InvalidAge(ParsePersonError):
    """The age field is not a valid unsigned integer."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


@dataclass
class Person:
    """A named person of a given age; the default is John, 30."""

    name: str = "John"
    age: int = 30

    @classmethod
    def from_text(cls, text: str) -> Person:
        """Parse "name,age", falling back to the default person on any problem."""
        try:
            return cls.parse(text)
        except ParsePersonError:
            return cls()

    @classmethod
    def parse(cls, text: str) -> Person:
        """Parse "name,age"; raise a ParsePersonError subclass on any problem."""
        if not text:
            raise EmptyInput()
        fields = text.split(",")
        if len(fields) != 2:
            raise BadLength()
        name, age_text = fields
        if not name:
            raise NoName()
        try:
            age = _parse_usize(age_text)
        except ValueError as exc:
            raise InvalidAge(str(exc)) from exc
        return cls(name=name, age=age)