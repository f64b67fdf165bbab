"""Error handling: name tags, token costs and positive non-zero integers."""

from __future__ import annotations

import re
from dataclasses import dataclass

_INTEGER = re.compile(r"[+-]?[0-9]+")
_PROCESSING_FEE = 1
_COST_PER_ITEM = 5


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed integer of the given width the way strict parsers do."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _INTEGER.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if value >= 2 ** (bits - 1):
        raise ValueError("number too large to fit in target type")
    if value < -(2 ** (bits - 1)):
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Return the name tag text; raise ValueError for an empty name."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Cost in tokens of the typed quantity; raise ValueError if it is not a number."""
    quantity = _parse_int(item_quantity, 32)
    cost = quantity * _COST_PER_ITEM + _PROCESSING_FEE
    if not -(2**31) <= cost < 2**31:
        raise OverflowError("attempt to compute cost with overflow")
    return cost


class CreationError(ValueError):
    """The value cannot be a positive non-zero integer."""


class NegativeError(CreationError):
    """The value is negative."""

    def __init__(self) -> None:
        super().__init__("number is negative")


class ZeroError(CreationError):
    """The value is zero."""

    def __init__(self) -> None:
        super().__init__("number is zero")


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer greater than zero."""

    value: int

    @classmethod
    def new(cls, value: int) -> PositiveNonzeroInteger:
        """Wrap the value; raise NegativeError or ZeroError when it is not positive."""
        if value < 0:
            raise NegativeError()
        if value == 0:
            raise ZeroError()
        return cls(value)


class ParsePosNonzeroError(ValueError):
    """Parsing failed; cause holds the parse or creation error."""

    def __init__(self, cause: ValueError) -> None:
        super().__init__(str(cause))
        self.cause = cause


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse text into a positive non-zero integer; raise ParsePosNonzeroError."""
    try:
        value = _parse_int(text, 64)
    except ValueError as exc:
        raise ParsePosNonzeroError(exc) from exc
    try:
        return PositiveNonzeroInteger.new(value)
    except CreationError as exc:
        raise ParsePosNonzeroError(exc) from exc