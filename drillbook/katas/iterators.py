"""Iterator exercises: capitalisation, division, factorials and progress counts."""

from __future__ import annotations

import enum
import math
from typing import Iterable, Mapping

_U64_MAX = 2**64 - 1


def capitalize_first(text: str) -> str:
    """Upper-case the first character of the text."""
    if not text:
        return ""
    return text[0].upper() + text[1:]


def capitalize_words_vector(words: Iterable[str]) -> list[str]:
    """Capitalise each word."""
    return [capitalize_first(word) for word in words]


def capitalize_words_string(words: Iterable[str]) -> str:
    """Capitalise each word and join them without separators."""
    return "".join(capitalize_words_vector(words))


class DivisionError(ArithmeticError):
    """A division that does not give a whole number."""


class NotDivisibleError(DivisionError):
    """The dividend is not a multiple of the divisor."""

    def __init__(self, dividend: int, divisor: int) -> None:
        super().__init__(f"{dividend} is not divisible by {divisor}")
        self.dividend = dividend
        self.divisor = divisor

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NotDivisibleError):
            return NotImplemented
        return (self.dividend, self.divisor) == (other.dividend, other.divisor)

    def __hash__(self) -> int:
        return hash((self.dividend, self.divisor))


class DivideByZeroError(DivisionError):
    """The divisor is zero."""

    def __init__(self) -> None:
        super().__init__("division by zero")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DivideByZeroError):
            return NotImplemented
        return True

    def __hash__(self) -> int:
        return hash(DivideByZeroError)


def divide(a: int, b: int) -> int:
    """Divide a by b when evenly divisible; raise a DivisionError otherwise."""
    if b == 0:
        raise DivideByZeroError()
    if a % b != 0:
        raise NotDivisibleError(a, b)
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


_NUMBERS = (27, 297, 38502, 81)


def result_with_list() -> list[int]:
    """Divide each number by 27; the first failure is raised."""
    return [divide(n, 27) for n in _NUMBERS]


def list_of_results() -> list[int | DivisionError]:
    """Divide each number by 27, keeping each failure in place of its result."""
    results: list[int | DivisionError] = []
    for n in _NUMBERS:
        try:
            results.append(divide(n, 27))
        except DivisionError as exc:
            results.append(exc)
    return results


def factorial(num: int) -> int:
    """The factorial of num, which must fit in an unsigned 64-bit integer."""
    if num < 0:
        raise ValueError("factorial of a negative number")
    result = math.prod(range(1, num + 1))
    if result > _U64_MAX:
        raise OverflowError("factorial overflow")
    return result


class Progress(enum.Enum):
    """How far an exercise has been worked on."""

    NONE = enum.auto()
    SOME = enum.auto()
    COMPLETE = enum.auto()


def count_iterator(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Count the entries with the given progress."""
    return sum(1 for progress in progress_map.values() if progress == value)


def count_collection_iterator(
    collection: Iterable[Mapping[str, Progress]], value: Progress
) -> int:
    """Count the entries with the given progress across several maps."""
    return sum(count_iterator(progress_map, value) for progress_map in collection)