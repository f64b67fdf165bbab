"""Small arithmetic: sale prices, parity, squares and rectangles."""

from __future__ import annotations

from dataclasses import dataclass


def is_even(num: int) -> bool:
    """Whether the number is even."""
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Ten off even prices, three off odd ones."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    """The square of the number."""
    return num * num


@dataclass(frozen=True)
class Rectangle:
    """A rectangle with positive sides."""

    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Rectangle width and height cannot be negative!")