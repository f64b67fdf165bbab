"""Collection exercises: arrays and lists, wrappers, cons lists and copy-on-write."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterator, Sequence, TypeVar, Union

T = TypeVar("T")


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """A fixed tuple and a list holding the same elements."""
    a = (10, 20, 30, 40)
    return a, list(a)


def vec_loop(values: list[int]) -> list[int]:
    """Double every element of the list in place and return it."""
    values[:] = [value * 2 for value in values]
    return values


def vec_map(values: Sequence[int]) -> list[int]:
    """Return a new list with every element doubled."""
    return [value * 2 for value in values]


@dataclass
class Wrapper(Generic[T]):
    """Holds a value of any type."""

    value: T


@dataclass(frozen=True)
class Nil:
    """The end of a cons list."""


@dataclass(frozen=True)
class Cons:
    """A cons cell: a value followed by the rest of the list."""

    value: int
    rest: Union[Cons, Nil]


def create_empty_list() -> Nil:
    """An empty cons list."""
    return Nil()


def create_non_empty_list() -> Cons:
    """A cons list holding 42."""
    return Cons(42, Nil())


class Cow(Generic[T]):
    """A sequence that is borrowed until it must be changed, then copied."""

    def __init__(self, data: Sequence[T], *, owned: bool) -> None:
        self._data: Sequence[T] = data
        self._owned = owned

    @classmethod
    def borrowed(cls, data: Sequence[T]) -> Cow[T]:
        """Wrap data without copying it."""
        return cls(data, owned=False)

    @classmethod
    def owned(cls, data: Sequence[T]) -> Cow[T]:
        """Take ownership of the data as a list."""
        return cls(data if isinstance(data, list) else list(data), owned=True)

    @property
    def is_owned(self) -> bool:
        return self._owned

    def to_mut(self) -> list[T]:
        """Return a mutable list, copying the borrowed data first if needed."""
        if not self._owned:
            self._data = list(self._data)
            self._owned = True
        return self._data  # type: ignore[return-value]

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index: int) -> T:
        return self._data[index]

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    def __repr__(self) -> str:
        kind = "Owned" if self._owned else "Borrowed"
        return f"Cow.{kind}({list(self._data)!r})"


def abs_all(cow: Cow[int]) -> Cow[int]:
    """Make every element non-negative, copying borrowed data only when needed."""
    for index, value in enumerate(cow):
        if value < 0:
            cow.to_mut()[index] = -value
    return cow