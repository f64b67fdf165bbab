"""Trait exercises: appending "Bar", licensing info and combined capabilities."""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import Any


@functools.singledispatch
def append_bar(value: Any) -> Any:
    """Append "Bar" to a string or a list of strings."""
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


@append_bar.register(str)
def _append_bar_str(value: str) -> str:
    return value + "Bar"


@append_bar.register(list)
def _append_bar_list(value: list) -> list:
    value.append("Bar")
    return value


class Licensed:
    """Software that reports licensing information."""

    def licensing_info(self) -> str:
        return "Some information"


@dataclass
class SomeSoftware(Licensed):
    """Software with a numeric version."""

    version_number: int = 0


@dataclass
class OtherSoftware(Licensed):
    """Software with a textual version."""

    version_number: str = ""


def compare_license_types(software: Licensed, software_two: Licensed) -> bool:
    """Whether both pieces of software report the same licensing info."""
    return software.licensing_info() == software_two.licensing_info()


class _SomeTrait:
    def some_function(self) -> bool:
        return True


class _OtherTrait:
    def other_function(self) -> bool:
        return True


class SomeStruct(_SomeTrait, _OtherTrait):
    """A type with both capabilities."""


class OtherStruct(_SomeTrait, _OtherTrait):
    """Another type with both capabilities."""


def some_func(item: Any) -> bool:
    """True when the item offers both capabilities and both report success."""
    if not (isinstance(item, _SomeTrait) and isinstance(item, _OtherTrait)):
        raise TypeError(f"{type(item).__name__} lacks the required capabilities")
    return item.some_function() and item.other_function()