"""Helpers for enumerations: parsing from text and generated variant checkers."""

from __future__ import annotations

import re
from enum import Enum
from typing import TypeVar

E = TypeVar("E", bound=Enum)

_WORD = re.compile(r"[A-Z0-9][a-z0-9]*")
_INTEGER = re.compile(r"[+-]?[0-9]+")


class ParseEnumError(ValueError):
    """Raised when text does not name a member of an enumeration."""

    def __init__(self, message: str = "failed to parse enum") -> None:
        super().__init__(message)


def parse_enum(enum_cls: type[E], text: str, use_primitives: bool = False) -> E:
    """Return the member of ``enum_cls`` named exactly by ``text``.

    With ``use_primitives`` the text may also be a decimal integer giving
    a member's value.
    """
    try:
        return enum_cls[text]
    except KeyError:
        pass
    if use_primitives and _INTEGER.fullmatch(text):
        try:
            return enum_cls(int(text))
        except ValueError:
            pass
    raise ParseEnumError()


def checker_name(variant: str | Enum) -> str:
    """Return the ``is_...`` method name generated for a variant name."""
    name = variant.name if isinstance(variant, Enum) else variant
    words = (match.group(0).lower() for match in _WORD.finditer(name))
    return "is_" + "_".join(words)


def _make_checker(member: Enum):
    def checker(self) -> bool:
        return self is member

    checker.__name__ = checker_name(member)
    checker.__doc__ = f"Return True if this is {member.name}."
    return checker


def variant_checkers(enum_cls: type[E]) -> type[E]:
    """Class decorator adding an ``is_<variant>()`` method for every member."""
    for member in enum_cls:
        setattr(enum_cls, checker_name(member), _make_checker(member))
    return enum_cls