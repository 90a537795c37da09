from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Union

from slight.errors import NoInput, ParseError

# N, N%, +N, -N, +N%, -N% (percentages may carry a fraction).
EXPRESSION = re.compile(r"^(?P<sign>[+-])?(?P<number>\d+(?:\.\d+)?)(?P<percent>%)?$")
MAX_DIGITS = 18


@dataclass(frozen=True)
class Absolute:
    value: int


@dataclass(frozen=True)
class Relative:
    percent: float


Value = Union[Absolute, Relative]


@dataclass(frozen=True)
class To:
    value: Value


@dataclass(frozen=True)
class By:
    sign: int
    value: Value

    def __post_init__(self) -> None:
        if self.sign not in (1, -1):
            raise ValueError(f"sign must be +1 or -1, got {self.sign}")


Input = Union[To, By]


def looks_like_expression(text: str) -> bool:
    return EXPRESSION.match(text.strip()) is not None


def parse(text: str | None) -> Input:
    """Parse a user input expression such as `50`, `+10`, `-5%` or `30%`."""

    if text is None or not text.strip():
        raise NoInput("No input given (e.g. 50, +10, -10, 30%, +5%)")

    m = EXPRESSION.match(text.strip())
    if not m:
        raise ParseError(f"Invalid input: {text!r}")

    number = m["number"]
    if m["percent"]:
        # float() of a long digit string is inf.
        value: Value = Relative(min(float(number), 100.0))
    elif "." in number:
        raise ParseError(f"Absolute values must be whole numbers: {text!r}")
    elif len(number) > MAX_DIGITS:
        raise ParseError(f"Value too large: {text!r}")
    else:
        value = Absolute(int(number))

    sign = m["sign"]
    if sign is None:
        return To(value)
    return By(-1 if sign == "-" else 1, value)
