"""Step sequences between the current brightness and a requested target.

Every function here returns a plain list of brightness values. The start value
is never included; the last element is the value the device ends up at. Values
are strictly monotonic in the direction of travel and stay inside ``[0, max]``.

With an exponent the values visited are taken from a warped scale instead of
every integer, which makes steps at the dark end finer than at the bright end.
The destination may then land on the nearest scale point short of the target.
"""

from __future__ import annotations

import enum
import math
from itertools import groupby

from slight.expression import Absolute, By, Input, Relative, To, Value


class Shaping(str, enum.Enum):
    CURVE = "curve"
    PERCENTILE = "percentile"


def _amount(value: Value, max_: int) -> int:
    match value:
        case Absolute(v):
            return v
        case Relative(p):
            # Anything past 100% lands on a bound after clamping anyway.
            return round(max_ * min(p, 100.0) / 100)
    raise TypeError(f"unknown value {value!r}")


def target(current: int, max_: int, spec: Input) -> int:
    """Return the destination for `spec`, clamped to ``[0, max_]``."""

    match spec:
        case To(value):
            new = _amount(value, max_)
        case By(sign, value):
            new = current + sign * _amount(value, max_)
        case _:
            raise TypeError(f"unknown input {spec!r}")
    return min(max(new, 0), max_)


def _dedup(values: list[int]) -> list[int]:
    return [v for v, _ in groupby(values)]


def linear(current: int, new: int) -> list[int]:
    if new > current:
        return list(range(current + 1, new + 1))
    if new < current:
        return list(range(current - 1, new - 1, -1))
    return []


def curve_levels(max_: int, exponent: float) -> list[int]:
    if max_ == 0:
        return [0]
    return [round(max_ * (i / max_) ** exponent) for i in range(max_ + 1)]


def curve(current: int, new: int, max_: int, exponent: float) -> list[int]:
    levels = curve_levels(max_, exponent)
    if new > current:
        picked = [v for v in levels if current < v <= new]
    elif new < current:
        picked = [v for v in reversed(levels) if new <= v < current]
    else:
        return []
    return _dedup(picked)


def percentile_levels(max_: int) -> list[int]:
    """Split ``[0, max_]`` into 100 bins and return the upper edge of each."""

    return [max_ * i // 100 for i in range(1, 101)]


def percentile(current: int, max_: int, sign: int, percent: float, exponent: float) -> list[int]:
    levels = percentile_levels(max_)
    # At most one step per bin, plus the 0 floor.
    count = int(min(percent * exponent, len(levels) + 1))
    if sign > 0:
        picked = [v for v in levels if v > current]
    else:
        # 0 is the lower boundary of the first bin.
        picked = [v for v in reversed([0, *levels]) if v < current]
    return _dedup(picked)[:count]


def build(
    current: int,
    max_: int,
    spec: Input,
    exponent: float | None = None,
    shaping: Shaping = Shaping.CURVE,
) -> list[int]:
    if not 0 <= current <= max_:
        raise ValueError(f"current brightness {current} outside [0, {max_}]")
    if exponent is not None and not (math.isfinite(exponent) and exponent > 0):
        raise ValueError(f"exponent must be finite and > 0, got {exponent}")

    new = target(current, max_, spec)
    if exponent is None:
        return linear(current, new)

    match spec:
        case By(sign, Relative(percent)) if shaping is Shaping.PERCENTILE:
            return percentile(current, max_, sign, percent, exponent)
    return curve(current, new, max_, exponent)
