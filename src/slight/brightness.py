from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Brightness:
    """One reading of a device's current and maximum brightness."""

    current: int
    max: int

    def __post_init__(self) -> None:
        if self.max < 0:
            raise ValueError(f"max brightness must be >= 0, got {self.max}")
        if not 0 <= self.current <= self.max:
            raise ValueError(f"brightness {self.current} outside [0, {self.max}]")

    @property
    def percent(self) -> float:
        if self.max == 0:
            return 0.0
        return self.current * 100.0 / self.max

    def __str__(self) -> str:
        return f"{self.current}/{self.max} ({self.percent:.0f}%)"
