from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from pathlib import Path

from slight.brightness import Brightness
from slight.errors import CannotToggle, ReadError, WriteError
from slight.system.sysfs import Sysfs

CURRENT_BRIGHTNESS = "brightness"
MAX_BRIGHTNESS = "max_brightness"

log = logging.getLogger(__name__)


class DeviceClass(enum.Enum):
    BACKLIGHT = "backlight"
    LED = "leds"

    @property
    def dirname(self) -> str:
        return self.value

    def __str__(self) -> str:
        return "Backlight" if self is DeviceClass.BACKLIGHT else "Led"


class ToggleState(enum.Enum):
    ON = "on"
    OFF = "off"


@dataclass(frozen=True)
class Device:
    device_class: DeviceClass
    id: str
    path: Path
    backend: Sysfs = field(default_factory=Sysfs, compare=False, repr=False)

    @classmethod
    def resolve(cls, backend: Sysfs, device_class: DeviceClass, device_id: str) -> Device:
        """Build a device for a scanned entry and check that it can be read."""

        dev = cls(
            device_class=device_class,
            id=device_id,
            path=backend.class_dir(device_class.dirname) / device_id,
            backend=backend,
        )
        dev.brightness()
        return dev

    def _read(self, attr: str) -> int:
        try:
            return self.backend.read_int(self.path, attr)
        except (OSError, ValueError) as e:
            raise ReadError(f"Cannot read {attr} of {self}: {e}") from e

    def brightness(self) -> Brightness:
        current = self._read(CURRENT_BRIGHTNESS)
        max_ = self._read(MAX_BRIGHTNESS)
        try:
            return Brightness(current, max_)
        except ValueError as e:
            raise ReadError(f"Invalid brightness of {self}: {e}") from e

    def set_brightness(self, value: int) -> None:
        try:
            self.backend.write_int(self.path, CURRENT_BRIGHTNESS, value)
        except OSError as e:
            raise WriteError(f"Cannot write brightness {value} to {self}: {e}") from e

    def is_toggleable(self) -> bool:
        return self.brightness().max == 1

    def toggle(self, state: ToggleState | None = None) -> None:
        b = self.brightness()
        if b.max != 1:
            raise CannotToggle(f"{self} is not toggleable (max brightness {b.max})")

        if state is ToggleState.ON:
            new = b.max
        elif state is ToggleState.OFF:
            new = 0
        else:
            new = b.current ^ 1
        log.debug("toggling %s: %d -> %d", self, b.current, new)
        self.set_brightness(new)

    def describe(self) -> str:
        return f"{self}: {self.brightness()}"

    def __str__(self) -> str:
        return f"{self.device_class} '{self.id}'"
