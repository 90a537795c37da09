from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TextIO

from slight import directory, ranges
from slight.config import Settings
from slight.device import Device, ToggleState
from slight.errors import SpecifiedDeviceNotFound
from slight.expression import parse
from slight.system.sysfs import Sysfs
from slight.transition import Transition

log = logging.getLogger(__name__)


@dataclass
class Controller:
    settings: Settings = field(default_factory=Settings)
    sleep: Callable[[float], None] = time.sleep

    def __post_init__(self) -> None:
        self._sysfs = Sysfs(self.settings.sysfs_root)
        self._transition = Transition(interval=self.settings.step_interval, sleep=self.sleep)

    def scan(self) -> list[Device]:
        return directory.scan(self._sysfs)

    def device(self, device_id: str | None = None) -> Device:
        if device_id is None:
            device_id = self.settings.device
        return directory.select(self.scan(), device_id)

    def list_devices(self, device_id: str | None = None) -> list[str]:
        devices = self.scan()
        if device_id is not None:
            dev = directory.find(devices, device_id)
            if dev is None:
                raise SpecifiedDeviceNotFound(f"No device with id '{device_id}' found")
            return [dev.describe()]

        if not devices:
            return ["No devices found!"]
        return ["Found devices:"] + [f"\t{d.describe()}" for d in devices]

    def set_brightness(
        self,
        text: str | None,
        device_id: str | None = None,
        exponent: float | None = None,
        dry_run: bool = False,
        out: TextIO | None = None,
    ) -> list[int]:
        """Move the selected device to the brightness described by `text`.

        Returns the step sequence that was applied (or printed, for a dry run).
        """

        spec = parse(text)
        dev = self.device(device_id)
        b = dev.brightness()
        steps = ranges.build(b.current, b.max, spec, exponent, self.settings.shaping)
        log.debug(
            "%s: %s -> %s in %d step(s), exponent=%s",
            dev,
            b.current,
            steps[-1] if steps else b.current,
            len(steps),
            exponent,
        )
        self._transition.run(dev, steps, dry_run=dry_run, out=out)
        return steps

    def toggle(self, device_id: str | None = None, state: ToggleState | None = None) -> None:
        self.device(device_id).toggle(state)
