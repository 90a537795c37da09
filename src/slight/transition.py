from __future__ import annotations

import logging
import sys
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import TextIO

from slight.device import Device
from slight.errors import WriteError

DEFAULT_INTERVAL = 1.0 / 30.0

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Transition:
    """Apply a step sequence to a device, one value per `interval` seconds."""

    interval: float = DEFAULT_INTERVAL
    sleep: Callable[[float], None] = field(default=time.sleep, repr=False)

    def run(
        self,
        device: Device,
        steps: Sequence[int],
        dry_run: bool = False,
        out: TextIO | None = None,
    ) -> None:
        if dry_run:
            out = sys.stdout if out is None else out
            if steps:
                out.write("\n".join(str(v) for v in steps) + "\n")
            return

        last: int | None = None
        for n, value in enumerate(steps):
            if n:
                self.sleep(self.interval)
            try:
                device.set_brightness(value)
            except WriteError:
                log.error("transition of %s stopped, last applied value: %s", device, last)
                raise
            last = value
            log.debug("%s <- %d", device, value)
