from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from slight.device import Device, DeviceClass
from slight.errors import ReadError, SpecifiedDeviceNotFound, SuitableDeviceNotFound
from slight.system.sysfs import Sysfs

log = logging.getLogger(__name__)

ALL_CLASSES = (DeviceClass.BACKLIGHT, DeviceClass.LED)


def scan(backend: Sysfs, classes: Iterable[DeviceClass] = ALL_CLASSES) -> list[Device]:
    """Return every readable device of the given classes.

    Missing class directories and entries that cannot be read are logged and
    skipped, so the result may be partial.
    """

    devices: list[Device] = []
    for device_class in classes:
        try:
            ids = backend.list_ids(device_class.dirname)
        except OSError as e:
            log.warning("skipping class %s: %s", device_class, e)
            continue

        for device_id in ids:
            try:
                devices.append(Device.resolve(backend, device_class, device_id))
            except ReadError as e:
                log.warning("skipping %s '%s': %s", device_class, device_id, e)

    log.debug("found %d device(s)", len(devices))
    return devices


def find(devices: Sequence[Device], device_id: str) -> Device | None:
    return next((d for d in devices if d.id == device_id), None)


def find_default(devices: Sequence[Device]) -> Device | None:
    return next((d for d in devices if d.device_class is DeviceClass.BACKLIGHT), None)


def select(devices: Sequence[Device], device_id: str | None = None) -> Device:
    if device_id is not None:
        dev = find(devices, device_id)
        if dev is None:
            raise SpecifiedDeviceNotFound(f"No device with id '{device_id}' found")
    else:
        dev = find_default(devices)
        if dev is None:
            raise SuitableDeviceNotFound("No suitable default (backlight) device found")

    log.debug("selected %s at %s", dev, dev.path)
    return dev
