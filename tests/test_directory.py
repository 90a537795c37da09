from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

import pytest

from slight.device import Device, DeviceClass
from slight.directory import scan, select
from slight.errors import SpecifiedDeviceNotFound, SuitableDeviceNotFound
from slight.system.sysfs import Sysfs


def test_scan_orders_backlights_first(sysfs: Sysfs, add_device: Callable[..., Path]) -> None:
    add_device("leds", "input3::numlock", 0, 1)
    add_device("leds", "input3::capslock", 1, 1)
    add_device("backlight", "intel_backlight", 500, 1000)

    devices = scan(sysfs)
    assert [(d.device_class, d.id) for d in devices] == [
        (DeviceClass.BACKLIGHT, "intel_backlight"),
        (DeviceClass.LED, "input3::capslock"),
        (DeviceClass.LED, "input3::numlock"),
    ]
    assert devices[0].path == sysfs.root / "backlight" / "intel_backlight"


def test_scan_skips_broken_entries(
    sysfs: Sysfs, add_device: Callable[..., Path], caplog: pytest.LogCaptureFixture
) -> None:
    add_device("backlight", "acpi_video0", "garbage", 15)
    add_device("backlight", "intel_backlight", 10, 100)
    (sysfs.root / "leds" / "half").mkdir(parents=True)

    with caplog.at_level(logging.WARNING, logger="slight"):
        devices = scan(sysfs)

    assert [d.id for d in devices] == ["intel_backlight"]
    skipped = [r.getMessage() for r in caplog.records if r.levelno == logging.WARNING]
    assert len(skipped) == 2
    assert any("acpi_video0" in m for m in skipped)
    assert any("half" in m for m in skipped)


def test_scan_tolerates_missing_class_dirs(sysfs: Sysfs) -> None:
    assert scan(sysfs) == []


def test_scan_single_class(sysfs: Sysfs, add_device: Callable[..., Path]) -> None:
    add_device("leds", "led0", 0, 1)
    add_device("backlight", "bl", 0, 1)
    assert [d.id for d in scan(sysfs, [DeviceClass.LED])] == ["led0"]


def _dev(device_class: DeviceClass, device_id: str) -> Device:
    return Device(device_class, device_id, Path("/sys/class") / device_class.dirname / device_id)


def test_select_by_id_is_exact() -> None:
    devices = [_dev(DeviceClass.LED, "Led0"), _dev(DeviceClass.LED, "led0")]
    assert select(devices, "led0") is devices[1]
    with pytest.raises(SpecifiedDeviceNotFound):
        select(devices, "LED0")


def test_select_default_is_first_backlight() -> None:
    devices = [
        _dev(DeviceClass.LED, "led0"),
        _dev(DeviceClass.BACKLIGHT, "first"),
        _dev(DeviceClass.BACKLIGHT, "second"),
    ]
    assert select(devices).id == "first"


def test_select_default_ignores_leds() -> None:
    with pytest.raises(SuitableDeviceNotFound):
        select([_dev(DeviceClass.LED, "led0")])


def test_select_on_empty_list() -> None:
    with pytest.raises(SuitableDeviceNotFound):
        select([], None)
    with pytest.raises(SpecifiedDeviceNotFound):
        select([], "x")
