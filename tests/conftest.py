from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from slight.system.sysfs import Sysfs


def write_device(root: Path, class_dir: str, device_id: str, current: object, max_: object) -> Path:
    path = root / class_dir / device_id
    path.mkdir(parents=True, exist_ok=True)
    (path / "brightness").write_text(f"{current}\n", encoding="utf-8")
    (path / "max_brightness").write_text(f"{max_}\n", encoding="utf-8")
    return path


@pytest.fixture
def sysfs(tmp_path: Path) -> Sysfs:
    return Sysfs(tmp_path)


@pytest.fixture
def add_device(tmp_path: Path) -> Callable[..., Path]:
    def add(class_dir: str, device_id: str, current: object, max_: object) -> Path:
        return write_device(tmp_path, class_dir, device_id, current, max_)

    return add


@pytest.fixture(autouse=True)
def _reset_logger() -> Iterator[None]:
    yield
    logger = logging.getLogger("slight")
    for h in list(logger.handlers):
        logger.removeHandler(h)
    logger.setLevel(logging.NOTSET)
