from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

BASE_PATH = Path("/sys/class")


@dataclass(frozen=True)
class Sysfs:
    """Plain file access to `/sys/class/<class>/<id>/<attribute>`.

    Errors are left as the OSError / ValueError raised by the file and int
    conversions; callers decide what a failure means.
    """

    root: Path = field(default=BASE_PATH)

    def class_dir(self, class_name: str) -> Path:
        return self.root / class_name

    def list_ids(self, class_name: str) -> list[str]:
        return sorted(p.name for p in self.class_dir(class_name).iterdir())

    def read_int(self, path: Path, attr: str) -> int:
        return int((path / attr).read_text(encoding="utf-8").strip())

    def write_int(self, path: Path, attr: str, value: int) -> None:
        (path / attr).write_text(str(int(value)), encoding="utf-8")
