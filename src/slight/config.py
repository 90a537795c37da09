from __future__ import annotations

import math
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from slight.ranges import Shaping
from slight.system.sysfs import BASE_PATH
from slight.transition import DEFAULT_INTERVAL

DEFAULT_EXPONENT = 4.0

KNOWN_KEYS = {"sysfs_root", "exponent", "step_interval", "shaping", "device"}


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class Settings:
    sysfs_root: Path = BASE_PATH
    default_exponent: float = DEFAULT_EXPONENT
    step_interval: float = DEFAULT_INTERVAL
    shaping: Shaping = Shaping.CURVE
    device: str | None = None


def _number(cfg: dict[str, Any], key: str) -> float | None:
    if key not in cfg:
        return None
    raw = cfg[key]
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise ConfigError(f"{key} must be a number, got {raw!r}")
    try:
        value = float(raw)
    except OverflowError as e:
        raise ConfigError(f"{key} must be finite, got {raw!r}") from e
    if not math.isfinite(value):
        raise ConfigError(f"{key} must be finite, got {raw!r}")
    return value


def load(path: str | Path) -> dict[str, Any]:
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read config {p}: {e}") from e
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {p}: {e}") from e
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError("Top-level config must be a mapping")
    validate(data)
    return data


def validate(cfg: dict[str, Any]) -> None:
    unknown = sorted(set(cfg) - KNOWN_KEYS)
    if unknown:
        raise ConfigError(f"Unknown config key(s): {', '.join(unknown)}")

    exponent = _number(cfg, "exponent")
    if exponent is not None and exponent <= 0:
        raise ConfigError("exponent must be > 0")

    interval = _number(cfg, "step_interval")
    if interval is not None and interval < 0:
        raise ConfigError("step_interval must be >= 0")

    if "shaping" in cfg and cfg["shaping"] not in {s.value for s in Shaping}:
        raise ConfigError(f"shaping must be one of: {', '.join(s.value for s in Shaping)}")

    if "sysfs_root" in cfg and not str(cfg["sysfs_root"] or "").strip():
        raise ConfigError("sysfs_root must be a non-empty path")

    if "device" in cfg and cfg["device"] is not None and not str(cfg["device"]).strip():
        raise ConfigError("device must be a non-empty id")


def settings(cfg: dict[str, Any] | None = None) -> Settings:
    """Build Settings from a validated config mapping, defaulting missing keys."""

    cfg = cfg or {}
    defaults = Settings()
    root = cfg.get("sysfs_root")
    device = cfg.get("device")
    return Settings(
        sysfs_root=Path(str(root).strip()) if root is not None else defaults.sysfs_root,
        default_exponent=float(cfg.get("exponent", defaults.default_exponent)),
        step_interval=float(cfg.get("step_interval", defaults.step_interval)),
        shaping=Shaping(cfg.get("shaping", defaults.shaping.value)),
        device=str(device).strip() if device is not None else None,
    )
