from __future__ import annotations

import argparse
import math

from slight import __version__
from slight.config import ConfigError, Settings, load, settings
from slight.controller import Controller
from slight.device import ToggleState
from slight.errors import ParseError, SlightError
from slight.expression import looks_like_expression
from slight.log import setup

# Values stored when a flag with an optional argument is given bare.
_ALL_DEVICES = ""
_DEFAULT_EXPONENT = object()
_FLIP = "toggle"


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="slight",
        description="Change backlight or LED brightness smoothly.",
    )
    ap.add_argument("--version", action="version", version=__version__)
    ap.add_argument(
        "input",
        nargs="?",
        help="to value: 10, to percent: 10%%, by value: +10/-10, by percent: +10%%/-10%%",
    )
    ap.add_argument("-i", "--id", help="id of the device to change (see --list)")
    ap.add_argument(
        "-l",
        "--list",
        nargs="?",
        const=_ALL_DEVICES,
        metavar="ID",
        help="list all devices, or only the one with the given id",
    )
    ap.add_argument(
        "-e",
        "--exponent",
        nargs="?",
        type=float,
        const=_DEFAULT_EXPONENT,
        help="use an exponential range with the given exponent (default 4.0)",
    )
    ap.add_argument(
        "-t",
        "--toggle",
        nargs="?",
        choices=["on", "off", _FLIP],
        const=_FLIP,
        help="switch a binary (max brightness 1) device on, off, or flip it",
    )
    ap.add_argument(
        "-s", "--stdout", action="store_true", help="write the steps to stdout instead of sysfs"
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="be verbose about what happens")
    ap.add_argument("-c", "--config", help="YAML file overriding the built-in defaults")
    return ap


def _parse(ap: argparse.ArgumentParser, argv: list[str] | None) -> argparse.Namespace:
    # argparse rejects "-10%" as an unknown option; accept it as the input.
    args, extra = ap.parse_known_args(argv)
    for token in extra:
        if args.input is None and looks_like_expression(token):
            args.input = token
        else:
            ap.error(f"unrecognized arguments: {' '.join(extra)}")

    if args.list is not None and (args.input is not None or args.toggle is not None):
        ap.error("--list cannot be combined with an input or --toggle")
    if args.toggle is not None and args.input is not None:
        ap.error("--toggle cannot be combined with an input")
    return args


def _exponent(args: argparse.Namespace, cfg: Settings) -> float | None:
    if args.exponent is None:
        return None
    if args.exponent is _DEFAULT_EXPONENT:
        return cfg.default_exponent
    if not (math.isfinite(args.exponent) and args.exponent > 0):
        raise ParseError(f"Exponent must be a finite number > 0, got {args.exponent}")
    return float(args.exponent)


def _run(args: argparse.Namespace) -> None:
    cfg = settings(load(args.config)) if args.config else Settings()
    ctl = Controller(cfg)

    if args.list is not None:
        for line in ctl.list_devices(args.list or None):
            print(line)
        return

    if args.toggle is not None:
        state = None if args.toggle == _FLIP else ToggleState(args.toggle)
        ctl.toggle(args.id, state)
        return

    ctl.set_brightness(args.input, args.id, _exponent(args, cfg), dry_run=args.stdout)


def main(argv: list[str] | None = None) -> None:
    args = _parse(_build_parser(), argv)
    setup(verbose=args.verbose)
    try:
        _run(args)
    except (SlightError, ConfigError) as e:
        raise SystemExit(str(e)) from e
