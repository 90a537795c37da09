from __future__ import annotations


class SlightError(Exception):
    pass


class ReadError(SlightError):
    pass


class WriteError(SlightError):
    pass


class CannotToggle(SlightError):
    pass


class SpecifiedDeviceNotFound(SlightError):
    pass


class SuitableDeviceNotFound(SlightError):
    pass


class NoInput(SlightError):
    pass


class ParseError(SlightError):
    pass
