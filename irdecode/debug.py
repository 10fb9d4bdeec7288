"""Category-filtered diagnostic output."""

from __future__ import annotations

import sys
from enum import IntFlag


class DebugFlag(IntFlag):
    """Categories of diagnostic output."""

    NONE = 0x00
    RAW_TIMING = 0x01
    BRAND = 0x02
    BITS = 0x04
    BURST = 0x08
    GENERAL = 0x10
    DECODE_SUMMARY = 0x20
    ALL = 0xFF


_active: DebugFlag = DebugFlag.NONE


def configure(flags: int) -> DebugFlag:
    """Select the enabled categories and return the previous selection."""
    global _active
    previous = _active
    _active = DebugFlag(flags)
    return previous


def _render(value: object) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)


def debug(flag: int, *args: object) -> bool:
    """Write ``args`` back to back to stdout if every bit of ``flag`` is enabled.

    Returns whether anything was written.
    """
    flag = DebugFlag(flag)
    if (_active & flag) != flag:
        return False
    sys.stdout.write("".join(_render(arg) for arg in args))
    return True