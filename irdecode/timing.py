"""Packing of captured edge times and conversion into pulse/space pairs."""

from __future__ import annotations

from collections.abc import Iterable

from .debug import DebugFlag, debug
from .protocol import IDLE_TIMEOUT_MS, MAX_TRANSITIONS, PulseSpacePair

TIME_VALUE_MASK = 0x7FFFFFFF
DIRECTION_FLAG_H_TO_L = 0x80000000

_MAX_PAIRS = MAX_TRANSITIONS // 2
_IDLE_TIMEOUT_US = IDLE_TIMEOUT_MS * 1000


def pack_transition(time_us: int, high_to_low: bool) -> int:
    """Pack a timestamp (31 bits) and the edge direction (top bit) into one word."""
    value = time_us & TIME_VALUE_MASK
    if high_to_low:
        value |= DIRECTION_FLAG_H_TO_L
    return value


def _elapsed(previous: int, current: int) -> int:
    if current >= previous:
        return current - previous
    return (TIME_VALUE_MASK - previous) + current + 1


def transitions_to_pairs(transitions: Iterable[int]) -> list[PulseSpacePair]:
    """Turn packed edge timestamps into pulse/space pairs.

    The time between consecutive edges alternates between pulse and space.
    A space longer than the idle timeout, or a trailing pulse, gets a missing
    space. At most ``MAX_TRANSITIONS // 2`` pairs are produced.
    """
    values = list(transitions)
    if len(values) < 2:
        debug(DebugFlag.RAW_TIMING, "Not enough transitions (", len(values), ") to process burst.\n")
        return []

    pairs: list[PulseSpacePair] = []
    previous = values[0] & TIME_VALUE_MASK
    pulse: int | None = None
    debug(DebugFlag.RAW_TIMING, "\nRaw Transitions and Deltas:\n")

    for position, value in enumerate(values[1:], start=1):
        if len(pairs) >= _MAX_PAIRS:
            debug(DebugFlag.BURST, "Warning: Exceeded pulseSpacePairs buffer.\n")
            break
        current = value & TIME_VALUE_MASK
        direction = "H->L" if value & DIRECTION_FLAG_H_TO_L else "L->H"
        delta = _elapsed(previous, current)
        debug(
            DebugFlag.RAW_TIMING,
            position, ": ", current, " us | ", direction, " | Delta: ", delta, " us\n",
        )
        if pulse is None:
            pulse = delta
        else:
            space = None if delta > _IDLE_TIMEOUT_US else delta
            pairs.append(PulseSpacePair(pulse, space))
            pulse = None
        previous = current

    debug(DebugFlag.RAW_TIMING, "--- End Raw Transitions ---\n")
    if pulse is not None:
        if len(pairs) < _MAX_PAIRS:
            pairs.append(PulseSpacePair(pulse, None))
        else:
            debug(DebugFlag.BURST, "Warning: Exceeded pulseSpacePairs buffer for final pulse.\n")
    return pairs