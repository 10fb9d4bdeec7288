"""Remote brands, timing constants and the small helpers shared by the decoder."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class RemoteBrand(IntEnum):
    """Infrared remote protocols the decoder can recognise."""

    UNKNOWN = 0
    JVC = 1
    SONY = 2
    NEC = 3


@dataclass(frozen=True)
class PulseSpacePair:
    """One mark (pulse) and the following gap (space), in microseconds.

    ``space`` is ``None`` when the gap is missing, for example after the last
    pulse of a burst or when the gap exceeded the idle timeout.
    """

    pulse: int
    space: int | None = None


@dataclass
class DecodedIR:
    """A decoded command; ``None`` marks a field that could not be decoded."""

    brand: RemoteBrand = RemoteBrand.UNKNOWN
    command: int | None = None
    address: int | None = None


# Capture configuration
MAX_TRANSITIONS = 300
IDLE_TIMEOUT_MS = 100
MAX_DECODED_SEGMENTS = 10

# JVC
JVC_PREAMBLE_PULSE = 8400
JVC_PREAMBLE_SPACE = 4200
JVC_BIT_PULSE = 526
JVC_ZERO_SPACE = 526
JVC_ONE_SPACE = 1574
JVC_REPEAT_DELAY = 22000
JVC_REPEAT_PREAMBLE_PULSE = 0
JVC_REPEAT_PREAMBLE_SPACE = 0
JVC_INITIAL_BITS = 17
JVC_REPEAT_BITS = 16

# Sony SIRC-12
SONY_PREAMBLE_PULSE = 2400
SONY_PREAMBLE_SPACE = 600
SONY_ZERO_PULSE = 600
SONY_ONE_PULSE = 1200
SONY_BIT_SPACE = 600
SONY_REPEAT_DELAY = 25000
SONY_REPEAT_PREAMBLE_PULSE = 2400
SONY_REPEAT_PREAMBLE_SPACE = 600
SONY_INITIAL_BITS = 13
SONY_REPEAT_BITS = 13

# NEC
NEC_PREAMBLE_PULSE = 9000
NEC_PREAMBLE_SPACE = 4500
NEC_BIT_PULSE = 563
NEC_ZERO_SPACE = 563
NEC_ONE_SPACE = 563 * 3
NEC_REPEAT_DELAY = 42000
NEC_REPEAT_PREAMBLE_PULSE = 8900
NEC_REPEAT_PREAMBLE_SPACE = 2200
NEC_INITIAL_BITS = 33
NEC_REPEAT_BITS = 1

# Analysis configuration
TIMING_TOLERANCE = 200
PERCENTAGE_TOLERANCE = 0.10
MIN_REPEAT_GAP = 10000
REPEAT_DELAY_TOLERANCE = 5000

_INITIAL_PREAMBLES = (
    (RemoteBrand.JVC, JVC_PREAMBLE_PULSE, JVC_PREAMBLE_SPACE),
    (RemoteBrand.SONY, SONY_PREAMBLE_PULSE, SONY_PREAMBLE_SPACE),
    (RemoteBrand.NEC, NEC_PREAMBLE_PULSE, NEC_PREAMBLE_SPACE),
)

_REPEAT_PREAMBLES = (
    (RemoteBrand.JVC, JVC_REPEAT_PREAMBLE_PULSE, JVC_REPEAT_PREAMBLE_SPACE),
    (RemoteBrand.SONY, SONY_REPEAT_PREAMBLE_PULSE, SONY_REPEAT_PREAMBLE_SPACE),
    (RemoteBrand.NEC, NEC_REPEAT_PREAMBLE_PULSE, NEC_REPEAT_PREAMBLE_SPACE),
)


def is_within_tolerance(captured: int, expected: int, tolerance: int) -> bool:
    """Return True if ``captured`` is no more than ``tolerance`` from ``expected``."""
    return abs(captured - expected) <= tolerance


def is_within_percentage_tolerance(
    captured: int, expected: int, tolerance_percent: float
) -> bool:
    """Return True if ``captured`` lies within a fraction of ``expected``."""
    if expected == 0:
        return captured == 0
    return abs(captured - expected) <= expected * tolerance_percent


def match_preamble(pulse: int, space: int, is_repeat: bool) -> RemoteBrand:
    """Identify the brand whose (initial or repeat) preamble matches the pair."""
    table = _REPEAT_PREAMBLES if is_repeat else _INITIAL_PREAMBLES
    for brand, expected_pulse, expected_space in table:
        if is_within_tolerance(pulse, expected_pulse, TIMING_TOLERANCE) and is_within_tolerance(
            space, expected_space, TIMING_TOLERANCE
        ):
            return brand
    return RemoteBrand.UNKNOWN


def brand_to_string(brand: int) -> str:
    """Return the display name of a brand, ``"UNKNOWN"`` for anything else."""
    try:
        return RemoteBrand(brand).name
    except ValueError:
        return RemoteBrand.UNKNOWN.name