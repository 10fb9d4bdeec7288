"""Bit decoding of protocol frames and selection of the most likely command."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field, replace

from .debug import DebugFlag, debug
from .protocol import (
    JVC_BIT_PULSE,
    JVC_ONE_SPACE,
    JVC_REPEAT_DELAY,
    JVC_ZERO_SPACE,
    MAX_DECODED_SEGMENTS,
    NEC_BIT_PULSE,
    NEC_INITIAL_BITS,
    NEC_ONE_SPACE,
    NEC_REPEAT_DELAY,
    NEC_ZERO_SPACE,
    REPEAT_DELAY_TOLERANCE,
    SONY_INITIAL_BITS,
    SONY_ONE_PULSE,
    SONY_REPEAT_DELAY,
    SONY_ZERO_PULSE,
    TIMING_TOLERANCE,
    DecodedIR,
    PulseSpacePair,
    RemoteBrand,
    brand_to_string,
    is_within_tolerance,
    match_preamble,
)
from .scoring import score_all

_REPEAT_DELAYS = {
    RemoteBrand.SONY: SONY_REPEAT_DELAY,
    RemoteBrand.NEC: NEC_REPEAT_DELAY,
    RemoteBrand.JVC: JVC_REPEAT_DELAY,
}


@dataclass
class NecResult:
    """An NEC frame decode together with the command checksum verdict."""

    code: DecodedIR = field(default_factory=lambda: DecodedIR(RemoteBrand.NEC))
    checksum_valid: bool = False


def _space_coded_bits(
    pairs: Sequence[PulseSpacePair],
    max_bits: int,
    bit_pulse: int,
    zero_space: int,
    one_space: int,
) -> tuple[int, int]:
    """Decode pulse-distance bits, LSB first; return (raw bits, bit count)."""
    raw = 0
    count = 0
    last = len(pairs) - 1
    for index, pair in enumerate(pairs):
        if count >= max_bits:
            break
        space = pair.space
        if index == last and space is None:
            space = zero_space
        if not is_within_tolerance(pair.pulse, bit_pulse, TIMING_TOLERANCE):
            debug(DebugFlag.BITS, "    Pair ", index, ": UNKNOWN PULSE\n")
            break
        if space is None:
            debug(DebugFlag.BITS, "    Pair ", index, ": MISSING SPACE (Not Last Bit)\n")
            break
        if is_within_tolerance(space, zero_space, TIMING_TOLERANCE):
            count += 1
        elif is_within_tolerance(space, one_space, TIMING_TOLERANCE):
            raw |= 1 << count
            count += 1
        else:
            debug(DebugFlag.BITS, "    Pair ", index, ": UNKNOWN SPACE Timing\n")
            break
    return raw, count


def _sony_bits(pairs: Sequence[PulseSpacePair]) -> tuple[int, int]:
    """Decode pulse-width bits, LSB first; return (raw bits, bit count)."""
    raw = 0
    count = 0
    max_bits = SONY_INITIAL_BITS - 1
    for index, pair in enumerate(pairs):
        if count >= max_bits:
            break
        if is_within_tolerance(pair.pulse, SONY_ZERO_PULSE, TIMING_TOLERANCE):
            count += 1
        elif is_within_tolerance(pair.pulse, SONY_ONE_PULSE, TIMING_TOLERANCE):
            raw |= 1 << count
            count += 1
        else:
            debug(DebugFlag.BITS, "    Pair ", index, ": UNKNOWN PULSE Timing\n")
            break
    return raw, count


def decode_segment(brand: RemoteBrand, pairs: Iterable[PulseSpacePair]) -> DecodedIR:
    """Decode the data pairs of one Sony or JVC frame.

    An unknown brand or an empty frame gives an empty result. NEC frames
    only get their brand set here; use :func:`decode_nec` for them.
    """
    pairs = list(pairs)
    if brand == RemoteBrand.UNKNOWN or not pairs:
        debug(DebugFlag.DECODE_SUMMARY, "  Cannot decode segment: Unknown brand or no data pairs.\n")
        return DecodedIR()
    result = DecodedIR(RemoteBrand(brand))
    debug(
        DebugFlag.BITS,
        "  Attempting to decode data segment for brand: ", brand_to_string(brand),
        ". Segment has ", len(pairs), " pulse/space pairs.\n",
    )
    if brand == RemoteBrand.SONY:
        raw, count = _sony_bits(pairs)
        if count >= 7:
            result.command = raw & 0x7F
        if count >= 12:
            result.address = (raw >> 7) & 0x1F
    elif brand == RemoteBrand.JVC:
        raw, count = _space_coded_bits(pairs, 16, JVC_BIT_PULSE, JVC_ZERO_SPACE, JVC_ONE_SPACE)
        if count >= 8:
            result.address = raw & 0xFF
        if count >= 16:
            result.command = (raw >> 8) & 0xFF
    else:
        return result
    debug(
        DebugFlag.DECODE_SUMMARY,
        "  Decoded ", brand_to_string(brand), " (", count, " bits) - Command: ",
        result.command, ", Address: ", result.address, "\n",
    )
    return result


def decode_nec(pairs: Iterable[PulseSpacePair]) -> NecResult:
    """Decode the 32 data bits of an NEC frame and check the command checksum."""
    pairs = list(pairs)
    raw, count = _space_coded_bits(
        pairs, NEC_INITIAL_BITS - 1, NEC_BIT_PULSE, NEC_ZERO_SPACE, NEC_ONE_SPACE
    )
    address_low = raw & 0xFF if count >= 8 else None
    address_high = (raw >> 8) & 0xFF if count >= 16 else None
    command = (raw >> 16) & 0xFF if count >= 24 else None
    command_check = (raw >> 24) & 0xFF if count >= 32 else None

    result = NecResult()
    if address_low is not None and address_high is not None:
        if (address_low + address_high) & 0xFF == 0xFF:
            result.code.address = address_low
        else:
            result.code.address = (address_high << 8) | address_low
    elif address_low is not None:
        result.code.address = address_low

    if command is not None:
        result.code.command = command
        if command_check is not None and (command + command_check) & 0xFF == 0xFF:
            result.checksum_valid = True
    debug(
        DebugFlag.DECODE_SUMMARY,
        "  Decoded NEC (", count, " bits) - Address: ", result.code.address,
        ", Command: ", result.code.command,
        ", Checksum Valid: ", "Yes" if result.checksum_valid else "No", "\n",
    )
    return result


def determine_winner(segments: Iterable[DecodedIR | NecResult]) -> DecodedIR:
    """Pick the decode seen most often; the earliest wins a tie.

    Segments without a brand or a command are ignored. NEC decodes only
    count as equal when their checksum verdicts agree too.
    """
    counts: dict[tuple, list] = {}
    for segment in segments:
        if isinstance(segment, NecResult):
            code, checksum = segment.code, segment.checksum_valid
        else:
            code, checksum = segment, False
        if code.brand == RemoteBrand.UNKNOWN or code.command is None:
            continue
        key = (
            code.brand,
            code.command,
            code.address,
            checksum if code.brand == RemoteBrand.NEC else None,
        )
        if key in counts:
            counts[key][1] += 1
        elif len(counts) < MAX_DECODED_SEGMENTS:
            counts[key] = [code, 1]

    best: DecodedIR | None = None
    best_count = 0
    for code, occurrences in counts.values():
        if occurrences > best_count:
            best, best_count = code, occurrences
    if best is None:
        debug(DebugFlag.DECODE_SUMMARY, "\n--- No Winning Decoded Signal Found ---\n")
        return DecodedIR()
    debug(
        DebugFlag.DECODE_SUMMARY,
        "Brand: ", brand_to_string(best.brand), ", Command: ", best.command,
        ", Address: ", best.address, " (Occurrences: ", best_count, ")\n",
    )
    return replace(best)


def _winning_brand(scores: dict[RemoteBrand, int]) -> RemoteBrand:
    winner = RemoteBrand.UNKNOWN
    best = 0
    for brand in (RemoteBrand.JVC, RemoteBrand.SONY, RemoteBrand.NEC):
        if scores.get(brand, 0) > best:
            best = scores[brand]
            winner = brand
    return winner


def analyze_burst(pairs: Iterable[PulseSpacePair]) -> DecodedIR | None:
    """Identify the protocol of a burst and decode its command.

    Returns None when no protocol fits or no frame yields a command.
    """
    pairs = list(pairs)
    if not pairs:
        debug(DebugFlag.BURST, "No pulse/space pairs provided for analysis.\n")
        return None

    brand = _winning_brand(score_all(pairs))
    debug(DebugFlag.DECODE_SUMMARY, "\nLib Internal Winning Brand: ", brand_to_string(brand), "\n")
    if brand == RemoteBrand.UNKNOWN:
        return None

    repeat_delay = _REPEAT_DELAYS[brand]
    head = pairs[0]
    data_offset = 0
    if head.space is not None and match_preamble(head.pulse, head.space, False) == brand:
        data_offset = 1

    segments: list[DecodedIR | NecResult] = []
    segment_start = 0
    last = len(pairs) - 1
    for index, pair in enumerate(pairs):
        if len(segments) >= MAX_DECODED_SEGMENTS:
            break
        repeat_gap = pair.space is not None and is_within_tolerance(
            pair.space, repeat_delay, REPEAT_DELAY_TOLERANCE
        )
        if not (repeat_gap or index == last):
            continue

        data = pairs[segment_start + data_offset : index + 1]
        if data:
            if brand == RemoteBrand.NEC:
                decoded: DecodedIR | NecResult = decode_nec(data)
                decoded_brand = decoded.code.brand
            else:
                decoded = decode_segment(brand, data)
                decoded_brand = decoded.brand
            if decoded_brand != RemoteBrand.UNKNOWN:
                segments.append(decoded)

        segment_start = index + 1
        data_offset = 0
        if segment_start < len(pairs):
            next_head = pairs[segment_start]
            if (
                next_head.space is not None
                and match_preamble(next_head.pulse, next_head.space, True) == brand
            ):
                data_offset = 1

    if not segments:
        debug(DebugFlag.DECODE_SUMMARY, "No segments decoded for the winning brand.\n")
        return None
    result = determine_winner(segments)
    if result.brand != RemoteBrand.UNKNOWN and result.command is not None:
        return result
    return None