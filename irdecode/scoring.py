"""Heuristic scores for how well a burst of pulse/space pairs fits each protocol."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

from .debug import DebugFlag, debug
from .protocol import (
    JVC_INITIAL_BITS,
    JVC_REPEAT_DELAY,
    NEC_INITIAL_BITS,
    NEC_REPEAT_BITS,
    NEC_REPEAT_DELAY,
    REPEAT_DELAY_TOLERANCE,
    SONY_INITIAL_BITS,
    SONY_REPEAT_BITS,
    SONY_REPEAT_DELAY,
    TIMING_TOLERANCE,
    PulseSpacePair,
    RemoteBrand,
    is_within_tolerance,
    match_preamble,
)


def _is_repeat_gap(space: int | None, repeat_delay: int) -> bool:
    return space is not None and is_within_tolerance(space, repeat_delay, REPEAT_DELAY_TOLERANCE)


def _segments(pairs: Sequence[PulseSpacePair], repeat_delay: int) -> Iterator[tuple[int, int]]:
    """Yield inclusive (start, end) indices of the frames split at repeat gaps."""
    start = 0
    last = len(pairs) - 1
    for index, pair in enumerate(pairs):
        if _is_repeat_gap(pair.space, repeat_delay) or index == last:
            yield start, index
            start = index + 1


def _first_data_space(
    pairs: Sequence[PulseSpacePair], start: int, end: int, repeat_delay: int
) -> int | None:
    for pair in pairs[start : end + 1]:
        if pair.space is not None and not _is_repeat_gap(pair.space, repeat_delay):
            return pair.space
    return None


def _marks_fixed(pairs: Sequence[PulseSpacePair], start: int, end: int) -> bool:
    first_mark = pairs[start].pulse
    return all(
        is_within_tolerance(pair.pulse, first_mark, TIMING_TOLERANCE)
        for pair in pairs[start : end + 1]
    )


def _spaces_fixed_strict(
    pairs: Sequence[PulseSpacePair], start: int, end: int, repeat_delay: int
) -> bool:
    """Data spaces all equal; a repeat gap anywhere but the last pair breaks it."""
    reference = _first_data_space(pairs, start, end, repeat_delay)
    if reference is None:
        return False
    for index in range(start, end + 1):
        space = pairs[index].space
        if space is None:
            continue
        if not _is_repeat_gap(space, repeat_delay):
            if not is_within_tolerance(space, reference, TIMING_TOLERANCE):
                return False
        elif index != end:
            return False
    return True


def _spaces_fixed_lenient(
    pairs: Sequence[PulseSpacePair], start: int, end: int, repeat_delay: int
) -> bool:
    """Data spaces all equal, ignoring repeat gaps wherever they occur."""
    reference = _first_data_space(pairs, start, end, repeat_delay)
    if reference is None:
        return False
    return all(
        is_within_tolerance(pair.space, reference, TIMING_TOLERANCE)
        for pair in pairs[start : end + 1]
        if pair.space is not None and not _is_repeat_gap(pair.space, repeat_delay)
    )


def score_sony_sirc12(pairs: Iterable[PulseSpacePair]) -> int:
    """Score a burst against Sony SIRC-12: preamble, data length, variable marks."""
    pairs = list(pairs)
    debug(DebugFlag.BRAND, "\nScoring for SONY SIRC-12...\n")
    score = 0
    for number, (start, end) in enumerate(_segments(pairs, SONY_REPEAT_DELAY), start=1):
        initial = number == 1
        debug(DebugFlag.BRAND, "  Detected SONY Segment ", number, " (Pairs: ", end - start + 1, ")\n")
        data_start = start
        head = pairs[start]
        if head.space is not None:
            if match_preamble(head.pulse, head.space, not initial) == RemoteBrand.SONY:
                score += 1
                data_start = start + 1
                debug(DebugFlag.BRAND, "    +1: SONY Preamble Match in Segment ", number, ".\n")

        data_count = end - data_start + 1
        if data_count <= 0:
            continue
        expected = SONY_INITIAL_BITS - 1 if initial else SONY_REPEAT_BITS - 1
        if is_within_tolerance(data_count, expected, 2):
            score += 1
            debug(DebugFlag.BRAND, "    +1: Data Pair Count (", data_count, ") close to ", expected, ".\n")
        if data_count > 1:
            marks_variable = not _marks_fixed(pairs, data_start + 1, end) if data_start + 1 <= end else False
            if data_start + 1 <= end:
                first_mark = pairs[data_start].pulse
                marks_variable = not all(
                    is_within_tolerance(pair.pulse, first_mark, TIMING_TOLERANCE)
                    for pair in pairs[data_start + 1 : end + 1]
                )
            spaces_fixed = _spaces_fixed_strict(pairs, data_start, end, SONY_REPEAT_DELAY)
            if marks_variable and spaces_fixed:
                score += 1
                debug(DebugFlag.BRAND, "    +1: Variable Mark / Fixed Space in Segment ", number, ".\n")
    debug(DebugFlag.BRAND, "SONY SIRC-12 Final Score: ", score, "\n")
    return score


def score_jvc(pairs: Iterable[PulseSpacePair]) -> int:
    """Score a burst against JVC: preamble, frame lengths, fixed marks/variable spaces."""
    pairs = list(pairs)
    debug(DebugFlag.BRAND, "\nScoring for JVC...\n")
    score = 0
    for number, (start, end) in enumerate(_segments(pairs, JVC_REPEAT_DELAY), start=1):
        initial = number == 1
        pair_count = end - start + 1
        debug(DebugFlag.BRAND, "  Detected JVC Segment ", number, " (Pairs: ", pair_count, ")\n")
        data_start = start
        head = pairs[start]
        if initial:
            if head.space is not None and match_preamble(head.pulse, head.space, False) == RemoteBrand.JVC:
                score += 1
                data_start = start + 1
                debug(DebugFlag.BRAND, "    +1: Initial JVC Preamble Match in Segment 1.\n")
            if is_within_tolerance(end - data_start + 1, JVC_INITIAL_BITS - 1, 2):
                score += 1
                debug(DebugFlag.BRAND, "    +1: JVC initial frame data length matches.\n")
        elif is_within_tolerance(pair_count, JVC_INITIAL_BITS, 2):
            score += 1
            debug(DebugFlag.BRAND, "    +1: JVC Repeat Frame Pair Count (", pair_count, ") matches.\n")

        if pair_count > 1:
            check_start = data_start if initial else start
            marks_fixed = _marks_fixed(pairs, check_start, end)
            spaces_variable = not _spaces_fixed_lenient(pairs, check_start, end, JVC_REPEAT_DELAY)
            if marks_fixed and spaces_variable:
                score += 1
                debug(DebugFlag.BRAND, "    +1: Fixed Mark / Variable Space in Segment ", number, ".\n")
    debug(DebugFlag.BRAND, "JVC Final Score: ", score, "\n")
    return score


def score_nec(pairs: Iterable[PulseSpacePair]) -> int:
    """Score a burst against NEC: preambles, frame lengths, fixed marks."""
    pairs = list(pairs)
    debug(DebugFlag.BRAND, "\nScoring for NEC...\n")
    score = 0
    for number, (start, end) in enumerate(_segments(pairs, NEC_REPEAT_DELAY), start=1):
        initial = number == 1
        debug(DebugFlag.BRAND, "  Detected NEC Segment ", number, " (Pairs: ", end - start + 1, ")\n")
        data_start = start
        head = pairs[start]
        if head.space is not None:
            if match_preamble(head.pulse, head.space, not initial) == RemoteBrand.NEC:
                score += 1
                data_start = start + 1
                debug(DebugFlag.BRAND, "    +1: NEC Preamble Match in Segment ", number, ".\n")

        data_count = end - data_start + 1
        if data_count <= 0:
            continue
        if initial:
            if is_within_tolerance(data_count, NEC_INITIAL_BITS - 1, 2):
                score += 1
                debug(DebugFlag.BRAND, "    +1: NEC initial frame data length matches.\n")
        elif is_within_tolerance(data_count, NEC_REPEAT_BITS, 1):
            score += 1
            debug(DebugFlag.BRAND, "    +1: NEC repeat frame data length matches.\n")

        # Spaces count as variable whenever marks are fixed, so fixed marks decide it.
        if initial and data_count > 1 and _marks_fixed(pairs, data_start, end):
            score += 1
            debug(DebugFlag.BRAND, "    +1: Fixed Mark / Variable Space in Segment ", number, ".\n")
    return score


def score_all(pairs: Iterable[PulseSpacePair]) -> dict[RemoteBrand, int]:
    """Score a burst against every known protocol."""
    pairs = list(pairs)
    debug(DebugFlag.BRAND, "\n--- Lib Internal: Scoring Brands ---\n")
    scores = {
        RemoteBrand.SONY: score_sony_sirc12(pairs),
        RemoteBrand.JVC: score_jvc(pairs),
        RemoteBrand.NEC: score_nec(pairs),
    }
    debug(
        DebugFlag.BRAND,
        "JVC Score: ", scores[RemoteBrand.JVC], "\n",
        "SONY Score: ", scores[RemoteBrand.SONY], "\n",
        "NEC Score: ", scores[RemoteBrand.NEC], "\n",
    )
    return scores