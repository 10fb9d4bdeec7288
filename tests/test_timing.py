import itertools

import pytest

from irdecode import protocol
from irdecode.protocol import PulseSpacePair
from irdecode.timing import (
    DIRECTION_FLAG_H_TO_L,
    TIME_VALUE_MASK,
    pack_transition,
    transitions_to_pairs,
)


def _edges(durations, start=0):
    """Packed edge times whose gaps are the given durations, first edge falling."""
    times = [start, *(start + t for t in itertools.accumulate(durations))]
    return [
        pack_transition(t, high_to_low=(i % 2 == 0)) for i, t in enumerate(times)
    ]


def test_pack_sets_direction_bit_only_for_falling_edges():
    assert pack_transition(1000, True) == 1000 | DIRECTION_FLAG_H_TO_L
    assert pack_transition(1000, False) == 1000


@pytest.mark.parametrize("time_us", [0, 1, 9000, TIME_VALUE_MASK, TIME_VALUE_MASK + 5])
@pytest.mark.parametrize("falling", [True, False])
def test_pack_keeps_masked_time(time_us, falling):
    packed = pack_transition(time_us, falling)
    assert packed & TIME_VALUE_MASK == time_us & TIME_VALUE_MASK
    assert packed <= 0xFFFFFFFF


def test_fewer_than_two_transitions_give_no_pairs():
    assert transitions_to_pairs([]) == []
    assert transitions_to_pairs([pack_transition(5, True)]) == []


def test_nec_frame_round_trips():
    durations = [
        protocol.NEC_PREAMBLE_PULSE,
        protocol.NEC_PREAMBLE_SPACE,
        protocol.NEC_BIT_PULSE,
        protocol.NEC_ONE_SPACE,
        protocol.NEC_BIT_PULSE,
        protocol.NEC_ZERO_SPACE,
        protocol.NEC_BIT_PULSE,
    ]
    assert transitions_to_pairs(_edges(durations)) == [
        PulseSpacePair(protocol.NEC_PREAMBLE_PULSE, protocol.NEC_PREAMBLE_SPACE),
        PulseSpacePair(protocol.NEC_BIT_PULSE, protocol.NEC_ONE_SPACE),
        PulseSpacePair(protocol.NEC_BIT_PULSE, protocol.NEC_ZERO_SPACE),
        PulseSpacePair(protocol.NEC_BIT_PULSE, None),
    ]


def test_even_number_of_gaps_leaves_last_space_present():
    durations = [protocol.SONY_PREAMBLE_PULSE, protocol.SONY_PREAMBLE_SPACE]
    assert transitions_to_pairs(_edges(durations)) == [
        PulseSpacePair(protocol.SONY_PREAMBLE_PULSE, protocol.SONY_PREAMBLE_SPACE)
    ]


def test_timer_wraparound_is_handled():
    durations = [protocol.SONY_ONE_PULSE, protocol.SONY_BIT_SPACE, protocol.SONY_ZERO_PULSE]
    start = TIME_VALUE_MASK - protocol.SONY_ONE_PULSE // 2
    assert transitions_to_pairs(_edges(durations, start)) == [
        PulseSpacePair(protocol.SONY_ONE_PULSE, protocol.SONY_BIT_SPACE),
        PulseSpacePair(protocol.SONY_ZERO_PULSE, None),
    ]


def test_space_beyond_idle_timeout_is_missing():
    long_gap = protocol.IDLE_TIMEOUT_MS * 1000 + 1
    durations = [protocol.JVC_BIT_PULSE, long_gap, protocol.JVC_BIT_PULSE]
    pairs = transitions_to_pairs(_edges(durations))
    assert pairs == [
        PulseSpacePair(protocol.JVC_BIT_PULSE, None),
        PulseSpacePair(protocol.JVC_BIT_PULSE, None),
    ]


def test_space_at_idle_timeout_is_kept():
    gap = protocol.IDLE_TIMEOUT_MS * 1000
    pairs = transitions_to_pairs(_edges([protocol.JVC_BIT_PULSE, gap]))
    assert pairs == [PulseSpacePair(protocol.JVC_BIT_PULSE, gap)]


def test_pair_count_is_capped():
    durations = [protocol.NEC_BIT_PULSE] * (protocol.MAX_TRANSITIONS * 2)
    pairs = transitions_to_pairs(_edges(durations))
    assert len(pairs) == protocol.MAX_TRANSITIONS // 2
    assert all(p == PulseSpacePair(protocol.NEC_BIT_PULSE, protocol.NEC_BIT_PULSE) for p in pairs)


def test_direction_bit_does_not_affect_durations():
    durations = [protocol.NEC_BIT_PULSE, protocol.NEC_ONE_SPACE]
    times = [0, *itertools.accumulate(durations)]
    rising = [pack_transition(t, False) for t in times]
    falling = [pack_transition(t, True) for t in times]
    assert transitions_to_pairs(rising) == transitions_to_pairs(falling)


def test_accepts_any_iterable():
    durations = [protocol.NEC_BIT_PULSE, protocol.NEC_ZERO_SPACE]
    edges = _edges(durations)
    assert transitions_to_pairs(iter(edges)) == transitions_to_pairs(edges)