import pytest

from irdecode.protocol import MAX_TRANSITIONS, DecodedIR, RemoteBrand
from irdecode.receiver import HIGH, LOW, IRReceiver


def nec_durations(address, command):
    durations = [9000, 4500]
    for byte in (address, address ^ 0xFF, command, command ^ 0xFF):
        for bit in range(8):
            durations += [563, 1689 if (byte >> bit) & 1 else 563]
    durations.append(563)
    return durations


def feed(receiver, durations, start_us=1_000_000):
    time_us = start_us
    level = LOW
    receiver.handle_edge(level, time_us, time_us // 1000)
    for duration in durations:
        time_us += duration
        level = HIGH if level == LOW else LOW
        receiver.handle_edge(level, time_us, time_us // 1000)
    return time_us // 1000


@pytest.fixture
def receiver():
    rx = IRReceiver()
    rx.begin(4)
    return rx


def test_enable_without_pin_raises():
    with pytest.raises(RuntimeError):
        IRReceiver().enable()


def test_begin_rejects_negative_pin():
    with pytest.raises(ValueError):
        IRReceiver().begin(-1)


def test_begin_sets_pin_and_enables(receiver):
    assert receiver.pin == 4
    assert receiver.enabled is True


def test_disable_when_not_enabled_raises():
    with pytest.raises(RuntimeError):
        IRReceiver().disable()


def test_nec_burst_is_decoded(receiver):
    last_ms = feed(receiver, nec_durations(0x00, 0x10))
    assert receiver.is_code(last_ms + 100) is False
    assert receiver.is_code(last_ms + 101) is True
    code = receiver.get_code()
    assert code == DecodedIR(RemoteBrand.NEC, 0x10, 0x00)
    assert receiver.get_button_name(code.brand, code.command) == "necPlay"


def test_result_is_consumed_once(receiver):
    last_ms = feed(receiver, nec_durations(0x00, 0x13))
    assert receiver.is_code(last_ms + 500) is True
    assert receiver.get_code().command == 0x13
    assert receiver.get_code() == DecodedIR()
    assert receiver.is_code(last_ms + 1000) is False


def test_decodes_across_timer_wrap(receiver):
    last_ms = feed(receiver, nec_durations(0x00, 0x40), start_us=0x7FFFFFFF - 20_000)
    assert receiver.is_code(last_ms + 500) is True
    assert receiver.get_code() == DecodedIR(RemoteBrand.NEC, 0x40, 0x00)


def test_edges_ignored_when_not_enabled():
    rx = IRReceiver()
    assert rx.handle_edge(LOW, 100, 0) is False


def test_repeated_level_is_not_recorded(receiver):
    assert receiver.handle_edge(LOW, 100, 0) is True
    assert receiver.handle_edge(LOW, 200, 0) is False
    assert receiver.handle_edge(HIGH, 300, 0) is True


def test_capture_is_capped(receiver):
    kept = 0
    level = LOW
    for step in range(MAX_TRANSITIONS + 100):
        kept += receiver.handle_edge(level, step * 600, 0)
        level = HIGH if level == LOW else LOW
    assert kept == MAX_TRANSITIONS


def test_noise_burst_yields_no_code(receiver):
    receiver.handle_edge(LOW, 1000, 1)
    receiver.handle_edge(HIGH, 1500, 1)
    assert receiver.is_code(500) is False
    assert receiver.get_code() == DecodedIR()


def test_disable_discards_pending_capture(receiver):
    last_ms = feed(receiver, nec_durations(0x00, 0x10))
    receiver.disable()
    assert receiver.enabled is False
    assert receiver.is_code(last_ms + 500) is False
    assert receiver.get_code() == DecodedIR()


def test_disable_discards_ready_result(receiver):
    last_ms = feed(receiver, nec_durations(0x00, 0x10))
    assert receiver.is_code(last_ms + 500) is True
    receiver.disable()
    assert receiver.is_code(last_ms + 600) is False
    assert receiver.get_code() == DecodedIR()


def test_begin_again_resets_capture(receiver):
    last_ms = feed(receiver, nec_durations(0x00, 0x10))
    assert receiver.begin(5) is True
    assert receiver.pin == 5
    assert receiver.is_code(last_ms + 500) is False


def test_brand_to_string(receiver):
    assert receiver.brand_to_string(RemoteBrand.SONY) == "SONY"
    assert receiver.brand_to_string(RemoteBrand.UNKNOWN) == "UNKNOWN"