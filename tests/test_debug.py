import pytest

from irdecode.debug import DebugFlag, configure, debug


@pytest.fixture(autouse=True)
def _reset_flags():
    previous = configure(DebugFlag.NONE)
    yield
    configure(previous)


def test_flag_values_match_categories():
    configure(0x01 | 0x20)
    assert configure(DebugFlag.NONE) == DebugFlag.RAW_TIMING | DebugFlag.DECODE_SUMMARY
    configure(0xFF)
    assert configure(DebugFlag.NONE) == DebugFlag.ALL


def test_disabled_category_writes_nothing(capsys):
    assert debug(DebugFlag.BRAND, "score ", 3, "\n") is False
    assert capsys.readouterr().out == ""


def test_enabled_category_concatenates_arguments(capsys):
    configure(DebugFlag.BRAND)
    assert debug(DebugFlag.BRAND, "Score: ", 3, "\n") is True
    assert capsys.readouterr().out == "Score: 3\n"


def test_other_categories_stay_silent(capsys):
    configure(DebugFlag.BRAND | DebugFlag.BITS)
    debug(DebugFlag.GENERAL, "general")
    debug(DebugFlag.BITS, "bits")
    assert capsys.readouterr().out == "bits"


def test_all_enables_every_category(capsys):
    configure(DebugFlag.ALL)
    for flag in (DebugFlag.RAW_TIMING, DebugFlag.BURST, DebugFlag.DECODE_SUMMARY):
        assert debug(flag, flag.name) is True
    assert capsys.readouterr().out == "RAW_TIMINGBURSTDECODE_SUMMARY"


def test_booleans_print_as_digits(capsys):
    configure(DebugFlag.BRAND)
    debug(DebugFlag.BRAND, "Marks Fixed: ", True, ", Spaces Fixed: ", False)
    assert capsys.readouterr().out == "Marks Fixed: 1, Spaces Fixed: 0"


def test_configure_returns_previous_selection():
    configure(DebugFlag.GENERAL)
    assert configure(0x22) == DebugFlag.GENERAL
    assert configure(DebugFlag.NONE) == DebugFlag.BRAND | DebugFlag.DECODE_SUMMARY


def test_combined_flag_needs_every_bit(capsys):
    configure(DebugFlag.BRAND)
    assert debug(DebugFlag.BRAND | DebugFlag.BITS, "x") is False
    assert capsys.readouterr().out == ""