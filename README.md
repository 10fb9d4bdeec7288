# irdecode

Decode the signals sent by infrared remote controls from the timing of the
edges a receiver sees. Three protocols are recognised:

- **Sony SIRC-12** (used by Sceptre TVs): 7-bit command, 5-bit address
- **JVC**: 8-bit address, 8-bit command
- **NEC**: 8- or 16-bit address, 8-bit command with checksum

A burst of edges is turned into pulse/space pairs, every protocol scores how
well the burst matches it, the best-scoring protocol decodes each repeated
frame, and the value seen most often wins.

## Installation

```
pip install .
```

No third-party dependencies are needed. To run the tests:

```
pip install .[test]
pytest
```

## Using the receiver

`irdecode.receiver.IRReceiver` does no input of its own. Feed it each level
change of the receiver line with its timestamp in microseconds and the
current time in milliseconds, and poll it with the current time in
milliseconds. Once more than 100 ms have passed since the last edge, the
captured burst is analysed.

```python
from irdecode.receiver import IRReceiver

rx = IRReceiver()
rx.begin(pin=4, initial_level=1)   # line idles high

# for every level change of the line:
rx.handle_edge(level, time_us, now_ms)

# from your main loop:
if rx.is_code(now_ms):
    code = rx.get_code()
    print(rx.brand_to_string(code.brand), code.address, code.command)
    print(rx.get_button_name(code.brand, code.command))
```

- `begin(pin, initial_level=1)` records the pin number and starts capturing;
  a negative pin raises `ValueError`.
- `handle_edge` returns whether the edge was kept. Edges are ignored while
  capture is disabled, when the level did not change, or once 300 edges have
  been captured for the current burst.
- `is_code(now_ms)` returns `True` when a decoded command is waiting.
- `get_code()` hands over the waiting `DecodedIR` (fields `brand`, `command`,
  `address`; `None` where a field could not be decoded) and clears it, or
  returns an empty `DecodedIR` if nothing is waiting.
- `disable()` stops capture and drops any partial burst and waiting result;
  it raises `RuntimeError` if capture is not enabled. `enable()` starts a
  fresh capture session and raises `RuntimeError` before `begin()`.
- The `pin` and `enabled` properties report the current state.

## Working with timings directly

The stages can also be used on their own:

```python
from irdecode.protocol import PulseSpacePair
from irdecode.scoring import score_all
from irdecode.decoding import analyze_burst

pairs = [PulseSpacePair(2400, 600), ...]   # microseconds; space may be None
print(score_all(pairs))                    # {RemoteBrand: score}
result = analyze_burst(pairs)              # DecodedIR, or None if nothing decoded
```

- `irdecode.protocol`: `RemoteBrand`, `PulseSpacePair`, `DecodedIR`, the
  protocol timing constants, `is_within_tolerance`,
  `is_within_percentage_tolerance`, `match_preamble` and `brand_to_string`.
- `irdecode.timing`: `pack_transition(time_us, high_to_low)` packs a 31-bit
  timestamp and the edge direction into one integer, and
  `transitions_to_pairs` turns a sequence of such values into pulse/space
  pairs. It handles timer wrap-around, gives a missing space to a trailing
  pulse or a gap longer than the idle timeout, and keeps at most 150 pairs.
- `irdecode.scoring`: `score_sony_sirc12`, `score_jvc`, `score_nec` and
  `score_all`.
- `irdecode.decoding`: `decode_segment` (Sony and JVC frames), `decode_nec`
  (returns an `NecResult` with the decode and `checksum_valid`),
  `determine_winner` and `analyze_burst`.
- `irdecode.buttons`: `button_name(brand, command_code)` maps known codes to
  names such as `sceptrePower`, `jvcVol+` or `necPlay`. Codes not in the
  tables become `SONY_CMD_<n>`, `JVC_CMD_<n>`, `NEC_CMD_<n>`, or `CMD_<n>` for
  an unknown brand, with `n` written in base 6.

## Diagnostics

Detailed traces of each stage can be written to standard output, selected by
category:

```python
from irdecode.debug import DebugFlag, configure

previous = configure(DebugFlag.BRAND | DebugFlag.DECODE_SUMMARY)
```

The categories are `RAW_TIMING`, `BRAND`, `BITS`, `BURST`, `GENERAL`,
`DECODE_SUMMARY` and `ALL`. Output is off (`NONE`) by default.

## What it does not do

The package does not read any hardware. The pin given to `begin()` is only
recorded; your own code has to watch the receiver line and pass each edge to
`handle_edge`. There is no command-line tool, and no way to send codes.