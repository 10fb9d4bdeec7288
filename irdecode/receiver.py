"""Edge-driven infrared receiver that captures bursts and decodes them."""

from __future__ import annotations

from .buttons import button_name
from .debug import DebugFlag, debug
from .decoding import analyze_burst
from .protocol import (
    IDLE_TIMEOUT_MS,
    MAX_TRANSITIONS,
    DecodedIR,
    RemoteBrand,
    brand_to_string,
)
from .timing import pack_transition, transitions_to_pairs

HIGH = 1
LOW = 0


class IRReceiver:
    """Collects signal edges and turns each finished burst into a decoded command.

    Edges are fed in with :meth:`handle_edge`; a burst counts as finished once
    no edge has arrived for longer than the idle timeout, which
    :meth:`is_code` checks against the time it is given.
    """

    def __init__(self) -> None:
        self._pin: int | None = None
        self._transitions: list[int] = []
        self._last_transition_ms = 0
        self._last_level = HIGH
        self._burst_copied = False
        self._result = DecodedIR()
        self._result_ready = False
        self._enabled = False

    @property
    def pin(self) -> int | None:
        """The input pin, or None before :meth:`begin`."""
        return self._pin

    @property
    def enabled(self) -> bool:
        """Whether edges are currently being captured."""
        return self._enabled

    def begin(self, pin: int, initial_level: int = HIGH) -> bool:
        """Bind the receiver to ``pin`` and start capturing."""
        if pin < 0:
            raise ValueError(f"invalid input pin: {pin}")
        if self._enabled and self._pin is not None:
            self.disable()
        self._pin = pin
        self.enable(initial_level)
        debug(DebugFlag.GENERAL, "IRReceiver initialized on pin: ", pin, "\n")
        return True

    def enable(self, initial_level: int = HIGH) -> None:
        """Start a clean capture session with the line at ``initial_level``."""
        if self._pin is None:
            raise RuntimeError("cannot enable: pin not set, call begin() first")
        if self._enabled:
            debug(DebugFlag.GENERAL, "IRReceiver: Interrupt already enabled on pin ", self._pin, ".\n")
        self._last_level = initial_level
        self._last_transition_ms = 0
        self._result_ready = False
        self._burst_copied = False
        self._transitions.clear()
        self._enabled = True
        debug(DebugFlag.GENERAL, "IRReceiver: Interrupts ENABLED on pin ", self._pin, ".\n")

    def disable(self) -> None:
        """Stop capturing and drop any partial burst or pending result."""
        if self._pin is None or not self._enabled:
            raise RuntimeError("cannot disable: receiver is not enabled")
        self._enabled = False
        self._transitions.clear()
        self._burst_copied = False
        self._result_ready = False
        debug(DebugFlag.GENERAL, "IRReceiver: Interrupts DISABLED on pin ", self._pin, ".\n")

    def handle_edge(self, level: int, time_us: int, now_ms: int) -> bool:
        """Record a change of the line to ``level``; return whether it was kept.

        Edges are ignored while disabled, when the level did not change, or
        once the capture buffer is full.
        """
        if not self._enabled:
            return False
        if level == self._last_level or len(self._transitions) >= MAX_TRANSITIONS:
            return False
        falling = level == LOW and self._last_level == HIGH
        self._transitions.append(pack_transition(time_us, falling))
        self._last_level = level
        self._last_transition_ms = now_ms
        return True

    def is_code(self, now_ms: int) -> bool:
        """Return True if a decoded command is waiting, finishing a burst if it is idle."""
        if not self._enabled:
            return self._result_ready
        if self._result_ready:
            return True

        idle = now_ms - self._last_transition_ms > IDLE_TIMEOUT_MS
        if self._transitions and idle and not self._burst_copied:
            captured = self._transitions[:MAX_TRANSITIONS]
            self._transitions.clear()
            self._burst_copied = True
            pairs = transitions_to_pairs(captured)
            if pairs:
                debug(DebugFlag.BURST, "\n--- IR Signal Burst Detected ---\n")
                debug(DebugFlag.BURST, "Number of pulse/space pairs extracted: ", len(pairs), "\n")
                result = analyze_burst(pairs)
                self._result = result if result is not None else DecodedIR()
                self._result_ready = result is not None
            else:
                debug(DebugFlag.BURST, "No pulse/space pairs extracted from burst.\n")
                self._burst_copied = False
            return self._result_ready
        if not self._transitions and self._burst_copied:
            self._burst_copied = False
        return False

    def get_code(self) -> DecodedIR:
        """Take the pending decoded command, or an empty result if there is none."""
        if self._result_ready:
            self._result_ready = False
            return self._result
        return DecodedIR()

    def brand_to_string(self, brand: int) -> str:
        """Display name of ``brand``."""
        return brand_to_string(brand)

    def get_button_name(self, brand: RemoteBrand, command_code: int) -> str:
        """Button name for ``command_code`` on a remote of ``brand``."""
        return button_name(brand, command_code)