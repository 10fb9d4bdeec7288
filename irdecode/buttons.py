"""Button names for the known remotes, keyed by protocol command code."""

from __future__ import annotations

from dataclasses import dataclass

from .protocol import RemoteBrand


@dataclass(frozen=True)
class IrButton:
    """A named button and the command code it sends."""

    command_code: int
    name: str


# Sceptre televisions speak the Sony SIRC-12 protocol.
SCEPTRE_BUTTONS: tuple[IrButton, ...] = (
    IrButton(0, "sceptreOne"),
    IrButton(1, "sceptreTwo"),
    IrButton(2, "sceptreThree"),
    IrButton(3, "sceptreFour"),
    IrButton(4, "sceptreFive"),
    IrButton(5, "sceptreSix"),
    IrButton(6, "sceptreSeven"),
    IrButton(7, "sceptreEight"),
    IrButton(8, "sceptreNine"),
    IrButton(9, "sceptreZero"),
    IrButton(11, "sceptreEnter"),
    IrButton(16, "sceptreCh+"),
    IrButton(17, "sceptreCh-"),
    IrButton(18, "sceptreVol+"),
    IrButton(19, "sceptreVol-"),
    IrButton(20, "sceptreMute"),
    IrButton(21, "sceptrePower"),
    IrButton(22, "sceptreExit"),
    IrButton(24, "sceptreFav"),
    IrButton(35, "sceptreCc"),
    IrButton(36, "sceptreFavAdd"),
    # Cycles TV, AV, YPbPr, HDMI1-4 and Media; times out unless Enter is pressed.
    IrButton(37, "sceptreSource"),
    IrButton(41, "sceptreStandard"),
    IrButton(46, "sceptrePwrOn"),
    IrButton(47, "sceptrePwrOff"),
    IrButton(51, "sceptreRight"),
    IrButton(52, "sceptreLeft"),
    IrButton(54, "sceptreSleep"),
    IrButton(57, "sceptreHdmi"),
    IrButton(60, "sceptreInfo"),
    IrButton(64, "sceptreAir"),
    IrButton(65, "sceptreAv"),
    IrButton(67, "sceptreHdmi3"),
    IrButton(68, "sceptreHdmi4"),
    IrButton(69, "sceptreYpbpr"),
    IrButton(72, "sceptreHdmi1"),
    IrButton(90, "sceptreUser"),
    IrButton(96, "sceptreMenu"),
    IrButton(98, "sceptreFull"),
    IrButton(99, "sceptreUsb"),
    IrButton(100, "sceptreFreeze"),
    IrButton(101, "sceptreGuide"),
    IrButton(110, "sceptreAir2"),
    IrButton(111, "sceptreAir3"),
    IrButton(116, "sceptreUp"),
    IrButton(117, "sceptreDown"),
    IrButton(123, "sceptreVoice"),
)

# Data byte only, least significant bit first.
JVC_BUTTONS: tuple[IrButton, ...] = (
    IrButton(0, "jvcPwr"),
    IrButton(1, "jvcVol+"),
    IrButton(2, "jvcVol-"),
    IrButton(13, "jvcAux"),
)

NEC_BUTTONS: tuple[IrButton, ...] = (
    IrButton(0, "necPwr"),
    IrButton(16, "necPlay"),
    IrButton(19, "necStop"),
    IrButton(64, "nvcTray"),
)


def _index(buttons: tuple[IrButton, ...]) -> dict[int, str]:
    names: dict[int, str] = {}
    for button in buttons:
        names.setdefault(button.command_code, button.name)
    return names


_NAMES_BY_BRAND: dict[RemoteBrand, dict[int, str]] = {
    RemoteBrand.SONY: _index(SCEPTRE_BUTTONS),
    RemoteBrand.JVC: _index(JVC_BUTTONS),
    RemoteBrand.NEC: _index(NEC_BUTTONS),
}

_UNKNOWN_PREFIXES: dict[RemoteBrand, str] = {
    RemoteBrand.SONY: "SONY_CMD_",
    RemoteBrand.JVC: "JVC_CMD_",
    RemoteBrand.NEC: "NEC_CMD_",
}

_DIGITS = "012345"


def _base6(value: int) -> str:
    if value == 0:
        return "0"
    sign = "-" if value < 0 else ""
    value = abs(value)
    digits = []
    while value:
        value, remainder = divmod(value, 6)
        digits.append(_DIGITS[remainder])
    return sign + "".join(reversed(digits))


def button_name(brand: int, command_code: int) -> str:
    """Name of the button for ``command_code``, or a generated placeholder.

    Codes missing from the tables become ``<BRAND>_CMD_<n>`` (``CMD_<n>`` for
    an unknown brand), with ``n`` written in base 6.
    """
    try:
        remote = RemoteBrand(brand)
    except ValueError:
        remote = RemoteBrand.UNKNOWN
    name = _NAMES_BY_BRAND.get(remote, {}).get(command_code)
    if name is not None:
        return name
    return _UNKNOWN_PREFIXES.get(remote, "CMD_") + _base6(command_code)