"""SIM card PIN state as reported by the modem."""

from __future__ import annotations

import enum
import re


class SimState(enum.IntEnum):
    """What the SIM card is waiting for."""

    OK = 0
    """Ready, no code needed."""
    PIN = 1
    """Waiting for the PIN code."""
    PUK = 2
    """Waiting for the PUK code."""
    OTHER = 3
    """Any other state."""


_CPIN = re.compile(r"\+CPIN:\s*(.*?)\s*$", re.MULTILINE)

_STATES = {
    "READY": SimState.OK,
    "SIM PIN": SimState.PIN,
    "SIM PUK": SimState.PUK,
}


def parse_cpin(text: str) -> SimState:
    """Return the SIM state from a ``+CPIN:`` response.

    Raises :class:`ValueError` when *text* holds no ``+CPIN:`` line.
    """
    match = _CPIN.search(text)
    if match is None:
        raise ValueError("no +CPIN response in text")
    return _STATES.get(match.group(1).upper(), SimState.OTHER)