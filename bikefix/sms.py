"""Short message records, storage and coding settings, and text encoders."""

from __future__ import annotations

import enum
from dataclasses import dataclass

MAX_PACKED_LEN = 170
"""Longest packed message content, in bytes."""

NAME_LEN = 43
DATE_TIME_LEN = 25
DATA_LEN = 350
NUMBER_LEN = 43

INVALID_PORT = 0xFFFFFFFF
"""Port value meaning "no port"."""

_U8 = 0xFF
_U16 = 0xFFFF
_U32 = 0xFFFFFFFF

_ESCAPE = 0x1B

_BASIC: dict[str, int] = {
    "@": 0x00,
    "$": 0x02,
    "\n": 0x0A,
    "\r": 0x0D,
    "_": 0x11,
}
_BASIC.update({ch: ord(ch) for ch in " !\"#%&'()*+,-./0123456789:;<=>?"})
_BASIC.update({ch: ord(ch) for ch in "ABCDEFGHIJKLMNOPQRSTUVWXYZ"})
_BASIC.update({ch: ord(ch) for ch in "abcdefghijklmnopqrstuvwxyz"})

_EXTENSION: dict[str, int] = {
    "^": 0x14,
    "{": 0x28,
    "}": 0x29,
    "\\": 0x2F,
    "[": 0x3C,
    "~": 0x3D,
    "]": 0x3E,
    "|": 0x40,
}


class Storage(enum.IntEnum):
    """Message storage area."""

    SM = 0
    """SIM card."""
    ME = 1
    """Module memory."""
    SM_P = 2
    """SIM card preferred."""
    ME_P = 3
    """Module memory preferred."""
    MT = 4
    """SIM card and module memory."""


class Mti(enum.IntEnum):
    """Message type indicator; report types share the codes of their messages."""

    DELIVER = 0x00
    DELIVER_REPORT = 0x00
    SUBMIT = 0x01
    SUBMIT_REPORT = 0x01
    STATUS_REPORT = 0x02
    COMMAND = 0x02
    UNSPECIFIED = 0x03
    ILLEGAL = 0x04


class Alphabet(enum.IntEnum):
    """Character coding of the user data."""

    GSM7_BIT = 0
    EIGHT_BIT = 1
    UCS2 = 2
    UNSPECIFIED = 3


class MessageClass(enum.IntEnum):
    """Message class; the values after UNSPECIFIED are for internal use."""

    CLASS0 = 0
    CLASS1 = 1
    CLASS2 = 2
    CLASS3 = 3
    UNSPECIFIED = 4
    MW_DISCARD = 5
    MW_STORE = 6
    RCM = 7


def _check_range(name: str, value: int, high: int) -> None:
    if not 0 <= value <= high:
        raise ValueError(f"{name} must be in [0, {high}], got {value}")


@dataclass(frozen=True)
class ReadConfirmation:
    """A message read back from storage."""

    name: str
    datetime: str
    data: str
    number: str
    status: int
    length: int

    def __post_init__(self) -> None:
        for field, limit in (
            ("name", NAME_LEN),
            ("datetime", DATE_TIME_LEN),
            ("data", DATA_LEN),
            ("number", NUMBER_LEN),
        ):
            value = getattr(self, field)
            if len(value) > limit:
                raise ValueError(f"{field} is longer than {limit} characters")
        _check_range("status", self.status, _U8)
        _check_range("length", self.length, _U16)


@dataclass(frozen=True)
class NewMessage:
    """Notice that a message arrived at a storage index."""

    storage: Storage
    index: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "storage", Storage(self.storage))
        _check_range("index", self.index, _U16)


@dataclass(frozen=True)
class Concat:
    """Position of one segment in a concatenated message."""

    ref: int
    total_seg: int
    seg: int

    def __post_init__(self) -> None:
        _check_range("ref", self.ref, _U16)
        _check_range("total_seg", self.total_seg, _U8)
        _check_range("seg", self.seg, _U8)


@dataclass(frozen=True)
class PortInfo:
    """Application ports of a message."""

    dest_port: int = INVALID_PORT
    src_port: int = INVALID_PORT

    def __post_init__(self) -> None:
        _check_range("dest_port", self.dest_port, _U32)
        _check_range("src_port", self.src_port, _U32)

    @property
    def has_dest_port(self) -> bool:
        """Whether a destination port is given."""
        return self.dest_port != INVALID_PORT


_MAX_TEXT = {
    Alphabet.GSM7_BIT: 160,
    Alphabet.EIGHT_BIT: 140,
    Alphabet.UCS2: 70,
}


def max_text_length(alphabet: Alphabet | int) -> int:
    """Return how many characters fit in a single message with *alphabet*."""
    alphabet = Alphabet(alphabet)
    try:
        return _MAX_TEXT[alphabet]
    except KeyError:
        raise ValueError(f"no length limit for {alphabet.name}") from None


def _require_ascii(text: str) -> None:
    if not text.isascii():
        raise ValueError("text must be ASCII")


def ascii_to_ucs2(text: str) -> bytes:
    """Encode ASCII *text* as big-endian UCS2, two bytes per character."""
    _require_ascii(text)
    return text.encode("utf-16-be")


def _septets(text: str) -> list[int]:
    septets: list[int] = []
    for ch in text:
        if ch in _BASIC:
            septets.append(_BASIC[ch])
        elif ch in _EXTENSION:
            septets.extend((_ESCAPE, _EXTENSION[ch]))
        else:
            raise ValueError(f"{ch!r} has no GSM 7-bit code")
    return septets


def ascii_to_gsm7bit(text: str) -> bytes:
    """Encode ASCII *text* in the GSM default alphabet, packed eight septets in seven bytes."""
    _require_ascii(text)
    out = bytearray()
    acc = 0
    nbits = 0
    for septet in _septets(text):
        acc |= septet << nbits
        nbits += 7
        while nbits >= 8:
            out.append(acc & 0xFF)
            acc >>= 8
            nbits -= 8
    if nbits:
        out.append(acc & 0xFF)
    return bytes(out)