"""Serial port identifiers and line settings of the module UARTs."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from bikefix.pins import Model


class Port(enum.Enum):
    """A serial port of the module.

    The driver's numeric code of a port is its position in
    :func:`available_ports`, which depends on the model and build options.
    """

    UART_1 = "UART1"
    UART_2 = "UART2"
    USB = "USB"


NULL_PORT_CODE = 99
"""Driver code meaning "no port"."""


class Baudrate(enum.IntEnum):
    """Supported line speeds in bits per second."""

    BAUD_1200 = 1200
    BAUD_2400 = 2400
    BAUD_4800 = 4800
    BAUD_9600 = 9600
    BAUD_19200 = 19200
    BAUD_38400 = 38400
    BAUD_57600 = 57600
    BAUD_115200 = 115200
    BAUD_230400 = 230400
    BAUD_460800 = 460800


class DataBits(enum.IntEnum):
    """Number of data bits in a character."""

    BITS_5 = 5
    BITS_6 = 6
    BITS_7 = 7
    BITS_8 = 8


class StopBits(enum.IntEnum):
    """Stop bit setting; the driver codes one and a half as 3."""

    ONE = 1
    TWO = 2
    ONE_AND_HALF = 3


class Parity(enum.IntEnum):
    """Parity bit setting."""

    NONE = 0
    ODD = 1
    EVEN = 2
    SPACE = 3


class DebugMode(enum.IntEnum):
    """Output format of the debug port."""

    TRACE = 0
    """Binary trace output for the tracer tool."""
    UART = 1
    """Plain text output readable with any serial terminal."""


@dataclass(frozen=True)
class UartConfig:
    """Line settings of a serial port."""

    baud: Baudrate
    data_bits: DataBits
    stop_bits: StopBits
    parity: Parity

    def __post_init__(self) -> None:
        object.__setattr__(self, "baud", Baudrate(self.baud))
        object.__setattr__(self, "data_bits", DataBits(self.data_bits))
        object.__setattr__(self, "stop_bits", StopBits(self.stop_bits))
        object.__setattr__(self, "parity", Parity(self.parity))


def available_ports(model: Model | str, usb_enabled: bool = False) -> tuple[Port, ...]:
    """Return the serial ports of *model*, ordered by driver code.

    The SIM808 has no second UART; the USB port exists only when the
    firmware is built with the USB serial port enabled.
    """
    model = model if isinstance(model, Model) else Model(model)
    ports = [Port.UART_1]
    if model is not Model.SIM808:
        ports.append(Port.UART_2)
    if usb_enabled:
        ports.append(Port.USB)
    return tuple(ports)