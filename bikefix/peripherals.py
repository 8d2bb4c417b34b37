"""GPIO, interrupt, SPI, ADC, I2C and USB settings of the module peripherals."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class GpioLevel(enum.IntEnum):
    """Logic level of a GPIO pin."""

    LOW = 0
    HIGH = 1


class GpioDirection(enum.IntEnum):
    """Direction of a GPIO pin."""

    INPUT = 0
    OUTPUT = 1


class IntTrigger(enum.IntEnum):
    """Trigger condition of an external interrupt."""

    HIGH_LEVEL = 0
    LOW_LEVEL = 1
    RISING_EDGE = 2
    FALLING_EDGE = 3

    @property
    def is_level(self) -> bool:
        """Whether the trigger fires on a level rather than an edge."""
        return self in (IntTrigger.HIGH_LEVEL, IntTrigger.LOW_LEVEL)


class SpiWire(enum.IntEnum):
    """SPI wiring: three wires, or four with a data/command line."""

    THREE_WIRE = 0
    FOUR_WIRE = 1


class SpiClock(enum.IntEnum):
    """SPI clock, stored as the divider of the 52 MHz base clock."""

    CLK_52M = 1
    CLK_26M = 2
    CLK_13M = 4

    @property
    def frequency_hz(self) -> int:
        """The clock frequency in hertz."""
        return 52_000_000 // int(self)


class SpiBits(enum.IntEnum):
    """Width of one SPI transfer."""

    BIT8 = 0
    BIT9 = 1
    BIT16 = 2
    BIT24 = 3
    BIT32 = 4

    @property
    def width(self) -> int:
        """Number of bits in one transfer."""
        return int(self.name[3:])


class PinMode(enum.IntEnum):
    """Function a multiplexed pin is switched to."""

    GPIO = 0
    KEY = 1
    EINT = 2
    UART = 3
    SPI = 4
    PWM = 5
    I2C = 6
    CLK = 7


class BacklightStep(enum.IntEnum):
    """Current sink step of the LCD backlight driver."""

    STEP_04_MA = 0
    STEP_08_MA = 1
    STEP_12_MA = 2
    STEP_16_MA = 3
    STEP_20_MA = 4
    STEP_24_MA = 5

    @property
    def milliamps(self) -> int:
        """Sink current in milliamperes."""
        return int(self.name.split("_")[1])


class I2cOwner(enum.IntEnum):
    """Handle of a device sharing the I2C bus."""

    OWNER_0 = 0
    OWNER_1 = 1
    OWNER_2 = 2
    OWNER_3 = 3
    OWNER_4 = 4
    OWNER_5 = 5
    OWNER_6 = 6
    OWNER_7 = 7


class DeviceStatus(enum.IntEnum):
    """Status returned by device drivers; negative values are failures."""

    OK = 0
    FAIL = -1
    INVALID_CMD = -2
    UNSUPPORTED = -3
    NOT_OPENED = -4
    INVALID_EVENT = -5
    INVALID_DCL_HANDLE = -6
    INVALID_CTRL_DATA = -7
    INVALID_CONFIGURATION = -8
    INVALID_ARGUMENT = -9
    ERROR_TIMEOUT = -10
    ERROR_CRCERROR = -11
    ERROR_READONLY = -12
    ERROR_WRONG_STATE = -13
    INVALID_DEVICE = -14
    ALREADY_OPENED = -15
    SET_VFIFO_FAIL = -16
    INVALID_OPERATION = -17
    DEVICE_NOT_EXIST = -18
    DEVICE_NOT_SUPPORT_DMA = -19
    DEVICE_IS_BUSY = -20
    ACKERR = -21
    HS_NACKERR = -22
    BUFFER_EMPTY = 1

    @property
    def is_error(self) -> bool:
        """Whether the status reports a failure."""
        return int(self) < 0


class UsbMode(enum.IntEnum):
    """Kind of USB connection reported on plug events."""

    DATA = 0
    AC = 1


@dataclass(frozen=True)
class KeyEvent:
    """A key going down or coming up."""

    key: int
    is_pressed: bool


@dataclass(frozen=True)
class InterruptEvent:
    """An external interrupt and the level seen on its pin."""

    pin: int
    level: GpioLevel


@dataclass(frozen=True)
class AdcReading:
    """A voltage sampled on an ADC pin, in millivolts."""

    pin: int
    millivolts: int

    def __post_init__(self) -> None:
        if self.pin < 0:
            raise ValueError(f"pin must not be negative, got {self.pin}")
        if self.millivolts < 0:
            raise ValueError(f"voltage must not be negative, got {self.millivolts}")

    @property
    def volts(self) -> float:
        """The reading in volts."""
        return self.millivolts / 1000


class DeviceError(Exception):
    """A driver call that returned a failing status."""

    def __init__(self, status: int) -> None:
        self.status = DeviceStatus(status)
        super().__init__(f"device call failed: {self.status.name} ({int(self.status)})")


def check_status(status: int) -> DeviceStatus:
    """Return the status if it is not a failure, raise :class:`DeviceError` otherwise."""
    result = DeviceStatus(status)
    if result.is_error:
        raise DeviceError(result)
    return result