"""Host-side model of a cellular bike tracker's pins, peripherals, modem data and position reporting."""

__version__ = "0.1.0"

__all__ = [
    "crc",
    "errors",
    "gps",
    "peripherals",
    "pins",
    "sim",
    "sms",
    "timer",
    "uart",
]