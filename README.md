# bikefix

Pure-Python building blocks for a cellular bike tracker built on a SIM800-family
module. The package holds the tracker's data model and its position-reporting
logic, so that both can be used and tested on an ordinary computer.

## Modules

- `bikefix.pins`: pin maps and keypad layouts for each module model (`Model`:
  SIM800W, SIM800V, SIM800H, SIM800, SIM808, SIM800C). It provides `pin_table`,
  `pin_count`, `pin_number` and `key_names`. It also provides `key_code`, where
  names may carry an `EAT_` or `EAT_KEY_` prefix, and the feature checks
  `supports_lcd_light` and `supports_keypad_led`.
- `bikefix.peripherals`: enums for GPIO level and direction, interrupt
  triggers, SPI wiring, clock and width, pin modes, backlight steps, I2C owners,
  device status and USB mode. It also has the records `KeyEvent`,
  `InterruptEvent` and `AdcReading`. `check_status` returns a non-failing
  `DeviceStatus` and raises `DeviceError` for a negative one.
- `bikefix.errors`: the tracker's network result codes (`ErrorCode`).
  `raise_for_code` returns `ErrorCode.SUCCESS` for zero and raises
  `TrackerError` for any other code.
- `bikefix.crc`: CRC-CCITT (polynomial 0x1021, initial remainder 0xFFFF, no
  final XOR). `crc_slow` computes it bit by bit and `crc_fast` through the table
  that `crc_table` returns.
- `bikefix.uart`: the serial ports (`Port`), `Baudrate`, `DataBits`,
  `StopBits`, `Parity`, `DebugMode` and the validated `UartConfig`.
  `available_ports(model, usb_enabled=False)` lists a model's ports in the order
  of their driver codes. The SIM808 has no second UART.
- `bikefix.timer`: `TimerId`, the range-checked `Rtc` record and
  `WatchdogAction`. It has helpers for timer periods and counters:
  - `effective_period` applies the 5 ms minimum.
  - `ticks_to_us` converts counter ticks, at 31.25 µs each.
  - `duration_us` and `duration_ms` measure between two 32-bit counter readings
    and allow for wrap-around.
  - `gpt_ticks` converts seconds to hardware timer ticks, at 16384 per second.
  - `validate_watchdog` accepts expiry times up to 600000 ms.
- `bikefix.sms`: storage, message type, alphabet and message class enums. The
  records are `ReadConfirmation`, `NewMessage`, `Concat` and `PortInfo`.
  `max_text_length` returns 160, 140 or 70 characters. The encoders are
  `ascii_to_ucs2`, which gives big-endian UCS2, and `ascii_to_gsm7bit`, which
  gives packed GSM 7-bit text.
- `bikefix.sim`: `SimState` and `parse_cpin`, which reads a `+CPIN:` reply.
- `bikefix.gps`: position reporting.
  - `parse_gpsim` reads `$GPSIM` sentences and returns a `GpsFix`, or `None`
    when there is no fix.
  - `parse_ceng` reads `+CENG` cell replies and returns a `CellInfo` of `Cell`
    entries.
  - `distance_m` gives the great-circle distance in metres.
  - `DuplicateFilter` decides whether a report adds nothing new. A fix counts as
    new only if it moved more than 10 m while the bike is moving. Jumps of 70 m
    or more are ignored up to five times in a row.
  - `ItineraryTracker` turns start and end notices into an `Itinerary`.
  - `GpsTracker` ties these together. It takes `clock` and `send`. `send` is
    called with each report and whether it answers a location request.

## Example

```python
from bikefix.crc import crc_fast
from bikefix.gps import GpsTracker, parse_gpsim

assert crc_fast(b"123456789") == 0x29B1

line = "$GPSIM,30.15,114.5,28.5,1461235600.123,3355,7,2.16,179.36"
fix = parse_gpsim(line)
print(fix.latitude, fix.longitude)

sent = []
tracker = GpsTracker(clock=lambda: 1461235600, send=lambda report, requested: sent.append(report))
tracker.on_location_request(line)   # sends the fix; without a fix it sends the cell info
```

## What it does not do

The package does not talk to a module. It opens no serial port, runs no timers
or threads, drives no pins, and sends nothing over the network or by SMS.
Sample text, such as `$GPSIM` sentences and `+CENG` or `+CPIN` replies, has to
be passed in by the caller. Reports go to whatever `send` callable the caller
supplies. Nothing is stored on disk, and there is no command-line program.

## Installing and testing

```
pip install .
pip install ".[test]"
pytest
```