"""Position fixes, cell information, duplicate filtering and trip distance."""

from __future__ import annotations

import dataclasses
import enum
import math
import re
from dataclasses import dataclass
from typing import Callable, Union

EARTH_RADIUS_M = 6378137
PI = 3.141592653

TIMER_PERIOD_MS = 5 * 1000
"""How often the position is sampled."""

MAX_CELLS = 7
"""Serving cell plus six neighbours."""

MAX_GPS_COUNT = 10
MAX_VOLTAGE_NUM = 10

SAME_DISTANCE_M = 10
"""Moves up to this distance are treated as the same position."""

FLOAT_DISTANCE_M = 70
"""Jumps of at least this distance are suspected to be drift."""

MAX_FLOAT_SKIPS = 5
"""How many suspected drift jumps in a row are ignored."""

MIN_SHARED_NEIGHBOURS = 3

_GPSIM_PREFIX = "$GPSIM,"


class ItineraryState(enum.IntEnum):
    """Whether a trip is under way."""

    START = 0
    END = 1


@dataclass(frozen=True)
class GpsFix:
    """A satellite position fix."""

    latitude: float
    longitude: float
    speed: float = 0.0
    course: float = 0.0
    timestamp: int = 0
    altitude: float = 0.0
    satellites: int = 0


@dataclass(frozen=True)
class Cell:
    """One cell tower seen by the modem."""

    lac: int
    cellid: int
    rxl: int


@dataclass(frozen=True)
class CellInfo:
    """The network and the cells seen, serving cell first."""

    mcc: int
    mnc: int
    cells: tuple[Cell, ...] = ()


@dataclass(frozen=True)
class Itinerary:
    """A finished trip and the distance covered, in metres."""

    start_time: int
    end_time: int
    distance: int


Report = Union[GpsFix, CellInfo]

_EMPTY_CELL = Cell(0, 0, 0)


def _rad(degrees: float) -> float:
    return degrees * PI / 180


def parse_gpsim(line: str) -> GpsFix | None:
    """Parse a ``$GPSIM`` sentence.

    The fields are latitude, longitude, altitude, UTC time, time to first
    fix, satellites in view, speed and course. Returns ``None`` when the
    position is not fixed; raises :class:`ValueError` when the sentence is
    missing or malformed. The fix carries the UTC time as its timestamp.
    """
    start = line.find(_GPSIM_PREFIX)
    if start < 0:
        raise ValueError("no $GPSIM sentence in line")
    body = line[start + len(_GPSIM_PREFIX):].splitlines()[0].strip()
    fields = body.split(",")
    if len(fields) < 8:
        raise ValueError(f"$GPSIM sentence has too few fields: {body!r}")
    try:
        latitude, longitude, altitude, utc = (float(f) for f in fields[:4])
        int(fields[4])
        satellites = int(fields[5])
        speed = float(fields[6])
        course = float(fields[7])
    except ValueError as exc:
        raise ValueError(f"malformed $GPSIM sentence: {body!r}") from exc
    if not (latitude > 0 and longitude > 0):
        return None
    return GpsFix(
        latitude=latitude,
        longitude=longitude,
        speed=speed,
        course=course,
        timestamp=int(utc),
        altitude=altitude,
        satellites=satellites,
    )


_INDEX_RE = re.compile(r"\+CENG:\s*(\d+),")
_CELL_RE = re.compile(
    r'\+CENG:\s*(\d+),"\s*(\d+),\s*(\d+),\s*([0-9A-Fa-f]+),\s*([0-9A-Fa-f]+),'
    r'\s*[-+]?\d+,\s*([-+]?\d+)"'
)


def parse_ceng(text: str) -> CellInfo | None:
    """Parse the reply to a cell engineering query (mode 3, one cell report).

    Cells are placed at the index the modem reports them under; indices with
    no valid cell are left empty. Returns ``None`` when the reply holds no
    report or no cell with a country code.
    """
    lines = [line.strip() for line in text.splitlines()]
    try:
        header = next(i for i, line in enumerate(lines) if re.fullmatch(r"\+CENG:\s*3,1", line))
    except StopIteration:
        return None

    mcc = mnc = 0
    last_index = -1
    found: dict[int, Cell] = {}
    for line in lines[header + 1:]:
        index_match = _INDEX_RE.match(line)
        if index_match is None:
            continue
        last_index = int(index_match.group(1))
        match = _CELL_RE.match(line)
        if match is None:
            continue
        index, cell_mcc, cell_mnc, lac, cellid, rxl = match.groups()
        if mcc == 0:
            mcc, mnc = int(cell_mcc), int(cell_mnc)
        if int(index) < MAX_CELLS:
            found[int(index)] = Cell(int(lac, 16), int(cellid, 16) & 0xFFFF, int(rxl))

    if mcc == 0:
        return None
    count = min(last_index + 1, MAX_CELLS)
    return CellInfo(mcc, mnc, tuple(found.get(i, _EMPTY_CELL) for i in range(count)))


def distance_m(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance in metres between two points given in degrees."""
    rad_lat1 = _rad(lat1)
    rad_lat2 = _rad(lat2)
    a = rad_lat1 - rad_lat2
    b = _rad(lon1) - _rad(lon2)
    s = 2 * math.asin(
        math.sqrt(
            math.sin(a / 2) ** 2
            + math.cos(rad_lat1) * math.cos(rad_lat2) * math.sin(b / 2) ** 2
        )
    )
    return s * EARTH_RADIUS_M


def _padded(info: CellInfo) -> list[Cell]:
    cells = list(info.cells[:MAX_CELLS])
    return cells + [_EMPTY_CELL] * (MAX_CELLS - len(cells))


def _same_cells(previous: CellInfo, current: CellInfo) -> bool:
    old = _padded(previous)
    new = _padded(current)
    if (
        previous.mcc != current.mcc
        or previous.mnc != current.mnc
        or len(previous.cells) != len(current.cells)
        or old[0].lac != new[0].lac
        or old[0].cellid != new[0].cellid
    ):
        return False
    shared = sum(
        1
        for a in old[1:]
        for b in new[1:]
        if a.cellid == b.cellid and a.lac == b.lac
    )
    return shared >= MIN_SHARED_NEIGHBOURS


class DuplicateFilter:
    """Decides whether a new report says nothing new compared with the last one."""

    def __init__(self) -> None:
        self.float_count = 0

    def is_duplicate(self, previous: Report, current: Report, moved: bool) -> bool:
        """Whether *current* need not be sent after *previous*."""
        if type(previous) is not type(current):
            return False
        if isinstance(current, GpsFix):
            distance = distance_m(
                previous.latitude, previous.longitude, current.latitude, current.longitude
            )
            if distance <= SAME_DISTANCE_M or not moved:
                return True
            if distance >= FLOAT_DISTANCE_M and self.float_count < MAX_FLOAT_SKIPS:
                self.float_count += 1
                return True
            self.float_count = 0
            return False
        if isinstance(current, CellInfo):
            return _same_cells(previous, current)
        raise TypeError(f"cannot compare {type(current).__name__} reports")


class ItineraryTracker:
    """Accumulates distance between a trip's start and end."""

    def __init__(self) -> None:
        self.start_time = 0
        self.distance = 0.0
        self.state = ItineraryState.END

    def add_distance(self, metres: float) -> None:
        """Add a covered distance to the running total."""
        if metres < 0:
            raise ValueError(f"distance must not be negative, got {metres}")
        self.distance += metres

    def _abort(self) -> None:
        self.state = ItineraryState.END
        self.start_time = 0

    def handle(self, state: ItineraryState | int, now: int) -> Itinerary | None:
        """Apply a start or end notice at time *now*; return the trip when it ends.

        A start while a trip runs, an end with no trip running, or a start
        without a valid clock resets the tracker to the ended state.
        """
        state = ItineraryState(state)
        if state is ItineraryState.START and self.start_time == 0:
            self.distance = 0.0
            if now <= 0:
                self._abort()
                return None
            self.start_time = now
            self.state = ItineraryState.START
            return None
        if state is ItineraryState.END and self.start_time > 0:
            trip = Itinerary(self.start_time, now, int(self.distance))
            self._abort()
            return trip
        self._abort()
        return None


class GpsTracker:
    """Turns position samples and modem replies into reports for the sender.

    *clock* returns the current timestamp; *send* is called with each report
    and whether it answers an explicit location request.
    """

    def __init__(
        self,
        clock: Callable[[], int],
        send: Callable[[Report, bool], object],
    ) -> None:
        self._clock = clock
        self._send = send
        self.last: Report | None = None
        self.gps_time: int | None = None
        self.cells = CellInfo(0, 0, ())
        self.filter = DuplicateFilter()
        self.itinerary = ItineraryTracker()

    def _read_fix(self, nmea_line: str) -> GpsFix | None:
        try:
            fix = parse_gpsim(nmea_line)
        except ValueError:
            return None
        if fix is None:
            return None
        self.gps_time = fix.timestamp
        return dataclasses.replace(fix, timestamp=self._clock())

    def _deliver(self, report: Report, requested: bool) -> Report:
        self.last = report
        self._send(report, requested)
        return report

    def on_timer(self, nmea_line: str, moved: bool) -> GpsFix | None:
        """Handle a periodic sample; return the fix sent, if any."""
        fix = self._read_fix(nmea_line)
        if fix is None:
            return None
        previous = self.last
        if previous is not None and self.filter.is_duplicate(previous, fix, moved):
            return None
        if isinstance(previous, GpsFix):
            self.itinerary.add_distance(
                distance_m(previous.latitude, previous.longitude, fix.latitude, fix.longitude)
            )
        self._deliver(fix, False)
        return fix

    def on_location_request(self, nmea_line: str) -> Report:
        """Answer a location request with a fix, or with cell information if unfixed."""
        fix = self._read_fix(nmea_line)
        if fix is not None:
            return self._deliver(fix, True)
        return self._deliver(self.cells, True)

    def on_modem_data(self, text: str) -> CellInfo | None:
        """Take in a modem reply; return the updated cell information if it held any."""
        info = parse_ceng(text)
        if info is None:
            return None
        if self.cells.mcc != 0:
            info = dataclasses.replace(info, mcc=self.cells.mcc, mnc=self.cells.mnc)
        self.cells = info
        return info