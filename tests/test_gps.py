import pytest
from hypothesis import given, strategies as st

from bikefix.gps import (
    Cell,
    CellInfo,
    DuplicateFilter,
    GpsFix,
    GpsTracker,
    Itinerary,
    ItineraryState,
    ItineraryTracker,
    distance_m,
    parse_ceng,
    parse_gpsim,
)

SAMPLE = "$GPSIM,114.5,30.15,28.5,1461235600.123,3355,7,2.16,179.36"
UNFIXED = "$GPSIM,0.000000,0.000000,0.0,0.0,0,0,0.0,0.0"

CENG = (
    "AT+CENG?\r\r\n"
    "+CENG: 3,1\r\n\r\n"
    '+CENG: 0,"460,00,5001,96bd,23,45"\r\n'
    '+CENG: 1,"460,00,5001,96dd,33,21"\r\n'
    '+CENG: 2,",,0000,0000,00,00"\r\n'
    '+CENG: 3,",,0000,0000,00,00"\r\n'
    '+CENG: 4,",,0000,0000,00,00"\r\n'
    '+CENG: 5,",,0000,0000,00,00"\r\n'
    '+CENG: 6,",,0000,0000,00,00"\r\n'
    "\r\nOK\r\n"
)

_METRES_PER_DEGREE = 111_319.5


def _north(fix, metres):
    return GpsFix(fix.latitude + metres / _METRES_PER_DEGREE, fix.longitude)


def _line(lat, lon):
    return f"$GPSIM,{lat},{lon},28.5,1461235600.123,3355,7,2.16,179.36"


def test_parse_gpsim_sample():
    fix = parse_gpsim(SAMPLE)
    assert fix.latitude == 114.5
    assert fix.longitude == 30.15
    assert fix.altitude == 28.5
    assert fix.timestamp == 1461235600
    assert fix.satellites == 7
    assert fix.speed == 2.16
    assert fix.course == 179.36


def test_parse_gpsim_unfixed():
    assert parse_gpsim(UNFIXED) is None


def test_parse_gpsim_ignores_trailing_lines():
    fix = parse_gpsim(SAMPLE + "\r\nOK\r\n")
    assert fix.course == 179.36


@pytest.mark.parametrize("bad", ["no sentence", "$GPSIM,1,2,3", "$GPSIM,a,b,c,d,e,f,g,h"])
def test_parse_gpsim_malformed(bad):
    with pytest.raises(ValueError):
        parse_gpsim(bad)


def test_parse_ceng_sample():
    info = parse_ceng(CENG)
    assert info.mcc == 460
    assert info.mnc == 0
    assert len(info.cells) == 7
    assert info.cells[0] == Cell(0x5001, 0x96BD, 45)
    assert info.cells[1] == Cell(0x5001, 0x96DD, 21)
    assert all(cell == Cell(0, 0, 0) for cell in info.cells[2:])


def test_parse_ceng_masks_cellid():
    text = '+CENG: 3,1\r\n\r\n+CENG: 0,"460,00,5001,1096bd,23,45"\r\n'
    info = parse_ceng(text)
    assert info.cells == (Cell(0x5001, 0x96BD, 45),)


def test_parse_ceng_without_header_or_cells():
    assert parse_ceng('+CENG: 0,"460,00,5001,96bd,23,45"\r\n') is None
    assert parse_ceng('+CENG: 3,1\r\n\r\n+CENG: 0,",,0000,0000,00,00"\r\n') is None


def test_distance_zero_for_same_point():
    assert distance_m(30.15, 114.5, 30.15, 114.5) == 0


def test_distance_one_degree_latitude():
    assert 111_000 < distance_m(30.0, 114.5, 31.0, 114.5) < 111_500


@given(
    st.floats(-80, 80), st.floats(-170, 170), st.floats(-80, 80), st.floats(-170, 170)
)
def test_distance_symmetric_and_non_negative(lat1, lon1, lat2, lon2):
    d = distance_m(lat1, lon1, lat2, lon2)
    assert d >= 0
    assert d == pytest.approx(distance_m(lat2, lon2, lat1, lon1), abs=1e-6)


def test_filter_small_move_is_duplicate():
    base = GpsFix(30.15, 114.5)
    assert DuplicateFilter().is_duplicate(base, _north(base, 5), True) is True


def test_filter_not_moved_is_duplicate():
    base = GpsFix(30.15, 114.5)
    assert DuplicateFilter().is_duplicate(base, _north(base, 30), False) is True


def test_filter_real_move_is_new():
    base = GpsFix(30.15, 114.5)
    assert DuplicateFilter().is_duplicate(base, _north(base, 30), True) is False


def test_filter_skips_drift_five_times():
    base = GpsFix(30.15, 114.5)
    far = _north(base, 100)
    flt = DuplicateFilter()
    results = [flt.is_duplicate(base, far, True) for _ in range(6)]
    assert results == [True] * 5 + [False]
    assert flt.float_count == 0
    assert flt.is_duplicate(base, far, True) is True


def test_filter_different_kinds():
    cells = CellInfo(460, 0, (Cell(1, 2, 3),))
    assert DuplicateFilter().is_duplicate(GpsFix(30.15, 114.5), cells, True) is False


def test_filter_cells():
    info = parse_ceng(CENG)
    flt = DuplicateFilter()
    assert flt.is_duplicate(info, info, True) is True
    other_mcc = CellInfo(461, info.mnc, info.cells)
    assert flt.is_duplicate(info, other_mcc, True) is False


def test_filter_cells_few_shared_neighbours():
    serving = Cell(1, 1, 0)
    old = CellInfo(460, 0, (serving,) + tuple(Cell(2, n, 0) for n in range(10, 16)))
    new = CellInfo(460, 0, (serving,) + tuple(Cell(2, n, 0) for n in range(20, 26)))
    assert DuplicateFilter().is_duplicate(old, new, True) is False
    assert DuplicateFilter().is_duplicate(old, old, True) is True


def test_itinerary_round_trip():
    tracker = ItineraryTracker()
    assert tracker.handle(ItineraryState.START, 1000) is None
    assert tracker.state is ItineraryState.START
    tracker.add_distance(1234.0)
    assert tracker.handle(ItineraryState.END, 2000) == Itinerary(1000, 2000, 1234)
    assert tracker.start_time == 0
    assert tracker.state is ItineraryState.END


def test_itinerary_end_without_start():
    tracker = ItineraryTracker()
    assert tracker.handle(ItineraryState.END, 2000) is None
    assert tracker.state is ItineraryState.END


def test_itinerary_start_without_clock():
    tracker = ItineraryTracker()
    assert tracker.handle(ItineraryState.START, 0) is None
    assert tracker.start_time == 0
    assert tracker.state is ItineraryState.END


def test_itinerary_double_start_resets():
    tracker = ItineraryTracker()
    tracker.handle(ItineraryState.START, 1000)
    assert tracker.handle(ItineraryState.START, 1500) is None
    assert tracker.start_time == 0
    assert tracker.state is ItineraryState.END


def test_itinerary_negative_distance():
    with pytest.raises(ValueError):
        ItineraryTracker().add_distance(-1)


def _tracker():
    sent = []
    tracker = GpsTracker(lambda: 1000, lambda report, requested: sent.append((report, requested)))
    return tracker, sent


def test_tracker_timer_sends_then_filters():
    tracker, sent = _tracker()
    assert tracker.on_timer(UNFIXED, True) is None
    assert sent == []
    fix = tracker.on_timer(SAMPLE, True)
    assert fix.timestamp == 1000
    assert tracker.gps_time == 1461235600
    assert sent == [(fix, False)]
    assert tracker.on_timer(SAMPLE, True) is None
    assert len(sent) == 1


def test_tracker_accumulates_itinerary():
    tracker, sent = _tracker()
    first = tracker.on_timer(_line(114.5, 30.15), True)
    moved = _north(first, 30)
    second = tracker.on_timer(_line(moved.latitude, moved.longitude), True)
    assert second is not None
    assert tracker.itinerary.distance == pytest.approx(
        distance_m(first.latitude, first.longitude, second.latitude, second.longitude)
    )
    assert len(sent) == 2


def test_tracker_location_request_with_fix():
    tracker, sent = _tracker()
    tracker.on_timer(SAMPLE, True)
    report = tracker.on_location_request(SAMPLE)
    assert sent[-1] == (report, True)
    assert report.latitude == 114.5


def test_tracker_location_request_with_cells():
    tracker, sent = _tracker()
    assert tracker.on_modem_data("OK\r\n") is None
    tracker.on_modem_data(CENG)
    report = tracker.on_location_request(UNFIXED)
    assert isinstance(report, CellInfo)
    assert report.mcc == 460
    assert sent == [(report, True)]


def test_tracker_keeps_first_network():
    tracker, _ = _tracker()
    tracker.on_modem_data(CENG)
    info = tracker.on_modem_data(CENG.replace("460", "461"))
    assert info.mcc == 460
    assert tracker.cells == info