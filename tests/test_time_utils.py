import pytest
from exceptions.custom_errors import InvalidTimeFormatError
from utils.time_utils import overlaps, parse_window, round_half_up, to_clock, to_minutes


def test_to_minutes_basic():
    assert to_minutes("00:00") == 0
    assert to_minutes("09:30") == 570
    assert to_minutes("23:59") == 1439
    assert to_minutes("9:05") == 545


def test_round_trip_every_minute_of_the_day():
    for minute in range(0, 1440):
        clock = to_clock(minute)
        assert len(clock) == 5
        assert to_minutes(clock) == minute
        assert to_clock(to_minutes(clock)) == clock


@pytest.mark.parametrize("bad", ["", "9", "24:00", "12:60", "ab:cd", "12-30", "12:3", None, 930])
def test_to_minutes_rejects_malformed(bad):
    with pytest.raises(InvalidTimeFormatError):
        to_minutes(bad)


@pytest.mark.parametrize("bad", [-1, 1440, 2000, 1.5, True])
def test_to_clock_rejects_out_of_range(bad):
    with pytest.raises(InvalidTimeFormatError):
        to_clock(bad)


def test_parse_window():
    assert parse_window("12:00-13:00") == (720, 780)
    assert parse_window(" 07:00 - 08:00 ") == (420, 480)
    assert parse_window("") is None
    assert parse_window(None) is None


@pytest.mark.parametrize("bad", ["12:00", "13:00-12:00", "12:00-12:00", "12:00-13:00-14:00", "noon-13:00"])
def test_parse_window_rejects_malformed(bad):
    with pytest.raises(InvalidTimeFormatError):
        parse_window(bad)


def test_overlaps_is_half_open():
    window = (720, 780)
    assert overlaps(710, 740, window)
    assert overlaps(700, 800, window)
    assert not overlaps(690, 720, window)  # ends exactly at the start
    assert not overlaps(780, 800, window)  # starts exactly at the end
    assert not overlaps(0, 1000, None)


def test_round_half_up():
    assert round_half_up(37.5) == 38
    assert round_half_up(62.5) == 63
    assert round_half_up(50.00000000000001) == 50
    assert round_half_up(20.83) == 21
