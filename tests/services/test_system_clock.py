from datetime import date, datetime, timezone

from mediagraph.services.clock.system_clock import FixedClock, SystemClock


def test_fixed_clock():
    assert FixedClock(date(2020, 2, 29)).today() == date(2020, 2, 29)


def test_system_clock_tracks_wall_clock():
    before = datetime.now(timezone.utc).date()
    got = SystemClock(timezone.utc).today()
    after = datetime.now(timezone.utc).date()
    assert before <= got <= after
