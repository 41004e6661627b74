from datetime import date, datetime, timedelta
import pytest
from dateutil import tz

from localdate import models
from localdate.models import DateFormatError, LocalDate, LocalDatePeriod, LocalMonth, Quarter


def test_fields():
    d = LocalDate(2014, 6, 14)
    assert (d.year, d.month, d.day) == (2014, 6, 14)


def test_extra_days_roll_into_next_year():
    d = LocalDate(2019, 12, 32)   # Dezember hat 31 Tage
    assert d == LocalDate(2020, 1, 1)
    assert (d.year, d.month, d.day) == (2020, 1, 1)


def test_negative_days():
    d = LocalDate(2019, 1, -1)    # zwei Tage vor dem Ersten
    assert (d.year, d.month, d.day) == (2018, 12, 30)


def test_weekday():
    assert LocalDate(2019, 8, 19).weekday == 0
    assert LocalDate(2019, 8, 18).weekday == 6


def test_plus_days_across_years():
    assert LocalDate(2019, 12, 30).plus_days(3) == LocalDate(2020, 1, 2)


def test_minus_days_across_months():
    assert LocalDate(2019, 9, 6).minus_days(8) == LocalDate(2019, 8, 29)


@pytest.mark.parametrize("n", [0, 1, 29, 366, -1, -400, 10000])
def test_plus_and_minus_days_are_inverse(n):
    d = LocalDate(2020, 2, 29)
    assert d.plus_days(n).minus_days(n).equals(d)
    assert d.minus_days(n) == d.plus_days(-n)


def test_range_small_to_large():
    assert LocalDate(2020, 2, 25).range(LocalDate(2020, 3, 1)) == [
        LocalDate(2020, 2, 25),
        LocalDate(2020, 2, 26),
        LocalDate(2020, 2, 27),
        LocalDate(2020, 2, 28),
        LocalDate(2020, 2, 29),
        LocalDate(2020, 3, 1),
    ]


def test_range_large_to_small():
    assert LocalDate(2020, 1, 4).range(LocalDate(2019, 12, 28)) == [
        LocalDate(2020, 1, 4),
        LocalDate(2020, 1, 3),
        LocalDate(2020, 1, 2),
        LocalDate(2020, 1, 1),
        LocalDate(2019, 12, 31),
        LocalDate(2019, 12, 30),
        LocalDate(2019, 12, 29),
        LocalDate(2019, 12, 28),
    ]


def test_range_single_day():
    d = LocalDate(2019, 8, 18)
    assert d.range(d) == [d]


def test_range_length_and_restart():
    a, b = LocalDate(2019, 1, 1), LocalDate(2020, 1, 1)
    days = a.range(b)
    assert len(days) == 366
    assert days[0] == a and days[-1] == b
    # iter_range lässt sich erneut starten
    assert list(a.iter_range(b)) == days


def test_equals():
    assert LocalDate(2019, 8, 5).equals(LocalDate(2019, 8, 6).minus_days(1))
    assert not LocalDate(2019, 8, 5).equals(LocalDate(2018, 8, 5))


def test_is_before_and_after():
    d = LocalDate(2019, 8, 5)
    assert d.is_before(LocalDate(2019, 8, 6))
    assert not d.is_before(d)
    assert not d.is_before(LocalDate(2018, 8, 5))
    assert not d.is_after(LocalDate(2019, 8, 6))
    assert not d.is_after(d)
    assert d.is_after(LocalDate(2018, 8, 5))


def test_ordering_agrees_with_canonical_string():
    days = [LocalDate(2019, 12, 31), LocalDate(2019, 2, 1), LocalDate(2020, 1, 10), LocalDate(2019, 10, 2)]
    assert sorted(days) == sorted(days, key=str)
    assert LocalDate(2019, 2, 1) < LocalDate(2019, 10, 2)


def test_hashable():
    assert len({LocalDate(2019, 12, 32), LocalDate(2020, 1, 1)}) == 1


def test_to_string_pads():
    assert str(LocalDate(2019, 12, 25)) == "2019-12-25"
    assert LocalDate(2019, 4, 5).to_string() == "2019-04-05"


def test_from_string():
    d = LocalDate.from_string("2019-06-04")
    assert (d.year, d.month, d.day) == (2019, 6, 4)


def test_from_string_round_trip():
    for d in LocalDate(2019, 12, 20).range(LocalDate(2020, 3, 5)):
        assert LocalDate.from_string(d.to_string()).equals(d)


@pytest.mark.parametrize("bad", [
    "2019-06", "2019-06-04-01", "", "2019-xx-04", "2019--04", "20190604",
    "2019-0_6-04",             # Ziffern-Trenner
    "２０１９-06-04",           # volle Breite
    "2019- 6-04",
    "+2019-06-04",
])
def test_from_string_rejects_malformed(bad):
    with pytest.raises(DateFormatError) as exc:
        LocalDate.from_string(bad)
    assert exc.value.value == bad
    assert bad in str(exc.value)


def test_date_format_error_is_value_error():
    with pytest.raises(ValueError):
        LocalDate.from_string("kein datum")


def test_from_date_and_to_date():
    d = LocalDate.from_date(date(2021, 8, 18))
    assert d == LocalDate(2021, 8, 18)
    assert LocalDate(2019, 8, 19).to_date() == date(2019, 8, 19)
    # datetime bringt nur seine Felder mit, keine Zeitzone
    assert LocalDate.from_date(datetime(2021, 8, 18, 23, 59)) == d


def test_from_date_in_tz():
    instant = datetime(2021, 8, 18, 23, 30, tzinfo=tz.tzutc())
    assert LocalDate.from_date_in_tz(instant, "Europe/Berlin") == LocalDate(2021, 8, 19)
    assert LocalDate.from_date_in_tz(instant, "America/New_York") == LocalDate(2021, 8, 18)
    assert LocalDate.from_date_in_tz(instant, "UTC") == LocalDate(2021, 8, 18)


def test_from_date_in_tz_unknown_zone():
    instant = datetime(2021, 8, 18, tzinfo=tz.tzutc())
    # leere Namen würden sonst die Systemzone liefern
    for name in ("Mars/Olympus_Mons", "", "   "):
        with pytest.raises(ValueError):
            LocalDate.from_date_in_tz(instant, name)
    with pytest.raises(ValueError):
        LocalDate.today("")


def test_today(monkeypatch):
    fixed = datetime(2021, 12, 31, 22, 0, tzinfo=tz.tzutc())
    monkeypatch.setattr(models, "_now", lambda: fixed)
    assert LocalDate.today("Asia/Tokyo") == LocalDate(2022, 1, 1)
    assert LocalDate.today("UTC") == LocalDate(2021, 12, 31)


def test_to_month():
    month = LocalDate(2020, 4, 24).to_local_month()
    assert (month.year, month.month) == (2020, 4)
    assert month.first.day == 1
    assert month == LocalMonth(2020, 4)


def test_to_week():
    thursday = LocalDate(2019, 8, 29)
    week = thursday.to_local_week()
    assert week.monday == thursday.minus_days(3)
    assert week.sunday == thursday.plus_days(3)


def test_quarter_boundaries():
    assert LocalDate(2019, 1, 1).to_quarter() == Quarter(2019, 1)
    assert LocalDate(2019, 3, 31).to_quarter() == Quarter(2019, 1)
    assert LocalDate(2019, 4, 1).to_quarter() == Quarter(2019, 2)
    assert LocalDate(2019, 6, 30).to_quarter() == Quarter(2019, 2)
    assert LocalDate(2019, 7, 1).to_quarter() == Quarter(2019, 3)
    assert LocalDate(2019, 9, 30).to_quarter() == Quarter(2019, 3)
    assert LocalDate(2019, 10, 1).to_quarter() == Quarter(2019, 4)
    assert LocalDate(2019, 12, 31).to_quarter() == Quarter(2019, 4)


def test_is_its_own_period():
    d = LocalDate(2019, 8, 5)
    assert isinstance(d, LocalDatePeriod)
    assert d.start is d and d.end is d


def test_immutable():
    d = LocalDate(2019, 8, 5)
    with pytest.raises(AttributeError):
        d.day = 6


def test_plus_days_matches_datetime():
    d, ref = LocalDate(2023, 12, 1), date(2023, 12, 1)
    for n in (1, 31, 90, 365, 1461):
        assert d.plus_days(n).to_date() == ref + timedelta(days=n)
