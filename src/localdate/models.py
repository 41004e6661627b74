# src/localdate/models.py
"""
Tage, Wochen, Monate und Quartale ohne Uhrzeit und ohne Zeitzone.

Alle Typen sind unveränderliche Werte. Ein `LocalDate` ist z. B. ein
"Berichtstag", der sich nie versehentlich mit einem konkreten Zeitpunkt
vermischen kann.
"""
import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Iterator, List, Protocol, runtime_checkable

from dateutil import tz

from .calendar_logic import days_from_civil, normalize, weekday_from_days


class DateFormatError(ValueError):
    """Eingabe-String entspricht nicht der kanonischen Form."""

    def __init__(self, value):
        super().__init__(f"Date is not in a valid format: {value}")
        self.value = value


@runtime_checkable
class LocalDatePeriod(Protocol):
    """Ein Zeitraum aus ganzen Kalendertagen, z. B. Woche, Monat oder Quartal."""

    @property
    def start(self) -> "LocalDate": ...

    @property
    def end(self) -> "LocalDate": ...


def _now() -> datetime:
    return datetime.now(tz.tzutc())


_DIGITS = re.compile(r"[0-9]+")


def _parse_fields(value: str, count: int) -> List[int]:
    parts = value.split("-")
    # nur ASCII-Ziffern, int() allein nimmt auch "0_6", " 6" oder "＋6"
    if len(parts) != count or not all(_DIGITS.fullmatch(p) for p in parts):
        raise DateFormatError(value)
    return [int(p) for p in parts]


@dataclass(frozen=True, order=True)
class LocalDate:
    """
    Ein Kalendertag ohne Zeitzone.

    Überläufe werden beim Erzeugen aufgelöst: LocalDate(2019, 12, 32) ist
    der 1. Januar 2020, LocalDate(2019, 1, 0) der 31. Dezember 2018.
    """
    year: int
    month: int    # 1=Januar … 12=Dezember
    day: int

    def __post_init__(self):
        year, month, day = normalize(self.year, self.month, self.day)
        object.__setattr__(self, "year", year)
        object.__setattr__(self, "month", month)
        object.__setattr__(self, "day", day)

    @property
    def weekday(self) -> int:
        """0=Montag … 6=Sonntag"""
        return weekday_from_days(days_from_civil(self.year, self.month, self.day))

    @property
    def start(self) -> "LocalDate":
        return self

    @property
    def end(self) -> "LocalDate":
        return self

    def plus_days(self, days: int) -> "LocalDate":
        # Überlauf übernimmt __post_init__, der 35. Januar wird zum 4. Februar
        return LocalDate(self.year, self.month, self.day + days)

    def minus_days(self, days: int) -> "LocalDate":
        return self.plus_days(-days)

    def iter_range(self, to: "LocalDate") -> Iterator["LocalDate"]:
        """Tage von self bis `to` (beide inklusive), vorwärts oder rückwärts."""
        step = 1 if to.is_after(self) else -1
        current = self
        while not current.equals(to):
            yield current
            current = current.plus_days(step)
        yield to

    def range(self, to: "LocalDate") -> List["LocalDate"]:
        return list(self.iter_range(to))

    def equals(self, other: "LocalDate") -> bool:
        return (self.year, self.month, self.day) == (other.year, other.month, other.day)

    def is_before(self, other: "LocalDate") -> bool:
        return (self.year, self.month, self.day) < (other.year, other.month, other.day)

    def is_after(self, other: "LocalDate") -> bool:
        return (self.year, self.month, self.day) > (other.year, other.month, other.day)

    def to_local_week(self) -> "LocalWeek":
        return LocalWeek(self)

    def to_local_month(self) -> "LocalMonth":
        return LocalMonth(self.year, self.month)

    def to_quarter(self) -> "Quarter":
        return Quarter(self.year, (self.month - 1) // 3 + 1)

    def to_date(self) -> date:
        """Neues datetime.date mit denselben Feldern (nur Jahre 1 … 9999)."""
        return date(self.year, self.month, self.day)

    def to_string(self) -> str:
        return f"{self.year}-{self.month:02d}-{self.day:02d}"

    def __str__(self):
        return self.to_string()

    @classmethod
    def from_string(cls, value: str) -> "LocalDate":
        """Liest 'YYYY-MM-DD'. Negative Jahre lassen sich wegen '-' nicht parsen."""
        year, month, day = _parse_fields(value, 3)
        return cls(year, month, day)

    @classmethod
    def from_date(cls, value: date) -> "LocalDate":
        """Übernimmt die Felder eines datetime.date oder datetime.datetime, wie sie sind."""
        return cls(value.year, value.month, value.day)

    @classmethod
    def from_date_in_tz(cls, instant: datetime, time_zone: str) -> "LocalDate":
        """
        Kalendertag, den eine Wanduhr in `time_zone` zum Zeitpunkt `instant` zeigt.

        Naive datetimes gelten als Systemzeit (wie bei datetime.astimezone).
        Unbekannte Zonennamen führen zu ValueError.
        """
        # gettz("") liefert die Systemzone, leere Namen gelten daher als unbekannt
        zone = tz.gettz(time_zone) if time_zone and time_zone.strip() else None
        if zone is None:
            raise ValueError(f"Unknown time zone: {time_zone!r}")
        local = instant.astimezone(zone)
        return cls(local.year, local.month, local.day)

    @classmethod
    def today(cls, time_zone: str) -> "LocalDate":
        return cls.from_date_in_tz(_now(), time_zone)


@dataclass(frozen=True, order=True)
class LocalWeek:
    """
    Eine Woche von Montag bis Sonntag.

    Es gibt keine Standard-Darstellung einer Woche, daher wird jeder Tag der
    Woche als Referenz akzeptiert und auf den Montag gesetzt.
    """
    monday: LocalDate

    def __post_init__(self):
        object.__setattr__(self, "monday", self.monday.minus_days(self.monday.weekday))

    @property
    def sunday(self) -> LocalDate:
        return self.monday.plus_days(6)

    @property
    def start(self) -> LocalDate:
        return self.monday

    @property
    def end(self) -> LocalDate:
        return self.sunday

    def plus_weeks(self, weeks: int) -> "LocalWeek":
        return LocalWeek(self.monday.plus_days(7 * weeks))

    def minus_weeks(self, weeks: int) -> "LocalWeek":
        return self.plus_weeks(-weeks)

    def equals(self, other: "LocalWeek") -> bool:
        return self.monday.equals(other.monday)

    def is_before(self, other: "LocalWeek") -> bool:
        return self.monday.is_before(other.monday)

    def is_after(self, other: "LocalWeek") -> bool:
        return self.monday.is_after(other.monday)

    def to_days(self) -> List[LocalDate]:
        return [self.monday.plus_days(i) for i in range(7)]

    def to_string(self) -> str:
        return f"{self.monday}--{self.sunday}"

    def __str__(self):
        return self.to_string()

    @classmethod
    def from_string(cls, value: str) -> "LocalWeek":
        """Liest '<montag>--<sonntag>', z. B. '2019-07-29--2019-08-04'."""
        parts = value.split("--")
        if len(parts) != 2:
            raise DateFormatError(value)
        try:
            monday, sunday = (LocalDate.from_string(p) for p in parts)
        except DateFormatError as e:
            raise DateFormatError(value) from e
        week = cls(monday)
        if not (week.monday.equals(monday) and week.sunday.equals(sunday)):
            raise DateFormatError(value)
        return week


@dataclass(frozen=True, order=True)
class LocalMonth:
    """
    Ein Monat eines bestimmten Jahres.

    Ungewöhnliche Monatszahlen werden aufgelöst: Monat 0 ist der Dezember
    des Vorjahres, Monat 15 der März des Folgejahres.
    """
    year: int
    month: int

    def __post_init__(self):
        first = LocalDate(self.year, self.month, 1)
        object.__setattr__(self, "year", first.year)
        object.__setattr__(self, "month", first.month)

    @property
    def first(self) -> LocalDate:
        return LocalDate(self.year, self.month, 1)

    @property
    def last(self) -> LocalDate:
        # Tag vor dem Ersten des Folgemonats, Schaltjahre ergeben sich von selbst
        return self.plus_months(1).first.minus_days(1)

    @property
    def start(self) -> LocalDate:
        return self.first

    @property
    def end(self) -> LocalDate:
        return self.last

    def plus_months(self, months: int) -> "LocalMonth":
        return LocalMonth(self.year, self.month + months)

    def minus_months(self, months: int) -> "LocalMonth":
        return self.plus_months(-months)

    def number_of_days(self) -> int:
        return self.last.day

    def weekday_start(self) -> int:
        return self.first.weekday

    def equals(self, other: "LocalMonth") -> bool:
        return (self.year, self.month) == (other.year, other.month)

    def is_before(self, other: "LocalMonth") -> bool:
        return (self.year, self.month) < (other.year, other.month)

    def is_after(self, other: "LocalMonth") -> bool:
        return (self.year, self.month) > (other.year, other.month)

    def iter_weeks(self) -> Iterator[LocalWeek]:
        """Alle Wochen, von denen mindestens ein Tag in diesem Monat liegt."""
        week = self.first.to_local_week()
        while (week.monday.to_local_month().equals(self)
               or week.sunday.to_local_month().equals(self)):
            yield week
            week = week.plus_weeks(1)

    def to_weeks(self) -> List[LocalWeek]:
        return list(self.iter_weeks())

    def to_string(self) -> str:
        return f"{self.year}-{self.month:02d}"

    def __str__(self):
        return self.to_string()

    @classmethod
    def from_local_date(cls, value: LocalDate) -> "LocalMonth":
        return cls(value.year, value.month)

    @classmethod
    def from_string(cls, value: str) -> "LocalMonth":
        year, month = _parse_fields(value, 2)
        return cls(year, month)

    @classmethod
    def list_for_year(cls, year: int) -> List["LocalMonth"]:
        return [cls(year, month) for month in range(1, 13)]


@dataclass(frozen=True, order=True)
class Quarter:
    """Drei Monate: Q1 = Jan–Mär, Q2 = Apr–Jun, Q3 = Jul–Sep, Q4 = Okt–Dez."""
    year: int
    quarter: int    # 1 … 4

    def __post_init__(self):
        # fortlaufender Quartalsindex; divmod rundet auch bei negativen Jahren ab.
        # Bewusst anders als die frühere Rechnung mit abgeschnittener Division,
        # die z. B. für Q3 + 1 ein "Quartal 0" ergab und vor Jahr 0 falsch lag.
        year, index = divmod(self.year * 4 + self.quarter - 1, 4)
        object.__setattr__(self, "year", year)
        object.__setattr__(self, "quarter", index + 1)

    @property
    def start(self) -> LocalDate:
        return LocalDate(self.year, (self.quarter - 1) * 3 + 1, 1)

    @property
    def end(self) -> LocalDate:
        return self.plus_quarters(1).start.minus_days(1)

    def plus_quarters(self, quarters: int) -> "Quarter":
        return Quarter(self.year, self.quarter + quarters)

    def minus_quarters(self, quarters: int) -> "Quarter":
        return self.plus_quarters(-quarters)

    def equals(self, other: "Quarter") -> bool:
        return (self.year, self.quarter) == (other.year, other.quarter)

    def is_before(self, other: "Quarter") -> bool:
        return (self.year, self.quarter) < (other.year, other.quarter)

    def is_after(self, other: "Quarter") -> bool:
        return (self.year, self.quarter) > (other.year, other.quarter)

    def to_string(self) -> str:
        return f"Q{self.quarter} {self.year}"

    def __str__(self):
        return self.to_string()

    @classmethod
    def from_string(cls, value: str) -> "Quarter":
        """Liest 'Q<1-4> <jahr>', z. B. 'Q3 2021'."""
        label, _, year = value.partition(" ")
        if not (label.startswith("Q") and _DIGITS.fullmatch(label[1:])
                and re.fullmatch(r"-?[0-9]+", year)):
            raise DateFormatError(value)
        quarter = int(label[1:])
        if not 1 <= quarter <= 4:
            raise DateFormatError(value)
        return cls(int(year), quarter)
