import json
from typing import Any, Dict, Iterable, List

from localdate.models import (
    DateFormatError, LocalDate, LocalDatePeriod, LocalMonth, LocalWeek, Quarter,
)


_KIND_NAMES = {
    LocalDate: 'day',
    LocalWeek: 'week',
    LocalMonth: 'month',
    Quarter: 'quarter',
}

_KIND_TYPES = {name: typ for typ, name in _KIND_NAMES.items()}

_WEEKDAY_NAMES = ('Montag', 'Dienstag', 'Mittwoch', 'Donnerstag', 'Freitag', 'Samstag', 'Sonntag')


def period_kind(period: LocalDatePeriod) -> str:
    """'day', 'week', 'month' oder 'quarter'; 'period' für fremde Zeiträume."""
    return _KIND_NAMES.get(type(period), 'period')


def period_length(period: LocalDatePeriod) -> int:
    """Anzahl Kalendertage im Zeitraum, Start und Ende eingeschlossen."""
    if period.end.is_before(period.start):
        raise ValueError(f"Period ends before it starts: {period.start} > {period.end}")
    return sum(1 for _ in period.start.iter_range(period.end))


def period_to_dict(period: LocalDatePeriod) -> Dict[str, Any]:
    """
    JSON-taugliche Darstellung eines beliebigen Zeitraums.
    `label` ist die kanonische Form des Werts, `start`/`end` die seiner Grenztage.
    """
    return {
        'kind': period_kind(period),
        'label': str(period),
        'start': period.start.to_string(),
        'end': period.end.to_string(),
        'days': period_length(period),
    }


def period_from_dict(data: Dict[str, Any]) -> LocalDatePeriod:
    """Stellt Tag, Woche, Monat oder Quartal aus period_to_dict() wieder her."""
    kind = data.get('kind')
    typ = _KIND_TYPES.get(kind)
    if typ is None:
        raise ValueError(f"Unknown period kind: {kind!r}")
    label = data.get('label')
    if not isinstance(label, str):
        raise DateFormatError(label)
    return typ.from_string(label)


def periods_to_json(periods: Iterable[LocalDatePeriod]) -> str:
    return json.dumps([period_to_dict(p) for p in periods], ensure_ascii=False, indent=2)


def periods_from_json(text: str) -> List[LocalDatePeriod]:
    return [period_from_dict(item) for item in json.loads(text)]


def format_period(period: LocalDatePeriod) -> str:
    """
    Kurzbeschreibung für die Ausgabe, z. B. 'Q3 2021: 2021-07-01 – 2021-09-30 (92 Tage)'.
    Einzelne Tage erscheinen mit ihrem Wochentag.
    """
    start, end = period.start, period.end
    if start.equals(end):
        return f"{start} ({_WEEKDAY_NAMES[start.weekday]})"
    days = period_length(period)
    return f"{period}: {start} – {end} ({days} Tage)"

