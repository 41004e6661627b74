from typing import Tuple

# Tage zwischen 0000-03-01 und 1970-01-01 im proleptischen Gregorianischen Kalender
_EPOCH_SHIFT = 719468
_DAYS_PER_ERA = 146097      # 400 Jahre


def days_from_civil(year: int, month: int, day: int) -> int:
    """Anzahl Tage seit 1970-01-01 für ein gültiges (year, month, day).

    Rechnet mit einem Jahr, das im März beginnt, damit der Schalttag
    immer am Jahresende liegt. Funktioniert für jedes ganzzahlige Jahr."""
    year -= month <= 2
    era = year // 400
    year_of_era = year - era * 400
    shifted_month = month - 3 if month > 2 else month + 9
    day_of_year = (153 * shifted_month + 2) // 5 + day - 1
    day_of_era = (year_of_era * 365 + year_of_era // 4
                  - year_of_era // 100 + day_of_year)
    return era * _DAYS_PER_ERA + day_of_era - _EPOCH_SHIFT


def civil_from_days(days: int) -> Tuple[int, int, int]:
    """Umkehrung von days_from_civil: Tage seit 1970-01-01 -> (year, month, day)."""
    days += _EPOCH_SHIFT
    era = days // _DAYS_PER_ERA
    day_of_era = days - era * _DAYS_PER_ERA
    year_of_era = (day_of_era - day_of_era // 1460 + day_of_era // 36524
                   - day_of_era // 146096) // 365
    day_of_year = day_of_era - (365 * year_of_era + year_of_era // 4 - year_of_era // 100)
    shifted_month = (5 * day_of_year + 2) // 153
    day = day_of_year - (153 * shifted_month + 2) // 5 + 1
    month = shifted_month + 3 if shifted_month < 10 else shifted_month - 9
    year = year_of_era + era * 400 + (month <= 2)
    return year, month, day


def normalize(year: int, month: int, day: int) -> Tuple[int, int, int]:
    """
    Bringe ein beliebiges (year, month, day) in gültige Form.

    Entspricht dem Addieren von (month - 1) Monaten und (day - 1) Tagen auf
    den 1. Januar von `year`:
      - Monat 13 -> Januar des Folgejahres, Monat 0 -> Dezember des Vorjahres
      - Tag 32 im Dezember -> 1. Januar, Tag 0 -> letzter Tag des Vormonats
      - negative Tage laufen entsprechend weiter zurück
    """
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    return civil_from_days(days_from_civil(year, month, 1) + day - 1)


def weekday_from_days(days: int) -> int:
    """Wochentag zu Tagen seit 1970-01-01, 0=Montag … 6=Sonntag."""
    # 1970-01-01 war ein Donnerstag (4 bei 0=Sonntag)
    sunday_based = (days + 4) % 7
    return (sunday_based + 6) % 7
