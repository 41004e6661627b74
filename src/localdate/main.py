# src/localdate/main.py

import logging

from .config import load_config, save_config
from .export_utils import format_period, periods_to_json
from .models import DateFormatError, LocalDate, LocalMonth


def input_time_zone(default: str) -> str:
    tz_str = input(f"  Zeitzone (z.B. Europe/Berlin) [leer={default}]: ").strip()
    return tz_str or default


def input_month(current: LocalMonth) -> LocalMonth:
    """Fragt so lange nach einem Monat, bis die Eingabe YYYY-MM entspricht."""
    while True:
        month_str = input(f"  Monat (YYYY-MM) [leer={current}]: ").strip()
        if not month_str:
            return current
        try:
            return LocalMonth.from_string(month_str)
        except DateFormatError as e:
            logging.error(f"Ungültige Monatseingabe: {e}")
            print("  ⚠️  Bitte im Format YYYY-MM eingeben.")


def run_wizard():
    print("📅 Willkommen bei LocalDate 📅")
    cfg = load_config()

    # 1) Zeitzone bestimmen und heutigen Tag ermitteln
    time_zone = input_time_zone(cfg['default_timezone'])
    try:
        today = LocalDate.today(time_zone)
    except ValueError as e:
        logging.error(f"Zeitzone nicht nutzbar: {e}")
        print(f"❌ Unbekannte Zeitzone: {time_zone}")
        return

    print(f"\n✅ Heute in {time_zone}:")
    for period in (today, today.to_local_week(), today.to_local_month(), today.to_quarter()):
        print(" ", format_period(period))

    # 2) Wochen eines Monats auflisten
    if cfg.get('show_weeks', True):
        month = input_month(today.to_local_month())
        weeks = month.to_weeks()
        print(f"\n🗓️  {len(weeks)} Wochen im Monat {month}:")
        for week in weeks:
            print(" ", format_period(week))
        if input("\nAls JSON ausgeben? (j/n) ").lower() == "j":
            print(periods_to_json(weeks))

    # 3) Zeitzone merken
    if time_zone != cfg['default_timezone']:
        if input("\nZeitzone als Standard speichern? (j/n) ").lower() == "j":
            cfg['default_timezone'] = time_zone
            save_config(cfg)
            logging.info(f"[LocalDate] Standard-Zeitzone auf {time_zone} gesetzt.")
            print(f"Zeitzone {time_zone} gespeichert.")


if __name__ == "__main__":
    run_wizard()
