from .models import (
    DateFormatError,
    LocalDate,
    LocalDatePeriod,
    LocalMonth,
    LocalWeek,
    Quarter,
)

__all__ = [
    "DateFormatError",
    "LocalDate",
    "LocalDatePeriod",
    "LocalMonth",
    "LocalWeek",
    "Quarter",
]
