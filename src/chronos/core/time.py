from __future__ import annotations
import math
from typing import Tuple

from .types import CalendarDate, Month, Weekday

J2000 = 2451545.0
DAYS_IN_JULIAN_CENTURY = 36525.0
DAYS_IN_JULIAN_MILLENNIUM = 365250.0

# Julian date 0.0 and the two ends of the Gregorian reform.
JULIAN_START = CalendarDate(1.5, Month.JANUARY, -4712)
JULIAN_END = CalendarDate(4.0, Month.OCTOBER, 1582)
GREGORIAN_START = CalendarDate(15.0, Month.OCTOBER, 1582)
GREGORIAN_START_JDN = 2299161

_DAYS_IN_MONTH = (
    (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31),
    (0, 31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31),
)


def _key(d: CalendarDate) -> Tuple[int, int, float]:
    return (d.year, int(d.month), d.day)


def is_leap_year(year: int) -> bool:
    """Gregorian rule from 1582 on, Julian rule before."""
    if year >= GREGORIAN_START.year:
        return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0
    return year % 4 == 0


def days_in_month(month: int, year: int) -> int:
    return _DAYS_IN_MONTH[int(is_leap_year(year))][int(month)]


def days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def is_valid(d: CalendarDate) -> bool:
    """
    True when the date can be handed to the rest of the library:
      - month in 1..12 and 1 <= day < days_in_month + 1,
      - not earlier than 1.5 January -4712 (JD 0.0),
      - not one of the days 5..14 October 1582 dropped by the Gregorian reform.
    Never raises.
    """
    try:
        month = int(d.month)
        day = float(d.day)
        year = int(d.year)
    except (TypeError, ValueError):
        return False
    if month < 1 or month > 12 or math.isnan(day):
        return False
    if not (1.0 <= day < days_in_month(month, year) + 1):
        return False
    if (year, month, day) < _key(JULIAN_START):
        return False
    if _key(JULIAN_END) < (year, month, float(int(day))) < _key(GREGORIAN_START):
        return False
    return True


def to_julian_date(d: CalendarDate) -> float:
    """Meeus (7.1). Valid for any date with JD >= 0."""
    y, m = d.year, int(d.month)
    if m <= 2:
        y -= 1
        m += 12
    if _key(d) >= _key(GREGORIAN_START):
        a = y // 100
        b = 2 - a + a // 4
    else:
        b = 0
    return int(365.25 * (y + 4716)) + int(30.6001 * (m + 1)) + d.day + b - 1524.5


def to_calendar_date(jd: float) -> CalendarDate:
    """Inverse of to_julian_date (Meeus ch. 7), JD >= 0."""
    f, z = math.modf(jd + 0.5)
    if z < GREGORIAN_START_JDN:
        a = z
    else:
        alpha = int((z - 1867216.25) / 36524.25)
        a = z + 1 + alpha - int(alpha / 4)
    b = a + 1524
    c = int((b - 122.1) / 365.25)
    dd = int(365.25 * c)
    e = int((b - dd) / 30.6001)

    day = b - dd - int(30.6001 * e) + f
    month = e - 1 if e < 14 else e - 13
    year = c - 4716 if month > 2 else c - 4715
    return CalendarDate(day, Month(month), year)


def day_of_week(d: CalendarDate) -> Weekday:
    """JD 0.0 was a Monday."""
    jd = to_julian_date(d)
    return Weekday(int(math.fmod(jd + 0.5, 7.0)) + 1)


def day_of_year(d: CalendarDate) -> int:
    k = 1 if is_leap_year(d.year) else 2
    m = int(d.month)
    return int(275 * m / 9) - k * int((m + 9) / 12) + int(d.day) - 30


def year_decimal(d: CalendarDate) -> float:
    """year + (elapsed days)/days_in_year; exactly `year` at 0h on 1 January."""
    elapsed = day_of_year(d) - 1 + (d.day - int(d.day))
    return d.year + elapsed / days_in_year(d.year)


def date_of_easter(year: int) -> CalendarDate:
    """
    Easter Sunday. Gregorian computus for years after 1582 (the reform came
    in October, so Easter 1582 was still Julian), Julian computus before.
    """
    if year > GREGORIAN_START.year:
        a = year // 100
        b = (a - (a + 8) // 25 + 1) // 3
        c = (19 * (year % 19) + a - a // 4 - b + 15) % 30
        d = (32 + 2 * (a % 4) + 2 * ((year % 100) // 4) - c - (year % 100) % 4) % 7
        e = (year % 19 + 11 * c + 22 * d) // 451
        f = c + d - 7 * e + 114
    else:
        a = (19 * (year % 19) + 15) % 30
        b = (2 * (year % 4) + 4 * (year % 7) - a + 34) % 7
        f = a + b + 114
    return CalendarDate(float(f % 31 + 1), Month(f // 31), year)


def T_centuries(jd: float) -> float:
    return (jd - J2000) / DAYS_IN_JULIAN_CENTURY


def t_millennia(jd: float) -> float:
    return (jd - J2000) / DAYS_IN_JULIAN_MILLENNIUM
