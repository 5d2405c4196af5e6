from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Generic, TypeVar, Union

T = TypeVar("T")


class Month(IntEnum):
    UNKNOWN = 0
    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12


class Weekday(IntEnum):
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7


class Body(IntEnum):
    MERCURY = 1
    VENUS = 2
    EARTH = 3
    MARS = 4
    JUPITER = 5
    SATURN = 6
    URANUS = 7
    NEPTUNE = 8


class Frame(Enum):
    """Reference equinox of a set of mean orbital elements."""
    J2000 = "j2000"
    OF_DATE = "of_date"


class Equinox(IntEnum):
    VERNAL = 0
    AUTUMNAL = 2


class Solstice(IntEnum):
    SUMMER = 1
    WINTER = 3


@dataclass(frozen=True)
class CalendarDate:
    """
    Calendar date with a fractional day (12h = .5), astronomical year numbering.

    The plain constructor does not validate: the equinox/solstice solver uses
    CalendarDate(-1.0, Month.UNKNOWN, year) as its invalid-request marker.
    Use CalendarDate.checked(...) when a typed error is wanted.
    """
    day: float
    month: Month
    year: int

    @classmethod
    def checked(cls, day: float, month: int, year: int) -> "CalendarDate":
        from .errors import InvalidDateError
        from .time import is_valid

        try:
            m = Month(month)
        except ValueError as e:
            raise InvalidDateError(f"month out of range: {month!r}") from e
        d = cls(float(day), m, int(year))
        if not is_valid(d):
            raise InvalidDateError(f"invalid calendar date: {d.day} {m.name} {d.year}")
        return d

    def __str__(self) -> str:
        return f"{self.year:05d}-{int(self.month):02d}-{self.day:09.6f}"


# ============================================================
# Angle pairs (radians)
# ============================================================

@dataclass(frozen=True)
class GeographicPoint:
    """Observer location. Longitude is positive west of Greenwich."""
    longitude: float
    latitude: float


@dataclass(frozen=True)
class HorizontalPoint:
    """Azimuth measured westward from the south."""
    azimuth: float
    elevation: float


@dataclass(frozen=True)
class EquatorialPoint:
    right_ascension: float
    declination: float


@dataclass(frozen=True)
class EclipticPoint:
    longitude: float
    latitude: float


@dataclass(frozen=True)
class SphericalPosition:
    """Longitude/latitude in radians; distance in AU (planets) or km (Moon)."""
    longitude: float
    latitude: float
    distance: float


@dataclass(frozen=True)
class OrbitalElements:
    mean_longitude: float
    semi_major_axis: float
    eccentricity: float
    inclination: float
    ascending_node_longitude: float
    perihelion_longitude: float


@dataclass(frozen=True)
class DelaunayArguments:
    """Mean anomalies of Moon (l) and Sun (l'), argument of latitude F, elongation D; radians."""
    l: float
    l_prime: float
    F: float
    D: float


# ============================================================
# Bounded iteration outcome
# ============================================================

@dataclass(frozen=True)
class Converged(Generic[T]):
    value: T
    iterations: int
    converged: bool = True


@dataclass(frozen=True)
class NotConverged(Generic[T]):
    """Last iterate reached when the iteration budget ran out."""
    value: T
    iterations: int
    converged: bool = False


Outcome = Union[Converged[T], NotConverged[T]]
