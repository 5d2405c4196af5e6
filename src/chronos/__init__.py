"""chronos public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    list_theories,
    theory_info,
    register_theory,
    use_de422,
    is_valid,
    is_leap_year,
    days_in_month,
    to_julian_date,
    to_calendar_date,
    to_julian_ephemeris_date,
    day_of_week,
    day_of_year,
    date_of_easter,
    delta_t,
    delta_t_uncertainty,
    greenwich_mean_sidereal_time,
    greenwich_apparent_sidereal_time,
    nutation,
    nutation_in_longitude,
    nutation_in_obliquity,
    obliquity_of_ecliptic,
    true_obliquity,
    precession,
    aberration,
    orbital_elements,
    geodesic_distance,
    ecliptic_to_equatorial,
    equatorial_to_ecliptic,
    equatorial_to_horizontal,
    horizontal_to_equatorial,
    sun_true_position,
    sun_apparent_position,
    sun_distance_to_earth,
    equinox,
    solstice,
    equinox_jde,
    solstice_jde,
    equation_of_time,
    planet_true_position,
    planet_apparent_position,
    planet_distance_to_sun,
    planet_distance_to_earth,
    planet_phase_angle,
    planet_illuminated_fraction,
    planet_apparent_magnitude,
    light_time,
    moon_true_position,
    moon_apparent_position,
    moon_distance_to_earth,
    moon_phase_angle,
    moon_illuminated_fraction,
    moon_bright_limb_position_angle,
    parallactic_angle,
    transit,
    rising,
    setting,
    atmospheric_refraction,
    equatorial_horizontal_parallax,
    diurnal_parallax,
)
from .core.errors import ChronosError, ConvergenceError, InvalidDateError, TheoryUnavailableError
from .core.types import (
    Body,
    CalendarDate,
    EclipticPoint,
    EquatorialPoint,
    Equinox,
    Frame,
    GeographicPoint,
    HorizontalPoint,
    Month,
    Solstice,
    Weekday,
)

__all__ = [
    "list_theories",
    "theory_info",
    "register_theory",
    "use_de422",
    "is_valid",
    "is_leap_year",
    "days_in_month",
    "to_julian_date",
    "to_calendar_date",
    "to_julian_ephemeris_date",
    "day_of_week",
    "day_of_year",
    "date_of_easter",
    "delta_t",
    "delta_t_uncertainty",
    "greenwich_mean_sidereal_time",
    "greenwich_apparent_sidereal_time",
    "nutation",
    "nutation_in_longitude",
    "nutation_in_obliquity",
    "obliquity_of_ecliptic",
    "true_obliquity",
    "precession",
    "aberration",
    "orbital_elements",
    "geodesic_distance",
    "ecliptic_to_equatorial",
    "equatorial_to_ecliptic",
    "equatorial_to_horizontal",
    "horizontal_to_equatorial",
    "sun_true_position",
    "sun_apparent_position",
    "sun_distance_to_earth",
    "equinox",
    "solstice",
    "equinox_jde",
    "solstice_jde",
    "equation_of_time",
    "planet_true_position",
    "planet_apparent_position",
    "planet_distance_to_sun",
    "planet_distance_to_earth",
    "planet_phase_angle",
    "planet_illuminated_fraction",
    "planet_apparent_magnitude",
    "light_time",
    "moon_true_position",
    "moon_apparent_position",
    "moon_distance_to_earth",
    "moon_phase_angle",
    "moon_illuminated_fraction",
    "moon_bright_limb_position_angle",
    "parallactic_angle",
    "transit",
    "rising",
    "setting",
    "atmospheric_refraction",
    "equatorial_horizontal_parallax",
    "diurnal_parallax",
    "ChronosError",
    "ConvergenceError",
    "InvalidDateError",
    "TheoryUnavailableError",
    "Body",
    "CalendarDate",
    "EclipticPoint",
    "EquatorialPoint",
    "Equinox",
    "Frame",
    "GeographicPoint",
    "HorizontalPoint",
    "Month",
    "Solstice",
    "Weekday",
]
