from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import math
import re
import sys

from .config import get_log_level

_DATE_RE = re.compile(r"^(-?\d+)-(\d{1,2})-(\d{1,2}(?:\.\d*)?)$")


def _parse_date(s: str):
    """YYYY-MM-DD with an optional fractional day, e.g. 1957-10-04.81 (astronomical years)."""
    from chronos import CalendarDate, InvalidDateError

    m = _DATE_RE.match(s)
    if m is None:
        raise SystemExit(f"bad date {s!r}; expected YYYY-MM-DD[.fraction]")
    try:
        return CalendarDate.checked(float(m.group(3)), int(m.group(2)), int(m.group(1)))
    except InvalidDateError as e:
        raise SystemExit(str(e)) from e


def _configure_logging(verbose: bool = False) -> None:
    """Configure logging for CLI (stderr, level from --verbose or CHRONOS_LOG)."""
    level = logging.DEBUG if verbose else logging.WARNING
    env_level = get_log_level()
    if env_level in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        level = getattr(logging, env_level)
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _hms(hours: float) -> str:
    h = int(hours)
    m = (hours - h) * 60
    m_int = int(m)
    s = (m - m_int) * 60
    return f"{h:02d}:{m_int:02d}:{s:05.2f}"


def _deg(rad: float) -> float:
    return math.degrees(rad)


def cmd_date(argv: list[str]) -> int:
    import chronos

    p = argparse.ArgumentParser(prog="chronos date", description="Julian dates, weekday and day of year of a calendar date.")
    p.add_argument("date", help="YYYY-MM-DD[.fraction] (UT)")
    args = p.parse_args(argv)

    d = _parse_date(args.date)
    print(f"Date   : {d}")
    print(f"  JD          = {chronos.to_julian_date(d):.6f}")
    print(f"  JDE         = {chronos.to_julian_ephemeris_date(d):.6f}")
    print(f"  Weekday     = {chronos.day_of_week(d).name.title()}")
    print(f"  Day of year = {chronos.day_of_year(d)}")
    print(f"  Leap year   = {chronos.is_leap_year(d.year)}")
    print(f"  GMST        = {_hms(chronos.greenwich_mean_sidereal_time(d))}")
    print(f"  GAST        = {_hms(chronos.greenwich_apparent_sidereal_time(d))}")
    return 0


def cmd_deltat(argv: list[str]) -> int:
    import chronos

    p = argparse.ArgumentParser(prog="chronos deltat", description="ΔT = TT - UT in seconds.")
    p.add_argument("date", help="YYYY-MM-DD[.fraction]")
    args = p.parse_args(argv)

    d = _parse_date(args.date)
    unc = chronos.delta_t_uncertainty(d)
    print(f"Date : {d}")
    print(f"  ΔT          = {chronos.delta_t(d):.2f} s")
    print(f"  uncertainty = {'n/a (extrapolated)' if unc is None else f'{unc:.2f} s'}")
    return 0


def cmd_nutation(argv: list[str]) -> int:
    import chronos

    p = argparse.ArgumentParser(prog="chronos nutation", description="Nutation and obliquity of the ecliptic.")
    p.add_argument("date", help="YYYY-MM-DD[.fraction]")
    p.add_argument("--lunar", default=None, help="lunar theory for the Delaunay arguments")
    args = p.parse_args(argv)

    d = _parse_date(args.date)
    dpsi, deps = chronos.nutation(d, lunar=args.lunar)
    print(f"Date : {d}")
    print(f"  Δψ = {_deg(dpsi) * 3600.0:+.3f}\"")
    print(f"  Δε = {_deg(deps) * 3600.0:+.3f}\"")
    print(f"  ε0 = {_deg(chronos.obliquity_of_ecliptic(d)):.6f}°")
    print(f"  ε  = {_deg(chronos.true_obliquity(d, lunar=args.lunar)):.6f}°")
    return 0


def cmd_sun(argv: list[str]) -> int:
    import chronos

    p = argparse.ArgumentParser(prog="chronos sun", description="True/apparent solar position and the equation of time.")
    p.add_argument("date", help="YYYY-MM-DD[.fraction] (UT)")
    p.add_argument("--theory", default=None, help="planetary theory (see `chronos theories`)")
    args = p.parse_args(argv)

    d = _parse_date(args.date)
    true = chronos.sun_true_position(d, theory=args.theory)
    app = chronos.sun_apparent_position(d, theory=args.theory)
    eq = chronos.ecliptic_to_equatorial(app, chronos.true_obliquity(d))
    print(f"Date : {d}")
    print("Solar Position (degrees):")
    print(f"  True Longitude      = {_deg(true.longitude):.6f}")
    print(f"  True Latitude       = {_deg(true.latitude) * 3600.0:+.3f}\"")
    print(f"  Apparent Longitude  = {_deg(app.longitude):.6f}")
    print(f"  Right Ascension     = {_hms(_deg(eq.right_ascension) / 15.0)}")
    print(f"  Declination         = {_deg(eq.declination):+.6f}")
    print(f"  Distance            = {chronos.sun_distance_to_earth(d, theory=args.theory):.8f} AU")
    print(f"Equation of Time      = {chronos.equation_of_time(d, theory=args.theory):.6f} h")
    return 0


def cmd_planet(argv: list[str]) -> int:
    import chronos

    p = argparse.ArgumentParser(prog="chronos planet", description="Geocentric position, phase and magnitude of a planet.")
    p.add_argument("body", choices=[b.name.lower() for b in chronos.Body])
    p.add_argument("date", help="YYYY-MM-DD[.fraction] (UT)")
    p.add_argument("--theory", default=None)
    args = p.parse_args(argv)

    d = _parse_date(args.date)
    body = chronos.Body[args.body.upper()]
    true = chronos.planet_true_position(d, body, theory=args.theory)
    app = chronos.planet_apparent_position(d, body, theory=args.theory)
    print(f"{body.name.title()} at {d}")
    print(f"  True     λ, β = {_deg(true.longitude):.6f}, {_deg(true.latitude):+.6f}")
    print(f"  Apparent λ, β = {_deg(app.longitude):.6f}, {_deg(app.latitude):+.6f}")
    print(f"  r (Sun)       = {chronos.planet_distance_to_sun(d, body, theory=args.theory):.6f} AU")
    print(f"  Δ (Earth)     = {chronos.planet_distance_to_earth(d, body, theory=args.theory):.6f} AU")
    print(f"  Light-time    = {chronos.light_time(d, body, theory=args.theory) * 1440.0:.3f} min")
    print(f"  Phase angle   = {_deg(chronos.planet_phase_angle(d, body, theory=args.theory)):.3f}°")
    print(f"  Illuminated   = {chronos.planet_illuminated_fraction(d, body, theory=args.theory):.4f}")
    print(f"  Magnitude     = {chronos.planet_apparent_magnitude(d, body, theory=args.theory):+.2f}")
    return 0


def cmd_moon(argv: list[str]) -> int:
    import chronos

    p = argparse.ArgumentParser(prog="chronos moon", description="Geocentric Moon: position, distance, phase.")
    p.add_argument("date", help="YYYY-MM-DD[.fraction] (UT)")
    p.add_argument("--theory", default=None, help="planetary theory for the Sun")
    p.add_argument("--lunar", default=None)
    args = p.parse_args(argv)

    d = _parse_date(args.date)
    true = chronos.moon_true_position(d, lunar=args.lunar)
    app = chronos.moon_apparent_position(d, lunar=args.lunar)
    dist = chronos.moon_distance_to_earth(d, lunar=args.lunar)
    kw = dict(theory=args.theory, lunar=args.lunar)
    print(f"Moon at {d}")
    print(f"  True     λ, β = {_deg(true.longitude):.6f}, {_deg(true.latitude):+.6f}")
    print(f"  Apparent λ    = {_deg(app.longitude):.6f}")
    print(f"  Distance      = {dist:.8f} AU")
    print(f"  Phase angle   = {_deg(chronos.moon_phase_angle(d, **kw)):.4f}°")
    print(f"  Illuminated   = {chronos.moon_illuminated_fraction(d, **kw):.4f}")
    print(f"  Bright limb   = {_deg(chronos.moon_bright_limb_position_angle(d, **kw)):.2f}°")
    return 0


def cmd_seasons(argv: list[str]) -> int:
    import chronos
    from chronos.reference.time_scales import jde_to_calendar_date

    p = argparse.ArgumentParser(prog="chronos seasons", description="Equinoxes and solstices of a year.")
    p.add_argument("year", type=int)
    p.add_argument("--theory", default=None)
    args = p.parse_args(argv)

    rows = (
        ("March equinox", chronos.equinox_jde, chronos.Equinox.VERNAL),
        ("June solstice", chronos.solstice_jde, chronos.Solstice.SUMMER),
        ("September equinox", chronos.equinox_jde, chronos.Equinox.AUTUMNAL),
        ("December solstice", chronos.solstice_jde, chronos.Solstice.WINTER),
    )
    print(f"Seasons of {args.year}")
    for label, fn, which in rows:
        jde = fn(args.year, which, theory=args.theory)
        ut = jde_to_calendar_date(jde)
        frac = ut.day - int(ut.day)
        print(f"  {label:<18} JDE {jde:.5f}   {ut.year:5d}-{int(ut.month):02d}-{int(ut.day):02d} {_hms(frac * 24.0)} UT")
    return 0


def cmd_easter(argv: list[str]) -> int:
    import chronos

    p = argparse.ArgumentParser(prog="chronos easter", description="Date of Easter Sunday.")
    p.add_argument("year", type=int)
    args = p.parse_args(argv)

    d = chronos.date_of_easter(args.year)
    calendar = "Gregorian" if args.year > 1582 else "Julian"
    print(f"Easter {args.year} ({calendar}): {d.year}-{int(d.month):02d}-{int(d.day):02d}")
    return 0


def cmd_theories(argv: list[str]) -> int:
    import chronos

    p = argparse.ArgumentParser(prog="chronos theories", description="List registered theories.")
    p.parse_args(argv)

    for kind, names in chronos.list_theories().items():
        print(f"{kind}:")
        for name in names:
            print(f"  {name:<8} {chronos.theory_info(name, kind=kind)}")
    return 0


_COMMANDS = {
    "date": (cmd_date, "Julian dates, weekday and day of year"),
    "deltat": (cmd_deltat, "ΔT = TT - UT"),
    "nutation": (cmd_nutation, "Nutation and obliquity"),
    "sun": (cmd_sun, "Solar position and equation of time"),
    "planet": (cmd_planet, "Planet position, phase and magnitude"),
    "moon": (cmd_moon, "Lunar position and phase"),
    "seasons": (cmd_seasons, "Equinoxes and solstices of a year"),
    "easter": (cmd_easter, "Date of Easter"),
    "theories": (cmd_theories, "List registered planetary/lunar theories"),
}


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="chronos", description="Astronomical ephemeris toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging on stderr")
    sub = p.add_subparsers(dest="cmd", required=True)
    for name, (_fn, help_text) in _COMMANDS.items():
        sub.add_parser(name, help=help_text, add_help=False)

    # diagnostics (numpy/matplotlib)
    sub.add_parser("plot-deltat", help="Plot the ΔT model (needs chronos-ephem[diagnostics])", add_help=False)

    args, rest = p.parse_known_args(argv)
    _configure_logging(verbose=args.verbose)

    if args.cmd == "plot-deltat":
        return _run_module_main("chronos.diagnostics.plot_deltat", rest)

    fn, _help = _COMMANDS[args.cmd]
    return fn(rest)


if __name__ == "__main__":
    raise SystemExit(main())
