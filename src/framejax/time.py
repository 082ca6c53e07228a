"""Time scales and Julian Date conversions.

Provides the time-scale tag used by :class:`~framejax.epoch.Epoch`, the
calendar helpers, and the two conversions needed by the frame dispatcher:

- :func:`jd_utc_to_tt` -- UTC to Terrestrial Time using the leap-second
  table and the fixed TT-TAI offset.
- :func:`jd_utc_to_ut1` -- UTC to UT1 using the UT1-UTC offset interpolated
  from Earth orientation data, or the approximation UT1 = UTC when no data
  is supplied.

Julian Dates are handled as Python floats (float64) rather than JAX arrays:
a single float32 Julian Date resolves only ~0.25 day, far too coarse for
sidereal-time computations.
"""

from __future__ import annotations

import bisect
import enum
import logging
import math

from .constants import JD_MJD_OFFSET, SECONDS_PER_DAY
from .errors import DataCoverageError

logger = logging.getLogger(__name__)

# TT - TAI offset in seconds (constant by definition)
TT_TAI: float = 32.184

# Leap second table: (MJD of introduction, TAI-UTC in seconds)
# Each entry marks the MJD at which TAI-UTC steps to the given value.
# Source: IERS Bulletin C / USNO leap second table (1972-01-01 through 2017-01-01).
_LEAP_SECOND_TABLE: tuple[tuple[float, float], ...] = (
    (41317.0, 10.0),  # 1972-01-01
    (41499.0, 11.0),  # 1972-07-01
    (41683.0, 12.0),  # 1973-01-01
    (42048.0, 13.0),  # 1974-01-01
    (42413.0, 14.0),  # 1975-01-01
    (42778.0, 15.0),  # 1976-01-01
    (43144.0, 16.0),  # 1977-01-01
    (43509.0, 17.0),  # 1978-01-01
    (43874.0, 18.0),  # 1979-01-01
    (44239.0, 19.0),  # 1980-01-01
    (44786.0, 20.0),  # 1981-07-01
    (45151.0, 21.0),  # 1982-07-01
    (45516.0, 22.0),  # 1983-07-01
    (46247.0, 23.0),  # 1985-07-01
    (47161.0, 24.0),  # 1988-01-01
    (47892.0, 25.0),  # 1990-01-01
    (48257.0, 26.0),  # 1991-01-01
    (48804.0, 27.0),  # 1992-07-01
    (49169.0, 28.0),  # 1993-07-01
    (49534.0, 29.0),  # 1994-07-01
    (50083.0, 30.0),  # 1996-01-01
    (50630.0, 31.0),  # 1997-07-01
    (51179.0, 32.0),  # 1999-01-01
    (53736.0, 33.0),  # 2006-01-01
    (54832.0, 34.0),  # 2009-01-01
    (56109.0, 35.0),  # 2012-07-01
    (57204.0, 36.0),  # 2015-07-01
    (57754.0, 37.0),  # 2017-01-01
)

_LEAP_SECOND_MJDS: tuple[float, ...] = tuple(m for m, _ in _LEAP_SECOND_TABLE)


class TimeScale(enum.Enum):
    """Time scale of a Julian Date.

    Attributes:
        UTC: Coordinated Universal Time.
        UT1: Universal Time, tied to the Earth's rotation angle.
        TT: Terrestrial Time.
    """

    UTC = "UTC"
    UT1 = "UT1"
    TT = "TT"


def leap_seconds_tai_utc(mjd: float) -> float:
    """Return TAI-UTC (cumulative leap seconds) for a given MJD.

    Uses a hardcoded step-function lookup table covering 1972-01-01 through
    2017-01-01.  For dates after the last entry, returns the most recent
    value (37.0).

    Args:
        mjd: Modified Julian Date (UTC).

    Returns:
        TAI-UTC in seconds.

    Raises:
        DataCoverageError: If ``mjd`` precedes 1972-01-01, where UTC was
            not an integer-second offset from TAI.
    """
    mjd = float(mjd)
    if mjd < _LEAP_SECOND_MJDS[0]:
        raise DataCoverageError(
            f"MJD {mjd} (UTC) precedes the leap-second table starting at MJD {_LEAP_SECOND_MJDS[0]}"
        )

    # bisect_right returns the index of the first entry > mjd,
    # so idx-1 is the last entry <= mjd.
    idx = bisect.bisect_right(_LEAP_SECOND_MJDS, mjd)
    return _LEAP_SECOND_TABLE[idx - 1][1]


def caldate_to_mjd(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: float = 0.0,
) -> float:
    """Convert a calendar date to Modified Julian Date. Algorithm is only valid from year 1583 onward.

    Args:
        year (int): Year of the calendar date.
        month (int): Month of the calendar date.
        day (int): Day of the calendar date.
        hour (int): Hour of the calendar date. Default: ``0``
        minute (int): Minute of the calendar date. Default: ``0``
        second (float): Second of the calendar date. Default: ``0.0``

    Returns:
        Modified Julian Date.

    References:

        1. Montenbruck, O., & Gill, E. (2012). *Satellite Orbits: Models, Methods and Applications*. Springer Science & Business Media.
    """
    if month <= 2:
        year -= 1
        month += 12

    B = math.floor(year / 400) - math.floor(year / 100) + math.floor(year / 4)

    mjd = 365 * year - 679004 + B + math.floor(30.6001 * (month + 1)) + day

    frac_day = (hour + (minute + second / 60.0) / 60.0) / 24.0

    return float(mjd) + frac_day


def caldate_to_jd(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: float = 0.0,
) -> float:
    """Convert a calendar date to Julian Date.

    Args:
        year (int): Year of the calendar date.
        month (int): Month of the calendar date.
        day (int): Day of the calendar date.
        hour (int): Hour of the calendar date. Default: ``0``
        minute (int): Minute of the calendar date. Default: ``0``
        second (float): Second of the calendar date. Default: ``0.0``

    Returns:
        Julian Date.
    """
    return caldate_to_mjd(year, month, day, hour, minute, second) + JD_MJD_OFFSET


def jd_to_mjd(jd: float) -> float:
    """Convert Julian Date to Modified Julian Date."""
    return jd - JD_MJD_OFFSET


def mjd_to_jd(mjd: float) -> float:
    """Convert Modified Julian Date to Julian Date."""
    return mjd + JD_MJD_OFFSET


def jd_utc_to_tt(jd_utc: float) -> float:
    """Convert a UTC Julian Date to Terrestrial Time.

    TT = UTC + (TAI-UTC) + TT_TAI, where TAI-UTC is the leap second count.
    No Earth orientation data is required.

    Args:
        jd_utc: Julian Date (UTC).

    Returns:
        Julian Date (TT).

    Raises:
        DataCoverageError: If the epoch precedes the leap-second table.

    Examples:
        ```python
        from framejax.time import jd_utc_to_tt
        jd_tt = jd_utc_to_tt(2451545.0)  # 64.184 s later
        ```
    """
    jd_utc = float(jd_utc)
    tai_utc = leap_seconds_tai_utc(jd_to_mjd(jd_utc))
    return jd_utc + (tai_utc + TT_TAI) / SECONDS_PER_DAY


def jd_utc_to_ut1(jd_utc: float, eop=None) -> float:
    """Convert a UTC Julian Date to UT1.

    With Earth orientation data the UT1-UTC offset is interpolated at the
    UTC epoch.  Without it, UT1 is taken equal to UTC: an approximation
    accurate to the size of UT1-UTC (under 0.9 s by construction of UTC).

    Args:
        jd_utc: Julian Date (UTC).
        eop: Optional EOP data (either model) providing UT1-UTC.

    Returns:
        Julian Date (UT1).

    Raises:
        DataCoverageError: If ``eop`` is given and does not cover the epoch.
    """
    from framejax.eop._lookup import get_ut1_utc

    jd_utc = float(jd_utc)
    if eop is None:
        logger.debug("No EOP data supplied; assuming UT1 = UTC at JD %.9f", jd_utc)
        return jd_utc

    ut1_utc = float(get_ut1_utc(eop, jd_to_mjd(jd_utc)))
    return jd_utc + ut1_utc / SECONDS_PER_DAY
