"""Astronomical series behind the elementary frame rotations.

Translations of the IAU SOFA routines needed by the IAU-76/FK5 and
IAU-2006/2010 frame chains.  The two series that need large coefficient
tables (the 106-term IAU-1980 nutation and the IAU-2006/2000A CIP X, Y and
CIO locator s) are evaluated with ERFA, the BSD-licensed SOFA port exposed
by ``pyerfa``; those two functions take concrete dates and run eagerly.
Uses routines and computations derived from software provided by SOFA
under license to the user. Does not itself constitute software provided
by and/or endorsed by SOFA.

Dates are 2-part Julian Dates ``(date1, date2)``; callers pass
``(MJD_ZERO, mjd)``.  The date polynomials are evaluated on the host in
float64 whatever the configured dtype, and only the resulting angles are
returned as JAX arrays of :func:`~framejax.config.get_dtype`.
"""

from __future__ import annotations

import erfa
import jax.numpy as jnp
import numpy as np
from jax import Array

from framejax.config import get_dtype
from framejax.utils import wrap_to_2pi

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

DJ00: float = 2451545.0
"""Julian Date of J2000.0."""

DJC: float = 36525.0
"""Days per Julian century."""

DAS2R: float = 4.848136811095359935899141e-6
"""Arcseconds to radians."""

DS2R: float = 7.272205216643039903848712e-5
"""Seconds of time to radians."""

D2PI: float = 6.283185307179586476925287
"""2*pi."""

DAYSEC: float = 86400.0
"""Seconds per day."""

MJD_ZERO: float = 2400000.5
"""Julian Date of MJD zero-point."""

JD_EQEQ_KINEMATIC: float = 2450449.5
"""Julian Date (TT) of 1997-02-27, from which the equation of the equinoxes
includes the kinematic terms of the Moon's node."""


def _dates(date1, date2) -> tuple[np.ndarray, np.ndarray]:
    # A float32 MJD resolves only ~0.004 day of Earth rotation
    return np.asarray(date1, dtype=np.float64), np.asarray(date2, dtype=np.float64)


def _angle(value) -> Array:
    return jnp.asarray(value, dtype=get_dtype())


# ---------------------------------------------------------------------------
# IAU-76/FK5
# ---------------------------------------------------------------------------


def obl80(date1, date2) -> Array:
    """Mean obliquity of the ecliptic, IAU 1980 model.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        Obliquity of the ecliptic in radians.
    """
    date1, date2 = _dates(date1, date2)
    t = ((date1 - DJ00) + date2) / DJC
    return _angle(DAS2R * (84381.448 + (-46.8150 + (-0.00059 + 0.001813 * t) * t) * t))


def prec76(date1, date2) -> tuple[Array, Array, Array]:
    """IAU 1976 precession angles from J2000.0 to the given date.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        Tuple of (zeta, z, theta) equatorial precession angles in radians.
    """
    date1, date2 = _dates(date1, date2)
    t = ((date1 - DJ00) + date2) / DJC

    w = 2306.2181
    zeta = (w + (0.30188 + 0.017998 * t) * t) * t * DAS2R
    z = (w + (1.09468 + 0.018203 * t) * t) * t * DAS2R
    theta = (2004.3109 + (-0.42665 - 0.041833 * t) * t) * t * DAS2R
    return _angle(zeta), _angle(z), _angle(theta)


def nutation_fk5(date1, date2) -> tuple[Array, Array, Array]:
    """Mean obliquity and nutation, IAU 1980 theory.

    The nutation series is evaluated with ``erfa.nut80``.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        Tuple of (eps0, deps, dpsi): mean obliquity, nutation in obliquity
        and nutation in longitude, all in radians.
    """
    dpsi, deps = erfa.nut80(float(date1), float(date2))
    eps0 = obl80(date1, date2)
    return eps0, _angle(deps), _angle(dpsi)


def eqeq_fk5(date1, date2, dpsi: Array, eps0: Array) -> Array:
    """Equation of the equinoxes, IAU 1994 model.

    ``dpsi * cos(eps0)`` plus, from 1997-02-27 onwards, the kinematic terms
    ``0.00264" sin(om) + 0.000063" sin(2 om)`` of the Moon's node ``om``.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).
        dpsi: Nutation in longitude, including any EOP correction [rad].
        eps0: Mean obliquity of the ecliptic [rad].

    Returns:
        Equation of the equinoxes in radians.
    """
    date1, date2 = _dates(date1, date2)
    t = ((date1 - DJ00) + date2) / DJC

    # Longitude of the mean ascending node of the lunar orbit
    om = (
        (450160.280 + (-482890.539 + (7.455 + 0.008 * t) * t) * t) * DAS2R
        + np.fmod(-5.0 * t, 1.0) * D2PI
    )

    kinematic = (0.00264 * np.sin(om) + 0.000063 * np.sin(om + om)) * DAS2R
    kinematic = np.where(date1 + date2 > JD_EQEQ_KINEMATIC, kinematic, 0.0)

    return dpsi * jnp.cos(eps0) + _angle(kinematic)


def gmst82(dj1, dj2) -> Array:
    """Greenwich mean sidereal time, IAU 1982 model.

    Args:
        dj1: UT1 as 2-part Julian Date (part 1).
        dj2: UT1 as 2-part Julian Date (part 2).

    Returns:
        Greenwich mean sidereal time in radians (0 to 2*pi).
    """
    # Coefficients of IAU 1982 GMST-UT1 model
    A = 24110.54841 - DAYSEC / 2.0
    B = 8640184.812866
    C = 0.093104
    D = -6.2e-6

    dj1, dj2 = _dates(dj1, dj2)

    # Julian centuries since fundamental epoch
    t = (dj1 - DJ00 + dj2) / DJC

    # Fractional part of JD(UT1), in seconds
    f = DAYSEC * (np.fmod(dj1, 1.0) + np.fmod(dj2, 1.0))

    return _angle(wrap_to_2pi(DS2R * ((A + (B + (C + D * t) * t) * t) + f)))


# ---------------------------------------------------------------------------
# IAU-2006/2010 (CIO based)
# ---------------------------------------------------------------------------


def era00(dj1, dj2) -> Array:
    """Earth Rotation Angle (IAU 2000 model).

    Args:
        dj1: UT1 as 2-part Julian Date (part 1).
        dj2: UT1 as 2-part Julian Date (part 2).

    Returns:
        Earth Rotation Angle in radians (0 to 2*pi).
    """
    dj1, dj2 = _dates(dj1, dj2)

    # Days since J2000.0
    t = dj1 + dj2 - DJ00

    # Fractional part of dj1 + dj2
    f = np.fmod(dj1, 1.0) + np.fmod(dj2, 1.0)

    return _angle(wrap_to_2pi(D2PI * (f + 0.7790572732640 + 0.00273781191135448 * t)))


def sp00(date1, date2) -> Array:
    """TIO locator s', positioning the Terrestrial Intermediate Origin.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        TIO locator s' in radians.
    """
    date1, date2 = _dates(date1, date2)
    t = ((date1 - DJ00) + date2) / DJC
    return _angle(-47e-6 * t * DAS2R)


def cip_xys06a(date1, date2) -> tuple[Array, Array, Array]:
    """CIP X, Y coordinates and CIO locator s, IAU 2006/2000A.

    Evaluated with ``erfa.xys06a``.

    Args:
        date1: TT as 2-part Julian Date (part 1).
        date2: TT as 2-part Julian Date (part 2).

    Returns:
        Tuple of (x, y, s) where x, y are CIP coordinates and s is the
        CIO locator, all in radians.
    """
    x, y, s = erfa.xys06a(float(date1), float(date2))
    return _angle(x), _angle(y), _angle(s)
