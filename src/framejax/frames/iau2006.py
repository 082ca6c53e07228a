"""Elementary rotations of the IAU-2006/2010 CIO-based frame chain.

    ITRF --polar motion, s'--> TIRS --Earth rotation angle--> CIRS --CIP X, Y, s--> GCRF

Each function returns the rotation aligning its origin frame with its
destination frame in the requested representation.  Epochs are Julian
Dates; angles are radians.

References:

    1. Petit, G., & Luzum, B. (2010). *IERS Conventions (2010)*. IERS Technical Note 36.
"""

from __future__ import annotations

import jax.numpy as jnp

from framejax.attitude_representations import Representation, Rotation, compose_rotations
from framejax.sofa import MJD_ZERO, cip_xys06a, era00, sp00


def rotation_itrf_to_tirs_iau2006(representation, jd_tt: float, x_p, y_p) -> Rotation:
    """Rotation from ITRF to TIRS (polar motion and TIO locator).

    Args:
        representation: Output representation.
        jd_tt: Julian Date (TT).
        x_p: Polar motion x-component [rad].
        y_p: Polar motion y-component [rad].

    Returns:
        Rotation: ``Rx(y_p)``, then ``Ry(x_p)``, then ``Rz(-s')``.
    """
    rep = Representation.coerce(representation)
    sp = sp00(MJD_ZERO, jd_tt - MJD_ZERO)
    return compose_rotations(rep.rotation_x(y_p), rep.rotation_y(x_p), rep.rotation_z(-sp))


def rotation_tirs_to_cirs_iau2006(representation, jd_ut1: float) -> Rotation:
    """Rotation from TIRS to CIRS (Earth rotation angle).

    Args:
        representation: Output representation.
        jd_ut1: Julian Date (UT1).

    Returns:
        Rotation: ``Rz(-ERA)``.
    """
    rep = Representation.coerce(representation)
    return rep.rotation_z(-era00(MJD_ZERO, jd_ut1 - MJD_ZERO))


def rotation_cirs_to_gcrf_iau2006(representation, jd_tt: float, d_x=0.0, d_y=0.0) -> Rotation:
    """Rotation from CIRS to GCRF (bias, precession and nutation).

    Args:
        representation: Output representation.
        jd_tt: Julian Date (TT).
        d_x: EOP celestial pole offset dX [rad]. Default: 0.
        d_y: EOP celestial pole offset dY [rad]. Default: 0.

    Returns:
        Rotation: ``Rz(E + s)``, then ``Ry(-d)``, then ``Rz(-E)``, the
        inverse of the SOFA celestial-to-intermediate matrix.
    """
    rep = Representation.coerce(representation)
    x, y, s = cip_xys06a(MJD_ZERO, jd_tt - MJD_ZERO)
    x = x + d_x
    y = y + d_y

    r2 = x * x + y * y
    e = jnp.where(r2 > 0.0, jnp.arctan2(y, x), 0.0)
    d = jnp.arctan(jnp.sqrt(r2 / (1.0 - r2)))

    return compose_rotations(rep.rotation_z(e + s), rep.rotation_y(-d), rep.rotation_z(-e))


def rotation_itrf_to_gcrf_iau2006(
    representation, jd_ut1: float, jd_tt: float, x_p, y_p, d_x=0.0, d_y=0.0
) -> Rotation:
    """Rotation from ITRF to GCRF through the full CIO-based chain.

    Args:
        representation: Output representation.
        jd_ut1: Julian Date (UT1).
        jd_tt: Julian Date (TT).
        x_p: Polar motion x-component [rad].
        y_p: Polar motion y-component [rad].
        d_x: EOP celestial pole offset dX [rad]. Default: 0.
        d_y: EOP celestial pole offset dY [rad]. Default: 0.

    Returns:
        Rotation: ITRF to TIRS, TIRS to CIRS, CIRS to GCRF.
    """
    rep = Representation.coerce(representation)
    return compose_rotations(
        rotation_itrf_to_tirs_iau2006(rep, jd_tt, x_p, y_p),
        rotation_tirs_to_cirs_iau2006(rep, jd_ut1),
        rotation_cirs_to_gcrf_iau2006(rep, jd_tt, d_x, d_y),
    )
