"""Elementary rotations of the IAU-76/FK5 frame chain.

The equinox-based reduction relates the Earth-fixed and inertial frames
through the chain::

    ITRF --polar motion--> PEF --GAST--> TOD --nutation--> MOD --precession--> GCRF

with TEME reached from PEF by the mean sidereal time alone.  Each function
returns the rotation aligning its origin frame with its destination frame
in the requested :class:`~framejax.attitude_representations.Representation`,
built from elementary axis rotations so matrix and quaternion results are
the same rotation.

Epochs are Julian Dates (``jd_ut1``, ``jd_tt``); angles are radians.

References:

    1. Vallado, D. A. (2013). *Fundamentals of Astrodynamics and Applications*. 4th ed.
    2. IERS Technical Note 21 (1996). *IERS Conventions*.
"""

from __future__ import annotations

from framejax.attitude_representations import Representation, Rotation, compose_rotations
from framejax.sofa import MJD_ZERO, eqeq_fk5, gmst82, nutation_fk5, prec76


def _gast(jd_ut1: float, jd_tt: float, dpsi, eps0):
    """Greenwich apparent sidereal time from GMST82 and the equation of the equinoxes."""
    return gmst82(MJD_ZERO, jd_ut1 - MJD_ZERO) + eqeq_fk5(MJD_ZERO, jd_tt - MJD_ZERO, dpsi, eps0)


def rotation_itrf_to_pef_fk5(representation, x_p, y_p) -> Rotation:
    """Rotation from ITRF to PEF (polar motion).

    Args:
        representation: Output representation.
        x_p: Polar motion x-component [rad].
        y_p: Polar motion y-component [rad].

    Returns:
        Rotation: ``Rx(y_p)`` followed by ``Ry(x_p)``.
    """
    rep = Representation.coerce(representation)
    return compose_rotations(rep.rotation_x(y_p), rep.rotation_y(x_p))


def rotation_pef_to_tod_fk5(representation, jd_ut1: float, jd_tt: float, d_psi=0.0) -> Rotation:
    """Rotation from PEF to TOD (Greenwich apparent sidereal time).

    Args:
        representation: Output representation.
        jd_ut1: Julian Date (UT1).
        jd_tt: Julian Date (TT).
        d_psi: EOP correction to the nutation in longitude [rad]. Default: 0.

    Returns:
        Rotation: ``Rz(-GAST)``.
    """
    rep = Representation.coerce(representation)
    eps0, _, dpsi = nutation_fk5(MJD_ZERO, jd_tt - MJD_ZERO)
    gast = _gast(jd_ut1, jd_tt, dpsi + d_psi, eps0)
    return rep.rotation_z(-gast)


def rotation_pef_to_mod_fk5(
    representation, jd_ut1: float, jd_tt: float, d_eps=0.0, d_psi=0.0
) -> Rotation:
    """Rotation from PEF to MOD (sidereal time and nutation).

    Args:
        representation: Output representation.
        jd_ut1: Julian Date (UT1).
        jd_tt: Julian Date (TT).
        d_eps: EOP correction to the nutation in obliquity [rad]. Default: 0.
        d_psi: EOP correction to the nutation in longitude [rad]. Default: 0.

    Returns:
        Rotation: PEF to TOD followed by TOD to MOD.
    """
    rep = Representation.coerce(representation)
    eps0, deps, dpsi = nutation_fk5(MJD_ZERO, jd_tt - MJD_ZERO)
    deps = deps + d_eps
    dpsi = dpsi + d_psi
    eps = eps0 + deps

    gast = _gast(jd_ut1, jd_tt, dpsi, eps0)

    return compose_rotations(
        rep.rotation_z(-gast),
        rep.rotation_x(eps),
        rep.rotation_z(dpsi),
        rep.rotation_x(-eps0),
    )


def rotation_pef_to_teme(representation, jd_ut1: float) -> Rotation:
    """Rotation from PEF to TEME (Greenwich mean sidereal time).

    Args:
        representation: Output representation.
        jd_ut1: Julian Date (UT1).

    Returns:
        Rotation: ``Rz(-GMST)``.
    """
    rep = Representation.coerce(representation)
    return rep.rotation_z(-gmst82(MJD_ZERO, jd_ut1 - MJD_ZERO))


def rotation_mod_to_gcrf_fk5(representation, jd_tt: float) -> Rotation:
    """Rotation from MOD to GCRF (IAU-76 precession).

    The frame bias between GCRF and the FK5 J2000 frame (~0.02 arcsec) is
    not modelled, so the same rotation serves MOD to J2000.

    Args:
        representation: Output representation.
        jd_tt: Julian Date (TT).

    Returns:
        Rotation: ``Rz(z)``, then ``Ry(-theta)``, then ``Rz(zeta)``.
    """
    rep = Representation.coerce(representation)
    zeta, z, theta = prec76(MJD_ZERO, jd_tt - MJD_ZERO)
    return compose_rotations(
        rep.rotation_z(z),
        rep.rotation_y(-theta),
        rep.rotation_z(zeta),
    )


def rotation_itrf_to_gcrf_fk5(
    representation, jd_ut1: float, jd_tt: float, x_p, y_p, d_eps=0.0, d_psi=0.0
) -> Rotation:
    """Rotation from ITRF to GCRF through the full FK5 chain.

    Args:
        representation: Output representation.
        jd_ut1: Julian Date (UT1).
        jd_tt: Julian Date (TT).
        x_p: Polar motion x-component [rad].
        y_p: Polar motion y-component [rad].
        d_eps: EOP correction to the nutation in obliquity [rad]. Default: 0.
        d_psi: EOP correction to the nutation in longitude [rad]. Default: 0.

    Returns:
        Rotation: ITRF to PEF, PEF to MOD, MOD to GCRF.
    """
    rep = Representation.coerce(representation)
    return compose_rotations(
        rotation_itrf_to_pef_fk5(rep, x_p, y_p),
        rotation_pef_to_mod_fk5(rep, jd_ut1, jd_tt, d_eps, d_psi),
        rotation_mod_to_gcrf_fk5(rep, jd_tt),
    )
