"""Routing table of the frame-graph dispatcher.

Each :class:`Route` lists, in origin-to-destination order, the elementary
rotations linking an Earth-fixed frame to another frame of the same model
family, together with the symbolic parameters every step consumes.  Only
the ECEF-rooted direction is tabulated; the reverse conversion is the
inverse of the same route.

A route with ``requires_eop=False`` may be evaluated without EOP data.
The dispatcher then substitutes ``JD_UT1 := JD_UTC`` and zero corrections.
"""

from __future__ import annotations

import enum
from typing import Callable, NamedTuple

from framejax.frames import fk5, iau2006
from framejax.frames._types import Frame, ModelFamily


class Param(enum.Enum):
    """Parameter a routing step passes to its elementary rotation.

    Attributes:
        JD_UT1: Julian Date (UT1).
        JD_TT: Julian Date (TT).
        X_P: Polar motion x-component [rad].
        Y_P: Polar motion y-component [rad].
        D_EPS: Nutation correction in obliquity [rad] (IAU1980 EOP).
        D_PSI: Nutation correction in longitude [rad] (IAU1980 EOP).
        D_X: Celestial pole offset dX [rad] (IAU2000A EOP).
        D_Y: Celestial pole offset dY [rad] (IAU2000A EOP).
        ZERO: A correction deliberately fixed at zero.
    """

    JD_UT1 = "jd_ut1"
    JD_TT = "jd_tt"
    X_P = "x_p"
    Y_P = "y_p"
    D_EPS = "d_eps"
    D_PSI = "d_psi"
    D_X = "d_x"
    D_Y = "d_y"
    ZERO = "zero"


class Step(NamedTuple):
    """One elementary rotation of a route.

    Attributes:
        name: Human readable ``"ORIGIN->DESTINATION"`` label.
        provider: Elementary rotation, called as ``provider(representation, *args)``.
        params: Parameters bound, in order, to ``args``.
    """

    name: str
    provider: Callable
    params: tuple[Param, ...]


class Route(NamedTuple):
    """An ordered chain of steps from an ECEF frame to a frame of the same family."""

    family: ModelFamily
    origin: Frame
    destination: Frame
    steps: tuple[Step, ...]
    requires_eop: bool


_P = Param

ITRF_TO_PEF = Step("ITRF->PEF", fk5.rotation_itrf_to_pef_fk5, (_P.X_P, _P.Y_P))
PEF_TO_MOD = Step("PEF->MOD", fk5.rotation_pef_to_mod_fk5, (_P.JD_UT1, _P.JD_TT, _P.D_EPS, _P.D_PSI))
# J2000 shares the MOD->GCRF precession step; its nutation corrections are always zero
PEF_TO_MOD_J2000 = Step("PEF->MOD", fk5.rotation_pef_to_mod_fk5, (_P.JD_UT1, _P.JD_TT, _P.ZERO, _P.ZERO))
PEF_TO_TOD = Step("PEF->TOD", fk5.rotation_pef_to_tod_fk5, (_P.JD_UT1, _P.JD_TT, _P.D_PSI))
PEF_TO_TEME = Step("PEF->TEME", fk5.rotation_pef_to_teme, (_P.JD_UT1,))
MOD_TO_GCRF = Step("MOD->GCRF", fk5.rotation_mod_to_gcrf_fk5, (_P.JD_TT,))

ITRF_TO_TIRS = Step("ITRF->TIRS", iau2006.rotation_itrf_to_tirs_iau2006, (_P.JD_TT, _P.X_P, _P.Y_P))
TIRS_TO_CIRS = Step("TIRS->CIRS", iau2006.rotation_tirs_to_cirs_iau2006, (_P.JD_UT1,))
CIRS_TO_GCRF = Step("CIRS->GCRF", iau2006.rotation_cirs_to_gcrf_iau2006, (_P.JD_TT, _P.D_X, _P.D_Y))


def _route(family, origin, destination, steps, requires_eop):
    return (family, origin, destination), Route(family, origin, destination, steps, requires_eop)


_F = Frame
_FK5 = ModelFamily.FK5
_IAU2006 = ModelFamily.IAU2006

ROUTES: dict[tuple[ModelFamily, Frame, Frame], Route] = dict(
    [
        # IAU-76/FK5
        _route(_FK5, _F.ITRF, _F.PEF, (ITRF_TO_PEF,), True),
        _route(_FK5, _F.ITRF, _F.GCRF, (ITRF_TO_PEF, PEF_TO_MOD, MOD_TO_GCRF), True),
        _route(_FK5, _F.ITRF, _F.J2000, (ITRF_TO_PEF, PEF_TO_MOD_J2000, MOD_TO_GCRF), True),
        _route(_FK5, _F.ITRF, _F.MOD, (ITRF_TO_PEF, PEF_TO_MOD), True),
        _route(_FK5, _F.ITRF, _F.TOD, (ITRF_TO_PEF, PEF_TO_TOD), True),
        _route(_FK5, _F.ITRF, _F.TEME, (ITRF_TO_PEF, PEF_TO_TEME), True),
        _route(_FK5, _F.PEF, _F.GCRF, (PEF_TO_MOD, MOD_TO_GCRF), False),
        _route(_FK5, _F.PEF, _F.J2000, (PEF_TO_MOD_J2000, MOD_TO_GCRF), False),
        _route(_FK5, _F.PEF, _F.MOD, (PEF_TO_MOD,), False),
        _route(_FK5, _F.PEF, _F.TOD, (PEF_TO_TOD,), False),
        _route(_FK5, _F.PEF, _F.TEME, (PEF_TO_TEME,), False),
        # IAU-2006/2010
        _route(_IAU2006, _F.ITRF, _F.TIRS, (ITRF_TO_TIRS,), True),
        _route(_IAU2006, _F.ITRF, _F.CIRS, (ITRF_TO_TIRS, TIRS_TO_CIRS), True),
        _route(_IAU2006, _F.ITRF, _F.GCRF, (ITRF_TO_TIRS, TIRS_TO_CIRS, CIRS_TO_GCRF), True),
        _route(_IAU2006, _F.TIRS, _F.CIRS, (TIRS_TO_CIRS,), False),
        _route(_IAU2006, _F.TIRS, _F.GCRF, (TIRS_TO_CIRS, CIRS_TO_GCRF), False),
    ]
)
"""Routes keyed by ``(family, ecef_origin, destination)``."""
