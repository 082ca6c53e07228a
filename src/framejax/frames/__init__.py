"""Frame transformations.

This sub-module computes the rotation between Earth-fixed (ECEF) and
Earth-centered inertial (ECI) reference frames for two models:

- **IAU-76/FK5**: ``ITRF``, ``PEF`` and ``MOD``, ``TOD``, ``J2000``,
  ``TEME``, ``GCRF``; corrections from :class:`~framejax.eop.EOPDataIAU1980`.
- **IAU-2006/2010**: ``ITRF``, ``TIRS`` and ``CIRS``, ``GCRF``;
  corrections from :class:`~framejax.eop.EOPDataIAU2000A`.

:func:`rotate` is the single entry point; the elementary rotations of each
chain live in :mod:`framejax.frames.fk5` and :mod:`framejax.frames.iau2006`.
"""

from .fk5 import (
    rotation_itrf_to_gcrf_fk5,
    rotation_itrf_to_pef_fk5,
    rotation_mod_to_gcrf_fk5,
    rotation_pef_to_mod_fk5,
    rotation_pef_to_teme,
    rotation_pef_to_tod_fk5,
)
from .iau2006 import (
    rotation_cirs_to_gcrf_iau2006,
    rotation_itrf_to_gcrf_iau2006,
    rotation_itrf_to_tirs_iau2006,
    rotation_tirs_to_cirs_iau2006,
)
from ._routes import ROUTES, Param, Route, Step
from ._types import Frame, ModelFamily
from .dispatch import (
    RoutePlan,
    plan_route,
    rotate,
    rotation_ecef_to_ecef,
    rotation_ecef_to_eci,
    rotation_eci_to_ecef,
)
from .states import state_ecef_to_eci, state_eci_to_ecef

__all__ = [
    # Frames and routing
    "Frame",
    "ModelFamily",
    "Param",
    "Route",
    "RoutePlan",
    "ROUTES",
    "Step",
    "plan_route",
    # Dispatcher
    "rotate",
    "rotation_ecef_to_ecef",
    "rotation_ecef_to_eci",
    "rotation_eci_to_ecef",
    "state_ecef_to_eci",
    "state_eci_to_ecef",
    # IAU-76/FK5 elementary rotations
    "rotation_itrf_to_gcrf_fk5",
    "rotation_itrf_to_pef_fk5",
    "rotation_mod_to_gcrf_fk5",
    "rotation_pef_to_mod_fk5",
    "rotation_pef_to_teme",
    "rotation_pef_to_tod_fk5",
    # IAU-2006/2010 elementary rotations
    "rotation_cirs_to_gcrf_iau2006",
    "rotation_itrf_to_gcrf_iau2006",
    "rotation_itrf_to_tirs_iau2006",
    "rotation_tirs_to_cirs_iau2006",
]
