"""State vector transformations between Earth-fixed and inertial frames.

Positions are rotated directly.  Velocities additionally carry the
transport term of the Earth's rotation, applied in the pseudo Earth-fixed
frame of the model (``PEF`` for IAU-76/FK5, ``TIRS`` for IAU-2006/2010)::

    r_eci = R @ r_pef
    v_eci = R @ (v_pef + omega x r_pef)

where ``R`` is the pseudo Earth-fixed to inertial rotation and ``omega``
the Earth's rotation vector.  Polar motion is a pure rotation of
positions and velocities.

All inputs and outputs use SI base units (metres, metres/second).
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from framejax.attitude_representations import Representation
from framejax.config import get_dtype
from framejax.constants import OMEGA_EARTH
from framejax.frames._types import Frame, ModelFamily
from framejax.frames.dispatch import _require, plan_route, rotate
from framejax.time import TimeScale


def _pseudo_earth_fixed(ecef: Frame, eci: Frame, eop) -> Frame:
    if ecef is not Frame.ITRF:
        return ecef
    family = plan_route(ecef, eci, eop).family
    return Frame.PEF if family is ModelFamily.FK5 else Frame.TIRS


def state_ecef_to_eci(
    ecef: Frame | str,
    eci: Frame | str,
    epoch_utc,
    x_ecef: ArrayLike,
    eop=None,
    *,
    eop_time_scale: TimeScale = TimeScale.UTC,
) -> Array:
    """Transform a 6-element state vector from an Earth-fixed to an inertial frame.

    Args:
        ecef: Earth-fixed origin frame (``ITRF``, ``PEF`` or ``TIRS``).
        eci: Inertial destination frame of the same model family.
        epoch_utc: Julian Date (UTC) or UTC :class:`~framejax.epoch.Epoch`.
        x_ecef: 6-element state ``[x, y, z, vx, vy, vz]``. Units: m, m/s.
        eop: Optional EOP data (required for ``ITRF``).
        eop_time_scale: Epoch of the EOP correction lookups.

    Returns:
        6-element inertial state ``[x, y, z, vx, vy, vz]``. Units: m, m/s.

    Raises:
        UnsupportedConversionError: If the frames are not ECEF and ECI.
        FrameError: Any failure of :func:`~framejax.frames.rotate`.

    Examples:
        ```python
        from framejax.frames import state_ecef_to_eci
        x_teme = state_ecef_to_eci("PEF", "TEME", 2451545.0, [6878137.0, 0, 0, 0, 7500.0, 0])
        ```
    """
    ecef = _require(ecef, True, "Origin")
    eci = _require(eci, False, "Destination")
    pseudo = _pseudo_earth_fixed(ecef, eci, eop)

    dtype = get_dtype()
    x_ecef = jnp.asarray(x_ecef, dtype=dtype)
    omega = jnp.array([0.0, 0.0, OMEGA_EARTH], dtype=dtype)

    r = x_ecef[:3]
    v = x_ecef[3:6]

    if pseudo is not ecef:
        pm = rotate(
            Representation.MATRIX, ecef, pseudo, epoch_utc, eop, eop_time_scale=eop_time_scale
        )
        r = pm.apply(r)
        v = pm.apply(v)

    R = rotate(
        Representation.MATRIX, pseudo, eci, epoch_utc, eop, eop_time_scale=eop_time_scale
    )

    r_eci = R.apply(r)
    v_eci = R.apply(v + jnp.cross(omega, r))

    return jnp.concatenate([r_eci, v_eci])


def state_eci_to_ecef(
    eci: Frame | str,
    ecef: Frame | str,
    epoch_utc,
    x_eci: ArrayLike,
    eop=None,
    *,
    eop_time_scale: TimeScale = TimeScale.UTC,
) -> Array:
    """Transform a 6-element state vector from an inertial to an Earth-fixed frame.

    Applies the inverse of :func:`state_ecef_to_eci`.

    Args:
        eci: Inertial origin frame.
        ecef: Earth-fixed destination frame of the same model family.
        epoch_utc: Julian Date (UTC) or UTC :class:`~framejax.epoch.Epoch`.
        x_eci: 6-element state ``[x, y, z, vx, vy, vz]``. Units: m, m/s.
        eop: Optional EOP data (required for ``ITRF``).
        eop_time_scale: Epoch of the EOP correction lookups.

    Returns:
        6-element Earth-fixed state ``[x, y, z, vx, vy, vz]``. Units: m, m/s.
    """
    eci = _require(eci, False, "Origin")
    ecef = _require(ecef, True, "Destination")
    pseudo = _pseudo_earth_fixed(ecef, eci, eop)

    dtype = get_dtype()
    x_eci = jnp.asarray(x_eci, dtype=dtype)
    omega = jnp.array([0.0, 0.0, OMEGA_EARTH], dtype=dtype)

    R = rotate(
        Representation.MATRIX, eci, pseudo, epoch_utc, eop, eop_time_scale=eop_time_scale
    )

    r = R.apply(x_eci[:3])
    v = R.apply(x_eci[3:6]) - jnp.cross(omega, r)

    if pseudo is not ecef:
        pm = rotate(
            Representation.MATRIX, pseudo, ecef, epoch_utc, eop, eop_time_scale=eop_time_scale
        )
        r = pm.apply(r)
        v = pm.apply(v)

    return jnp.concatenate([r, v])
