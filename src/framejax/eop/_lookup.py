"""EOP interpolation and query functions.

Each accessor linearly interpolates one or two EOP series at a Modified
Julian Date and converts angles from arcseconds to radians.  Queries are
coverage-checked: an epoch outside ``[mjd_min, mjd_max]`` or a NaN
(unpublished) value at the epoch raises :class:`DataCoverageError` rather
than returning a silent zero or a clamped boundary value.

The coverage check inspects concrete values, so the accessors run eagerly.
:func:`_interpolate_scalar` itself uses only JAX primitives
(``jnp.searchsorted``, indexing, ``jnp.where``) and is traceable.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from framejax.constants import AS2RAD
from framejax.eop._types import EOPData, EOPDataIAU1980, EOPDataIAU2000A
from framejax.errors import DataCoverageError


def _require_eop(eop: object) -> None:
    if not isinstance(eop, (EOPDataIAU1980, EOPDataIAU2000A)):
        raise TypeError(
            f"Expected EOPDataIAU1980 or EOPDataIAU2000A, got {type(eop).__name__}"
        )


def _interpolate_scalar(eop: EOPData, mjd: Array, values: Array) -> Array:
    """Linearly interpolate a single EOP field at the given MJD.

    Uses ``jnp.searchsorted`` for O(log n) lookup, then linear interpolation
    between bracketing points.

    Args:
        eop: EOP dataset with sorted MJD array.
        mjd: Scalar MJD to query.
        values: The EOP field array to interpolate, shape ``(N,)``.

    Returns:
        Interpolated scalar value.
    """
    n = eop.mjd.shape[0]

    # Binary search: idx is the insertion point (right side)
    idx = jnp.searchsorted(eop.mjd, mjd, side="right")

    # Bracket indices, clamped to valid range
    idx_lo = jnp.clip(idx - 1, 0, n - 1)
    idx_hi = jnp.clip(idx, 0, n - 1)

    mjd_lo = eop.mjd[idx_lo]
    mjd_hi = eop.mjd[idx_hi]
    val_lo = values[idx_lo]
    val_hi = values[idx_hi]

    # Linear interpolation fraction (safe division: if mjd_lo == mjd_hi, frac=0)
    dmjd = mjd_hi - mjd_lo
    frac = jnp.where(dmjd > 0.0, (mjd - mjd_lo) / dmjd, 0.0)

    # On a sample the next value is not needed, and may be unpublished (NaN)
    return jnp.where(frac == 0.0, val_lo, val_lo + frac * (val_hi - val_lo))


def check_coverage(eop: EOPData, mjd: ArrayLike) -> None:
    """Raise if ``mjd`` lies outside the range covered by ``eop``.

    Args:
        eop: EOP dataset (either model).
        mjd: Modified Julian Date to check.

    Raises:
        TypeError: If ``eop`` is not an EOP dataset.
        DataCoverageError: If ``mjd`` is before ``mjd_min`` or after ``mjd_max``.
    """
    _require_eop(eop)
    mjd = float(mjd)
    mjd_min = float(eop.mjd_min)
    mjd_max = float(eop.mjd_max)
    if not mjd_min <= mjd <= mjd_max:
        raise DataCoverageError(
            f"MJD {mjd:.6f} is outside the {eop.model.value} EOP data range "
            f"[{mjd_min:.6f}, {mjd_max:.6f}]"
        )


def _query(eop: EOPData, mjd: ArrayLike, values: Array, name: str) -> Array:
    check_coverage(eop, mjd)
    value = _interpolate_scalar(eop, jnp.asarray(mjd, dtype=eop.mjd.dtype), values)
    if bool(jnp.isnan(value)):
        raise DataCoverageError(
            f"EOP series {name!r} has no published value at MJD {float(mjd):.6f}"
        )
    return value


def get_ut1_utc(eop: EOPData, mjd: ArrayLike) -> Array:
    """Query UT1-UTC offset at the given MJD.

    Args:
        eop: EOP dataset (either model).
        mjd: Modified Julian Date to query.

    Returns:
        UT1-UTC offset [seconds].

    Raises:
        DataCoverageError: If the epoch is not covered.

    Examples:
        ```python
        from framejax.eop import static_eop, get_ut1_utc
        eop = static_eop(ut1_utc=0.1)
        ut1_utc = get_ut1_utc(eop, 59569.0)
        ```
    """
    return _query(eop, mjd, eop.ut1_utc, "ut1_utc")


def get_pm(eop: EOPData, mjd: ArrayLike) -> tuple[Array, Array]:
    """Query polar motion components at the given MJD.

    Args:
        eop: EOP dataset (either model).
        mjd: Modified Julian Date to query.

    Returns:
        Tuple of (x_p, y_p) polar motion components [rad].

    Raises:
        DataCoverageError: If the epoch is not covered.
    """
    pm_x = _query(eop, mjd, eop.pm_x, "pm_x")
    pm_y = _query(eop, mjd, eop.pm_y, "pm_y")
    return pm_x * AS2RAD, pm_y * AS2RAD


def get_nutation_corrections(eop: EOPDataIAU1980, mjd: ArrayLike) -> tuple[Array, Array]:
    """Query the IAU-1980 nutation corrections at the given MJD.

    Args:
        eop: IAU-1980 EOP dataset.
        mjd: Modified Julian Date to query.

    Returns:
        Tuple of (dEps, dPsi) corrections to the nutation in obliquity
        and in longitude [rad].

    Raises:
        TypeError: If ``eop`` is not an :class:`EOPDataIAU1980`.
        DataCoverageError: If the epoch is not covered or the corrections
            are not published for it.
    """
    if not isinstance(eop, EOPDataIAU1980):
        raise TypeError(
            f"Nutation corrections dPsi/dEps require EOPDataIAU1980, got {type(eop).__name__}"
        )
    d_eps = _query(eop, mjd, eop.dEps, "dEps")
    d_psi = _query(eop, mjd, eop.dPsi, "dPsi")
    return d_eps * AS2RAD, d_psi * AS2RAD


def get_cip_corrections(eop: EOPDataIAU2000A, mjd: ArrayLike) -> tuple[Array, Array]:
    """Query the IAU-2000A celestial pole offsets at the given MJD.

    Args:
        eop: IAU-2000A EOP dataset.
        mjd: Modified Julian Date to query.

    Returns:
        Tuple of (dX, dY) celestial pole offsets [rad].

    Raises:
        TypeError: If ``eop`` is not an :class:`EOPDataIAU2000A`.
        DataCoverageError: If the epoch is not covered or the offsets
            are not published for it.
    """
    if not isinstance(eop, EOPDataIAU2000A):
        raise TypeError(
            f"Celestial pole offsets dX/dY require EOPDataIAU2000A, got {type(eop).__name__}"
        )
    dx = _query(eop, mjd, eop.dX, "dX")
    dy = _query(eop, mjd, eop.dY, "dY")
    return dx * AS2RAD, dy * AS2RAD


def get_lod(eop: EOPData, mjd: ArrayLike) -> Array:
    """Query length-of-day excess at the given MJD.

    Args:
        eop: EOP dataset (either model).
        mjd: Modified Julian Date to query.

    Returns:
        Length of day excess [seconds].

    Raises:
        DataCoverageError: If the epoch is not covered or LOD is not
            published for it.
    """
    return _query(eop, mjd, eop.lod, "lod")
