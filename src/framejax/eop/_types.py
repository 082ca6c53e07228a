"""Type definitions for Earth Orientation Parameters (EOP).

Two immutable data types exist, one per precession-nutation model:

- :class:`EOPDataIAU1980`: polar motion, UT1-UTC and the nutation
  corrections dPsi/dEps of the IAU-1980 theory (FK5 frames).
- :class:`EOPDataIAU2000A`: polar motion, UT1-UTC and the celestial pole
  offsets dX/dY of the IAU-2006/2000A theory (CIO-based frames).

The type of the data passed to the frame dispatcher selects the model
family.  Both are :class:`~typing.NamedTuple`, which JAX treats as a pytree
automatically, so they can be passed through ``jax.jit`` and ``jax.vmap``.

Angles are stored in arcseconds, as published by the IERS; the accessors in
:mod:`framejax.eop._lookup` convert to radians on query.
"""

from __future__ import annotations

import enum
from typing import NamedTuple, Union

from jax import Array


class EOPModel(enum.Enum):
    """Precession-nutation model an EOP dataset belongs to.

    Attributes:
        IAU1980: Nutation corrections dPsi, dEps (``finals.all``).
        IAU2000A: Celestial pole offsets dX, dY (``finals.all.iau2000.txt``).
    """

    IAU1980 = "IAU1980"
    IAU2000A = "IAU2000A"


class EOPDataIAU1980(NamedTuple):
    """Earth Orientation Parameters for the IAU-1980 (FK5) model.

    Missing optional values (nutation corrections and LOD in prediction
    regions) are stored as NaN.

    Attributes:
        mjd: Sorted Modified Julian Dates (UTC), shape ``(N,)``.
        pm_x: Polar motion x-component [arcsec], shape ``(N,)``.
        pm_y: Polar motion y-component [arcsec], shape ``(N,)``.
        ut1_utc: UT1-UTC offset [seconds], shape ``(N,)``.
        lod: Length of day excess [seconds], shape ``(N,)``.
        dPsi: Nutation correction in longitude [arcsec], shape ``(N,)``.
        dEps: Nutation correction in obliquity [arcsec], shape ``(N,)``.
        mjd_min: Scalar, first MJD in the dataset.
        mjd_max: Scalar, last MJD in the dataset.
        mjd_last_nutation: Scalar, last MJD with valid dPsi/dEps data.
    """

    mjd: Array
    pm_x: Array
    pm_y: Array
    ut1_utc: Array
    lod: Array
    dPsi: Array
    dEps: Array
    mjd_min: Array
    mjd_max: Array
    mjd_last_nutation: Array

    @property
    def model(self) -> EOPModel:
        """Always :attr:`EOPModel.IAU1980`."""
        return EOPModel.IAU1980


class EOPDataIAU2000A(NamedTuple):
    """Earth Orientation Parameters for the IAU-2006/2000A (CIO) model.

    Missing optional values (pole offsets and LOD in prediction regions)
    are stored as NaN.

    Attributes:
        mjd: Sorted Modified Julian Dates (UTC), shape ``(N,)``.
        pm_x: Polar motion x-component [arcsec], shape ``(N,)``.
        pm_y: Polar motion y-component [arcsec], shape ``(N,)``.
        ut1_utc: UT1-UTC offset [seconds], shape ``(N,)``.
        lod: Length of day excess [seconds], shape ``(N,)``.
        dX: Celestial pole offset X [arcsec], shape ``(N,)``.
        dY: Celestial pole offset Y [arcsec], shape ``(N,)``.
        mjd_min: Scalar, first MJD in the dataset.
        mjd_max: Scalar, last MJD in the dataset.
        mjd_last_nutation: Scalar, last MJD with valid dX/dY data.
    """

    mjd: Array
    pm_x: Array
    pm_y: Array
    ut1_utc: Array
    lod: Array
    dX: Array
    dY: Array
    mjd_min: Array
    mjd_max: Array
    mjd_last_nutation: Array

    @property
    def model(self) -> EOPModel:
        """Always :attr:`EOPModel.IAU2000A`."""
        return EOPModel.IAU2000A


EOPData = Union[EOPDataIAU1980, EOPDataIAU2000A]
"""Either EOP variant."""
