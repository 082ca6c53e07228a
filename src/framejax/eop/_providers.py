"""Factory functions for creating EOP data instances.

Provides convenience constructors for both EOP models:

- :func:`static_eop`: Constant EOP values (useful for testing or when
  specific values are known).
- :func:`zero_eop`: All-zero EOP.
- :func:`eop_from_arrays`: Build from tabulated host-side sequences.
- :func:`load_eop_from_file`: Load from an IERS standard format file.
"""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Sequence

import jax.numpy as jnp
import numpy as np

from framejax.config import get_dtype
from framejax.eop._parsers import parse_standard_file
from framejax.eop._types import EOPData, EOPDataIAU1980, EOPDataIAU2000A, EOPModel

logger = logging.getLogger(__name__)


def _coerce_model(model: EOPModel | str) -> EOPModel:
    if isinstance(model, EOPModel):
        return model
    try:
        return EOPModel(str(model).upper())
    except ValueError:
        raise ValueError(
            f"Unknown EOP model {model!r}; expected 'IAU1980' or 'IAU2000A'"
        ) from None


def _build(
    model: EOPModel,
    mjd: np.ndarray,
    pm_x: np.ndarray,
    pm_y: np.ndarray,
    ut1_utc: np.ndarray,
    lod: np.ndarray,
    pole_1: np.ndarray,
    pole_2: np.ndarray,
) -> EOPData:
    pole_valid = ~np.isnan(pole_1) & ~np.isnan(pole_2)
    mjd_last_nutation = float(mjd[pole_valid][-1]) if pole_valid.any() else math.nan

    dtype = get_dtype()
    common = dict(
        mjd=jnp.asarray(mjd, dtype=dtype),
        pm_x=jnp.asarray(pm_x, dtype=dtype),
        pm_y=jnp.asarray(pm_y, dtype=dtype),
        ut1_utc=jnp.asarray(ut1_utc, dtype=dtype),
        lod=jnp.asarray(lod, dtype=dtype),
        mjd_min=jnp.array(mjd[0], dtype=dtype),
        mjd_max=jnp.array(mjd[-1], dtype=dtype),
        mjd_last_nutation=jnp.array(mjd_last_nutation, dtype=dtype),
    )
    if model is EOPModel.IAU1980:
        return EOPDataIAU1980(
            dPsi=jnp.asarray(pole_1, dtype=dtype),
            dEps=jnp.asarray(pole_2, dtype=dtype),
            **common,
        )
    return EOPDataIAU2000A(
        dX=jnp.asarray(pole_1, dtype=dtype),
        dY=jnp.asarray(pole_2, dtype=dtype),
        **common,
    )


def eop_from_arrays(
    model: EOPModel | str,
    mjd: Sequence[float],
    pm_x: Sequence[float],
    pm_y: Sequence[float],
    ut1_utc: Sequence[float],
    pole_1: Sequence[float],
    pole_2: Sequence[float],
    lod: Sequence[float] | None = None,
) -> EOPData:
    """Create EOP data from tabulated values.

    Args:
        model: ``EOPModel.IAU1980`` or ``EOPModel.IAU2000A`` (or its name).
        mjd: Strictly increasing Modified Julian Dates (UTC).
        pm_x: Polar motion x-component [arcsec].
        pm_y: Polar motion y-component [arcsec].
        ut1_utc: UT1-UTC offset [seconds].
        pole_1: dPsi (IAU1980) or dX (IAU2000A) [arcsec]. NaN where unpublished.
        pole_2: dEps (IAU1980) or dY (IAU2000A) [arcsec]. NaN where unpublished.
        lod: Length of day excess [seconds]. Default: NaN everywhere.

    Returns:
        EOPDataIAU1980 or EOPDataIAU2000A, according to ``model``.

    Raises:
        ValueError: If the model is unknown, the series are empty or of
            unequal length, or ``mjd`` is not strictly increasing.

    Examples:
        ```python
        from framejax.eop import eop_from_arrays
        eop = eop_from_arrays(
            "IAU1980",
            mjd=[46600.0, 46601.0],
            pm_x=[-0.140682, -0.139851],
            pm_y=[0.333309, 0.333132],
            ut1_utc=[-0.1554, -0.1565],
            pole_1=[-0.052195, -0.052225],
            pole_2=[-0.003875, -0.003893],
        )
        ```
    """
    model = _coerce_model(model)

    mjd_np = np.asarray(mjd, dtype=np.float64)
    if mjd_np.ndim != 1 or mjd_np.size == 0:
        raise ValueError("mjd must be a non-empty 1-D sequence")
    if lod is None:
        lod = np.full_like(mjd_np, np.nan)

    series = [
        np.asarray(values, dtype=np.float64)
        for values in (pm_x, pm_y, ut1_utc, lod, pole_1, pole_2)
    ]
    for name, values in zip(("pm_x", "pm_y", "ut1_utc", "lod", "pole_1", "pole_2"), series):
        if values.shape != mjd_np.shape:
            raise ValueError(
                f"{name} has shape {values.shape}, expected {mjd_np.shape} to match mjd"
            )
    if np.any(np.diff(mjd_np) <= 0.0):
        raise ValueError("mjd must be strictly increasing")

    pm_x_np, pm_y_np, ut1_utc_np, lod_np, pole_1_np, pole_2_np = series
    return _build(model, mjd_np, pm_x_np, pm_y_np, ut1_utc_np, lod_np, pole_1_np, pole_2_np)


def static_eop(
    model: EOPModel | str = EOPModel.IAU1980,
    pm_x: float = 0.0,
    pm_y: float = 0.0,
    ut1_utc: float = 0.0,
    lod: float = 0.0,
    dPsi: float = 0.0,
    dEps: float = 0.0,
    dX: float = 0.0,
    dY: float = 0.0,
    mjd_min: float = 0.0,
    mjd_max: float = 99999.0,
) -> EOPData:
    """Create EOP data with constant values across the full MJD range.

    The resulting dataset contains two points (at mjd_min and mjd_max)
    with identical values, so interpolation returns the constant everywhere.
    Only the correction pair belonging to ``model`` may be non-zero.

    Args:
        model: ``EOPModel.IAU1980`` or ``EOPModel.IAU2000A``. Default: IAU1980.
        pm_x: Polar motion x-component [arcsec]. Default: 0.0.
        pm_y: Polar motion y-component [arcsec]. Default: 0.0.
        ut1_utc: UT1-UTC offset [seconds]. Default: 0.0.
        lod: Length of day excess [seconds]. Default: 0.0.
        dPsi: Nutation correction in longitude [arcsec] (IAU1980). Default: 0.0.
        dEps: Nutation correction in obliquity [arcsec] (IAU1980). Default: 0.0.
        dX: Celestial pole offset X [arcsec] (IAU2000A). Default: 0.0.
        dY: Celestial pole offset Y [arcsec] (IAU2000A). Default: 0.0.
        mjd_min: Start of the valid MJD range. Default: 0.0.
        mjd_max: End of the valid MJD range. Default: 99999.0.

    Returns:
        EOPDataIAU1980 or EOPDataIAU2000A with constant values.

    Raises:
        ValueError: If corrections of the other model are given.

    Examples:
        ```python
        from framejax.eop import static_eop, get_ut1_utc
        eop = static_eop("IAU2000A", ut1_utc=0.1)
        val = get_ut1_utc(eop, 59569.0)  # returns ~0.1
        ```
    """
    model = _coerce_model(model)
    if model is EOPModel.IAU1980:
        if dX != 0.0 or dY != 0.0:
            raise ValueError("dX/dY are IAU2000A corrections; use dPsi/dEps for IAU1980")
        pole_1, pole_2 = dPsi, dEps
    else:
        if dPsi != 0.0 or dEps != 0.0:
            raise ValueError("dPsi/dEps are IAU1980 corrections; use dX/dY for IAU2000A")
        pole_1, pole_2 = dX, dY

    return eop_from_arrays(
        model,
        mjd=[mjd_min, mjd_max],
        pm_x=[pm_x, pm_x],
        pm_y=[pm_y, pm_y],
        ut1_utc=[ut1_utc, ut1_utc],
        pole_1=[pole_1, pole_1],
        pole_2=[pole_2, pole_2],
        lod=[lod, lod],
    )


def zero_eop(model: EOPModel | str = EOPModel.IAU1980) -> EOPData:
    """Create EOP data with all-zero values.

    Equivalent to ignoring Earth orientation corrections, but unlike passing
    no data at all it still selects the model family and enables ``ITRF``.
    """
    return static_eop(model)


def load_eop_from_file(filepath: str | Path, model: EOPModel | str) -> EOPData:
    """Load EOP data from an IERS standard format file.

    Args:
        filepath: Path to an IERS standard format file.
        model: ``EOPModel.IAU1980`` for ``finals.all`` (dPsi/dEps columns)
            or ``EOPModel.IAU2000A`` for ``finals.all.iau2000.txt``
            (dX/dY columns).

    Returns:
        EOPDataIAU1980 or EOPDataIAU2000A.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If no valid EOP data is found.

    Examples:
        ```python
        from framejax.eop import load_eop_from_file
        eop = load_eop_from_file("path/to/finals.all", "IAU1980")
        ```
    """
    model = _coerce_model(model)
    filepath = Path(filepath)
    if not filepath.exists():
        raise FileNotFoundError(f"EOP file not found: {filepath}")

    mjds, pm_xs, pm_ys, ut1_utcs, lods, pole_1s, pole_2s = parse_standard_file(str(filepath))
    eop = eop_from_arrays(model, mjds, pm_xs, pm_ys, ut1_utcs, pole_1s, pole_2s, lod=lods)

    logger.info(
        "Loaded %d %s EOP records from %s covering MJD %.1f to %.1f",
        len(mjds),
        model.value,
        filepath,
        mjds[0],
        mjds[-1],
    )
    return eop
