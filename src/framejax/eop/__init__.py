"""Earth Orientation Parameters (EOP) for the frame rotations.

Provides immutable EOP datasets for the IAU-1980 and IAU-2000A models and
coverage-checked accessors returning the corrections in radians.  The
dataset type passed to :func:`framejax.frames.rotate` selects the
precession-nutation model.

Typical usage::

    from framejax.eop import load_eop_from_file, get_pm
    eop = load_eop_from_file("finals.all", "IAU1980")
    x_p, y_p = get_pm(eop, 46600.899)
"""

from framejax.eop._lookup import (
    check_coverage,
    get_cip_corrections,
    get_lod,
    get_nutation_corrections,
    get_pm,
    get_ut1_utc,
)
from framejax.eop._providers import eop_from_arrays, load_eop_from_file, static_eop, zero_eop
from framejax.eop._types import EOPData, EOPDataIAU1980, EOPDataIAU2000A, EOPModel

__all__ = [
    "EOPData",
    "EOPDataIAU1980",
    "EOPDataIAU2000A",
    "EOPModel",
    "check_coverage",
    "eop_from_arrays",
    "get_cip_corrections",
    "get_lod",
    "get_nutation_corrections",
    "get_pm",
    "get_ut1_utc",
    "load_eop_from_file",
    "static_eop",
    "zero_eop",
]
