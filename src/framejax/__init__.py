"""
framejax computes the rotation between Earth-fixed and inertial reference frames in JAX,
for the IAU-76/FK5 and IAU-2006/2010 models.
"""

from .constants import (
    AS2RAD,
    JD_MJD_OFFSET,
    SECONDS_PER_DAY,
    OMEGA_EARTH,
)

from .attitude_representations import (
    Rx,
    Ry,
    Rz,
    Quaternion,
    RotationMatrix,
    Representation,
    compose_rotations,
)

from .config import set_dtype, get_dtype
from .epoch import Epoch
from .time import TimeScale, jd_utc_to_tt, jd_utc_to_ut1

from .errors import (
    FrameError,
    UnsupportedConversionError,
    ModelMismatchError,
    MissingOrientationDataError,
    DataCoverageError,
    InvalidRepresentationError,
)

from .eop import (
    EOPDataIAU1980,
    EOPDataIAU2000A,
    EOPModel,
    eop_from_arrays,
    load_eop_from_file,
    static_eop,
)

from .frames import (
    Frame,
    ModelFamily,
    plan_route,
    rotate,
    rotation_ecef_to_ecef,
    rotation_ecef_to_eci,
    rotation_eci_to_ecef,
    state_ecef_to_eci,
    state_eci_to_ecef,
)
