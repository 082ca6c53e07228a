"""Reference frames and precession-nutation model families.

Every frame belongs to one or both model families.  ``ITRF`` and ``GCRF``
are reachable from both; the remaining frames are specific to one family
and may not be combined with frames of the other in a single request.
"""

from __future__ import annotations

import enum

from framejax.errors import UnsupportedConversionError


class ModelFamily(enum.Enum):
    """Precession-nutation theory a frame chain belongs to.

    Attributes:
        FK5: IAU-76/FK5 equinox-based chain (EOP model IAU1980).
        IAU2006: IAU-2006/2010 CIO-based chain (EOP model IAU2000A).
    """

    FK5 = "IAU-76/FK5"
    IAU2006 = "IAU-2006/2010"


class Frame(enum.Enum):
    """Earth-fixed (ECEF) and Earth-centered inertial (ECI) reference frames.

    Attributes:
        ITRF: International Terrestrial Reference Frame (ECEF, both families).
        PEF: Pseudo-Earth Fixed frame (ECEF, FK5).
        TIRS: Terrestrial Intermediate Reference System (ECEF, IAU-2006).
        MOD: Mean of Date (ECI, FK5).
        TOD: True of Date (ECI, FK5).
        GCRF: Geocentric Celestial Reference Frame (ECI, both families).
        J2000: Mean equator and equinox of J2000.0 (ECI, FK5).
        TEME: True Equator, Mean Equinox, used by SGP4 (ECI, FK5).
        CIRS: Celestial Intermediate Reference System (ECI, IAU-2006).
    """

    ITRF = "ITRF"
    PEF = "PEF"
    TIRS = "TIRS"
    MOD = "MOD"
    TOD = "TOD"
    GCRF = "GCRF"
    J2000 = "J2000"
    TEME = "TEME"
    CIRS = "CIRS"

    @classmethod
    def coerce(cls, value: Frame | str) -> Frame:
        """Resolve a frame given as a :class:`Frame` or its name (case-insensitive).

        Raises:
            UnsupportedConversionError: If the name is not a known frame.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.upper())
            except ValueError:
                pass
        raise UnsupportedConversionError(f"Unknown reference frame {value!r}")

    @property
    def is_ecef(self) -> bool:
        """``True`` for Earth-fixed frames."""
        return self in _ECEF_FRAMES

    @property
    def families(self) -> frozenset[ModelFamily]:
        """Model families from which the frame is reachable."""
        return _FRAME_FAMILIES[self]


_ECEF_FRAMES = frozenset({Frame.ITRF, Frame.PEF, Frame.TIRS})

_BOTH = frozenset({ModelFamily.FK5, ModelFamily.IAU2006})
_FK5 = frozenset({ModelFamily.FK5})
_IAU2006 = frozenset({ModelFamily.IAU2006})

_FRAME_FAMILIES = {
    Frame.ITRF: _BOTH,
    Frame.PEF: _FK5,
    Frame.TIRS: _IAU2006,
    Frame.MOD: _FK5,
    Frame.TOD: _FK5,
    Frame.GCRF: _BOTH,
    Frame.J2000: _FK5,
    Frame.TEME: _FK5,
    Frame.CIRS: _IAU2006,
}
