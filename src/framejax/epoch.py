"""The epoch module provides the ``Epoch`` class, a Julian Date tagged with its time scale.

An ``Epoch`` is an immutable value.  Conversions between scales return new
instances and are pure functions of the epoch (and, for UT1, of the Earth
orientation data).  The Julian Date is kept as a Python float so that the
~40 microsecond resolution of a float64 Julian Date survives regardless of
the JAX dtype configured with :func:`framejax.config.set_dtype`.
"""

from __future__ import annotations

from .constants import JD_MJD_OFFSET
from .time import TimeScale, caldate_to_jd, jd_utc_to_tt, jd_utc_to_ut1


class Epoch:
    """A single instant in time expressed as a Julian Date in a given time scale.

    Args:
        jd (float): Julian Date.
        time_scale (TimeScale): Scale of ``jd``. Default: ``TimeScale.UTC``.

    Constructors:
        Epoch(2446601.399305556)
        Epoch(2446601.400048472, TimeScale.TT)
        Epoch.from_date(1986, 6, 19, 21, 35, 0.0)
        Epoch.from_mjd(46600.899305556)

    Examples:
        ```python
        from framejax.epoch import Epoch
        epc = Epoch.from_date(1986, 6, 19, 21, 35, 0.0)
        epc_tt = epc.to_tt()
        ```
    """

    __slots__ = ('_jd', '_time_scale')

    def __init__(self, jd: float, time_scale: TimeScale = TimeScale.UTC) -> None:
        if not isinstance(time_scale, TimeScale):
            time_scale = TimeScale(str(time_scale).upper())
        self._jd = float(jd)
        self._time_scale = time_scale

    @classmethod
    def from_date(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: float = 0.0,
        time_scale: TimeScale = TimeScale.UTC,
    ) -> Epoch:
        """Create an epoch from a calendar date and time of day."""
        return cls(caldate_to_jd(year, month, day, hour, minute, second), time_scale)

    @classmethod
    def from_mjd(cls, mjd: float, time_scale: TimeScale = TimeScale.UTC) -> Epoch:
        """Create an epoch from a Modified Julian Date."""
        return cls(float(mjd) + JD_MJD_OFFSET, time_scale)

    # Accessors

    @property
    def time_scale(self) -> TimeScale:
        """Time scale of the stored Julian Date."""
        return self._time_scale

    def jd(self) -> float:
        """Return the Julian Date."""
        return self._jd

    def mjd(self) -> float:
        """Return the Modified Julian Date."""
        return self._jd - JD_MJD_OFFSET

    # Conversions

    def _require_utc(self, target: str) -> None:
        if self._time_scale is not TimeScale.UTC:
            raise ValueError(
                f"Conversion to {target} is defined from UTC only, "
                f"epoch is in {self._time_scale.value}"
            )

    def to_tt(self) -> Epoch:
        """Convert to Terrestrial Time.

        Returns:
            Epoch: The same instant with ``time_scale == TimeScale.TT``.

        Raises:
            ValueError: If the epoch is in UT1.
            DataCoverageError: If the epoch precedes the leap-second table.
        """
        if self._time_scale is TimeScale.TT:
            return self
        self._require_utc("TT")
        return Epoch(jd_utc_to_tt(self._jd), TimeScale.TT)

    def to_ut1(self, eop=None) -> Epoch:
        """Convert to UT1.

        Without Earth orientation data UT1 is approximated by UTC.

        Args:
            eop: Optional EOP data providing UT1-UTC.

        Returns:
            Epoch: The same instant with ``time_scale == TimeScale.UT1``.

        Raises:
            ValueError: If the epoch is in TT.
            DataCoverageError: If ``eop`` does not cover the epoch.
        """
        if self._time_scale is TimeScale.UT1:
            return self
        self._require_utc("UT1")
        return Epoch(jd_utc_to_ut1(self._jd, eop), TimeScale.UT1)

    # Operators

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Epoch):
            return NotImplemented
        return self._jd == other._jd and self._time_scale is other._time_scale

    def __hash__(self) -> int:
        return hash((self._jd, self._time_scale))

    def __repr__(self) -> str:
        return f"Epoch(jd={self._jd!r}, time_scale=TimeScale.{self._time_scale.name})"

    def __str__(self) -> str:
        return f"JD {self._jd:.9f} {self._time_scale.value}"
