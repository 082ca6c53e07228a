"""Exception types raised by the frame-rotation dispatcher.

Every failure is detected while a conversion request is being resolved,
before any elementary rotation is evaluated.  All exceptions derive from
:class:`FrameError`, which is itself a :class:`ValueError` so callers that
already guard frame conversions with ``except ValueError`` keep working.
"""

from __future__ import annotations


class FrameError(ValueError):
    """Base class for all frame-rotation failures."""


class UnsupportedConversionError(FrameError):
    """The requested frame pair is not part of any rotation model."""


class ModelMismatchError(FrameError):
    """The requested frames belong to incompatible rotation models.

    Raised when an IAU-76/FK5-only frame (``PEF``, ``MOD``, ``TOD``,
    ``J2000``, ``TEME``) is paired with an IAU-2006-only frame (``TIRS``,
    ``CIRS``), or when the supplied EOP data belongs to the other model.
    """


class MissingOrientationDataError(FrameError):
    """A rotation needs Earth orientation data that was not supplied.

    Polar motion cannot be approximated away, so every conversion touching
    ``ITRF`` requires EOP data.
    """


class DataCoverageError(FrameError):
    """An epoch lies outside the range covered by tabulated data.

    Raised for epochs outside the EOP data range, for epochs where a
    correction series has no published value, and for UTC epochs that
    precede the leap-second table.
    """


class InvalidRepresentationError(FrameError):
    """The requested rotation representation is not supported."""
