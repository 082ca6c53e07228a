"""Frame-graph dispatcher.

:func:`rotate` resolves a conversion request in three stages:

1. **Plan** (:func:`plan_route`): select the model family from the EOP data
   type (or, without data, from the frames themselves), find the route in
   :data:`~framejax.frames._routes.ROUTES` and decide whether it is
   traversed forwards or inverted.  Every rejection happens here.
2. **Resolve**: compute the epochs (UT1, TT) and look up the EOP
   corrections each step needs, converted to radians.  Missing coverage
   fails here, still before any rotation is evaluated.
3. **Evaluate**: call each step's elementary rotation in the requested
   representation and compose them in chain order.

Without EOP data the approximate paths use ``JD_UT1 = JD_UTC`` and zero
corrections.  Routes touching ``ITRF`` always require data.
"""

from __future__ import annotations

import logging
from typing import NamedTuple

from framejax.attitude_representations import (
    Quaternion,
    Representation,
    Rotation,
    compose_rotations,
)
from framejax.epoch import Epoch
from framejax.eop import (
    EOPDataIAU1980,
    EOPDataIAU2000A,
    EOPModel,
    get_cip_corrections,
    get_nutation_corrections,
    get_pm,
)
from framejax.errors import (
    MissingOrientationDataError,
    ModelMismatchError,
    UnsupportedConversionError,
)
from framejax.frames._routes import ROUTES, Param, Step
from framejax.frames._types import Frame, ModelFamily
from framejax.time import TimeScale, jd_to_mjd, jd_utc_to_tt, jd_utc_to_ut1

logger = logging.getLogger(__name__)

_EOP_FAMILY = {
    EOPModel.IAU1980: ModelFamily.FK5,
    EOPModel.IAU2000A: ModelFamily.IAU2006,
}


class RoutePlan(NamedTuple):
    """A resolved conversion, ready to be evaluated.

    Attributes:
        family: Model family of the chain, ``None`` for an identity between
            frames reachable from both families.
        origin: Origin frame.
        destination: Destination frame.
        steps: Steps of the tabulated ECEF-rooted route, in chain order.
        inverse: ``True`` when the tabulated route runs from ``destination``
            to ``origin`` and its result must be inverted.
        approximate: ``True`` when evaluated without EOP data.
    """

    family: ModelFamily | None
    origin: Frame
    destination: Frame
    steps: tuple[Step, ...]
    inverse: bool
    approximate: bool


def _model_family(origin: Frame, destination: Frame, eop) -> ModelFamily | None:
    common = origin.families & destination.families
    if not common:
        raise ModelMismatchError(
            f"Cannot mix model families: {origin.value} is "
            f"{'/'.join(sorted(f.value for f in origin.families))} only, "
            f"{destination.value} is "
            f"{'/'.join(sorted(f.value for f in destination.families))} only"
        )

    if eop is not None:
        if not isinstance(eop, (EOPDataIAU1980, EOPDataIAU2000A)):
            raise TypeError(
                f"eop must be EOPDataIAU1980, EOPDataIAU2000A or None, got {type(eop).__name__}"
            )
        family = _EOP_FAMILY[eop.model]
        if family not in common:
            raise ModelMismatchError(
                f"{eop.model.value} EOP data selects the {family.value} model, "
                f"which does not reach {origin.value} -> {destination.value}"
            )
        return family

    if len(common) == 1:
        return next(iter(common))
    return None


def plan_route(origin: Frame | str, destination: Frame | str, eop=None) -> RoutePlan:
    """Select the chain of elementary rotations for a conversion.

    Nothing is evaluated; the returned plan lists the steps and whether the
    tabulated route is inverted.

    Args:
        origin: Origin frame (or its name).
        destination: Destination frame (or its name).
        eop: Optional ``EOPDataIAU1980`` or ``EOPDataIAU2000A``.

    Returns:
        RoutePlan: The resolved route.

    Raises:
        UnsupportedConversionError: Unknown frame, or a pair not present in
            the routing table of its family.
        ModelMismatchError: Frames of different families, or EOP data of a
            model that does not reach the frames.
        MissingOrientationDataError: The route touches ``ITRF`` and no EOP
            data was supplied.
        TypeError: ``eop`` is neither EOP data nor ``None``.

    Examples:
        ```python
        from framejax.frames import Frame, plan_route
        plan = plan_route(Frame.GCRF, Frame.PEF)
        [s.name for s in plan.steps]  # ['PEF->MOD', 'MOD->GCRF'], inverted
        ```
    """
    origin = Frame.coerce(origin)
    destination = Frame.coerce(destination)
    family = _model_family(origin, destination, eop)

    if origin is destination:
        return RoutePlan(family, origin, destination, (), False, eop is None)

    if family is None:
        # Only ITRF and GCRF are reachable from both families
        raise MissingOrientationDataError(
            f"{origin.value} -> {destination.value} requires EOP data: polar motion "
            "cannot be approximated, and the data type selects the model"
        )

    inverse = False
    route = ROUTES.get((family, origin, destination))
    if route is None:
        route = ROUTES.get((family, destination, origin))
        inverse = True
    if route is None:
        raise UnsupportedConversionError(
            f"No {family.value} conversion from {origin.value} to {destination.value}"
        )

    if route.requires_eop and eop is None:
        raise MissingOrientationDataError(
            f"{origin.value} -> {destination.value} requires EOP data: polar motion "
            "cannot be approximated"
        )

    return RoutePlan(family, origin, destination, route.steps, inverse, eop is None)


def _jd_utc(epoch) -> float:
    if isinstance(epoch, Epoch):
        if epoch.time_scale is not TimeScale.UTC:
            raise ValueError(
                f"Frame rotations take a UTC epoch, got {epoch.time_scale.value}"
            )
        return epoch.jd()
    return float(epoch)


def _eop_time_scale(value) -> TimeScale:
    scale = value if isinstance(value, TimeScale) else TimeScale(str(value).upper())
    if scale not in (TimeScale.UTC, TimeScale.TT):
        raise ValueError(f"EOP lookup time scale must be UTC or TT, got {scale.value}")
    return scale


def _resolve_parameters(
    steps: tuple[Step, ...], jd_utc: float, eop, eop_time_scale: TimeScale
) -> dict[Param, object]:
    """Evaluate every parameter the steps consume.

    All EOP lookups (and therefore all coverage failures) happen here.
    """
    needed = {p for step in steps for p in step.params}
    values: dict[Param, object] = {Param.ZERO: 0.0}

    if Param.JD_TT in needed or (eop is not None and eop_time_scale is TimeScale.TT):
        values[Param.JD_TT] = jd_utc_to_tt(jd_utc)
    if Param.JD_UT1 in needed:
        values[Param.JD_UT1] = jd_utc_to_ut1(jd_utc, eop)

    if eop is None:
        for p in (Param.D_EPS, Param.D_PSI, Param.D_X, Param.D_Y):
            values[p] = 0.0
        return values

    if eop_time_scale is TimeScale.TT:
        mjd_eop = jd_to_mjd(values[Param.JD_TT])
    else:
        mjd_eop = jd_to_mjd(jd_utc)

    if needed & {Param.X_P, Param.Y_P}:
        values[Param.X_P], values[Param.Y_P] = get_pm(eop, mjd_eop)
    if needed & {Param.D_EPS, Param.D_PSI}:
        values[Param.D_EPS], values[Param.D_PSI] = get_nutation_corrections(eop, mjd_eop)
    if needed & {Param.D_X, Param.D_Y}:
        values[Param.D_X], values[Param.D_Y] = get_cip_corrections(eop, mjd_eop)

    return values


def rotate(
    representation,
    origin: Frame | str,
    destination: Frame | str,
    epoch_utc,
    eop=None,
    *,
    eop_time_scale: TimeScale = TimeScale.UTC,
) -> Rotation:
    """Compute the rotation aligning ``origin`` with ``destination``.

    The result maps coordinates of a vector in the origin frame to its
    coordinates in the destination frame.  Supported conversions are
    ECEF to ECI and ECI to ECEF within one model family, and ECEF to ECEF
    (``ITRF``/``PEF`` or ``ITRF``/``TIRS``).  Equal frames give the identity.

    Args:
        representation: ``Representation.MATRIX`` (or ``None``) for a
            :class:`RotationMatrix`, ``Representation.QUATERNION`` for a
            :class:`Quaternion`.  The classes themselves and the strings
            ``"matrix"``/``"quaternion"`` are also accepted.
        origin: Origin frame (or its name).
        destination: Destination frame (or its name).
        epoch_utc: Julian Date (UTC) as a float, or an :class:`Epoch` in UTC.
        eop: Optional EOP data.  ``EOPDataIAU1980`` selects the IAU-76/FK5
            model, ``EOPDataIAU2000A`` the IAU-2006/2010 model.  Without it
            the family follows from the frames, UT1 is approximated by UTC
            and EOP corrections are zero.
        eop_time_scale: Epoch at which polar motion and nutation/pole-offset
            corrections are looked up: ``TimeScale.UTC`` (default) or
            ``TimeScale.TT``.  UT1-UTC is always looked up at UTC.

    Returns:
        Rotation: ``RotationMatrix`` or ``Quaternion`` (with non-negative
        scalar part).

    Raises:
        InvalidRepresentationError: Unsupported ``representation``.
        UnsupportedConversionError: Unknown frame or unsupported pair.
        ModelMismatchError: Frames (or EOP data) of different model families.
        MissingOrientationDataError: ``ITRF`` requested without EOP data.
        DataCoverageError: Epoch outside the EOP data or leap-second table.

    Examples:
        ```python
        from framejax.frames import Frame, rotate
        from framejax.attitude_representations import Representation
        R = rotate(Representation.MATRIX, Frame.PEF, Frame.J2000, 2446601.3993055555)
        ```
    """
    rep = Representation.coerce(representation)
    plan = plan_route(origin, destination, eop)
    jd_utc = _jd_utc(epoch_utc)
    eop_time_scale = _eop_time_scale(eop_time_scale)

    if not plan.steps:
        return rep.identity()

    values = _resolve_parameters(plan.steps, jd_utc, eop, eop_time_scale)

    logger.debug(
        "Rotating %s -> %s with the %s model via %s%s",
        plan.origin.value,
        plan.destination.value,
        plan.family.value,
        ", ".join(step.name for step in plan.steps),
        " (inverted)" if plan.inverse else "",
    )
    if plan.approximate:
        logger.debug(
            "No EOP data supplied for %s -> %s; using UT1 = UTC and zero EOP corrections",
            plan.origin.value,
            plan.destination.value,
        )

    rotations = [
        step.provider(rep, *(values[p] for p in step.params)) for step in plan.steps
    ]
    result = rotations[0] if len(rotations) == 1 else compose_rotations(*rotations)

    if plan.inverse:
        result = result.inverse()
    if isinstance(result, Quaternion):
        result = result.canonical()
    return result


def _require(frame: Frame | str, ecef: bool, role: str) -> Frame:
    frame = Frame.coerce(frame)
    if frame.is_ecef is not ecef:
        kind = "an Earth-fixed" if ecef else "an inertial"
        raise UnsupportedConversionError(f"{role} frame {frame.value} is not {kind} frame")
    return frame


def rotation_ecef_to_eci(
    ecef: Frame | str,
    eci: Frame | str,
    epoch_utc,
    eop=None,
    *,
    representation=None,
    eop_time_scale: TimeScale = TimeScale.UTC,
) -> Rotation:
    """Rotation from an Earth-fixed frame to an inertial frame.

    See :func:`rotate`.  ``representation`` defaults to a rotation matrix.

    Raises:
        UnsupportedConversionError: ``ecef`` is not an ECEF frame or ``eci``
            is not an ECI frame, in addition to the errors of :func:`rotate`.
    """
    ecef = _require(ecef, True, "Origin")
    eci = _require(eci, False, "Destination")
    return rotate(representation, ecef, eci, epoch_utc, eop, eop_time_scale=eop_time_scale)


def rotation_eci_to_ecef(
    eci: Frame | str,
    ecef: Frame | str,
    epoch_utc,
    eop=None,
    *,
    representation=None,
    eop_time_scale: TimeScale = TimeScale.UTC,
) -> Rotation:
    """Rotation from an inertial frame to an Earth-fixed frame.

    The inverse of :func:`rotation_ecef_to_eci` for the same arguments.
    """
    eci = _require(eci, False, "Origin")
    ecef = _require(ecef, True, "Destination")
    return rotate(representation, eci, ecef, epoch_utc, eop, eop_time_scale=eop_time_scale)


def rotation_ecef_to_ecef(
    origin: Frame | str,
    destination: Frame | str,
    epoch_utc,
    eop=None,
    *,
    representation=None,
    eop_time_scale: TimeScale = TimeScale.UTC,
) -> Rotation:
    """Rotation between two Earth-fixed frames of the same model family."""
    origin = _require(origin, True, "Origin")
    destination = _require(destination, True, "Destination")
    return rotate(
        representation, origin, destination, epoch_utc, eop, eop_time_scale=eop_time_scale
    )
