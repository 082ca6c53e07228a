"""Representation selection and rotation composition.

A frame rotation is either a :class:`RotationMatrix` or a
:class:`Quaternion`.  :class:`Representation` names the two variants and
builds elementary rotations in the chosen one, so a rotation chain is
assembled once and evaluated in whichever representation the caller asked
for.  :func:`compose_rotations` folds a chain in physical order (first
rotation applied first), which is ``Rn @ ... @ R1`` for matrices and
``q1 * ... * qn`` for quaternions.
"""

from __future__ import annotations

import enum
from typing import Union

from framejax.attitude_representations.quaternion import Quaternion
from framejax.attitude_representations.rotation_matrix import RotationMatrix
from framejax.errors import InvalidRepresentationError

Rotation = Union[RotationMatrix, Quaternion]

_ALIASES = {
    "matrix": "matrix",
    "dcm": "matrix",
    "rotation_matrix": "matrix",
    "quaternion": "quaternion",
    "quat": "quaternion",
}


class Representation(enum.Enum):
    """Rotation representation returned by the frame dispatcher.

    Attributes:
        MATRIX: 3x3 direction cosine matrix (:class:`RotationMatrix`).
        QUATERNION: Unit quaternion (:class:`Quaternion`).
    """

    MATRIX = "matrix"
    QUATERNION = "quaternion"

    @classmethod
    def coerce(cls, value: object) -> Representation:
        """Resolve a user-supplied representation selector.

        Accepts a :class:`Representation`, the classes
        :class:`RotationMatrix` / :class:`Quaternion`, or one of the
        strings ``"matrix"``, ``"dcm"``, ``"rotation_matrix"``,
        ``"quaternion"``, ``"quat"`` (case-insensitive).  ``None`` selects
        the default, :attr:`MATRIX`.

        Raises:
            InvalidRepresentationError: For any other value.
        """
        if value is None:
            return cls.MATRIX
        if isinstance(value, cls):
            return value
        if value is RotationMatrix:
            return cls.MATRIX
        if value is Quaternion:
            return cls.QUATERNION
        if isinstance(value, str) and value.lower() in _ALIASES:
            return cls(_ALIASES[value.lower()])
        raise InvalidRepresentationError(
            f"Unsupported rotation representation {value!r}; "
            "expected Representation.MATRIX or Representation.QUATERNION"
        )

    @property
    def rotation_type(self) -> type:
        """The class implementing this representation."""
        return RotationMatrix if self is Representation.MATRIX else Quaternion

    def identity(self) -> Rotation:
        """The identity rotation in this representation."""
        return self.rotation_type.identity()

    def rotation_x(self, angle) -> Rotation:
        """Reference-frame rotation about the x-axis [rad]."""
        return self.rotation_type.rotation_x(angle)

    def rotation_y(self, angle) -> Rotation:
        """Reference-frame rotation about the y-axis [rad]."""
        return self.rotation_type.rotation_y(angle)

    def rotation_z(self, angle) -> Rotation:
        """Reference-frame rotation about the z-axis [rad]."""
        return self.rotation_type.rotation_z(angle)


def compose_rotations(*rotations: Rotation) -> Rotation:
    """Compose rotations in the order they are applied.

    ``compose_rotations(r1, r2, r3)`` is the rotation that applies ``r1``
    first and ``r3`` last, i.e. the alignment of an origin frame with a
    destination frame reached through two intermediate frames.

    Args:
        *rotations: Two or more rotations of the same representation.

    Returns:
        Rotation: The combined rotation, in the input representation.

    Raises:
        ValueError: If fewer than two rotations are given.
        TypeError: If the rotations mix representations.

    Examples:
        ```python
        from framejax.attitude_representations import RotationMatrix, compose_rotations
        r = compose_rotations(
            RotationMatrix.rotation_x(0.1),
            RotationMatrix.rotation_z(0.2),
        )
        ```
    """
    if len(rotations) < 2:
        raise ValueError("compose_rotations requires at least two rotations")

    kind = type(rotations[0])
    if kind not in (RotationMatrix, Quaternion):
        raise TypeError(f"Cannot compose objects of type {kind.__name__}")
    for r in rotations[1:]:
        if type(r) is not kind:
            raise TypeError(
                f"Cannot compose {kind.__name__} with {type(r).__name__}; "
                "convert to a single representation first"
            )

    result = rotations[0]
    for r in rotations[1:]:
        result = result.then(r)
    return result
