"""Rotation representations for frame transformations.

Provides the two interchangeable rotation representations used by the
frame dispatcher:

- :class:`RotationMatrix` -- 3x3 direction cosine matrix (SO(3))
- :class:`Quaternion` -- unit quaternion (scalar-first ``[w, x, y, z]``)

Also re-exports the elementary rotation functions :func:`Rx`, :func:`Ry`,
:func:`Rz`, the :class:`Representation` selector and
:func:`compose_rotations`.
"""

from .rotation_matrices import (
    Rx,
    Ry,
    Rz,
)

from .quaternion import Quaternion
from .rotation_matrix import RotationMatrix
from .representation import Representation, Rotation, compose_rotations

__all__ = [
    # Elementary rotations
    "Rx",
    "Ry",
    "Rz",
    # Rotation representations
    "Quaternion",
    "RotationMatrix",
    "Representation",
    "Rotation",
    "compose_rotations",
]
