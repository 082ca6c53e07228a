"""Rotation matrix (DCM) representation.

Provides the ``RotationMatrix`` class representing a rotation as a
3x3 orthogonal matrix with determinant +1 (SO(3)).

Rotations are built from the elementary ``Rx``, ``Ry`` and ``Rz`` factories
and by composition, so the stored matrix is always a proper rotation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import jax
import jax.numpy as jnp

from framejax.attitude_representations.rotation_matrices import Rx as _Rx
from framejax.attitude_representations.rotation_matrices import Ry as _Ry
from framejax.attitude_representations.rotation_matrices import Rz as _Rz
from framejax.config import get_dtype, get_rotation_tolerance

if TYPE_CHECKING:
    from jax.typing import ArrayLike

    from framejax.attitude_representations.quaternion import Quaternion


class RotationMatrix:
    """3x3 rotation matrix (Direction Cosine Matrix).

    Internal storage is a shape ``(3, 3)`` JAX array.  The matrix maps the
    coordinates of a vector in the origin frame to its coordinates in the
    destination frame.

    This class is registered as a JAX pytree with the data matrix as
    the sole leaf.

    Args:
        matrix (ArrayLike): Direction cosine matrix of shape ``(3, 3)``.
    """

    __slots__ = ("_data",)

    def __init__(self, matrix: ArrayLike) -> None:
        self._data = jnp.asarray(matrix, dtype=get_dtype())

    @classmethod
    def _from_internal(cls, data: jax.Array) -> RotationMatrix:
        """Wrap a raw JAX array without a dtype cast.

        Args:
            data (jax.Array): Array of shape ``(3, 3)``.

        Returns:
            RotationMatrix: New instance.
        """
        obj = object.__new__(cls)
        obj._data = data
        return obj

    # Factory methods

    @classmethod
    def identity(cls) -> RotationMatrix:
        """The identity rotation."""
        return cls._from_internal(jnp.eye(3, dtype=get_dtype()))

    @classmethod
    def rotation_x(cls, angle: float, use_degrees: bool = False) -> RotationMatrix:
        """Rotation about the x-axis. Delegates to ``Rx``."""
        return cls._from_internal(_Rx(angle, use_degrees))

    @classmethod
    def rotation_y(cls, angle: float, use_degrees: bool = False) -> RotationMatrix:
        """Rotation about the y-axis. Delegates to ``Ry``."""
        return cls._from_internal(_Ry(angle, use_degrees))

    @classmethod
    def rotation_z(cls, angle: float, use_degrees: bool = False) -> RotationMatrix:
        """Rotation about the z-axis. Delegates to ``Rz``."""
        return cls._from_internal(_Rz(angle, use_degrees))

    # Rotation capability

    def then(self, other: RotationMatrix) -> RotationMatrix:
        """Compose with a rotation applied after this one.

        For direction cosine matrices this is the left product
        ``other @ self``.

        Args:
            other (RotationMatrix): Rotation applied second.

        Returns:
            RotationMatrix: Combined rotation.

        Raises:
            TypeError: If ``other`` is not a ``RotationMatrix``.
        """
        if not isinstance(other, RotationMatrix):
            raise TypeError(
                f"Cannot compose RotationMatrix with {type(other).__name__}"
            )
        return RotationMatrix._from_internal(other._data @ self._data)

    def inverse(self) -> RotationMatrix:
        """Return the inverse rotation (the transpose)."""
        return RotationMatrix._from_internal(self._data.T)

    def apply(self, vector: ArrayLike) -> jax.Array:
        """Express a 3-vector of the origin frame in the destination frame.

        Args:
            vector (ArrayLike): 3-element vector.

        Returns:
            jax.Array: Rotated 3-element vector.
        """
        return self._data @ jnp.asarray(vector, dtype=self._data.dtype)

    def to_matrix(self) -> jax.Array:
        """Return the underlying 3x3 array.

        Returns:
            jnp.ndarray: Array of shape ``(3, 3)``.
        """
        return self._data

    def to_rotation_matrix(self) -> RotationMatrix:
        """Return a copy."""
        return RotationMatrix._from_internal(self._data)

    def to_quaternion(self) -> Quaternion:
        """Convert to ``Quaternion``.

        Returns:
            Quaternion: Equivalent quaternion.
        """
        from framejax.attitude_representations.conversions import rotation_matrix_to_quaternion
        from framejax.attitude_representations.quaternion import Quaternion

        q = rotation_matrix_to_quaternion(self._data)
        return Quaternion._from_internal(q)

    # Operators

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RotationMatrix):
            return NotImplemented
        eps = get_rotation_tolerance()
        return bool(jnp.all(jnp.abs(self._data - other._data) < eps))

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, RotationMatrix):
            return NotImplemented
        return not self.__eq__(other)

    __hash__ = None

    # String representations

    def __str__(self) -> str:
        d = self._data
        return (
            f"RotationMatrix(\n"
            f"  [{float(d[0, 0]):10.6f} {float(d[0, 1]):10.6f} {float(d[0, 2]):10.6f}]\n"
            f"  [{float(d[1, 0]):10.6f} {float(d[1, 1]):10.6f} {float(d[1, 2]):10.6f}]\n"
            f"  [{float(d[2, 0]):10.6f} {float(d[2, 1]):10.6f} {float(d[2, 2]):10.6f}])"
        )

    def __repr__(self) -> str:
        return self.__str__()


# Register as JAX pytree
jax.tree_util.register_pytree_node(
    RotationMatrix,
    lambda r: ((r._data,), None),
    lambda _, children: RotationMatrix._from_internal(children[0]),
)
