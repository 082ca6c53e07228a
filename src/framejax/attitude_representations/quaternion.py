"""Quaternion rotation representation.

Provides the ``Quaternion`` class representing a rotation as a unit
quaternion in scalar-first convention ``[w, x, y, z]``.

The quaternion describes a rotation of the reference frame and is the
exact counterpart of :class:`~framejax.attitude_representations.RotationMatrix`:
``Quaternion.to_rotation_matrix()`` yields the direction cosine matrix of
the same rotation, and the Hamilton product ``q1 * q2`` corresponds to
applying ``q1`` first and ``q2`` second.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import jax
import jax.numpy as jnp

from framejax.attitude_representations.conversions import (
    axis_rotation_quaternion,
    quaternion_multiply,
    quaternion_to_rotation_matrix,
)
from framejax.config import get_dtype, get_rotation_tolerance
from framejax.utils import to_radians

if TYPE_CHECKING:
    from jax.typing import ArrayLike

    from framejax.attitude_representations.rotation_matrix import RotationMatrix


class Quaternion:
    """Unit quaternion representing a 3D rotation.

    Internal storage is a shape ``(4,)`` array in scalar-first order
    ``[w, x, y, z]``.  The quaternion is normalized on construction.

    This class is registered as a JAX pytree with the data array as
    the sole leaf and no auxiliary data.

    Args:
        s (float): Scalar (real) component.
        v1 (float): First vector (imaginary) component.
        v2 (float): Second vector (imaginary) component.
        v3 (float): Third vector (imaginary) component.
    """

    __slots__ = ('_data',)

    def __init__(self, s: float, v1: float, v2: float, v3: float) -> None:
        _float = get_dtype()
        q = jnp.array([_float(s), _float(v1), _float(v2), _float(v3)])
        self._data = q / jnp.linalg.norm(q)

    @classmethod
    def _from_internal(cls, data: jax.Array) -> Quaternion:
        """Create from a raw JAX array without normalization.

        Args:
            data (jax.Array): Array of shape ``(4,)`` in scalar-first order.

        Returns:
            Quaternion: New instance.
        """
        obj = object.__new__(cls)
        obj._data = data
        return obj

    # Properties

    @property
    def w(self) -> jax.Array:
        """Scalar component."""
        return self._data[0]

    @property
    def x(self) -> jax.Array:
        """First vector component."""
        return self._data[1]

    @property
    def y(self) -> jax.Array:
        """Second vector component."""
        return self._data[2]

    @property
    def z(self) -> jax.Array:
        """Third vector component."""
        return self._data[3]

    # Factory methods

    @classmethod
    def identity(cls) -> Quaternion:
        """The identity rotation ``[1, 0, 0, 0]``."""
        return cls._from_internal(jnp.array([1.0, 0.0, 0.0, 0.0], dtype=get_dtype()))

    @classmethod
    def rotation_x(cls, angle: float, use_degrees: bool = False) -> Quaternion:
        """Rotation about the x-axis, equivalent to ``Rx``."""
        return cls._from_internal(axis_rotation_quaternion(0, to_radians(angle, use_degrees)))

    @classmethod
    def rotation_y(cls, angle: float, use_degrees: bool = False) -> Quaternion:
        """Rotation about the y-axis, equivalent to ``Ry``."""
        return cls._from_internal(axis_rotation_quaternion(1, to_radians(angle, use_degrees)))

    @classmethod
    def rotation_z(cls, angle: float, use_degrees: bool = False) -> Quaternion:
        """Rotation about the z-axis, equivalent to ``Rz``."""
        return cls._from_internal(axis_rotation_quaternion(2, to_radians(angle, use_degrees)))

    # Methods

    def norm(self) -> jax.Array:
        """Return the Euclidean norm."""
        return jnp.linalg.norm(self._data)

    def canonical(self) -> Quaternion:
        """Return the equivalent quaternion with a non-negative scalar part.

        ``q`` and ``-q`` describe the same rotation; the canonical form
        picks ``w >= 0``.
        """
        return Quaternion._from_internal(jnp.where(self._data[0] < 0.0, -self._data, self._data))

    # Rotation capability

    def then(self, other: Quaternion) -> Quaternion:
        """Compose with a rotation applied after this one.

        For quaternions this is the Hamilton product ``self * other``.

        Args:
            other (Quaternion): Rotation applied second.

        Returns:
            Quaternion: Combined rotation.

        Raises:
            TypeError: If ``other`` is not a ``Quaternion``.
        """
        if not isinstance(other, Quaternion):
            raise TypeError(f"Cannot compose Quaternion with {type(other).__name__}")
        return self * other

    def inverse(self) -> Quaternion:
        """Return the inverse rotation.

        For a unit quaternion this is the conjugate; for non-unit
        quaternions the conjugate is divided by the squared norm.
        """
        n2 = jnp.dot(self._data, self._data)
        return Quaternion._from_internal(
            jnp.array([self._data[0], -self._data[1], -self._data[2], -self._data[3]]) / n2
        )

    def apply(self, vector: ArrayLike) -> jax.Array:
        """Express a 3-vector of the origin frame in the destination frame.

        Args:
            vector (ArrayLike): 3-element vector.

        Returns:
            jax.Array: Rotated 3-element vector.
        """
        return quaternion_to_rotation_matrix(self._data) @ jnp.asarray(vector, dtype=self._data.dtype)

    def to_matrix(self) -> jax.Array:
        """Return the equivalent 3x3 direction cosine matrix as an array."""
        return quaternion_to_rotation_matrix(self._data)

    def to_rotation_matrix(self) -> RotationMatrix:
        """Convert to ``RotationMatrix``.

        Returns:
            RotationMatrix: Equivalent rotation matrix.
        """
        from framejax.attitude_representations.rotation_matrix import RotationMatrix

        return RotationMatrix._from_internal(quaternion_to_rotation_matrix(self._data))

    def to_quaternion(self) -> Quaternion:
        """Return a copy."""
        return Quaternion._from_internal(self._data)

    # Operators

    def __mul__(self, other: Quaternion) -> Quaternion:
        """Hamilton product (quaternion * quaternion)."""
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion._from_internal(quaternion_multiply(self._data, other._data))

    def __neg__(self) -> Quaternion:
        return Quaternion._from_internal(-self._data)

    def __eq__(self, other: object) -> bool:
        """Rotation equality: ``q`` and ``-q`` compare equal."""
        if not isinstance(other, Quaternion):
            return NotImplemented
        eps = get_rotation_tolerance()
        d1 = self._data / jnp.linalg.norm(self._data)
        d2 = other._data / jnp.linalg.norm(other._data)
        same = jnp.all(jnp.abs(d1 - d2) < eps)
        flipped = jnp.all(jnp.abs(d1 + d2) < eps)
        return bool(same | flipped)

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return not self.__eq__(other)

    __hash__ = None

    # String representations

    def __str__(self) -> str:
        return (
            f"Quaternion(w={float(self._data[0]):.6f}, "
            f"x={float(self._data[1]):.6f}, "
            f"y={float(self._data[2]):.6f}, "
            f"z={float(self._data[3]):.6f})"
        )

    def __repr__(self) -> str:
        return (
            f"Quaternion(w={float(self._data[0])}, "
            f"x={float(self._data[1])}, "
            f"y={float(self._data[2])}, "
            f"z={float(self._data[3])})"
        )


# Register as JAX pytree
jax.tree_util.register_pytree_node(
    Quaternion,
    lambda q: ((q._data,), None),
    lambda _, children: Quaternion._from_internal(children[0]),
)
