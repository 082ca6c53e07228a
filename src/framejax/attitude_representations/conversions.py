"""Pure conversion kernels between rotation representations.

All functions operate on raw JAX arrays (no class instances) to avoid
circular imports between class modules.  The classes in ``quaternion.py``
and ``rotation_matrix.py`` call these kernels and wrap the results.

Convention:
    Quaternion layout is scalar-first: ``[w, x, y, z]`` (shape ``(4,)``).
    Rotation matrix layout is row-major: shape ``(3, 3)``.
    Both describe a rotation of the reference frame (a direction cosine
    matrix maps coordinates in the old frame to coordinates in the new one).
"""

from __future__ import annotations

import jax
import jax.numpy as jnp

from framejax.config import get_dtype


# ---------------------------------------------------------------------------
# Quaternion <-> Rotation Matrix
# ---------------------------------------------------------------------------

def quaternion_to_rotation_matrix(q: jax.Array) -> jax.Array:
    """Convert a unit quaternion to a 3x3 rotation matrix.

    Uses the bilinear product form (Diebel eq. 125).

    Args:
        q (jax.Array): Quaternion array of shape ``(4,)`` in scalar-first order ``[w, x, y, z]``.

    Returns:
        jnp.ndarray: Rotation matrix of shape ``(3, 3)``.
    """
    qs, q1, q2, q3 = q[0], q[1], q[2], q[3]

    return jnp.array([
        [qs*qs + q1*q1 - q2*q2 - q3*q3,  2.0*q1*q2 + 2.0*qs*q3,          2.0*q1*q3 - 2.0*qs*q2],
        [2.0*q1*q2 - 2.0*qs*q3,           qs*qs - q1*q1 + q2*q2 - q3*q3,  2.0*q2*q3 + 2.0*qs*q1],
        [2.0*q1*q3 + 2.0*qs*q2,           2.0*q2*q3 - 2.0*qs*q1,          qs*qs - q1*q1 - q2*q2 + q3*q3],
    ])


def rotation_matrix_to_quaternion(R: jax.Array) -> jax.Array:
    """Convert a 3x3 rotation matrix to a unit quaternion.

    Uses Shepperd's method with ``jax.lax.switch`` on ``argmax`` for
    numerical stability and JIT compatibility.

    Args:
        R (jax.Array): Rotation matrix of shape ``(3, 3)``.

    Returns:
        jnp.ndarray: Quaternion array of shape ``(4,)`` in scalar-first order ``[w, x, y, z]``.
    """
    # Diebel eqs. 131-134: the four candidate traces
    qvec = jnp.array([
        1.0 + R[0, 0] + R[1, 1] + R[2, 2],
        1.0 + R[0, 0] - R[1, 1] - R[2, 2],
        1.0 - R[0, 0] + R[1, 1] - R[2, 2],
        1.0 - R[0, 0] - R[1, 1] + R[2, 2],
    ])

    ind_max = jnp.argmax(qvec)
    q_max = qvec[ind_max]

    def _case0(_):
        sq = jnp.sqrt(q_max)
        return 0.5 * jnp.array([
            sq,
            (R[1, 2] - R[2, 1]) / sq,
            (R[2, 0] - R[0, 2]) / sq,
            (R[0, 1] - R[1, 0]) / sq,
        ])

    def _case1(_):
        sq = jnp.sqrt(q_max)
        return 0.5 * jnp.array([
            (R[1, 2] - R[2, 1]) / sq,
            sq,
            (R[0, 1] + R[1, 0]) / sq,
            (R[2, 0] + R[0, 2]) / sq,
        ])

    def _case2(_):
        sq = jnp.sqrt(q_max)
        return 0.5 * jnp.array([
            (R[2, 0] - R[0, 2]) / sq,
            (R[0, 1] + R[1, 0]) / sq,
            sq,
            (R[1, 2] + R[2, 1]) / sq,
        ])

    def _case3(_):
        sq = jnp.sqrt(q_max)
        return 0.5 * jnp.array([
            (R[0, 1] - R[1, 0]) / sq,
            (R[2, 0] + R[0, 2]) / sq,
            (R[1, 2] + R[2, 1]) / sq,
            sq,
        ])

    return jax.lax.switch(ind_max, [_case0, _case1, _case2, _case3], None)


# ---------------------------------------------------------------------------
# Elementary axis rotations
# ---------------------------------------------------------------------------

def axis_rotation_quaternion(axis: int, angle: jax.Array) -> jax.Array:
    """Quaternion of a reference-frame rotation about a coordinate axis.

    The result converts (via :func:`quaternion_to_rotation_matrix`) to the
    same matrix as ``Rx``, ``Ry`` or ``Rz`` for ``axis`` 0, 1 or 2.

    Args:
        axis (int): Coordinate axis index (0 = x, 1 = y, 2 = z).
        angle (jax.Array): Rotation angle in radians.

    Returns:
        jnp.ndarray: Unit quaternion of shape ``(4,)`` in scalar-first order.
    """
    if axis not in (0, 1, 2):
        raise ValueError(f"Axis index must be 0, 1 or 2, got {axis}")

    half = jnp.asarray(angle, dtype=get_dtype()) / 2.0
    s = jnp.sin(half)
    zero = jnp.zeros_like(s)
    vec = [zero, zero, zero]
    vec[axis] = s
    return jnp.array([jnp.cos(half), vec[0], vec[1], vec[2]])


# ---------------------------------------------------------------------------
# Quaternion algebra
# ---------------------------------------------------------------------------

def quaternion_multiply(q1: jax.Array, q2: jax.Array) -> jax.Array:
    """Hamilton product of two quaternions.

    With the frame-rotation convention used here, ``q1 * q2`` is the
    rotation obtained by applying ``q1`` first and ``q2`` second.

    Args:
        q1 (jax.Array): First quaternion of shape ``(4,)`` in scalar-first order.
        q2 (jax.Array): Second quaternion of shape ``(4,)`` in scalar-first order.

    Returns:
        jnp.ndarray: Product quaternion of shape ``(4,)``.
    """
    s1, v1 = q1[0], q1[1:]
    s2, v2 = q2[0], q2[1:]

    s = s1 * s2 - jnp.dot(v1, v2)
    v = s1 * v2 + s2 * v1 + jnp.cross(v1, v2)

    result = jnp.concatenate([jnp.array([s]), v])
    return result / jnp.linalg.norm(result)
