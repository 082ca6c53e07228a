"""Shared angle helpers.

``to_radians`` wraps the ``use_degrees`` convention of the elementary
rotation constructors and is JAX-traceable.  ``wrap_to_2pi`` normalizes
the sidereal and Earth rotation angles, which are evaluated on the host in
float64.
"""

from jax import Array
import jax.numpy as jnp
from jax.typing import ArrayLike
import numpy as np


def to_radians(angle: ArrayLike, use_degrees: bool) -> Array:
    """Convert angle to radians if ``use_degrees`` is True.

    Args:
        angle (ArrayLike): Angle value.
        use_degrees (bool): If ``True``, treat ``angle`` as degrees and convert.

    Returns:
        Angle in radians.
    """
    return jnp.where(use_degrees, jnp.deg2rad(angle), angle)


def wrap_to_2pi(angle) -> np.ndarray:
    """Normalize a host angle into the range ``0 <= angle < 2*pi``."""
    return np.mod(angle, 2.0 * np.pi)
