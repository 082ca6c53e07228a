"""Tests for the shared angle helpers."""

import jax.numpy as jnp
import pytest

from framejax.utils import to_radians, wrap_to_2pi


def test_to_radians_degrees():
    assert float(to_radians(180.0, True)) == pytest.approx(jnp.pi)


def test_to_radians_passthrough():
    assert float(to_radians(1.25, False)) == 1.25


@pytest.mark.parametrize(
    "angle,expected",
    [
        (0.0, 0.0),
        (1.0, 1.0),
        (-1.0, 2.0 * jnp.pi - 1.0),
        (2.0 * jnp.pi + 0.5, 0.5),
    ],
)
def test_wrap_to_2pi(angle, expected):
    assert float(wrap_to_2pi(angle)) == pytest.approx(expected, abs=1e-12)
