"""Unit tests for the rotation representations and composition helpers."""

import math

import jax
import jax.numpy as jnp
import pytest

from framejax import (
    Quaternion,
    Representation,
    RotationMatrix,
    Rx,
    Ry,
    Rz,
    compose_rotations,
)
from framejax.errors import InvalidRepresentationError

DEG2RAD = math.pi / 180.0
ATOL = 1e-12


# ===========================================================================
# Elementary rotations
# ===========================================================================


class TestElementaryRotations:
    def test_rx(self):
        r = Rx(30.0, use_degrees=True)
        c, s = math.cos(30.0 * DEG2RAD), math.sin(30.0 * DEG2RAD)
        expected = jnp.array([[1.0, 0.0, 0.0], [0.0, c, s], [0.0, -s, c]])
        assert jnp.allclose(r, expected, atol=ATOL)

    def test_ry(self):
        r = Ry(0.3)
        c, s = math.cos(0.3), math.sin(0.3)
        expected = jnp.array([[c, 0.0, -s], [0.0, 1.0, 0.0], [s, 0.0, c]])
        assert jnp.allclose(r, expected, atol=ATOL)

    def test_rz(self):
        r = Rz(-1.2)
        c, s = math.cos(-1.2), math.sin(-1.2)
        expected = jnp.array([[c, s, 0.0], [-s, c, 0.0], [0.0, 0.0, 1.0]])
        assert jnp.allclose(r, expected, atol=ATOL)

    def test_frame_rotation_sense(self):
        # Rotating the frame +90 deg about z moves the old x-axis onto -y
        v = Rz(90.0, use_degrees=True) @ jnp.array([1.0, 0.0, 0.0])
        assert jnp.allclose(v, jnp.array([0.0, -1.0, 0.0]), atol=ATOL)

    @pytest.mark.parametrize("axis", ["x", "y", "z"])
    @pytest.mark.parametrize("angle", [-2.5, -0.1, 0.0, 0.7, 3.0])
    def test_quaternion_matches_matrix(self, axis, angle):
        q = getattr(Quaternion, f"rotation_{axis}")(angle)
        r = getattr(RotationMatrix, f"rotation_{axis}")(angle)
        assert jnp.allclose(q.to_matrix(), r.to_matrix(), atol=ATOL)

    def test_jit(self):
        f = jax.jit(lambda a: Rz(a))
        assert jnp.allclose(f(0.4), Rz(0.4), atol=ATOL)


# ===========================================================================
# RotationMatrix
# ===========================================================================


class TestRotationMatrix:
    def test_identity(self):
        assert jnp.allclose(RotationMatrix.identity().to_matrix(), jnp.eye(3), atol=ATOL)

    def test_constructor_uses_configured_dtype(self):
        r = RotationMatrix(Rz(0.25))
        assert r.to_matrix().dtype == jnp.float64
        assert r == RotationMatrix.rotation_z(0.25)

    def test_then_is_left_product(self):
        r1 = RotationMatrix.rotation_x(0.3)
        r2 = RotationMatrix.rotation_z(-0.8)
        combined = r1.then(r2)
        assert jnp.allclose(combined.to_matrix(), Rz(-0.8) @ Rx(0.3), atol=ATOL)

    def test_inverse(self):
        r = compose_rotations(RotationMatrix.rotation_y(0.2), RotationMatrix.rotation_z(1.1))
        assert r.then(r.inverse()) == RotationMatrix.identity()

    def test_apply(self):
        r = RotationMatrix.rotation_z(0.5)
        v = jnp.array([1.0, 2.0, 3.0])
        assert jnp.allclose(r.apply(v), Rz(0.5) @ v, atol=ATOL)

    def test_then_rejects_quaternion(self):
        with pytest.raises(TypeError):
            RotationMatrix.identity().then(Quaternion.identity())

    def test_pytree(self):
        r = RotationMatrix.rotation_x(0.1)
        leaves, treedef = jax.tree_util.tree_flatten(r)
        assert len(leaves) == 1
        rebuilt = jax.tree_util.tree_unflatten(treedef, leaves)
        assert rebuilt == r


# ===========================================================================
# Quaternion
# ===========================================================================


class TestQuaternion:
    def test_normalized_on_construction(self):
        q = Quaternion(2.0, 0.0, 0.0, 0.0)
        assert float(q.norm()) == pytest.approx(1.0, abs=ATOL)

    def test_then_matches_matrix_composition(self):
        q = Quaternion.rotation_x(0.4).then(Quaternion.rotation_y(-1.3))
        r = RotationMatrix.rotation_x(0.4).then(RotationMatrix.rotation_y(-1.3))
        assert jnp.allclose(q.to_matrix(), r.to_matrix(), atol=ATOL)

    def test_then_rejects_matrix(self):
        with pytest.raises(TypeError):
            Quaternion.identity().then(RotationMatrix.identity())

    def test_inverse(self):
        q = Quaternion.rotation_z(0.9).then(Quaternion.rotation_x(0.2))
        assert q.then(q.inverse()) == Quaternion.identity()

    def test_sign_equivalence(self):
        q = Quaternion.rotation_y(0.6)
        assert q == -q

    def test_canonical(self):
        q = -Quaternion.rotation_z(0.3)
        assert float(q.w) < 0.0
        c = q.canonical()
        assert float(c.w) > 0.0
        assert jnp.allclose(c.to_matrix(), q.to_matrix(), atol=ATOL)

    def test_round_trip_through_matrix(self):
        q = compose_rotations(
            Quaternion.rotation_z(2.9), Quaternion.rotation_x(-0.4), Quaternion.rotation_y(1.7)
        )
        back = q.to_rotation_matrix().to_quaternion()
        assert back == q

    def test_matrix_round_trip_keeps_canonical_sign(self):
        q = Quaternion.rotation_x(0.8).to_rotation_matrix().to_quaternion()
        assert float(q.w) > 0.0
        assert q == Quaternion.rotation_x(0.8)

    def test_apply(self):
        q = Quaternion.rotation_x(1.0)
        v = jnp.array([0.0, 1.0, 0.0])
        assert jnp.allclose(q.apply(v), Rx(1.0) @ v, atol=ATOL)


# ===========================================================================
# compose_rotations
# ===========================================================================


class TestComposeRotations:
    def test_order_is_first_applied_first(self):
        r = compose_rotations(
            RotationMatrix.rotation_x(0.1),
            RotationMatrix.rotation_y(0.2),
            RotationMatrix.rotation_z(0.3),
        )
        expected = Rz(0.3) @ Ry(0.2) @ Rx(0.1)
        assert jnp.allclose(r.to_matrix(), expected, atol=ATOL)

    def test_quaternion_chain(self):
        q = compose_rotations(
            Quaternion.rotation_x(0.1),
            Quaternion.rotation_y(0.2),
            Quaternion.rotation_z(0.3),
        )
        expected = Rz(0.3) @ Ry(0.2) @ Rx(0.1)
        assert jnp.allclose(q.to_matrix(), expected, atol=ATOL)

    @pytest.mark.parametrize("cls", [RotationMatrix, Quaternion])
    def test_grouping_does_not_matter(self, cls):
        a = compose_rotations(cls.rotation_x(0.4), cls.rotation_z(-1.1))
        b = cls.rotation_y(0.7)
        c = compose_rotations(cls.rotation_z(2.3), cls.rotation_x(-0.2))
        left = compose_rotations(compose_rotations(a, b), c)
        right = compose_rotations(a, compose_rotations(b, c))
        flat = compose_rotations(a, b, c)
        assert jnp.allclose(left.to_matrix(), right.to_matrix(), atol=ATOL)
        assert jnp.allclose(left.to_matrix(), flat.to_matrix(), atol=ATOL)

    def test_grouping_representations_agree(self):
        angles = [(0.4, "x"), (-1.1, "z"), (0.7, "y"), (2.3, "z")]

        def chain(cls):
            rs = [getattr(cls, f"rotation_{axis}")(angle) for angle, axis in angles]
            return compose_rotations(compose_rotations(rs[0], rs[1]), compose_rotations(rs[2], rs[3]))

        assert jnp.allclose(
            chain(RotationMatrix).to_matrix(), chain(Quaternion).to_matrix(), atol=ATOL
        )

    def test_requires_two(self):
        with pytest.raises(ValueError):
            compose_rotations(RotationMatrix.identity())

    def test_mixed_types(self):
        with pytest.raises(TypeError):
            compose_rotations(RotationMatrix.identity(), Quaternion.identity())

    def test_non_rotation(self):
        with pytest.raises(TypeError):
            compose_rotations(jnp.eye(3), jnp.eye(3))


# ===========================================================================
# Representation
# ===========================================================================


class TestRepresentation:
    def test_default(self):
        assert Representation.coerce(None) is Representation.MATRIX

    @pytest.mark.parametrize(
        "value,expected",
        [
            (Representation.QUATERNION, Representation.QUATERNION),
            (RotationMatrix, Representation.MATRIX),
            (Quaternion, Representation.QUATERNION),
            ("DCM", Representation.MATRIX),
            ("rotation_matrix", Representation.MATRIX),
            ("quat", Representation.QUATERNION),
        ],
    )
    def test_coerce(self, value, expected):
        assert Representation.coerce(value) is expected

    @pytest.mark.parametrize("value", ["euler", 3, jnp.eye(3)])
    def test_coerce_invalid(self, value):
        with pytest.raises(InvalidRepresentationError):
            Representation.coerce(value)

    def test_invalid_is_value_error(self):
        with pytest.raises(ValueError):
            Representation.coerce("axis_angle")

    def test_builders(self):
        assert isinstance(Representation.MATRIX.rotation_x(0.1), RotationMatrix)
        assert isinstance(Representation.QUATERNION.rotation_z(0.1), Quaternion)
        assert Representation.QUATERNION.identity() == Quaternion.identity()
