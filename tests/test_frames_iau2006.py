"""Tests for the elementary IAU-2006/2010 CIO-based frame rotations."""

import erfa
import jax.numpy as jnp
import numpy as np
import pytest

from framejax.attitude_representations import Representation, RotationMatrix
from framejax.constants import AS2RAD
from framejax.frames.iau2006 import (
    rotation_cirs_to_gcrf_iau2006,
    rotation_itrf_to_gcrf_iau2006,
    rotation_itrf_to_tirs_iau2006,
    rotation_tirs_to_cirs_iau2006,
)
from framejax.sofa import MJD_ZERO

# SOFA cookbook example: 2007-04-05 12:00 UTC
_JD_UTC = 2454196.0
_JD_TT = _JD_UTC + 65.184 / 86400.0
_JD_UT1 = _JD_UTC - 0.072073685 / 86400.0

_X_P = 0.0349282 * AS2RAD
_Y_P = 0.4833163 * AS2RAD
_DX = 0.1750 * 1e-3 * AS2RAD
_DY = -0.2259 * 1e-3 * AS2RAD

ATOL = 1e-12


def _split(jd):
    return MJD_ZERO, jd - MJD_ZERO


class TestPolarMotion:
    def test_matches_erfa_pom00(self):
        r = rotation_itrf_to_tirs_iau2006(Representation.MATRIX, _JD_TT, _X_P, _Y_P)
        expected = erfa.pom00(_X_P, _Y_P, erfa.sp00(*_split(_JD_TT))).T
        assert np.allclose(np.asarray(r.to_matrix()), expected, atol=ATOL)

    def test_quaternion(self):
        q = rotation_itrf_to_tirs_iau2006(Representation.QUATERNION, _JD_TT, _X_P, _Y_P)
        r = rotation_itrf_to_tirs_iau2006(Representation.MATRIX, _JD_TT, _X_P, _Y_P)
        assert jnp.allclose(q.to_matrix(), r.to_matrix(), atol=ATOL)


class TestEarthRotation:
    def test_rz_of_era(self):
        r = rotation_tirs_to_cirs_iau2006(Representation.MATRIX, _JD_UT1)
        era = erfa.era00(*_split(_JD_UT1))
        c, s = np.cos(-era), np.sin(-era)
        expected = np.array([[c, s, 0.0], [-s, c, 0.0], [0.0, 0.0, 1.0]])
        assert np.allclose(np.asarray(r.to_matrix()), expected, atol=1e-11)


class TestCelestialToIntermediate:
    def test_matches_erfa_c2ixys(self):
        r = rotation_cirs_to_gcrf_iau2006(Representation.MATRIX, _JD_TT)
        x, y, s = erfa.xys06a(*_split(_JD_TT))
        expected = erfa.c2ixys(x, y, s).T
        assert np.allclose(np.asarray(r.to_matrix()), expected, atol=ATOL)

    def test_pole_offsets(self):
        r = rotation_cirs_to_gcrf_iau2006(Representation.MATRIX, _JD_TT, _DX, _DY)
        x, y, s = erfa.xys06a(*_split(_JD_TT))
        expected = erfa.c2ixys(x + _DX, y + _DY, s).T
        assert np.allclose(np.asarray(r.to_matrix()), expected, atol=ATOL)

    def test_quaternion(self):
        q = rotation_cirs_to_gcrf_iau2006(Representation.QUATERNION, _JD_TT, _DX, _DY)
        r = rotation_cirs_to_gcrf_iau2006(Representation.MATRIX, _JD_TT, _DX, _DY)
        assert jnp.allclose(q.to_matrix(), r.to_matrix(), atol=ATOL)


class TestFullChain:
    def test_matches_erfa_c2t06a(self):
        r = rotation_itrf_to_gcrf_iau2006(Representation.MATRIX, _JD_UT1, _JD_TT, _X_P, _Y_P)
        expected = erfa.c2t06a(*_split(_JD_TT), *_split(_JD_UT1), _X_P, _Y_P).T
        assert np.allclose(np.asarray(r.to_matrix()), expected, atol=1e-11)

    def test_with_pole_offsets(self):
        r = rotation_itrf_to_gcrf_iau2006(
            Representation.MATRIX, _JD_UT1, _JD_TT, _X_P, _Y_P, _DX, _DY
        )
        x, y, s = erfa.xys06a(*_split(_JD_TT))
        rc2i = erfa.c2ixys(x + _DX, y + _DY, s)
        era = erfa.era00(*_split(_JD_UT1))
        rpom = erfa.pom00(_X_P, _Y_P, erfa.sp00(*_split(_JD_TT)))
        expected = erfa.c2tcio(rc2i, era, rpom).T
        assert np.allclose(np.asarray(r.to_matrix()), expected, atol=1e-11)

    def test_orthonormal(self):
        r = rotation_itrf_to_gcrf_iau2006(Representation.MATRIX, _JD_UT1, _JD_TT, _X_P, _Y_P)
        m = r.to_matrix()
        assert jnp.allclose(m @ m.T, jnp.eye(3), atol=ATOL)
        assert float(jnp.linalg.det(m)) == pytest.approx(1.0, abs=ATOL)

    def test_round_trip(self):
        r = rotation_itrf_to_gcrf_iau2006(Representation.MATRIX, _JD_UT1, _JD_TT, _X_P, _Y_P)
        assert r.then(r.inverse()) == RotationMatrix.identity()
