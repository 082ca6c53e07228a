"""Tests for the astronomical series in framejax.sofa.

The JAX translations are checked against ERFA, the C implementation of
the IAU SOFA routines, at a handful of dates.
"""

import erfa
import jax.numpy as jnp
import numpy as np
import pytest

from framejax.sofa import (
    DJ00,
    JD_EQEQ_KINEMATIC,
    MJD_ZERO,
    cip_xys06a,
    eqeq_fk5,
    era00,
    gmst82,
    nutation_fk5,
    obl80,
    prec76,
    sp00,
)

# 2007-04-05 12:00 (SOFA cookbook example epoch), 1986-06-19 21:35 and 2024-03-01 06:00
_MJDS = [54195.5, 46600.899305555555, 60370.25]


@pytest.mark.parametrize("mjd", _MJDS)
def test_gmst82(mjd):
    assert float(gmst82(MJD_ZERO, mjd)) == pytest.approx(erfa.gmst82(MJD_ZERO, mjd), abs=1e-12)


@pytest.mark.parametrize("mjd", _MJDS)
def test_era00(mjd):
    assert float(era00(MJD_ZERO, mjd)) == pytest.approx(erfa.era00(MJD_ZERO, mjd), abs=1e-12)


@pytest.mark.parametrize("mjd", _MJDS)
def test_obl80(mjd):
    assert float(obl80(MJD_ZERO, mjd)) == pytest.approx(erfa.obl80(MJD_ZERO, mjd), abs=1e-14)


@pytest.mark.parametrize("mjd", _MJDS)
def test_sp00(mjd):
    assert float(sp00(MJD_ZERO, mjd)) == pytest.approx(erfa.sp00(MJD_ZERO, mjd), abs=1e-18)


def test_obl80_at_j2000():
    assert float(obl80(DJ00, 0.0)) == pytest.approx(84381.448 * np.pi / 648000.0, abs=1e-15)


@pytest.mark.parametrize("mjd", _MJDS)
def test_prec76(mjd):
    zeta, z, theta = prec76(MJD_ZERO, mjd)
    ezeta, ez, etheta = erfa.prec76(DJ00, 0.0, MJD_ZERO, mjd)
    assert float(zeta) == pytest.approx(ezeta, abs=1e-14)
    assert float(z) == pytest.approx(ez, abs=1e-14)
    assert float(theta) == pytest.approx(etheta, abs=1e-14)


def test_prec76_zero_at_j2000():
    zeta, z, theta = prec76(DJ00, 0.0)
    assert float(zeta) == 0.0
    assert float(z) == 0.0
    assert float(theta) == 0.0


@pytest.mark.parametrize("mjd", _MJDS)
def test_nutation_fk5(mjd):
    eps0, deps, dpsi = nutation_fk5(MJD_ZERO, mjd)
    edpsi, edeps = erfa.nut80(MJD_ZERO, mjd)
    assert float(eps0) == pytest.approx(erfa.obl80(MJD_ZERO, mjd), abs=1e-14)
    assert float(deps) == pytest.approx(edeps, abs=1e-15)
    assert float(dpsi) == pytest.approx(edpsi, abs=1e-15)


class TestEquationOfEquinoxes:
    def test_matches_eqeq94_after_1997(self):
        mjd = 54195.5
        eps0, _, dpsi = nutation_fk5(MJD_ZERO, mjd)
        ee = eqeq_fk5(MJD_ZERO, mjd, dpsi, eps0)
        assert float(ee) == pytest.approx(erfa.eqeq94(MJD_ZERO, mjd), abs=1e-14)

    def test_no_kinematic_terms_before_1997(self):
        mjd = 46600.899305555555
        eps0, _, dpsi = nutation_fk5(MJD_ZERO, mjd)
        ee = eqeq_fk5(MJD_ZERO, mjd, dpsi, eps0)
        assert float(ee) == pytest.approx(float(dpsi * jnp.cos(eps0)), abs=1e-16)

    def test_kinematic_terms_after_switch(self):
        mjd = JD_EQEQ_KINEMATIC - MJD_ZERO + 1.0
        eps0, _, dpsi = nutation_fk5(MJD_ZERO, mjd)
        ee = eqeq_fk5(MJD_ZERO, mjd, dpsi, eps0)
        assert float(ee) == pytest.approx(erfa.eqeq94(MJD_ZERO, mjd), abs=1e-14)

    def test_includes_dpsi_correction(self):
        mjd = 54195.5
        eps0, _, dpsi = nutation_fk5(MJD_ZERO, mjd)
        d_psi = 1e-7
        shift = eqeq_fk5(MJD_ZERO, mjd, dpsi + d_psi, eps0) - eqeq_fk5(MJD_ZERO, mjd, dpsi, eps0)
        assert float(shift) == pytest.approx(d_psi * float(jnp.cos(eps0)), abs=1e-18)


@pytest.mark.parametrize("mjd", _MJDS)
def test_cip_xys06a(mjd):
    x, y, s = cip_xys06a(MJD_ZERO, mjd)
    ex, ey, es = erfa.xys06a(MJD_ZERO, mjd)
    assert float(x) == pytest.approx(ex, abs=1e-16)
    assert float(y) == pytest.approx(ey, abs=1e-16)
    assert float(s) == pytest.approx(es, abs=1e-16)
