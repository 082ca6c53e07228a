import pytest

from framejax.eop import eop_from_arrays, static_eop
from framejax.epoch import Epoch
from framejax.errors import DataCoverageError
from framejax.time import (
    TT_TAI,
    TimeScale,
    caldate_to_jd,
    caldate_to_mjd,
    jd_to_mjd,
    jd_utc_to_tt,
    jd_utc_to_ut1,
    leap_seconds_tai_utc,
    mjd_to_jd,
)

# 1986-06-19 21:35:00 UTC
_JD_1986 = 2446601.3993055555


def test_caldate_to_mjd():
    assert caldate_to_mjd(2000, 1, 1, 12, 0, 0) == pytest.approx(51544.5, abs=1e-9)


def test_caldate_to_jd():
    assert caldate_to_jd(2000, 1, 1, 12, 0, 0) == pytest.approx(2451545.0, abs=1e-9)


def test_caldate_to_jd_with_time():
    assert caldate_to_jd(1986, 6, 19, 21, 35, 0.0) == pytest.approx(_JD_1986, abs=1e-8)


def test_jd_to_mjd():
    assert jd_to_mjd(2451545.0) == pytest.approx(51544.5, abs=1e-9)


def test_mjd_to_jd():
    assert mjd_to_jd(51544.5) == pytest.approx(2451545.0, abs=1e-9)


class TestLeapSeconds:
    def test_first_entry(self):
        assert leap_seconds_tai_utc(41317.0) == 10.0

    def test_step_boundary(self):
        # 2017-01-01 is MJD 57754
        assert leap_seconds_tai_utc(57753.999) == 36.0
        assert leap_seconds_tai_utc(57754.0) == 37.0

    def test_1986(self):
        assert leap_seconds_tai_utc(jd_to_mjd(_JD_1986)) == 23.0

    def test_after_table_holds_last_value(self):
        assert leap_seconds_tai_utc(60000.0) == 37.0

    def test_before_1972_raises(self):
        with pytest.raises(DataCoverageError):
            leap_seconds_tai_utc(41316.5)


class TestUTCToTT:
    def test_offset_j2000(self):
        # TAI-UTC = 32 s in 2000
        jd_tt = jd_utc_to_tt(2451545.0)
        assert (jd_tt - 2451545.0) * 86400.0 == pytest.approx(32.0 + TT_TAI, abs=1e-4)

    def test_offset_1986(self):
        jd_tt = jd_utc_to_tt(_JD_1986)
        assert (jd_tt - _JD_1986) * 86400.0 == pytest.approx(55.184, abs=1e-4)

    def test_before_1972_raises(self):
        with pytest.raises(DataCoverageError):
            jd_utc_to_tt(2440000.5)


class TestUTCToUT1:
    def test_without_eop_is_identity(self):
        assert jd_utc_to_ut1(_JD_1986) == _JD_1986

    def test_with_static_eop(self):
        eop = static_eop(ut1_utc=-0.25)
        jd_ut1 = jd_utc_to_ut1(_JD_1986, eop)
        assert (jd_ut1 - _JD_1986) * 86400.0 == pytest.approx(-0.25, abs=1e-4)

    def test_interpolates(self):
        eop = eop_from_arrays(
            "IAU1980",
            mjd=[46600.0, 46601.0],
            pm_x=[0.0, 0.0],
            pm_y=[0.0, 0.0],
            ut1_utc=[0.1, 0.2],
            pole_1=[0.0, 0.0],
            pole_2=[0.0, 0.0],
        )
        jd_ut1 = jd_utc_to_ut1(mjd_to_jd(46600.5), eop)
        assert (jd_ut1 - mjd_to_jd(46600.5)) * 86400.0 == pytest.approx(0.15, abs=1e-4)

    def test_outside_coverage_raises(self):
        eop = static_eop(mjd_min=50000.0, mjd_max=51000.0)
        with pytest.raises(DataCoverageError):
            jd_utc_to_ut1(_JD_1986, eop)


class TestEpoch:
    def test_default_scale_is_utc(self):
        assert Epoch(_JD_1986).time_scale is TimeScale.UTC

    def test_from_date(self):
        epc = Epoch.from_date(1986, 6, 19, 21, 35, 0.0)
        assert epc.jd() == pytest.approx(_JD_1986, abs=1e-8)
        assert epc.mjd() == pytest.approx(46600.8993055555, abs=1e-8)

    def test_from_mjd(self):
        epc = Epoch.from_mjd(51544.5, TimeScale.TT)
        assert epc.jd() == pytest.approx(2451545.0, abs=1e-9)
        assert epc.time_scale is TimeScale.TT

    def test_string_scale(self):
        assert Epoch(2451545.0, "tt").time_scale is TimeScale.TT

    def test_invalid_scale(self):
        with pytest.raises(ValueError):
            Epoch(2451545.0, "TAI")

    def test_to_tt(self):
        epc_tt = Epoch(_JD_1986).to_tt()
        assert epc_tt.time_scale is TimeScale.TT
        assert epc_tt.jd() == pytest.approx(jd_utc_to_tt(_JD_1986), abs=1e-12)

    def test_to_tt_idempotent(self):
        epc = Epoch(2451545.0, TimeScale.TT)
        assert epc.to_tt() is epc

    def test_to_ut1(self):
        eop = static_eop(ut1_utc=0.5)
        epc_ut1 = Epoch(_JD_1986).to_ut1(eop)
        assert epc_ut1.time_scale is TimeScale.UT1
        assert (epc_ut1.jd() - _JD_1986) * 86400.0 == pytest.approx(0.5, abs=1e-4)

    def test_to_ut1_without_eop(self):
        assert Epoch(_JD_1986).to_ut1().jd() == _JD_1986

    def test_to_ut1_from_tt_raises(self):
        with pytest.raises(ValueError):
            Epoch(_JD_1986, TimeScale.TT).to_ut1()

    def test_to_tt_from_ut1_raises(self):
        with pytest.raises(ValueError):
            Epoch(_JD_1986, TimeScale.UT1).to_tt()

    def test_equality(self):
        assert Epoch(_JD_1986) == Epoch(_JD_1986, TimeScale.UTC)
        assert Epoch(_JD_1986) != Epoch(_JD_1986, TimeScale.TT)

    def test_hashable(self):
        assert len({Epoch(_JD_1986), Epoch(_JD_1986)}) == 1
