"""
# Author : Saif Aati
# Contact: SAIF AATI  <saif@caltech.edu> <saifaati@gmail.com>
# Copyright (C) 2022
"""
import numpy as np
import pytest

from geoLOSModel.geoCore.constants import ACQUISITION_TYPE
from geoLOSModel.geoErrorsWarning.geoErrors import LOSModelConfigError
from geoLOSModel.geoSpacecraft.ephemeris import (EphemerisModel, allocate_ephemeris_records, free_ephemeris,
                                                 get_position_and_velocity_at_time)

ECEF_P0 = np.array([7.0e6, -1.2e6, 3.0e5])
ECEF_V = np.array([100.0, 7400.0, -250.0])
ECI_P0 = np.array([-2.0e6, 6.5e6, 1.0e6])
ECI_V = np.array([-7000.0, 50.0, 1200.0])


def linear_ephemeris(n=8, dt=10.0):
    records = allocate_ephemeris_records(n)
    records['seconds_from_epoch'] = dt * np.arange(n)
    t = records['seconds_from_epoch'][:, None]
    records['precision_ecef_position'] = ECEF_P0 + ECEF_V * t
    records['precision_ecef_velocity'] = ECEF_V
    records['precision_eci_position'] = ECI_P0 + ECI_V * t
    records['precision_eci_velocity'] = ECI_V
    # Raw channels differ so the interpolation must read the precision ones
    records['ecef_position'] = 1.0
    records['eci_position'] = 1.0
    return EphemerisModel([2021, 100, 3600.0], dt, records)


eph = linear_ephemeris()


@pytest.mark.parametrize('eph_time', [0.0, 12.5, 35.0, 47.3, 70.0])
def test_earth_acquisition_uses_ecef(eph_time):
    position, velocity = get_position_and_velocity_at_time(eph, ACQUISITION_TYPE.EARTH, eph_time)
    np.testing.assert_allclose(position, ECEF_P0 + ECEF_V * eph_time, rtol=1e-12)
    np.testing.assert_allclose(velocity, ECEF_V, rtol=1e-12)


@pytest.mark.parametrize('acquisition_type', [ACQUISITION_TYPE.LUNAR, ACQUISITION_TYPE.STELLAR])
def test_celestial_acquisition_uses_eci(acquisition_type):
    position, velocity = get_position_and_velocity_at_time(eph, acquisition_type, 23.0)
    np.testing.assert_allclose(position, ECI_P0 + ECI_V * 23.0, rtol=1e-12)
    np.testing.assert_allclose(velocity, ECI_V, rtol=1e-12)


@pytest.mark.parametrize('eph_time', [-5.0, 72.0])
def test_window_clamped_outside_span(eph_time):
    with pytest.warns(UserWarning):
        position, _ = get_position_and_velocity_at_time(eph, ACQUISITION_TYPE.EARTH, eph_time)
    np.testing.assert_allclose(position, ECEF_P0 + ECEF_V * eph_time, rtol=1e-12)


def test_too_few_samples():
    with pytest.raises(LOSModelConfigError):
        get_position_and_velocity_at_time(linear_ephemeris(3), ACQUISITION_TYPE.EARTH, 5.0)


def test_invalid_sample_time():
    bad = linear_ephemeris()
    bad.nominal_sample_time = 0.0
    with pytest.raises(LOSModelConfigError):
        get_position_and_velocity_at_time(bad, ACQUISITION_TYPE.EARTH, 5.0)


def test_free_ephemeris():
    model = linear_ephemeris()
    assert model.sample_count == 8
    free_ephemeris(model)
    assert model.sample_count == 0
    np.testing.assert_array_equal(model.utc_epoch_time, [0, 0, 0])
    free_ephemeris(model)
    free_ephemeris(None)
