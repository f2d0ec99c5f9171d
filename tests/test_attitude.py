"""
# Author : Saif Aati
# Contact: SAIF AATI  <saif@caltech.edu> <saifaati@gmail.com>
# Copyright (C) 2022
"""
import numpy as np
import pytest

from geoLOSModel.geoErrorsWarning.geoErrors import LOSModelConfigError
from geoLOSModel.geoSpacecraft.attitude import (AttitudeModel, copy_attitude, design_low_pass_kernel,
                                                find_attitude_at_time, find_jitter_attitude_at_time, free_attitude,
                                                initialize_attitude, reflect_index, remez_filter_attitude,
                                                separate_jitter, subtract_attitude, transfer_jitter_attitude_bias)

EPOCH = [2021, 100, 3600.0]


def build_attitude(satellite_attitude, nominal_sample_time=1.0, t0=0.0, precision_attitude=None):
    satellite_attitude = np.asarray(satellite_attitude, dtype=float)
    times = t0 + nominal_sample_time * np.arange(len(satellite_attitude))
    return AttitudeModel.from_arrays(EPOCH, nominal_sample_time, times, satellite_attitude, precision_attitude)


def spike_attitude():
    sat = np.zeros((5, 3))
    sat[2] = [0.01, 0.0, 0.0]
    return build_attitude(sat)


def ramp_attitude(n=8, t0=0.0):
    times = np.arange(n, dtype=float)
    prec = np.outer(times + t0, [1e-3, 2e-3, -3e-3])
    return build_attitude(prec * 0.5, t0=t0, precision_attitude=prec)


def test_empty_attitude():
    att = AttitudeModel()
    assert att.sample_count == 0
    assert att.sample_records is None
    np.testing.assert_array_equal(att.utc_epoch_time, [0, 0, 0])


def test_initialize_and_free_attitude():
    att = spike_attitude()
    assert att.sample_count == 5
    free_attitude(att)
    assert att.sample_count == 0 and att.sample_records is None
    assert att.nominal_sample_time == 0.0
    np.testing.assert_array_equal(att.utc_epoch_time, [0, 0, 0])
    free_attitude(att)
    free_attitude(None)
    assert initialize_attitude().sample_count == 0


def test_copy_attitude_is_deep():
    src = ramp_attitude()
    dst = copy_attitude(src)
    assert dst.sample_count == src.sample_count
    np.testing.assert_array_equal(dst.utc_epoch_time, src.utc_epoch_time)
    assert dst.nominal_sample_time == src.nominal_sample_time
    for key in ['seconds_from_epoch', 'satellite_attitude', 'precision_attitude']:
        np.testing.assert_array_equal(dst.sample_records[key], src.sample_records[key])

    dst.sample_records['precision_attitude'][3] = [9.0, 9.0, 9.0]
    dst.utc_epoch_time[0] = 1999
    assert not np.any(src.sample_records['precision_attitude'] == 9.0)
    assert src.utc_epoch_time[0] == EPOCH[0]


def test_copy_empty_attitude():
    assert copy_attitude(AttitudeModel(EPOCH, 1.0)).sample_count == 0


def test_subtract_attitude():
    att_1 = ramp_attitude(6)
    att_2 = ramp_attitude(8)
    att_2.utc_epoch_time = np.array([2000, 1, 0.0])
    out = subtract_attitude(att_1, att_2)
    assert out.sample_count == 6
    np.testing.assert_array_equal(out.utc_epoch_time, EPOCH)
    np.testing.assert_allclose(out.sample_records['satellite_attitude'], 0.0)
    np.testing.assert_allclose(out.sample_records['precision_attitude'], 0.0)
    np.testing.assert_array_equal(out.sample_records['seconds_from_epoch'], att_1.sample_records['seconds_from_epoch'])


def test_subtract_attitude_too_few_samples():
    with pytest.raises(LOSModelConfigError):
        subtract_attitude(ramp_attitude(8), ramp_attitude(6))


att = ramp_attitude(5)


@pytest.mark.parametrize('att_time, index', [(0.0, 0), (1.0, 1), (2.0, 2), (3.0, 3)])
def test_find_attitude_at_sample_time(att_time, index):
    np.testing.assert_array_equal(find_attitude_at_time(att, att_time), att.sample_records['precision_attitude'][index])


def test_find_attitude_between_samples():
    expected = 0.5 * (att.sample_records['precision_attitude'][1] + att.sample_records['precision_attitude'][2])
    np.testing.assert_allclose(find_attitude_at_time(att, 1.5), expected)


@pytest.mark.parametrize('att_time', [-0.1, -5.0, 4.0, 4.5, 10.0])
def test_find_attitude_out_of_span(att_time):
    with pytest.raises(LOSModelConfigError):
        find_attitude_at_time(att, att_time)


def test_find_attitude_invalid_sample_time():
    bad = ramp_attitude(5)
    bad.nominal_sample_time = 0.0
    with pytest.raises(LOSModelConfigError):
        find_attitude_at_time(bad, 1.0)


@pytest.mark.parametrize('t0, att_time', [(0.0, 1.0), (0.0, 1.5), (0.0, 2.75), (10.0, 11.5), (10.0, 12.25)])
def test_find_jitter_attitude_at_time(t0, att_time):
    ramp = ramp_attitude(6, t0=t0)
    # Cubic Lagrange is exact on a linear sequence
    np.testing.assert_allclose(find_jitter_attitude_at_time(ramp, att_time),
                               np.array([1e-3, 2e-3, -3e-3]) * att_time, atol=1e-14)


@pytest.mark.parametrize('att_time', [0.5, 0.99, 4.0, 7.0])
def test_find_jitter_attitude_out_of_span(att_time):
    with pytest.raises(LOSModelConfigError):
        find_jitter_attitude_at_time(ramp_attitude(6), att_time)


def test_find_jitter_attitude_too_few_samples():
    with pytest.raises(LOSModelConfigError):
        find_jitter_attitude_at_time(ramp_attitude(3), 1.5)


@pytest.mark.parametrize('cutoff, sample_time, kwargs, size', [
    (0.25, 1.0, {}, 13),
    (0.1, 1.0, {}, 31),
    (0.05, 2.0, {}, 31),
    (0.25, 1.0, {'freq_samp_factor': 2}, 9),
])
def test_design_low_pass_kernel(cutoff, sample_time, kwargs, size):
    kernel = design_low_pass_kernel(cutoff, sample_time, **kwargs)
    assert len(kernel) == size
    assert np.sum(kernel) == pytest.approx(1.0)
    np.testing.assert_allclose(kernel, kernel[::-1], atol=1e-12)
    assert np.argmax(kernel) == size // 2


@pytest.mark.parametrize('cutoff, sample_time', [(0.0, 1.0), (-1.0, 1.0), (0.1, 0.0)])
def test_design_low_pass_kernel_invalid(cutoff, sample_time):
    with pytest.raises(LOSModelConfigError):
        design_low_pass_kernel(cutoff, sample_time)


@pytest.mark.parametrize('band_weights', [(1.0,), (1.0, 10.0, 5.0)])
def test_design_low_pass_kernel_band_weights(band_weights):
    with pytest.raises(LOSModelConfigError):
        design_low_pass_kernel(0.1, 1.0, band_weights=band_weights)


@pytest.mark.parametrize('index, count, expected', [
    (0, 5, 0), (4, 5, 4), (-1, 5, 1), (-3, 5, 3), (5, 5, 4), (6, 5, 3), (-7, 5, 2), (8, 5, 1), (3, 1, 0)])
def test_reflect_index(index, count, expected):
    assert reflect_index(index, count) == expected


def test_remez_filter_constant_sequence():
    constant = build_attitude(np.tile([0.01, -0.02, 0.03], (40, 1)))
    low = remez_filter_attitude(constant, 0.1)
    np.testing.assert_allclose(low.sample_records['satellite_attitude'], constant.sample_records['satellite_attitude'],
                               atol=1e-14)
    np.testing.assert_allclose(low.sample_records['precision_attitude'], constant.sample_records['precision_attitude'],
                               atol=1e-14)


def test_remez_filter_constant_short_sequence():
    constant = build_attitude(np.tile([0.5, 0.5, 0.5], (5, 1)))
    with pytest.warns(UserWarning):
        low = remez_filter_attitude(constant, 0.25)
    np.testing.assert_allclose(low.sample_records['satellite_attitude'], 0.5, atol=1e-14)


def test_remez_filter_spike():
    raw = spike_attitude()
    with pytest.warns(UserWarning):
        low = remez_filter_attitude(raw, 0.25)
    assert low.sample_count == raw.sample_count
    np.testing.assert_array_equal(low.utc_epoch_time, raw.utc_epoch_time)
    np.testing.assert_array_equal(low.sample_records['seconds_from_epoch'], raw.sample_records['seconds_from_epoch'])
    assert low.sample_records['satellite_attitude'][2, 0] < 0.01
    assert low.sample_records['precision_attitude'][2, 0] < 0.01

    high = subtract_attitude(raw, low)
    removed = 0.01 - low.sample_records['satellite_attitude'][2, 0]
    assert high.sample_records['satellite_attitude'][2, 0] == pytest.approx(removed, abs=1e-15)
    np.testing.assert_allclose(high.sample_records['satellite_attitude'] + low.sample_records['satellite_attitude'],
                               raw.sample_records['satellite_attitude'], atol=1e-15)


def test_remez_filter_attenuates_high_frequency():
    n = 200
    times = np.arange(n, dtype=float)
    slow = 1e-3 * np.sin(2 * np.pi * 0.01 * times)
    fast = 1e-4 * np.sin(2 * np.pi * 0.4 * times)
    raw = build_attitude(np.column_stack([slow + fast, slow, fast]))
    low = remez_filter_attitude(raw, 0.1)
    interior = slice(40, 160)
    np.testing.assert_allclose(low.sample_records['satellite_attitude'][interior, 1], slow[interior], atol=1e-4)
    assert np.max(np.abs(low.sample_records['satellite_attitude'][interior, 2])) < 2e-5


def test_remez_filter_leaves_input_untouched():
    raw = spike_attitude()
    before = raw.sample_records.copy()
    with pytest.warns(UserWarning):
        remez_filter_attitude(raw, 0.25)
    np.testing.assert_array_equal(raw.sample_records, before)


def test_remez_filter_empty():
    assert remez_filter_attitude(AttitudeModel(EPOCH, 1.0), 0.1).sample_count == 0


def test_transfer_jitter_attitude_bias():
    from_att = build_attitude(np.tile([0.1, -0.2, 0.0], (10, 1)))
    to_att = build_attitude(np.zeros((10, 3)))
    transfer_jitter_attitude_bias(-100.0, 100.0, from_att, to_att)
    np.testing.assert_allclose(from_att.sample_records['satellite_attitude'], 0.0, atol=1e-15)
    np.testing.assert_allclose(to_att.sample_records['satellite_attitude'], np.tile([0.1, -0.2, 0.0], (10, 1)))
    np.testing.assert_allclose(to_att.sample_records['precision_attitude'], np.tile([0.1, -0.2, 0.0], (10, 1)))


def test_transfer_jitter_attitude_bias_window():
    sat = np.zeros((10, 3))
    sat[:, 0] = np.arange(10, dtype=float)
    from_att = build_attitude(sat)
    to_att = build_attitude(np.zeros((10, 3)))
    # window [2, 4] -> indices 2..5, mean 3.5
    transfer_jitter_attitude_bias(2.0, 4.0, from_att, to_att)
    np.testing.assert_allclose(to_att.sample_records['satellite_attitude'][:, 0], 3.5)
    np.testing.assert_allclose(from_att.sample_records['satellite_attitude'][:, 0], np.arange(10) - 3.5)


@pytest.mark.parametrize('start_time, stop_time', [(8.0, -10.0), (50.0, 60.0)])
def test_transfer_jitter_attitude_bias_invalid_window(start_time, stop_time):
    with pytest.raises(LOSModelConfigError):
        transfer_jitter_attitude_bias(start_time, stop_time, ramp_attitude(5), ramp_attitude(5))


def test_transfer_jitter_attitude_bias_no_samples():
    with pytest.raises(LOSModelConfigError):
        transfer_jitter_attitude_bias(0.0, 1.0, AttitudeModel(EPOCH, 1.0), ramp_attitude(5))


def test_separate_jitter():
    n = 100
    times = np.arange(n, dtype=float)
    roll = 1e-3 * np.sin(2 * np.pi * 0.01 * times) + 2e-5 * np.sin(2 * np.pi * 0.35 * times) + 5e-4
    raw = build_attitude(np.column_stack([roll, 0.5 * roll, -roll]))
    low, jitter = separate_jitter(raw, 0.1, 10.0, 90.0)
    np.testing.assert_allclose(low.sample_records['satellite_attitude'] + jitter.sample_records['satellite_attitude'],
                               raw.sample_records['satellite_attitude'], atol=1e-15)
    assert abs(np.mean(jitter.sample_records['satellite_attitude'][10:92, 0])) < 1e-15
