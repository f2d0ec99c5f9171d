"""
# Author : Saif Aati
# Contact: SAIF AATI  <saif@caltech.edu> <saifaati@gmail.com>
# Copyright (C) 2022
"""
import numpy as np
import pytest

from geoLOSModel.geoCore.constants import DETECTOR_TYPE, SENSOR_ID
from geoLOSModel.geoErrorsWarning.geoErrors import LOSModelConfigError
from geoLOSModel.geoSensor.sensor_model import (BandModel, SCAModel, SensorModel, SSMModel, find_time,
                                                get_band_frame_times, set_frame_times)

FRAME_TIMES = 100.0 + 0.01 * np.arange(10)


def build_sensor_model(set_times=True):
    sensor_model = SensorModel()
    sensor_model.bands = []
    for sensor_id in [SENSOR_ID.OLI, SENSOR_ID.OLI, SENSOR_ID.TIRS]:
        band = BandModel()
        band.band_present = True
        band.sensor_id = sensor_id
        band.sca_count = 2
        band.scas = [SCAModel(6) for _ in range(band.sca_count)]
        band.sampling_char.sampling_time = 0.01
        sensor_model.bands.append(band)
    if set_times:
        set_frame_times(sensor_model, SENSOR_ID.OLI, FRAME_TIMES)
    return sensor_model


def test_set_frame_times():
    sensor_model = build_sensor_model()
    assert [band.frame_count for band in sensor_model.bands] == [10, 10, 0]
    assert sensor_model.frame_counts == [10, 0]
    np.testing.assert_array_equal(get_band_frame_times(sensor_model, 1), FRAME_TIMES)
    assert get_band_frame_times(sensor_model, 2) is None

    set_frame_times(sensor_model, SENSOR_ID.TIRS, [5.0, 6.0])
    assert sensor_model.bands[2].frame_count == 2


def test_set_frame_times_twice():
    sensor_model = build_sensor_model()
    with pytest.raises(LOSModelConfigError):
        set_frame_times(sensor_model, SENSOR_ID.OLI, FRAME_TIMES)


@pytest.mark.parametrize('sensor_id', [2, -1])
def test_set_frame_times_invalid_sensor(sensor_id):
    with pytest.raises(LOSModelConfigError):
        set_frame_times(build_sensor_model(False), sensor_id, FRAME_TIMES)


@pytest.mark.parametrize('line, expected', [(0.0, 100.00), (3.0, 100.03), (3.4, 100.034), (20.0, 100.20),
                                            (-2.0, 99.98)])
def test_find_time_exact(line, expected):
    sensor_model = build_sensor_model()
    assert find_time(line, 2.0, 0, 1, sensor_model) == pytest.approx(expected, abs=1e-12)


def test_find_time_nominal_detector():
    sensor_model = build_sensor_model()
    sca = sensor_model.bands[0].scas[0]
    sca.l0r_detector_offsets[3] = 2
    sca.nominal_fill = 1
    # Exact uses the l0r offset, nominal adds back the fill relative offset
    assert find_time(5.0, 3.0, 0, 0, sensor_model, DETECTOR_TYPE.EXACT) == pytest.approx(100.03, abs=1e-12)
    assert find_time(5.0, 3.0, 0, 0, sensor_model, DETECTOR_TYPE.NOMINAL) == pytest.approx(100.04, abs=1e-12)
    assert find_time(5.0, 3.0, 0, 0, sensor_model, DETECTOR_TYPE.ACTUAL) == pytest.approx(100.03, abs=1e-12)


def test_find_time_maximum_detector():
    sensor_model = build_sensor_model()
    sensor_model.bands[0].sampling_char.maximum_detector_delay = 2.4
    sensor_model.bands[0].scas[0].nominal_fill = 1
    assert find_time(5.0, 0.0, 0, 0, sensor_model, DETECTOR_TYPE.MAXIMUM) == pytest.approx(100.02, abs=1e-12)


def test_find_time_frame_delay():
    sensor_model = build_sensor_model()
    sensor_model.bands[0].sampling_char.frame_delay = True
    assert find_time(3.0, 0.0, 0, 0, sensor_model) == pytest.approx(100.04, abs=1e-12)


@pytest.mark.parametrize('frame_start, expected', [(False, 100.03 - 0.001 - 0.0005),
                                                   (True, 100.03 + 0.001 - 0.0005)])
def test_find_time_integration_and_settling(frame_start, expected):
    sensor_model = build_sensor_model()
    samp_char = sensor_model.bands[0].sampling_char
    samp_char.integration_time = 0.002
    samp_char.settling_time = 0.0005
    samp_char.time_codes_at_frame_start = frame_start
    assert find_time(3.0, 0.0, 0, 0, sensor_model) == pytest.approx(expected, abs=1e-12)


def test_find_time_lines_per_frame():
    sensor_model = build_sensor_model()
    sensor_model.bands[1].sampling_char.lines_per_frame = 2
    # line 7 is the second line of frame 3
    assert find_time(7.0, 0.0, 1, 0, sensor_model) == pytest.approx(100.04, abs=1e-12)


@pytest.mark.parametrize('sample', [-0.6, 5.5, 10.0])
def test_find_time_sample_out_of_range(sample):
    with pytest.raises(LOSModelConfigError):
        find_time(3.0, sample, 0, 0, build_sensor_model())


def test_find_time_without_frame_times():
    sensor_model = build_sensor_model()
    with pytest.raises(LOSModelConfigError):
        find_time(3.0, 0.0, 2, 0, sensor_model)


def test_ssm_model():
    assert SSMModel().ssm_record_count == 0
    ssm = SSMModel(12)
    assert ssm.ssm_record_count == 12
    np.testing.assert_array_equal(ssm.alignment_matrix, np.eye(3))


def test_sca_model_free():
    sca = SCAModel(494)
    assert sca.l0r_detector_offsets.dtype == np.int32
    assert len(sca.detector_offsets_along_track) == 494
    sca.free()
    assert sca.l0r_detector_offsets is None and sca.detector_offsets_across_track is None
