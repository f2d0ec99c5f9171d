"""
# Author : Saif Aati
# Contact: SAIF AATI  <saif@caltech.edu> <saifaati@gmail.com>
# Copyright (C) 2022
"""

from typing import List, Optional

import numpy as np

from geoLOSModel.geoCore.constants import DETECTOR_TYPE, LOS_MODEL, SENSOR_ID, SSM_RECORD_DTYPE
from geoLOSModel.geoErrorsWarning.geoErrors import erAllocation, erConfig


class DetectorSamplingCharacteristics:
    def __init__(self):
        self.integration_time = 0.0  # seconds
        self.sampling_time = 0.0  # seconds
        self.lines_per_frame = 1
        self.settling_time = 0.0  # seconds
        self.along_ifov = 0.0
        self.across_ifov = 0.0
        self.maximum_detector_delay = 0.0  # IFOV
        self.time_codes_at_frame_start = False
        # One frame delay in the time codes (OLI)
        self.frame_delay = False


class SSMModel:
    """Scene select mirror model (TIRS)."""

    def __init__(self, record_count: int = 0):
        self.alignment_matrix = np.eye(3)
        self.utc_epoch_time = np.zeros(3)
        self.encoder_origin = 0.0
        self.encoder_counts_to_radians = 0.0
        self.records: Optional[np.ndarray] = None
        if record_count > 0:
            try:
                self.records = np.zeros(record_count, dtype=SSM_RECORD_DTYPE)
            except MemoryError:
                erAllocation("SSM records")

    @property
    def ssm_record_count(self) -> int:
        return 0 if self.records is None else len(self.records)


class SensorLocationModel:
    def __init__(self, sensor_id: SENSOR_ID):
        self.sensor_id = sensor_id
        self.sensor_present = False
        self.sensor2acs = np.eye(3)
        self.center_mass2sensor_offset = np.zeros(3)
        # High frequency attitude perturbations, one row per jitter entry
        self.jitter_table: Optional[np.ndarray] = None
        self.jitter_entries_per_frame = 0
        self.ssm_model: Optional[SSMModel] = None

    @property
    def jitter_table_count(self) -> int:
        return 0 if self.jitter_table is None else len(self.jitter_table)


class SCAModel:
    def __init__(self, detectors: int):
        self.detectors = int(detectors)
        self.nominal_fill = 0
        try:
            self.l0r_detector_offsets = np.zeros(self.detectors, dtype=np.int32)
            self.detector_offsets_along_track = np.zeros(self.detectors)
            self.detector_offsets_across_track = np.zeros(self.detectors)
        except MemoryError:
            erAllocation(f"detector offsets for an SCA of {detectors} detectors")
        self.sca_coef_x = np.zeros(LOS_MODEL.LEGENDRE_TERMS)
        self.sca_coef_y = np.zeros(LOS_MODEL.LEGENDRE_TERMS)

    def free(self):
        self.l0r_detector_offsets = None
        self.detector_offsets_along_track = None
        self.detector_offsets_across_track = None


class BandModel:
    """
    Geometry of one band. sensor_id indexes SensorModel.sensors; the band does not own its sensor and
    reads the frame times of that sensor through the owning SensorModel.
    """

    def __init__(self):
        self.band_present = False
        self.frame_count = 0
        self.sca_count = 0
        self.sensor_id: Optional[SENSOR_ID] = None
        self.utc_epoch_time = np.zeros(3)
        self.sampling_char = DetectorSamplingCharacteristics()
        self.scas: Optional[List[SCAModel]] = None


class SensorModel:
    def __init__(self):
        self.bands: Optional[List[BandModel]] = None
        self.frame_seconds_from_epoch: List[Optional[np.ndarray]] = [None] * LOS_MODEL.MAX_SENSORS
        self.frame_counts = [0] * LOS_MODEL.MAX_SENSORS
        self.sensors = [SensorLocationModel(SENSOR_ID(i)) for i in range(LOS_MODEL.MAX_SENSORS)]

    @property
    def band_count(self) -> int:
        return 0 if self.bands is None else len(self.bands)


def set_frame_times(sensor_model: SensorModel, sensor_id, frame_seconds_from_epoch):
    """
    Hand the frame times of a sensor to the model and set the frame count of each of its bands.
    The frame times of a sensor can be set only once.
    """
    if not 0 <= int(sensor_id) < LOS_MODEL.MAX_SENSORS:
        erConfig(f"Unsupported sensor id provided: {sensor_id}")
    if sensor_model.frame_seconds_from_epoch[sensor_id] is not None:
        erConfig("Setting the frame time from epoch a second time")

    frame_times = np.asarray(frame_seconds_from_epoch, dtype=float)
    for band in sensor_model.bands or []:
        if band.sensor_id == sensor_id:
            band.frame_count = len(frame_times)
    sensor_model.frame_seconds_from_epoch[sensor_id] = frame_times
    sensor_model.frame_counts[sensor_id] = len(frame_times)


def get_band_frame_times(sensor_model: SensorModel, band_index: int) -> Optional[np.ndarray]:
    band = sensor_model.bands[band_index]
    if band.sensor_id is None:
        return None
    return sensor_model.frame_seconds_from_epoch[band.sensor_id]


def find_time(line: float, sample: float, band_index: int, sca_index: int, sensor_model: SensorModel,
              detector_type: DETECTOR_TYPE = DETECTOR_TYPE.EXACT) -> float:
    """
    Time (seconds from the band epoch) at which a line/sample of an SCA was imaged.
    Args:
        line: line in the SCA image
        sample: sample (detector) in the SCA image
        band_index: band index in the model
        sca_index: SCA index in the band
        sensor_model: SensorModel
        detector_type: DETECTOR_TYPE

    Returns: sample time

    """
    band = sensor_model.bands[band_index]
    sca = band.scas[sca_index]
    samp_char = band.sampling_char

    detector = int(np.floor(sample + 0.5))
    if detector < 0 or detector >= sca.detectors:
        erConfig(f"Sample out of range: {detector} not in [0...{sca.detectors - 1}]")

    frame_times = get_band_frame_times(sensor_model, band_index)
    if frame_times is None or len(frame_times) == 0 or band.frame_count < 1:
        erConfig(f"No frame times set for band index {band_index}")

    iline = int(np.floor(line + 0.5))
    if detector_type == DETECTOR_TYPE.MAXIMUM:
        l0r_detector_offset_pixels = int(np.floor(samp_char.maximum_detector_delay + 0.5)) + sca.nominal_fill
    else:
        l0r_detector_offset_pixels = int(sca.l0r_detector_offsets[detector])

    # Truncation toward zero; negative indexes are clamped below.
    time_index = int((iline - l0r_detector_offset_pixels) / samp_char.lines_per_frame)
    if samp_char.frame_delay:
        time_index += 1
    time_index = min(max(time_index, 0), band.frame_count - 1)

    integration_sign = 1 if samp_char.time_codes_at_frame_start else -1
    frame_index = time_index - 1 if samp_char.frame_delay else time_index

    time = frame_times[time_index] - samp_char.settling_time \
           + integration_sign * samp_char.integration_time / 2.0 \
           + (line - l0r_detector_offset_pixels - samp_char.lines_per_frame * frame_index) * samp_char.sampling_time

    if detector_type == DETECTOR_TYPE.NOMINAL:
        time += (int(sca.l0r_detector_offsets[detector]) - sca.nominal_fill) * samp_char.sampling_time
    return float(time)
