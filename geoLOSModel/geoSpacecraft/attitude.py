"""
# Author : Saif Aati
# Contact: SAIF AATI  <saif@caltech.edu> <saifaati@gmail.com>
# Copyright (C) 2022
"""

import logging
from typing import Optional, Tuple

import numpy as np
from scipy.signal import remez

from geoLOSModel.geoCore.constants import ATTITUDE_RECORD_DTYPE, REMEZ_FILTER, LOS_MODEL
from geoLOSModel.geoErrorsWarning.geoErrors import erConfig, erAllocation, erAttitudeTimeOutOfRange
from geoLOSModel.geoErrorsWarning.geoWarnings import wrFilterLongerThanSequence
from geoLOSModel.geoMath.Interpol import Interpolate


class AttitudeModel:
    """
    Time ordered attitude samples of the spacecraft.
    sample_records is a structured array (seconds_from_epoch, satellite_attitude[3], precision_attitude[3]),
    roll/pitch/yaw in radians, or None when the model holds no samples.
    """

    def __init__(self, utc_epoch_time=None, nominal_sample_time: float = 0.0,
                 sample_records: Optional[np.ndarray] = None):
        self.utc_epoch_time = np.zeros(3) if utc_epoch_time is None else np.array(utc_epoch_time, dtype=float)
        self.nominal_sample_time = float(nominal_sample_time)
        self.sample_records = sample_records

    @property
    def sample_count(self) -> int:
        return 0 if self.sample_records is None else len(self.sample_records)

    @classmethod
    def from_arrays(cls, utc_epoch_time, nominal_sample_time, seconds_from_epoch, satellite_attitude,
                    precision_attitude=None):
        satellite_attitude = np.asarray(satellite_attitude, dtype=float).reshape(-1, 3)
        records = allocate_attitude_records(len(satellite_attitude))
        records['seconds_from_epoch'] = np.asarray(seconds_from_epoch, dtype=float)
        records['satellite_attitude'] = satellite_attitude
        if precision_attitude is None:
            records['precision_attitude'] = satellite_attitude
        else:
            records['precision_attitude'] = np.asarray(precision_attitude, dtype=float).reshape(-1, 3)
        return cls(utc_epoch_time, nominal_sample_time, records if len(records) else None)

    def __repr__(self):
        return f"AttitudeModel(epoch={list(self.utc_epoch_time)}, nominal_sample_time={self.nominal_sample_time}, " \
               f"sample_count={self.sample_count})"


def allocate_attitude_records(count: int) -> np.ndarray:
    try:
        return np.zeros(count, dtype=ATTITUDE_RECORD_DTYPE)
    except MemoryError:
        erAllocation("attitude sample records")


def initialize_attitude(att: Optional[AttitudeModel] = None) -> AttitudeModel:
    """Reset to the empty state: zero epoch, zero sample time, no records."""
    if att is None:
        return AttitudeModel()
    att.utc_epoch_time = np.zeros(3)
    att.nominal_sample_time = 0.0
    att.sample_records = None
    return att


def free_attitude(att: Optional[AttitudeModel]):
    if att is None:
        return
    att.sample_records = None
    initialize_attitude(att)


def _new_like(att: AttitudeModel, count: int) -> AttitudeModel:
    out = AttitudeModel(att.utc_epoch_time, att.nominal_sample_time)
    if count > 0:
        out.sample_records = allocate_attitude_records(count)
    return out


def copy_attitude(src: AttitudeModel) -> AttitudeModel:
    """Deep copy of an attitude model. The copy shares no storage with src."""
    dst = _new_like(src, src.sample_count)
    if src.sample_count > 0:
        dst.sample_records[:] = src.sample_records
    return dst


def subtract_attitude(att_1: AttitudeModel, att_2: AttitudeModel) -> AttitudeModel:
    """
    att_1 - att_2 on both the satellite and the precision attitude.
    The result takes the epoch, sample time and sample count of att_1; att_2 must hold at least as many samples.
    """
    if att_2.sample_count < att_1.sample_count:
        erConfig(f"Second attitude sequence to subtract contains fewer samples than first sequence "
                 f"({att_2.sample_count} < {att_1.sample_count})")

    n = att_1.sample_count
    out = _new_like(att_1, n)
    if n == 0:
        return out
    rec_1 = att_1.sample_records
    rec_2 = att_2.sample_records[:n]
    out.sample_records['seconds_from_epoch'] = rec_1['seconds_from_epoch']
    out.sample_records['satellite_attitude'] = rec_1['satellite_attitude'] - rec_2['satellite_attitude']
    out.sample_records['precision_attitude'] = rec_1['precision_attitude'] - rec_2['precision_attitude']
    return out


def _check_sample_time(att: AttitudeModel):
    if not att.nominal_sample_time > 0:
        erConfig(f"Invalid attitude nominal sample time {att.nominal_sample_time}")


def find_attitude_at_time(att: AttitudeModel, att_time: float) -> Tuple[float, float, float]:
    """
    Linear interpolation of the precision roll, pitch and yaw.
    Args:
        att: attitude model
        att_time: seconds from the attitude epoch

    Returns: (roll, pitch, yaw) in radians

    """
    _check_sample_time(att)
    delta = att.nominal_sample_time
    index_1 = int(np.floor(att_time / delta))
    index_2 = index_1 + 1
    if index_1 < 0:
        erAttitudeTimeOutOfRange(att_time, 'left')
    if index_2 > att.sample_count - 1:
        erAttitudeTimeOutOfRange(att_time, 'right')

    w = np.fmod(att_time, delta) / delta
    prec = att.sample_records['precision_attitude']
    roll, pitch, yaw = Interpolate.linear(prec[index_1], prec[index_2], w)
    return float(roll), float(pitch), float(yaw)


def find_jitter_attitude_at_time(att: AttitudeModel, seconds_from_epoch: float) -> np.ndarray:
    """
    4-point Lagrange interpolation of the (high frequency) precision attitude.
    """
    _check_sample_time(att)
    if att.sample_count < LOS_MODEL.JITTER_LAGRANGE_PTS:
        erConfig(f"Attitude correction not found for time offset {seconds_from_epoch:f}: "
                 f"{att.sample_count} samples available")

    delta = att.nominal_sample_time
    elapsed = seconds_from_epoch - att.sample_records[0]['seconds_from_epoch']
    index = int(np.floor(elapsed / delta)) - 1
    if index < 0 or index > att.sample_count - LOS_MODEL.JITTER_LAGRANGE_PTS:
        erConfig(f"Attitude correction not found for time offset {seconds_from_epoch:f}")

    offset = np.fmod(elapsed, delta) / delta
    weights = Interpolate.cubic_lagrange_weights(offset)
    window = att.sample_records['precision_attitude'][index:index + LOS_MODEL.JITTER_LAGRANGE_PTS]
    return weights @ window


def design_low_pass_kernel(cutoff_frequency: float, nominal_sample_time: float,
                           freq_samp_factor: int = REMEZ_FILTER.FREQ_SAMP_FACTOR,
                           stop_band_factor: float = REMEZ_FILTER.STOP_BAND_FACTOR,
                           band_weights=(REMEZ_FILTER.PASS_BAND_WEIGHT, REMEZ_FILTER.STOP_BAND_WEIGHT)) -> np.ndarray:
    """
    Linear phase low pass FIR kernel from the Remez exchange algorithm, normalized to unit DC gain.
    The kernel spans freq_samp_factor periods of the cutoff frequency (odd number of taps).
    """
    if not cutoff_frequency > 0 or not nominal_sample_time > 0:
        erConfig(f"Invalid low pass filter design inputs: cutoff frequency {cutoff_frequency}, "
                 f"sample time {nominal_sample_time}")
    if len(band_weights) != REMEZ_FILTER.NUM_FREQUENCY_BANDS:
        erConfig(f"Low pass filter needs {REMEZ_FILTER.NUM_FREQUENCY_BANDS} band weights, got {list(band_weights)}")

    norm_cutoff_frequency = cutoff_frequency * nominal_sample_time
    number_samples = int(1.0 / norm_cutoff_frequency)
    filter_size = number_samples * int(freq_samp_factor) + 1
    if filter_size % 2 == 0:
        filter_size += 1

    bands = [0.0, norm_cutoff_frequency, norm_cutoff_frequency * stop_band_factor, REMEZ_FILTER.NYQUIST]
    gains = [REMEZ_FILTER.PASS_BAND_GAIN, REMEZ_FILTER.STOP_BAND_GAIN]
    try:
        kernel = remez(filter_size, bands, gains, weight=list(band_weights), fs=1.0)
    except ValueError as e:
        erConfig(f"Creating REMEZ filter kernel ({filter_size} taps, bands {bands}): {e}")

    taps_sum = np.sum(kernel)
    if taps_sum == 0:
        erConfig("Creating REMEZ filter kernel: taps sum to zero")
    logging.debug(f"REMEZ low pass kernel: {filter_size} taps, normalized cutoff {norm_cutoff_frequency}")
    return kernel / taps_sum


def reflect_index(index: int, count: int) -> int:
    """Mirror an out of range index back into [0, count): -i before the start, 2N - i - 1 past the end."""
    while index < 0 or index >= count:
        if index < 0:
            index = -index
        else:
            index = 2 * count - index - 1
    return index


def remez_filter_attitude(orig_att: AttitudeModel, cutoff_frequency: float, **filter_kwargs) -> AttitudeModel:
    """
    Low pass filter both attitude channels with a Remez kernel and reflective edge extension.
    Args:
        orig_att: attitude to filter
        cutoff_frequency: cutoff frequency (Hz)
        **filter_kwargs: freq_samp_factor, stop_band_factor, band_weights

    Returns: new low frequency AttitudeModel

    """
    kernel = design_low_pass_kernel(cutoff_frequency, orig_att.nominal_sample_time, **filter_kwargs)
    n = orig_att.sample_count
    low_att = _new_like(orig_att, n)
    if n == 0:
        return low_att
    if len(kernel) > n:
        wrFilterLongerThanSequence(len(kernel), n)

    half = len(kernel) // 2
    src = orig_att.sample_records
    for att_index in range(n):
        support = [reflect_index(att_index + i, n) for i in range(-half, half + 1)]
        low_att.sample_records['satellite_attitude'][att_index] = kernel @ src['satellite_attitude'][support]
        low_att.sample_records['precision_attitude'][att_index] = kernel @ src['precision_attitude'][support]
    low_att.sample_records['seconds_from_epoch'] = src['seconds_from_epoch']
    return low_att


def transfer_jitter_attitude_bias(start_time: float, stop_time: float, from_att: AttitudeModel,
                                  to_att: AttitudeModel):
    """
    Move the mean of from_att over [start_time, stop_time] into to_att, in place.
    """
    if from_att.sample_count < 1 or to_att.sample_count < 1:
        erConfig("Invalid attitude sequence; no samples")
    _check_sample_time(from_att)

    t0 = from_att.sample_records[0]['seconds_from_epoch']
    delta = from_att.nominal_sample_time
    start_index = max(int(np.floor((start_time - t0) / delta)), 0)
    stop_index = min(int(np.floor((stop_time - t0) / delta)) + 1, from_att.sample_count - 1)
    if start_index > stop_index:
        erConfig(f"Determining bias computation start and stop indices ({start_index} > {stop_index})")

    window = from_att.sample_records[start_index:stop_index + 1]
    satellite_bias = window['satellite_attitude'].mean(axis=0)
    precision_bias = window['precision_attitude'].mean(axis=0)

    from_att.sample_records['satellite_attitude'] -= satellite_bias
    from_att.sample_records['precision_attitude'] -= precision_bias
    to_att.sample_records['satellite_attitude'] += satellite_bias
    to_att.sample_records['precision_attitude'] += precision_bias


def separate_jitter(att: AttitudeModel, cutoff_frequency: float, start_time: float, stop_time: float,
                    **filter_kwargs) -> Tuple[AttitudeModel, AttitudeModel]:
    """
    Split an attitude sequence into its low frequency part and its high frequency jitter.
    Returns: (low_att, jitter_att), low_att + jitter_att reproducing att
    """
    low_att = remez_filter_attitude(att, cutoff_frequency, **filter_kwargs)
    jitter_att = subtract_attitude(att, low_att)
    transfer_jitter_attitude_bias(start_time, stop_time, jitter_att, low_att)
    logging.info(f"Jitter separated from {att.sample_count} attitude samples (cutoff {cutoff_frequency} Hz)")
    return low_att, jitter_att
