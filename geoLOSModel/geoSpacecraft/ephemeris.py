"""
# Author : Saif Aati
# Contact: SAIF AATI  <saif@caltech.edu> <saifaati@gmail.com>
# Copyright (C) 2022
"""

from typing import Optional, Tuple

import numpy as np

from geoLOSModel.geoCore.constants import ACQUISITION_TYPE, EPHEMERIS_RECORD_DTYPE, LOS_MODEL
from geoLOSModel.geoErrorsWarning.geoErrors import erAllocation, erConfig
from geoLOSModel.geoErrorsWarning.geoWarnings import wrEphemerisWindowClamped
from geoLOSModel.geoMath.Interpol import Interpolate


class EphemerisModel:
    """Spacecraft position/velocity samples, ECI and ECEF, raw and precision corrected (m, m/s)."""

    def __init__(self, utc_epoch_time=None, nominal_sample_time: float = 0.0,
                 sample_records: Optional[np.ndarray] = None):
        self.utc_epoch_time = np.zeros(3) if utc_epoch_time is None else np.array(utc_epoch_time, dtype=float)
        self.nominal_sample_time = float(nominal_sample_time)
        self.sample_records = sample_records

    @property
    def sample_count(self) -> int:
        return 0 if self.sample_records is None else len(self.sample_records)


def allocate_ephemeris_records(count: int) -> np.ndarray:
    try:
        return np.zeros(count, dtype=EPHEMERIS_RECORD_DTYPE)
    except MemoryError:
        erAllocation("ephemeris sample records")


def free_ephemeris(eph: Optional[EphemerisModel]):
    if eph is None:
        return
    eph.sample_records = None
    eph.utc_epoch_time = np.zeros(3)
    eph.nominal_sample_time = 0.0


def get_position_and_velocity_at_time(eph: EphemerisModel, acquisition_type: ACQUISITION_TYPE,
                                      eph_time: float) -> Tuple[np.ndarray, np.ndarray]:
    """
    Lagrange interpolation of the precision position and velocity at eph_time (seconds from the ephemeris epoch).
    Earth acquisitions use the earth-fixed ephemeris, lunar and stellar ones the inertial ephemeris.
    The interpolation window is limited to the available samples.

    Returns: (position, velocity)
    """
    npts = LOS_MODEL.LAGRANGE_PTS
    if eph.sample_count < npts:
        erConfig(f"Ephemeris holds {eph.sample_count} samples, {npts} needed for interpolation")
    if not eph.nominal_sample_time > 0:
        erConfig(f"Invalid ephemeris nominal sample time {eph.nominal_sample_time}")

    index = int(np.floor(eph_time / eph.nominal_sample_time - npts // 2))
    index = min(max(index, 0), eph.sample_count - npts)
    seconds = eph.sample_records['seconds_from_epoch']
    if eph_time < seconds[0] or eph_time > seconds[-1]:
        wrEphemerisWindowClamped(eph_time)

    window = eph.sample_records[index:index + npts]
    frame = 'ecef' if acquisition_type == ACQUISITION_TYPE.EARTH else 'eci'
    times = window['seconds_from_epoch']
    position = Interpolate.lagrange(times, window[f'precision_{frame}_position'], eph_time)
    velocity = Interpolate.lagrange(times, window[f'precision_{frame}_velocity'], eph_time)
    return position, velocity
