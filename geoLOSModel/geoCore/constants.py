"""
# Author : Saif Aati
# Contact: SAIF AATI  <saif@caltech.edu> <saifaati@gmail.com>
# Copyright (C) 2022
"""

import os
from dataclasses import dataclass
from enum import Enum, IntEnum

import numpy as np

GEOLOSMODEL_PACKAGE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
GEOLOSMODEL_BASE_CFG_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'geoLOSBaseCfg')


@dataclass(frozen=True)
class SOFTWARE:
    SOFTWARE_NAME = 'geoLOSModel'
    PARENT_FOLDER = GEOLOSMODEL_PACKAGE_DIR
    WKDIR = os.path.join(os.path.dirname(GEOLOSMODEL_PACKAGE_DIR), 'GEO_LOS_MODEL_WD/')
    SATELLITE_ATTRIBUTES_CONFIG = os.path.join(GEOLOSMODEL_BASE_CFG_DIR, 'landsat8_attributes.yaml')
    CALIBRATION_CONFIG = os.path.join(GEOLOSMODEL_BASE_CFG_DIR, 'calibration_parameters.yaml')


@dataclass(frozen=True)
class MATH:
    # Evaluated once at import; no lazy initialisation.
    PI = float(np.pi)
    TWO_PI = 2.0 * PI
    HALF_PI = PI / 2.0
    DEGREES_PER_RADIAN = 180.0 / PI
    ARCSEC_TO_RADIAN = PI / (180.0 * 3600.0)
    SINGULAR_LIMIT = 1e-9
    HOUSEHOLDER_LIMIT = 1e-9


@dataclass(frozen=True)
class EARTH:
    SEMIMAJOR = 6378137.0
    SEMIMINOR = 6356752.3142
    ECCENTRICITY = 0.0818191908426
    EARTH_ROTATION_RATE = 72921151.467064 * 1e-12
    SPEED_OF_LIGHT = 299792458.0


@dataclass(frozen=True)
class TIME:
    SECONDS_PER_DAY = 86400.0
    MIN_YEAR = 1900
    MAX_YEAR = 2200


@dataclass(frozen=True)
class REMEZ_FILTER:
    # Oversampling factor of the kernel length relative to the cutoff period.
    FREQ_SAMP_FACTOR = 3
    NUM_FREQUENCY_BANDS = 2
    STOP_BAND_FACTOR = 1.5
    PASS_BAND_WEIGHT = 1.0
    STOP_BAND_WEIGHT = 10.0
    PASS_BAND_GAIN = 1.0
    STOP_BAND_GAIN = 0.0
    NYQUIST = 0.5


@dataclass(frozen=True)
class LOS_MODEL:
    MAX_SENSORS = 2
    LEGENDRE_TERMS = 4
    LAGRANGE_PTS = 4
    JITTER_LAGRANGE_PTS = 4
    QUATERNION_TOLERANCE = 1e-9


class SENSOR_ID(IntEnum):
    OLI = 0
    TIRS = 1


class BAND_TYPE(Enum):
    NORMAL = 'normal'
    BLIND = 'blind'
    VRP = 'vrp'


class DETECTOR_TYPE(Enum):
    NOMINAL = 'nominal'  # central detector location
    ACTUAL = 'actual'  # includes the even/odd offset
    EXACT = 'exact'  # includes the detector delays
    MAXIMUM = 'maximum'  # maximum detector delay


class ACQUISITION_TYPE(Enum):
    EARTH = 'earth'
    LUNAR = 'lunar'
    STELLAR = 'stellar'


ATTITUDE_RECORD_DTYPE = np.dtype([('seconds_from_epoch', np.float64),
                                  ('satellite_attitude', np.float64, (3,)),
                                  ('precision_attitude', np.float64, (3,))])

EPHEMERIS_RECORD_DTYPE = np.dtype([('seconds_from_epoch', np.float64),
                                   ('eci_position', np.float64, (3,)),
                                   ('eci_velocity', np.float64, (3,)),
                                   ('ecef_position', np.float64, (3,)),
                                   ('ecef_velocity', np.float64, (3,)),
                                   ('precision_eci_position', np.float64, (3,)),
                                   ('precision_eci_velocity', np.float64, (3,)),
                                   ('precision_ecef_position', np.float64, (3,)),
                                   ('precision_ecef_velocity', np.float64, (3,))])

SSM_RECORD_DTYPE = np.dtype([('seconds_from_epoch', np.float64),
                             ('mirror_angle', np.float64)])
