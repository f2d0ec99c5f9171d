"""
# Author : Saif Aati
# Contact: SAIF AATI  <saif@caltech.edu> <saifaati@gmail.com>
# Copyright (C) 2022
"""

import datetime

import numpy as np

from geoLOSModel.geoCore.constants import TIME, MATH
from geoLOSModel.geoErrorsWarning.geoErrors import erInvalidEpoch


def rpy_to_matrix(roll, pitch, yaw):
    """
    Function that will return the rotation matrix due to the attitude roll pitch and yaw
    Args:
        roll: roll angle in radian
        pitch: pitch angle in radian
        yaw: yaw angle in radian

    Returns: attitude matrix [3,3]

    """
    cr, sr = np.cos(roll), np.sin(roll)
    cp, sp = np.cos(pitch), np.sin(pitch)
    cy, sy = np.cos(yaw), np.sin(yaw)

    m11 = cp * cy
    m12 = sr * sp * cy + cr * sy
    m13 = -cr * sp * cy + sr * sy
    m21 = -cp * sy
    m22 = -sr * sp * sy + cr * cy
    m23 = cr * sp * sy + sr * cy
    m31 = sp
    m32 = -sr * cp
    m33 = cr * cp

    return np.array([[m11, m12, m13], [m21, m22, m23], [m31, m32, m33]])


def matrix_to_rpy(matrix):
    """Back-derive (roll, pitch, yaw) from an attitude matrix built as in rpy_to_matrix."""
    m = np.asarray(matrix, dtype=float)
    # Rounding can push the sine slightly outside [-1, 1].
    sin_pitch = min(max(m[2, 0], -1.0), 1.0)
    roll = np.arctan2(-m[2, 1], m[2, 2])
    pitch = np.arcsin(sin_pitch)
    yaw = np.arctan2(-m[1, 0], m[0, 0])
    return np.array([roll, pitch, yaw])


def eval_power_series(coefficients, t):
    """
    Evaluate c[0] + c[1] t + ... + c[n-1] t^(n-1) by Horner's rule.
    An empty coefficient array evaluates to 0.
    """
    result = 0.0
    for coef in reversed(np.asarray(coefficients, dtype=float).ravel()):
        result = result * t + coef
    return float(result)


def _check_epoch(epoch):
    if len(epoch) != 3:
        erInvalidEpoch(epoch)
    year, doy, sod = epoch
    if not (TIME.MIN_YEAR <= int(year) <= TIME.MAX_YEAR):
        erInvalidEpoch(epoch)
    days_in_year = 366 if is_leap_year(int(year)) else 365
    if not (1 <= int(doy) <= days_in_year) or not (0.0 <= float(sod) < TIME.SECONDS_PER_DAY + 1.0):
        erInvalidEpoch(epoch)
    return int(year), int(doy), float(sod)


def is_leap_year(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def year_doy_to_ordinal(year: int, doy: int) -> int:
    return datetime.date(year, 1, 1).toordinal() + doy - 1


def get_time_difference(epoch_1, epoch_2) -> float:
    """
    Seconds between two year/day-of-year/seconds-of-day epochs: epoch_1 - epoch_2.
    Leap seconds are ignored.
    """
    y1, d1, s1 = _check_epoch(epoch_1)
    y2, d2, s2 = _check_epoch(epoch_2)
    days = year_doy_to_ordinal(y1, d1) - year_doy_to_ordinal(y2, d2)
    return days * TIME.SECONDS_PER_DAY + (s1 - s2)


def add_seconds_to_year_doy_sod(seconds, epoch):
    """
    Add a (possibly negative) number of seconds to a year/doy/sod epoch.
    Returns: [year, doy, sod] normalized across day and year boundaries

    """
    year, doy, sod = _check_epoch(epoch)
    sod += seconds
    day_shift = int(np.floor(sod / TIME.SECONDS_PER_DAY))
    sod -= day_shift * TIME.SECONDS_PER_DAY
    date = datetime.date.fromordinal(year_doy_to_ordinal(year, doy) + day_shift)
    return [date.year, date.timetuple().tm_yday, sod]


def unwrap_angle(angle, reference):
    """
    Correct a +/-180 degree wrap of angle relative to reference.
    A jump larger than pi/2 is shifted by 2 pi only when the shift brings the angle closer to the reference.
    This departs from a plain pi/2 threshold, which would turn a jump in (pi/2, pi] into one larger than pi;
    the result is never more than pi away from the reference.
    """
    delta = angle - reference
    if delta > MATH.HALF_PI and abs(delta - MATH.TWO_PI) < abs(delta):
        angle -= MATH.TWO_PI
    elif delta < -MATH.HALF_PI and abs(delta + MATH.TWO_PI) < abs(delta):
        angle += MATH.TWO_PI
    return angle
