"""
# Author : Saif Aati
# Contact: SAIF AATI  <saif@caltech.edu> <saifaati@gmail.com>
# Copyright (C) 2022
"""

import numpy as np

from geoLOSModel.geoCore.constants import LOS_MODEL
from geoLOSModel.geoErrorsWarning.geoErrors import erQuaternionConversion
from geoLOSModel.geoMath.matrix import cross, dot

# Quaternions are 4 elts arrays [q1, q2, q3, q4] with q4 the scalar part.


def quaternion_to_matrix(quat):
    """
     Convert a quaternion onto a rotation matrix
    Args:
        quat: [x, y, z, s]

    Returns: rotation matrix (3,3)

    """
    x, y, z, s = (float(val) for val in quat)

    xx = x * x
    xy = x * y
    xz = x * z
    xs = x * s
    yy = y * y
    yz = y * z
    ys = y * s
    zz = z * z
    zs = z * s
    ss = s * s

    return np.array([[xx - yy - zz + ss, 2.0 * (xy + zs), 2.0 * (xz - ys)],
                     [2.0 * (xy - zs), yy - zz + ss - xx, 2.0 * (yz + xs)],
                     [2.0 * (xz + ys), 2.0 * (yz - xs), zz + ss - xx - yy]])


def matrix_to_quaternion(tolerance, matrix):
    """
    Convert a rotation matrix into a quaternion.
    The largest of the four trace-derived squared components selects the formula; the three others must agree
    with the squares of the derived components to within tolerance.
    Args:
        tolerance: agreement tolerance, LOS_MODEL.QUATERNION_TOLERANCE when None
        matrix: rotation matrix (3,3)

    Returns: [x, y, z, s] with s >= 0

    """
    if tolerance is None:
        tolerance = LOS_MODEL.QUATERNION_TOLERANCE
    m = np.asarray(matrix, dtype=float)
    if m.shape != (3, 3) or not np.all(np.isfinite(m)):
        erQuaternionConversion()

    squares = np.array([1.0 + m[0, 0] - m[1, 1] - m[2, 2],
                        1.0 - m[0, 0] + m[1, 1] - m[2, 2],
                        1.0 - m[0, 0] - m[1, 1] + m[2, 2],
                        1.0 + m[0, 0] + m[1, 1] + m[2, 2]]) / 4.0
    largest = int(np.argmax(squares))
    if not squares[largest] > 0.0:
        erQuaternionConversion()

    if largest == 0:
        q1 = np.sqrt(squares[0])
        q2 = (m[0, 1] + m[1, 0]) / (4.0 * q1)
        q3 = (m[0, 2] + m[2, 0]) / (4.0 * q1)
        q4 = (m[1, 2] - m[2, 1]) / (4.0 * q1)
    elif largest == 1:
        q2 = np.sqrt(squares[1])
        q1 = (m[0, 1] + m[1, 0]) / (4.0 * q2)
        q3 = (m[1, 2] + m[2, 1]) / (4.0 * q2)
        q4 = (m[2, 0] - m[0, 2]) / (4.0 * q2)
    elif largest == 2:
        q3 = np.sqrt(squares[2])
        q1 = (m[0, 2] + m[2, 0]) / (4.0 * q3)
        q2 = (m[1, 2] + m[2, 1]) / (4.0 * q3)
        q4 = (m[0, 1] - m[1, 0]) / (4.0 * q3)
    else:
        q4 = np.sqrt(squares[3])
        q1 = (m[1, 2] - m[2, 1]) / (4.0 * q4)
        q2 = (m[2, 0] - m[0, 2]) / (4.0 * q4)
        q3 = (m[0, 1] - m[1, 0]) / (4.0 * q4)

    quat = np.array([q1, q2, q3, q4])
    # Agreement is checked on the squared components.
    if np.any(np.abs(squares - quat ** 2) > tolerance):
        erQuaternionConversion()

    if q4 < 0.0:
        quat = -quat
    return quat


def quaternion_magnitude(quat):
    return float(np.sqrt(np.sum(np.asarray(quat, dtype=float) ** 2)))


def multiply_quaternions(q1, q2):
    """Quaternion product q1 * q2 (scalar last)."""
    q1 = np.asarray(q1, dtype=float)
    q2 = np.asarray(q2, dtype=float)
    t = cross(q1[:3], q2[:3])
    vec = q2[3] * q1[:3] + q1[3] * q2[:3] - t
    return np.array([vec[0], vec[1], vec[2], q1[3] * q2[3] - dot(q1[:3], q2[:3])])


def quaternion_to_rpy(quat):
    """
    Roll, pitch and yaw (rad) of the attitude described by a quaternion.
    """
    x, y, z, s = (float(val) for val in quat)
    m21 = 2.0 * (y * z - x * s)
    m22 = z * z + s * s - x * x - y * y
    m20 = 2.0 * (x * z + y * s)
    m10 = 2.0 * (x * y - z * s)
    m00 = x * x - y * y - z * z + s * s

    return np.array([-np.arctan2(m21, m22), np.arcsin(m20), -np.arctan2(m10, m00)])
