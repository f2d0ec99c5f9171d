"""
# Author : Saif Aati
# Contact: SAIF AATI  <saif@caltech.edu> <saifaati@gmail.com>
# Copyright (C) 2022
"""

import logging
from typing import Dict

import numpy as np

from geoLOSModel.geoErrorsWarning.geoErrors import erConfig
from geoLOSModel.geoMath.misc import eval_power_series, get_time_difference, matrix_to_rpy, rpy_to_matrix
from geoLOSModel.geoSpacecraft.attitude import AttitudeModel


class PrecisionModel:
    """
    Polynomial ephemeris and attitude corrections, referenced to seconds_from_image_epoch.
    Coefficient arrays are indexed by degree; only the first *_order coefficients are used.
    """
    EPHEMERIS_KEYS = ['x_corr', 'y_corr', 'z_corr', 'vx_corr', 'vy_corr', 'vz_corr']
    ATTITUDE_KEYS = ['roll_corr', 'pitch_corr', 'yaw_corr']

    def __init__(self, seconds_from_image_epoch=0.0, ephemeris_order=0, attitude_order=0, **coefficients):
        self.seconds_from_image_epoch = float(seconds_from_image_epoch)
        self.ephemeris_order = int(ephemeris_order)
        self.attitude_order = int(attitude_order)
        for key in self.EPHEMERIS_KEYS + self.ATTITUDE_KEYS:
            setattr(self, key, np.asarray(coefficients.get(key, []), dtype=float))
        unknown = set(coefficients) - set(self.EPHEMERIS_KEYS + self.ATTITUDE_KEYS)
        if unknown:
            erConfig(f"Unknown precision model coefficients: {sorted(unknown)}")
        self._check_orders()

    def _check_orders(self):
        for key in self.ATTITUDE_KEYS:
            if len(getattr(self, key)) < self.attitude_order:
                erConfig(f"Precision model {key} has {len(getattr(self, key))} coefficients, "
                         f"attitude order is {self.attitude_order}")
        for key in self.EPHEMERIS_KEYS:
            if len(getattr(self, key)) < self.ephemeris_order:
                erConfig(f"Precision model {key} has {len(getattr(self, key))} coefficients, "
                         f"ephemeris order is {self.ephemeris_order}")

    @classmethod
    def from_dict(cls, prec_dict: Dict):
        prec_dict = dict(prec_dict)
        return cls(prec_dict.pop('seconds_from_image_epoch', 0.0),
                   prec_dict.pop('ephemeris_order', 0),
                   prec_dict.pop('attitude_order', 0),
                   **prec_dict)

    def attitude_correction(self, att_time: float) -> np.ndarray:
        """
        Precision (roll, pitch, yaw) correction at att_time (seconds from the precision reference).
        The constant term is always applied, an attitude order of 0 included.
        """
        order = max(self.attitude_order, 1)
        return np.array([eval_power_series(self.roll_corr[:order], att_time),
                         eval_power_series(self.pitch_corr[:order], att_time),
                         eval_power_series(self.yaw_corr[:order], att_time)])

    def ephemeris_correction(self, eph_time: float) -> np.ndarray:
        """Position (x, y, z) and velocity (vx, vy, vz) corrections at eph_time."""
        order = self.ephemeris_order
        return np.array([eval_power_series(getattr(self, key)[:order], eph_time) for key in self.EPHEMERIS_KEYS])


def apply_precision_correction(image_epoch, precision_model: PrecisionModel, attitude_model: AttitudeModel):
    """
    Compute the precision attitude of every sample, in place.
    The correction rotation is composed after the raw attitude rotation, and the net roll/pitch/yaw are
    derived back from the product.
    Args:
        image_epoch: year/doy/sod of the image
        precision_model: PrecisionModel
        attitude_model: AttitudeModel whose precision_attitude is overwritten

    """
    try:
        seconds_from_image_epoch = get_time_difference(attitude_model.utc_epoch_time, image_epoch)
    except ValueError:
        logging.error("Calculating time difference between the attitude and image epoch times")
        raise

    for i in range(attitude_model.sample_count):
        att_time = seconds_from_image_epoch + attitude_model.sample_records['seconds_from_epoch'][i] \
                   - precision_model.seconds_from_image_epoch
        prec_corr = rpy_to_matrix(*precision_model.attitude_correction(att_time))
        acs2sat = rpy_to_matrix(*attitude_model.sample_records['satellite_attitude'][i])
        attitude_model.sample_records['precision_attitude'][i] = matrix_to_rpy(acs2sat @ prec_corr)
