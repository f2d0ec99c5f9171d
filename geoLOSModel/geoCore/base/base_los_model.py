"""
# Author : Saif Aati
# Contact: SAIF AATI  <saif@caltech.edu> <saifaati@gmail.com>
# Copyright (C) 2022
"""
from abc import ABC, abstractmethod


class BaseMoonEphemeris(ABC):

    @abstractmethod
    def get_moon_position_at_location(self, model, band_index: int, sca_index: int, line: float, sample: float,
                                      detector_type):
        """
        Apparent position of the moon seen by a detector sample.
        Args:
            model: LOSModel
            band_index: band index in the model
            sca_index: SCA index in the band
            line: image line
            sample: image sample
            detector_type: DETECTOR_TYPE

        Returns: (right_ascension, declination, distance), angles in radians

        """
        pass
