"""
# Author : Saif Aati
# Contact: SAIF AATI  <saif@caltech.edu> <saifaati@gmail.com>
# Copyright (C) 2022
"""

import logging
from typing import Optional, Tuple

import numpy as np

from geoLOSModel.geoCore.base.base_los_model import BaseMoonEphemeris
from geoLOSModel.geoCore.constants import DETECTOR_TYPE
from geoLOSModel.geoErrorsWarning.geoErrors import LOSModelConfigError, erAllocation, erConfig, erNoBandPresent
from geoLOSModel.geoMath.misc import unwrap_angle


class LunarProjection:
    """
    Frame following the apparent motion of the moon during an acquisition, centered on the moon position
    seen at the middle of the first band present in the model.
    The projection reads the model and does not own it; it is valid while the model is alive.
    """

    def __init__(self, model, moon_ephemeris: BaseMoonEphemeris, band_index: int, sca_index: int,
                 detector_type: DETECTOR_TYPE, unit_scale: float):
        self.model = model
        self.moon_ephemeris = moon_ephemeris
        self.band_index = band_index
        self.sca_index = sca_index
        self.detector_type = detector_type
        self.unit_scale = float(unit_scale)
        self.ref_ra = 0.0
        self.ref_dec = 0.0
        self.ref_dist = 0.0
        self.img_lines = 0
        self.img_ra: Optional[np.ndarray] = None
        self.img_dec: Optional[np.ndarray] = None
        self.img_dist: Optional[np.ndarray] = None

    def moon_position(self, line, sample):
        return self.moon_ephemeris.get_moon_position_at_location(self.model, self.band_index, self.sca_index,
                                                                 line, sample, self.detector_type)


def find_reference_location(model) -> Tuple[int, int, int, int]:
    """
    First band present in the model, its middle SCA, middle line and middle detector.
    Returns: (band_index, sca_index, line, detector)
    """
    for band_index, band in enumerate(model.sensor.bands or []):
        if band.band_present:
            if band.sca_count < 1 or not band.scas:
                erConfig(f"Reference band index {band_index} is present but holds no SCA")
            sca_index = band.sca_count // 2
            line = band.frame_count * band.sampling_char.lines_per_frame // 2
            detector = band.scas[sca_index].detectors // 2
            return band_index, sca_index, line, detector
    erNoBandPresent()


def create_lunar_projection(model, moon_ephemeris: BaseMoonEphemeris, band_index: int, sca_index: int,
                            detector_type: DETECTOR_TYPE, unit_scale: float = 1.0,
                            use_cache: bool = False) -> LunarProjection:
    """
    Build a lunar projection for a band/SCA/detector type.
    Args:
        model: LOSModel
        moon_ephemeris: BaseMoonEphemeris giving the moon position seen by a detector
        band_index: band index of the transformed coordinates
        sca_index: SCA index of the transformed coordinates
        detector_type: DETECTOR_TYPE of the transformed coordinates
        unit_scale: scale of the output coordinate units
        use_cache: compute the moon position of every image line of the band upfront

    Returns: LunarProjection

    """
    try:
        ref_band_index, ref_sca_index, ref_line, ref_detector = find_reference_location(model)
    except LOSModelConfigError:
        logging.error("Could not find the focal plane reference location")
        raise

    band_count = model.sensor.band_count
    if not 0 <= band_index < band_count:
        erConfig(f"Lunar projection band index {band_index} outside the {band_count} bands of the model")
    sca_count = model.sensor.bands[band_index].sca_count
    if not 0 <= sca_index < sca_count:
        erConfig(f"Lunar projection SCA index {sca_index} outside the {sca_count} SCAs of band index {band_index}")

    proj = LunarProjection(model, moon_ephemeris, band_index, sca_index, detector_type, unit_scale)

    # The reference always uses the nominal detector type.
    try:
        ra, dec, dist = moon_ephemeris.get_moon_position_at_location(model, ref_band_index, ref_sca_index,
                                                                     ref_line, ref_detector,
                                                                     DETECTOR_TYPE.NOMINAL)
    except Exception:
        logging.error(f"Error in calculating the moon position for line {ref_line}, sample {ref_detector}")
        raise
    proj.ref_ra, proj.ref_dec, proj.ref_dist = float(ra), float(dec), float(dist)
    logging.debug(f"Ref RA: {proj.ref_ra:13.8f}  Ref DEC: {proj.ref_dec:13.8f}  Ref Dist: {proj.ref_dist:17.6f}")

    if use_cache:
        band = model.sensor.bands[band_index]
        img_lines = band.frame_count * band.sampling_char.lines_per_frame
        try:
            img_ra = np.zeros(img_lines)
            img_dec = np.zeros(img_lines)
            img_dist = np.zeros(img_lines)
        except MemoryError:
            erAllocation("moon position look up table")

        for line in range(img_lines):
            try:
                ra, dec, dist = proj.moon_position(line, ref_detector)
            except Exception:
                logging.error(f"Error calculating moon position look up table for line {line}")
                free_lunar_projection(proj)
                raise
            # Keep the right ascension continuous across the +/-180 degree line.
            img_ra[line] = ra if line == 0 else unwrap_angle(ra, img_ra[line - 1])
            img_dec[line] = dec
            img_dist[line] = dist

        proj.img_lines = img_lines
        proj.img_ra, proj.img_dec, proj.img_dist = img_ra, img_dec, img_dist

    return proj


def free_lunar_projection(proj: Optional[LunarProjection]):
    if proj is None:
        return
    proj.img_ra = None
    proj.img_dec = None
    proj.img_dist = None
    proj.img_lines = 0


def transform_lunar_projection(proj: LunarProjection, line: float, sample: float, lunar_lat: float,
                               lunar_long: float) -> Tuple[float, float, float]:
    """
    Move a declination/right ascension of the line of sight into the frame of the reference moon position.
    Args:
        proj: LunarProjection
        line: image line
        sample: image sample
        lunar_lat: declination of the line of sight (rad)
        lunar_long: right ascension of the line of sight (rad)

    Returns: (lat, long, distance_scale)

    """
    line_index = int(np.floor(line + 0.5))
    if 0 <= line_index < proj.img_lines:
        right_ascension = proj.img_ra[line_index]
        declination = proj.img_dec[line_index]
        moon_earth_dist = proj.img_dist[line_index]
    else:
        try:
            right_ascension, declination, moon_earth_dist = proj.moon_position(line, sample)
        except Exception:
            logging.error(f"Failed to calculate the Moon's position at line {line}, sample {sample}")
            raise

    distance_scale = moon_earth_dist / proj.ref_dist

    right_ascension = unwrap_angle(right_ascension, proj.ref_ra)
    lunar_long = unwrap_angle(lunar_long, proj.ref_ra)

    out_lat = ((lunar_lat - declination) * distance_scale + proj.ref_dec) / proj.unit_scale
    out_long = ((lunar_long - right_ascension) * distance_scale + proj.ref_ra) / proj.unit_scale
    return float(out_lat), float(out_long), float(distance_scale)


def get_moon_center(proj: LunarProjection) -> Tuple[float, float]:
    """Returns: (declination, right_ascension) of the reference moon position."""
    return proj.ref_dec, proj.ref_ra
