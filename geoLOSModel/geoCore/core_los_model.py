"""
# Author : Saif Aati
# Contact: SAIF AATI  <saif@caltech.edu> <saifaati@gmail.com>
# Copyright (C) 2022
"""

import logging
from typing import Dict, Optional

from geoLOSModel.geoCore.constants import ACQUISITION_TYPE, BAND_TYPE, EARTH, SENSOR_ID
from geoLOSModel.geoCore.satellite_attributes import SatelliteAttributes
from geoLOSModel.geoErrorsWarning.geoErrors import LOSModelConfigError, erConfig
from geoLOSModel.geoSensor.sensor_model import BandModel, SCAModel, SensorModel
from geoLOSModel.geoSpacecraft.attitude import AttitudeModel, free_attitude
from geoLOSModel.geoSpacecraft.ephemeris import EphemerisModel, free_ephemeris


class EarthConstants:
    def __init__(self):
        self.semi_major_axis = EARTH.SEMIMAJOR  # m
        self.semi_minor_axis = EARTH.SEMIMINOR  # m
        self.eccentricity = EARTH.ECCENTRICITY
        self.earth_angular_velocity = EARTH.EARTH_ROTATION_RATE  # rad/s
        self.speed_of_light = EARTH.SPEED_OF_LIGHT  # m/s
        self.ut1_utc_correction = 0.0  # s
        self.pole_wander_x = 0.0  # rad
        self.pole_wander_y = 0.0  # rad


class SpacecraftModel:
    def __init__(self):
        self.attitude = AttitudeModel()
        self.ephemeris = EphemerisModel()


class LOSModel:
    """Line of sight model: earth constants, sensor geometry and spacecraft attitude/ephemeris."""

    def __init__(self):
        self.satellite_id = None
        self.satellite_number = 0
        self.acquisition_type = ACQUISITION_TYPE.EARTH
        self.earth = EarthConstants()
        self.sensor = SensorModel()
        self.spacecraft = SpacecraftModel()

    def __repr__(self):
        return f"LOSModel(satellite_id={self.satellite_id}, satellite_number={self.satellite_number}, " \
               f"acquisition_type={self.acquisition_type}, band_count={self.sensor.band_count})"


def allocate_los_model(attributes: Optional[SatelliteAttributes] = None) -> LOSModel:
    """
    Build an empty LOS model sized from the satellite attributes: one band model per normal band,
    one SCA model per SCA and the detector arrays of each SCA.
    Satellite level lookups are done before anything is built. A failure while building the bands
    releases the partial model and propagates.
    """
    if attributes is None:
        attributes = SatelliteAttributes()

    try:
        satellite_id = attributes.get_satellite_id()
        satellite_number = attributes.get_satellite_number()
        band_number_list = attributes.get_sensor_band_numbers(BAND_TYPE.NORMAL)
        attributes.get_sensor_count()
    except LOSModelConfigError:
        logging.error("Retrieving the satellite attributes for the LOS model")
        raise

    model = LOSModel()
    model.satellite_id = satellite_id
    model.satellite_number = satellite_number

    sensor = model.sensor
    try:
        sensor.bands = [BandModel() for _ in band_number_list]
        sensor.sensors[SENSOR_ID.OLI].sensor_id = SENSOR_ID.OLI
        sensor.sensors[SENSOR_ID.TIRS].sensor_id = SENSOR_ID.TIRS

        for band_number in band_number_list:
            band_info = attributes.get_band_attributes(band_number)
            if not 0 <= band_info.band_index < sensor.band_count:
                erConfig(f"Band index {band_info.band_index} of band number {band_number} outside the "
                         f"{sensor.band_count} normal bands")
            band_model = sensor.bands[band_info.band_index]
            band_model.sensor_id = band_info.sensor_id
            band_model.sca_count = band_info.scas
            band_model.scas = []
            for sca_index in range(band_model.sca_count):
                band_model.scas.append(SCAModel(band_info.detectors_per_sca))
    except (LOSModelConfigError, MemoryError):
        logging.error("Building the LOS band models")
        free_los_model(model)
        raise

    logging.info(f"LOS model allocated for satellite {satellite_id} ({len(band_number_list)} bands)")
    return model


def free_los_model(model: Optional[LOSModel]):
    """
    Release every array owned by the model, innermost first. Safe on None, on a partially built model and
    when called more than once.
    """
    if model is None:
        return
    sensor = model.sensor
    for band in sensor.bands or []:
        for sca in band.scas or []:
            sca.free()
        band.scas = None
        band.sca_count = 0
    sensor.bands = None

    for sensor_index, location in enumerate(sensor.sensors):
        sensor.frame_seconds_from_epoch[sensor_index] = None
        sensor.frame_counts[sensor_index] = 0
        location.jitter_table = None
        if location.ssm_model is not None:
            location.ssm_model.records = None
            location.ssm_model = None

    free_attitude(model.spacecraft.attitude)
    free_ephemeris(model.spacecraft.ephemeris)


def initialize_los_model(acquisition_type: ACQUISITION_TYPE = ACQUISITION_TYPE.EARTH,
                         attributes: Optional[SatelliteAttributes] = None) -> LOSModel:
    model = allocate_los_model(attributes)
    model.acquisition_type = acquisition_type
    return model


def set_earth_constants(model: LOSModel, earth_constants: Dict):
    """Copy the earth constants of the calibration parameters into the model."""
    keys = {'semi_major_axis': 'semi_major_axis',
            'semi_minor_axis': 'semi_minor_axis',
            'eccentricity': 'eccentricity',
            'angular_velocity': 'earth_angular_velocity',
            'speed_of_light': 'speed_of_light',
            'ut1_utc': 'ut1_utc_correction',
            'pole_wander_x': 'pole_wander_x',
            'pole_wander_y': 'pole_wander_y'}
    for key, attr in keys.items():
        if key not in earth_constants:
            erConfig(f"Earth constant {key} missing from the calibration parameters")
        setattr(model.earth, attr, float(earth_constants[key]))
        logging.debug(f"Earth constant {attr}: {getattr(model.earth, attr)}")
