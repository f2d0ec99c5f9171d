"""
# Author : Saif Aati
# Contact: SAIF AATI  <saif@caltech.edu> <saifaati@gmail.com>
# Copyright (C) 2022
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from geoLOSModel.geoCore.constants import BAND_TYPE, LOS_MODEL, SENSOR_ID, SOFTWARE
from geoLOSModel.geoCore.geoLOSBaseCfg.BaseReadConfig import ConfigReader
from geoLOSModel.geoErrorsWarning.geoErrors import erSatelliteAttribute


@dataclass(frozen=True)
class BandAttributes:
    band_number: int
    band_index: int
    sensor_id: SENSOR_ID
    band_type: BAND_TYPE
    scas: int
    detectors_per_sca: int


class SatelliteAttributes:
    """Static description of the satellite focal planes, read from a YAML file."""

    def __init__(self, config_file: Optional[str] = None):
        self.config_file = config_file or SOFTWARE.SATELLITE_ATTRIBUTES_CONFIG
        self.config = ConfigReader(self.config_file).get_config
        self._bands = self._parse_bands(self.config.get('bands', []))
        logging.debug(f"Satellite attributes read from {self.config_file}: {len(self._bands)} bands")

    @classmethod
    def from_dict(cls, config: Dict):
        att = cls.__new__(cls)
        att.config_file = None
        att.config = config
        att._bands = cls._parse_bands(config.get('bands', []))
        return att

    @staticmethod
    def _parse_bands(band_list) -> Dict[int, BandAttributes]:
        bands = {}
        for item in band_list:
            try:
                band = BandAttributes(band_number=int(item['band_number']),
                                      band_index=int(item['band_index']),
                                      sensor_id=SENSOR_ID(int(item['sensor_id'])),
                                      band_type=BAND_TYPE(item.get('band_type', BAND_TYPE.NORMAL.value)),
                                      scas=int(item['scas']),
                                      detectors_per_sca=int(item['detectors_per_sca']))
            except (KeyError, TypeError, ValueError) as e:
                erSatelliteAttribute("band attributes", f"{item}: {e}")
            bands[band.band_number] = band
        return bands

    def _get(self, key, name):
        value = self.config.get(key)
        if value is None:
            erSatelliteAttribute(name)
        return value

    def get_satellite_id(self):
        return self._get('satellite_id', 'satellite ID')

    def get_satellite_number(self) -> int:
        return int(self._get('satellite_number', 'satellite number'))

    def get_sensor_count(self) -> int:
        count = int(self._get('sensor_count', 'sensor count'))
        if not 0 < count <= LOS_MODEL.MAX_SENSORS:
            erSatelliteAttribute('sensor count', count)
        return count

    def get_sensor_band_numbers(self, band_type: BAND_TYPE = BAND_TYPE.NORMAL,
                                sensor_id: Optional[SENSOR_ID] = None) -> List[int]:
        """Band numbers of a type, for one sensor or for all of them, ordered by band index."""
        bands = [band for band in self._bands.values()
                 if band.band_type == band_type and (sensor_id is None or band.sensor_id == sensor_id)]
        if not bands:
            erSatelliteAttribute(f"list of {band_type.value} bands")
        return [band.band_number for band in sorted(bands, key=lambda b: b.band_index)]

    def get_band_attributes(self, band_number: int) -> BandAttributes:
        band = self._bands.get(band_number)
        if band is None:
            erSatelliteAttribute("band attributes for band number", band_number)
        return band
