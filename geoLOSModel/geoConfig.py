"""
# Author : Saif Aati
# Contact: SAIF AATI  <saif@caltech.edu> <saifaati@gmail.com>
# Copyright (C) 2022
"""
# Runtime defaults of the LOS model, gathered from the package constants and the shipped calibration file.
import geoLOSModel.geoCore.constants as C
from geoLOSModel.geoCore.geoLOSBaseCfg.BaseReadConfig import ConfigReader

geoCfg = {}

geoCfg['satelliteAttributesFile'] = C.SOFTWARE.SATELLITE_ATTRIBUTES_CONFIG
geoCfg['calibrationFile'] = C.SOFTWARE.CALIBRATION_CONFIG

geoCfg["semiMajor"] = C.EARTH.SEMIMAJOR
geoCfg["semiMinor"] = C.EARTH.SEMIMINOR

geoCfg['freqSampFactor'] = C.REMEZ_FILTER.FREQ_SAMP_FACTOR
geoCfg['stopBandFactor'] = C.REMEZ_FILTER.STOP_BAND_FACTOR
geoCfg['bandWeights'] = (C.REMEZ_FILTER.PASS_BAND_WEIGHT, C.REMEZ_FILTER.STOP_BAND_WEIGHT)


class cgeoCfg:
    def __init__(self, calibration_file=None):
        self.satelliteAttributesFile = geoCfg['satelliteAttributesFile']
        self.calibrationFile = calibration_file or geoCfg['calibrationFile']
        self.semiMajor = geoCfg["semiMajor"]
        self.semiMinor = geoCfg["semiMinor"]

        self.freqSampFactor = geoCfg['freqSampFactor']
        self.stopBandFactor = geoCfg['stopBandFactor']
        self.bandWeights = geoCfg['bandWeights']

        calibration = ConfigReader(self.calibrationFile).get_config
        self.earthConstants = calibration['earth_constants']
        self.precisionModel = calibration.get('precision_model', {})
        jitter = calibration.get('jitter_filter', {})
        self.cutoffFrequency = jitter.get('cutoff_frequency')
        # The calibration file may override the filter design constants.
        self.freqSampFactor = jitter.get('freq_samp_factor', self.freqSampFactor)
        self.stopBandFactor = jitter.get('stop_band_factor', self.stopBandFactor)
        if 'band_weights' in jitter:
            self.bandWeights = tuple(jitter['band_weights'])

    def filter_kwargs(self):
        return dict(freq_samp_factor=self.freqSampFactor,
                    stop_band_factor=self.stopBandFactor,
                    band_weights=self.bandWeights)
