"""
# Author : Saif Aati
# Contact: SAIF AATI  <saif@caltech.edu> <saifaati@gmail.com>
# Copyright (C) 2022
"""
import json
import logging
from typing import Dict

import numpy as np

from geoLOSModel.geoCore.geoLOSBaseCfg.BaseReadConfig import parse_inputs
from geoLOSModel.geoErrorsWarning.geoErrors import erConfig
from geoLOSModel.geoSpacecraft.attitude import AttitudeModel


class LOSModelEncoder(json.JSONEncoder):
    def default(self, obj):
        if isinstance(obj, np.integer):
            return int(obj)
        if isinstance(obj, np.floating):
            return float(obj)
        if isinstance(obj, np.ndarray):
            return obj.tolist()
        return json.JSONEncoder.default(self, obj)


def read_json_as_dict(json_file: str) -> Dict:
    with open(json_file) as f:
        return json.loads(f.read())


def write_dict_as_json(data: Dict, json_file: str):
    with open(json_file, 'w') as f:
        json.dump(data, f, cls=LOSModelEncoder, indent=2)


def attitude_from_dict(att_dict: Dict) -> AttitudeModel:
    """
    Build an AttitudeModel from a dictionary with keys utc_epoch_time, nominal_sample_time,
    seconds_from_epoch, satellite_attitude and (optionally) precision_attitude.
    """
    for key in ['utc_epoch_time', 'nominal_sample_time', 'seconds_from_epoch', 'satellite_attitude']:
        if key not in att_dict:
            erConfig(f"Attitude input is missing {key}")
    if len(att_dict['seconds_from_epoch']) != len(att_dict['satellite_attitude']):
        erConfig("Attitude input: seconds_from_epoch and satellite_attitude lengths differ")
    return AttitudeModel.from_arrays(att_dict['utc_epoch_time'], att_dict['nominal_sample_time'],
                                     att_dict['seconds_from_epoch'], att_dict['satellite_attitude'],
                                     att_dict.get('precision_attitude'))


def attitude_to_dict(att: AttitudeModel) -> Dict:
    att_dict = {'utc_epoch_time': att.utc_epoch_time, 'nominal_sample_time': att.nominal_sample_time,
                'seconds_from_epoch': [], 'satellite_attitude': [], 'precision_attitude': []}
    if att.sample_count > 0:
        for key in ['seconds_from_epoch', 'satellite_attitude', 'precision_attitude']:
            att_dict[key] = att.sample_records[key]
    return att_dict


def load_attitude_file(input_file: str) -> AttitudeModel:
    att = attitude_from_dict(parse_inputs(input_file))
    logging.info(f"{att.sample_count} attitude samples read from {input_file}")
    return att
