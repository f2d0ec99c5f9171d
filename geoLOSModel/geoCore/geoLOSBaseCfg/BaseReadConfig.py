# Author : Saif Aati
# Contact: SAIF AATI  <saif@caltech.edu> <saifaati@gmail.com>
# Copyright (C) 2022

import json

import yaml

from geoLOSModel.geoErrorsWarning.geoErrors import erConfig


class ConfigReader:

    def __init__(self, config_file: str):
        self.config_file = config_file
        self.config = self._read_config(config_file=self.config_file)

    @staticmethod
    def _read_config(config_file: str):
        try:
            with open(config_file) as fp:
                config = yaml.full_load(fp)
        except OSError as e:
            erConfig(f"Reading configuration file {config_file}: {e}")
        if not isinstance(config, dict):
            erConfig(f"Configuration file {config_file} is empty or not a mapping")
        return config

    @property
    def get_config(self):
        return self.config


def parse_inputs(input_file):
    """Load a JSON or YAML input file into a dictionary."""
    if input_file.lower().endswith(('.yaml', '.yml')):
        return ConfigReader(input_file).get_config
    with open(input_file) as f:
        input_dict = json.load(f)
    return input_dict
