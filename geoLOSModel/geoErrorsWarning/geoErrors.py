"""
# Author : Saif Aati
# Contact: SAIF AATI  <saif@caltech.edu> <saifaati@gmail.com>
# Copyright (C) 2022
"""

import logging


class LOSModelConfigError(ValueError):
    """Configuration or precondition failure; retrying with the same inputs will fail again."""


class LOSModelResourceError(MemoryError):
    """An owned array could not be allocated."""


def erConfig(msg):
    logging.error(msg)
    raise LOSModelConfigError(msg)


def erAllocation(what):
    msg = "Allocating " + what
    logging.error(msg)
    raise LOSModelResourceError(msg)


def erSatelliteAttribute(attribute, arg=''):
    msg = "Retrieving the " + attribute
    if arg:
        msg += " " + str(arg)
    erConfig(msg)


def erAttitudeTimeOutOfRange(att_time, side):
    msg = f"Attitude correction not found for time offset {att_time:f}. " \
          f"Index calculated falls \"{side} of\" {'first' if side == 'left' else 'last'} attitude sample."
    erConfig(msg)


def erSingularMatrix():
    erConfig("Calculations will result in divide by zero (singular 3x3 matrix)")


def erQuaternionConversion():
    erConfig("Converting Euler to quaternions")


def erNoBandPresent():
    erConfig("No bands found in the model")


def erInvalidEpoch(epoch):
    erConfig(f"Invalid year/doy/sod epoch: {list(epoch)}")
