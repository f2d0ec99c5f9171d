"""
# Author : Saif Aati
# Contact: SAIF AATI  <saif@caltech.edu> <saifaati@gmail.com>
# Copyright (C) 2022
"""
import warnings


def wrFilterLongerThanSequence(filter_size, sample_count):
    msg = "Low pass filter kernel (" + str(filter_size) + " taps) is longer than the attitude sequence (" + \
          str(sample_count) + " samples), edge samples are reflected more than once"
    warnings.warn(msg)


def wrEphemerisWindowClamped(eph_time):
    msg = "Ephemeris interpolation window clamped to the available samples for time " + str(eph_time)
    warnings.warn(msg)
