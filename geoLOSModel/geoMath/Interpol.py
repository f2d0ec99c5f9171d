"""
# Author : Saif Aati
# Contact: SAIF AATI  <saif@caltech.edu> <saifaati@gmail.com>
# Copyright (C) 2022
"""

import numpy as np


class Interpolate:

    @staticmethod
    def linear(v1, v2, weight):
        """
        Linear interpolation between two samples.
        Args:
            v1: value at the lower sample
            v2: value at the upper sample
            weight: fractional offset from the lower sample, in [0, 1)

        Returns: interpolated value(s)

        """
        return np.asarray(v1, dtype=float) + weight * (np.asarray(v2, dtype=float) - np.asarray(v1, dtype=float))

    @staticmethod
    def cubic_lagrange_weights(offset):
        """
        Weights of the 4-point Lagrange interpolator for samples located at offsets -1, 0, 1 and 2 from the
        sample preceding the interpolation time.
        Args:
            offset: fractional offset of the interpolation time from that sample

        Returns: 4 weights summing to 1

        """
        o = float(offset)
        return np.array([-o * (o - 1.0) * (o - 2.0) / 6.0,
                         (o + 1.0) * (o - 1.0) * (o - 2.0) / 2.0,
                         -o * (o + 1.0) * (o - 2.0) / 2.0,
                         (o + 1.0) * o * (o - 1.0) / 6.0])

    @staticmethod
    def lagrange(times, values, t):
        """
        n-point Lagrange interpolation.
        Args:
            times: (n,) sample times
            values: (n, k) samples
            t: interpolation time

        Returns: (k,) interpolated values

        """
        times = np.asarray(times, dtype=float)
        values = np.asarray(values, dtype=float)
        result = np.zeros(values.shape[1:])
        for i in range(len(times)):
            term = 1.0
            for j in range(len(times)):
                if i != j:
                    term *= (t - times[j]) / (times[i] - times[j])
            result += term * values[i]
        return result
