# SPDX-License-Identifier: LicenseRef-Rateslib-Dual
#
# Copyright (c) 2026 Siffrorna Technology Limited
#
# Dual-licensed: Free Educational Licence or Paid Commercial Licence (commercial/professional use)
# Source-available, not open source.
#
# See LICENSE and https://rateslib.com/py/en/latest/i_licence.html for details,
# and/or contact info (at) rateslib (dot) com
####################################################################################################

from __future__ import annotations

from onrates.averaging.approx import ApproxForwardOvernightAveragedRateFn
from onrates.averaging.explain import COMBINED_RATE, OBSERVATIONS, ExplainMap
from onrates.averaging.forward import ForwardOvernightAveragedRateFn
from onrates.averaging.protocols import RateObservationFn
from onrates.enums.generics import NoInput, _drb
from onrates.enums.parameters import AveragingMethod, _get_averaging_method


def get_rate_observation_fn(
    method: str | AveragingMethod | NoInput = NoInput(0),
) -> RateObservationFn:
    """
    Return the default rate calculation for averaged overnight observations.

    Parameters
    ----------
    method: str, AveragingMethod, optional
        *"approx"* for :class:`ApproxForwardOvernightAveragedRateFn` or *"forward"* for
        :class:`ForwardOvernightAveragedRateFn`. Defaults to ``defaults.averaging_method``.

    Returns
    -------
    RateObservationFn
    """
    from onrates import defaults

    method_ = _get_averaging_method(_drb(defaults.averaging_method, method))
    if method_ is AveragingMethod.Approximated:
        return ApproxForwardOvernightAveragedRateFn.DEFAULT
    return ForwardOvernightAveragedRateFn.DEFAULT


__all__ = [
    "ApproxForwardOvernightAveragedRateFn",
    "ForwardOvernightAveragedRateFn",
    "RateObservationFn",
    "ExplainMap",
    "COMBINED_RATE",
    "OBSERVATIONS",
    "get_rate_observation_fn",
]
