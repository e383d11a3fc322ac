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

__docformat__ = "restructuredtext"

# Let users know if they're missing any of our hard dependencies
_hard_dependencies = ("pandas", "numpy", "dateutil")

for _dependency in _hard_dependencies:
    try:
        __import__(_dependency)
    except ImportError as _e:  # pragma: no cover
        raise ImportError(f"`onrates` requires installation of {_dependency}: {_e}")

from contextlib import ContextDecorator
from datetime import datetime as dt
from typing import Any

from onrates.default import Defaults
from onrates.enums.generics import NoInput
from onrates.errors import VE_CONTEXT_ARGS

defaults = Defaults()


class default_context(ContextDecorator):
    """
    Context manager to temporarily set options in the `with` statement context.

    You need to invoke as ``default_context(attr, val, [(attr, val), ...])``.

    Examples
    --------
    >>> with default_context("averaging_method", "forward", "fd_shift", 1e-6):
    ...     pass
    """

    def __init__(self, *args: Any) -> None:
        if len(args) % 2 != 0 or len(args) < 2:
            raise ValueError(VE_CONTEXT_ARGS)

        self.ops = list(zip(args[::2], args[1::2], strict=True))

    def __enter__(self) -> None:
        self.undo = [(attr, getattr(defaults, attr, None)) for attr, _ in self.ops]

        for attr, val in self.ops:
            setattr(defaults, attr, val)

    def __exit__(self, *args: Any) -> None:
        if self.undo:
            for attr, val in self.undo:
                setattr(defaults, attr, val)


from onrates.averaging import (
    ApproxForwardOvernightAveragedRateFn,
    ExplainMap,
    ForwardOvernightAveragedRateFn,
    RateObservationFn,
    get_rate_observation_fn,
)
from onrates.curves import JacobianCalibrationInfo, ZeroRateCurve, calibration_info
from onrates.enums import AveragingMethod, Segment
from onrates.errors import (
    CalibrationMetadataMissingError,
    DimensionMismatchError,
    InvalidObservationPeriodError,
    MissingMarketDataError,
)
from onrates.observations import (
    FixingSegments,
    OvernightAveragedRateObservation,
    segment_fixings,
)
from onrates.provider import RatesProvider
from onrates.rates import DiscountOvernightIndexRates, OvernightIndexRates, StaticOvernightRates
from onrates.scheduling import (
    EUR_ESTR,
    GBP_SONIA,
    USD_FED_FUND,
    USD_SOFR,
    OvernightIndex,
    create_calendar,
    dcf,
    get_calendar,
    get_overnight_index,
)
from onrates.sensitivity import (
    NO_SENSITIVITY,
    CurveParameterSensitivities,
    CurveParameterSensitivity,
    FiniteDifferenceSensitivityCalculator,
    MarketQuoteSensitivityCalculator,
    OvernightRateSensitivity,
    PointSensitivities,
    market_quote_sensitivity,
)

__all__ = [
    "dt",
    "defaults",
    "default_context",
    "Defaults",
    "NoInput",
    # enums
    "AveragingMethod",
    "Segment",
    # errors
    "MissingMarketDataError",
    "InvalidObservationPeriodError",
    "CalibrationMetadataMissingError",
    "DimensionMismatchError",
    # scheduling
    "create_calendar",
    "get_calendar",
    "dcf",
    "OvernightIndex",
    "get_overnight_index",
    "USD_FED_FUND",
    "USD_SOFR",
    "GBP_SONIA",
    "EUR_ESTR",
    # observations
    "OvernightAveragedRateObservation",
    "FixingSegments",
    "segment_fixings",
    # rates
    "OvernightIndexRates",
    "StaticOvernightRates",
    "DiscountOvernightIndexRates",
    "ZeroRateCurve",
    "JacobianCalibrationInfo",
    "calibration_info",
    "RatesProvider",
    # averaging
    "RateObservationFn",
    "ApproxForwardOvernightAveragedRateFn",
    "ForwardOvernightAveragedRateFn",
    "ExplainMap",
    "get_rate_observation_fn",
    # sensitivity
    "OvernightRateSensitivity",
    "PointSensitivities",
    "NO_SENSITIVITY",
    "CurveParameterSensitivity",
    "CurveParameterSensitivities",
    "MarketQuoteSensitivityCalculator",
    "market_quote_sensitivity",
    "FiniteDifferenceSensitivityCalculator",
]

__version__ = "0.1.0"
