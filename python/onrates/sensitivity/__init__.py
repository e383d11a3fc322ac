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

from onrates.sensitivity.finite_difference import FiniteDifferenceSensitivityCalculator
from onrates.sensitivity.market_quote import (
    MarketQuoteSensitivityCalculator,
    market_quote_sensitivity,
)
from onrates.sensitivity.parameters import (
    CurveParameterSensitivities,
    CurveParameterSensitivity,
)
from onrates.sensitivity.points import (
    NO_SENSITIVITY,
    OvernightRateSensitivity,
    PointSensitivities,
)

__all__ = [
    "OvernightRateSensitivity",
    "PointSensitivities",
    "NO_SENSITIVITY",
    "CurveParameterSensitivity",
    "CurveParameterSensitivities",
    "MarketQuoteSensitivityCalculator",
    "market_quote_sensitivity",
    "FiniteDifferenceSensitivityCalculator",
]
