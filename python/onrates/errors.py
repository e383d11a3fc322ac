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

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from onrates.typing import datetime  # pragma: no cover

# Observations

VE_OBSERVATION_START_END = (
    "Overnight observation `start` must be before `end`, got start: '{}' and end: '{}'."
)

VE_OBSERVATION_CUTOFF_NEGATIVE = "Overnight observation `cutoff` must be non-negative, got {}."

VE_OBSERVATION_CUTOFF_TOO_LARGE = (
    "Overnight observation `cutoff` ({}) must be less than the number of fixing dates ({}) "
    "in the period ['{}', '{}')."
)

# Market data

VE_MISSING_FIXING = (
    "Fixing for index '{}' on date '{}' was published before the valuation date '{}' but "
    "is not available from the published fixings."
)

VE_FIXINGS_DUPLICATED = "Fixings must have a unique date index, got duplicated dates: {}."

VE_MISSING_PROJECTION = "Rate source for index '{}' has no projected {} configured for {}."

# Market quote sensitivity

VE_MISSING_CURVE = "Curve '{}' could not be found in the rates provider."

VE_MISSING_CALIBRATION = (
    "Curve '{}' does not carry calibration information. Market quote sensitivity requires "
    "a calibration Jacobian."
)

VE_DIMENSION_MISMATCH = (
    "Parameter sensitivity for '{}' has length {} but the calibration Jacobian has {} rows."
)

VE_SPLIT_MISMATCH = (
    "Vector of length {} cannot be split into curve parameter counts totalling {}."
)

# Curves

VE_CURVE_NODES = "`times` and `rates` must have the same length and contain at least one node."

VE_CURVE_TIMES_INCREASING = "`times` must be strictly increasing."

# Defaults

VE_CONTEXT_ARGS = "Need to invoke as default_context(attr, val, [(attr, val), ...])."


class MissingMarketDataError(ValueError):
    """
    Raised when a fixing that is required by the valuation date is absent from the published
    fixings, or when a rate source is asked for a projection it cannot supply.
    """

    def __init__(
        self,
        index: str,
        date: datetime,
        valuation: datetime | None = None,
        end: datetime | None = None,
    ) -> None:
        if valuation is not None:
            msg = VE_MISSING_FIXING.format(index, date, valuation)
        elif end is not None:
            msg = VE_MISSING_PROJECTION.format(index, "period rate", f"['{date}', '{end}')")
        else:
            msg = VE_MISSING_PROJECTION.format(index, "rate", f"'{date}'")
        super().__init__(msg)
        self.index = index
        self.date = date
        self.valuation = valuation
        self.end = end


class InvalidObservationPeriodError(ValueError):
    def __init__(self, start: datetime, end: datetime, cutoff: int, n_dates: int) -> None:
        if start >= end:
            msg = VE_OBSERVATION_START_END.format(start, end)
        elif cutoff < 0:
            msg = VE_OBSERVATION_CUTOFF_NEGATIVE.format(cutoff)
        else:
            msg = VE_OBSERVATION_CUTOFF_TOO_LARGE.format(cutoff, n_dates, start, end)
        super().__init__(msg)
        self.start = start
        self.end = end
        self.cutoff = cutoff
        self.n_dates = n_dates


class CalibrationMetadataMissingError(ValueError):
    """
    Raised when a curve named by a parameter sensitivity is unknown to the provider, or is
    known but was not built with calibration information.
    """

    def __init__(self, curve_name: str, curve_found: bool = True) -> None:
        template = VE_MISSING_CALIBRATION if curve_found else VE_MISSING_CURVE
        super().__init__(template.format(curve_name))
        self.curve_name = curve_name


class DimensionMismatchError(ValueError):
    def __init__(self, name: str, actual: int, expected: int) -> None:
        super().__init__(VE_DIMENSION_MISMATCH.format(name, actual, expected))
        self.name = name
        self.actual = actual
        self.expected = expected
