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

# This module is reserved only for typing purposes.
# It avoids all circular import by performing a TYPE_CHECKING check on any component.

from collections.abc import Callable as Callable
from collections.abc import Iterable as Iterable
from collections.abc import Iterator as Iterator
from collections.abc import Sequence as Sequence
from datetime import datetime as datetime
from typing import Any as Any
from typing import TypeAlias

import numpy as np
from pandas import DataFrame as DataFrame
from pandas import Series as Series
from pandas.tseries.offsets import CustomBusinessDay as CustomBusinessDay

from onrates.averaging.explain import ExplainMap as ExplainMap
from onrates.averaging.protocols import RateObservationFn as RateObservationFn
from onrates.curves.calibration import JacobianCalibrationInfo as JacobianCalibrationInfo
from onrates.curves.zero import ZeroRateCurve as ZeroRateCurve
from onrates.enums.generics import NoInput as NoInput
from onrates.enums.generics import Result as Result
from onrates.observations import FixingSegments as FixingSegments
from onrates.observations import (
    OvernightAveragedRateObservation as OvernightAveragedRateObservation,
)
from onrates.provider import RatesProvider as RatesProvider
from onrates.rates.protocols import OvernightIndexRates as OvernightIndexRates
from onrates.scheduling.calendars import CalInput as CalInput
from onrates.scheduling.index import OvernightIndex as OvernightIndex
from onrates.sensitivity.parameters import (
    CurveParameterSensitivities as CurveParameterSensitivities,
)
from onrates.sensitivity.parameters import (
    CurveParameterSensitivity as CurveParameterSensitivity,
)
from onrates.sensitivity.points import OvernightRateSensitivity as OvernightRateSensitivity
from onrates.sensitivity.points import PointSensitivities as PointSensitivities

Arr1dF64: TypeAlias = "np.ndarray[tuple[int], np.dtype[np.float64]]"
Arr2dF64: TypeAlias = "np.ndarray[tuple[int, int], np.dtype[np.float64]]"

CurveKey: TypeAlias = "tuple[str, str]"
