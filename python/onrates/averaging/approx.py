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

import logging
from math import log
from typing import TYPE_CHECKING, ClassVar

from onrates.averaging.explain import COMBINED_RATE, OBSERVATIONS, _observations_frame
from onrates.enums.generics import Err, Ok
from onrates.enums.parameters import Segment
from onrates.observations import _try_segment_fixings
from onrates.sensitivity.points import _SensitivityAccumulator

if TYPE_CHECKING:
    from onrates.typing import (  # pragma: no cover
        ExplainMap,
        FixingSegments,
        OvernightAveragedRateObservation,
        OvernightIndexRates,
        PointSensitivities,
        Result,
        datetime,
    )

logger = logging.getLogger(__name__)


class _Approximation:
    """
    The accrued amounts and accrual factors of each segment of an observation.
    """

    def __init__(
        self,
        segments: FixingSegments,
        accrued_realized: float,
        period: tuple[datetime, datetime] | None,
        period_rate: float,
        cutoff_rate: float,
    ) -> None:
        self.segments = segments
        self.accrued_realized = accrued_realized
        self.period = period
        self.period_rate = period_rate
        self.cutoff_rate = cutoff_rate
        self.af_realized = segments.accrual_of(Segment.Realized)
        self.af_approximated = segments.accrual_of(Segment.Approximated)
        self.af_cutoff = segments.accrual_of(Segment.CutOff)

    @property
    def af_total(self) -> float:
        return self.af_realized + self.af_approximated + self.af_cutoff

    @property
    def accrued_approximated(self) -> float:
        if self.period is None:
            return 0.0
        return log(1.0 + self.period_rate * self.af_approximated)

    @property
    def accrued_cutoff(self) -> float:
        return self.cutoff_rate * self.af_cutoff

    @property
    def rate(self) -> float:
        accrued = self.accrued_realized + self.accrued_approximated + self.accrued_cutoff
        return accrued / self.af_total


class ApproxForwardOvernightAveragedRateFn:
    """
    Rate calculation of an averaged overnight observation which approximates the unfixed part
    of the period with a single compounded period rate.

    Notes
    -----
    The fixing dates are segmented into *Realized*, *Approximated* and *CutOff* dates, see
    :func:`~onrates.observations.segment_fixings`. With :math:`a_i` the accrual factor of each
    fixing date the rate is

    .. math::

       R = \\frac{\\sum_{Realized} r_i a_i + \\ln(1 + R_c T_a) + R_f T_c}{T_r + T_a + T_c}

    where :math:`T_r, T_a, T_c` are the sums of accrual factors of each segment,
    :math:`R_c` is the compounded rate queried from the rate source over the approximated
    dates, and :math:`R_f` is the rate fixed at the cut-off determining date. The
    logarithm converts the compounded rate into its continuously compounded equivalent,
    which approximates the arithmetic average of the daily rates.

    The instance is stateless and ``ApproxForwardOvernightAveragedRateFn.DEFAULT`` may be used.
    """

    DEFAULT: ClassVar[ApproxForwardOvernightAveragedRateFn]

    def __repr__(self) -> str:
        return f"<onrates.ApproxForwardOvernightAveragedRateFn at {hex(id(self))}>"

    @staticmethod
    def _try_approximation(
        observation: OvernightAveragedRateObservation,
        rates: OvernightIndexRates,
    ) -> Result[_Approximation]:
        segments_ = _try_segment_fixings(observation, rates)
        if isinstance(segments_, Err):
            return segments_
        segments = segments_.unwrap()

        index = observation.index
        n_r, n_nc = segments.n_realized, segments.n_not_cutoff
        accrued_realized = sum(
            r * a
            for r, a in zip(segments.realized_rates, segments.accrual_factors[:n_r], strict=True)
        )

        if n_nc > n_r:
            end = index.maturity_from_effective(
                index.effective_from_fixing(segments.dates[n_nc - 1])
            )
            period: tuple[datetime, datetime] | None = (segments.dates[n_r], end)
            period_rate = rates.period_rate(*period)  # type: ignore[misc]
        else:
            period, period_rate = None, 0.0

        cutoff_date = segments.cutoff_fixing_date
        if cutoff_date is None:
            cutoff_rate = 0.0
        elif segments.cutoff_realized:
            cutoff_rate = segments.realized_rates[-1]
        else:
            cutoff_rate = rates.rate(cutoff_date)

        return Ok(_Approximation(segments, accrued_realized, period, period_rate, cutoff_rate))

    def rate(
        self,
        observation: OvernightAveragedRateObservation,
        accrual_start: datetime,
        accrual_end: datetime,
        rates: OvernightIndexRates,
    ) -> float:
        return self._try_approximation(observation, rates).unwrap().rate

    def explain_rate(
        self,
        observation: OvernightAveragedRateObservation,
        accrual_start: datetime,
        accrual_end: datetime,
        rates: OvernightIndexRates,
        explain: ExplainMap,
    ) -> float:
        approximation = self._try_approximation(observation, rates).unwrap()
        rate = approximation.rate
        segments = approximation.segments
        if approximation.period is None:
            n_cutoff = len(segments.dates) - segments.n_not_cutoff
            explain.put(
                OBSERVATIONS,
                _observations_frame(
                    segments,
                    list(segments.realized_rates) + [approximation.cutoff_rate] * n_cutoff,
                ),
            )
        explain.put(COMBINED_RATE, rate)
        return rate

    def rate_sensitivity(
        self,
        observation: OvernightAveragedRateObservation,
        accrual_start: datetime,
        accrual_end: datetime,
        rates: OvernightIndexRates,
    ) -> PointSensitivities:
        approximation = self._try_approximation(observation, rates).unwrap()
        segments = approximation.segments
        af_total = approximation.af_total
        accumulator = _SensitivityAccumulator()

        if approximation.period is not None:
            af_a, r_c = approximation.af_approximated, approximation.period_rate
            accumulator.add(
                rates.period_rate_point_sensitivity(*approximation.period),
                af_a / (1.0 + r_c * af_a) / af_total,
            )

        cutoff_date = segments.cutoff_fixing_date
        if cutoff_date is not None and not segments.cutoff_realized:
            accumulator.add(
                rates.rate_point_sensitivity(cutoff_date),
                approximation.af_cutoff / af_total,
            )

        sensitivities = accumulator.build()
        logger.debug(
            "Rate sensitivity of %r has %d records.", observation, len(sensitivities)
        )
        return sensitivities


ApproxForwardOvernightAveragedRateFn.DEFAULT = ApproxForwardOvernightAveragedRateFn()
