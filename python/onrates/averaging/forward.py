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

from typing import TYPE_CHECKING, ClassVar

from onrates.averaging.explain import COMBINED_RATE, OBSERVATIONS, _observations_frame
from onrates.enums.generics import Err, Ok
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


class ForwardOvernightAveragedRateFn:
    """
    Rate calculation of an averaged overnight observation which projects every unfixed date
    individually.

    Notes
    -----
    The rate is the accrual weighted arithmetic average

    .. math::

       R = \\frac{\\sum_i r_i a_i}{\\sum_i a_i}

    where :math:`r_i` is the published fixing of a realized date, the projected rate of any
    other date outside the cut-off, and the rate of the cut-off determining date for each
    cut-off date.

    This calculation queries the rate source once per unfixed date. It is the exact
    counterpart of :class:`~onrates.averaging.ApproxForwardOvernightAveragedRateFn`.
    """

    DEFAULT: ClassVar[ForwardOvernightAveragedRateFn]

    def __repr__(self) -> str:
        return f"<onrates.ForwardOvernightAveragedRateFn at {hex(id(self))}>"

    @staticmethod
    def _try_fixing_rates(
        observation: OvernightAveragedRateObservation,
        rates: OvernightIndexRates,
    ) -> Result[tuple[FixingSegments, list[float]]]:
        segments_ = _try_segment_fixings(observation, rates)
        if isinstance(segments_, Err):
            return segments_
        segments = segments_.unwrap()

        n_r, n_nc = segments.n_realized, segments.n_not_cutoff
        fixing_rates = list(segments.realized_rates)
        fixing_rates.extend(rates.rate(d) for d in segments.dates[n_r:n_nc])
        # each cut-off date takes the rate of the last date outside the cut-off
        fixing_rates.extend([fixing_rates[n_nc - 1]] * (len(segments.dates) - n_nc))
        return Ok((segments, fixing_rates))

    def rate(
        self,
        observation: OvernightAveragedRateObservation,
        accrual_start: datetime,
        accrual_end: datetime,
        rates: OvernightIndexRates,
    ) -> float:
        segments, fixing_rates = self._try_fixing_rates(observation, rates).unwrap()
        af = segments.accrual_factors
        return sum(r * a for r, a in zip(fixing_rates, af, strict=True)) / sum(af)

    def explain_rate(
        self,
        observation: OvernightAveragedRateObservation,
        accrual_start: datetime,
        accrual_end: datetime,
        rates: OvernightIndexRates,
        explain: ExplainMap,
    ) -> float:
        segments, fixing_rates = self._try_fixing_rates(observation, rates).unwrap()
        af = segments.accrual_factors
        rate = sum(r * a for r, a in zip(fixing_rates, af, strict=True)) / sum(af)
        explain.put(OBSERVATIONS, _observations_frame(segments, fixing_rates))
        explain.put(COMBINED_RATE, rate)
        return rate

    def rate_sensitivity(
        self,
        observation: OvernightAveragedRateObservation,
        accrual_start: datetime,
        accrual_end: datetime,
        rates: OvernightIndexRates,
    ) -> PointSensitivities:
        segments, _ = self._try_fixing_rates(observation, rates).unwrap()
        af = segments.accrual_factors
        af_total = sum(af)
        n_r, n_nc = segments.n_realized, segments.n_not_cutoff
        accumulator = _SensitivityAccumulator()
        for i in range(n_r, n_nc):
            weight = af[i]
            if i == n_nc - 1:
                weight += sum(af[n_nc:])
            accumulator.add(rates.rate_point_sensitivity(segments.dates[i]), weight / af_total)
        return accumulator.build()


ForwardOvernightAveragedRateFn.DEFAULT = ForwardOvernightAveragedRateFn()
