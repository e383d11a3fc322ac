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

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from onrates.typing import (  # pragma: no cover
        ExplainMap,
        OvernightAveragedRateObservation,
        OvernightIndexRates,
        PointSensitivities,
        datetime,
    )


class RateObservationFn(Protocol):
    """
    Protocol for a calculation of the rate of an averaged overnight observation.

    Implementations are stateless and are chosen by the caller, see
    :func:`~onrates.averaging.get_rate_observation_fn`.
    """

    def rate(
        self,
        observation: OvernightAveragedRateObservation,
        accrual_start: datetime,
        accrual_end: datetime,
        rates: OvernightIndexRates,
    ) -> float:
        """
        Return the rate of the observation.

        Parameters
        ----------
        observation: OvernightAveragedRateObservation
            The observation to calculate.
        accrual_start: datetime
            The start of the accrual period the rate applies to. Unused by the averaging
            calculations.
        accrual_end: datetime
            The end of the accrual period the rate applies to. Unused by the averaging
            calculations.
        rates: OvernightIndexRates
            The rate source of the observation index.

        Returns
        -------
        float
        """
        ...

    def explain_rate(
        self,
        observation: OvernightAveragedRateObservation,
        accrual_start: datetime,
        accrual_end: datetime,
        rates: OvernightIndexRates,
        explain: ExplainMap,
    ) -> float:
        """Return the rate of the observation, writing diagnostic values to ``explain``."""
        ...

    def rate_sensitivity(
        self,
        observation: OvernightAveragedRateObservation,
        accrual_start: datetime,
        accrual_end: datetime,
        rates: OvernightIndexRates,
    ) -> PointSensitivities:
        """Return the sensitivity of the rate to the rates of the rate source."""
        ...
