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
from typing import TYPE_CHECKING

from onrates.enums.generics import Err, Ok
from onrates.enums.parameters import Segment
from onrates.errors import InvalidObservationPeriodError, MissingMarketDataError
from onrates.scheduling.index import get_overnight_index

if TYPE_CHECKING:
    from onrates.typing import (  # pragma: no cover
        OvernightIndex,
        OvernightIndexRates,
        Result,
        datetime,
    )

logger = logging.getLogger(__name__)


class OvernightAveragedRateObservation:
    """
    An arithmetic average of overnight fixings over a period, with an optional rate cut-off.

    .. role:: red

    .. role:: green

    Parameters
    ----------
    index: OvernightIndex, str, :red:`required`
        The overnight index whose fixings are averaged.
    start: datetime, :red:`required`
        The first date of the fixing period, inclusive.
    end: datetime, :red:`required`
        The end of the fixing period, exclusive.
    cutoff: int, :green:`optional (set as 0)`
        The rate cut-off count. When positive, the fixing of the date ``cutoff`` positions
        before the end of the period is also applied to every later date of the period.
        A value of 0 or 1 has no effect on the rate.

    Notes
    -----
    The fixing dates are the business days of the index calendar in ``[start, end)``. The
    number of fixing dates must be greater than ``cutoff``.
    """

    _index: OvernightIndex
    _start: datetime
    _end: datetime
    _cutoff: int
    _fixing_dates: tuple[datetime, ...]

    def __init__(
        self,
        index: OvernightIndex | str,
        start: datetime,
        end: datetime,
        cutoff: int = 0,
    ) -> None:
        self._index = get_overnight_index(index)
        self._start = start
        self._end = end
        self._cutoff = cutoff
        if start >= end or cutoff < 0:
            raise InvalidObservationPeriodError(start, end, cutoff, 0)
        self._fixing_dates = tuple(self._index.fixing_dates(start, end))
        if cutoff >= len(self._fixing_dates):
            raise InvalidObservationPeriodError(start, end, cutoff, len(self._fixing_dates))

    def __repr__(self) -> str:
        return (
            f"<onrates.OvernightAveragedRateObservation:{self._index.name} "
            f"{self._start:%Y-%m-%d}->{self._end:%Y-%m-%d} cutoff={self._cutoff} "
            f"at {hex(id(self))}>"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OvernightAveragedRateObservation):
            return NotImplemented
        return (
            self._index == other._index
            and self._start == other._start
            and self._end == other._end
            and self._cutoff == other._cutoff
        )

    def __hash__(self) -> int:
        return hash((self._index, self._start, self._end, self._cutoff))

    @property
    def index(self) -> OvernightIndex:
        return self._index

    @property
    def start(self) -> datetime:
        return self._start

    @property
    def end(self) -> datetime:
        return self._end

    @property
    def cutoff(self) -> int:
        return self._cutoff

    @property
    def fixing_dates(self) -> tuple[datetime, ...]:
        return self._fixing_dates

    @property
    def n_not_cutoff(self) -> int:
        """The number of fixing dates that are not subject to the rate cut-off."""
        n = len(self._fixing_dates)
        return n - self._cutoff + 1 if self._cutoff > 0 else n


class FixingSegments:
    """
    The partition of an observation's fixing dates into *Realized*, *Approximated* and
    *CutOff* runs, as determined against a particular rate source.

    Dates are held in order. The first ``n_realized`` are realized with the published
    rates given in ``realized_rates``, the following dates up to ``n_not_cutoff`` are
    approximated and the remainder are cut-off dates.
    """

    _observation: OvernightAveragedRateObservation
    _realized_rates: tuple[float, ...]
    _accrual_factors: tuple[float, ...]

    def __init__(
        self,
        observation: OvernightAveragedRateObservation,
        realized_rates: list[float],
    ) -> None:
        self._observation = observation
        self._realized_rates = tuple(realized_rates)
        index = observation.index
        self._accrual_factors = tuple(index.accrual_factor(d) for d in observation.fixing_dates)

    @property
    def observation(self) -> OvernightAveragedRateObservation:
        return self._observation

    @property
    def dates(self) -> tuple[datetime, ...]:
        return self._observation.fixing_dates

    @property
    def accrual_factors(self) -> tuple[float, ...]:
        return self._accrual_factors

    @property
    def n_realized(self) -> int:
        return len(self._realized_rates)

    @property
    def n_not_cutoff(self) -> int:
        return self._observation.n_not_cutoff

    @property
    def realized_rates(self) -> tuple[float, ...]:
        return self._realized_rates

    @property
    def segments(self) -> list[Segment]:
        n_r, n_nc = self.n_realized, self.n_not_cutoff
        return (
            [Segment.Realized] * n_r
            + [Segment.Approximated] * (n_nc - n_r)
            + [Segment.CutOff] * (len(self.dates) - n_nc)
        )

    def _slice(self, segment: Segment) -> slice:
        n_r, n_nc = self.n_realized, self.n_not_cutoff
        return {
            Segment.Realized: slice(0, n_r),
            Segment.Approximated: slice(n_r, n_nc),
            Segment.CutOff: slice(n_nc, None),
        }[segment]

    def dates_of(self, segment: Segment) -> tuple[datetime, ...]:
        return self.dates[self._slice(segment)]

    def accrual_of(self, segment: Segment) -> float:
        """The sum of accrual factors over the dates of the given segment."""
        return sum(self._accrual_factors[self._slice(segment)])

    @property
    def cutoff_fixing_date(self) -> datetime | None:
        """The date whose rate is applied to the cut-off dates, if there are any."""
        if self.n_not_cutoff == len(self.dates):
            return None
        return self.dates[self.n_not_cutoff - 1]

    @property
    def cutoff_realized(self) -> bool:
        """Whether every date outside the cut-off, including its determining date, is realized."""
        return self.n_realized == self.n_not_cutoff


def _try_segment_fixings(
    observation: OvernightAveragedRateObservation,
    rates: OvernightIndexRates,
) -> Result[FixingSegments]:
    index = observation.index
    valuation = rates.valuation_date
    realized: list[float] = []
    for date in observation.fixing_dates[: observation.n_not_cutoff]:
        publication = index.publication_from_fixing(date)
        if publication > valuation:
            break
        fixing = rates.published_rate(date)
        if fixing is None:
            if publication < valuation:
                return Err(MissingMarketDataError(index.name, date, valuation))
            break
        realized.append(fixing)

    segments = FixingSegments(observation, realized)
    logger.debug(
        "Segmented %r at %s: %d realized, %d approximated, %d cut-off.",
        observation,
        valuation,
        segments.n_realized,
        segments.n_not_cutoff - segments.n_realized,
        len(segments.dates) - segments.n_not_cutoff,
    )
    return Ok(segments)


def segment_fixings(
    observation: OvernightAveragedRateObservation,
    rates: OvernightIndexRates,
) -> FixingSegments:
    """
    Partition the fixing dates of an observation into *Realized*, *Approximated* and *CutOff*.

    Parameters
    ----------
    observation: OvernightAveragedRateObservation
        The observation whose fixing dates are partitioned.
    rates: OvernightIndexRates
        The rate source supplying the valuation date and the published fixings.

    Returns
    -------
    FixingSegments

    Notes
    -----
    Dates outside the cut-off are walked from the start of the period. A date is realized
    when it is published before the valuation date, or published on the valuation date with
    the fixing already available. The walk stops at the first date that is not realized.

    A date published before the valuation date without an available fixing raises
    :class:`~onrates.errors.MissingMarketDataError`.
    """
    return _try_segment_fixings(observation, rates).unwrap()
