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

from onrates.enums.generics import NoInput, _drb
from onrates.errors import MissingMarketDataError
from onrates.rates.protocols import (
    _fixings_series,
    _maturity_from_fixing,
    _published_from_series,
    _unit_sensitivity,
)
from onrates.scheduling.index import get_overnight_index

if TYPE_CHECKING:
    from onrates.typing import (  # pragma: no cover
        OvernightIndex,
        PointSensitivities,
        Series,
        datetime,
    )


class StaticOvernightRates:
    """
    A rate source defined entirely by literal values.

    .. role:: red

    .. role:: green

    Parameters
    ----------
    index: OvernightIndex, str, :red:`required`
        The overnight index of the rates.
    valuation_date: datetime, :red:`required`
        The valuation date of the snapshot.
    fixings: Series, dict, :green:`optional`
        Published fixings indexed by fixing date.
    rates: dict[datetime, float], :green:`optional`
        Projected overnight rates indexed by fixing date.
    period_rates: dict[tuple[datetime, datetime], float], :green:`optional`
        Projected compounded rates indexed by the first fixing date and the maturity of the
        last deposit of the period.

    Notes
    -----
    Point sensitivities are unit records on the queried fixing date, or period, so that
    the sensitivity of a calculation is expressed directly against the rates given here.
    Querying a projection that was not supplied raises
    :class:`~onrates.errors.MissingMarketDataError`.

    Examples
    --------
    .. ipython:: python

       rates = StaticOvernightRates(
           index="USD-FED-FUND",
           valuation_date=dt(2015, 1, 9),
           fixings={dt(2015, 1, 8): 0.0023},
           period_rates={(dt(2015, 1, 9), dt(2015, 1, 14)): 0.0134},
           rates={dt(2015, 1, 13): 0.0145},
       )
       rates.period_rate(dt(2015, 1, 9), dt(2015, 1, 14))
    """

    _index: OvernightIndex
    _valuation_date: datetime
    _fixings: Series[float]  # type: ignore[type-var]
    _rates: dict[datetime, float]
    _period_rates: dict[tuple[datetime, datetime], float]

    def __init__(
        self,
        index: OvernightIndex | str,
        valuation_date: datetime,
        fixings: Series[float] | dict[datetime, float] | NoInput = NoInput(0),  # type: ignore[type-var]
        rates: dict[datetime, float] | NoInput = NoInput(0),
        period_rates: dict[tuple[datetime, datetime], float] | NoInput = NoInput(0),
    ) -> None:
        self._index = get_overnight_index(index)
        self._valuation_date = valuation_date
        self._fixings = _fixings_series(fixings)
        self._rates = dict(_drb({}, rates))
        self._period_rates = dict(_drb({}, period_rates))

    def __repr__(self) -> str:
        return (
            f"<onrates.StaticOvernightRates:{self._index.name} "
            f"{self._valuation_date:%Y-%m-%d} at {hex(id(self))}>"
        )

    @property
    def index(self) -> OvernightIndex:
        return self._index

    @property
    def valuation_date(self) -> datetime:
        return self._valuation_date

    @property
    def fixings(self) -> Series[float]:  # type: ignore[type-var]
        return self._fixings

    def published_rate(self, date: datetime) -> float | None:
        return _published_from_series(self._fixings, date)

    def rate(self, date: datetime) -> float:
        try:
            return self._rates[date]
        except KeyError:
            raise MissingMarketDataError(self._index.name, date)

    def period_rate(self, start: datetime, end: datetime) -> float:
        try:
            return self._period_rates[(start, end)]
        except KeyError:
            raise MissingMarketDataError(self._index.name, start, end=end)

    def rate_point_sensitivity(self, date: datetime) -> PointSensitivities:
        return _unit_sensitivity(self._index, date, _maturity_from_fixing(self._index, date))

    def period_rate_point_sensitivity(self, start: datetime, end: datetime) -> PointSensitivities:
        return _unit_sensitivity(self._index, start, end)

    def with_valuation_date(self, valuation_date: datetime) -> StaticOvernightRates:
        """Return a copy of the snapshot at a different valuation date."""
        return StaticOvernightRates(
            self._index, valuation_date, self._fixings, self._rates, self._period_rates
        )

    def bumped_rate(self, date: datetime, shift: float) -> StaticOvernightRates:
        """Return a copy with the projected rate of ``date`` shifted by ``shift``."""
        rates = dict(self._rates)
        rates[date] = self.rate(date) + shift
        return StaticOvernightRates(
            self._index, self._valuation_date, self._fixings, rates, self._period_rates
        )

    def bumped_period_rate(
        self, start: datetime, end: datetime, shift: float
    ) -> StaticOvernightRates:
        """Return a copy with the projected period rate of ``[start, end)`` shifted by ``shift``."""
        period_rates = dict(self._period_rates)
        period_rates[(start, end)] = self.period_rate(start, end) + shift
        return StaticOvernightRates(
            self._index, self._valuation_date, self._fixings, self._rates, period_rates
        )
