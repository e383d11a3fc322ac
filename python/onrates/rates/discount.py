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

from onrates.enums.generics import NoInput
from onrates.rates.protocols import (
    _fixings_series,
    _maturity_from_fixing,
    _published_from_series,
    _unit_sensitivity,
)
from onrates.scheduling.index import get_overnight_index

if TYPE_CHECKING:
    from onrates.typing import (  # pragma: no cover
        Arr1dF64,
        OvernightIndex,
        OvernightRateSensitivity,
        PointSensitivities,
        Series,
        ZeroRateCurve,
        datetime,
    )


class DiscountOvernightIndexRates:
    """
    A rate source projecting overnight rates from the discount factors of a zero rate curve.

    .. role:: red

    .. role:: green

    Parameters
    ----------
    index: OvernightIndex, str, :red:`required`
        The overnight index of the rates.
    curve: ZeroRateCurve, :red:`required`
        The forecasting curve. Its valuation date is the valuation date of the rates.
    fixings: Series, dict, :green:`optional`
        Published fixings indexed by fixing date.

    Notes
    -----
    The projected rate over a deposit from :math:`s` to :math:`e` is the simple forward rate

    .. math::

       R = \\frac{1}{d(s, e)} \\left ( \\frac{v(s)}{v(e)} - 1 \\right )

    where :math:`v` are discount factors of the curve and :math:`d` the day count fraction
    of the index. A period rate uses the same formula from the effective date of the first
    fixing to the maturity of the last deposit.
    """

    _index: OvernightIndex
    _curve: ZeroRateCurve
    _fixings: Series[float]  # type: ignore[type-var]

    def __init__(
        self,
        index: OvernightIndex | str,
        curve: ZeroRateCurve,
        fixings: Series[float] | dict[datetime, float] | NoInput = NoInput(0),  # type: ignore[type-var]
    ) -> None:
        self._index = get_overnight_index(index)
        self._curve = curve
        self._fixings = _fixings_series(fixings)

    def __repr__(self) -> str:
        return (
            f"<onrates.DiscountOvernightIndexRates:{self._index.name} "
            f"curve={self._curve.name} at {hex(id(self))}>"
        )

    @property
    def index(self) -> OvernightIndex:
        return self._index

    @property
    def curve(self) -> ZeroRateCurve:
        return self._curve

    @property
    def valuation_date(self) -> datetime:
        return self._curve.valuation_date

    def published_rate(self, date: datetime) -> float | None:
        return _published_from_series(self._fixings, date)

    def _simple_forward(self, start: datetime, end: datetime) -> float:
        ratio = self._curve.discount_factor(start) / self._curve.discount_factor(end)
        return (ratio - 1.0) / self._index.dcf(start, end)

    def rate(self, date: datetime) -> float:
        return self.period_rate(date, _maturity_from_fixing(self._index, date))

    def period_rate(self, start: datetime, end: datetime) -> float:
        return self._simple_forward(self._index.effective_from_fixing(start), end)

    def rate_point_sensitivity(self, date: datetime) -> PointSensitivities:
        return _unit_sensitivity(self._index, date, _maturity_from_fixing(self._index, date))

    def period_rate_point_sensitivity(self, start: datetime, end: datetime) -> PointSensitivities:
        return _unit_sensitivity(self._index, start, end)

    def parameter_sensitivity(self, record: OvernightRateSensitivity) -> Arr1dF64:
        """
        Convert a point sensitivity record into a sensitivity to each node rate of the curve.

        Parameters
        ----------
        record: OvernightRateSensitivity
            A record referencing the index of these rates.

        Returns
        -------
        ndarray
        """
        start = self._index.effective_from_fixing(record.start)
        end = record.end
        df_s = self._curve.discount_factor(start)
        df_e = self._curve.discount_factor(end)
        d_df_s = self._curve.discount_factor_parameter_sensitivity(start)
        d_df_e = self._curve.discount_factor_parameter_sensitivity(end)
        # d(df_s / df_e) by the quotient rule
        d_ratio = (d_df_s * df_e - df_s * d_df_e) / df_e**2
        return record.sensitivity * d_ratio / self._index.dcf(start, end)
