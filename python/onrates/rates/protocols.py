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

from pandas import DatetimeIndex, Series, isna

from onrates.enums.generics import NoInput
from onrates.errors import VE_FIXINGS_DUPLICATED
from onrates.sensitivity.points import OvernightRateSensitivity, PointSensitivities

if TYPE_CHECKING:
    from onrates.typing import OvernightIndex, datetime  # pragma: no cover


class OvernightIndexRates(Protocol):
    """
    Protocol for a snapshot of overnight rates of a single index at a valuation date.

    A rate source supplies published fixings for past dates and projected rates for
    future dates, together with the point sensitivities of each projection.
    """

    @property
    def index(self) -> OvernightIndex: ...

    @property
    def valuation_date(self) -> datetime: ...

    def published_rate(self, date: datetime) -> float | None:
        """Return the published fixing for a fixing date, or *None* if there is none."""
        ...

    def rate(self, date: datetime) -> float:
        """Return the projected overnight rate for a fixing date."""
        ...

    def period_rate(self, start: datetime, end: datetime) -> float:
        """
        Return the projected compounded rate from the fixing date ``start`` to the maturity
        ``end`` of the last deposit of the period.
        """
        ...

    def rate_point_sensitivity(self, date: datetime) -> PointSensitivities:
        """Return the sensitivity of :meth:`rate` as point sensitivity records."""
        ...

    def period_rate_point_sensitivity(self, start: datetime, end: datetime) -> PointSensitivities:
        """Return the sensitivity of :meth:`period_rate` as point sensitivity records."""
        ...


def _fixings_series(fixings: Series[float] | dict[datetime, float] | NoInput) -> Series[float]:  # type: ignore[type-var]
    if isinstance(fixings, NoInput):
        return Series(dtype=float, index=DatetimeIndex([]))
    elif isinstance(fixings, dict):
        return Series(fixings, dtype=float).sort_index()
    if not fixings.index.is_unique:
        duplicated = fixings.index[fixings.index.duplicated()].unique()
        raise ValueError(VE_FIXINGS_DUPLICATED.format([str(_) for _ in duplicated]))
    return fixings.sort_index()


def _published_from_series(fixings: Series[float], date: datetime) -> float | None:  # type: ignore[type-var]
    value = fixings.get(date, None)
    if value is None or isna(value):
        return None
    return float(value)


def _unit_sensitivity(index: OvernightIndex, start: datetime, end: datetime) -> PointSensitivities:
    return PointSensitivities([OvernightRateSensitivity(index, start, end, index.currency, 1.0)])


def _maturity_from_fixing(index: OvernightIndex, date: datetime) -> datetime:
    return index.maturity_from_effective(index.effective_from_fixing(date))
