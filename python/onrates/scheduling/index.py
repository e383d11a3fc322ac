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
from onrates.scheduling.calendars import (
    _add_business_days,
    _business_days,
    _is_holiday,
    _next_bus_day,
    _prev_bus_day,
    get_calendar,
)
from onrates.scheduling.dcfs import dcf

if TYPE_CHECKING:
    from onrates.typing import CalInput, CustomBusinessDay, datetime  # pragma: no cover


class OvernightIndex:
    """
    Define the date and accrual parameters of an overnight interest rate index.

    .. role:: red

    .. role:: green

    Parameters
    ----------
    name: str, :red:`required`
        The identifier of the index, e.g. *"USD-FED-FUND"*. Also used as the curve reference
        of sensitivities to the index rate.
    currency: str, :red:`required`
        The 3-digit currency code of the index.
    calendar: CustomBusinessDay, str, :red:`required`
        The fixing calendar of the index.
    convention: str, :green:`optional (set by 'defaults')`
        The day count convention used to accrue a single overnight fixing.
    publication_lag: int, :green:`optional (set as 0)`
        The number of business days after the fixing date on which the fixing is published.
    effective_lag: int, :green:`optional (set as 0)`
        The number of business days after the fixing date on which the deposit starts.

    Notes
    -----
    The calendar, and an unset convention, are resolved lazily so that they reflect
    ``defaults.calendars`` and ``defaults.convention`` at the time of use.
    """

    _name: str
    _currency: str
    _calendar: CalInput
    _convention: str | NoInput
    _publication_lag: int
    _effective_lag: int

    def __init__(
        self,
        name: str,
        currency: str,
        calendar: CalInput,
        convention: str | NoInput = NoInput(0),
        publication_lag: int = 0,
        effective_lag: int = 0,
    ) -> None:
        self._name = name
        self._currency = currency.upper()
        self._calendar = calendar
        self._convention = convention
        self._publication_lag = publication_lag
        self._effective_lag = effective_lag

    def __repr__(self) -> str:
        return f"<onrates.OvernightIndex:{self._name} at {hex(id(self))}>"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OvernightIndex):
            return NotImplemented
        return (
            self._name == other._name
            and self._currency == other._currency
            and self.convention.upper() == other.convention.upper()
            and self._publication_lag == other._publication_lag
            and self._effective_lag == other._effective_lag
        )

    def __hash__(self) -> int:
        return hash((self._name, self._currency))

    @property
    def name(self) -> str:
        return self._name

    @property
    def currency(self) -> str:
        return self._currency

    @property
    def calendar(self) -> CustomBusinessDay:
        return get_calendar(self._calendar)

    @property
    def convention(self) -> str:
        from onrates import defaults

        return _drb(defaults.convention, self._convention)  # type: ignore[no-any-return]

    @property
    def publication_lag(self) -> int:
        return self._publication_lag

    @property
    def effective_lag(self) -> int:
        return self._effective_lag

    def is_bus_day(self, date: datetime) -> bool:
        return not _is_holiday(date, self.calendar)

    def next_bus_day(self, date: datetime) -> datetime:
        return _next_bus_day(date, self.calendar)

    def prev_bus_day(self, date: datetime) -> datetime:
        return _prev_bus_day(date, self.calendar)

    def fixing_dates(self, start: datetime, end: datetime) -> list[datetime]:
        """
        Return the fixing calendar business days in the half open interval ``[start, end)``.
        """
        return _business_days(start, end, self.calendar)

    def effective_from_fixing(self, fixing_date: datetime) -> datetime:
        return _add_business_days(fixing_date, self._effective_lag, self.calendar)

    def maturity_from_effective(self, effective_date: datetime) -> datetime:
        """The end of the overnight deposit, the next business day after ``effective_date``."""
        return self.next_bus_day(effective_date)

    def publication_from_fixing(self, fixing_date: datetime) -> datetime:
        return _add_business_days(fixing_date, self._publication_lag, self.calendar)

    def dcf(self, start: datetime, end: datetime) -> float:
        return dcf(start, end, self.convention)

    def accrual_factor(self, fixing_date: datetime) -> float:
        """
        The year fraction of the overnight deposit underlying the fixing on ``fixing_date``.
        """
        effective = self.effective_from_fixing(fixing_date)
        return self.dcf(effective, self.maturity_from_effective(effective))


USD_FED_FUND = OvernightIndex("USD-FED-FUND", "usd", "nyc", "Act360", publication_lag=1)
USD_SOFR = OvernightIndex("USD-SOFR", "usd", "nyc", "Act360", publication_lag=1)
GBP_SONIA = OvernightIndex("GBP-SONIA", "gbp", "ldn", "Act365F", publication_lag=0)
EUR_ESTR = OvernightIndex("EUR-ESTR", "eur", "tgt", "Act360", publication_lag=1)

_OVERNIGHT_INDEXES: dict[str, OvernightIndex] = {
    index.name.lower(): index for index in [USD_FED_FUND, USD_SOFR, GBP_SONIA, EUR_ESTR]
}


def get_overnight_index(index: str | OvernightIndex) -> OvernightIndex:
    """
    Return a named :class:`OvernightIndex`, or the given object unchanged.

    Named indexes are *"USD-FED-FUND"*, *"USD-SOFR"*, *"GBP-SONIA"* and *"EUR-ESTR"*,
    matched case insensitively.
    """
    if isinstance(index, OvernightIndex):
        return index
    try:
        return _OVERNIGHT_INDEXES[index.lower()]
    except KeyError:
        raise ValueError(f"`index` as string: '{index}' is not a named overnight index.")
