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

from datetime import datetime
from typing import Any, TypeAlias

from dateutil.relativedelta import MO, TH
from pandas.tseries.holiday import (
    AbstractHolidayCalendar,
    Holiday,
    nearest_workday,
    next_monday,
    next_monday_or_tuesday,
    sunday_to_monday,
)
from pandas.tseries.offsets import CustomBusinessDay, DateOffset, Day, Easter

from onrates.enums.generics import NoInput

CalInput: TypeAlias = "CustomBusinessDay | str | NoInput"

# Generic holidays
GoodFriday = Holiday("Good Friday", month=1, day=1, offset=[Easter(), Day(-2)])
EasterMonday = Holiday("Easter Monday", month=1, day=1, offset=[Easter(), Day(1)])
ChristmasDay = Holiday("Christmas Day", month=12, day=25)
ChristmasDayHoliday = Holiday("Christmas Day Holiday", month=12, day=25, observance=next_monday)
ChristmasDayNearestHoliday = Holiday(
    "Christmas Day Sunday Holiday", month=12, day=25, observance=nearest_workday
)
BoxingDay = Holiday("Boxing Day", month=12, day=26)
BoxingDayHoliday = Holiday(
    "Boxing Day Holiday", month=12, day=26, observance=next_monday_or_tuesday
)
NewYearsDay = Holiday("New Year's Day", month=1, day=1)
NewYearsDayHoliday = Holiday("New Year's Day Holiday", month=1, day=1, observance=next_monday)
NewYearsDaySundayHoliday = Holiday(
    "New Year's Day Holiday", month=1, day=1, observance=sunday_to_monday
)

# US based
USMartinLutherKingJr = Holiday(
    "Dr. Martin Luther King Jr.",
    start_date=datetime(1986, 1, 1),
    month=1,
    day=1,
    offset=DateOffset(weekday=MO(3)),  # type: ignore[arg-type]
)
USPresidentsDay = Holiday("US Presidents Day", month=2, day=1, offset=DateOffset(weekday=MO(3)))  # type: ignore[arg-type]
USMemorialDay = Holiday("US Memorial Day", month=5, day=31, offset=DateOffset(weekday=MO(-1)))  # type: ignore[arg-type]
USJuneteenthSundayHoliday = Holiday(
    "Juneteenth Independence Day",
    start_date=datetime(2022, 1, 1),
    month=6,
    day=19,
    observance=sunday_to_monday,
)
USIndependenceDayHoliday = Holiday(
    "US Independence Day", month=7, day=4, observance=nearest_workday
)
USLabourDay = Holiday("US Labour Day", month=9, day=1, offset=DateOffset(weekday=MO(1)))  # type: ignore[arg-type]
USColumbusDay = Holiday("US Columbus Day", month=10, day=1, offset=DateOffset(weekday=MO(2)))  # type: ignore[arg-type]
USVeteransDaySundayHoliday = Holiday("Veterans Day", month=11, day=11, observance=sunday_to_monday)
USThanksgivingDay = Holiday("US Thanksgiving", month=11, day=1, offset=DateOffset(weekday=TH(4)))  # type: ignore[arg-type]

# UK based
UKEarlyMayBankHoliday = Holiday(
    "UK Early May Bank Holiday", month=5, day=1, offset=DateOffset(weekday=MO(1))  # type: ignore[arg-type]
)
UKSpringBankPre2022 = Holiday(
    "UK Spring Bank Holiday pre 2022",
    end_date=datetime(2022, 5, 1),
    month=5,
    day=31,
    offset=DateOffset(weekday=MO(-1)),  # type: ignore[arg-type]
)
UKSpringBankPost2022 = Holiday(
    "UK Spring Bank Holiday post 2022",
    start_date=datetime(2022, 7, 1),
    month=5,
    day=31,
    offset=DateOffset(weekday=MO(-1)),  # type: ignore[arg-type]
)
UKSummerBankHoliday = Holiday(
    "UK Summer Bank Holiday", month=8, day=31, offset=DateOffset(weekday=MO(-1))  # type: ignore[arg-type]
)

# EUR based
EULabourDay = Holiday("EU Labour Day", month=5, day=1)

CALENDAR_RULES: dict[str, list[Any]] = {
    "bus": [],
    "tgt": [
        NewYearsDay,
        GoodFriday,
        EasterMonday,
        EULabourDay,
        ChristmasDay,
        BoxingDay,
    ],
    "ldn": [
        NewYearsDayHoliday,
        GoodFriday,
        EasterMonday,
        UKEarlyMayBankHoliday,
        UKSpringBankPre2022,
        Holiday("Queen Jubilee Thu", year=2022, month=6, day=2),
        Holiday("Queen Jubilee Fri", year=2022, month=6, day=3),
        Holiday("Queen Funeral", year=2022, month=9, day=19),
        UKSpringBankPost2022,
        Holiday("King Charles III Coronation", year=2023, month=5, day=8),
        UKSummerBankHoliday,
        ChristmasDayHoliday,
        BoxingDayHoliday,
    ],
    "nyc": [
        NewYearsDaySundayHoliday,
        USMartinLutherKingJr,
        USPresidentsDay,
        GoodFriday,
        USMemorialDay,
        USJuneteenthSundayHoliday,
        USIndependenceDayHoliday,
        USLabourDay,
        USColumbusDay,
        USVeteransDaySundayHoliday,
        USThanksgivingDay,
        ChristmasDayNearestHoliday,
        Holiday("GHW Bush Funeral", year=2018, month=12, day=5),
    ],
}


def create_calendar(rules: list[Any], weekmask: str | None = None) -> CustomBusinessDay:
    """
    Create a calendar with specific business and holiday days defined.

    Parameters
    ----------
    rules : list[Holiday]
        A list of specific holiday dates defined by the
        ``pandas.tseries.holiday.Holiday`` class.
    weekmask : str, optional
        Set of days as business days. Defaults to *"Mon Tue Wed Thu Fri"*.

    Returns
    --------
    CustomBusinessDay
    """
    weekmask = "Mon Tue Wed Thu Fri" if weekmask is None else weekmask
    return CustomBusinessDay(  # type: ignore[call-arg]
        calendar=AbstractHolidayCalendar(rules=rules),
        weekmask=weekmask,
    )


CALENDARS: dict[str, CustomBusinessDay] = {
    k: create_calendar(rules=v, weekmask="Mon Tue Wed Thu Fri") for k, v in CALENDAR_RULES.items()
}


def get_calendar(calendar: CalInput) -> CustomBusinessDay:
    """
    Returns a calendar object either from an available set or a user defined input.

    Parameters
    ----------
    calendar : str, NoInput, or CustomBusinessDay
        If `NoInput` a blank calendar is returned containing no holidays.
        If `str`, then the calendar is returned from the named calendars held by
        ``defaults.calendars``. Names may be combined with commas, e.g. *"ldn,nyc"*.
        If a specific user defined calendar this is returned without modification.

    Returns
    -------
    CustomBusinessDay

    Notes
    -----
    The following named calendars are available:

    - *"bus"*: business days, excluding only weekends.
    - *"tgt"*: Target for Europe's ESTR.
    - *"nyc"*: New York City for US's SOFR and Fed Funds.
    - *"ldn"*: London for UK's SONIA.
    """
    from onrates import defaults

    if isinstance(calendar, NoInput):
        return create_calendar([], weekmask="Mon Tue Wed Thu Fri Sat Sun")
    elif isinstance(calendar, str):
        calendars = calendar.lower().split(",")
        if len(calendars) == 1:
            try:
                return defaults.calendars[calendars[0]]
            except KeyError:
                raise ValueError(f"`calendar` as string: '{calendar}' is not a named calendar.")
        rules_: list[Any] = []
        for c in calendars:
            rules_.extend(CALENDAR_RULES[c])
        return create_calendar(rules_, weekmask="Mon Tue Wed Thu Fri")
    else:
        return calendar


def _is_holiday(date: datetime, calendar: CustomBusinessDay) -> bool:
    """
    Test whether a given date is a holiday in the given calendar

    Parameters
    ----------
    date : Datetime
        Date to test.
    calendar : Calendar of CustomBusinessDay type
        The holiday calendar to test against.

    Returns
    -------
    bool
    """
    if not isinstance(calendar, CustomBusinessDay):
        raise ValueError("`calendar` must be a `CustomBusinessDay` calendar type.")
    else:
        return not (date + 0 * calendar == date)


def _add_business_days(start: datetime, business_days: int, cal: CalInput) -> datetime:
    """add a given number of business days to an input date"""
    calendar_ = get_calendar(cal)
    return (start + business_days * calendar_).to_pydatetime()  # type: ignore[no-any-return]


def _next_bus_day(date: datetime, cal: CalInput) -> datetime:
    """the first business day strictly after the given date"""
    return _add_business_days(date, 1, cal)


def _prev_bus_day(date: datetime, cal: CalInput) -> datetime:
    """the last business day strictly before the given date"""
    return _add_business_days(date, -1, cal)


def _business_days(start: datetime, end: datetime, cal: CalInput) -> list[datetime]:
    """business days in the half open interval [start, end)"""
    calendar_ = get_calendar(cal)
    date = (start + 0 * calendar_).to_pydatetime()
    dates: list[datetime] = []
    while date < end:
        dates.append(date)
        date = (date + calendar_).to_pydatetime()
    return dates
