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

import calendar as calendar_mod
from datetime import datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from onrates.typing import Callable  # pragma: no cover


def dcf(start: datetime, end: datetime, convention: str) -> float:
    """
    Calculate the day count fraction of a period.

    Parameters
    ----------
    start : datetime
        The adjusted start date of the calculation period.
    end : datetime
        The adjusted end date of the calculation period.
    convention : str
        The day count convention of the calculation period accrual. See notes.

    Returns
    --------
    float

    Notes
    -----
    Permitted values for the convention are:

    - `"1"`: Returns 1 for any period.
    - `"Act365F"`: Returns actual number of days divided by a fixed 365 denominator.
    - `"Act360"`: Returns actual number of days divided by a fixed 360 denominator.
    - `"30E360"`, `"EuroBondBasis"`: Months are treated as having 30 days and start
      and end days are each capped at 30.
    - `"ActAct"`, `"ActActISDA"`: Calendar days between start and end are divided
      by 365 or 366 dependent upon whether they fall within a leap year or not.

    Examples
    --------
    .. ipython:: python

       dcf(dt(2000, 1, 1), dt(2000, 4, 3), "Act360")
       dcf(dt(2000, 1, 1), dt(2000, 4, 3), "Act365f")
    """
    try:
        return _DCF[convention.upper()](start, end)
    except KeyError:
        raise ValueError(
            "`convention` must be in {'Act365f', '1', 'Act360', '30E360', 'EuroBondBasis', "
            f"'ActAct', 'ActActISDA'}}, got '{convention}'."
        )


def _dcf_act365f(start: datetime, end: datetime) -> float:
    return (end - start).days / 365.0


def _dcf_act360(start: datetime, end: datetime) -> float:
    return (end - start).days / 360.0


def _dcf_30e360(start: datetime, end: datetime) -> float:
    ds, de = min(30, start.day), min(30, end.day)
    y, m = end.year - start.year, (end.month - start.month) / 12.0
    return y + m + (de - ds) / 360.0


def _dcf_actactisda(start: datetime, end: datetime) -> float:
    if start == end:
        return 0.0
    elif end < start:
        return -_dcf_actactisda(end, start)

    start_date = datetime.combine(start, datetime.min.time())
    end_date = datetime.combine(end, datetime.min.time())

    year_1_diff = 366.0 if calendar_mod.isleap(start_date.year) else 365.0
    year_2_diff = 366.0 if calendar_mod.isleap(end_date.year) else 365.0

    total_sum: float = end.year - start.year - 1
    total_sum += (datetime(start.year + 1, 1, 1) - start_date).days / year_1_diff
    total_sum += (end_date - datetime(end.year, 1, 1)).days / year_2_diff
    return total_sum


def _dcf_1(start: datetime, end: datetime) -> float:
    return 1.0


_DCF: dict[str, Callable[[datetime, datetime], float]] = {
    "ACT365F": _dcf_act365f,
    "ACT360": _dcf_act360,
    "30E360": _dcf_30e360,
    "EUROBONDBASIS": _dcf_30e360,
    "ACTACT": _dcf_actactisda,
    "ACTACTISDA": _dcf_actactisda,
    "1": _dcf_1,
}
