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

from onrates.scheduling.calendars import create_calendar, get_calendar
from onrates.scheduling.dcfs import dcf
from onrates.scheduling.index import (
    EUR_ESTR,
    GBP_SONIA,
    USD_FED_FUND,
    USD_SOFR,
    OvernightIndex,
    get_overnight_index,
)

__all__ = [
    "create_calendar",
    "get_calendar",
    "dcf",
    "OvernightIndex",
    "get_overnight_index",
    "USD_FED_FUND",
    "USD_SOFR",
    "GBP_SONIA",
    "EUR_ESTR",
]
